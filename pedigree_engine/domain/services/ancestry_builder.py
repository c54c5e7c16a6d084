from __future__ import annotations

import logging

from pedigree_engine.domain.models.ancestry import (
    AncestryDiagnostic,
    AncestryNode,
    AncestryResult,
    NodeFlag,
)
from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.models.snapshot import PedigreeSnapshot
from pedigree_engine.domain.value_objects.ancestry_role import AncestryRole
from pedigree_engine.domain.value_objects.link_status import LinkStatus

logger = logging.getLogger(__name__)

PARENT_ROLES = (AncestryRole.SIRE, AncestryRole.DAM)


def build_ancestry(snapshot: PedigreeSnapshot, focal_id: str, max_depth: int) -> AncestryResult:
    """Build the bounded ancestor tree of ``focal_id`` from an already loaded snapshot.

    Missing records become unknown leaves, cycles are truncated and reported as
    diagnostics, and parents not strictly older than their child are flagged.
    Raises LookupError if the focal individual is absent and ValueError for a
    non-positive depth; every other data problem travels inside the result.
    """
    if max_depth <= 0:
        raise ValueError("max_depth must be a positive integer")
    focal = snapshot.get(focal_id)
    if focal is None:
        raise LookupError(f"Individual {focal_id} is not in the snapshot")

    root = AncestryNode(role=AncestryRole.SELF, depth=0, individual_id=focal_id, individual=focal)
    result = AncestryResult(root=root, max_depth=max_depth)
    _expand(snapshot, root, max_depth, frozenset({focal_id}), result.diagnostics)
    return result


def _expand(
    snapshot: PedigreeSnapshot,
    node: AncestryNode,
    max_depth: int,
    path: frozenset[str],
    diagnostics: list[AncestryDiagnostic],
) -> None:
    if node.depth >= max_depth or node.individual is None or node.individual_id is None:
        return
    link = snapshot.link_for(node.individual_id)
    for role in PARENT_ROLES:
        if link is None:
            parent_id, status = None, LinkStatus.VERIFIED
        else:
            parent_id, status = link.parent(role)
        parent = _parent_node(snapshot, node, role, parent_id, status, path, diagnostics)
        if role is AncestryRole.SIRE:
            node.sire = parent
        else:
            node.dam = parent
        if parent.individual is not None and not parent.is_cycle_marker:
            _expand(snapshot, parent, max_depth, path | {parent.individual_id}, diagnostics)


def _parent_node(
    snapshot: PedigreeSnapshot,
    child: AncestryNode,
    role: AncestryRole,
    parent_id: str | None,
    status: LinkStatus,
    path: frozenset[str],
    diagnostics: list[AncestryDiagnostic],
) -> AncestryNode:
    depth = child.depth + 1
    if parent_id is None or not status.is_followed():
        return AncestryNode(role=role, depth=depth, flags=[NodeFlag.UNKNOWN_ANCESTOR])

    if parent_id in path:
        message = f"ancestor cycle detected at {parent_id}"
        logger.info("Truncating pedigree branch: %s (child %s)", message, child.individual_id)
        diagnostics.append(
            AncestryDiagnostic(code=NodeFlag.ANCESTOR_CYCLE, individual_id=parent_id, message=message)
        )
        return AncestryNode(
            role=role,
            depth=depth,
            individual_id=parent_id,
            individual=snapshot.get(parent_id),
            flags=[NodeFlag.ANCESTOR_CYCLE],
        )

    individual = snapshot.get(parent_id)
    node = AncestryNode(role=role, depth=depth, individual_id=parent_id, individual=individual)
    if individual is None:
        node.flags.append(NodeFlag.UNKNOWN_ANCESTOR)
    if status is LinkStatus.PENDING:
        node.flags.append(NodeFlag.LINK_PENDING)
    if individual is not None and child.individual is not None:
        if not parent_is_older(individual, child.individual):
            node.flags.append(NodeFlag.BIRTH_DATE_INCONSISTENT)
    return node


def parent_is_older(parent: Individual, child: Individual) -> bool:
    """True unless both birth dates are known and the parent is not strictly older."""
    if parent.birth_date is None or child.birth_date is None:
        return True
    return parent.birth_date < child.birth_date
