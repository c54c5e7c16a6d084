from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.value_objects.ancestry_role import AncestryRole


class NodeFlag:
    """Data-quality flags attached to ancestry nodes."""

    BIRTH_DATE_INCONSISTENT = "birth_date_inconsistent"
    UNKNOWN_ANCESTOR = "unknown_ancestor"
    LINK_PENDING = "link_pending"
    ANCESTOR_CYCLE = "ancestor_cycle"


@dataclass(slots=True)
class AncestryNode:
    role: AncestryRole
    depth: int
    individual_id: str | None = None
    individual: Individual | None = None
    sire: AncestryNode | None = None
    dam: AncestryNode | None = None
    flags: list[str] = field(default_factory=list)

    @property
    def is_unknown(self) -> bool:
        return self.individual is None

    @property
    def is_cycle_marker(self) -> bool:
        return NodeFlag.ANCESTOR_CYCLE in self.flags

    def children(self) -> list[AncestryNode]:
        return [child for child in (self.sire, self.dam) if child is not None]

    def iter_nodes(self) -> Iterator[AncestryNode]:
        # Sire side first so every walk over the same tree visits nodes in the same order
        yield self
        for child in self.children():
            yield from child.iter_nodes()

    def iter_paths(self, _prefix: tuple[str, ...] = ()) -> Iterator[tuple[str, ...]]:
        """Yield the id path from the root to every identified, non-cycle node."""
        if self.individual_id is None or self.is_cycle_marker:
            return
        path = _prefix + (self.individual_id,)
        yield path
        for child in self.children():
            yield from child.iter_paths(path)

    def find(self, individual_id: str) -> AncestryNode | None:
        for node in self.iter_nodes():
            if node.individual_id == individual_id and not node.is_cycle_marker:
                return node
        return None

    def ancestor_ids(self) -> set[str]:
        return {
            node.individual_id
            for node in self.iter_nodes()
            if node is not self and node.individual_id is not None and not node.is_cycle_marker
        }

    def parent_ids(self) -> set[str]:
        return {
            child.individual_id
            for child in self.children()
            if child.individual_id is not None and not child.is_cycle_marker
        }

    def has_flag(self, flag: str) -> bool:
        return any(flag in node.flags for node in self.iter_nodes())


@dataclass(frozen=True, slots=True)
class AncestryDiagnostic:
    code: str
    individual_id: str
    message: str
    kind: str = "structural_anomaly"


@dataclass(slots=True)
class AncestryResult:
    root: AncestryNode
    max_depth: int
    diagnostics: list[AncestryDiagnostic] = field(default_factory=list)

    @property
    def focal_id(self) -> str:
        # The root always carries the focal id; the builder rejects unknown focal ids
        return self.root.individual_id or ""
