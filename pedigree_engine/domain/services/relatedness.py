"""
Bounded path-counting coefficient of inbreeding (Wright, 1922).

For a hypothetical offspring of A and B::

    F = sum over common ancestors X, over path pairs (A..X, B..X):  0.5 ** (n_a + n_b + 1)

where ``n_a``/``n_b`` are the generation counts of the two paths and a pair is
only counted when the paths meet at X and nowhere else. Paths come from the two
ancestry trees, so anything deeper than their ``max_depth`` is ignored and the
result can only under-estimate the true coefficient.
"""
from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass

from pedigree_engine.domain.models.ancestry import AncestryNode
from pedigree_engine.domain.value_objects.relationship import Relationship

Path = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PathContribution:
    ancestor_id: str
    path_a: Path
    path_b: Path
    value: float


def paths_by_ancestor(root: AncestryNode) -> dict[str, list[Path]]:
    paths: dict[str, list[Path]] = defaultdict(list)
    for path in root.iter_paths():
        paths[path[-1]].append(path)
    return paths


def shared_ancestors(tree_a: AncestryNode, tree_b: AncestryNode) -> list[str]:
    """Sorted ids present in both trees (roots included)."""
    return sorted(paths_by_ancestor(tree_a).keys() & paths_by_ancestor(tree_b).keys())


def path_contributions(tree_a: AncestryNode, tree_b: AncestryNode) -> list[PathContribution]:
    paths_a = paths_by_ancestor(tree_a)
    paths_b = paths_by_ancestor(tree_b)
    contributions: list[PathContribution] = []
    for ancestor_id in sorted(paths_a.keys() & paths_b.keys()):
        for path_a in sorted(paths_a[ancestor_id]):
            for path_b in sorted(paths_b[ancestor_id]):
                if set(path_a) & set(path_b) != {ancestor_id}:
                    continue
                generations = (len(path_a) - 1) + (len(path_b) - 1)
                contributions.append(
                    PathContribution(ancestor_id, path_a, path_b, 0.5 ** (generations + 1))
                )
    return contributions


def coefficient_of_inbreeding(tree_a: AncestryNode, tree_b: AncestryNode) -> float:
    """COI of a hypothetical offspring of the two tree roots, clamped to [0, 1].

    ``math.fsum`` is exactly rounded, so the value does not depend on the order
    of the terms and swapping A and B yields the identical float.
    """
    total = math.fsum(c.value for c in path_contributions(tree_a, tree_b))
    return min(1.0, max(0.0, total))


def classify_relationship(tree_a: AncestryNode, tree_b: AncestryNode) -> Relationship:
    a_id, b_id = tree_a.individual_id, tree_b.individual_id
    if a_id is not None and a_id == b_id:
        return Relationship.SELF
    parents_a, parents_b = tree_a.parent_ids(), tree_b.parent_ids()
    if b_id in parents_a or a_id in parents_b:
        return Relationship.PARENT_OFFSPRING
    ancestors_a, ancestors_b = tree_a.ancestor_ids(), tree_b.ancestor_ids()
    if b_id in ancestors_a or a_id in ancestors_b:
        return Relationship.ANCESTOR_DESCENDANT
    shared_parents = parents_a & parents_b
    if len(shared_parents) >= 2:
        return Relationship.FULL_SIBLINGS
    if len(shared_parents) == 1:
        return Relationship.HALF_SIBLINGS
    if ancestors_a & ancestors_b:
        return Relationship.RELATED
    return Relationship.UNRELATED
