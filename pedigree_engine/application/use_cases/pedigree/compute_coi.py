from __future__ import annotations

from dataclasses import dataclass, field

from pedigree_engine.application.interfaces.repositories.individuals import IndividualStore
from pedigree_engine.application.services.snapshot_loader import SnapshotLoader
from pedigree_engine.application.use_cases.pedigree.validation import ensure_valid_depth
from pedigree_engine.domain.models.ancestry import AncestryDiagnostic
from pedigree_engine.domain.services.ancestry_builder import build_ancestry
from pedigree_engine.domain.services.relatedness import (
    classify_relationship,
    coefficient_of_inbreeding,
    shared_ancestors,
)
from pedigree_engine.domain.value_objects.coi_tier import CoiTier
from pedigree_engine.domain.value_objects.relationship import Relationship


@dataclass(slots=True)
class CoiResult:
    individual_a: str
    individual_b: str
    max_depth: int
    coefficient: float
    tier: CoiTier
    relationship: Relationship
    shared_ancestors: list[str] = field(default_factory=list)
    diagnostics: list[AncestryDiagnostic] = field(default_factory=list)


async def execute(
    store: IndividualStore,
    id_a: str,
    id_b: str,
    max_depth: int = 3,
    *,
    loader: SnapshotLoader | None = None,
) -> CoiResult:
    ensure_valid_depth(max_depth)
    loader = loader or SnapshotLoader(store)
    await loader.load_roots([id_a, id_b])
    snapshot = await loader.load([id_a, id_b], max_depth)

    tree_a = build_ancestry(snapshot, id_a, max_depth)
    tree_b = build_ancestry(snapshot, id_b, max_depth)
    coefficient = coefficient_of_inbreeding(tree_a.root, tree_b.root)
    return CoiResult(
        individual_a=id_a,
        individual_b=id_b,
        max_depth=max_depth,
        coefficient=coefficient,
        tier=CoiTier.from_coi(coefficient),
        relationship=classify_relationship(tree_a.root, tree_b.root),
        shared_ancestors=shared_ancestors(tree_a.root, tree_b.root),
        diagnostics=list(dict.fromkeys(tree_a.diagnostics + tree_b.diagnostics)),
    )
