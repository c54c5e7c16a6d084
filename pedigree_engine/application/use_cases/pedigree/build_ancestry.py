from __future__ import annotations

from pedigree_engine.application.interfaces.repositories.individuals import IndividualStore
from pedigree_engine.application.services.snapshot_loader import SnapshotLoader
from pedigree_engine.application.use_cases.pedigree.validation import ensure_valid_depth
from pedigree_engine.domain.models.ancestry import AncestryResult
from pedigree_engine.domain.services.ancestry_builder import build_ancestry


async def execute(
    store: IndividualStore,
    focal_id: str,
    max_depth: int = 3,
    *,
    loader: SnapshotLoader | None = None,
) -> AncestryResult:
    ensure_valid_depth(max_depth)
    loader = loader or SnapshotLoader(store)
    await loader.load_root(focal_id)
    snapshot = await loader.load([focal_id], max_depth)
    return build_ancestry(snapshot, focal_id, max_depth)
