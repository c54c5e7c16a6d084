from __future__ import annotations

from pedigree_engine.application.interfaces.repositories.individuals import IndividualStore
from pedigree_engine.application.services.snapshot_loader import SnapshotLoader
from pedigree_engine.domain.models.breeding import PredictedTrait
from pedigree_engine.domain.services.traits import predict_offspring_traits


async def execute(store: IndividualStore, id_a: str, id_b: str) -> list[PredictedTrait]:
    loader = SnapshotLoader(store)
    individual_a, individual_b = await loader.load_roots([id_a, id_b])
    return predict_offspring_traits(individual_a, individual_b)
