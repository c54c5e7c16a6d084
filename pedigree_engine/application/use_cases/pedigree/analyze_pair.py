from __future__ import annotations

from datetime import date

from pedigree_engine.application.interfaces.repositories.individuals import IndividualStore
from pedigree_engine.application.services import matcher
from pedigree_engine.application.services.snapshot_loader import SnapshotLoader
from pedigree_engine.application.use_cases.pedigree.validation import ensure_valid_options
from pedigree_engine.application.warnings.factory import build_warning
from pedigree_engine.application.warnings.types import WarningKey
from pedigree_engine.domain.models.breeding import MatchOptions, PairAnalysis
from pedigree_engine.domain.services.ancestry_builder import build_ancestry


async def execute(
    store: IndividualStore,
    id_a: str,
    id_b: str,
    options: MatchOptions | None = None,
    *,
    loader: SnapshotLoader | None = None,
) -> PairAnalysis:
    """Score one specific pairing, including pairings the matcher would exclude."""
    options = options or MatchOptions()
    ensure_valid_options(options)
    as_of = options.as_of or date.today()
    loader = loader or SnapshotLoader(store)
    individual_a, individual_b = await loader.load_roots([id_a, id_b])
    snapshot = await loader.load([id_a, id_b], options.max_depth)

    candidate = matcher.evaluate_candidate(
        build_ancestry(snapshot, id_a, options.max_depth),
        build_ancestry(snapshot, id_b, options.max_depth),
        options,
        as_of,
    )
    if individual_a.sex == individual_b.sex:
        candidate.warnings.insert(
            0,
            build_warning(
                WarningKey.SAME_SEX,
                locale=options.locale,
                name_a=individual_a.label,
                name_b=individual_b.label,
            ),
        )
    return matcher.build_pair_analysis(candidate, options)
