from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from pedigree_engine.application.errors import ValidationError
from pedigree_engine.application.interfaces.repositories.individuals import (
    CandidateFilterHints,
    IndividualStore,
)
from pedigree_engine.application.services import matcher
from pedigree_engine.application.services.snapshot_loader import SnapshotLoader
from pedigree_engine.application.use_cases.pedigree.validation import ensure_valid_options
from pedigree_engine.domain.models.breeding import BreedingAnalysis, MatchOptions
from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.services.ancestry_builder import build_ancestry

logger = logging.getLogger(__name__)


async def execute(
    store: IndividualStore,
    focal_id: str,
    pool: Sequence[Individual | str] | None = None,
    options: MatchOptions | None = None,
    *,
    loader: SnapshotLoader | None = None,
) -> BreedingAnalysis:
    """Rank possible mates for ``focal_id``.

    ``pool`` may hold individuals or ids; when omitted the store is asked for
    candidates through ``list_candidates``. An explicitly empty pool is rejected.
    """
    options = options or MatchOptions()
    ensure_valid_options(options)
    if pool is not None and len(pool) == 0:
        raise ValidationError("Candidate pool must not be empty")

    as_of = options.as_of or date.today()
    loader = loader or SnapshotLoader(store)
    focal = await loader.load_root(focal_id)
    candidates = await _resolve_pool(store, loader, focal, pool, options)

    eligible: list[Individual] = []
    seen: set[str] = set()
    for candidate in candidates:
        if candidate.id in seen:
            continue
        seen.add(candidate.id)
        reason = matcher.exclusion_reason(focal, candidate, options, as_of)
        if reason is not None:
            logger.debug("Candidate %s excluded: %s", candidate.id, reason)
            continue
        eligible.append(candidate)

    snapshot = await loader.load([focal.id, *(c.id for c in eligible)], options.max_depth)
    focal_tree = build_ancestry(snapshot, focal.id, options.max_depth)

    scored = []
    for candidate in eligible:
        candidate_tree = build_ancestry(snapshot, candidate.id, options.max_depth)
        evaluated = matcher.evaluate_candidate(focal_tree, candidate_tree, options, as_of)
        if evaluated.relationship.is_lineal():
            logger.debug("Candidate %s excluded: %s", candidate.id, evaluated.relationship.value)
            continue
        scored.append(evaluated)

    ranked = matcher.rank_candidates(scored, options.limit)
    logger.info(
        "Matched %s: %d evaluated, %d scored, %d returned",
        focal.id,
        len(eligible),
        len(scored),
        len(ranked),
    )
    return matcher.build_analysis(focal, ranked, options, evaluated=len(scored))


async def _resolve_pool(
    store: IndividualStore,
    loader: SnapshotLoader,
    focal: Individual,
    pool: Sequence[Individual | str] | None,
    options: MatchOptions,
) -> list[Individual]:
    if pool is None:
        hints = CandidateFilterHints(
            sex=focal.sex.opposite(),
            breed=focal.breed if options.require_same_breed else None,
            exclude_ids=(focal.id,),
        )
        listed = await store.list_candidates(hints)
        loader.prime(listed)
        return list(listed)

    given = [entry for entry in pool if isinstance(entry, Individual)]
    loader.prime(given)
    fetched = iter(await loader.load_roots(e for e in pool if not isinstance(e, Individual)))
    return [entry if isinstance(entry, Individual) else next(fetched) for entry in pool]
