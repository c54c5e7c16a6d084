"""
Candidate scoring and ranking.

Score (0-100) is additive:
    +40 same breed
    +30 both animals inside the age band
    +10 same location
    +20 relatedness, linear from COI 0 (full points) down to COI 0.125 (none),
        only while the COI is within the caller's limit
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from pedigree_engine.application.warnings.factory import (
    build_recommendation,
    build_summary,
    build_warning,
    format_coi,
)
from pedigree_engine.application.warnings.types import WarningKey
from pedigree_engine.domain.models.ancestry import AncestryResult, NodeFlag
from pedigree_engine.domain.models.breeding import (
    BreedingAnalysis,
    BreedingCandidate,
    MatchOptions,
    MatchWarning,
    PairAnalysis,
    ScoreBreakdown,
)
from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.services.relatedness import (
    classify_relationship,
    coefficient_of_inbreeding,
)
from pedigree_engine.domain.services.traits import predict_offspring_traits
from pedigree_engine.domain.value_objects.coi_tier import ACCEPTABLE_MAX, CoiTier, as_decimal
from pedigree_engine.domain.value_objects.relationship import Relationship
from pedigree_engine.domain.value_objects.warning_level import WarningLevel

BREED_POINTS = 40.0
AGE_POINTS = 30.0
LOCATION_POINTS = 10.0
COI_POINTS = 20.0
# COI at which the relatedness component reaches zero
COI_ZERO_POINTS_AT = float(ACCEPTABLE_MAX)

COMPATIBLE_MIN_SCORE = 50.0

_TIER_WARNINGS: dict[CoiTier, str] = {
    CoiTier.GOOD: WarningKey.ACCEPTABLE_RELATEDNESS,
    CoiTier.ACCEPTABLE: WarningKey.MODERATE_INBREEDING_RISK,
    CoiTier.RISKY: WarningKey.HIGH_INBREEDING_RISK,
    CoiTier.NOT_RECOMMENDED: WarningKey.SEVERE_INBREEDING_RISK,
}

_SIBLING_LABELS: dict[Relationship, str] = {
    Relationship.FULL_SIBLINGS: "full sibling",
    Relationship.HALF_SIBLINGS: "half sibling",
}


def in_age_band(age: int | None, options: MatchOptions) -> bool:
    return age is not None and options.min_age_years <= age <= options.max_age_years


def exclusion_reason(
    focal: Individual, candidate: Individual, options: MatchOptions, as_of: date
) -> str | None:
    """Attribute checks that drop a candidate before any pedigree work is done."""
    if candidate.id == focal.id:
        return "self"
    if candidate.sex == focal.sex:
        return "same_sex"
    if not candidate.available_for_breeding:
        return "unavailable"
    if options.require_same_breed and not focal.same_breed(candidate):
        return "breed_mismatch"
    age = candidate.age_in_years(as_of)
    if age is not None and not in_age_band(age, options):
        return "age_out_of_range"
    return None


def coi_points(coi: float, max_coi: float) -> float:
    if as_decimal(coi) > as_decimal(max_coi):
        return 0.0
    return COI_POINTS * max(0.0, 1.0 - coi / COI_ZERO_POINTS_AT)


def score_breakdown(
    focal: Individual, candidate: Individual, coi: float, options: MatchOptions, as_of: date
) -> ScoreBreakdown:
    same_location = bool(
        focal.location
        and candidate.location
        and focal.location.strip() == candidate.location.strip()
    )
    both_in_band = in_age_band(focal.age_in_years(as_of), options) and in_age_band(
        candidate.age_in_years(as_of), options
    )
    return ScoreBreakdown(
        breed=BREED_POINTS if focal.same_breed(candidate) else 0.0,
        age=AGE_POINTS if both_in_band else 0.0,
        location=LOCATION_POINTS if same_location else 0.0,
        coi=coi_points(coi, options.max_coi),
    )


def _relatedness_warnings(
    candidate: Individual,
    coi: float,
    tier: CoiTier,
    relationship: Relationship,
    options: MatchOptions,
) -> list[MatchWarning]:
    warnings: list[MatchWarning] = []
    locale = options.locale
    tier_key = _TIER_WARNINGS.get(tier)
    if tier_key is not None:
        warnings.append(build_warning(tier_key, locale=locale, coi=format_coi(coi)))
    if relationship.is_sibling():
        level = (
            WarningLevel.CRITICAL
            if relationship is Relationship.FULL_SIBLINGS
            else WarningLevel.WARNING
        )
        warnings.append(
            build_warning(
                WarningKey.SIBLING_MATING,
                locale=locale,
                level=level,
                name=candidate.label,
                relationship=_SIBLING_LABELS[relationship],
            )
        )
    if as_decimal(coi) > as_decimal(options.max_coi):
        warnings.append(
            build_warning(
                WarningKey.COI_ABOVE_LIMIT,
                locale=locale,
                coi=format_coi(coi),
                limit=format_coi(options.max_coi),
            )
        )
    return warnings


def _profile_warnings(
    focal: Individual,
    candidate: Individual,
    candidate_tree: AncestryResult,
    options: MatchOptions,
    as_of: date,
) -> list[MatchWarning]:
    warnings: list[MatchWarning] = []
    locale = options.locale
    if not focal.same_breed(candidate):
        warnings.append(
            build_warning(
                WarningKey.MIXED_BREED,
                locale=locale,
                breed_a=focal.breed or "?",
                breed_b=candidate.breed or "?",
            )
        )
    for individual in (focal, candidate):
        age = individual.age_in_years(as_of)
        if age is None:
            warnings.append(
                build_warning(WarningKey.AGE_UNKNOWN, locale=locale, name=individual.label)
            )
        elif not in_age_band(age, options):
            warnings.append(
                build_warning(
                    WarningKey.AGE_OUT_OF_RANGE,
                    locale=locale,
                    name=individual.label,
                    age=age,
                    min_age=options.min_age_years,
                    max_age=options.max_age_years,
                )
            )
    if candidate_tree.root.has_flag(NodeFlag.BIRTH_DATE_INCONSISTENT):
        warnings.append(
            build_warning(
                WarningKey.BIRTH_DATE_INCONSISTENT, locale=locale, name=candidate.label
            )
        )
    return warnings


def evaluate_candidate(
    focal_tree: AncestryResult,
    candidate_tree: AncestryResult,
    options: MatchOptions,
    as_of: date,
) -> BreedingCandidate:
    focal = focal_tree.root.individual
    candidate = candidate_tree.root.individual
    if focal is None or candidate is None:
        raise ValueError("Both ancestry trees must be rooted at a known individual")

    coi = coefficient_of_inbreeding(focal_tree.root, candidate_tree.root)
    tier = CoiTier.from_coi(coi)
    relationship = classify_relationship(focal_tree.root, candidate_tree.root)
    breakdown = score_breakdown(focal, candidate, coi, options, as_of)
    warnings = _relatedness_warnings(candidate, coi, tier, relationship, options)
    warnings += _profile_warnings(focal, candidate, candidate_tree, options, as_of)
    return BreedingCandidate(
        individual=candidate,
        score=min(100.0, max(0.0, breakdown.total)),
        coi=coi,
        tier=tier,
        relationship=relationship,
        breakdown=breakdown,
        warnings=warnings,
        predicted_traits=predict_offspring_traits(focal, candidate)
        if options.include_traits
        else None,
    )


def rank_candidates(
    candidates: Iterable[BreedingCandidate], limit: int | None = None
) -> list[BreedingCandidate]:
    """Best score first, then least related, then by id; truncation happens last."""
    ranked = sorted(candidates, key=BreedingCandidate.sort_key)
    return ranked if limit is None else ranked[:limit]


def aggregate_status(candidates: list[BreedingCandidate]) -> CoiTier:
    if not candidates:
        return CoiTier.NOT_RECOMMENDED
    top = candidates[0]
    if top.has_critical:
        return CoiTier.NOT_RECOMMENDED
    return top.tier


def build_analysis(
    focal: Individual,
    ranked: list[BreedingCandidate],
    options: MatchOptions,
    evaluated: int,
) -> BreedingAnalysis:
    status = aggregate_status(ranked)
    top = ranked[0] if ranked else None
    summary = build_summary(
        focal_label=focal.label,
        status=status,
        count=len(ranked),
        top_label=top.individual.label if top else None,
        top_score=top.score if top else None,
        top_coi=top.coi if top else None,
        locale=options.locale,
    )
    return BreedingAnalysis(
        focal=focal, status=status, candidates=ranked, summary=summary, evaluated=evaluated
    )


def build_pair_analysis(candidate: BreedingCandidate, options: MatchOptions) -> PairAnalysis:
    compatible = candidate.score >= COMPATIBLE_MIN_SCORE and not candidate.has_critical
    return PairAnalysis(
        candidate=candidate,
        compatible=compatible,
        recommendation=build_recommendation(
            score=candidate.score, compatible=compatible, locale=options.locale
        ),
    )
