from __future__ import annotations

from pedigree_engine.domain.value_objects.warning_level import WarningLevel


class WarningKey:
    """Canonical warning keys shared with API consumers."""

    ACCEPTABLE_RELATEDNESS = "acceptable_relatedness"
    MODERATE_INBREEDING_RISK = "moderate_inbreeding_risk"
    HIGH_INBREEDING_RISK = "high_inbreeding_risk"
    SEVERE_INBREEDING_RISK = "severe_inbreeding_risk"
    SIBLING_MATING = "sibling_mating"
    COI_ABOVE_LIMIT = "coi_above_limit"
    AGE_OUT_OF_RANGE = "age_out_of_range"
    AGE_UNKNOWN = "age_unknown"
    BIRTH_DATE_INCONSISTENT = "birth_date_inconsistent"
    MIXED_BREED = "mixed_breed"
    SAME_SEX = "same_sex"


DEFAULT_LEVELS: dict[str, WarningLevel] = {
    WarningKey.ACCEPTABLE_RELATEDNESS: WarningLevel.INFO,
    WarningKey.MODERATE_INBREEDING_RISK: WarningLevel.WARNING,
    WarningKey.HIGH_INBREEDING_RISK: WarningLevel.WARNING,
    WarningKey.SEVERE_INBREEDING_RISK: WarningLevel.CRITICAL,
    WarningKey.SIBLING_MATING: WarningLevel.WARNING,
    WarningKey.COI_ABOVE_LIMIT: WarningLevel.WARNING,
    WarningKey.AGE_OUT_OF_RANGE: WarningLevel.WARNING,
    WarningKey.AGE_UNKNOWN: WarningLevel.INFO,
    WarningKey.BIRTH_DATE_INCONSISTENT: WarningLevel.INFO,
    WarningKey.MIXED_BREED: WarningLevel.INFO,
    WarningKey.SAME_SEX: WarningLevel.CRITICAL,
}

ALL_KEYS = set(DEFAULT_LEVELS)

SUPPORTED_LOCALES = ("en", "th")
