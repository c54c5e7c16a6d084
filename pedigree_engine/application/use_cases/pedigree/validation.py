from __future__ import annotations

from pedigree_engine.application.errors import ValidationError
from pedigree_engine.domain.models.breeding import MatchOptions


def ensure_valid_depth(max_depth: int) -> None:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth <= 0:
        raise ValidationError(
            "max_depth must be a positive integer", details={"max_depth": max_depth}
        )


def ensure_valid_options(options: MatchOptions) -> None:
    ensure_valid_depth(options.max_depth)
    if options.limit <= 0:
        raise ValidationError("limit must be at least 1", details={"limit": options.limit})
    if options.min_age_years < 0 or options.max_age_years < 0:
        raise ValidationError("age bounds must not be negative")
    if options.min_age_years > options.max_age_years:
        raise ValidationError(
            "min_age_years must not exceed max_age_years",
            details={"min_age_years": options.min_age_years, "max_age_years": options.max_age_years},
        )
    if not 0.0 <= options.max_coi <= 1.0:
        raise ValidationError("max_coi must be between 0 and 1", details={"max_coi": options.max_coi})
