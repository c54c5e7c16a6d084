from __future__ import annotations

from decimal import Decimal
from enum import Enum

# Upper bounds (inclusive) of each tier. Compared as decimals so that a COI of
# exactly 0.03 lands in "excellent" and not in "good" because of binary rounding.
EXCELLENT_MAX = Decimal("0.03")
GOOD_MAX = Decimal("0.0625")
ACCEPTABLE_MAX = Decimal("0.125")
RISKY_MAX = Decimal("0.25")


def as_decimal(value: float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(repr(float(value)))


class CoiTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ACCEPTABLE = "acceptable"
    RISKY = "risky"
    NOT_RECOMMENDED = "not_recommended"

    @classmethod
    def from_coi(cls, coi: float | Decimal) -> CoiTier:
        value = as_decimal(coi)
        if value <= EXCELLENT_MAX:
            return cls.EXCELLENT
        if value <= GOOD_MAX:
            return cls.GOOD
        if value <= ACCEPTABLE_MAX:
            return cls.ACCEPTABLE
        if value <= RISKY_MAX:
            return cls.RISKY
        return cls.NOT_RECOMMENDED
