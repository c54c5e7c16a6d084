from __future__ import annotations

from datetime import date, datetime


def parse_date(value: date | datetime | str | None) -> date | None:
    """Coerce ISO strings, datetimes and dates into a plain ``date``.

    Accepts a trailing 'Z' on datetime strings. Returns None for empty input;
    raises ValueError for strings that are not ISO dates.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = value.strip()
    if not s:
        return None
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return date.fromisoformat(s)
    except ValueError:
        return datetime.fromisoformat(s).date()


def completed_years(birth_date: date, as_of: date) -> int:
    """Whole years elapsed between ``birth_date`` and ``as_of`` (never negative)."""
    years = as_of.year - birth_date.year
    if (as_of.month, as_of.day) < (birth_date.month, birth_date.day):
        years -= 1
    return max(0, years)
