from __future__ import annotations

import pytest

from pedigree_engine.application.services import matcher
from pedigree_engine.application.warnings.factory import (
    build_recommendation,
    build_warning,
    format_coi,
    resolve_locale,
    status_label,
)
from pedigree_engine.application.warnings.types import ALL_KEYS, WarningKey
from pedigree_engine.domain.models.breeding import MatchOptions
from pedigree_engine.domain.value_objects.coi_tier import CoiTier
from pedigree_engine.domain.value_objects.sex import Sex
from pedigree_engine.domain.value_objects.warning_level import WarningLevel


@pytest.mark.parametrize(
    ("coi", "max_coi", "points"),
    [
        (0.0, 0.125, 20.0),
        (0.0625, 0.125, 10.0),
        (0.125, 0.125, 0.0),
        (0.05, 0.03, 0.0),
        (0.25, 1.0, 0.0),
    ],
)
def test_coi_points(coi, max_coi, points):
    assert matcher.coi_points(coi, max_coi) == points


def test_age_band_is_inclusive():
    options = MatchOptions(min_age_years=1, max_age_years=8)

    assert matcher.in_age_band(1, options)
    assert matcher.in_age_band(8, options)
    assert not matcher.in_age_band(0, options)
    assert not matcher.in_age_band(None, options)


def test_location_match_ignores_surrounding_whitespace(make_individual, as_of):
    focal = make_individual("f", Sex.FEMALE, location=" Bangkok ")
    candidate = make_individual("m", Sex.MALE, location="Bangkok")

    breakdown = matcher.score_breakdown(focal, candidate, 0.0, MatchOptions(), as_of)

    assert breakdown.location == 10.0
    assert breakdown.total == 100.0


def test_exclusion_reasons(make_individual, as_of):
    focal = make_individual("f", Sex.FEMALE)
    options = MatchOptions()

    assert matcher.exclusion_reason(focal, focal, options, as_of) == "self"
    assert (
        matcher.exclusion_reason(focal, make_individual("g", Sex.FEMALE), options, as_of)
        == "same_sex"
    )
    assert (
        matcher.exclusion_reason(
            focal, make_individual("m", Sex.MALE, breed=None), options, as_of
        )
        == "breed_mismatch"
    )
    assert matcher.exclusion_reason(focal, make_individual("m", Sex.MALE), options, as_of) is None


def test_every_warning_key_has_messages_in_all_locales():
    samples = {
        "coi": "1.00%",
        "limit": "12.50%",
        "name": "Rex",
        "relationship": "half sibling",
        "age": 9,
        "min_age": 1,
        "max_age": 8,
        "breed_a": "Pug",
        "breed_b": "Beagle",
        "name_a": "Rex",
        "name_b": "Max",
    }
    for key in ALL_KEYS:
        for locale in ("en", "th"):
            warning = build_warning(key, locale=locale, **samples)
            assert warning.message
            assert warning.key == key


def test_warning_level_can_be_overridden():
    warning = build_warning(
        WarningKey.SIBLING_MATING,
        level=WarningLevel.CRITICAL,
        name="Rex",
        relationship="full sibling",
    )

    assert warning.level is WarningLevel.CRITICAL
    assert warning.message == "Rex is a full sibling of the focal animal."


def test_unknown_warning_key_raises():
    with pytest.raises(KeyError):
        build_warning("not_a_key")


def test_locale_resolution_and_formatting():
    assert resolve_locale("th_TH") == "th"
    assert resolve_locale("fr") == "en"
    assert resolve_locale(None) == "en"
    assert format_coi(0.125) == "12.50%"
    assert status_label(CoiTier.RISKY, "th") == "เสี่ยง"


@pytest.mark.parametrize(
    ("score", "compatible", "text"),
    [
        (85.0, True, "Highly recommended. Score 85/100"),
        (65.0, True, "Good match. Score 65/100"),
        (55.0, True, "Acceptable, with cautions (55/100)"),
        (95.0, False, "Not recommended due to genetic or compatibility risks"),
    ],
)
def test_recommendation_text(score, compatible, text):
    assert build_recommendation(score=score, compatible=compatible) == text
