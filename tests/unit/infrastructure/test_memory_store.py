from __future__ import annotations

import json
from datetime import date

import pytest

from pedigree_engine.application.interfaces.repositories.individuals import CandidateFilterHints
from pedigree_engine.domain.value_objects.link_status import LinkStatus
from pedigree_engine.domain.value_objects.sex import Sex
from pedigree_engine.domain.value_objects.verification_status import VerificationStatus
from pedigree_engine.infrastructure.repos.individuals_memory import InMemoryIndividualStore
from pedigree_engine.utils.dates import completed_years, parse_date


@pytest.fixture()
def snapshot_file(tmp_path):
    payload = {
        "individuals": [
            {
                "id": "A1",
                "sex": "MALE",
                "breed": "Shiba Inu",
                "birth_date": "2020-02-29T00:00:00Z",
                "verification_status": "verified",
            },
            {"id": "B2", "sex": "female", "breed": "Shiba Inu", "available_for_breeding": False},
            {"id": "C3", "sex": "female", "breed": " shiba inu "},
        ],
        "parent_links": [{"child_id": "C3", "sire_id": "A1", "dam_status": "rejected"}],
    }
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


async def test_from_json_maps_records(snapshot_file):
    store = InMemoryIndividualStore.from_json(snapshot_file)

    a1 = await store.get_individual("A1")
    link = await store.get_parent_link("C3")

    assert a1.sex is Sex.MALE
    assert a1.birth_date == date(2020, 2, 29)
    assert a1.verification_status is VerificationStatus.VERIFIED
    assert link.sire_id == "A1"
    assert link.sire_status is LinkStatus.VERIFIED
    assert link.dam_status is LinkStatus.REJECTED
    assert await store.get_parent_link("A1") is None


async def test_list_candidates_hints(snapshot_file):
    store = InMemoryIndividualStore.from_json(snapshot_file)

    females = await store.list_candidates(
        CandidateFilterHints(sex=Sex.FEMALE, breed="Shiba Inu")
    )
    everyone = await store.list_candidates(CandidateFilterHints(available_only=False))

    assert [i.id for i in females] == ["C3"]
    assert [i.id for i in everyone] == ["A1", "B2", "C3"]


def test_date_helpers():
    assert parse_date("") is None
    assert parse_date("2021-05-04") == date(2021, 5, 4)
    assert completed_years(date(2020, 2, 29), date(2021, 2, 28)) == 0
    assert completed_years(date(2020, 2, 29), date(2021, 3, 1)) == 1
    assert completed_years(date(2024, 1, 1), date(2020, 1, 1)) == 0
    with pytest.raises(ValueError):
        parse_date("not a date")
