from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.models.parent_link import ParentLink
from pedigree_engine.domain.value_objects.link_status import LinkStatus
from pedigree_engine.domain.value_objects.ownership_status import OwnershipStatus
from pedigree_engine.domain.value_objects.sex import Sex
from pedigree_engine.domain.value_objects.verification_status import VerificationStatus
from pedigree_engine.utils.dates import parse_date


def individual_from_dict(data: Mapping[str, Any]) -> Individual:
    """Build an Individual from a JSON-style record (dates as ISO strings)."""
    return Individual(
        id=str(data["id"]),
        sex=Sex(str(data["sex"]).lower()),
        breed=data.get("breed"),
        name=data.get("name"),
        birth_date=parse_date(data.get("birth_date")),
        color=data.get("color"),
        location=data.get("location"),
        verification_status=VerificationStatus(
            data.get("verification_status") or VerificationStatus.UNVERIFIED.value
        ),
        ownership_status=OwnershipStatus(
            data.get("ownership_status") or OwnershipStatus.VERIFIED.value
        ),
        available_for_breeding=bool(data.get("available_for_breeding", True)),
    )


def parent_link_from_dict(data: Mapping[str, Any]) -> ParentLink:
    return ParentLink(
        child_id=str(data["child_id"]),
        sire_id=data.get("sire_id"),
        dam_id=data.get("dam_id"),
        sire_status=LinkStatus(data.get("sire_status") or LinkStatus.VERIFIED.value),
        dam_status=LinkStatus(data.get("dam_status") or LinkStatus.VERIFIED.value),
    )
