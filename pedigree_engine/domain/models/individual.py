from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pedigree_engine.domain.value_objects.ownership_status import OwnershipStatus
from pedigree_engine.domain.value_objects.sex import Sex
from pedigree_engine.domain.value_objects.verification_status import VerificationStatus
from pedigree_engine.utils.dates import completed_years


def normalize_breed(breed: str | None) -> str:
    return (breed or "").strip().casefold()


@dataclass(frozen=True, slots=True)
class Individual:
    id: str
    sex: Sex
    breed: str | None = None
    name: str | None = None
    birth_date: date | None = None
    color: str | None = None
    location: str | None = None
    verification_status: VerificationStatus = VerificationStatus.UNVERIFIED
    ownership_status: OwnershipStatus = OwnershipStatus.VERIFIED
    available_for_breeding: bool = True

    def age_in_years(self, as_of: date) -> int | None:
        if self.birth_date is None:
            return None
        return completed_years(self.birth_date, as_of)

    def same_breed(self, other: Individual) -> bool:
        mine = normalize_breed(self.breed)
        theirs = normalize_breed(other.breed)
        return bool(mine) and mine == theirs

    @property
    def label(self) -> str:
        return self.name or self.id
