from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.models.parent_link import ParentLink
from pedigree_engine.domain.value_objects.sex import Sex


@dataclass(frozen=True, slots=True)
class CandidateFilterHints:
    """Coarse pre-filter the store may apply; the engine re-checks everything."""

    sex: Sex | None = None
    breed: str | None = None
    exclude_ids: tuple[str, ...] = ()
    available_only: bool = True
    limit: int | None = None


class IndividualStore(Protocol):
    async def get_individual(self, individual_id: str) -> Individual | None: ...

    async def get_parent_link(self, individual_id: str) -> ParentLink | None: ...

    async def list_candidates(self, hints: CandidateFilterHints) -> list[Individual]:
        """Return individuals that might be mates; may over-approximate the hints."""
        ...
