from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.models.parent_link import ParentLink


@dataclass(frozen=True, slots=True)
class PedigreeSnapshot:
    """Immutable view of the individuals and parent links needed by one computation."""

    individuals: Mapping[str, Individual] = field(default_factory=dict)
    links: Mapping[str, ParentLink] = field(default_factory=dict)

    @classmethod
    def of(
        cls, individuals: Iterable[Individual], links: Iterable[ParentLink] = ()
    ) -> PedigreeSnapshot:
        return cls(
            individuals=MappingProxyType({i.id: i for i in individuals}),
            links=MappingProxyType({link.child_id: link for link in links}),
        )

    def get(self, individual_id: str | None) -> Individual | None:
        if individual_id is None:
            return None
        return self.individuals.get(individual_id)

    def link_for(self, individual_id: str) -> ParentLink | None:
        return self.links.get(individual_id)

    def merge(self, other: PedigreeSnapshot) -> PedigreeSnapshot:
        return PedigreeSnapshot(
            individuals=MappingProxyType({**self.individuals, **other.individuals}),
            links=MappingProxyType({**self.links, **other.links}),
        )
