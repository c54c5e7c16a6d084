from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from pedigree_engine.application.interfaces.repositories.individuals import (
    CandidateFilterHints,
    IndividualStore,
)
from pedigree_engine.domain.models.individual import Individual, normalize_breed
from pedigree_engine.domain.models.parent_link import ParentLink
from pedigree_engine.infrastructure.repos.mapping import (
    individual_from_dict,
    parent_link_from_dict,
)


class InMemoryIndividualStore(IndividualStore):
    """Dictionary-backed store, used for fixtures, tests and JSON snapshots."""

    def __init__(
        self, individuals: Iterable[Individual] = (), links: Iterable[ParentLink] = ()
    ) -> None:
        self._individuals = {i.id: i for i in individuals}
        self._links = {link.child_id: link for link in links}

    @classmethod
    def from_json(cls, path: str | Path) -> InMemoryIndividualStore:
        """Load ``{"individuals": [...], "parent_links": [...]}`` from a file."""
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        return cls(
            [individual_from_dict(item) for item in payload.get("individuals", [])],
            [parent_link_from_dict(item) for item in payload.get("parent_links", [])],
        )

    def add(self, individual: Individual) -> Individual:
        self._individuals[individual.id] = individual
        return individual

    def set_parent_link(self, link: ParentLink) -> ParentLink:
        self._links[link.child_id] = link
        return link

    def all_individuals(self) -> list[Individual]:
        return list(self._individuals.values())

    def all_parent_links(self) -> list[ParentLink]:
        return list(self._links.values())

    async def get_individual(self, individual_id: str) -> Individual | None:
        return self._individuals.get(individual_id)

    async def get_parent_link(self, individual_id: str) -> ParentLink | None:
        return self._links.get(individual_id)

    async def list_candidates(self, hints: CandidateFilterHints) -> list[Individual]:
        items = []
        breed = normalize_breed(hints.breed)
        for individual in sorted(self._individuals.values(), key=lambda i: i.id):
            if individual.id in hints.exclude_ids:
                continue
            if hints.sex is not None and individual.sex != hints.sex:
                continue
            if breed and normalize_breed(individual.breed) != breed:
                continue
            if hints.available_only and not individual.available_for_breeding:
                continue
            items.append(individual)
        if hints.limit is not None:
            items = items[: hints.limit]
        return items
