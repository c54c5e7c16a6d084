from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from pedigree_engine.application.errors import NotFound
from pedigree_engine.application.interfaces.repositories.individuals import IndividualStore
from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.models.parent_link import ParentLink
from pedigree_engine.domain.models.snapshot import PedigreeSnapshot

logger = logging.getLogger(__name__)


class SnapshotLoader:
    """Reads the individuals and parent links reachable from some roots.

    Lookups for one generation are issued together and every id is fetched at
    most once per loader, no matter how many trees reach it. A failing lookup
    for an ancestor is logged and treated as a missing record; failures for the
    roots themselves propagate.
    """

    def __init__(self, store: IndividualStore, *, max_concurrency: int = 8) -> None:
        self._store = store
        self._semaphore = asyncio.Semaphore(max(1, max_concurrency))
        self._individuals: dict[str, Individual | None] = {}
        self._links: dict[str, ParentLink | None] = {}
        # Largest remaining depth each id has already been expanded with
        self._expanded: dict[str, int] = {}
        self.lookups = 0

    def prime(self, individuals: Iterable[Individual]) -> None:
        for individual in individuals:
            self._individuals.setdefault(individual.id, individual)

    async def load_root(self, individual_id: str) -> Individual:
        if individual_id in self._individuals and self._individuals[individual_id] is not None:
            return self._individuals[individual_id]  # type: ignore[return-value]
        self.lookups += 1
        individual = await self._store.get_individual(individual_id)
        if individual is None:
            raise NotFound(f"Individual {individual_id} not found")
        self._individuals[individual_id] = individual
        return individual

    async def load_roots(self, individual_ids: Iterable[str]) -> list[Individual]:
        """Fetch several roots together; NotFound names the first missing id."""
        ids = list(individual_ids)
        missing = [i for i in dict.fromkeys(ids) if self._individuals.get(i) is None]
        if missing:
            results = await asyncio.gather(*(self._root_lookup(i) for i in missing))
            for individual_id, individual in zip(missing, results):
                if individual is not None:
                    self._individuals[individual_id] = individual
        for individual_id in ids:
            if self._individuals.get(individual_id) is None:
                raise NotFound(f"Individual {individual_id} not found")
        return [self._individuals[i] for i in ids]  # type: ignore[misc]

    async def load(self, root_ids: Iterable[str], max_depth: int) -> PedigreeSnapshot:
        frontier: dict[str, int] = {root_id: max_depth for root_id in root_ids}
        while frontier:
            await self._fetch_individuals(frontier)
            expandable = [
                individual_id
                for individual_id, remaining in frontier.items()
                if remaining > 0
                and self._expanded.get(individual_id, -1) < remaining
                and self._individuals.get(individual_id) is not None
            ]
            await self._fetch_links(expandable)

            next_frontier: dict[str, int] = {}
            for individual_id in expandable:
                remaining = frontier[individual_id]
                self._expanded[individual_id] = remaining
                link = self._links.get(individual_id)
                if link is None:
                    continue
                for parent_id in link.followed_parent_ids():
                    if self._expanded.get(parent_id, -1) >= remaining - 1:
                        continue
                    next_frontier[parent_id] = max(next_frontier.get(parent_id, -1), remaining - 1)
            frontier = next_frontier
        return self.snapshot()

    def snapshot(self) -> PedigreeSnapshot:
        return PedigreeSnapshot.of(
            (i for i in self._individuals.values() if i is not None),
            (link for link in self._links.values() if link is not None),
        )

    async def _fetch_individuals(self, ids: Iterable[str]) -> None:
        missing = [i for i in ids if i not in self._individuals]
        if not missing:
            return
        results = await asyncio.gather(*(self._guarded_individual(i) for i in missing))
        self._individuals.update(zip(missing, results))

    async def _fetch_links(self, ids: Iterable[str]) -> None:
        missing = [i for i in ids if i not in self._links]
        if not missing:
            return
        results = await asyncio.gather(*(self._guarded_link(i) for i in missing))
        self._links.update(zip(missing, results))

    async def _root_lookup(self, individual_id: str) -> Individual | None:
        # Unguarded: store failures for roots propagate to the caller
        async with self._semaphore:
            self.lookups += 1
            return await self._store.get_individual(individual_id)

    async def _guarded_individual(self, individual_id: str) -> Individual | None:
        async with self._semaphore:
            self.lookups += 1
            try:
                return await self._store.get_individual(individual_id)
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "Individual lookup failed for %s; treating as unknown: %s", individual_id, exc
                )
                return None

    async def _guarded_link(self, individual_id: str) -> ParentLink | None:
        async with self._semaphore:
            self.lookups += 1
            try:
                return await self._store.get_parent_link(individual_id)
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "Parent link lookup failed for %s; treating as unknown: %s", individual_id, exc
                )
                return None
