from __future__ import annotations

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree_engine.application.interfaces.repositories.individuals import (
    CandidateFilterHints,
    IndividualStore,
)
from pedigree_engine.domain.models.individual import Individual, normalize_breed
from pedigree_engine.domain.models.parent_link import ParentLink
from pedigree_engine.domain.value_objects.link_status import LinkStatus
from pedigree_engine.domain.value_objects.ownership_status import OwnershipStatus
from pedigree_engine.domain.value_objects.sex import Sex
from pedigree_engine.domain.value_objects.verification_status import VerificationStatus
from pedigree_engine.infrastructure.db.orm.individual import IndividualORM
from pedigree_engine.infrastructure.db.orm.parent_link import ParentLinkORM


class IndividualsSQLAlchemyStore(IndividualStore):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        # AsyncSession forbids concurrent operations; the snapshot loader gathers lookups
        self._lock = asyncio.Lock()

    def _to_domain(self, orm: IndividualORM) -> Individual:
        return Individual(
            id=orm.id,
            sex=Sex(orm.sex),
            breed=orm.breed,
            name=orm.name,
            birth_date=orm.birth_date,
            color=orm.color,
            location=orm.location,
            verification_status=VerificationStatus(orm.verification_status),
            ownership_status=OwnershipStatus(orm.ownership_status),
            available_for_breeding=orm.available_for_breeding,
        )

    def _to_orm(self, individual: Individual) -> IndividualORM:
        return IndividualORM(
            id=individual.id,
            sex=individual.sex.value,
            breed=individual.breed,
            name=individual.name,
            birth_date=individual.birth_date,
            color=individual.color,
            location=individual.location,
            verification_status=individual.verification_status.value,
            ownership_status=individual.ownership_status.value,
            available_for_breeding=individual.available_for_breeding,
        )

    def _link_to_domain(self, orm: ParentLinkORM) -> ParentLink:
        return ParentLink(
            child_id=orm.child_id,
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            sire_status=LinkStatus(orm.sire_status),
            dam_status=LinkStatus(orm.dam_status),
        )

    async def get_individual(self, individual_id: str) -> Individual | None:
        async with self._lock:
            orm = await self.session.get(IndividualORM, individual_id)
        return self._to_domain(orm) if orm else None

    async def get_parent_link(self, individual_id: str) -> ParentLink | None:
        async with self._lock:
            orm = await self.session.get(ParentLinkORM, individual_id)
        return self._link_to_domain(orm) if orm else None

    async def list_candidates(self, hints: CandidateFilterHints) -> list[Individual]:
        stmt = select(IndividualORM).order_by(IndividualORM.id)
        if hints.sex is not None:
            stmt = stmt.where(IndividualORM.sex == hints.sex.value)
        if hints.exclude_ids:
            stmt = stmt.where(IndividualORM.id.not_in(hints.exclude_ids))
        if hints.available_only:
            stmt = stmt.where(IndividualORM.available_for_breeding.is_(True))
        breed = normalize_breed(hints.breed)
        # Breed is matched in Python: SQL lower() is ASCII-only and stored values are not trimmed
        if hints.limit is not None and not breed:
            stmt = stmt.limit(hints.limit)
        async with self._lock:
            result = await self.session.execute(stmt)
        items = [self._to_domain(orm) for orm in result.scalars().all()]
        if breed:
            items = [i for i in items if normalize_breed(i.breed) == breed]
            if hints.limit is not None:
                items = items[: hints.limit]
        return items

    # Write helpers used by seeding/import only; the engine itself never writes.
    async def add_individual(self, individual: Individual) -> Individual:
        orm = await self.session.merge(self._to_orm(individual))
        await self.session.flush()
        return self._to_domain(orm)

    async def set_parent_link(self, link: ParentLink) -> ParentLink:
        orm = await self.session.merge(
            ParentLinkORM(
                child_id=link.child_id,
                sire_id=link.sire_id,
                dam_id=link.dam_id,
                sire_status=link.sire_status.value,
                dam_status=link.dam_status.value,
            )
        )
        await self.session.flush()
        return self._link_to_domain(orm)
