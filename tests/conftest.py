from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from datetime import date
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from pedigree_engine.config.settings import Settings
from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.models.parent_link import ParentLink
from pedigree_engine.domain.value_objects.sex import Sex
from pedigree_engine.infrastructure.db.base import Base
from pedigree_engine.infrastructure.db.orm import individual, parent_link  # noqa: F401
from pedigree_engine.infrastructure.repos.individuals_memory import InMemoryIndividualStore
from pedigree_engine.interfaces.http.main import create_app

AS_OF = date(2025, 6, 1)
BREED = "Golden Retriever"


def _make_individual(
    individual_id: str,
    sex: Sex,
    *,
    born: date | None = date(2021, 3, 1),
    breed: str | None = BREED,
    location: str | None = "Bangkok",
    name: str | None = None,
    **kwargs,
) -> Individual:
    return Individual(
        id=individual_id,
        sex=sex,
        breed=breed,
        name=name or individual_id.title(),
        birth_date=born,
        location=location,
        **kwargs,
    )


def _family_store() -> InMemoryIndividualStore:
    """Small kennel shared by the tests (ages as of 2025-06-01).

    sire1 + dam1 -> rex (M, 4y), bella (F, 3y)   full siblings
    sire1 + dam2 -> max (M, 4y)                  half sibling of bella
    rex + dam2   -> pup (F, 2y)                  daughter of rex
    luna (F, 3y), duke (M, 4y), oscar (M, 10y)   unrelated founders
    """
    founders_born = date(2015, 1, 1)
    individuals = [
        _make_individual("sire1", Sex.MALE, born=founders_born, color="golden"),
        _make_individual("dam1", Sex.FEMALE, born=founders_born, color="cream"),
        _make_individual("dam2", Sex.FEMALE, born=founders_born, color="red"),
        _make_individual("rex", Sex.MALE, born=date(2021, 3, 1), color="golden"),
        _make_individual("bella", Sex.FEMALE, born=date(2022, 3, 1), color="cream"),
        _make_individual("max", Sex.MALE, born=date(2021, 5, 1), color="red"),
        _make_individual("pup", Sex.FEMALE, born=date(2023, 4, 1), color="golden"),
        _make_individual("luna", Sex.FEMALE, born=date(2022, 1, 15), color="golden"),
        _make_individual("duke", Sex.MALE, born=date(2021, 2, 1), color="golden"),
        _make_individual("oscar", Sex.MALE, born=date(2015, 2, 1)),
    ]
    links = [
        ParentLink(child_id="rex", sire_id="sire1", dam_id="dam1"),
        ParentLink(child_id="bella", sire_id="sire1", dam_id="dam1"),
        ParentLink(child_id="max", sire_id="sire1", dam_id="dam2"),
        ParentLink(child_id="pup", sire_id="rex", dam_id="dam2"),
    ]
    return InMemoryIndividualStore(individuals, links)


@pytest.fixture()
def as_of() -> date:
    return AS_OF


@pytest.fixture()
def make_individual():
    return _make_individual


@pytest.fixture()
def store() -> InMemoryIndividualStore:
    return _family_store()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "max_allowed_depth": 6,
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client


@pytest.fixture()
async def seeded_kennel(app, client) -> InMemoryIndividualStore:
    """Write the shared kennel into the test database through the SQL store."""
    from pedigree_engine.infrastructure.db.session import SQLAlchemyUnitOfWork

    source = _family_store()
    uow = SQLAlchemyUnitOfWork(app.state.session_factory)
    async with uow:
        for item in source.all_individuals():
            await uow.individuals.add_individual(item)
        for link in source.all_parent_links():
            await uow.individuals.set_parent_link(link)
        await uow.commit()
    return source
