from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from pedigree_engine.application.interfaces.repositories.individuals import IndividualStore
from pedigree_engine.application.services.snapshot_loader import SnapshotLoader
from pedigree_engine.config.settings import Settings
from pedigree_engine.infrastructure.db.session import SQLAlchemyUnitOfWork


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_store(request: Request) -> AsyncIterator[IndividualStore]:
    store = getattr(request.app.state, "store", None)
    if store is not None:
        yield store
        return
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow.individuals


def get_loader(request: Request, store: IndividualStore) -> SnapshotLoader:
    settings: Settings = request.app.state.settings
    return SnapshotLoader(store, max_concurrency=settings.store_max_concurrency)
