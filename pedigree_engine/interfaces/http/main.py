from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pedigree_engine.application.interfaces.repositories.individuals import IndividualStore
from pedigree_engine.config.settings import Settings, get_settings
from pedigree_engine.infrastructure.db.session import create_engine, create_session_factory
from pedigree_engine.interfaces.http.routers import pedigree
from pedigree_engine.interfaces.middleware.error_handler import register_error_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(level)


def create_app(
    *,
    settings: Settings | None = None,
    store: IndividualStore | None = None,
) -> FastAPI:
    """Build the API. Pass ``store`` to serve from it instead of the database."""
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Pedigree Engine",
        version="0.1.0",
        description="Ancestry, relatedness and breeding-match engine",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    if store is None:
        app.state.engine = create_engine(settings.database_url)
        app.state.session_factory = create_session_factory(app.state.engine)
    register_error_handlers(app)

    api = APIRouter(prefix="/api/v1")
    api.include_router(pedigree.router)

    @api.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app
