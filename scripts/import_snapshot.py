#!/usr/bin/env python3
"""
Script to load a pedigree snapshot (JSON) into the database.

The file must look like:
  {"individuals": [{"id": "...", "sex": "male", ...}], "parent_links": [{"child_id": "...", ...}]}

Individuals are written first, then parent links. Existing rows with the same
id are overwritten.

Usage:
  python scripts/import_snapshot.py path/to/snapshot.json [--create-tables]
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pedigree_engine.config.settings import get_settings
from pedigree_engine.infrastructure.db.base import Base
from pedigree_engine.infrastructure.db.orm import individual, parent_link  # noqa: F401
from pedigree_engine.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from pedigree_engine.infrastructure.repos.individuals_memory import InMemoryIndividualStore
from pedigree_engine.infrastructure.repos.individuals_sqlalchemy import (
    IndividualsSQLAlchemyStore,
)


async def import_snapshot(path: Path, create_tables: bool = False) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    source = InMemoryIndividualStore.from_json(path)
    individuals = source.all_individuals()
    links = source.all_parent_links()

    try:
        if create_tables:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            print("🛠  Tables created (if missing)")

        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            store: IndividualsSQLAlchemyStore = uow.individuals
            for item in individuals:
                await store.add_individual(item)
            for link in links:
                await store.set_parent_link(link)
            await uow.commit()

        print(f"\n✅ Imported {len(individuals)} individuals and {len(links)} parent links")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Import a pedigree snapshot into the database")
    parser.add_argument("path", help="Path to the JSON snapshot")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables before importing (use alembic for real deployments)",
    )
    args = parser.parse_args()

    snapshot_path = Path(args.path)
    if not snapshot_path.is_file():
        print(f"❌ Error: '{snapshot_path}' does not exist")
        sys.exit(1)

    asyncio.run(import_snapshot(snapshot_path, create_tables=args.create_tables))
