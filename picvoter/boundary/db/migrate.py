"""
Database migration script.

Applies the images table migrations to the configured database. Run by
deployment tooling before the service starts.

Dependencies: alembic, sqlalchemy, picvoter.configs
System role: Database schema initialization

Usage:
    python -m picvoter.boundary.db.migrate            # upgrade to head
    python -m picvoter.boundary.db.migrate 0002       # upgrade to a revision
    python -m picvoter.boundary.db.migrate --downgrade base
"""

import argparse
import asyncio
import logging
import sys

from picvoter.boundary.db.connection import create_engine_from_config
from picvoter.boundary.db.migrations import apply_migrations, revert_migrations
from picvoter.configs import get_settings
from picvoter.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def migrate(revision: str = "head", downgrade: bool = False) -> str | None:
    """
    Move the configured database to revision.

    Args:
        revision: Target Alembic revision
        downgrade: Revert instead of upgrade

    Returns:
        str | None: Revision the database is at afterwards
    """
    engine = create_engine_from_config(get_settings().database)
    try:
        if downgrade:
            return await revert_migrations(engine, revision)
        return await apply_migrations(engine, revision)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Apply picvoter schema migrations")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--downgrade", action="store_true")
    args = parser.parse_args(argv)

    configure_logging()
    try:
        current = asyncio.run(migrate(args.revision, downgrade=args.downgrade))
    except Exception:
        logger.exception("Migration failed")
        return 1
    logger.info("Migrations complete, schema at revision %s", current)
    return 0


if __name__ == "__main__":
    sys.exit(main())
