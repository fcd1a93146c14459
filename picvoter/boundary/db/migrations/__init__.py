"""
Version-tagged schema migrations for the images table.

Wraps Alembic so revisions can be applied over an async engine at startup
or from the command line. The revision files under versions/ are applied
strictly in order: create table, add filename, add scoring columns.

Dependencies: alembic, sqlalchemy
System role: Schema evolution
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


def get_migrations_dir() -> Path:
    """Return the Alembic script directory."""
    return Path(__file__).parent


def get_alembic_config(database_url: str | None = None) -> Config:
    """
    Build an Alembic configuration without an ini file.

    Args:
        database_url: URL used when env.py has to open its own connection

    Returns:
        Config: Alembic configuration pointing at this package
    """
    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(get_migrations_dir()))
    if database_url:
        alembic_cfg.set_main_option("sqlalchemy.url", database_url)
    return alembic_cfg


def _upgrade(connection: Connection, revision: str) -> None:
    alembic_cfg = get_alembic_config()
    alembic_cfg.attributes["connection"] = connection
    command.upgrade(alembic_cfg, revision)


def _downgrade(connection: Connection, revision: str) -> None:
    alembic_cfg = get_alembic_config()
    alembic_cfg.attributes["connection"] = connection
    command.downgrade(alembic_cfg, revision)


def _current(connection: Connection) -> str | None:
    return MigrationContext.configure(connection).get_current_revision()


async def apply_migrations(engine: AsyncEngine, revision: str = "head") -> str | None:
    """
    Apply pending migrations up to revision inside one transaction.

    Args:
        engine: Target database
        revision: Alembic revision identifier ("head" for latest)

    Returns:
        str | None: Revision the database is at afterwards
    """
    async with engine.begin() as conn:
        await conn.run_sync(_upgrade, revision)
        current = await conn.run_sync(_current)
    logger.info("Database schema at revision %s", current)
    return current


async def revert_migrations(engine: AsyncEngine, revision: str) -> str | None:
    """
    Downgrade the schema to revision ("base" drops the images table).

    Args:
        engine: Target database
        revision: Alembic revision identifier

    Returns:
        str | None: Revision the database is at afterwards
    """
    async with engine.begin() as conn:
        await conn.run_sync(_downgrade, revision)
        current = await conn.run_sync(_current)
    logger.info("Database schema reverted to revision %s", current)
    return current


async def current_revision(engine: AsyncEngine) -> str | None:
    """Return the applied revision, or None for an unmigrated database."""
    async with engine.connect() as conn:
        return await conn.run_sync(_current)
