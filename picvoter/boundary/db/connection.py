"""
Database connection management.

Provides the async SQLAlchemy engine and session factory used by the
image store and the migration runner.

Dependencies: sqlalchemy, picvoter.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from picvoter.configs import get_settings
from picvoter.configs.database import DatabaseSettings


def _sqlite_database(db_config: DatabaseSettings) -> str | None:
    """Return the SQLite database path, or None for an in-memory database."""
    database = make_url(db_config.url).database
    if database in (None, "", ":memory:"):
        return None
    return database


def _engine_options(db_config: DatabaseSettings) -> dict[str, Any]:
    """
    Build create_async_engine keyword arguments for the configured backend.

    In-memory SQLite needs a single shared connection (StaticPool) and
    rejects pool sizing arguments. File SQLite waits sqlite_busy_timeout
    seconds on a locked database instead of failing immediately.
    """
    options: dict[str, Any] = {
        "echo": db_config.echo_sql,
        "pool_pre_ping": True,
    }

    if db_config.is_sqlite:
        connect_args: dict[str, Any] = {"timeout": db_config.sqlite_busy_timeout}
        if _sqlite_database(db_config) is None:
            connect_args["check_same_thread"] = False
            options["connect_args"] = connect_args
            options["poolclass"] = StaticPool
            return options
        options["connect_args"] = connect_args

    options.update(
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
    )
    return options


def ensure_sqlite_directory(db_config: DatabaseSettings) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    if not db_config.is_sqlite:
        return
    database = _sqlite_database(db_config)
    if database is not None:
        Path(database).parent.mkdir(parents=True, exist_ok=True)


def create_engine_from_config(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling and health checks.

    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early.

    Args:
        db_config: Database settings with a resolved url

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    ensure_sqlite_directory(db_config)
    return create_async_engine(db_config.url, **_engine_options(db_config))


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Get the process-wide async engine built from application settings.

    Returns:
        AsyncEngine: Cached engine

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    return create_engine_from_config(get_settings().database)


def get_async_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker:
    """
    Create async session factory for database operations.

    autoflush=False and expire_on_commit=False keep transaction control
    explicit and let committed rows be read after the session closes.

    Args:
        engine: Engine to bind; the settings-backed engine when omitted

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session, session.begin():
            session.add(obj)
    """
    return async_sessionmaker(
        bind=engine or get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )
