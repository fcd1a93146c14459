"""
Shared test fixtures and configuration for entire test suite.

Provides: migrated SQLite engines (in-memory and file-backed), session
factories, a ready ImageRankingStore, and mock sessions.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from picvoter.application.services.image_store import ImageRankingStore
from picvoter.boundary.db.connection import (
    create_engine_from_config,
    get_async_session_factory,
)
from picvoter.boundary.db.migrations import apply_migrations
from picvoter.configs.database import DatabaseSettings


def make_engine(url: str) -> AsyncEngine:
    """Create an engine for url with test-friendly pool settings."""
    return create_engine_from_config(
        DatabaseSettings(url=url, pool_size=5, max_overflow=20, sqlite_busy_timeout=30)
    )


@pytest_asyncio.fixture
async def bare_engine():
    """
    In-memory SQLite engine with no schema applied.

    Yields:
        AsyncEngine: Engine sharing one connection (StaticPool)
    """
    engine = make_engine("sqlite+aiosqlite:///:memory:")
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def engine(bare_engine: AsyncEngine):
    """In-memory SQLite engine migrated to head."""
    await apply_migrations(bare_engine)
    yield bare_engine


@pytest_asyncio.fixture
async def file_engine(tmp_path: Path):
    """
    File-backed SQLite engine migrated to head.

    Separate connections per session, so concurrent transactions really
    contend for the database write lock.
    """
    engine = make_engine(f"sqlite+aiosqlite:///{(tmp_path / 'picvoter.db').as_posix()}")
    await apply_migrations(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine):
    """Session factory bound to the migrated in-memory engine."""
    return get_async_session_factory(engine)


@pytest.fixture
def store(session_factory) -> ImageRankingStore:
    """ImageRankingStore over the in-memory database."""
    return ImageRankingStore(
        session_factory,
        operation_timeout=5.0,
        retry_attempts=3,
        retry_max_wait=0.05,
        max_page_size=50,
    )


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)
