"""
Database configuration settings.

Manages connection parameters for the async SQLAlchemy engine, plus the
timeout and retry budget applied to every store operation.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from picvoter.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Database configuration (PostgreSQL via asyncpg or SQLite via aiosqlite)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PICVOTER_DB_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PICVOTER_DB_URL", "DATABASE_URL"),
        description="SQLAlchemy async URL; defaults to a SQLite file in the storage dir",
    )

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    operation_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound in seconds for a single store operation attempt",
    )
    retry_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts for operations failing with transient storage errors",
    )
    retry_max_wait: float = Field(
        default=1.0,
        gt=0,
        description="Maximum backoff in seconds between retry attempts",
    )
    sqlite_busy_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds a SQLite connection waits on a locked database",
    )

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL targets SQLite."""
        return bool(self.url) and self.url.startswith("sqlite")
