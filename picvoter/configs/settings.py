"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator

from picvoter.configs.base import BaseSettings
from picvoter.configs.database import DatabaseSettings
from picvoter.configs.scoring import ScoringSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    storage_dir: Path = Field(
        default=Path("./storage"),
        description="Root directory for local state (SQLite database file)",
    )

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)

    @model_validator(mode="after")
    def _default_database_url(self) -> "Settings":
        if not self.database.url:
            db_path = (self.storage_dir / "picvoter.db").as_posix()
            self.database.url = f"sqlite+aiosqlite:///{db_path}"
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for the process lifetime.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from picvoter.configs import get_settings
        settings = get_settings()
    """
    return Settings()
