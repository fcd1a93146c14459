"""
Base configuration settings.

Provides common configuration inherited by all specific config modules.
Handles environment detection and shared defaults.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field, field_validator

_LEVEL_ALIASES = {"TRACE": "DEBUG", "WARN": "WARNING", "OFF": "CRITICAL"}


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PICVOTER_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("PICVOTER_LOG_LEVEL", "PICVOTER_LOG"),
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """
        Reduce a level name or a "module=level,..." filter to one level name.

        A bare level in the filter wins over module-scoped ones; otherwise the
        last directive's level is used.
        """
        directives = [part.strip() for part in value.split(",") if part.strip()]
        if not directives:
            return "INFO"
        bare = [directive for directive in directives if "=" not in directive]
        level = (bare or directives)[-1].rsplit("=", 1)[-1].strip().upper()
        return _LEVEL_ALIASES.get(level, level)
