"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from picvoter.configs.database import DatabaseSettings
from picvoter.configs.scoring import ScoringSettings
from picvoter.configs.settings import Settings, get_settings

__all__ = ["DatabaseSettings", "ScoringSettings", "Settings", "get_settings"]
