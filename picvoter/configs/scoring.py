"""
Scoring configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Ranking policy parameters
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from picvoter.configs.base import BaseSettings
from picvoter.core.scoring import Z_95


class ScoringSettings(BaseSettings):
    """Confidence interval and pagination limits for ranked reads."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PICVOTER_SCORING_",
        case_sensitive=False,
        extra="ignore",
    )

    z: float = Field(
        default=Z_95,
        gt=0,
        description="Standard normal quantile for the Wilson lower bound (1.96 = 95%)",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        description="Largest page list_ranked will return",
    )
