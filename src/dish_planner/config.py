"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    cheap_tier_weight: float = 0.70
    mid_tier_weight: float = 0.25
    budget_target_ratio: float = 0.90
    low_utilization_percent: float = 85.0
    good_utilization_percent: float = 90.0
    max_alternatives: int = 3
    algorithm_version: str = "2.1.0-tiered"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="DISH_PLANNER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def tier_cutoffs(self) -> tuple[float, float]:
        """Cumulative draw thresholds for the cheap and mid tiers."""
        return (
            self.cheap_tier_weight,
            self.cheap_tier_weight + self.mid_tier_weight,
        )
