"""Configuration management using Pydantic Settings."""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from trustscore.models.config import ConfidenceConfig, PriorConfig, ScaleConfig


class Settings(BaseSettings):
    """Default scoring parameters loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRUSTSCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Rating scale
    min_score: float = 1.0
    max_score: float = 5.0

    # Wilson confidence level
    conf: float = 0.95

    # Beta-Binomial prior; prior_mean=None means "midpoint of the scale"
    prior_mean: Optional[float] = None
    prior_n: float = 20.0

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    def scale_config(self) -> ScaleConfig:
        return ScaleConfig(min_score=self.min_score, max_score=self.max_score)

    def confidence_config(self) -> ConfidenceConfig:
        return ConfidenceConfig(conf=self.conf)

    def prior_config(self) -> PriorConfig:
        return PriorConfig(prior_mean=self.prior_mean, prior_n=self.prior_n)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
