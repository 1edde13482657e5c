"""Scoring configuration models.

These only carry values. Numeric constraints (``min_score < max_score``,
``0 < conf < 1``, prior bounds) are checked by the scoring functions so that
every violation surfaces as ``DomainError``.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ScaleConfig(BaseModel):
    """Bounds of the rating scale."""
    model_config = ConfigDict(frozen=True)

    min_score: float = Field(default=1.0, description="Lowest possible rating")
    max_score: float = Field(default=5.0, description="Highest possible rating")

    @property
    def midpoint(self) -> float:
        return (self.min_score + self.max_score) / 2

    @property
    def width(self) -> float:
        return self.max_score - self.min_score


class ConfidenceConfig(BaseModel):
    """Two-sided confidence level used for the Wilson bound."""
    model_config = ConfigDict(frozen=True)

    conf: float = Field(default=0.95, description="Confidence level in (0, 1)")


class PriorConfig(BaseModel):
    """Beta-Binomial prior: a typical rating and its weight in pseudo-reviews."""
    model_config = ConfigDict(frozen=True)

    prior_mean: Optional[float] = Field(
        default=None,
        description="Prior rating on the original scale; None means the scale midpoint",
    )
    prior_n: float = Field(default=20.0, description="Prior strength (pseudo-count)")

    def resolve_mean(self, scale: ScaleConfig) -> float:
        """Return the prior mean, falling back to the midpoint of ``scale``."""
        return scale.midpoint if self.prior_mean is None else self.prior_mean
