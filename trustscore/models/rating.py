"""Per-entity rating records."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RatingObservation(BaseModel):
    """Observed average rating and review count for one entity."""
    model_config = ConfigDict(frozen=True)

    feature: Optional[str] = Field(default=None, description="Entity label, carried through")
    rating: float = Field(..., description="Observed average rating")
    n: float = Field(..., description="Number of reviews behind the rating")


class ScoredRow(RatingObservation):
    """Observation with both trust scores on the original rating scale."""
    wilson: float
    bayes: float


class RankedRow(ScoredRow):
    """Scored observation with its position in the ranking (1 = best)."""
    rank: int = Field(..., ge=1)
