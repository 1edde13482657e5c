"""Data models for the trustscore package."""
from trustscore.models.config import ConfidenceConfig, PriorConfig, ScaleConfig
from trustscore.models.enums import SCORE_COLUMNS, ScoreType
from trustscore.models.rating import RankedRow, RatingObservation, ScoredRow

__all__ = [
    "ConfidenceConfig",
    "PriorConfig",
    "ScaleConfig",
    "SCORE_COLUMNS",
    "ScoreType",
    "RankedRow",
    "RatingObservation",
    "ScoredRow",
]
