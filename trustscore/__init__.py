"""Uncertainty-aware trust scores for rated entities.

Replaces raw-average ranking with a Wilson lower confidence bound and a
Beta-Binomial shrinkage estimate, both usable on any bounded rating scale.
"""
from trustscore.exceptions import DomainError, SchemaError, TrustScoreError
from trustscore.log_config import configure_logging
from trustscore.models import (
    ConfidenceConfig,
    PriorConfig,
    RankedRow,
    RatingObservation,
    ScaleConfig,
    ScoredRow,
    ScoreType,
)
from trustscore.scoring.bayes import bayes_adjusted
from trustscore.scoring.normalize import normalize_score
from trustscore.scoring.plotting import plot_trustscore, to_long_format
from trustscore.scoring.ranking import rank_trustscore
from trustscore.scoring.trustscore import TrustScoreCalculator, score_table, trustscore
from trustscore.scoring.wilson import wilson_score, z_critical

__version__ = "0.2.0"

__all__ = [
    "DomainError",
    "SchemaError",
    "TrustScoreError",
    "configure_logging",
    "ConfidenceConfig",
    "PriorConfig",
    "RankedRow",
    "RatingObservation",
    "ScaleConfig",
    "ScoredRow",
    "ScoreType",
    "bayes_adjusted",
    "normalize_score",
    "plot_trustscore",
    "to_long_format",
    "rank_trustscore",
    "TrustScoreCalculator",
    "score_table",
    "trustscore",
    "wilson_score",
    "z_critical",
]
