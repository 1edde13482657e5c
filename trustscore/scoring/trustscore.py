"""Trust-score orchestration over a tabular dataset.

Pipeline
--------
  1. Resolve the rating / review-count (and optional label) columns.
  2. Wilson lower bound over the full columns   → ``wilson``
  3. Beta-Binomial posterior over the full columns → ``bayes``
  4. Return a copy of the input with both columns appended.

Each scorer validates the whole batch once, so a single invalid row fails the
entire call and nothing is returned.
"""
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Sequence, Union

import pandas as pd
import structlog

from trustscore.config import get_settings
from trustscore.models.config import ConfidenceConfig, PriorConfig, ScaleConfig
from trustscore.models.enums import ScoreType
from trustscore.models.rating import RankedRow, RatingObservation, ScoredRow
from trustscore.scoring.bayes import DEFAULT_PRIOR_N, bayes_adjusted
from trustscore.scoring.ranking import rank_trustscore, require_columns
from trustscore.scoring.wilson import wilson_score

logger = structlog.get_logger(__name__)

Rows = Union[pd.DataFrame, Iterable[Mapping[str, Any]]]


def as_frame(rows: Rows) -> pd.DataFrame:
    """Return a private DataFrame copy of ``rows``."""
    if isinstance(rows, pd.DataFrame):
        return rows.copy()
    return pd.DataFrame([dict(r) for r in rows])


def score_table(
    rows: Rows,
    rating_col: str = "rating",
    n_col: str = "n",
    scale: Optional[ScaleConfig] = None,
    confidence: Optional[ConfidenceConfig] = None,
    prior: Optional[PriorConfig] = None,
    feature_col: Optional[str] = None,
) -> pd.DataFrame:
    """Attach ``wilson`` and ``bayes`` columns to a dataset.

    Args:
        rows: DataFrame or ordered iterable of row mappings.
        rating_col: Column holding observed average ratings.
        n_col: Column holding review counts.
        scale: Rating scale bounds (default 1–5).
        confidence: Wilson confidence level (default 0.95).
        prior: Bayesian prior (default midpoint of the scale, strength 20).
        feature_col: Optional entity label column; only checked for presence.

    Returns:
        New DataFrame with the input columns plus ``wilson`` and ``bayes``.

    Raises:
        SchemaError: A named column is missing.
        DomainError: Any row violates a numeric precondition.
    """
    scale = scale or ScaleConfig()
    confidence = confidence or ConfidenceConfig()
    prior = prior or PriorConfig()

    df = as_frame(rows)
    required = [rating_col, n_col] + ([feature_col] if feature_col is not None else [])
    require_columns(df, required)

    ratings = df[rating_col]
    n_reviews = df[n_col]

    wilson = wilson_score(
        ratings,
        n_reviews,
        min_score=scale.min_score,
        max_score=scale.max_score,
        conf=confidence.conf,
    )
    bayes = bayes_adjusted(
        ratings,
        n_reviews,
        min_score=scale.min_score,
        max_score=scale.max_score,
        prior_mean=prior.resolve_mean(scale),
        prior_n=prior.prior_n,
    )
    df[ScoreType.WILSON.value] = wilson.to_numpy()
    df[ScoreType.BAYES.value] = bayes.to_numpy()

    logger.info(
        "trustscore_computed",
        rows=len(df),
        rating_col=rating_col,
        n_col=n_col,
        min_score=scale.min_score,
        max_score=scale.max_score,
        conf=confidence.conf,
        prior_mean=prior.resolve_mean(scale),
        prior_n=prior.prior_n,
    )
    return df


def trustscore(
    df: Rows,
    feature_col: Optional[str] = None,
    rating_col: str = "rating",
    n_col: str = "n",
    min_score: float = 1,
    max_score: float = 5,
    conf: float = 0.95,
    prior_mean: Optional[float] = None,
    prior_n: float = DEFAULT_PRIOR_N,
) -> pd.DataFrame:
    """Compute Wilson and Bayesian trust scores with flat keyword arguments.

    ``prior_mean`` and ``prior_n`` only affect the ``bayes`` column; ``wilson``
    is independent of them.
    """
    return score_table(
        df,
        rating_col=rating_col,
        n_col=n_col,
        scale=ScaleConfig(min_score=min_score, max_score=max_score),
        confidence=ConfidenceConfig(conf=conf),
        prior=PriorConfig(prior_mean=prior_mean, prior_n=prior_n),
        feature_col=feature_col,
    )


class TrustScoreCalculator:
    """Score and rank entities with a fixed scale, confidence level and prior.

    Parameters
    ----------
    scale, confidence, prior:
        Override the defaults taken from ``Settings`` (environment variables
        prefixed ``TRUSTSCORE_``).
    """

    def __init__(
        self,
        scale: Optional[ScaleConfig] = None,
        confidence: Optional[ConfidenceConfig] = None,
        prior: Optional[PriorConfig] = None,
    ) -> None:
        settings = get_settings()
        self.scale = scale or settings.scale_config()
        self.confidence = confidence or settings.confidence_config()
        self.prior = prior or settings.prior_config()
        logger.info(
            "trustscore_calculator_initialized",
            min_score=self.scale.min_score,
            max_score=self.scale.max_score,
            conf=self.confidence.conf,
            prior_mean=self.prior.resolve_mean(self.scale),
            prior_n=self.prior.prior_n,
        )

    # ── tabular API ───────────────────────────────────────────────────────────

    def score(
        self,
        rows: Rows,
        rating_col: str = "rating",
        n_col: str = "n",
        feature_col: Optional[str] = None,
    ) -> pd.DataFrame:
        return score_table(
            rows,
            rating_col=rating_col,
            n_col=n_col,
            scale=self.scale,
            confidence=self.confidence,
            prior=self.prior,
            feature_col=feature_col,
        )

    def rank(
        self,
        scored: pd.DataFrame,
        score_col: str = ScoreType.WILSON.value,
        n_col: Optional[str] = None,
        rank_col: str = "rank",
    ) -> pd.DataFrame:
        return rank_trustscore(scored, score_col=score_col, n_col=n_col, rank_col=rank_col)

    # ── record API ────────────────────────────────────────────────────────────

    def score_observations(self, observations: Sequence[RatingObservation]) -> List[ScoredRow]:
        """Score typed observations; output order matches input order."""
        if not observations:
            return []
        scored = self.score([o.model_dump() for o in observations])
        return [ScoredRow(**rec) for rec in scored.to_dict(orient="records")]

    def rank_observations(
        self,
        observations: Sequence[RatingObservation],
        score_type: ScoreType = ScoreType.WILSON,
        tie_break_by_count: bool = True,
    ) -> List[RankedRow]:
        """Score and rank typed observations, best first."""
        if not observations:
            return []
        scored = self.score([o.model_dump() for o in observations])
        ranked = self.rank(
            scored,
            score_col=ScoreType(score_type).value,
            n_col="n" if tie_break_by_count else None,
        )
        rows = [RankedRow(**rec) for rec in ranked.to_dict(orient="records")]
        return sorted(rows, key=lambda row: row.rank)
