"""Bayesian adjusted rating (Beta-Binomial shrinkage) for an arbitrary scale.

Formulas
--------
  Observed and prior proportions:
      p  = (rating − min_score) / (max_score − min_score)
      p0 = (prior_mean − min_score) / (max_score − min_score)

  Beta prior:
      α = p0 × prior_n
      β = (1 − p0) × prior_n

  Posterior mean:
      θ = (α + p·n) / (α + β + n)

  Back to the rating scale:
      score = θ × (max_score − min_score) + min_score

With few reviews the prior dominates and the score stays near ``prior_mean``;
as ``n`` grows past ``prior_n`` the score approaches the observed rating.
"""
from typing import Optional

import numpy as np
import structlog

from trustscore.scoring.utils import (
    as_float_array,
    broadcast_pair,
    check_counts,
    check_ratings,
    check_scale,
    invalid,
    is_scalar_input,
    wrap_result,
)

logger = structlog.get_logger(__name__)

DEFAULT_PRIOR_N: float = 20.0


def bayes_adjusted(
    rating,
    n,
    min_score: float = 1,
    max_score: float = 5,
    prior_mean: Optional[float] = None,
    prior_n: float = DEFAULT_PRIOR_N,
):
    """Shrink each observed rating towards ``prior_mean``.

    Args:
        rating: Observed average ratings on ``[min_score, max_score]``.
        n: Number of reviews behind each rating (same length as ``rating``).
        min_score: Lowest possible rating (default 1).
        max_score: Highest possible rating (default 5).
        prior_mean: Rating you would trust with no reviews at all; defaults
            to the midpoint of the scale.
        prior_n: Prior strength as a pseudo-count, i.e. the number of reviews
            needed before the observed rating carries as much weight as the
            prior (default 20).

    Returns:
        Posterior mean ratings on the original scale, shaped like ``rating``.

    Raises:
        DomainError: On an invalid scale, a rating or prior outside the scale,
            a negative count or prior strength, mismatched lengths, or a row
            with no reviews when ``prior_n`` is 0 (posterior undefined).
    """
    check_scale(min_score, max_score)
    if prior_mean is None:
        prior_mean = (min_score + max_score) / 2
    r, counts = broadcast_pair(
        as_float_array(rating, "rating"), as_float_array(n, "n"), ("rating", "n")
    )
    check_ratings(r, min_score, max_score)
    check_counts(counts)
    if not min_score <= prior_mean <= max_score:
        raise invalid("`prior_mean` must lie within [min_score, max_score].")
    if not prior_n >= 0:
        raise invalid("`prior_n` must be non-negative.")
    if prior_n == 0 and np.any(counts == 0):
        raise invalid(
            "No prior and no data: posterior undefined when `prior_n` and `n` are both 0.",
            offending=int(np.count_nonzero(counts == 0)),
        )

    width = max_score - min_score
    p = (r - min_score) / width
    p0 = (prior_mean - min_score) / width

    alpha = p0 * prior_n
    beta = (1 - p0) * prior_n
    posterior = (alpha + p * counts) / (alpha + beta + counts)

    score = posterior * width + min_score
    logger.info(
        "bayes_adjusted",
        count=int(score.size),
        prior_mean=prior_mean,
        prior_n=prior_n,
        alpha=round(alpha, 6),
        beta=round(beta, 6),
    )
    return wrap_result(score, is_scalar_input(rating, n), like=rating)
