"""Wilson score lower bound for an arbitrary rating scale.

Formulas
--------
  Observed proportion:
      p = (rating − min_score) / (max_score − min_score)

  Two-sided critical value:
      z = Φ⁻¹(1 − (1 − conf) / 2)

  Lower bound (n > 0):
      lb = (p + z²/2n − z·√((p(1 − p) + z²/4n) / n)) / (1 + z²/n)

  No reviews (n = 0):
      lb = 0

  Back to the rating scale:
      score = lb × (max_score − min_score) + min_score

The bound is conservative: it never exceeds the observed rating and rises
towards it as the review count grows.
"""
import math

import numpy as np
import structlog

from trustscore.scoring.utils import (
    as_float_array,
    broadcast_pair,
    check_confidence,
    check_counts,
    check_ratings,
    check_scale,
    is_scalar_input,
    wrap_result,
)

logger = structlog.get_logger(__name__)

_Z_MAX_ITER = 100
_Z_TOL = 1e-15


def z_critical(conf: float = 0.95) -> float:
    """Two-sided standard-normal critical value for confidence level ``conf``.

    Solves P(|Z| <= z) = erf(z / √2) = conf by Newton-Raphson from z = 0.
    erf is concave on z >= 0, so the iterates rise monotonically to the root.
    """
    check_confidence(conf)
    slope = math.sqrt(2.0 / math.pi)
    z = 0.0
    for _ in range(_Z_MAX_ITER):
        step = (math.erf(z / math.sqrt(2.0)) - conf) / (slope * math.exp(-z * z / 2.0))
        z -= step
        if abs(step) <= _Z_TOL * max(1.0, z):
            break
    return z


def wilson_score(
    rating,
    n,
    min_score: float = 1,
    max_score: float = 5,
    conf: float = 0.95,
):
    """Wilson lower-bound score for each (rating, review count) pair.

    Args:
        rating: Observed average ratings on ``[min_score, max_score]``.
        n: Number of reviews behind each rating (same length as ``rating``).
        min_score: Lowest possible rating (default 1).
        max_score: Highest possible rating (default 5).
        conf: Confidence level of the interval (default 0.95).

    Returns:
        Lower bounds on the original rating scale, shaped like ``rating``.

    Raises:
        DomainError: On an invalid scale or confidence level, a rating outside
            the scale, a negative review count or mismatched lengths. The
            whole batch is checked before anything is computed.
    """
    check_scale(min_score, max_score)
    check_confidence(conf)
    r, counts = broadcast_pair(
        as_float_array(rating, "rating"), as_float_array(n, "n"), ("rating", "n")
    )
    check_ratings(r, min_score, max_score)
    check_counts(counts)

    width = max_score - min_score
    p = (r - min_score) / width
    z = z_critical(conf)
    z2 = z * z

    lb = np.full(r.shape, np.nan, dtype=float)
    lb[counts == 0] = 0.0
    has_reviews = counts > 0
    if np.any(has_reviews):
        pk, nk = p[has_reviews], counts[has_reviews]
        centre = pk + z2 / (2 * nk)
        margin = z * np.sqrt((pk * (1 - pk) + z2 / (4 * nk)) / nk)
        lb[has_reviews] = (centre - margin) / (1 + z2 / nk)
    # missing rating with n == 0 stays missing
    lb[np.isnan(p)] = np.nan

    score = lb * width + min_score
    logger.info(
        "wilson_scored",
        count=int(score.size),
        conf=conf,
        z=round(z, 6),
        zero_review_rows=int(np.count_nonzero(counts == 0)),
    )
    return wrap_result(score, is_scalar_input(rating, n), like=rating)
