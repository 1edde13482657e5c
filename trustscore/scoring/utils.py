"""Array coercion and batch validation shared by the scorers.

All scorers accept scalars, sequences, numpy arrays or pandas Series and
validate the whole batch before computing anything.
"""
import math
from typing import Any

import numpy as np
import pandas as pd
import structlog

from trustscore.exceptions import DomainError

logger = structlog.get_logger(__name__)


def as_float_array(values: Any, name: str) -> np.ndarray:
    """Convert ``values`` to a float ndarray; pandas missing values become NaN."""
    try:
        if isinstance(values, (pd.Series, pd.Index)):
            return values.to_numpy(dtype=float, na_value=np.nan)
        return np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise invalid(f"`{name}` must be numeric") from exc


def is_scalar_input(*values: Any) -> bool:
    """True when every argument is a plain number (not a sequence or array)."""
    return all(np.ndim(v) == 0 for v in values)


def broadcast_pair(
    a: np.ndarray,
    b: np.ndarray,
    names: tuple[str, str],
) -> tuple[np.ndarray, np.ndarray]:
    """Broadcast two 1-d batches; a scalar broadcasts, unequal lengths fail."""
    try:
        a, b = np.broadcast_arrays(np.atleast_1d(a), np.atleast_1d(b))
    except ValueError as exc:
        raise invalid(f"`{names[0]}` and `{names[1]}` must have the same length") from exc
    return a, b


def wrap_result(out: np.ndarray, scalar: bool, like: Any = None):
    """Shape a result like the caller's input: float, Series or ndarray."""
    if scalar:
        return float(out.reshape(-1)[0])
    if isinstance(like, pd.Series) and len(like) == len(out):
        return pd.Series(out, index=like.index, name=like.name)
    return out


def check_scale(min_score: float, max_score: float) -> None:
    if not (math.isfinite(min_score) and math.isfinite(max_score)):
        raise invalid("`min_score` and `max_score` must be finite")
    if min_score >= max_score:
        raise invalid("`min_score` must be strictly less than `max_score`")


def check_confidence(conf: float) -> None:
    if not 0.0 < conf < 1.0:
        raise invalid("`conf` must lie strictly between 0 and 1")


def check_ratings(rating: np.ndarray, min_score: float, max_score: float) -> None:
    # NaN compares False on both sides, so missing ratings pass through
    outside = (rating < min_score) | (rating > max_score)
    if np.any(outside):
        raise invalid(
            "Values in `rating` lie outside the allowed range [min_score, max_score].",
            offending=int(np.count_nonzero(outside)),
        )


def check_counts(n: np.ndarray) -> None:
    negative = n < 0
    if np.any(negative):
        raise invalid(
            "Number of reviews `n` must be non-negative.",
            offending=int(np.count_nonzero(negative)),
        )


def invalid(message: str, **context) -> DomainError:
    """Log a failed precondition and build the ``DomainError`` to raise."""
    logger.warning("validation_failed", reason=message, **context)
    return DomainError(message)
