"""Rank entities by a trust score.

Ordering
--------
  1. ``score_col`` descending (missing scores last)
  2. ``n_col`` descending, when given (missing counts last)
  3. original row order

Every row receives a distinct rank 1..N; exact ties are resolved by input
order, first occurrence first.
"""
from typing import Iterable, Optional

import numpy as np
import pandas as pd
import structlog

from trustscore.exceptions import SchemaError
from trustscore.scoring.utils import as_float_array

logger = structlog.get_logger(__name__)


def require_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    """Raise ``SchemaError`` for the first column missing from ``df``."""
    for col in columns:
        if col not in df.columns:
            logger.warning("missing_column", column=col, available=list(df.columns))
            raise SchemaError(col, df.columns)


def _descending_key(values: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """(missing flag, negated value) so that lexsort puts larger values and NaN last."""
    missing = np.isnan(values)
    return missing, np.where(missing, 0.0, -values)


def rank_order(scores, counts=None) -> np.ndarray:
    """Stable ordering (row positions, best first) by score then count."""
    score_missing, score_key = _descending_key(as_float_array(scores, "score"))
    keys = []
    if counts is not None:
        count_missing, count_key = _descending_key(as_float_array(counts, "n"))
        keys = [count_key, count_missing]
    # np.lexsort sorts by the last key first and is stable
    return np.lexsort(tuple(keys + [score_key, score_missing]))


def rank_trustscore(
    df: pd.DataFrame,
    score_col: str = "wilson",
    n_col: Optional[str] = None,
    rank_col: str = "rank",
) -> pd.DataFrame:
    """Add a dense, tie-free rank column.

    Args:
        df: Scored data (output of ``trustscore`` / ``score_table``).
        score_col: Column to rank by, usually ``"wilson"`` or ``"bayes"``.
        n_col: Optional review-count column; breaks ties by descending count.
        rank_col: Name of the output column (default ``"rank"``).

    Returns:
        Copy of ``df`` in its original row order with ``rank_col`` added.

    Raises:
        SchemaError: ``score_col`` or ``n_col`` is missing.
    """
    required = [score_col] + ([n_col] if n_col is not None else [])
    require_columns(df, required)

    order = rank_order(df[score_col], df[n_col] if n_col is not None else None)
    ranks = np.empty(len(order), dtype=int)
    ranks[order] = np.arange(1, len(order) + 1)

    out = df.copy()
    out[rank_col] = ranks
    logger.info("trustscore_ranked", rows=len(out), score_col=score_col,
                n_col=n_col, rank_col=rank_col)
    return out
