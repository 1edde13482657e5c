"""Wilson vs Bayesian score plot."""
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import structlog
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from trustscore.models.enums import SCORE_COLUMNS
from trustscore.scoring.ranking import rank_order, require_columns
from trustscore.scoring.utils import invalid

logger = structlog.get_logger(__name__)

_COLORS = {"wilson": "#1f77b4", "bayes": "#ff7f0e"}


def to_long_format(
    df: pd.DataFrame,
    feature_col: str = "feature",
    sort_by: str = "wilson",
) -> pd.DataFrame:
    """Reshape scored data to one row per (feature, score type).

    Features are ordered by ``sort_by`` descending; all ``wilson`` rows come
    before all ``bayes`` rows.
    """
    if sort_by not in SCORE_COLUMNS:
        raise invalid(f"`sort_by` must be one of {', '.join(SCORE_COLUMNS)}")
    require_columns(df, [feature_col, *SCORE_COLUMNS])

    ordered = df.iloc[rank_order(df[sort_by])]
    return pd.DataFrame({
        "feature": pd.concat([ordered[feature_col]] * len(SCORE_COLUMNS), ignore_index=True),
        "score_type": [s for s in SCORE_COLUMNS for _ in range(len(ordered))],
        "score": pd.concat([ordered[s] for s in SCORE_COLUMNS], ignore_index=True),
    })


def plot_trustscore(
    df: pd.DataFrame,
    feature_col: str = "feature",
    sort_by: str = "wilson",
    point_size: float = 3,
    ax: Optional[Axes] = None,
) -> Figure:
    """Plot Wilson and Bayesian scores per feature, sorted by ``sort_by``.

    Args:
        df: Scored data containing ``feature_col``, ``wilson`` and ``bayes``.
        feature_col: Column with feature/entity names.
        sort_by: ``"wilson"`` or ``"bayes"``; orders features along the x-axis.
        point_size: Marker size in points.
        ax: Draw into an existing Axes instead of a new figure.

    Returns:
        The matplotlib Figure holding the plot.
    """
    long_df = to_long_format(df, feature_col=feature_col, sort_by=sort_by)
    if ax is None:
        fig, ax = plt.subplots(figsize=(max(6.0, 0.6 * len(df)), 4.0))
    else:
        fig = ax.figure

    # one x slot per row; repeated labels keep separate slots
    n_rows = len(long_df) // len(SCORE_COLUMNS)
    positions = np.tile(np.arange(n_rows), len(SCORE_COLUMNS))
    labels = [str(f) for f in long_df["feature"].iloc[:n_rows]]
    for score_type in SCORE_COLUMNS:
        mask = (long_df["score_type"] == score_type).to_numpy()
        part = long_df[mask]
        ax.scatter(
            positions[mask],
            part["score"],
            s=point_size ** 2,
            color=_COLORS[score_type],
            label=score_type,
        )

    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_xlabel("Feature/Entity")
    ax.set_ylabel("Score")
    ax.set_title("Wilson vs Bayesian Scores")
    ax.legend(title="Score Type")
    ax.grid(axis="y", alpha=0.3)
    fig.tight_layout()

    logger.info("trustscore_plotted", features=len(labels), sort_by=sort_by)
    return fig
