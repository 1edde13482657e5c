"""Enumeration types for trust scores."""
from enum import Enum


class ScoreType(str, Enum):
    """The two uncertainty-aware score columns added to a dataset."""
    WILSON = "wilson"  # Wilson lower confidence bound
    BAYES = "bayes"  # Beta-Binomial posterior mean


SCORE_COLUMNS: tuple[str, ...] = tuple(s.value for s in ScoreType)
