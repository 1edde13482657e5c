"""Linear rescaling between bounded numeric ranges.

    scaled = new_min + (x - old_min) / (old_max - old_min) × (new_max - new_min)

When ``old_min == old_max`` the formula is undefined and every value maps to
the midpoint of the new range.
"""
import numpy as np
import structlog

from trustscore.scoring.utils import as_float_array, invalid, is_scalar_input, wrap_result

logger = structlog.get_logger(__name__)


def normalize_score(
    x,
    old_min: float = 1,
    old_max: float = 5,
    new_min: float = 0,
    new_max: float = 1,
):
    """Map values from ``[old_min, old_max]`` onto ``[new_min, new_max]``.

    Args:
        x: Scalar, sequence, ndarray or Series of values to rescale.
        old_min: Lower bound of the input range (e.g. 1 for a 1-5 rating).
        old_max: Upper bound of the input range.
        new_min: Desired lower bound (default 0).
        new_max: Desired upper bound (default 1).

    Returns:
        Rescaled values shaped like ``x``. Missing values stay missing.

    Raises:
        DomainError: If any non-missing value lies outside ``[old_min, old_max]``.
    """
    values = as_float_array(x, "x")
    if np.any((values < old_min) | (values > old_max)):
        raise invalid("Values in `x` fall outside the specified old_min and old_max.")

    if old_max == old_min:
        out = np.full(values.shape, (new_min + new_max) / 2, dtype=float)
    else:
        out = (values - old_min) / (old_max - old_min) * (new_max - new_min) + new_min

    logger.debug("scores_normalized", count=int(values.size),
                 old_range=(old_min, old_max), new_range=(new_min, new_max))
    return wrap_result(out, is_scalar_input(x), like=x)
