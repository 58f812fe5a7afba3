"""
Sample utilities for classbreaks.
"""

import logging
import numbers

import numpy as np
import pandas as pd

from classbreaks.config import STURGES_FACTOR
from classbreaks.exceptions import DomainError, EmptySample, InvalidClassCount

logger = logging.getLogger(__name__)

_MAX_CLASS_COUNT = np.iinfo(np.int64).max


def preprocess_sample(v):
    """
    Clean a raw sample before any break computation.

    Args:
        v (array-like): Numbers, possibly with missing entries (None, NaN, pd.NA).
            Lists, tuples, numpy arrays of any shape and pandas Series are accepted.

    Returns:
        numpy.ndarray: Flat float64 array without missing values

    Raises:
        EmptySample: If nothing is left after dropping missing values
        DomainError: If the sample holds non-numeric or infinite values
    """
    if isinstance(v, (pd.Series, pd.Index)):
        series = pd.Series(v, copy=True)
    else:
        series = pd.Series(np.asarray(v, dtype=object).ravel())

    # Drop missing values
    n_raw = len(series)
    series = series.dropna()
    if len(series) < n_raw:
        logger.debug(f"Removed {n_raw - len(series)} missing values")

    if series.empty:
        raise EmptySample("The sample is empty once missing values are removed")

    try:
        values = pd.to_numeric(series, errors="raise").to_numpy(dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise DomainError(f"The sample contains non-numeric values: {e}") from e

    if not np.all(np.isfinite(values)):
        raise DomainError("The sample contains infinite values")

    return values


def default_class_count(n):
    """Number of classes derived from the sample size: round(1 + 3.3 * log10(n))."""
    if n < 1:
        raise EmptySample("Cannot derive a class count from an empty sample")
    return int(round(1 + STURGES_FACTOR * np.log10(n)))


def validate_class_count(nclass):
    """
    Check a caller-supplied class count.

    Args:
        nclass (int): Requested number of classes. Integral floats such as 4.0 are accepted.

    Returns:
        int: The class count as a Python int

    Raises:
        InvalidClassCount: If nclass is not a positive integer
    """
    if isinstance(nclass, (bool, np.bool_)) or not isinstance(nclass, numbers.Real):
        raise InvalidClassCount(f"The number of classes must be an integer, got {nclass!r}")
    if not isinstance(nclass, numbers.Integral):
        if not np.isfinite(nclass) or int(nclass) != nclass:
            raise InvalidClassCount(f"The number of classes must be an integer, got {nclass!r}")
    if nclass <= 0:
        raise InvalidClassCount(f"The number of classes must be positive, got {nclass!r}")
    if nclass > _MAX_CLASS_COUNT:
        raise InvalidClassCount(f"The number of classes is too large, got {nclass!r}")
    return int(nclass)
