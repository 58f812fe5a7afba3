"""
Mean and standard deviation breaks ("msd").
"""

import numbers

import numpy as np

from classbreaks.exceptions import DomainError
from classbreaks.utils.stats import population_std


def msd_breaks(v, k=1, middle=False):
    """
    Breaks spaced by k standard deviations around the mean.

    Args:
        v (numpy.ndarray): Cleaned sample
        k (float, optional): Width of a class in standard deviations. Defaults to 1.
        middle (bool, optional): If True the mean is the center of a class,
            otherwise the mean is a break. Defaults to False.

    Returns:
        numpy.ndarray: min(v), the breaks strictly between min(v) and max(v), max(v)

    Raises:
        DomainError: If k is not a positive number or the sample has no spread
    """
    if isinstance(k, (bool, np.bool_)) or not isinstance(k, numbers.Real):
        raise DomainError(f"k must be a positive number, got {k!r}")
    try:
        k = float(k)
    except OverflowError:
        raise DomainError(f"k is too large, got {k!r}") from None
    if not np.isfinite(k) or k <= 0:
        raise DomainError(f"k must be a positive number, got {k!r}")

    lo, hi = v.min(), v.max()
    avg = v.mean()
    sd = population_std(v)
    if sd == 0:
        raise DomainError("The msd method needs a sample with a non-zero standard deviation")
    step = sd * k

    if not middle:
        pose = int(np.ceil((hi - avg) / step))
        nege = int(np.ceil((avg - lo) / step))
        bks = np.concatenate([
            avg - np.arange(1, nege + 1) * step,
            [avg],
            avg + np.arange(1, pose + 1) * step,
        ])
    else:
        low_center = avg - 0.5 * step
        high_center = avg + 0.5 * step
        pose = int(np.ceil((hi - high_center) / step))
        nege = int(np.ceil((low_center - lo) / step))
        bks = np.concatenate([
            low_center - np.arange(1, nege + 1) * step,
            [low_center, high_center],
            high_center + np.arange(1, pose + 1) * step,
        ])

    inner = bks[(bks > lo) & (bks < hi)]
    return np.sort(np.concatenate([[lo], inner, [hi]]))
