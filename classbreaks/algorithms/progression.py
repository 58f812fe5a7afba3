"""
Breaks following a geometric or an arithmetic progression between the
minimum and the maximum of the sample.
"""

import numpy as np

from classbreaks.exceptions import DomainError


def geometric_breaks(v, nclass):
    """
    Breaks in geometric progression from min(v) to max(v).

    Args:
        v (numpy.ndarray): Cleaned sample
        nclass (int): Number of classes

    Returns:
        numpy.ndarray: nclass + 1 ascending breaks

    Raises:
        DomainError: If the sample has values lower than or equal to 0
    """
    lo, hi = v.min(), v.max()
    if lo <= 0:
        raise DomainError("The geom method requires strictly positive values")

    r = np.exp((np.log(hi) - np.log(lo)) / nclass)  # ratio
    intervals = [lo, hi]
    tmp = lo
    for _ in range(nclass - 1):
        tmp = tmp * r
        intervals.append(tmp)
    return np.sort(np.asarray(intervals, dtype=np.float64))


def arithmetic_breaks(v, nclass):
    """
    Breaks spaced by (max - min) / (1 + 2 + ... + nclass), starting at min(v).

    The step is constant, so the nclass - 1 inner breaks are evenly spaced
    and the last class takes whatever is left up to max(v).

    Args:
        v (numpy.ndarray): Cleaned sample
        nclass (int): Number of classes

    Returns:
        numpy.ndarray: nclass + 1 ascending breaks
    """
    lo, hi = v.min(), v.max()
    r = (hi - lo) / (nclass * (nclass + 1) / 2)  # step
    intervals = [lo, hi]
    tmp = lo
    for _ in range(nclass - 1):
        tmp = tmp + r
        intervals.append(tmp)
    return np.sort(np.asarray(intervals, dtype=np.float64))
