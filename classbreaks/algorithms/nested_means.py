"""
Nested means breaks ("em").
"""

import logging

import numpy as np

from classbreaks.exceptions import DomainError, InvalidClassCount

logger = logging.getLogger(__name__)


def is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


def nested_means_breaks(v, nclass):
    """
    Recursive bisection of the sample by local means.

    Starting from [min, max], every round splits each class at the mean of
    the values it holds, so log2(nclass) rounds give nclass classes. The
    first class of a round is closed on both sides, the others are
    left-open.

    Args:
        v (numpy.ndarray): Cleaned sample
        nclass (int): Number of classes, a power of 2

    Returns:
        numpy.ndarray: nclass + 1 ascending breaks

    Raises:
        InvalidClassCount: If nclass is not a power of 2
        DomainError: If a class holds no value (too many ties to split further)
    """
    if not is_power_of_two(nclass):
        raise InvalidClassCount("The number of classes must be a power of 2")

    intervals = np.array([v.min(), v.max()], dtype=np.float64)
    rounds = nclass.bit_length() - 1

    for a in range(rounds):
        means = []
        for i in range(len(intervals) - 1):
            if i == 0:
                sub = v[(v >= intervals[i]) & (v <= intervals[i + 1])]
            else:
                sub = v[(v > intervals[i]) & (v <= intervals[i + 1])]
            if sub.size == 0:
                raise DomainError(
                    f"Cannot split ({intervals[i]}, {intervals[i + 1]}]: no value in range")
            means.append(sub.mean())
        intervals = np.sort(np.concatenate([intervals, means]))
        logger.debug(f"Round {a + 1}/{rounds}: {len(intervals) - 1} classes")

    return intervals
