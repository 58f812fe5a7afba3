# fast_jenks.py
import logging

import numpy as np
import numba

logger = logging.getLogger(__name__)


@numba.njit
def compute_matrices(data, n_classes):
    n_data = data.shape[0]
    lower_class_limits = np.zeros((n_data + 1, n_classes + 1), dtype=np.int64)
    variance_combinations = np.empty((n_data + 1, n_classes + 1))
    for i in range(n_data + 1):
        for j in range(n_classes + 1):
            variance_combinations[i, j] = np.inf
    # a single value fills exactly one class: no empty classes
    lower_class_limits[1, 1] = 1
    variance_combinations[1, 1] = 0.0

    for l in range(2, n_data + 1):
        sum_values = 0.0
        sum_squares = 0.0
        w = 0.0
        v = 0.0
        for m in range(1, l + 1):
            # candidate class covers data[lower - 1 : l]
            lower = l - m + 1
            val = data[lower - 1]
            sum_values += val
            sum_squares += val * val
            w += 1.0
            v = sum_squares - (sum_values * sum_values) / w
            prev = lower - 1
            if prev == 0:
                continue
            for k in range(2, min(n_classes, prev + 1) + 1):
                temp = variance_combinations[prev, k - 1] + v
                if variance_combinations[l, k] >= temp:
                    variance_combinations[l, k] = temp
                    lower_class_limits[l, k] = lower
        lower_class_limits[l, 1] = 1
        variance_combinations[l, 1] = v

    return lower_class_limits, variance_combinations


@numba.njit
def extract_breaks(data, lower_class_limits, n_classes):
    n_data = data.shape[0]
    breaks = np.empty(n_classes + 1)
    k = n_data
    breaks[n_classes] = data[n_data - 1]
    for j in range(n_classes, 1, -1):
        # class j starts at data[idx - 1], class j - 1 ends at data[idx - 2]
        idx = lower_class_limits[k, j]
        breaks[j - 1] = (data[idx - 2] + data[idx - 1]) / 2
        k = idx - 1
    breaks[0] = data[0]
    return breaks


def jenks_breaks(data, n_classes):
    """
    Fisher-Jenks natural breaks: the partition of the sorted data into
    n_classes contiguous, non-empty groups with the smallest total
    within-class sum of squares.

    Args:
        data (array-like): List or array of values to classify.
        n_classes (int): Number of classes to divide the data into.

    Returns:
        list: The minimum, the midpoint between every pair of adjacent
            classes and the maximum, ascending: n_classes + 1 values.
    """
    data = np.sort(np.asarray(data, dtype=np.float64))
    distinct = np.unique(data)
    if distinct.size <= n_classes:
        logger.warning(
            f"Only {distinct.size} distinct values for {n_classes} classes, "
            f"using the distinct values as breaks")
        return distinct.tolist()

    lower_class_limits, _ = compute_matrices(data, n_classes)
    brks = extract_breaks(data, lower_class_limits, n_classes)
    unique_brks = np.unique(brks)
    if unique_brks.size < brks.size:
        logger.warning(
            f"Tied values split across classes, {unique_brks.size - 1} classes instead of {n_classes}")
    return unique_brks.tolist()
