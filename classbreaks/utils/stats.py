"""
Small statistics helpers shared by the break algorithms and providers.
"""

import numpy as np

_EPS = np.finfo(np.float64).eps
_TINY = np.finfo(np.float64).tiny


def quantile7(values, probs):
    """Sample quantiles with linear interpolation (R's default type 7)."""
    return np.quantile(np.asarray(values, dtype=np.float64), probs, method="linear")


def population_std(values):
    """Standard deviation with divisor n."""
    return float(np.std(values, ddof=0))


def pretty(lo, hi, n=5, min_n=None, shrink_sml=0.75, high_u_bias=1.5, u5_bias=None):
    """
    Compute about n+1 equally spaced "round" values covering [lo, hi].

    Same algorithm as R's pretty(): the step is 1, 2, 5 or 10 times a power
    of 10, picked with a bias towards larger units.

    Args:
        lo (float): Lower end of the range
        hi (float): Upper end of the range
        n (int, optional): Desired number of intervals. Defaults to 5.
        min_n (int, optional): Minimal number of intervals. Defaults to n // 3.
        shrink_sml (float, optional): Shrink factor for tiny ranges. Defaults to 0.75.
        high_u_bias (float, optional): Bias towards larger units. Defaults to 1.5.
        u5_bias (float, optional): Bias for the unit 5. Defaults to 0.5 + 1.5 * high_u_bias.

    Returns:
        numpy.ndarray: The break values, ascending
    """
    if min_n is None:
        min_n = n // 3
    if u5_bias is None:
        u5_bias = 0.5 + 1.5 * high_u_bias
    h = high_u_bias

    dx = hi - lo
    if dx == 0 and hi == 0:
        cell = 1.0
        i_small = True
    else:
        cell = max(abs(lo), abs(hi))
        u = 1 + (1 / (1 + h) if u5_bias >= 1.5 * h + 0.5 else 1.5 / (1 + u5_bias))
        u *= max(1, n) * _EPS
        i_small = dx < cell * u * 3

    if i_small:
        if cell > 10:
            cell = 9 + cell / 10
        cell *= shrink_sml
        if min_n > 1:
            cell /= min_n
    else:
        cell = dx
        if n > 1:
            cell /= n

    if cell < 20 * _TINY:
        cell = 20 * _TINY

    base = 10.0 ** np.floor(np.log10(cell))
    unit = base
    if 2 * base - cell < h * (cell - unit):
        unit = 2 * base
        if 5 * base - cell < u5_bias * (cell - unit):
            unit = 5 * base
            if 10 * base - cell < h * (cell - unit):
                unit = 10 * base

    ns = np.floor(lo / unit + 1e-7)
    nu = np.ceil(hi / unit - 1e-7)
    while ns * unit > lo + 1e-10 * unit:
        ns -= 1
    while nu * unit < hi - 1e-10 * unit:
        nu += 1

    k = int(0.5 + nu - ns)
    if k < min_n:
        k = min_n - k
        if ns >= 0:
            nu += k // 2
            ns -= k // 2 + k % 2
        else:
            ns -= k // 2
            nu += k // 2 + k % 2

    return np.linspace(ns * unit, nu * unit, int(round(nu - ns)) + 1)
