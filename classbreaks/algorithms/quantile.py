"""
Fixed-probability quantile breaks ("q6").
"""

from classbreaks.config import Q6_PROBS
from classbreaks.utils.stats import quantile7


def q6_breaks(v):
    """Quantiles at 0, 5, 27.5, 50, 72.5, 95 and 100 percent: always 7 breaks."""
    return quantile7(v, Q6_PROBS)
