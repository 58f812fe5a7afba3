"""
Built-in break algorithms.
"""

from classbreaks.algorithms.progression import geometric_breaks, arithmetic_breaks
from classbreaks.algorithms.quantile import q6_breaks
from classbreaks.algorithms.nested_means import nested_means_breaks
from classbreaks.algorithms.msd import msd_breaks

__all__ = [
    "geometric_breaks",
    "arithmetic_breaks",
    "q6_breaks",
    "nested_means_breaks",
    "msd_breaks"
]
