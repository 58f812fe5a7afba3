"""
Utility modules for classbreaks.
"""

from classbreaks.utils.data import preprocess_sample, default_class_count, validate_class_count
from classbreaks.utils.fast_jenks import jenks_breaks
from classbreaks.utils.stats import quantile7, population_std, pretty

__all__ = [
    "preprocess_sample",
    "default_class_count",
    "validate_class_count",
    "jenks_breaks",
    "quantile7",
    "population_std",
    "pretty"
]
