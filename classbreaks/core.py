"""
Break generator: normalizes the sample, picks the class count and
dispatches to a classification provider or a built-in algorithm.
"""

import logging

from classbreaks.algorithms import (
    arithmetic_breaks,
    geometric_breaks,
    msd_breaks,
    nested_means_breaks,
    q6_breaks
)
from classbreaks.config import DEFAULT_K, DEFAULT_METHOD, LOG_FORMAT, LOG_LEVEL
from classbreaks.exceptions import BreaksError
from classbreaks.methods import Method
from classbreaks.providers import ClassIntProvider
from classbreaks.utils.data import default_class_count, preprocess_sample, validate_class_count


class BreakGenerator:
    """Computes class breaks for a numeric sample."""

    def __init__(self, provider=None, verbose=False):
        """
        Initialize the generator.

        Args:
            provider (ClassificationProvider, optional): Collaborator for the sd, equal,
                quantile and fisher-jenks methods. Defaults to ClassIntProvider.
            verbose (bool, optional): Verbose output. Defaults to False.
        """
        self.verbose = verbose
        self.provider = provider if provider is not None else ClassIntProvider(verbose=verbose)

        # Set up logger
        self.logger = self._setup_logger()

        self._algorithms = {
            Method.GEOM: lambda v, nclass, k, middle: geometric_breaks(v, nclass),
            Method.ARITH: lambda v, nclass, k, middle: arithmetic_breaks(v, nclass),
            Method.Q6: lambda v, nclass, k, middle: q6_breaks(v),
            Method.EM: lambda v, nclass, k, middle: nested_means_breaks(v, nclass),
            Method.MSD: lambda v, nclass, k, middle: msd_breaks(v, k=k, middle=middle),
        }

    def _setup_logger(self):
        """Set up logging configuration."""
        logger = logging.getLogger(f"{self.__class__.__name__}")
        logger.setLevel(logging.DEBUG if self.verbose else LOG_LEVEL)

        # Only add handlers if they are not already added
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(LOG_FORMAT)
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.propagate = False  # Prevent duplicate logs

        return logger

    def compute(self, v, nclass=None, method=DEFAULT_METHOD, k=DEFAULT_K, middle=False):
        """
        Compute the breaks of a sample.

        Args:
            v (array-like): Numeric values; missing values are ignored
            nclass (int, optional): Number of classes. Defaults to round(1 + 3.3 * log10(n)).
                Ignored by "q6" and "msd".
            method (str or Method, optional): One of "sd", "equal", "quantile",
                "fisher-jenks", "q6", "geom", "arith", "em" or "msd". Defaults to "quantile".
            k (float, optional): Width of a class in standard deviations ("msd" only). Defaults to 1.
            middle (bool, optional): If True the mean is the center of a class rather
                than a break ("msd" only). Defaults to False.

        Returns:
            list: Ascending breaks

        Raises:
            EmptySample: If the sample has no value once missing values are removed
            InvalidMethod: If the method is unknown
            InvalidClassCount: If nclass is not a positive integer, or not a power of 2 for "em"
            DomainError: If the sample does not fit the method (e.g. values <= 0 for "geom")
        """
        try:
            method = Method.parse(method)
            sample = preprocess_sample(v)

            if nclass is None:
                nclass = default_class_count(sample.size)
                self.logger.debug(f"No class count given, using {nclass} for {sample.size} values")
            else:
                nclass = validate_class_count(nclass)

            self.logger.debug(f"Computing {method.value} breaks on {sample.size} values")
            if method.delegated:
                breaks = self.provider.classify(sample, nclass, method.provider_style)
            else:
                breaks = self._algorithms[method](sample, nclass, k, middle)
        except BreaksError as e:
            self.logger.debug(f"Break computation failed: {e}")
            raise

        return [float(b) for b in breaks]


_default_generator = None


def get_breaks(v, nclass=None, method=DEFAULT_METHOD, k=DEFAULT_K, middle=False, provider=None):
    """
    Discretize a numeric sample.

    Args:
        v (array-like): Numeric values; missing values are ignored
        nclass (int, optional): Number of classes. Defaults to round(1 + 3.3 * log10(n)).
        method (str, optional): Discretization method. Defaults to "quantile".
        k (float, optional): Width of a class in standard deviations ("msd"). Defaults to 1.
        middle (bool, optional): Mean as the center of a class ("msd"). Defaults to False.
        provider (ClassificationProvider, optional): Collaborator for the standard styles.

    Returns:
        list: Ascending breaks
    """
    global _default_generator

    if provider is not None:
        generator = BreakGenerator(provider=provider)
    else:
        if _default_generator is None:
            _default_generator = BreakGenerator()
        generator = _default_generator

    return generator.compute(v, nclass=nclass, method=method, k=k, middle=middle)
