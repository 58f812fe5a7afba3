"""
Abstract base class for classification providers.
"""

import logging
from abc import ABC, abstractmethod

from classbreaks.config import LOG_FORMAT, LOG_LEVEL


class ClassificationProvider(ABC):
    """
    Abstract base class for the collaborators that compute the "standard"
    styles (sd, equal, quantile, fisher).
    """

    STYLES = ("sd", "equal", "quantile", "fisher")

    def __init__(self, verbose=False):
        """
        Initialize the provider.

        Args:
            verbose (bool, optional): Verbose output. Defaults to False.
        """
        self.verbose = verbose

        # Set up logger
        self.logger = self._setup_logger()

    def _setup_logger(self):
        """Set up logger for this provider."""
        logger = logging.getLogger(f"{self.__class__.__name__}")
        level = logging.DEBUG if self.verbose else LOG_LEVEL
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(LOG_FORMAT)
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.propagate = False

        return logger

    @abstractmethod
    def classify(self, sample, nclass, style):
        """
        Compute the breaks of a sample for one of the standard styles.

        Args:
            sample (numpy.ndarray): Cleaned sample, float64, no missing values
            nclass (int): Number of classes
            style (str): One of STYLES

        Returns:
            sequence of float: Ascending breaks without duplicates
        """
        pass
