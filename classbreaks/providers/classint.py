"""
Bundled classification provider, modelled on R's classInt::classIntervals.
"""

import numpy as np

from classbreaks.base.provider import ClassificationProvider
from classbreaks.exceptions import DomainError, InvalidMethod
from classbreaks.utils.fast_jenks import jenks_breaks
from classbreaks.utils.stats import pretty, quantile7


class ClassIntProvider(ClassificationProvider):
    """Computes the sd, equal, quantile and fisher styles with numpy and numba."""

    def __init__(self, verbose=False):
        super().__init__(verbose=verbose)

        self._styles = {
            "sd": self._sd_breaks,
            "equal": self._equal_breaks,
            "quantile": self._quantile_breaks,
            "fisher": self._fisher_breaks,
        }

    def classify(self, sample, nclass, style):
        """
        Compute the breaks of a sample for one of the standard styles.

        Args:
            sample (numpy.ndarray): Cleaned sample
            nclass (int): Number of classes
            style (str): "sd", "equal", "quantile" or "fisher"

        Returns:
            list: Ascending breaks
        """
        try:
            compute = self._styles[style]
        except KeyError:
            raise InvalidMethod(
                f"Unknown classification style '{style}', expected one of {', '.join(self.STYLES)}")

        sample = np.asarray(sample, dtype=np.float64)
        self.logger.debug(f"Classifying {sample.size} values into {nclass} classes ({style})")
        return [float(b) for b in compute(sample, nclass)]

    @staticmethod
    def _equal_breaks(sample, nclass):
        return np.linspace(sample.min(), sample.max(), nclass + 1)

    @staticmethod
    def _quantile_breaks(sample, nclass):
        return np.unique(quantile7(sample, np.linspace(0.0, 1.0, nclass + 1)))

    def _sd_breaks(self, sample, nclass):
        # classInt scales with the sample standard deviation (n - 1)
        if sample.size < 2:
            raise DomainError("The sd style needs at least 2 values")
        mean = sample.mean()
        sd = sample.std(ddof=1)
        if sd == 0:
            raise DomainError("The sd style needs a sample with a non-zero standard deviation")

        scaled = (sample - mean) / sd
        return pretty(scaled.min(), scaled.max(), n=nclass) * sd + mean

    @staticmethod
    def _fisher_breaks(sample, nclass):
        return np.asarray(jenks_breaks(sample, nclass))
