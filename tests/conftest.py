"""
Shared fixtures for the classbreaks tests.
"""

import numpy as np
import pytest

from classbreaks.base import ClassificationProvider


class RecordingProvider(ClassificationProvider):
    """Provider returning fixed breaks and remembering how it was called."""

    def __init__(self, breaks=(0.0, 1.0)):
        super().__init__()
        self.breaks = list(breaks)
        self.calls = []

    def classify(self, sample, nclass, style):
        self.calls.append((sample, nclass, style))
        return self.breaks


@pytest.fixture
def recording_provider():
    return RecordingProvider()


@pytest.fixture
def one_to_ten():
    return np.arange(1, 11, dtype=float)


@pytest.fixture
def positive_sample():
    rng = np.random.default_rng(42)
    return rng.lognormal(mean=2.0, sigma=0.75, size=500)
