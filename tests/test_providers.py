"""
Tests for the bundled classification provider and its helpers.
"""

import itertools

import numpy as np
import pytest

from classbreaks.exceptions import DomainError, InvalidMethod
from classbreaks.providers import ClassIntProvider
from classbreaks.utils.fast_jenks import jenks_breaks
from classbreaks.utils.stats import pretty


@pytest.fixture(scope="module")
def provider():
    return ClassIntProvider()


class TestPretty:
    """R-compatible pretty breaks."""

    def test_round_range(self):
        np.testing.assert_allclose(pretty(0, 100), [0, 20, 40, 60, 80, 100])

    def test_symmetric_range(self):
        np.testing.assert_allclose(
            pretty(-1.486, 1.486, n=5), [-1.5, -1.0, -0.5, 0.0, 0.5, 1.0, 1.5], atol=1e-12)

    def test_covers_range(self):
        brks = pretty(0.37, 9.81, n=4)
        assert brks[0] <= 0.37
        assert brks[-1] >= 9.81


class TestFisherJenks:
    """Natural breaks."""

    def test_obvious_groups(self):
        data = [20, 1, 11, 2, 21, 3, 10, 22, 12]
        assert jenks_breaks(data, 3) == [1.0, 6.5, 16.0, 22.0]

    def test_outlier_in_its_own_class(self):
        assert jenks_breaks([1, 2, 3, 10, 11, 12, 30], 3) == [1.0, 6.5, 21.0, 30.0]

    def test_minimum_in_its_own_class(self):
        assert jenks_breaks([-40, 1, 2, 3, 10, 11, 12], 3) == [-40.0, -19.5, 6.5, 12.0]

    @pytest.mark.parametrize("seed", range(20))
    @pytest.mark.parametrize("n_classes", [2, 3])
    def test_matches_exhaustive_search(self, seed, n_classes):
        data = np.sort(np.random.default_rng(seed).normal(size=8))

        def within_ss(groups):
            return sum(((g - g.mean()) ** 2).sum() for g in groups)

        best = min(
            within_ss(np.split(data, list(cuts)))
            for cuts in itertools.combinations(range(1, len(data)), n_classes - 1))

        brks = jenks_breaks(data, n_classes)
        assert len(brks) == n_classes + 1
        labels = np.searchsorted(brks[1:-1], data)
        found = within_ss([data[labels == c] for c in range(n_classes)])
        assert found == pytest.approx(best)

    def test_fewer_distinct_values_than_classes(self):
        assert jenks_breaks([1, 1, 2, 2], 4) == [1.0, 2.0]

    def test_number_of_breaks(self, positive_sample):
        brks = jenks_breaks(positive_sample, 5)
        assert len(brks) == 6
        assert brks[0] == positive_sample.min()
        assert brks[-1] == positive_sample.max()


class TestClassIntProvider:
    """Standard styles."""

    def test_equal(self, provider):
        brks = provider.classify(np.array([0.0, 3.0, 10.0]), 5, "equal")
        np.testing.assert_allclose(brks, [0, 2, 4, 6, 8, 10])

    def test_quantile(self, provider):
        brks = provider.classify(np.arange(0, 101, dtype=float), 4, "quantile")
        np.testing.assert_allclose(brks, [0, 25, 50, 75, 100])

    def test_quantile_removes_duplicates(self, provider):
        brks = provider.classify(np.array([1.0, 1.0, 1.0, 1.0, 2.0]), 4, "quantile")
        assert brks == [1.0, 2.0]

    def test_sd(self, provider, one_to_ten):
        brks = provider.classify(one_to_ten, 5, "sd")
        sd = one_to_ten.std(ddof=1)
        expected = 5.5 + np.array([-1.5, -1.0, -0.5, 0.0, 0.5, 1.0, 1.5]) * sd
        np.testing.assert_allclose(brks, expected)
        assert brks[0] <= 1.0
        assert brks[-1] >= 10.0

    def test_sd_constant_sample(self, provider):
        with pytest.raises(DomainError):
            provider.classify(np.array([2.0, 2.0]), 3, "sd")

    def test_fisher(self, provider):
        brks = provider.classify(np.array([1.0, 2.0, 3.0, 10.0, 11.0, 12.0]), 2, "fisher")
        assert brks == [1.0, 6.5, 12.0]

    def test_unknown_style(self, provider, one_to_ten):
        with pytest.raises(InvalidMethod):
            provider.classify(one_to_ten, 3, "fisher-jenks")

    @pytest.mark.parametrize("style", ["sd", "equal", "quantile", "fisher"])
    def test_ascending(self, provider, positive_sample, style):
        brks = provider.classify(positive_sample, 4, style)
        assert np.all(np.diff(brks) > 0)
