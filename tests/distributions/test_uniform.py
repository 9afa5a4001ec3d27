"""
Tests for the DiscreteUniform distribution.

scipy.stats.randint(low, high + 1) covers the same closed interval.
"""

import numpy as np
import pytest
from scipy import stats

from pystatskit.core.exceptions import ValidationError
from pystatskit.distributions import DiscreteUniform


class TestDiscreteUniformPMF:

    def test_die_face(self):
        assert DiscreteUniform(1, 6).probability_at(3) == pytest.approx(1 / 6)

    @pytest.mark.parametrize("v", [0, 7, -100])
    def test_outside_interval_is_zero(self, v):
        assert DiscreteUniform(1, 6).probability_at(v) == 0.0

    def test_single_point(self):
        dist = DiscreteUniform(4, 4)
        assert dist.probability_at(4) == 1.0
        assert dist.mean() == 4.0
        assert dist.variance() == 0.0

    def test_negative_interval(self):
        dist = DiscreteUniform(-3, 3)
        assert dist.probability_at(-3) == pytest.approx(1 / 7)
        assert dist.mean() == 0.0

    def test_matches_scipy(self):
        v = np.arange(-5, 15)
        np.testing.assert_allclose(
            DiscreteUniform(-2, 9).probabilities(v),
            stats.randint.pmf(v, -2, 10),
            rtol=1e-12,
        )


class TestDiscreteUniformMoments:

    def test_die(self):
        dist = DiscreteUniform(1, 6)
        assert dist.mean() == 3.5
        assert dist.variance() == pytest.approx(35 / 12)

    def test_mean_not_truncated(self):
        assert DiscreteUniform(1, 2).mean() == 1.5

    def test_variance_not_truncated(self):
        assert DiscreteUniform(1, 2).variance() == pytest.approx(0.25)

    @pytest.mark.parametrize("low,high", [(0, 9), (-4, 17)])
    def test_matches_scipy(self, low, high):
        mean, var = stats.randint.stats(low, high + 1, moments='mv')
        dist = DiscreteUniform(low, high)
        assert dist.mean() == pytest.approx(float(mean))
        assert dist.variance() == pytest.approx(float(var))


class TestDiscreteUniformValidation:

    def test_inverted_interval(self):
        with pytest.raises(ValidationError, match="low must not exceed high"):
            DiscreteUniform(6, 1)

    def test_float_bounds_rejected(self):
        with pytest.raises(ValidationError, match="low"):
            DiscreteUniform(1.0, 6)

    def test_set_interval(self):
        dist = DiscreteUniform(1, 6)
        assert dist.set_interval(0, 1) is dist
        assert (dist.low, dist.high) == (0, 1)
        assert dist.probability_at(1) == 0.5

    def test_failed_set_interval_keeps_both_bounds(self):
        dist = DiscreteUniform(1, 6)
        with pytest.raises(ValidationError):
            dist.set_interval(10, 2)
        assert (dist.low, dist.high) == (1, 6)
        assert dist.probability_at(3) == pytest.approx(1 / 6)

    def test_repr(self):
        assert repr(DiscreteUniform(1, 6)) == "DiscreteUniform(low=1, high=6)"
