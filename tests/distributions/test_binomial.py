"""
Tests for the Binomial distribution.

PMF, mean and variance are cross-checked against scipy.stats.binom.
"""

import numpy as np
import pytest
from scipy import stats

from pystatskit.core.exceptions import ValidationError
from pystatskit.distributions import Binomial, DiscreteDistribution


class TestBinomialPMF:

    def test_center_of_ten_fair_trials(self):
        assert Binomial(10, 0.5).probability_at(5) == pytest.approx(252 / 1024)

    @pytest.mark.parametrize("k", [-1, 11, 100])
    def test_outside_support_is_zero(self, k):
        assert Binomial(10, 0.5).probability_at(k) == 0.0

    @pytest.mark.parametrize("n,p", [(1, 0.3), (7, 0.25), (20, 0.9), (40, 0.05)])
    def test_matches_scipy(self, n, p):
        dist = Binomial(n, p)
        k = np.arange(n + 1)
        np.testing.assert_allclose(dist.probabilities(k), stats.binom.pmf(k, n, p), rtol=1e-10)

    def test_sums_to_one(self):
        dist = Binomial(15, 0.37)
        assert sum(dist.probability_at(k) for k in range(16)) == pytest.approx(1.0)

    def test_zero_trials(self):
        dist = Binomial(0, 0.4)
        assert dist.probability_at(0) == 1.0
        assert dist.mean() == 0.0

    def test_degenerate_probabilities(self):
        assert Binomial(4, 0.0).probability_at(0) == 1.0
        assert Binomial(4, 1.0).probability_at(4) == 1.0
        assert Binomial(4, 1.0).probability_at(3) == 0.0

    def test_non_integer_outcome_rejected(self):
        with pytest.raises(ValidationError):
            Binomial(10, 0.5).probability_at(2.5)

    def test_huge_trials_overflow_is_not_masked(self):
        """The exact coefficient outgrows float64 long before n = 2000."""
        with pytest.raises(OverflowError):
            Binomial(2000, 0.5).probability_at(1000)


class TestBinomialMoments:

    def test_mean_variance(self):
        dist = Binomial(10, 0.5)
        assert dist.mean() == 5.0
        assert dist.variance() == 2.5
        assert dist.standard_deviation() == pytest.approx(np.sqrt(2.5))

    @pytest.mark.parametrize("n,p", [(3, 0.2), (50, 0.75)])
    def test_matches_scipy(self, n, p):
        dist = Binomial(n, p)
        mean, var = stats.binom.stats(n, p, moments='mv')
        assert dist.mean() == pytest.approx(float(mean))
        assert dist.variance() == pytest.approx(float(var))


class TestBinomialValidation:

    def test_negative_trials(self):
        with pytest.raises(ValidationError, match="trials: must be non-negative"):
            Binomial(-1, 0.5)

    @pytest.mark.parametrize("p", [-0.01, 1.5])
    def test_probability_out_of_range(self, p):
        with pytest.raises(ValidationError, match="success_probability"):
            Binomial(10, p)

    def test_float_trials_rejected(self):
        with pytest.raises(ValidationError, match="trials"):
            Binomial(10.0, 0.5)

    def test_setters_fluent(self):
        dist = Binomial(10, 0.5)
        assert dist.set_trials(4).set_success_probability(0.25) is dist
        assert dist.trials == 4
        assert dist.success_probability == 0.25
        assert dist.mean() == 1.0

    def test_failed_set_trials_keeps_state(self):
        dist = Binomial(10, 0.5)
        with pytest.raises(ValidationError):
            dist.set_trials(-3)
        assert dist.trials == 10
        assert dist.probability_at(5) == pytest.approx(252 / 1024)

    def test_failed_set_probability_keeps_state(self):
        dist = Binomial(10, 0.5)
        with pytest.raises(ValidationError):
            dist.set_success_probability(2.0)
        assert dist.success_probability == 0.5


class TestBinomialInterface:

    def test_is_discrete_distribution(self):
        assert isinstance(Binomial(1, 0.5), DiscreteDistribution)

    def test_name_and_parameters(self):
        dist = Binomial(3, 0.5)
        assert dist.name == 'binomial'
        assert dist.parameters() == {'trials': 3, 'success_probability': 0.5}

    def test_repr(self):
        assert repr(Binomial(3, 0.5)) == "Binomial(trials=3, success_probability=0.5)"

    def test_equality(self):
        assert Binomial(3, 0.5) == Binomial(3, 0.5)
        assert Binomial(3, 0.5) != Binomial(4, 0.5)

    def test_probabilities_keeps_shape(self):
        out = Binomial(4, 0.5).probabilities([[0, 1], [2, 9]])
        assert out.shape == (2, 2)
        assert out[1, 1] == 0.0

    def test_probabilities_empty(self):
        assert Binomial(4, 0.5).probabilities([]).shape == (0,)

    def test_probabilities_rejects_floats(self):
        with pytest.raises(ValidationError, match="integer outcomes"):
            Binomial(4, 0.5).probabilities([0.5, 1.0])
