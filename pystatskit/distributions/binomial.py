"""
Binomial distribution: number of successes in a fixed number of
independent trials.

References:
    https://en.wikipedia.org/wiki/Binomial_distribution
"""

from __future__ import annotations

from typing import Any

from pystatskit.combinatorics import combination
from pystatskit.core.validation import check_integer
from pystatskit.distributions.base import DiscreteDistribution
from pystatskit.distributions._common import (
    validate_trials, validate_success_probability,
)


class Binomial(DiscreteDistribution):
    """
    Binomial(trials, success_probability).

    P(X = k) = C(n, k) p^k (1-p)^(n-k) for 0 <= k <= n.

    The coefficient C(n, k) is exact; for very large n it no longer fits a
    float and probability_at() raises OverflowError.

    Parameters
    ----------
    trials : int
        Number of trials, >= 0.
    success_probability : float
        Probability of success per trial, in [0, 1].
    """

    def __init__(self, trials: int, success_probability: float):
        n = validate_trials(trials)
        p = validate_success_probability(success_probability)
        self._trials = n
        self._p = p

    @property
    def name(self) -> str:
        return 'binomial'

    @property
    def trials(self) -> int:
        return self._trials

    @property
    def success_probability(self) -> float:
        return self._p

    def set_trials(self, trials: int) -> Binomial:
        """Replace the number of trials. Returns self."""
        self._trials = validate_trials(trials)
        return self

    def set_success_probability(self, success_probability: float) -> Binomial:
        """Replace the success probability. Returns self."""
        self._p = validate_success_probability(success_probability)
        return self

    def probability_at(self, value: int) -> float:
        k = check_integer(value, "value")
        n, p = self._trials, self._p
        if k < 0 or k > n:
            return 0.0
        return combination(n, k) * p ** k * (1 - p) ** (n - k)

    def mean(self) -> float:
        return self._trials * self._p

    def variance(self) -> float:
        return self._trials * self._p * (1 - self._p)

    def parameters(self) -> dict[str, Any]:
        return {'trials': self._trials, 'success_probability': self._p}
