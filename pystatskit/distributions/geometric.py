"""
Geometric distribution: number of trials up to and including the first
success.

References:
    https://en.wikipedia.org/wiki/Geometric_distribution
"""

from __future__ import annotations

from typing import Any

from pystatskit.core.validation import check_integer
from pystatskit.distributions.base import DiscreteDistribution
from pystatskit.distributions._common import validate_success_probability


class Geometric(DiscreteDistribution):
    """
    Geometric(success_probability), support {1, 2, 3, ...}.

    P(X = n) = (1-p)^(n-1) p for n >= 1, and 0 for n <= 0.

    Parameters
    ----------
    success_probability : float
        Probability of success per trial, in (0, 1]. Zero is rejected:
        the first success would never arrive and the mean 1/p is undefined.
    """

    def __init__(self, success_probability: float):
        self._p = validate_success_probability(success_probability, allow_zero=False)

    @property
    def name(self) -> str:
        return 'geometric'

    @property
    def success_probability(self) -> float:
        return self._p

    def set_success_probability(self, success_probability: float) -> Geometric:
        """Replace the success probability. Returns self."""
        self._p = validate_success_probability(success_probability, allow_zero=False)
        return self

    def probability_at(self, value: int) -> float:
        n = check_integer(value, "value")
        if n < 1:
            return 0.0
        return (1 - self._p) ** (n - 1) * self._p

    def mean(self) -> float:
        return 1 / self._p

    def variance(self) -> float:
        return (1 - self._p) / self._p ** 2

    def parameters(self) -> dict[str, Any]:
        return {'success_probability': self._p}
