"""
Discrete uniform distribution: every integer of a closed interval is
equally likely.

References:
    https://en.wikipedia.org/wiki/Discrete_uniform_distribution
"""

from __future__ import annotations

from typing import Any

from pystatskit.core.validation import check_integer
from pystatskit.distributions.base import DiscreteDistribution
from pystatskit.distributions._common import validate_interval


class DiscreteUniform(DiscreteDistribution):
    """
    DiscreteUniform(low, high) on {low, low + 1, ..., high}.

    mean() and variance() use true division, so DiscreteUniform(1, 2)
    has mean 1.5 rather than a truncated 1.

    Parameters
    ----------
    low, high : int
        Interval bounds, inclusive, with low <= high.
    """

    def __init__(self, low: int, high: int):
        self._low, self._high = validate_interval(low, high)

    @property
    def name(self) -> str:
        return 'discrete_uniform'

    @property
    def low(self) -> int:
        return self._low

    @property
    def high(self) -> int:
        return self._high

    def set_interval(self, low: int, high: int) -> DiscreteUniform:
        """Replace both bounds together. Returns self."""
        self._low, self._high = validate_interval(low, high)
        return self

    def probability_at(self, value: int) -> float:
        v = check_integer(value, "value")
        if v < self._low or v > self._high:
            return 0.0
        return 1.0 / (self._high - self._low + 1)

    def mean(self) -> float:
        return (self._low + self._high) / 2

    def variance(self) -> float:
        width = self._high - self._low
        return width * (width + 2) / 12

    def parameters(self) -> dict[str, Any]:
        return {'low': self._low, 'high': self._high}
