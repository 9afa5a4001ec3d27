"""
Discrete probability distributions.

Public API:
    DiscreteDistribution      - Abstract interface (probability_at, mean, variance)
    Binomial(n, p)            - Successes in n trials
    Geometric(p)              - Trials until first success
    DiscreteUniform(low, high)
    resolve_distribution(name, **params)
"""

from pystatskit.distributions.base import DiscreteDistribution
from pystatskit.distributions.binomial import Binomial
from pystatskit.distributions.geometric import Geometric
from pystatskit.distributions.uniform import DiscreteUniform
from pystatskit.distributions.registry import resolve_distribution

__all__ = [
    "DiscreteDistribution",
    "Binomial",
    "Geometric",
    "DiscreteUniform",
    "resolve_distribution",
]
