"""
Name-based construction of distributions.
"""

from __future__ import annotations

from typing import Any

from pystatskit.distributions.base import DiscreteDistribution
from pystatskit.distributions.binomial import Binomial
from pystatskit.distributions.geometric import Geometric
from pystatskit.distributions.uniform import DiscreteUniform


_DISTRIBUTION_CLASSES: dict[str, type[DiscreteDistribution]] = {
    'binomial': Binomial,
    'geometric': Geometric,
    'discrete_uniform': DiscreteUniform,
    'uniform': DiscreteUniform,  # alias
}


def resolve_distribution(
    distribution: str | DiscreteDistribution,
    **params: Any,
) -> DiscreteDistribution:
    """Resolve a distribution argument to a DiscreteDistribution instance.

    Args:
        distribution: Either a string name ('binomial', 'geometric',
                      'discrete_uniform') or an instance (passed through).
        **params: Constructor parameters for a named distribution, e.g.
                  trials=10, success_probability=0.5.

    Returns:
        DiscreteDistribution instance.

    Raises:
        ValueError: If string name is not recognized, or parameters are
                    passed alongside an instance.
        TypeError: If argument is neither string nor DiscreteDistribution,
                   or params don't match the constructor.
        ValidationError: If params fail the distribution's own checks.
    """
    if isinstance(distribution, DiscreteDistribution):
        if params:
            raise ValueError(
                f"Parameters {sorted(params)} given with an existing "
                f"{distribution.__class__.__name__} instance"
            )
        return distribution
    if isinstance(distribution, str):
        cls = _DISTRIBUTION_CLASSES.get(distribution.lower())
        if cls is None:
            valid = ', '.join(
                sorted(k for k in _DISTRIBUTION_CLASSES.keys() if k != 'uniform')
            )
            raise ValueError(
                f"Unknown distribution: {distribution!r}. Valid distributions: {valid}"
            )
        return cls(**params)
    raise TypeError(
        f"distribution must be str or DiscreteDistribution, "
        f"got {type(distribution).__name__}"
    )
