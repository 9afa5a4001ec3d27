"""
pystatskit: descriptive statistics and discrete distributions for Python.

Submodules:
    descriptive: Statistics engine and describe()
    distributions: Binomial, Geometric, DiscreteUniform
    combinatorics: Exact factorial and combinations
"""

__version__ = "0.1.0"

from pystatskit import combinatorics
from pystatskit import descriptive
from pystatskit import distributions
from pystatskit.descriptive import Statistics, describe
from pystatskit.distributions import (
    DiscreteDistribution,
    Binomial,
    Geometric,
    DiscreteUniform,
)

__all__ = [
    "__version__",
    "combinatorics",
    "descriptive",
    "distributions",
    "Statistics",
    "describe",
    "DiscreteDistribution",
    "Binomial",
    "Geometric",
    "DiscreteUniform",
]
