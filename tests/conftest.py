"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def one_to_five():
    """The integer sample 1..5: mean 3, median 3, population variance 2."""
    return [1, 2, 3, 4, 5]


@pytest.fixture
def float_sample(rng):
    """Random float sample for cross-checks against numpy."""
    return rng.normal(loc=10.0, scale=2.0, size=101)
