"""
Discrete distribution interface.

Each DiscreteDistribution defines:
- probability_at(x): probability mass at an integer outcome, 0 off support
- mean(): expected value
- variance(): variance

and inherits standard_deviation() and a vectorised probabilities().

Distributions own only their defining parameters. Parameters are checked
at construction and by every setter before being committed, so an object
is never observed in an invalid state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatskit.core.exceptions import ValidationError


class DiscreteDistribution(ABC):
    """Abstract discrete probability distribution over the integers."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def probability_at(self, value: int) -> float:
        """P(X = value); 0.0 for values outside the support."""
        ...

    @abstractmethod
    def mean(self) -> float:
        ...

    @abstractmethod
    def variance(self) -> float:
        ...

    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """Defining parameters, by name."""
        ...

    def standard_deviation(self) -> float:
        return math.sqrt(self.variance())

    def probabilities(self, values: ArrayLike) -> NDArray[np.float64]:
        """
        probability_at() evaluated element-wise.

        Parameters
        ----------
        values : array-like of int
            Outcomes of any shape.

        Returns
        -------
        float64 array of the same shape.

        Raises
        ------
        ValidationError
            If values are not integers.
        """
        arr = np.asarray(values)
        if arr.size == 0:
            return np.zeros(arr.shape, dtype=np.float64)
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValidationError(
                f"values: expected integer outcomes, got dtype {arr.dtype}"
            )
        flat = [self.probability_at(v) for v in arr.ravel().tolist()]
        return np.array(flat, dtype=np.float64).reshape(arr.shape)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.parameters() == other.parameters()

    __hash__ = None

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.parameters().items())
        return f"{self.__class__.__name__}({args})"
