"""
SampleDesign: validated, immutable sample wrapper.

Wraps a flat numeric sample and provides validation and metadata for the
descriptive statistics engine and the describe() pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatskit.core.validation import check_sample


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for descriptive statistics.

    Holds a 1D sample of integers or floats. The array is a private
    read-only copy, so a design can be shared freely. Immutable after
    construction.

    Construction:
        SampleDesign.from_array([1, 2, 3])
        SampleDesign.from_iterable(x for x in readings if x > 0)
    """
    _data: NDArray[np.number[Any]]
    _n: int

    @classmethod
    def from_array(cls, data: ArrayLike) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            Flat sequence of real numbers. Integer input keeps an integer
            dtype; mixed input is promoted by numpy.
        """
        if isinstance(data, SampleDesign):
            return data
        return cls._build(check_sample(data, "values"))

    @classmethod
    def from_iterable(cls, iterable: Iterable[Any]) -> SampleDesign:
        """
        Build SampleDesign from any iterable, including one-shot iterators.

        Parameters
        ----------
        iterable : iterable
            range, generator, itertools.islice window, etc. Consumed once.
        """
        return cls._build(check_sample(list(iterable), "values"))

    @classmethod
    def _build(cls, data: NDArray[np.number[Any]]) -> SampleDesign:
        """Internal builder; data is already validated and private."""
        data.flags.writeable = False
        return cls(_data=data, _n=int(data.shape[0]))

    @property
    def data(self) -> NDArray[np.number[Any]]:
        """Read-only sample array."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def is_empty(self) -> bool:
        """Whether the sample has no observations."""
        return self._n == 0

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __repr__(self) -> str:
        return f"SampleDesign(n={self._n}, dtype={self._data.dtype})"
