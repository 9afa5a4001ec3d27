"""
Statistics: on-demand descriptive statistics over a single sample.

The engine owns a validated SampleDesign and computes each statistic
when asked. Values and the population flag can be replaced through
fluent setters; replacement swaps in a freshly validated design, so a
rejected update leaves the engine exactly as it was.

median() sorts a copy, never the stored sample, so concurrent readers
of one engine are safe. Setters still need external locking if an
instance is shared with writers.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Generic, Iterable, Literal, TypeVar, TYPE_CHECKING
import math
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatskit.core.exceptions import EmptyDataError, ValidationError
from pystatskit.core.validation import check_choice
from pystatskit.descriptive.design import SampleDesign

if TYPE_CHECKING:
    from pystatskit.descriptive.solution import DescriptiveSolution


T = TypeVar('T', int, float)

TieBreak = Literal['first', 'smallest']
TIE_BREAKS = ('first', 'smallest')


def _check_population_flag(population_data: Any) -> bool:
    if not isinstance(population_data, (bool, np.bool_)):
        raise ValidationError(
            f"population_data: expected bool, got {type(population_data).__name__}"
        )
    return bool(population_data)


class Statistics(Generic[T]):
    """
    Descriptive statistics engine, generic over the sample's number type.

    Parameters
    ----------
    values : array-like, optional
        Flat sequence of ints or floats. Omit for an empty engine.
    population_data : bool
        True (default) if the values are a whole population, False if they
        are a sample from a larger one. Only variance() depends on it.

    Examples
    --------
    >>> stats = Statistics([1, 2, 3, 4, 5])
    >>> stats.mean(), stats.variance()
    (3.0, 2.0)
    >>> stats.set_values([10, 20]).set_population_data(False).variance()
    50.0
    """

    def __init__(
        self,
        values: ArrayLike | None = None,
        population_data: bool = True,
    ):
        design = SampleDesign.from_array(() if values is None else values)
        flag = _check_population_flag(population_data)
        self._design = design
        self._population_data = flag

    @classmethod
    def from_array(
        cls, values: ArrayLike, population_data: bool = True,
    ) -> Statistics:
        """Build an engine from an array-like (list, tuple, ndarray)."""
        return cls(values, population_data=population_data)

    @classmethod
    def from_iterable(
        cls, iterable: Iterable[T], population_data: bool = True,
    ) -> Statistics[T]:
        """
        Build an engine from any iterable range of values.

        Accepts one-shot iterators (generators, itertools.islice windows
        of a larger sequence); the iterable is consumed once.
        """
        engine = cls(population_data=population_data)
        engine._design = SampleDesign.from_iterable(iterable)
        return engine

    # --- Accessors ---

    @property
    def values(self) -> NDArray[np.number[Any]]:
        """Copy of the stored sample, in stored order."""
        return self._design.data.copy()

    @property
    def population_data(self) -> bool:
        return self._population_data

    @property
    def size(self) -> int:
        """Number of observations."""
        return self._design.n

    def __len__(self) -> int:
        return self._design.n

    # --- Fluent setters ---

    def set_values(self, values: ArrayLike) -> Statistics[T]:
        """
        Replace the sample wholesale.

        The new values are validated before the old ones are dropped; on
        failure the engine keeps its previous sample. Returns self.
        """
        self._design = SampleDesign.from_array(values)
        return self

    def set_population_data(self, population_data: bool = True) -> Statistics[T]:
        """Set whether the values are a population (True) or a sample. Returns self."""
        self._population_data = _check_population_flag(population_data)
        return self

    # --- Statistics ---

    def _ensure_not_empty(self, operation: str) -> None:
        if self._design.is_empty:
            raise EmptyDataError(
                f"{operation}: undefined for an empty sample", operation=operation
            )

    def sum(self, transform: Callable[[T], float] | None = None) -> float:
        """
        Sum of transform(v) over the sample; plain sum when transform is None.

        Returns 0.0 for an empty sample.
        """
        data = self._design.data
        if transform is None:
            return float(np.sum(data, dtype=np.float64))
        return float(np.sum(
            [float(transform(v)) for v in data.tolist()], dtype=np.float64
        ))

    def mean(self) -> float:
        """Arithmetic mean; 0.0 for an empty sample."""
        if self._design.is_empty:
            return 0.0
        return self.sum() / self._design.n

    def median(self) -> float:
        """
        Middle value of the sorted sample, or the average of the two middle
        values when the size is even.

        Raises
        ------
        EmptyDataError
            If the sample is empty.
        """
        self._ensure_not_empty('median')

        ordered = np.sort(self._design.data)
        mid = ordered.shape[0] // 2
        if ordered.shape[0] % 2 == 0:
            return (float(ordered[mid - 1]) + float(ordered[mid])) / 2
        return float(ordered[mid])

    def mode(self, tie_break: TieBreak = 'first') -> T:
        """
        Most frequent value.

        Parameters
        ----------
        tie_break : str
            'first' (default): among equally frequent values, the one that
            appears first in the stored sample. 'smallest': the smallest.

        Raises
        ------
        EmptyDataError
            If the sample is empty.
        ValidationError
            If tie_break is not a known strategy.
        """
        check_choice(tie_break, TIE_BREAKS, "tie_break")
        self._ensure_not_empty('mode')

        # Counter keeps first-seen order and most_common() is stable
        frequency = Counter(self._design.data.tolist())
        if tie_break == 'first':
            return frequency.most_common(1)[0][0]

        top = max(frequency.values())
        return min(value for value, count in frequency.items() if count == top)

    def amplitude(self) -> T:
        """
        Range of the sample, max - min, in the sample's own number type.

        Raises
        ------
        EmptyDataError
            If the sample is empty.
        """
        self._ensure_not_empty('amplitude')
        data = self._design.data
        # Python ints do not wrap, unlike the sample dtype
        return data.max().item() - data.min().item()

    value_range = amplitude

    def variance(self) -> float:
        """
        Mean squared deviation from the mean.

        Divides by N for population data and by N - 1 otherwise. Returns
        0.0 for an empty sample. A single-value sample with
        population_data=False has N - 1 == 0: the result is NaN and a
        UserWarning is emitted.
        """
        n = self._design.n
        if n == 0:
            return 0.0

        deviations = self._design.data.astype(np.float64) - self.mean()
        squares = float(np.dot(deviations, deviations))

        denominator = n if self._population_data else n - 1
        if denominator == 0:
            warnings.warn(
                "variance: sample variance of a single observation divides by "
                "zero (N - 1 = 0); result is NaN",
                stacklevel=2,
            )
            return math.nan
        return squares / denominator

    def standard_deviation(self) -> float:
        """Square root of variance(); NaN propagates."""
        return math.sqrt(self.variance())

    def coefficient_of_variation(self) -> float:
        """standard_deviation() / mean(), or 0.0 when the mean is exactly 0."""
        mean = self.mean()
        if mean == 0:
            return 0.0
        return self.standard_deviation() / mean

    def summary(self) -> DescriptiveSolution:
        """All statistics at once, via describe()."""
        from pystatskit.descriptive.solvers import describe

        return describe(self._design, population_data=self._population_data)

    def __repr__(self) -> str:
        kind = "population" if self._population_data else "sample"
        return f"Statistics(n={self._design.n}, dtype={self._design.dtype}, {kind})"
