"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pystatskit.core.result import Result

if TYPE_CHECKING:
    from pystatskit.descriptive.design import SampleDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    median, mode and amplitude are None when the sample is empty; the
    remaining statistics fall back to 0.0 in that case.
    """
    n: int
    population_data: bool
    total: float
    mean: float
    variance: float
    sd: float
    coefficient_of_variation: float
    median: float | None = None
    mode: int | float | None = None
    amplitude: int | float | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    # --- Statistics ---

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def population_data(self) -> bool:
        return self._result.params.population_data

    @property
    def total(self) -> float:
        """Sum of the sample."""
        return self._result.params.total

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float | None:
        return self._result.params.median

    @property
    def mode(self) -> int | float | None:
        """Most frequent value (first-encountered on ties)."""
        return self._result.params.mode

    @property
    def amplitude(self) -> int | float | None:
        """Range, max - min."""
        return self._result.params.amplitude

    @property
    def variance(self) -> float:
        """Variance, divisor N (population) or N - 1 (sample)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        return self._result.params.sd

    @property
    def coefficient_of_variation(self) -> float:
        return self._result.params.coefficient_of_variation

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def computed(self) -> tuple[str, ...]:
        """Names of the statistics that have a value."""
        return self._result.info["computed"]

    @property
    def undefined(self) -> tuple[str, ...]:
        """Names of the statistics left as None (empty sample)."""
        return self._result.info["undefined"]

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text table of every statistic."""
        kind = "population" if self.population_data else "sample"
        rows = [
            ("N", str(self.n)),
            ("Sum", f"{self.total:.6f}"),
            ("Mean", f"{self.mean:.6f}"),
            ("Median", "NA" if self.median is None else f"{self.median:.6f}"),
            ("Mode", "NA" if self.mode is None else str(self.mode)),
            ("Range", "NA" if self.amplitude is None else str(self.amplitude)),
            ("Variance", f"{self.variance:.6f}"),
            ("Std. Dev.", f"{self.sd:.6f}"),
            ("Coef. Var.", f"{self.coefficient_of_variation:.6f}"),
        ]

        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)

        lines = [f"Descriptive Statistics ({kind}):"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value.rjust(value_width)}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        kind = "population" if self.population_data else "sample"
        return f"DescriptiveSolution(n={self.n}, {kind}, mean={self.mean:.6g})"
