"""
Shared parameter validation for discrete distributions.

Each validator returns the normalised value so setters can stage it,
and only assign once every check has passed.
"""

from __future__ import annotations

from typing import Any

from pystatskit.core.exceptions import ValidationError
from pystatskit.core.validation import (
    check_integer, check_non_negative, check_probability,
)


def validate_trials(trials: Any) -> int:
    """Number of trials: a non-negative integer."""
    trials = check_integer(trials, "trials")
    check_non_negative(trials, "trials")
    return trials


def validate_success_probability(p: Any, *, allow_zero: bool = True) -> float:
    """Probability of success: in [0, 1], or (0, 1] when zero is excluded."""
    return check_probability(p, "success_probability", allow_zero=allow_zero)


def validate_interval(low: Any, high: Any) -> tuple[int, int]:
    """Closed integer interval [low, high] with low <= high."""
    low = check_integer(low, "low")
    high = check_integer(high, "high")
    if low > high:
        raise ValidationError(
            f"interval: low must not exceed high, got low={low}, high={high}"
        )
    return low, high
