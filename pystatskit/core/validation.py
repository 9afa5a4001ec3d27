"""
Input validation utilities for pystatskit.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Real
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatskit.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.number[Any]]:
    """
    Validate and convert input to a numeric numpy array.

    Unlike a float-only pipeline, the dtype chosen by numpy is kept: integer
    samples stay integer so mode() and amplitude() answer in the caller's
    type. The input is always copied.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with integer or floating dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.array(array, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numeric data"
        )

    # Rejects strings, bytes, datetimes and booleans
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_finite(array: NDArray[np.number[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.number[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_sample(values: ArrayLike, name: str) -> NDArray[np.number[Any]]:
    """
    Validate a sample: flat, real numeric, finite.

    An empty sequence is a valid (empty) sample.

    Args:
        values: Sequence or array of numbers
        name: Parameter name for error messages

    Returns:
        Private 1D copy of the sample

    Raises:
        ValidationError: If the sample is non-numeric or non-finite
        DimensionError: If the sample is not 1D
    """
    array = check_array(values, name)
    check_1d(array, name)
    check_finite(array, name)
    return array


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (bool excluded) and return it as int.

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_non_negative(value: int, name: str) -> None:
    """
    Verify an integer is >= 0.

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")


def check_probability(
    value: Any,
    name: str,
    *,
    allow_zero: bool = True,
) -> float:
    """
    Verify value is a real number in [0, 1] (or (0, 1] without allow_zero).

    NaN fails the interval comparison and is rejected.

    Args:
        value: Candidate probability
        name: Parameter name for error messages
        allow_zero: Whether 0 is admissible

    Returns:
        The probability as float

    Raises:
        ValidationError: If value is not a real number or lies outside the interval
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    p = float(value)
    if allow_zero:
        if not (0.0 <= p <= 1.0):
            raise ValidationError(f"{name}: must be in [0, 1], got {value}")
    elif not (0.0 < p <= 1.0):
        raise ValidationError(f"{name}: must be in (0, 1], got {value}")
    return p


def check_choice(value: str, choices: Iterable[str], name: str) -> str:
    """
    Verify value is one of the allowed option strings.

    Raises:
        ValidationError: If value is not among choices
    """
    allowed = tuple(choices)
    if value not in allowed:
        raise ValidationError(
            f"{name}: must be one of {allowed}, got {value!r}"
        )
    return value
