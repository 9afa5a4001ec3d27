"""
Exact factorial and binomial coefficient.

Both work on Python integers, so results are exact at any size. The cost
of that exactness shows up downstream: a count too large for a float64
raises OverflowError as soon as it meets floating-point probability
arithmetic. No guard is placed against that.

This is a standalone utility module (no Design/Backend pipeline).
"""

from __future__ import annotations

from pystatskit.core.exceptions import ValidationError
from pystatskit.core.validation import check_integer


def factorial(x: int) -> int:
    """
    Exact factorial x!.

    Parameters
    ----------
    x : int
        Non-negative integer.

    Returns
    -------
    int
        x!, with 0! == 1! == 1.

    Raises
    ------
    ValidationError
        If x is negative or not an integer.
    """
    x = check_integer(x, "x")
    if x < 0:
        raise ValidationError(
            f"x: factorial is not defined for negative numbers, got {x}"
        )

    result = 1
    for i in range(2, x + 1):
        result *= i
    return result


def combination(n: int, k: int) -> int:
    """
    Number of k-subsets of an n-set, n! / ((n-k)! k!).

    There is no separate k <= n check: k > n makes n - k negative and the
    factorial of it raises.

    Parameters
    ----------
    n : int
        Size of the set.
    k : int
        Size of the subsets.

    Returns
    -------
    int
        The exact binomial coefficient C(n, k).

    Raises
    ------
    ValidationError
        If n, k or n - k is negative, or either argument is not an integer.
    """
    n = check_integer(n, "n")
    k = check_integer(k, "k")
    return factorial(n) // (factorial(n - k) * factorial(k))
