"""
Exact combinatorics.

Public API:
    factorial(x)      - x!
    combination(n, k) - n choose k
"""

from pystatskit.combinatorics._exact import factorial, combination

__all__ = [
    "factorial",
    "combination",
]
