"""
Core infrastructure for pystatskit.

Shared abstractions used by the domain submodules (descriptive,
distributions, combinatorics).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
"""

from pystatskit.core.result import Result
from pystatskit.core.exceptions import (
    PyStatsKitError,
    ValidationError,
    DimensionError,
    EmptyDataError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyStatsKitError",
    "ValidationError",
    "DimensionError",
    "EmptyDataError",
]
