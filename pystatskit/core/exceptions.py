"""
Exception hierarchy for pystatskit.

All exceptions inherit from PyStatsKitError to allow catching any
library-specific error. ValidationError additionally inherits from
ValueError so callers treating bad arguments generically still catch it.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyStatsKitError(Exception):
    """Base exception for all pystatskit errors."""
    pass


class ValidationError(PyStatsKitError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: distribution
    parameters outside their domain, negative combinatorial arguments,
    non-numeric samples, unknown option strings.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not a flat (1-dimensional) sequence.
    """
    pass


class EmptyDataError(PyStatsKitError):
    """
    Statistic is undefined on an empty sample.

    Raised by median, mode and amplitude. Statistics with a natural empty
    value (sum, mean, variance, ...) return 0 instead.

    Attributes:
        operation: Name of the statistic that was requested
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
