"""
Tests for the pystatskit exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyStatsKitError)
    - ValidationError doubles as ValueError
    - EmptyDataError carries the failing operation
"""

import pytest

from pystatskit.core.exceptions import (
    DimensionError,
    EmptyDataError,
    PyStatsKitError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyStatsKitError."""

    def test_validation_error_is_pystatskit_error(self):
        with pytest.raises(PyStatsKitError):
            raise ValidationError("bad input")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_empty_data_error_is_pystatskit_error(self):
        with pytest.raises(PyStatsKitError):
            raise EmptyDataError("empty")

    def test_empty_data_error_is_not_validation_error(self):
        """Empty data is a state problem, not a bad argument."""
        err = EmptyDataError("empty")
        assert not isinstance(err, ValidationError)
        assert not isinstance(err, ValueError)


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestEmptyDataError:

    def test_message(self):
        err = EmptyDataError("median: undefined for an empty sample")
        assert str(err) == "median: undefined for an empty sample"

    def test_operation_default_none(self):
        assert EmptyDataError("empty").operation is None

    def test_operation_attribute(self):
        with pytest.raises(EmptyDataError) as exc_info:
            raise EmptyDataError("empty", operation="mode")
        assert exc_info.value.operation == "mode"
