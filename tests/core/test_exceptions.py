"""
Tests for PyLstSq exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLstSqError)
    - Diagnostic attributes on FactorizationError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylstsq.core.exceptions import (
    DimensionError,
    FactorizationError,
    NumericalError,
    PyLstSqError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLstSqError."""

    def test_validation_error_is_pylstsq_error(self):
        with pytest.raises(PyLstSqError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_numerical_error_is_pylstsq_error(self):
        with pytest.raises(PyLstSqError):
            raise NumericalError("computation failed")

    def test_factorization_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise FactorizationError("not PD")

    def test_factorization_error_is_not_validation_error(self):
        err = FactorizationError("not PD")
        assert not isinstance(err, ValidationError)

    def test_dimension_error_is_not_numerical_error(self):
        err = DimensionError("wrong shape")
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# FactorizationError
# ═══════════════════════════════════════════════════════════════════════


class TestFactorizationError:
    """FactorizationError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = FactorizationError(
            "M'M is not positive definite",
            matrix_name="M'M",
            order=3,
        )
        assert str(err) == "M'M is not positive definite"
        assert err.matrix_name == "M'M"
        assert err.order == 3

    def test_defaults_are_none(self):
        err = FactorizationError("not PD")
        assert err.matrix_name is None
        assert err.order is None

    def test_catchable_with_attributes(self):
        with pytest.raises(FactorizationError) as exc_info:
            raise FactorizationError("not PD", matrix_name="A", order=1)
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.order == 1
