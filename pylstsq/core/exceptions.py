"""
Exception hierarchy for PyLstSq.

All exceptions inherit from PyLstSqError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLstSqError(Exception):
    """Base exception for all PyLstSq errors."""
    pass


class ValidationError(PyLstSqError):
    """
    Input validation failed.

    Raised when user-provided inputs (arrays, weights, buffers) fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised before any numeric work when array shapes don't match expected
    dimensions, e.g. M and b with different row counts, a non-square
    factorization input, or a scratch buffer of the wrong shape.
    """
    pass


class NumericalError(PyLstSqError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class FactorizationError(NumericalError):
    """
    Cholesky factorization met a non-positive pivot.

    Raised when the (possibly regularized) matrix handed to the Cholesky
    primitive is not numerically positive definite, e.g. the Gram matrix
    of a rank-deficient or under-determined system. Never retried
    internally: adding regularization is the caller's decision.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        order: 1-based order of the leading minor that failed, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        order: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.order = order
