"""
Core infrastructure for PyLstSq.

This module provides shared abstractions and utilities used by the
least-squares solvers.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input and buffer validators
    compute: Timing, precision, tolerances, linear algebra kernels
"""

from pylstsq.core.result import Result
from pylstsq.core.exceptions import (
    PyLstSqError,
    ValidationError,
    DimensionError,
    NumericalError,
    FactorizationError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyLstSqError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "FactorizationError",
]
