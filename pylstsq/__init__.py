"""
PyLstSq: dense least squares and pseudo-inverses for Python.

Normal-equations solvers (plain, uniformly and per-variable regularized)
and the Moore-Penrose pseudo-inverse, built on in-place Cholesky
factorization. Real and complex data are both supported.

Submodules:
    leastsq: Solvers, pseudo-inverse and fit()
    core: Exceptions, validation, result envelope, linear algebra kernels
"""

__version__ = "0.1.0"

from pylstsq.leastsq import (
    solve,
    solve_regularized,
    solve_regularized_weighted,
    pseudo_inverse,
    pseudo_inverse_transposed,
    fit,
)
from pylstsq.core.exceptions import (
    PyLstSqError,
    ValidationError,
    DimensionError,
    NumericalError,
    FactorizationError,
)

__all__ = [
    "__version__",
    # Solvers
    "solve",
    "solve_regularized",
    "solve_regularized_weighted",
    "pseudo_inverse",
    "pseudo_inverse_transposed",
    "fit",
    # Exceptions
    "PyLstSqError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "FactorizationError",
]
