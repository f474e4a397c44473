"""
Linear algebra kernels for PyLstSq.

All functions follow these conventions:
    - CPU only, NumPy/SciPy (LAPACK under the hood)
    - Work happens in caller-supplied buffers; nothing is cached between calls
    - Errors are raised immediately with clear messages

Submodules:
    transpose: Real/complex transpose strategy and Gram matrices
    cholesky: In-place Cholesky factorization, solve and inversion
"""

from pylstsq.core.compute.linalg.transpose import (
    TransposeStrategy,
    transpose_strategy,
    gram_matrix,
)
from pylstsq.core.compute.linalg.cholesky import (
    cholesky_decompose,
    cholesky_solve,
    cholesky_inverse,
)

__all__ = [
    # Transpose strategy
    "TransposeStrategy",
    "transpose_strategy",
    "gram_matrix",
    # Cholesky
    "cholesky_decompose",
    "cholesky_solve",
    "cholesky_inverse",
]
