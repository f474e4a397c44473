"""
Moore-Penrose pseudo-inverse via Cholesky.

For M (n x p) with full rank in its smaller dimension:
    n >= p:  pinv(M) = (M^H M)^{-1} M^H      factorize p x p
    n <  p:  pinv(M) = M^H (M M^H)^{-1}      factorize n x n

Both are the same matrix; the branch only picks the smaller Gram matrix.
After factorization the full Gram inverse is formed in the work buffer,
then one multiplication with M^H gives the result.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylstsq.core.compute.linalg import (
    cholesky_decompose,
    cholesky_inverse,
    transpose_strategy,
)
from pylstsq.leastsq._common import as_matrix, scratch


def pseudo_inverse(
    M: ArrayLike,
    *,
    out: NDArray[np.inexact[Any]] | None = None,
    work: NDArray[np.inexact[Any]] | None = None,
) -> NDArray[np.inexact[Any]]:
    """
    Compute the Moore-Penrose pseudo-inverse of M.

    Called with M alone, allocates its own output and scratch buffers.

    Args:
        M: Matrix (n x p), real or complex
        out: Optional buffer for the result, shape (p, n)
        work: Optional scratch buffer (k x k) with k = min(n, p)

    Returns:
        pinv(M), shape (p, n) (out, if given)

    Raises:
        DimensionError: If a buffer has the wrong shape
        FactorizationError: If the Gram matrix in the smaller dimension is
            singular (M not of full rank min(n, p))

    Example:
        >>> pseudo_inverse([[2.0, 0.0], [0.0, 2.0]])
        array([[0.5, 0. ],
               [0. , 0.5]])
    """
    M_arr = as_matrix(M, 'M')
    Mt = transpose_strategy(M_arr.dtype).apply(M_arr)
    return _pseudo_inverse(M_arr, Mt, out, work)


def pseudo_inverse_transposed(
    Mt: ArrayLike,
    *,
    out: NDArray[np.inexact[Any]] | None = None,
    work: NDArray[np.inexact[Any]] | None = None,
) -> NDArray[np.inexact[Any]]:
    """
    Compute pinv(M) given Mt = M^H (the plain transpose for real data).

    For callers that already hold the transposed matrix. The result has
    the same shape as Mt.

    Args:
        Mt: Transposed matrix (p x n)
        out: Optional buffer for the result, shape (p, n)
        work: Optional scratch buffer (k x k) with k = min(n, p)

    Returns:
        pinv(M), shape (p, n) (out, if given)

    Raises:
        DimensionError: If a buffer has the wrong shape
        FactorizationError: If the chosen Gram matrix is singular
    """
    Mt_arr = as_matrix(Mt, 'Mt')
    M = transpose_strategy(Mt_arr.dtype).apply(Mt_arr)
    return _pseudo_inverse(M, Mt_arr, out, work)


def _pseudo_inverse(
    M: NDArray[np.inexact[Any]],
    Mt: NDArray[np.inexact[Any]],
    out: NDArray[np.inexact[Any]] | None,
    work: NDArray[np.inexact[Any]] | None,
) -> NDArray[np.inexact[Any]]:
    n_rows, n_cols = M.shape
    k = min(n_rows, n_cols)
    work = scratch(work, (k, k), M.dtype, 'work')
    out = scratch(out, Mt.shape, M.dtype, 'out')

    if n_rows < n_cols:
        np.matmul(M, Mt, out=work)
        cholesky_decompose(work, matrix_name="MM'")
        cholesky_inverse(work)
        return np.matmul(Mt, work, out=out)

    np.matmul(Mt, M, out=work)
    cholesky_decompose(work, matrix_name="M'M")
    cholesky_inverse(work)
    return np.matmul(work, Mt, out=out)
