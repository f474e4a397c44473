"""
In-place Cholesky factorization, solve and inversion.

Every routine works on a caller-supplied buffer: the matrix is replaced by
its lower factor, the right-hand side by the solution, the factor by the
inverse. This lets callers reuse one scratch matrix across many problems
(e.g. one solve per voxel) without hidden allocation or state.

LAPACK (via SciPy) does the arithmetic:
    potrf: A = L L^H
    potrs: solve L L^H x = b    (through scipy.linalg.cho_solve)
    potri: A^{-1} from L

A non-positive pivot raises FactorizationError immediately. There is no
retry and no fallback; regularizing the matrix is the caller's call.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import cho_solve, get_lapack_funcs

from pylstsq.core.exceptions import DimensionError, FactorizationError, ValidationError
from pylstsq.core.validation import check_square


def _check_factor(A: Any, name: str) -> None:
    """A must be an inexact, square ndarray."""
    if not isinstance(A, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray, got {type(A).__name__}"
        )
    check_square(A, name)
    if not np.issubdtype(A.dtype, np.inexact):
        raise ValidationError(
            f"{name}: dtype {A.dtype} is not floating point; "
            f"the Cholesky routines need a float or complex matrix"
        )


def _check_inplace_matrix(A: Any, name: str) -> None:
    """A must be a writeable, inexact, square ndarray."""
    _check_factor(A, name)
    if not A.flags.writeable:
        raise ValidationError(f"{name}: buffer is read-only")


def cholesky_decompose(
    A: NDArray[np.inexact[Any]],
    *,
    matrix_name: str = 'A',
) -> NDArray[np.inexact[Any]]:
    """
    Cholesky-factorize a symmetric (Hermitian) positive definite matrix in place.

    Only the lower triangle of A is read. On return A holds the lower factor
    L, with the strict upper triangle zeroed, so that L @ L^H equals the
    original matrix.

    Args:
        A: Square matrix buffer (n x n), overwritten with L
        matrix_name: Name used in error messages

    Returns:
        A, now holding L

    Raises:
        DimensionError: If A is not square
        ValidationError: If A is not a writeable float/complex ndarray
        FactorizationError: If a pivot is non-positive (A not positive definite)
    """
    _check_inplace_matrix(A, matrix_name)

    potrf, = get_lapack_funcs(('potrf',), (A,))
    L, info = potrf(A, lower=True, clean=True, overwrite_a=False)

    if info > 0:
        raise FactorizationError(
            f"{matrix_name} is not positive definite: leading minor of "
            f"order {info} (of {A.shape[0]}) has a non-positive pivot",
            matrix_name=matrix_name,
            order=int(info),
        )
    if info < 0:
        raise ValueError(f"potrf: illegal value in argument {-info}")

    A[...] = L
    return A


def cholesky_solve(
    L: NDArray[np.inexact[Any]],
    b: NDArray[np.inexact[Any]],
) -> NDArray[np.inexact[Any]]:
    """
    Solve L L^H x = b in place, given an already factorized buffer.

    Args:
        L: Lower Cholesky factor (n x n), as left by cholesky_decompose()
        b: Right-hand side, shape (n,) or (n, k); overwritten with x

    Returns:
        b, now holding x

    Raises:
        DimensionError: If L is not square, or b is not 1D/2D with as
            many rows as L
        ValidationError: If L or b is not an ndarray of a suitable dtype,
            or b is read-only
    """
    _check_factor(L, 'L')
    if not isinstance(b, np.ndarray):
        raise ValidationError(
            f"b: expected numpy.ndarray, got {type(b).__name__}"
        )
    if not b.flags.writeable:
        raise ValidationError("b: buffer is read-only")
    if b.ndim not in (1, 2):
        raise DimensionError(
            f"b: expected 1D or 2D array, got {b.ndim}D with shape {b.shape}"
        )
    if b.shape[0] != L.shape[0]:
        raise DimensionError(
            f"b: has {b.shape[0]} rows, factor has order {L.shape[0]}"
        )
    result_dtype = np.result_type(L.dtype, b.dtype)
    if not np.can_cast(result_dtype, b.dtype, casting='safe'):
        raise ValidationError(
            f"b: dtype {b.dtype} cannot hold {result_dtype} solution"
        )

    b[...] = cho_solve((L, True), b, check_finite=False)
    return b


def cholesky_inverse(
    L: NDArray[np.inexact[Any]],
) -> NDArray[np.inexact[Any]]:
    """
    Replace a Cholesky factor with the full inverse of the original matrix.

    Both triangles of the result are filled (the inverse is Hermitian).

    Args:
        L: Lower Cholesky factor (n x n), overwritten with A^{-1}

    Returns:
        L, now holding A^{-1}

    Raises:
        FactorizationError: If the factor has a zero diagonal entry
    """
    _check_inplace_matrix(L, 'L')

    potri, = get_lapack_funcs(('potri',), (L,))
    inv, info = potri(L, lower=True, overwrite_c=False)

    if info > 0:
        raise FactorizationError(
            f"Cholesky factor is singular: diagonal entry {info} is zero",
            matrix_name='L',
            order=int(info),
        )
    if info < 0:
        raise ValueError(f"potri: illegal value in argument {-info}")

    # potri fills only the lower triangle
    lower = np.tril(inv)
    L[...] = lower + np.tril(lower, -1).conj().T
    return L
