"""
Least squares by the normal equations.

Solves min_x ||Mx - b||^2 (optionally + Tikhonov terms) via:
    1. A = M^H M            formed into the caller's work buffer
    2. A += diag(reg)       optional regularization
    3. A = L L^H            Cholesky, in place
    4. x = M^H b            formed into the output buffer
    5. L L^H x = M^H b      back-solve, in place

For real data M^H is the plain transpose. The work buffer holds the
Cholesky factor on return; callers solving many problems with the same
shape can pass the same work/out buffers every time. Buffers must not be
shared between concurrent calls.

A right-hand side of shape (n, k) solves k problems against a single
factorization.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylstsq.core.compute.linalg import (
    cholesky_decompose,
    cholesky_solve,
    gram_matrix,
    transpose_strategy,
)
from pylstsq.core.exceptions import DimensionError, FactorizationError
from pylstsq.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_real,
    check_scalar,
)
from pylstsq.leastsq._common import add_to_diagonal, as_matrix, scratch


def solve(
    M: ArrayLike,
    b: ArrayLike,
    *,
    out: NDArray[np.inexact[Any]] | None = None,
    work: NDArray[np.inexact[Any]] | None = None,
) -> NDArray[np.inexact[Any]]:
    """
    Solve the over-determined least-squares problem Mx = b.

    Args:
        M: System matrix (n x p), real or complex, full column rank
        b: Right-hand side (n,) or (n, k)
        out: Optional buffer for x, shape (p,) or (p, k)
        work: Optional scratch buffer (p x p); holds the Cholesky factor of
            M^H M on return

    Returns:
        x (out, if given)

    Raises:
        DimensionError: If M and b have different row counts, or a buffer
            has the wrong shape
        FactorizationError: If M^H M is not positive definite (M rank
            deficient, or n < p)

    Example:
        >>> M = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
        >>> solve(M, [1.0, 1.0, 3.0])
        array([1.33333333, 1.33333333])
    """
    return _solve_normal_equations(M, b, None, out, work)


def solve_regularized(
    M: ArrayLike,
    b: ArrayLike,
    reg_weight: float,
    *,
    out: NDArray[np.inexact[Any]] | None = None,
    work: NDArray[np.inexact[Any]] | None = None,
) -> NDArray[np.inexact[Any]]:
    """
    Solve the regularized problem min ||Mx - b||^2 + reg_weight * ||x||^2.

    reg_weight is added to every diagonal entry of M^H M before
    factorization. Any reg_weight > 0 makes the system positive definite,
    including rank-deficient and under-determined M.

    Args:
        M: System matrix (n x p)
        b: Right-hand side (n,) or (n, k)
        reg_weight: Finite real scalar added to the diagonal
        out: Optional buffer for x, shape (p,) or (p, k)
        work: Optional scratch buffer (p x p)

    Returns:
        x (out, if given)

    Raises:
        ValidationError: If reg_weight is not a finite real scalar
        DimensionError: If shapes are inconsistent
        FactorizationError: If the regularized matrix is still not
            positive definite (only possible for reg_weight <= 0)
    """
    reg = check_array(reg_weight, 'reg_weight')
    check_scalar(reg, 'reg_weight')
    check_real(reg, 'reg_weight')
    check_finite(reg, 'reg_weight')
    return _solve_normal_equations(M, b, float(reg), out, work)


def solve_regularized_weighted(
    M: ArrayLike,
    b: ArrayLike,
    weights: ArrayLike,
    *,
    out: NDArray[np.inexact[Any]] | None = None,
    work: NDArray[np.inexact[Any]] | None = None,
) -> NDArray[np.inexact[Any]]:
    """
    Solve min ||Mx - b||^2 + sum_i weights[i] * |x_i|^2.

    Diagonal entry i of M^H M receives weights[i], so each coefficient can
    be regularized with its own strength (zero leaves it unregularized).

    Args:
        M: System matrix (n x p)
        b: Right-hand side (n,) or (n, k)
        weights: Finite real vector of length p
        out: Optional buffer for x, shape (p,) or (p, k)
        work: Optional scratch buffer (p x p)

    Returns:
        x (out, if given)

    Raises:
        ValidationError: If weights are complex or non-finite
        DimensionError: If weights length differs from the columns of M,
            or other shapes are inconsistent
        FactorizationError: If the regularized matrix is not positive definite
    """
    w = check_array(weights, 'weights')
    check_1d(w, 'weights')
    check_real(w, 'weights')
    check_finite(w, 'weights')
    return _solve_normal_equations(M, b, w, out, work)


def _solve_normal_equations(
    M: ArrayLike,
    b: ArrayLike,
    diagonal: float | NDArray[np.floating[Any]] | None,
    out: NDArray[np.inexact[Any]] | None,
    work: NDArray[np.inexact[Any]] | None,
) -> NDArray[np.inexact[Any]]:
    """Shared pipeline: validate, form M^H M, regularize, factorize, solve."""
    # === Input Validation ===
    M_arr = as_matrix(M, 'M')
    b_arr = check_array(b, 'b')
    if b_arr.ndim not in (1, 2):
        raise DimensionError(
            f"b: expected 1D or 2D array, got {b_arr.ndim}D with shape {b_arr.shape}"
        )
    check_consistent_length(M_arr, b_arr, names=('M', 'b'))

    n, p = M_arr.shape
    if isinstance(diagonal, np.ndarray) and diagonal.shape[0] != p:
        raise DimensionError(
            f"weights: has {diagonal.shape[0]} entries, M has {p} columns"
        )

    # M^H M has rank at most n; rounding can still leave a tiny positive
    # pivot, so the rank deficiency is reported here rather than by potrf
    if diagonal is None and n < p:
        raise FactorizationError(
            f"M'M is not positive definite: M has {n} rows and {p} columns, "
            f"so its leading minor of order {n + 1} is singular; "
            f"add regularization for an under-determined system",
            matrix_name="M'M",
            order=n + 1,
        )

    # The Gram matrix only carries the dtype of M and the regularization
    work_dtype = M_arr.dtype if diagonal is None else np.result_type(M_arr.dtype, diagonal)
    work = scratch(work, (p, p), work_dtype, 'work')
    out = scratch(
        out, (p,) + b_arr.shape[1:], np.result_type(work_dtype, b_arr.dtype), 'out'
    )

    strategy = transpose_strategy(M_arr.dtype)

    # === Normal Equations Matrix ===
    gram_matrix(M_arr, side='columns', out=work, strategy=strategy)
    if diagonal is not None:
        add_to_diagonal(work, diagonal)
    cholesky_decompose(work, matrix_name="M'M")

    # === Right-hand Side and Back-solve ===
    np.matmul(strategy.apply(M_arr), b_arr, out=out)
    return cholesky_solve(work, out)
