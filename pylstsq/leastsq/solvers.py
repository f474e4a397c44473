"""
One-shot least-squares fitting.

This module provides the fit() function: validation, regularization
dispatch, diagnostics and result wrapping around the normal-equations
solvers.
"""

from typing import Any
import warnings

import numpy as np
from numpy.typing import ArrayLike

from pylstsq.core.compute.precision import factor_condition_estimate
from pylstsq.core.compute.timing import Timer
from pylstsq.core.compute.tolerances import gram_condition_threshold, select_tolerance
from pylstsq.core.result import Result
from pylstsq.core.validation import check_2d, check_array, check_finite
from pylstsq.leastsq.normal import (
    solve,
    solve_regularized,
    solve_regularized_weighted,
)
from pylstsq.leastsq.solution import LeastSquaresParams, LeastSquaresSolution


def fit(
    M: ArrayLike,
    b: ArrayLike,
    *,
    regularization: float | ArrayLike | None = None,
) -> LeastSquaresSolution:
    """
    Fit a (possibly regularized) least-squares model.

    Solves:
        min_x ||Mx - b||^2 + x^H diag(r) x

    where r is zero (no regularization), a constant (uniform) or a
    per-variable vector (weighted).

    Args:
        M: System matrix (n x p). Can be any array-like, real or complex.
        b: Right-hand side (n,) or (n, k). An (n, 1) column is flattened.
        regularization:
            - None: plain normal equations (M must have full column rank)
            - scalar: added to every diagonal entry of M'M
            - vector of length p: diagonal entry i receives r[i]

    Returns:
        LeastSquaresSolution with coefficients, residuals and diagnostics

    Raises:
        ValidationError: If inputs are invalid or non-finite
        DimensionError: If M and b have inconsistent dimensions
        FactorizationError: If the (regularized) normal matrix is not
            positive definite

    Example:
        >>> result = fit(M, b, regularization=1e-3)
        >>> print(result.coefficients)
        >>> print(result.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    M_arr = check_array(M, 'M')
    check_2d(M_arr, 'M')
    check_finite(M_arr, 'M')
    b_arr = check_array(b, 'b')
    check_finite(b_arr, 'b')

    if b_arr.ndim == 2 and b_arr.shape[1] == 1:
        b_arr = b_arr.ravel()

    n, p = M_arr.shape
    # Same rule as the solvers: the Gram matrix takes the dtype of M,
    # widened only by a weight vector
    work_dtype = M_arr.dtype
    if regularization is not None and np.ndim(regularization) != 0:
        work_dtype = np.result_type(
            work_dtype, check_array(regularization, 'weights').dtype
        )
    work = np.empty((p, p), dtype=work_dtype)

    timer = Timer()
    timer.start()

    # === Solve ===
    with timer.section('solve'):
        if regularization is None:
            kind = 'none'
            coefficients = solve(M_arr, b_arr, work=work)
        elif np.ndim(regularization) == 0:
            kind = 'uniform'
            coefficients = solve_regularized(M_arr, b_arr, regularization, work=work)
        else:
            kind = 'weighted'
            coefficients = solve_regularized_weighted(
                M_arr, b_arr, regularization, work=work
            )

    # === Residuals ===
    with timer.section('residuals'):
        fitted_values = M_arr @ coefficients
        residuals = b_arr - fitted_values
        rss = np.sum(np.abs(residuals) ** 2, axis=0)
        if rss.ndim == 0:
            rss = float(rss)

    # === Diagnostics ===
    with timer.section('diagnostics'):
        # work holds the Cholesky factor of the normal matrix
        condition_estimate = factor_condition_estimate(work)
        threshold = gram_condition_threshold(work.dtype)
        is_ill_conditioned = condition_estimate > threshold
        tolerance = select_tolerance(work.dtype, is_ill_conditioned)
        issues = _collect_warnings(n, p, kind, condition_estimate, threshold)

    timer.stop()

    for message in issues:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    params = LeastSquaresParams(
        coefficients=coefficients,
        residuals=residuals,
        fitted_values=fitted_values,
        rss=rss,
        n_observations=n,
        n_variables=p,
    )

    info: dict[str, Any] = {
        'method': 'cholesky',
        'regularization': kind,
        'condition_estimate': condition_estimate,
        'tolerance_tier': tolerance.name,
        'complex': bool(np.iscomplexobj(coefficients)),
    }

    result = Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name='cpu_cholesky',
        warnings=tuple(issues),
    )
    return LeastSquaresSolution(_result=result)


def _collect_warnings(
    n: int,
    p: int,
    kind: str,
    condition_estimate: float,
    threshold: float,
) -> list[str]:
    """Non-fatal issues worth reporting alongside a successful fit."""
    issues = []
    if condition_estimate > threshold:
        issues.append(
            f"Normal matrix is ill-conditioned (cond(M'M) >= "
            f"{condition_estimate:.2e}); coefficients may be inaccurate. "
            f"Consider regularization."
        )
    if n < p and kind != 'none':
        issues.append(
            f"Under-determined system ({n} observations, {p} variables): "
            f"the solution is determined by the regularization."
        )
    return issues
