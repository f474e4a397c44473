"""
Numerical precision constants and utilities.

Provides machine epsilon and a cheap conditioning estimate taken from a
Cholesky factor, used to flag ill-conditioned normal equations.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Complex dtypes report the epsilon of their real component.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def factor_condition_estimate(L: NDArray[np.inexact[Any]]) -> float:
    """
    Lower bound on the condition number of A from its Cholesky factor.

    For A = L L^H, cond(A) >= (max |L_ii| / min |L_ii|)^2. The bound costs
    a pass over the diagonal, no extra factorization.

    Args:
        L: Lower Cholesky factor (n x n)

    Returns:
        Condition number estimate. Returns inf if a diagonal entry is zero.
    """
    d = np.abs(np.diagonal(L))
    if d.size == 0:
        return 1.0
    d_min = float(d.min())
    if d_min == 0.0:
        return np.inf
    return float((d.max() / d_min) ** 2)
