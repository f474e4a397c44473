"""
Shared helpers for the least-squares solvers.

Scratch-buffer resolution and input preparation used by both the
normal-equations solvers and the pseudo-inverse.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylstsq.core.validation import (
    check_2d,
    check_array,
    check_buffer,
    check_nonempty,
)


def as_matrix(M: ArrayLike, name: str) -> NDArray[np.inexact[Any]]:
    """Convert and check a non-empty 2D float or complex matrix."""
    M_arr = check_array(M, name)
    check_2d(M_arr, name)
    check_nonempty(M_arr, name)
    return M_arr


def scratch(
    buffer: NDArray[np.inexact[Any]] | None,
    shape: tuple[int, ...],
    dtype: DTypeLike,
    name: str,
) -> NDArray[np.inexact[Any]]:
    """
    Return the caller's buffer after checking it, or allocate a fresh one.

    A supplied buffer is used as-is and will be overwritten; it is never
    reallocated behind the caller's back.
    """
    if buffer is None:
        return np.empty(shape, dtype=dtype)
    check_buffer(buffer, shape, dtype, name)
    return buffer


def add_to_diagonal(
    A: NDArray[np.inexact[Any]],
    values: float | NDArray[np.floating[Any]],
) -> None:
    """Add a scalar or a per-entry vector to the diagonal of A in place."""
    n = A.shape[0]
    idx = np.arange(n)
    A[idx, idx] += values
