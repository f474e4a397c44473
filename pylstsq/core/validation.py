"""
Input validation for PyLstSq.

Every public entry point converts and checks its arguments here before
any numerical work starts. Checks raise at once with the offending
parameter name and the actual shape or dtype; nothing is silently fixed.

Design principles:
    - Integer and boolean input is promoted to float64, nothing else is cast
    - Complex stays complex, single precision stays single precision
    - One check per function, composed by the callers
    - Caller-owned buffers are verified, never replaced
"""

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pylstsq.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.inexact[Any]]:
    """
    Convert an array-like to an ndarray with a float or complex dtype.

    Args:
        array: Input to convert
        name: Parameter name for error messages

    Returns:
        The converted array. Float and complex inputs keep their dtype
        (and may be the caller's own object); integer and boolean inputs
        come back as a float64 copy.

    Raises:
        ValidationError: If the input is ragged, mixed or non-numeric
    """
    try:
        arr = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if np.issubdtype(arr.dtype, np.inexact):
        return arr
    if np.issubdtype(arr.dtype, np.number) or arr.dtype == np.bool_:
        return arr.astype(np.float64)

    # strings, bytes, datetimes
    raise ValidationError(
        f"{name}: non-numeric dtype {arr.dtype}, expected numeric data"
    )


def check_finite(array: NDArray[np.inexact[Any]], name: str) -> None:
    """
    Reject NaN and Inf entries.

    For complex data an entry counts as non-finite when either its real
    or imaginary part is.

    Raises:
        ValidationError: With the number of NaN and Inf entries found
    """
    finite = np.isfinite(array)
    if finite.all():
        return
    n_nan = int(np.count_nonzero(np.isnan(array)))
    n_inf = int(np.count_nonzero(np.isinf(array)))
    raise ValidationError(
        f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
    )


def check_real(array: NDArray[np.inexact[Any]], name: str) -> None:
    """Reject complex dtypes (regularization weights must be real)."""
    if np.iscomplexobj(array):
        raise ValidationError(
            f"{name}: complex dtype {array.dtype}, expected real values"
        )


def check_scalar(array: NDArray[np.inexact[Any]], name: str) -> None:
    """Reject anything but a 0-d value."""
    if array.ndim != 0:
        raise ValidationError(
            f"{name}: expected a scalar, got array with shape {array.shape}"
        )


def check_ndim(array: NDArray[np.inexact[Any]], ndim: int, name: str) -> None:
    """
    Require exactly `ndim` dimensions.

    Raises:
        DimensionError: Naming the expected and actual dimensionality
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.inexact[Any]], name: str) -> None:
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.inexact[Any]], name: str) -> None:
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.inexact[Any]], name: str) -> None:
    """Require a 2D matrix with as many rows as columns."""
    check_2d(array, name)
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {array.shape}"
        )


def check_nonempty(array: NDArray[np.inexact[Any]], name: str) -> None:
    """
    Require at least one element along every axis.

    A (0, p) or (n, 0) matrix has no least-squares solution worth
    computing, so it is rejected up front rather than producing an
    empty factorization.

    Raises:
        ValidationError: If any axis has length zero
    """
    if 0 in array.shape:
        raise ValidationError(f"{name}: empty array with shape {array.shape}")


def check_consistent_length(
    *arrays: NDArray[np.inexact[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Require every array to share its first dimension (the row count).

    Args:
        *arrays: Arrays to compare
        names: One parameter name per array, in the same order

    Raises:
        ValueError: If names and arrays don't pair up (a programming error)
        DimensionError: Listing each array's row count
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    rows = {name: arr.shape[0] for name, arr in zip(names, arrays)}
    if len(set(rows.values())) > 1:
        details = ", ".join(f"{name}={n}" for name, n in rows.items())
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_buffer(
    buffer: Any,
    shape: tuple[int, ...],
    dtype: DTypeLike,
    name: str,
) -> None:
    """
    Verify a caller-supplied output or scratch buffer can receive a result.

    The buffer is written in place, so it must be a writeable ndarray of
    exactly the required shape whose dtype holds `dtype` without loss
    (NumPy 'safe' casting: a complex128 buffer takes float64 results,
    a float32 buffer does not).

    Args:
        buffer: Buffer to check
        shape: Required shape
        dtype: Dtype of the values that will be written into it
        name: Parameter name for error messages

    Raises:
        ValidationError: If buffer is not a writeable ndarray of a suitable dtype
        DimensionError: If buffer has the wrong shape
    """
    if not isinstance(buffer, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray buffer, got {type(buffer).__name__}"
        )
    if buffer.shape != tuple(shape):
        raise DimensionError(
            f"{name}: buffer has shape {buffer.shape}, expected {tuple(shape)}"
        )
    if not np.can_cast(dtype, buffer.dtype, casting='safe'):
        raise ValidationError(
            f"{name}: buffer dtype {buffer.dtype} cannot hold {np.dtype(dtype)} results"
        )
    if not buffer.flags.writeable:
        raise ValidationError(f"{name}: buffer is read-only")
