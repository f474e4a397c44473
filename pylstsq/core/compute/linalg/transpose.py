"""
Transpose strategy and Gram matrices.

Real data uses the plain transpose, complex data the conjugate transpose.
The choice depends only on the scalar type, so it is resolved once per
dtype and then applied without looking at the data again.
"""

from enum import Enum
from functools import lru_cache
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray


class TransposeStrategy(Enum):
    """Which adjoint to use for a scalar type."""
    PLAIN = 'plain'
    CONJUGATE = 'conjugate'

    def apply(self, A: NDArray[np.inexact[Any]]) -> NDArray[np.inexact[Any]]:
        """Return A^T (PLAIN) or A^H (CONJUGATE)."""
        if self is TransposeStrategy.CONJUGATE:
            return A.conj().T
        return A.T


@lru_cache(maxsize=None)
def _strategy_for(dtype: np.dtype) -> TransposeStrategy:
    if np.issubdtype(dtype, np.complexfloating):
        return TransposeStrategy.CONJUGATE
    return TransposeStrategy.PLAIN


def transpose_strategy(dtype: np.dtype | type) -> TransposeStrategy:
    """
    Resolve the transpose strategy for a scalar type.

    Args:
        dtype: NumPy dtype or scalar type

    Returns:
        TransposeStrategy.CONJUGATE for complex dtypes, PLAIN otherwise
    """
    return _strategy_for(np.dtype(dtype))


def gram_matrix(
    M: NDArray[np.inexact[Any]],
    *,
    side: Literal['columns', 'rows'] = 'columns',
    out: NDArray[np.inexact[Any]] | None = None,
    strategy: TransposeStrategy | None = None,
) -> NDArray[np.inexact[Any]]:
    """
    Form a Gram matrix of M.

    side='columns' gives M^H M (p x p), the normal-equations matrix.
    side='rows' gives M M^H (n x n).

    Args:
        M: Matrix (n x p)
        side: Which Gram matrix to form
        out: Optional buffer receiving the product
        strategy: Transpose to use; defaults to the one resolved for M.dtype

    Returns:
        The Gram matrix (out, if given)
    """
    if strategy is None:
        strategy = transpose_strategy(M.dtype)
    Mt = strategy.apply(M)
    if side == 'columns':
        return np.matmul(Mt, M, out=out)
    elif side == 'rows':
        return np.matmul(M, Mt, out=out)
    else:
        raise ValueError(f"Unknown side: {side!r}")
