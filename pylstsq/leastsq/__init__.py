"""
Least squares and pseudo-inverses by the normal equations.

Public API:
    solve(M, b, *, out, work)                               -> x
    solve_regularized(M, b, reg_weight, *, out, work)       -> x
    solve_regularized_weighted(M, b, weights, *, out, work) -> x
    pseudo_inverse(M, *, out, work)                         -> pinv(M)
    pseudo_inverse_transposed(Mt, *, out, work)             -> pinv(M)
    fit(M, b, *, regularization)                            -> LeastSquaresSolution

The solvers return plain arrays and write into caller-supplied out/work
buffers when given, so a loop over many samples allocates nothing.
fit() is the validated one-shot entry point with diagnostics.

Example:
    >>> from pylstsq.leastsq import solve, pseudo_inverse
    >>> x = solve(M, b)
    >>> I = pseudo_inverse(M)
"""

from pylstsq.leastsq.normal import (
    solve,
    solve_regularized,
    solve_regularized_weighted,
)
from pylstsq.leastsq.pinv import pseudo_inverse, pseudo_inverse_transposed
from pylstsq.leastsq.solution import LeastSquaresParams, LeastSquaresSolution
from pylstsq.leastsq.solvers import fit

__all__ = [
    "solve",
    "solve_regularized",
    "solve_regularized_weighted",
    "pseudo_inverse",
    "pseudo_inverse_transposed",
    "fit",
    "LeastSquaresParams",
    "LeastSquaresSolution",
]
