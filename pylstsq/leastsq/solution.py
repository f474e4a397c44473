"""
Least-squares solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylstsq.core.result import Result


@dataclass(frozen=True)
class LeastSquaresParams:
    """
    Parameter payload for a least-squares fit.

    This is the immutable data computed by fit().
    """
    coefficients: NDArray[np.inexact[Any]]
    residuals: NDArray[np.inexact[Any]]
    fitted_values: NDArray[np.inexact[Any]]
    rss: float | NDArray[np.floating[Any]]
    n_observations: int
    n_variables: int


@dataclass
class LeastSquaresSolution:
    """
    User-facing least-squares results.

    Wraps the Result envelope and provides convenient accessors.
    """
    _result: Result[LeastSquaresParams]

    @property
    def coefficients(self) -> NDArray[np.inexact[Any]]:
        return self._result.params.coefficients

    @property
    def residuals(self) -> NDArray[np.inexact[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.inexact[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float | NDArray[np.floating[Any]]:
        """Residual sum of squares (one per right-hand side column)."""
        return self._result.params.rss

    @property
    def regularization(self) -> str:
        return self._result.info['regularization']

    @property
    def condition_estimate(self) -> float:
        """Lower bound on cond(M'M) taken from the Cholesky factor."""
        return self._result.info['condition_estimate']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Short text report of the fit."""
        params = self._result.params
        lines = [
            "Least squares (normal equations, Cholesky)",
            "=" * 44,
            f"Observations:        {params.n_observations}",
            f"Variables:           {params.n_variables}",
            f"Regularization:      {self.regularization}",
            f"cond(M'M) estimate:  {self.condition_estimate:.3e}",
            f"Residual SS:         {np.array2string(np.asarray(params.rss), precision=6)}",
            "",
            "Coefficients:",
        ]
        coef = self.coefficients
        if coef.ndim == 1:
            for i, c in enumerate(coef):
                lines.append(f"  x[{i}] = {c:.6g}")
        else:
            lines.append(np.array2string(coef, precision=6))
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"LeastSquaresSolution(n={p.n_observations}, p={p.n_variables}, "
            f"regularization={self.regularization!r})"
        )
