"""
Generic result container for PyLstSq computations.

The Result class provides a standardized envelope for the one-shot
entry points. The low-level solvers return plain arrays; anything that
carries timing, diagnostics or warnings goes through this envelope.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, regularization, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np
import scipy

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions that produced a result."""
    from pylstsq import __version__

    return {
        'pylstsq_version': __version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for least-squares computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Parameters (coefficients, residuals, etc.)
        info: Structured metadata (method, regularization, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions, filled in automatically

    Examples:
        >>> Result(
        ...     params=LeastSquaresParams(coefficients=x, ...),
        ...     info={'method': 'cholesky', 'regularization': 'none'},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_cholesky'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
