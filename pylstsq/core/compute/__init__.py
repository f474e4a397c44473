"""
Shared compute infrastructure for PyLstSq.

This module provides timing utilities, precision constants and the linear
algebra kernels the least-squares solvers are built on.

Submodules:
    timing: Execution timing utilities
    precision: Numerical precision constants and utilities
    tolerances: Tolerance tiers per scalar type
    linalg: Linear algebra kernels (Cholesky, transpose strategy)
"""

from pylstsq.core.compute.timing import Timer, timed

__all__ = [
    # Timing
    "Timer",
    "timed",
]
