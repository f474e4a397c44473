"""
Tolerance tiers for numerical validation.

Defines precision expectations for the supported scalar types:
- FP64 (float64 / complex128): reference precision
- FP32 (float32 / complex64): relaxed for single-precision arithmetic

Forming the normal equations squares the condition number of M, so each
tier has an ill-conditioned counterpart.

Used by the test suite and by fit() for its conditioning warning.
"""

from dataclasses import dataclass

import numpy as np

from pylstsq.core.compute.precision import EPSILON_64, machine_epsilon


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision reference
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision (float64 / complex128)',
)

# Double precision, ill-conditioned problems (cond(M'M) > 1e8)
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='fp64_ill_conditioned',
    description='double precision, ill-conditioned normal equations',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision (float32 / complex64)',
)

# Single precision, ill-conditioned problems
FP32_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp32_ill_conditioned',
    description='single precision, ill-conditioned normal equations',
)

# Condition number of a float64 Gram matrix above which fit() warns.
# At cond(M) = 1e6, cond(M'M) = 1e12: only about four digits survive.
GRAM_CONDITION_THRESHOLD = 1e12


def gram_condition_threshold(dtype: np.dtype | type) -> float:
    """
    Ill-conditioning threshold for a Gram matrix of the given scalar type.

    Scales GRAM_CONDITION_THRESHOLD by the precision of `dtype`, so every
    type is flagged when the same number of significant digits is left:
    1e12 for float64 / complex128, about 1.9e3 for float32 / complex64.
    """
    return GRAM_CONDITION_THRESHOLD * EPSILON_64 / machine_epsilon(dtype)


def select_tolerance(
    dtype: np.dtype | type,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given scalar type."""
    if np.finfo(dtype).bits <= 32:
        if is_ill_conditioned:
            return FP32_ILL_CONDITIONED
        return FP32
    if is_ill_conditioned:
        return FP64_ILL_CONDITIONED
    return FP64
