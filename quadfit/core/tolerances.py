"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two supported floating-point types:
- FP64: double precision, near machine precision
- FP32: single precision, relaxed

Used by the test suite and the demonstration program.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='fp64',
    description='Double precision closed form',
)

FP32 = ToleranceTier(
    rtol=1e-3,
    atol=1e-3,
    name='fp32',
    description='Single precision closed form',
)


def tier_for_dtype(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier matching a floating-point dtype."""
    if np.dtype(dtype) == np.float32:
        return FP32
    return FP64
