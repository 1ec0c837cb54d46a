"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations per element type:
- FP64: double precision
- FP32: relaxed for single-precision arithmetic
- FP16: half precision
- EXACT: integer and other exact types

Used by Matrix.allclose() and by the test suite.
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
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, a few ulps of accumulated rounding',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision',
)

FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='Half precision',
)

EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer arithmetic, no rounding',
)


def select_tolerance(dtype) -> ToleranceTier:
    """Select the tolerance tier for an element type."""
    dtype = np.dtype(dtype)
    if dtype.kind in 'fc':
        # complex64 carries float32 parts
        precision = dtype.itemsize // 2 if dtype.kind == 'c' else dtype.itemsize
        if precision >= 8:
            return FP64
        if precision == 4:
            return FP32
        return FP16
    return EXACT
