"""
Numerical support shared by the matrix module.

Submodules:
    tolerances: Tolerance tiers per element type
"""

from fixedmatrix.core.compute.tolerances import (
    ToleranceTier,
    FP64,
    FP32,
    FP16,
    EXACT,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "FP64",
    "FP32",
    "FP16",
    "EXACT",
    "select_tolerance",
]
