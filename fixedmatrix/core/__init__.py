"""
Core infrastructure for fixedmatrix.

Key components:
    exceptions: Exception hierarchy with error kinds
    validation: Input validators
    dtypes: Element type defaults
    compute: Tolerance tiers
"""

from fixedmatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    WrongDimensionsError,
    OnlyForSquareMatrixError,
    IndexOutOfBoundsError,
    AllocationFailureError,
    MatrixReleasedError,
    MatrixCastWarning,
)

__all__ = [
    "MatrixError",
    "ValidationError",
    "WrongDimensionsError",
    "OnlyForSquareMatrixError",
    "IndexOutOfBoundsError",
    "AllocationFailureError",
    "MatrixReleasedError",
    "MatrixCastWarning",
]
