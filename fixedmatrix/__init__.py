"""
fixedmatrix: fixed-shape dense matrices for Python.

A small numeric primitive: matrices whose shape and element type are
fixed by their class, with zero/identity/random/value construction,
bounds-checked element access, and textbook addition, subtraction and
matrix product.

Submodules:
    core: Exceptions, validators, element types, tolerances
    matrix: The Matrix type and its arithmetic
"""

__version__ = "0.1.0"

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
from fixedmatrix.matrix import Matrix, matrix_type, add, sub, dot, matmul

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "matrix_type",
    "add",
    "sub",
    "dot",
    "matmul",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "WrongDimensionsError",
    "OnlyForSquareMatrixError",
    "IndexOutOfBoundsError",
    "AllocationFailureError",
    "MatrixReleasedError",
    "MatrixCastWarning",
]
