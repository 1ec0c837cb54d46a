"""
Matrix module.

Public API:
    matrix_type(rows, cols, dtype)  - Matrix class for a fixed shape
    Matrix[rows, cols]              - Same, by subscription
    add(a, b)                       - Elementwise sum
    sub(a, b)                       - Elementwise difference
    dot(result, left, right)        - Product into a pre-allocated result
    matmul(left, right)             - Product as a new matrix
"""

from fixedmatrix.matrix.matrix import Matrix, matrix_type
from fixedmatrix.matrix.operations import add, sub, dot, matmul

__all__ = [
    "Matrix",
    "matrix_type",
    "add",
    "sub",
    "dot",
    "matmul",
]
