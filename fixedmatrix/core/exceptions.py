"""
Exception hierarchy for fixedmatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Each class also carries a ``kind`` tag so callers
can branch on the error kind without importing every class.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

KIND_MATRIX_ERROR = 'matrix_error'
KIND_VALIDATION = 'validation'
KIND_WRONG_DIMENSIONS = 'wrong_dimensions'
KIND_ONLY_FOR_SQUARE_MATRIX = 'only_for_square_matrix'
KIND_INDEX_OUT_OF_BOUNDS = 'index_out_of_bounds'
KIND_ALLOCATION_FAILURE = 'allocation_failure'
KIND_RELEASED = 'released'


class MatrixError(Exception):
    """Base exception for all fixedmatrix errors."""
    kind: str = KIND_MATRIX_ERROR


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    kind = KIND_VALIDATION


class WrongDimensionsError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent for an operation.

    Raised when elementwise operands differ in shape, when the inner
    dimensions of a product do not match, or when create() receives the
    wrong number of values.

    Attributes:
        operation: Name of the operation that rejected the shapes
        expected: Expected shape (or element count), if known
        actual: Shape (or element count) that was supplied
    """
    kind = KIND_WRONG_DIMENSIONS

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class OnlyForSquareMatrixError(ValidationError):
    """
    Operation is defined only for square matrices.

    Attributes:
        rows: Row count of the offending matrix type
        cols: Column count of the offending matrix type
    """
    kind = KIND_ONLY_FOR_SQUARE_MATRIX

    def __init__(self, message: str, rows: int | None = None, cols: int | None = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element coordinates fall outside the matrix.

    Also an IndexError, so generic sequence handling keeps working.

    Attributes:
        row: Requested row
        col: Requested column
        shape: Shape of the matrix that was indexed
    """
    kind = KIND_INDEX_OUT_OF_BOUNDS

    def __init__(
        self,
        message: str,
        row: object = None,
        col: object = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class AllocationFailureError(MatrixError, MemoryError):
    """
    The backing buffer for a matrix could not be allocated.

    Attributes:
        n_elements: Number of elements requested
        dtype: Element type requested
    """
    kind = KIND_ALLOCATION_FAILURE

    def __init__(self, message: str, n_elements: int | None = None, dtype: object = None):
        super().__init__(message)
        self.n_elements = n_elements
        self.dtype = dtype


class MatrixReleasedError(MatrixError):
    """A matrix was used after its buffer was released."""
    kind = KIND_RELEASED


class MatrixCastWarning(UserWarning):
    """Values were cast to the matrix element type with possible loss."""
    pass
