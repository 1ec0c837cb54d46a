"""
Matrix arithmetic.

Provides the elementwise operations add() and sub(), the in-place
product dot(), and matmul() which allocates the product for you.

Every function validates shapes and element types before allocating or
writing anything, so a failed call leaves no partial result behind.
"""

from __future__ import annotations

from fixedmatrix.core.exceptions import ValidationError, WrongDimensionsError
from fixedmatrix.core.validation import check_same_shape
from fixedmatrix.matrix._buffer import shares_buffer
from fixedmatrix.matrix.backends.cpu import CPUMatrixBackend
from fixedmatrix.matrix.matrix import Matrix, matrix_type

_BACKEND = CPUMatrixBackend()


def _check_matrix(value: object, name: str, operation: str) -> None:
    if not isinstance(value, Matrix) or value.shape is None:
        raise ValidationError(
            f"{operation}: {name} must be a shaped Matrix, got {type(value).__name__}"
        )


def _check_same_dtype(*matrices: Matrix, operation: str) -> None:
    dtypes = {m.dtype for m in matrices}
    if len(dtypes) > 1:
        names = ", ".join(sorted(str(d) for d in dtypes))
        raise ValidationError(f"{operation}: mixed element types ({names})")


def _elementwise_operands(a: Matrix, b: Matrix, operation: str) -> None:
    _check_matrix(a, 'a', operation)
    _check_matrix(b, 'b', operation)
    check_same_shape(a.shape, b.shape, operation)
    _check_same_dtype(a, b, operation=operation)


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum of two matrices of the same shape.

    Returns:
        New matrix of a's type with element k equal to a[k] + b[k]

    Raises:
        WrongDimensionsError: If shapes differ
        ValidationError: If element types differ
    """
    _elementwise_operands(a, b, 'add')
    a_buf, b_buf = a._buf, b._buf
    result = type(a).empty()
    _BACKEND.add(result._buf, a_buf, b_buf)
    return result


def sub(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise difference of two matrices of the same shape.

    Returns:
        New matrix of a's type with element k equal to a[k] - b[k]

    Raises:
        WrongDimensionsError: If shapes differ
        ValidationError: If element types differ
    """
    _elementwise_operands(a, b, 'sub')
    a_buf, b_buf = a._buf, b._buf
    result = type(a).empty()
    _BACKEND.sub(result._buf, a_buf, b_buf)
    return result


def dot(result: Matrix, left: Matrix, right: Matrix) -> Matrix:
    """
    Matrix product of left and right, written into result.

    Parameters
    ----------
    result : Matrix
        Pre-allocated M x N matrix. Every element is overwritten, so an
        uninitialized or previously used matrix is fine. Must not share
        storage with left or right.
    left : Matrix
        M x K matrix.
    right : Matrix
        K x N matrix.

    Returns
    -------
    result, for chaining.

    Raises
    ------
    WrongDimensionsError
        If the inner dimensions differ or result is not M x N. Raised
        before any element of result is written.
    ValidationError
        If element types differ or result aliases an operand.
    """
    _check_matrix(result, 'result', 'dot')
    _check_matrix(left, 'left', 'dot')
    _check_matrix(right, 'right', 'dot')

    if left.cols != right.rows:
        raise WrongDimensionsError(
            f"dot: inner dimensions differ, left is {left.shape} and right is {right.shape}",
            operation='dot',
            expected=(left.cols, right.cols),
            actual=right.shape,
        )
    expected = (left.rows, right.cols)
    if result.shape != expected:
        raise WrongDimensionsError(
            f"dot: result must have shape {expected}, got {result.shape}",
            operation='dot',
            expected=expected,
            actual=result.shape,
        )
    _check_same_dtype(result, left, right, operation='dot')

    out = result._buf
    if shares_buffer(out, left._buf) or shares_buffer(out, right._buf):
        raise ValidationError("dot: result must not share storage with an operand")

    _BACKEND.dot(out, left._buf, right._buf, left.rows, left.cols, right.cols)
    return result


def matmul(left: Matrix, right: Matrix) -> Matrix:
    """
    Matrix product of left (M x K) and right (K x N) as a new M x N matrix.

    Raises:
        WrongDimensionsError: If the inner dimensions differ
        ValidationError: If element types differ
    """
    _check_matrix(left, 'left', 'matmul')
    _check_matrix(right, 'right', 'matmul')
    if left.cols != right.rows:
        raise WrongDimensionsError(
            f"matmul: inner dimensions differ, left is {left.shape} and right is {right.shape}",
            operation='matmul',
            expected=(left.cols, right.cols),
            actual=right.shape,
        )
    _check_same_dtype(left, right, operation='matmul')
    result = matrix_type(left.rows, right.cols, left.dtype).empty()
    return dot(result, left, right)
