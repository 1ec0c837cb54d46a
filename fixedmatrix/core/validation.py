"""
Input validation utilities for fixedmatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from fixedmatrix.core.exceptions import (
    IndexOutOfBoundsError,
    ValidationError,
    WrongDimensionsError,
)


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and non-numeric dtypes such as strings or booleans.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_dtype(dtype: Any, name: str) -> np.dtype:
    """
    Validate an element type.

    Args:
        dtype: Anything np.dtype() understands
        name: Parameter name for error messages

    Returns:
        The normalized numpy dtype

    Raises:
        ValidationError: If dtype is not a numeric type in native byte order
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a valid dtype: {dtype!r}") from e

    if not np.issubdtype(result, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result}, expected a numeric element type"
        )
    if not result.isnative:
        raise ValidationError(
            f"{name}: non-native byte order {result.str}, expected native byte order"
        )
    return result


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Requested count
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected a positive integer, got {value!r}")
    try:
        result = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        ) from e

    if result < 1:
        raise ValidationError(f"{name}: expected a positive integer, got {result}")
    return result


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are equal.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        WrongDimensionsError: If shapes differ
    """
    if left != right:
        raise WrongDimensionsError(
            f"{operation}: operands must have the same shape, got {left} and {right}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify element coordinates lie inside a matrix.

    Negative coordinates are rejected rather than wrapped.

    Args:
        row: Requested row
        col: Requested column
        shape: (rows, cols) of the matrix

    Returns:
        (row, col) as plain ints

    Raises:
        IndexOutOfBoundsError: If either coordinate is not an integer or
            falls outside [0, rows) x [0, cols)
    """
    rows, cols = shape
    try:
        if isinstance(row, bool) or isinstance(col, bool):
            raise TypeError("bool is not an index")
        i = operator.index(row)
        j = operator.index(col)
    except TypeError as e:
        raise IndexOutOfBoundsError(
            f"index ({row!r}, {col!r}) is not a pair of integers",
            row=row, col=col, shape=shape,
        ) from e

    if not (0 <= i < rows and 0 <= j < cols):
        raise IndexOutOfBoundsError(
            f"index ({i}, {j}) out of bounds for matrix of shape {shape}",
            row=i, col=j, shape=shape,
        )
    return i, j
