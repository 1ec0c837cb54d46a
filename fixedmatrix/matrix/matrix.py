"""
Matrix: fixed-shape dense matrix over a numeric element type.

Python has no compile-time integer generics, so shapes are encoded as
classes: matrix_type(rows, cols, dtype) returns one cached subclass of
Matrix per (rows, cols, dtype). Every instance of that subclass has the
same shape and element type, and shape-sensitive operations re-check
shapes at runtime before touching any buffer.

Usage:
    from fixedmatrix import Matrix, matrix_type

    Matrix2x2 = matrix_type(2, 2)          # or Matrix[2, 2]
    a = Matrix2x2.create([0.0, 2.0, 1.0, 6.0])
    b = Matrix2x2.identity()
    c = a @ b
    c.at(1, 1)                              # 6.0

    with Matrix[3, 3, np.float32].random(seed=7) as m:
        ...                                 # buffer released on exit
"""

from __future__ import annotations

import functools
import warnings
from typing import Any, ClassVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from fixedmatrix.core.compute.tolerances import ToleranceTier, select_tolerance
from fixedmatrix.core.dtypes import DEFAULT_DTYPE, RANDOM_DTYPES
from fixedmatrix.core.exceptions import (
    IndexOutOfBoundsError,
    MatrixCastWarning,
    MatrixReleasedError,
    OnlyForSquareMatrixError,
    ValidationError,
    WrongDimensionsError,
)
from fixedmatrix.core.validation import (
    check_array,
    check_dimension,
    check_dtype,
    check_index,
    check_same_shape,
)
from fixedmatrix.matrix._buffer import allocate


class Matrix:
    """
    Dense row-major matrix with a shape fixed by its class.

    Construct via the classmethods of a shaped subclass (zeros, identity,
    random, create, empty), never on the bare Matrix base. Calling a shaped
    class with no arguments is the same as empty().

    Each instance exclusively owns a contiguous buffer of rows * cols
    elements; element (i, j) lives at offset i * cols + j. The buffer is
    released once, by release() or on leaving a ``with`` block. After that
    every access raises MatrixReleasedError.
    """
    __slots__ = ('_buffer',)

    # numpy defers binary operators and comparisons to Matrix
    __array_ufunc__ = None

    rows: ClassVar[int | None] = None
    cols: ClassVar[int | None] = None
    dtype: ClassVar[np.dtype] = DEFAULT_DTYPE
    n_elements: ClassVar[int | None] = None
    shape: ClassVar[tuple[int, int] | None] = None

    def __class_getitem__(cls, params: Any) -> type[Matrix]:
        """Matrix[rows, cols] or Matrix[rows, cols, dtype]."""
        if cls.shape is not None:
            raise ValidationError(f"{cls.__name__} already has shape {cls.shape}")
        if not isinstance(params, tuple) or len(params) not in (2, 3):
            raise ValidationError(
                f"expected Matrix[rows, cols] or Matrix[rows, cols, dtype], got {params!r}"
            )
        return matrix_type(*params)

    def __init__(self) -> None:
        cls = type(self)
        cls._check_shaped()
        self._buffer = allocate(cls.n_elements, cls.dtype)

    @classmethod
    def _check_shaped(cls) -> None:
        if cls.shape is None:
            raise ValidationError(
                "Matrix has no shape; use matrix_type(rows, cols) or Matrix[rows, cols]"
            )

    @classmethod
    def _warn_lossy_cast(cls, source: np.dtype, operation: str) -> None:
        if not np.can_cast(source, cls.dtype, casting='same_kind'):
            warnings.warn(
                f"{operation}(): casting {source} values to {cls.dtype} may lose information",
                MatrixCastWarning,
                stacklevel=3,
            )

    @classmethod
    def _wrap(cls, buffer: NDArray[Any]) -> Matrix:
        """Adopt an already-filled buffer without copying."""
        obj = cls.__new__(cls)
        obj._buffer = buffer
        return obj

    # === Construction ===

    @classmethod
    def empty(cls) -> Matrix:
        """
        Allocate a matrix without initializing its elements.

        Contents are unspecified until written. Intended as the target of
        in-place fills such as dot().
        """
        cls._check_shaped()
        return cls._wrap(allocate(cls.n_elements, cls.dtype))

    @classmethod
    def zeros(cls) -> Matrix:
        """Matrix with every element set to zero."""
        cls._check_shaped()
        return cls._wrap(allocate(cls.n_elements, cls.dtype, fill='zeros'))

    @classmethod
    def identity(cls) -> Matrix:
        """
        Square identity matrix.

        Raises:
            OnlyForSquareMatrixError: If rows != cols. Raised before any
                buffer is allocated.
        """
        cls._check_shaped()
        if cls.rows != cls.cols:
            raise OnlyForSquareMatrixError(
                f"identity() requires a square matrix, got shape {cls.shape}",
                rows=cls.rows,
                cols=cls.cols,
            )
        buffer = allocate(cls.n_elements, cls.dtype, fill='zeros')
        for i in range(cls.rows):
            buffer[i * cls.cols + i] = 1
        return cls._wrap(buffer)

    @classmethod
    def random(cls, seed: int | np.random.Generator | None = None) -> Matrix:
        """
        Matrix of independent uniform draws from [0, 1).

        Args:
            seed: None (default) seeds a fresh generator from OS entropy on
                every call. An int or a numpy Generator makes the draw
                reproducible.

        Raises:
            ValidationError: If the element type is not float32 or float64
        """
        cls._check_shaped()
        if cls.dtype not in RANDOM_DTYPES:
            raise ValidationError(
                f"random() requires a float32 or float64 element type, got {cls.dtype}"
            )
        rng = np.random.default_rng(seed)
        buffer = allocate(cls.n_elements, cls.dtype)
        rng.random(dtype=cls.dtype, out=buffer)
        return cls._wrap(buffer)

    @classmethod
    def create(cls, values: ArrayLike) -> Matrix:
        """
        Matrix holding a copy of ``values``.

        Args:
            values: Either a flat sequence of exactly rows * cols numbers in
                row-major order, or a nested (rows, cols) array-like.

        Raises:
            ValidationError: If values are not numeric
            WrongDimensionsError: If values have the wrong length or shape

        Warns:
            MatrixCastWarning: If converting to the element type may lose
                information (e.g. floats into an integer matrix)
        """
        cls._check_shaped()
        array = check_array(values, 'values')
        if array.shape != (cls.n_elements,) and array.shape != cls.shape:
            raise WrongDimensionsError(
                f"create(): expected {cls.n_elements} values or shape {cls.shape}, "
                f"got shape {array.shape}",
                operation='create',
                expected=cls.shape,
                actual=array.shape,
            )
        cls._warn_lossy_cast(array.dtype, 'create')
        buffer = allocate(cls.n_elements, cls.dtype)
        np.copyto(buffer, array.reshape(cls.n_elements), casting='unsafe')
        return cls._wrap(buffer)

    # === Buffer lifecycle ===

    @property
    def _buf(self) -> NDArray[Any]:
        buffer = self._buffer
        if buffer is None:
            raise MatrixReleasedError(f"{type(self).__name__} has been released")
        return buffer

    @property
    def released(self) -> bool:
        """True once release() has run."""
        return self._buffer is None

    def release(self) -> None:
        """Drop the buffer. Releasing an already released matrix is a no-op."""
        self._buffer = None

    def __enter__(self) -> Matrix:
        if self.released:
            raise MatrixReleasedError(f"{type(self).__name__} has been released")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __copy__(self) -> Matrix:
        return type(self)._wrap(self._buf.copy())

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.__copy__()

    # === Element access ===

    def _offset(self, row: Any, col: Any) -> int:
        """Row-major linear offset of (row, col)."""
        i, j = check_index(row, col, self.shape)
        return i * self.cols + j

    def at(self, row: int, col: int) -> Any:
        """
        Element at (row, col) as a Python scalar.

        Raises:
            IndexOutOfBoundsError: If the coordinates fall outside the matrix
        """
        buffer = self._buf
        return buffer[self._offset(row, col)].item()

    def set(self, row: int, col: int, value: Any) -> None:
        """
        Overwrite the element at (row, col).

        Raises:
            IndexOutOfBoundsError: If the coordinates fall outside the matrix
            ValidationError: If value is not a single number

        Warns:
            MatrixCastWarning: If converting to the element type may lose
                information, as in create()
        """
        buffer = self._buf
        offset = self._offset(row, col)
        scalar = check_array(value, 'value')
        if scalar.ndim != 0:
            raise ValidationError(
                f"value: expected a single number, got shape {scalar.shape}"
            )
        self._warn_lossy_cast(scalar.dtype, 'set')
        buffer[offset] = scalar

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = self._split_key(key)
        return self.at(row, col)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = self._split_key(key)
        self.set(row, col, value)

    def _split_key(self, key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise IndexOutOfBoundsError(
                f"expected m[row, col], got m[{key!r}]", shape=self.shape,
            )
        return key

    @property
    def values(self) -> NDArray[Any]:
        """Copy of the buffer as a flat row-major array."""
        return self._buf.copy()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the matrix as a (rows, cols) array."""
        return self._buf.reshape(self.shape).copy()

    def tolist(self) -> list[list[Any]]:
        """Nested lists of Python scalars, one list per row."""
        return self._buf.reshape(self.shape).tolist()

    # === Arithmetic ===

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from fixedmatrix.matrix.operations import add
        return add(self, other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from fixedmatrix.matrix.operations import sub
        return sub(self, other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from fixedmatrix.matrix.operations import matmul
        return matmul(self, other)

    # === Comparison ===

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return bool(np.array_equal(self._buf, other._buf))

    __hash__ = None

    def allclose(self, other: Matrix, tier: ToleranceTier | None = None) -> bool:
        """
        Elementwise closeness within a tolerance tier.

        Args:
            other: Matrix of the same shape
            tier: Tolerance to use; defaults to the tier for this element type

        Raises:
            WrongDimensionsError: If shapes differ
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"allclose(): expected a Matrix, got {type(other).__name__}"
            )
        check_same_shape(self.shape, other.shape, 'allclose')
        if tier is None:
            tier = select_tolerance(self.dtype)
        return bool(np.allclose(self._buf, other._buf, rtol=tier.rtol, atol=tier.atol))

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.released:
            return f"<{name} released>"
        return f"{name}({self.tolist()!r})"


def matrix_type(rows: int, cols: int, dtype: Any = DEFAULT_DTYPE) -> type[Matrix]:
    """
    Matrix subclass for a fixed shape and element type.

    Repeated calls with the same arguments return the same class, so
    ``matrix_type(2, 2) is matrix_type(2, 2)``.

    Args:
        rows: Positive row count
        cols: Positive column count
        dtype: Numeric element type, float64 by default

    Raises:
        ValidationError: If rows/cols are not positive integers or dtype is
            not numeric
    """
    rows = check_dimension(rows, 'rows')
    cols = check_dimension(cols, 'cols')
    dtype = check_dtype(dtype, 'dtype')
    return _build_matrix_type(rows, cols, dtype)


@functools.lru_cache(maxsize=None)
def _build_matrix_type(rows: int, cols: int, dtype: np.dtype) -> type[Matrix]:
    name = f"Matrix{rows}x{cols}_{dtype.name}"
    namespace = {
        '__slots__': (),
        '__module__': __name__,
        '__qualname__': name,
        'rows': rows,
        'cols': cols,
        'dtype': dtype,
        'n_elements': rows * cols,
        'shape': (rows, cols),
    }
    return type(name, (Matrix,), namespace)
