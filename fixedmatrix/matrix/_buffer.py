"""
Buffer allocation for matrices.

Every matrix owns exactly one contiguous 1-D buffer of rows * cols
elements. All allocations go through allocate() so that a failed
allocation surfaces as AllocationFailureError and never as a half-built
matrix.
"""

from __future__ import annotations

from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from fixedmatrix.core.exceptions import AllocationFailureError

Fill = Literal['empty', 'zeros']


def allocate(n_elements: int, dtype: np.dtype, fill: Fill = 'empty') -> NDArray[Any]:
    """
    Allocate a buffer of n_elements of the given dtype.

    Args:
        n_elements: Number of elements (rows * cols)
        dtype: Element type
        fill: 'empty' leaves contents unspecified, 'zeros' fills with the
              additive identity

    Returns:
        C-contiguous 1-D numpy array owned by the caller

    Raises:
        AllocationFailureError: If the memory cannot be obtained
    """
    factory = np.zeros if fill == 'zeros' else np.empty
    try:
        return factory(n_elements, dtype=dtype)
    except (MemoryError, ValueError) as e:
        # numpy raises ValueError for sizes that overflow the address space
        raise AllocationFailureError(
            f"cannot allocate {n_elements} elements of {dtype}: {e}",
            n_elements=n_elements,
            dtype=dtype,
        ) from e


def shares_buffer(a: NDArray[Any], b: NDArray[Any]) -> bool:
    """True if the two buffers overlap in memory."""
    return a is b or np.shares_memory(a, b)
