"""
CPU reference kernels for matrix arithmetic.

Kernels operate on raw row-major 1-D buffers and assume the caller has
already validated shapes and element types. They write only into ``out``.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


class CPUMatrixBackend:
    """Textbook CPU kernels over row-major buffers."""

    @property
    def name(self) -> str:
        return 'cpu_naive'

    def add(self, out: NDArray[Any], a: NDArray[Any], b: NDArray[Any]) -> None:
        """out[k] = a[k] + b[k] for every linear offset k."""
        np.add(a, b, out=out)

    def sub(self, out: NDArray[Any], a: NDArray[Any], b: NDArray[Any]) -> None:
        """out[k] = a[k] - b[k] for every linear offset k."""
        np.subtract(a, b, out=out)

    def dot(
        self,
        out: NDArray[Any],
        left: NDArray[Any],
        right: NDArray[Any],
        n_rows: int,
        n_inner: int,
        n_cols: int,
    ) -> None:
        """
        Naive triple-loop matrix product.

        Computes out[i, j] = sum_k left[i, k] * right[k, j] with the sum
        accumulated in the order k = 0 .. n_inner - 1, starting from the
        additive identity, in the buffers' element type. Reordering the
        sum would change floating-point rounding.

        Parameters
        ----------
        out : ndarray
            Result buffer of n_rows * n_cols elements. Fully overwritten.
        left : ndarray
            Buffer of n_rows * n_inner elements.
        right : ndarray
            Buffer of n_inner * n_cols elements.
        """
        zero = out.dtype.type(0)
        for i in range(n_rows):
            left_row = i * n_inner
            out_row = i * n_cols
            for j in range(n_cols):
                acc = zero
                for k in range(n_inner):
                    acc = acc + left[left_row + k] * right[k * n_cols + j]
                out[out_row + j] = acc
