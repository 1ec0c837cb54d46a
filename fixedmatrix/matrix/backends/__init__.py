"""Compute backends for matrix arithmetic."""

from fixedmatrix.matrix.backends.cpu import CPUMatrixBackend

__all__ = ["CPUMatrixBackend"]
