"""
Element type constants for fixedmatrix.

This module is the SINGLE SOURCE OF TRUTH for element-type defaults.
Import from here, never hard-code dtypes elsewhere.

Usage:
    from fixedmatrix.core.dtypes import DEFAULT_DTYPE, RANDOM_DTYPES

    if np.dtype(dtype) not in RANDOM_DTYPES:
        ...
"""

import numpy as np

# Element type used when matrix_type() is called without one
DEFAULT_DTYPE = np.dtype(np.float64)

# Element types numpy's Generator.random() can draw directly
RANDOM_DTYPES = frozenset({
    np.dtype(np.float32),
    np.dtype(np.float64),
})

__all__ = [
    'DEFAULT_DTYPE',
    'RANDOM_DTYPES',
]
