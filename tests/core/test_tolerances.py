"""
Tests for tolerance tier selection.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from fixedmatrix.core.compute.tolerances import (
    EXACT,
    FP16,
    FP32,
    FP64,
    select_tolerance,
)


class TestSelectTolerance:
    """select_tolerance picks a tier from the element type."""

    @pytest.mark.parametrize("dtype,tier", [
        (np.float64, FP64),
        (np.float32, FP32),
        (np.float16, FP16),
        (np.complex128, FP64),
        (np.complex64, FP32),
        (np.int64, EXACT),
        (np.uint8, EXACT),
    ])
    def test_tier_for_dtype(self, dtype, tier):
        assert select_tolerance(dtype) is tier

    def test_accepts_dtype_strings(self):
        assert select_tolerance("float32") is FP32

    def test_tiers_loosen_with_precision(self):
        assert EXACT.rtol < FP64.rtol < FP32.rtol < FP16.rtol

    def test_tier_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            FP64.rtol = 1.0
