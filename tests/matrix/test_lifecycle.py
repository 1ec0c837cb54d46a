"""
Tests for buffer ownership: release(), context management, copies, equality.
"""

import copy

import numpy as np
import pytest

from fixedmatrix import MatrixReleasedError, WrongDimensionsError, add, dot, matrix_type
from fixedmatrix.core.compute.tolerances import ToleranceTier


class TestRelease:
    """A matrix releases its buffer exactly once."""

    def test_release_marks_released(self, Matrix2x2):
        m = Matrix2x2.zeros()
        assert not m.released
        m.release()
        assert m.released

    def test_double_release_is_noop(self, Matrix2x2):
        m = Matrix2x2.zeros()
        m.release()
        m.release()
        assert m.released

    @pytest.mark.parametrize("use", [
        lambda m: m.at(0, 0),
        lambda m: m.set(0, 0, 1.0),
        lambda m: m[0, 0],
        lambda m: m.values,
        lambda m: m.to_numpy(),
        lambda m: m.tolist(),
    ])
    def test_use_after_release(self, Matrix2x2, use):
        m = Matrix2x2.zeros()
        m.release()
        with pytest.raises(MatrixReleasedError, match="released"):
            use(m)

    def test_released_operand(self, Matrix2x2):
        a, b = Matrix2x2.zeros(), Matrix2x2.zeros()
        b.release()
        with pytest.raises(MatrixReleasedError):
            add(a, b)

    def test_released_result(self, Matrix2x2):
        result = Matrix2x2.empty()
        result.release()
        with pytest.raises(MatrixReleasedError):
            dot(result, Matrix2x2.identity(), Matrix2x2.identity())

    def test_repr_after_release(self, Matrix2x2):
        m = Matrix2x2.zeros()
        m.release()
        assert repr(m) == "<Matrix2x2_float64 released>"

    def test_kind(self, Matrix2x2):
        m = Matrix2x2.zeros()
        m.release()
        with pytest.raises(MatrixReleasedError) as info:
            m.at(0, 0)
        assert info.value.kind == "released"


class TestContextManager:
    """Leaving a with block releases the buffer."""

    def test_released_on_exit(self, Matrix2x2):
        with Matrix2x2.identity() as m:
            assert m.at(0, 0) == 1.0
        assert m.released

    def test_released_on_error(self, Matrix2x2):
        with pytest.raises(RuntimeError):
            with Matrix2x2.zeros() as m:
                raise RuntimeError("boom")
        assert m.released

    def test_explicit_release_inside_block(self, Matrix2x2):
        with Matrix2x2.zeros() as m:
            m.release()
        assert m.released

    def test_enter_released_rejected(self, Matrix2x2):
        m = Matrix2x2.zeros()
        m.release()
        with pytest.raises(MatrixReleasedError):
            with m:
                pass


class TestCopy:
    """copy.copy and copy.deepcopy allocate a fresh buffer."""

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_independent_buffer(self, Matrix2x2, copier):
        original = Matrix2x2.zeros()
        duplicate = copier(original)
        duplicate.set(0, 0, 5.0)
        assert original.at(0, 0) == 0.0
        assert duplicate.at(0, 0) == 5.0

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_same_type_and_values(self, Matrix2x2, copier):
        original = Matrix2x2.create([1.0, 2.0, 3.0, 4.0])
        duplicate = copier(original)
        assert type(duplicate) is Matrix2x2
        assert duplicate == original
        assert duplicate is not original

    def test_release_copy_keeps_original(self, Matrix2x2):
        original = Matrix2x2.identity()
        duplicate = copy.copy(original)
        duplicate.release()
        assert not original.released
        assert original.at(1, 1) == 1.0

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_copy_released_rejected(self, Matrix2x2, copier):
        m = Matrix2x2.zeros()
        m.release()
        with pytest.raises(MatrixReleasedError):
            copier(m)


class TestEquality:
    """== is exact; allclose() uses tolerance tiers."""

    def test_equal(self, Matrix2x2):
        assert Matrix2x2.identity() == Matrix2x2.create([1.0, 0.0, 0.0, 1.0])

    def test_not_equal(self, Matrix2x2):
        assert Matrix2x2.identity() != Matrix2x2.zeros()

    def test_different_type_not_equal(self):
        a = matrix_type(1, 4).zeros()
        b = matrix_type(2, 2).zeros()
        assert a != b
        assert matrix_type(2, 2, np.float32).zeros() != b

    def test_not_equal_to_array(self, Matrix2x2):
        assert Matrix2x2.zeros() != np.zeros(4)

    def test_unhashable(self, Matrix2x2):
        with pytest.raises(TypeError):
            hash(Matrix2x2.zeros())

    def test_allclose_within_tier(self, Matrix2x2):
        a = Matrix2x2.create([1.0, 2.0, 3.0, 4.0])
        b = Matrix2x2.create([1.0 + 1e-13, 2.0, 3.0, 4.0])
        assert a.allclose(b)
        assert a != b

    def test_allclose_outside_tier(self, Matrix2x2):
        a = Matrix2x2.create([1.0, 2.0, 3.0, 4.0])
        b = Matrix2x2.create([1.001, 2.0, 3.0, 4.0])
        assert not a.allclose(b)

    def test_allclose_custom_tier(self, Matrix2x2):
        loose = ToleranceTier(rtol=1e-2, atol=0.0, name="loose", description="test")
        a = Matrix2x2.create([1.0, 2.0, 3.0, 4.0])
        b = Matrix2x2.create([1.001, 2.0, 3.0, 4.0])
        assert a.allclose(b, tier=loose)

    def test_allclose_shape_mismatch(self):
        with pytest.raises(WrongDimensionsError):
            matrix_type(1, 4).zeros().allclose(matrix_type(2, 2).zeros())
