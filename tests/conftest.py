"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from fixedmatrix import matrix_type


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def Matrix2x2():
    """2x2 float64 matrix type."""
    return matrix_type(2, 2)


@pytest.fixture
def scenario_pair(Matrix2x2):
    """The two 2x2 operands used for the worked arithmetic examples."""
    a = Matrix2x2.create([0.0, 2.0, 1.0, 6.0])
    b = Matrix2x2.create([1.0, -2.0, 3.0, 6.5])
    return a, b
