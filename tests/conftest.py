"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyvecmat.linalg import Vector, Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vectors(rng):
    """Three random vectors of dimension 5 for algebraic-law tests."""
    return tuple(Vector.from_sequence(rng.standard_normal(5)) for _ in range(3))


@pytest.fixture
def random_matrices(rng):
    """Three random 3x4 matrices for algebraic-law tests."""
    return tuple(Matrix.from_rows(rng.standard_normal((3, 4))) for _ in range(3))
