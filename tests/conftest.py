"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """Factory for matrices with uniform [0, 1) entries."""
    def make(rows, cols):
        return Matrix.from_array(rng.random((rows, cols)))
    return make


@pytest.fixture
def solve_system():
    """3x3 system with known solution x = [-1.45, 2.35, -2.15]."""
    A = Matrix.from_rows([[2.0, 3.0, 1.0],
                          [4.0, 1.0, -3.0],
                          [-1.0, 2.0, 1.0]])
    b = Matrix.from_rows([[2.0], [3.0], [4.0]])
    expected = np.array([[-1.45], [2.35], [-2.15]])
    return A, b, expected


@pytest.fixture
def invertible_3x3():
    """3x3 matrix with an exactly known inverse."""
    A = Matrix.from_rows([[1.0, 2.0, 3.0],
                          [2.0, 2.0, 3.0],
                          [3.0, 3.0, 3.0]])
    expected = np.array([[-1.0, 1.0, 0.0],
                         [1.0, -2.0, 1.0],
                         [0.0, 1.0, -2.0 / 3.0]])
    return A, expected


@pytest.fixture
def singular_3x3():
    """Rank-1 matrix: every row is a multiple of [1, 2, 3]."""
    return Matrix.from_rows([[1.0, 2.0, 3.0],
                             [2.0, 4.0, 6.0],
                             [3.0, 6.0, 9.0]])
