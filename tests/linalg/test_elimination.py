"""
Tests for the Gaussian elimination kernel.

Works directly on augmented numpy arrays: pivot selection and
tie-breaking, singularity detection, and back substitution.
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.linalg._elimination import (
    EliminationInfo,
    augment,
    back_substitute,
    forward_eliminate,
)


class TestAugment:

    def test_shape_and_copy(self):
        A = np.eye(3)
        B = np.ones((3, 2))
        work = augment(A, B)
        assert work.shape == (3, 5)
        work[0, 0] = 9.0
        assert A[0, 0] == 1.0


class TestForwardEliminate:

    def test_upper_triangular(self, rng):
        A = rng.random((6, 6)) + np.eye(6)
        work = augment(A, rng.random((6, 1)))
        forward_eliminate(work)
        np.testing.assert_array_equal(np.tril(work[:, :6], k=-1), 0.0)

    def test_largest_pivot_selected(self):
        A = np.array([[1.0, 2.0], [-5.0, 1.0]])
        work = augment(A, np.zeros((2, 1)))
        info = forward_eliminate(work)
        assert info.pivot_rows[0] == 1
        assert info.n_swaps == 1
        assert work[0, 0] == -5.0

    def test_tie_goes_to_lowest_row(self):
        A = np.array([[1.0, 0.0, 0.0],
                      [-3.0, 1.0, 0.0],
                      [3.0, 0.0, 1.0]])
        work = augment(A, np.zeros((3, 1)))
        info = forward_eliminate(work)
        assert info.pivot_rows[0] == 1

    def test_no_swap_when_pivot_in_place(self):
        A = np.array([[4.0, 1.0], [2.0, 3.0]])
        info = forward_eliminate(augment(A, np.zeros((2, 1))))
        assert info.pivot_rows == (0, 1)
        assert info.n_swaps == 0

    def test_pivot_statistics(self):
        A = np.diag([2.0, -8.0, 0.5])
        info = forward_eliminate(augment(A, np.zeros((3, 1))))
        assert info.max_pivot == 8.0
        assert info.min_pivot == 0.5
        assert info.pivot_ratio == pytest.approx(0.0625)

    def test_singular_raises_with_diagnostics(self):
        A = np.array([[1.0, 2.0, 3.0],
                      [2.0, 4.0, 6.0],
                      [3.0, 6.0, 9.0]])
        with pytest.raises(SingularMatrixError) as exc_info:
            forward_eliminate(augment(A, np.eye(3)), matrix_name='M')
        err = exc_info.value
        assert err.matrix_name == 'M'
        assert err.pivot_index == 1
        assert err.pivot_value <= err.tolerance

    def test_zero_matrix_is_singular(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            forward_eliminate(augment(np.zeros((2, 2)), np.ones((2, 1))))
        assert exc_info.value.pivot_index == 0
        assert exc_info.value.tolerance == 0.0

    def test_nan_is_singular(self):
        A = np.array([[np.nan, 1.0], [1.0, 1.0]])
        with pytest.raises(SingularMatrixError):
            forward_eliminate(augment(A, np.ones((2, 1))))

    def test_explicit_tolerance(self):
        A = np.diag([1.0, 1e-6])
        forward_eliminate(augment(A, np.ones((2, 1))))
        with pytest.raises(SingularMatrixError) as exc_info:
            forward_eliminate(augment(A, np.ones((2, 1))), tol=1e-5)
        assert exc_info.value.tolerance == 1e-5

    def test_default_tolerance_scales_with_matrix(self):
        info = forward_eliminate(augment(np.eye(4) * 1e3, np.ones((4, 1))))
        assert info.tolerance == pytest.approx(4 * np.finfo(float).eps * 1e3)


class TestBackSubstitute:

    def test_upper_triangular_system(self):
        work = np.array([[2.0, 1.0, -1.0, 3.0],
                         [0.0, 1.0, 2.0, 5.0],
                         [0.0, 0.0, 4.0, 8.0]])
        X = back_substitute(work)
        # z = 2, y = 5 - 4 = 1, x = (3 - 1 + 2) / 2 = 2
        np.testing.assert_allclose(X, [[2.0], [1.0], [2.0]])

    def test_multiple_right_hand_sides(self, rng):
        U = np.triu(rng.random((5, 5))) + np.eye(5)
        B = rng.random((5, 3))
        X = back_substitute(np.hstack([U, B]))
        assert X.shape == (5, 3)
        np.testing.assert_allclose(U @ X, B, atol=1e-12)

    def test_one_by_one(self):
        np.testing.assert_array_equal(back_substitute(np.array([[4.0, 2.0]])), [[0.5]])


class TestEliminationInfo:

    def test_zero_max_pivot_ratio(self):
        info = EliminationInfo((), 0, 0.0, 0.0, 0.0)
        assert info.pivot_ratio == 0.0
