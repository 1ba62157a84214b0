"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimensions: positive integer sizes
    - check_allocated: empty matrices rejected
    - check_same_size / check_shape / check_square: shape checks
    - check_array: conversion, dtype coercion, rejection of bad input
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import (
    DimensionError,
    InvalidDimensionsError,
    NotSquareError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_allocated,
    check_array,
    check_dimensions,
    check_same_size,
    check_shape,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimensions:

    def test_positive_sizes_pass(self):
        assert check_dimensions(4, 5) == (4, 5)

    def test_numpy_integers_accepted(self):
        rows, cols = check_dimensions(np.int64(3), np.int32(2))
        assert (rows, cols) == (3, 2)
        assert type(rows) is int

    @pytest.mark.parametrize("rows, cols", [(0, 0), (-1, 10), (3, 0), (0, 3)])
    def test_non_positive_rejected(self, rows, cols):
        with pytest.raises(InvalidDimensionsError, match="positive"):
            check_dimensions(rows, cols)

    @pytest.mark.parametrize("rows, cols", [(2.0, 3), (2, "3"), (True, 2), (None, 1)])
    def test_non_integer_rejected(self, rows, cols):
        with pytest.raises(InvalidDimensionsError, match="integers"):
            check_dimensions(rows, cols)

    def test_error_carries_sizes(self):
        with pytest.raises(InvalidDimensionsError) as exc_info:
            check_dimensions(-1, 10)
        assert exc_info.value.rows == -1
        assert exc_info.value.cols == 10


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_allocated_rejects_empty(self):
        with pytest.raises(DimensionError, match="not allocated"):
            check_allocated(Matrix(), "A")

    def test_check_allocated_passes(self):
        check_allocated(Matrix.from_rows([[1.0]]), "A")

    def test_check_same_size(self):
        a = Matrix.from_array(np.zeros((2, 3)))
        b = Matrix.from_array(np.zeros((3, 2)))
        check_same_size(a, a, ("a", "a"))
        with pytest.raises(DimensionError, match="a=2x3, b=3x2"):
            check_same_size(a, b, ("a", "b"))

    def test_check_shape(self):
        a = Matrix.from_array(np.zeros((2, 3)))
        check_shape(a, 2, 3, "a")
        with pytest.raises(DimensionError, match="expected shape 3x2"):
            check_shape(a, 3, 2, "a")

    def test_check_square(self):
        check_square(Matrix.from_array(np.eye(3)), "A")
        with pytest.raises(NotSquareError) as exc_info:
            check_square(Matrix.from_array(np.zeros((2, 3))), "A")
        assert exc_info.value.shape == (2, 3)
        assert exc_info.value.matrix_name == "A"


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a 2-D float64 ndarray and rejects bad data."""

    def test_nested_list_to_2d_float(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)
        assert result.dtype == np.float64

    def test_always_copies(self):
        arr = np.ones((2, 2))
        result = check_array(arr, "X")
        result[0, 0] = 5.0
        assert arr[0, 0] == 1.0

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-real dtype"):
            check_array([["a", "b"]], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="non-real dtype"):
            check_array([[1 + 2j]], "X")

    def test_rejects_1d(self):
        with pytest.raises(InvalidDimensionsError, match="expected 2D"):
            check_array([1.0, 2.0], "X")

    def test_rejects_empty_axis(self):
        with pytest.raises(InvalidDimensionsError):
            check_array(np.zeros((0, 3)), "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array([["a"]], "my_var")
