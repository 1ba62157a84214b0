"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Public operations turn the
raised errors into failed Results.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidDimensionsError,
    NotSquareError,
    ValidationError,
)

if TYPE_CHECKING:
    from pymatrix.matrix import Matrix


def check_dimensions(rows: object, cols: object) -> tuple[int, int]:
    """
    Verify a requested matrix size is a pair of positive integers.

    Args:
        rows: Requested number of rows
        cols: Requested number of columns

    Returns:
        (rows, cols) as plain ints

    Raises:
        InvalidDimensionsError: If either value is not a positive integer
    """
    for value in (rows, cols):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensionsError(
                f"matrix size must be integers, got rows={rows!r}, cols={cols!r}",
                rows=rows,
                cols=cols,
            )
    if rows <= 0 or cols <= 0:
        raise InvalidDimensionsError(
            f"matrix size must be positive, got rows={rows}, cols={cols}",
            rows=rows,
            cols=cols,
        )
    return int(rows), int(cols)


def check_allocated(mat: 'Matrix', name: str) -> None:
    """
    Verify a matrix owns element storage.

    Args:
        mat: Matrix to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If the matrix is empty/unallocated
    """
    if not mat.is_valid:
        raise DimensionError(
            f"{name}: matrix is not allocated (shape {mat.rows}x{mat.cols})"
        )


def check_same_size(a: 'Matrix', b: 'Matrix', names: tuple[str, str]) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if a.rows != b.rows or a.cols != b.cols:
        raise DimensionError(
            f"Inconsistent shapes: {names[0]}={a.rows}x{a.cols}, "
            f"{names[1]}={b.rows}x{b.cols}"
        )


def check_shape(mat: 'Matrix', rows: int, cols: int, name: str) -> None:
    """
    Verify a matrix has exactly the given shape.

    Raises:
        DimensionError: If the shape differs
    """
    if mat.rows != rows or mat.cols != cols:
        raise DimensionError(
            f"{name}: expected shape {rows}x{cols}, got {mat.rows}x{mat.cols}"
        )


def check_square(mat: 'Matrix', name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if mat.rows != mat.cols:
        raise NotSquareError(
            f"{name}: expected a square matrix, got {mat.rows}x{mat.cols}",
            matrix_name=name,
            shape=(mat.rows, mat.cols),
        )


def check_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a 2-D float64 numpy array.

    Rejects inputs that result in object or other non-numeric dtypes,
    and inputs that are not two-dimensional or have an empty axis.

    Args:
        array: Input to validate (nested sequence or ndarray)
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64, shape (rows, cols)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
        InvalidDimensionsError: If it is not a non-empty 2-D array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-real dtype {result.dtype}, expected real numeric data"
        )

    if result.ndim != 2:
        raise InvalidDimensionsError(
            f"{name}: expected 2D array, got {result.ndim}D with shape {result.shape}"
        )

    check_dimensions(*result.shape)
    return result.astype(np.float64)

