"""
Dense matrix storage.

A Matrix owns one contiguous, row-major float64 buffer of rows*cols
elements; element (i, j) lives at offset i*cols + j. The empty state
(rows == cols == 0, elements is None) is the default value and the
state a released matrix returns to.

Element access comes in two flavours:
    - element() / set_element(): UNCHECKED fast path. Only the flat
      offset is computed; i and j are not validated separately, so an
      out-of-range column silently addresses a neighbouring row.
    - m[i, j]: CHECKED path, raises IndexError on out-of-range indices.
"""

from contextlib import contextmanager
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import AllocationError
from pymatrix.core.result import Result, returns_result
from pymatrix.core.validation import check_array, check_dimensions


class Matrix:
    """
    Rectangular matrix of float64 values in a flat row-major buffer.

    Attributes:
        rows: Number of rows (0 when empty)
        cols: Number of columns (0 when empty)
        elements: Owned 1-D float64 buffer of length rows*cols, or None

    Matrices are created empty and populated by allocate(), copy(), or
    the from_rows()/from_array() constructors.
    """

    __slots__ = ('rows', 'cols', 'elements')

    def __init__(self) -> None:
        self.rows: int = 0
        self.cols: int = 0
        self.elements: NDArray[np.float64] | None = None

    @classmethod
    def from_array(cls, array: ArrayLike, name: str = 'array') -> 'Matrix':
        """
        Build a Matrix holding a copy of a 2-D array.

        Raises:
            ValidationError: If the input is not real numeric data
            InvalidDimensionsError: If it is not a non-empty 2-D array
        """
        values = check_array(array, name)
        mat = cls()
        mat.rows, mat.cols = values.shape
        mat.elements = np.ascontiguousarray(values).reshape(-1)
        return mat

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> 'Matrix':
        """Build a Matrix from a nested sequence of rows."""
        return cls.from_array(rows, name='rows')

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def is_empty(self) -> bool:
        return self.rows == 0 and self.cols == 0 and self.elements is None

    @property
    def is_valid(self) -> bool:
        """True if the matrix owns a buffer matching a positive shape."""
        return (
            self.rows > 0
            and self.cols > 0
            and self.elements is not None
            and self.elements.shape == (self.rows * self.cols,)
        )

    def element(self, i: int, j: int) -> float:
        return self.elements[i * self.cols + j]

    def set_element(self, i: int, j: int, value: float) -> None:
        self.elements[i * self.cols + j] = value

    def _offset(self, key: tuple[int, int]) -> int:
        i, j = key
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(
                f"index ({i}, {j}) out of range for {self.rows}x{self.cols} matrix"
            )
        return i * self.cols + j

    def __getitem__(self, key: tuple[int, int]) -> float:
        return float(self.elements[self._offset(key)])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.elements[self._offset(key)] = value

    def view(self) -> NDArray[np.float64]:
        """2-D view of the buffer; writes through to the matrix."""
        if self.elements is None:
            return np.empty((0, 0), dtype=np.float64)
        return self.elements.reshape(self.rows, self.cols)

    def to_numpy(self) -> NDArray[np.float64]:
        """Independent 2-D copy of the contents."""
        return self.view().copy()

    def release(self) -> None:
        """Drop the buffer and reset to the empty state. Safe to repeat."""
        self.elements = None
        self.rows = 0
        self.cols = 0

    def format(self, fmt: str = '6.4f') -> str:
        """Render one line per row, elements separated by two spaces."""
        if not self.is_valid:
            return '<empty matrix>'
        return '\n'.join(
            '  '.join(format(value, fmt) for value in row)
            for row in self.view()
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        if self.elements is None:
            return 'Matrix(empty)'
        return f'Matrix(rows={self.rows}, cols={self.cols})'


def _new_buffer(rows: int, cols: int) -> NDArray[np.float64]:
    try:
        return np.empty(rows * cols, dtype=np.float64)
    except MemoryError as e:
        raise AllocationError(
            f"cannot allocate {rows}x{cols} matrix: {e}", rows=rows, cols=cols
        ) from e


def _allocate(rows: Any, cols: Any) -> Matrix:
    rows, cols = check_dimensions(rows, cols)
    mat = Matrix()
    mat.elements = _new_buffer(rows, cols)
    mat.rows = rows
    mat.cols = cols
    return mat


def _reallocate(mat: Matrix, rows: int, cols: int) -> None:
    """Resize ``mat`` in place, discarding its old contents."""
    mat.release()
    mat.elements = _new_buffer(rows, cols)
    mat.rows = rows
    mat.cols = cols


@returns_result
def allocate(rows: int, cols: int) -> Result[Matrix]:
    """
    Allocate a rows x cols matrix with uninitialized contents.

    Args:
        rows: Number of rows, must be a positive integer
        cols: Number of columns, must be a positive integer

    Returns:
        Result whose value is the new Matrix. Fails with
        INVALID_DIMENSIONS for non-positive or non-integer sizes and
        ALLOCATION_FAILURE if the buffer cannot be obtained.
    """
    return _allocate(rows, cols)


def release(mat: Matrix) -> None:
    """Free ``mat``'s buffer and reset it to the empty state."""
    mat.release()


def same_size(a: Matrix, b: Matrix) -> bool:
    return a.rows == b.rows and a.cols == b.cols


def shares_buffer(a: Matrix, b: Matrix) -> bool:
    """True if writing into ``a`` could change what is read from ``b``."""
    if a is b:
        return True
    if a.elements is None or b.elements is None:
        return False
    return bool(np.shares_memory(a.elements, b.elements))


@contextmanager
def scratch(rows: int, cols: int) -> Iterator[Matrix]:
    """
    Transient working matrix, released on every exit path.

    Usage:
        with scratch(dst.rows, dst.cols) as tmp:
            ...  # compute into tmp
            np.copyto(dst.view(), tmp.view())
    """
    tmp = _allocate(rows, cols)
    try:
        yield tmp
    finally:
        tmp.release()
