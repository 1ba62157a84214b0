"""
Elementwise matrix operations.

Every operation writes into a caller-supplied destination and returns
a Result; nothing raises for shape problems. Destinations may be the
same Matrix (or share the buffer of) a source:
    - add/sub/scale are computed by numpy ufuncs with ``out=``, which
      read each element before overwriting it
    - transpose goes through a scratch buffer when dst aliases src
"""

import numpy as np

from pymatrix.core.compute.tolerances import CPU_FP64, ToleranceTier
from pymatrix.core.result import Result, returns_result
from pymatrix.core.validation import (
    check_allocated,
    check_same_size,
    check_shape,
    check_square,
)
from pymatrix.matrix import Matrix, _reallocate, same_size, scratch, shares_buffer


@returns_result
def copy(dst: Matrix, src: Matrix) -> Result[None]:
    """
    Copy every element of ``src`` into ``dst``.

    If the shapes differ, ``dst`` is first reallocated to ``src``'s shape
    (its old buffer is dropped). Copying an empty ``src`` leaves ``dst``
    empty. Fails only with ALLOCATION_FAILURE.
    """
    if dst is src:
        return None
    if not src.is_valid:
        dst.release()
        return None
    if not dst.is_valid or not same_size(dst, src):
        _reallocate(dst, src.rows, src.cols)
    np.copyto(dst.elements, src.elements)
    return None


def _check_binary(dst: Matrix, a: Matrix, b: Matrix) -> None:
    check_allocated(dst, 'dst')
    check_allocated(a, 'a')
    check_allocated(b, 'b')
    check_same_size(dst, a, ('dst', 'a'))
    check_same_size(a, b, ('a', 'b'))


@returns_result
def add(dst: Matrix, a: Matrix, b: Matrix) -> Result[None]:
    """dst = a + b. All three must share one shape."""
    _check_binary(dst, a, b)
    np.add(a.elements, b.elements, out=dst.elements)
    return None


@returns_result
def sub(dst: Matrix, a: Matrix, b: Matrix) -> Result[None]:
    """dst = a - b. All three must share one shape."""
    _check_binary(dst, a, b)
    np.subtract(a.elements, b.elements, out=dst.elements)
    return None


@returns_result
def scale(dst: Matrix, src: Matrix, scalar: float) -> Result[None]:
    """dst = src * scalar."""
    check_allocated(dst, 'dst')
    check_allocated(src, 'src')
    check_same_size(dst, src, ('dst', 'src'))
    np.multiply(src.elements, scalar, out=dst.elements)
    return None


@returns_result
def transpose(dst: Matrix, src: Matrix) -> Result[None]:
    """
    dst[j, i] = src[i, j].

    ``dst`` must be src.cols x src.rows. When ``dst`` aliases ``src``
    (only possible for square matrices) the transpose is staged in a
    scratch matrix so no source element is overwritten before it is read.
    """
    check_allocated(dst, 'dst')
    check_allocated(src, 'src')
    check_shape(dst, src.cols, src.rows, 'dst')

    if shares_buffer(dst, src):
        with scratch(dst.rows, dst.cols) as tmp:
            np.copyto(tmp.view(), src.view().T)
            np.copyto(dst.elements, tmp.elements)
    else:
        np.copyto(dst.view(), src.view().T)
    return None


@returns_result
def identity(mat: Matrix) -> Result[None]:
    """Overwrite a square matrix with the identity."""
    check_allocated(mat, 'mat')
    check_square(mat, 'mat')
    view = mat.view()
    view.fill(0.0)
    np.fill_diagonal(view, 1.0)
    return None


def equal(a: Matrix, b: Matrix) -> bool:
    """
    Exact elementwise comparison.

    False if the shapes differ. No tolerance is applied: a single element
    perturbed by 1e-10 makes the matrices unequal. Use allclose() for
    tolerant comparison.
    """
    if not same_size(a, b):
        return False
    if a.elements is None or b.elements is None:
        return a.elements is None and b.elements is None
    return bool(np.array_equal(a.elements, b.elements))


def allclose(a: Matrix, b: Matrix, tier: ToleranceTier = CPU_FP64) -> bool:
    """
    Tolerant comparison: |a - b| <= atol + rtol * |b| for every element.

    Args:
        a, b: Matrices to compare
        tier: Tolerance tier supplying rtol and atol

    Returns:
        False if the shapes differ, otherwise whether all elements agree
        within the tier's tolerance
    """
    if not same_size(a, b):
        return False
    if a.elements is None or b.elements is None:
        return a.elements is None and b.elements is None
    return bool(np.allclose(a.elements, b.elements, rtol=tier.rtol, atol=tier.atol))
