"""
Dense matrix product.

The product is always formed in a scratch matrix and then copied into
the destination, so ``multiply(C, C, B)`` and ``multiply(B, A, B)``
give the same numbers as multiplying into a fresh matrix.
"""

import numpy as np

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.result import Result, returns_result
from pymatrix.core.validation import check_allocated, check_shape
from pymatrix.matrix import Matrix, scratch


@returns_result
def multiply(dst: Matrix, a: Matrix, b: Matrix) -> Result[None]:
    """
    dst = a @ b.

    Requires a.cols == b.rows and dst to be a.rows x b.cols. Cost is
    O(a.rows * b.cols * a.cols) with no special-structure shortcuts.

    Returns:
        Result, failing with DIMENSION_MISMATCH on incompatible shapes
        or ALLOCATION_FAILURE if the scratch buffer cannot be obtained
    """
    check_allocated(dst, 'dst')
    check_allocated(a, 'a')
    check_allocated(b, 'b')
    if a.cols != b.rows:
        raise DimensionError(
            f"Inner dimensions differ: a={a.rows}x{a.cols}, b={b.rows}x{b.cols}"
        )
    check_shape(dst, a.rows, b.cols, 'dst')

    with scratch(dst.rows, dst.cols) as tmp:
        np.matmul(a.view(), b.view(), out=tmp.view())
        np.copyto(dst.elements, tmp.elements)
    return None
