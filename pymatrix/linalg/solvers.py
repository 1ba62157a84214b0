"""
Linear system solver and matrix inverse.

Both operations copy their inputs into a private augmented array before
writing any output, so the destination may alias an input
(``inverse(A, A)``, ``solve(b, A, b)``). On failure the destination is
left untouched.
"""

import warnings

import numpy as np

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import ILL_CONDITIONED_PIVOT_RATIO
from pymatrix.core.exceptions import DimensionError
from pymatrix.core.result import Result, returns_result
from pymatrix.core.validation import check_allocated, check_shape, check_square
from pymatrix.elementwise import identity
from pymatrix.linalg._elimination import augment, back_substitute, forward_eliminate
from pymatrix.matrix import Matrix, scratch


def _solve(
    x: Matrix,
    A: Matrix,
    b: Matrix,
    tol: float | None,
    matrix_name: str = 'A',
) -> Result[None]:
    check_allocated(x, 'x')
    check_allocated(A, matrix_name)
    check_allocated(b, 'b')
    n = A.rows
    if A.cols != n:
        raise DimensionError(
            f"{matrix_name}: coefficient matrix must be square, got {A.rows}x{A.cols}"
        )
    if b.rows != n:
        raise DimensionError(
            f"b: expected {n} rows to match {matrix_name}, got {b.rows}"
        )
    check_shape(x, n, b.cols, 'x')

    timer = Timer()
    timer.start()

    work = augment(A.view(), b.view())

    with timer.section('forward_elimination'):
        elim = forward_eliminate(work, tol=tol, matrix_name=matrix_name)

    with timer.section('back_substitution'):
        solution = back_substitute(work)

    np.copyto(x.view(), solution)
    timer.stop()

    issues = []
    if elim.pivot_ratio < ILL_CONDITIONED_PIVOT_RATIO:
        msg = (
            f"{matrix_name} is ill-conditioned: pivot magnitude ratio "
            f"{elim.pivot_ratio:.3e} is below {ILL_CONDITIONED_PIVOT_RATIO:.0e}; "
            f"the solution may be inaccurate"
        )
        warnings.warn(msg, UserWarning, stacklevel=4)
        issues.append(msg)

    return Result(
        value=None,
        info={
            'method': 'gaussian_partial_pivot',
            'pivot_rows': elim.pivot_rows,
            'n_swaps': elim.n_swaps,
            'min_pivot': elim.min_pivot,
            'max_pivot': elim.max_pivot,
            'tolerance': elim.tolerance,
        },
        timing=timer.result(),
        warnings=tuple(issues),
    )


@returns_result
def solve(x: Matrix, A: Matrix, b: Matrix, *, tol: float | None = None) -> Result[None]:
    """
    Solve A @ x = b by Gaussian elimination with partial pivoting.

    Args:
        x: Destination, n x m; written only on success
        A: Square coefficient matrix, n x n
        b: Right-hand side(s), n x m
        tol: Pivot magnitude at or below which A is treated as singular.
             Defaults to n * eps * max|A|.

    Returns:
        Result with elimination diagnostics in ``info`` and phase timings.
        Fails with DIMENSION_MISMATCH on incompatible shapes and SINGULAR
        when a pivot falls at or below the tolerance.

    Warns:
        UserWarning: If the pivots indicate severe ill-conditioning
    """
    return _solve(x, A, b, tol)


@returns_result
def inverse(inv_a: Matrix, A: Matrix, *, tol: float | None = None) -> Result[None]:
    """
    Compute the inverse of a square matrix by solving A @ inv_a = I.

    ``inv_a`` may be ``A`` itself. A singular A yields a SINGULAR failure
    and ``inv_a`` is not modified, so no partially inverted matrix is
    ever returned.

    Args:
        inv_a: Destination, n x n
        A: Square matrix to invert
        tol: Singularity threshold, as for solve()

    Returns:
        Result from the underlying solve. Fails with NOT_SQUARE if A is
        not square, DIMENSION_MISMATCH if inv_a has the wrong shape.
    """
    check_allocated(A, 'A')
    check_square(A, 'A')
    check_allocated(inv_a, 'inv_a')
    check_shape(inv_a, A.rows, A.cols, 'inv_a')

    with scratch(A.rows, A.cols) as eye:
        identity(eye).unwrap()
        return _solve(inv_a, A, eye, tol)
