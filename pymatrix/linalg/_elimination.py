"""
Gaussian elimination with partial pivoting.

Operates on a private augmented working array [A | B] of shape
(n, n + m). Callers build that array from their operands before any
output is written, which is what makes solve/inverse alias-safe.

Algorithm:
    1. For each column k, pick the row in k..n-1 with the largest |a_rk|
       (first such row on ties); fail if it is at or below tolerance
    2. Swap it into row k and eliminate column k from every row below
    3. Back-substitute the upper-triangular system for all m columns
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import singularity_tolerance
from pymatrix.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class EliminationInfo:
    """
    Diagnostics from a completed forward elimination.

    Attributes:
        pivot_rows: Row selected (before swapping) at each step
        n_swaps: Number of row interchanges performed
        min_pivot: Smallest pivot magnitude
        max_pivot: Largest pivot magnitude
        tolerance: Singularity threshold that was applied
    """
    pivot_rows: tuple[int, ...]
    n_swaps: int
    min_pivot: float
    max_pivot: float
    tolerance: float

    @property
    def pivot_ratio(self) -> float:
        """min/max pivot magnitude; small values flag ill-conditioning."""
        if self.max_pivot == 0.0:
            return 0.0
        return self.min_pivot / self.max_pivot


def augment(A: NDArray[np.float64], B: NDArray[np.float64]) -> NDArray[np.float64]:
    """Fresh (n, n + m) working array [A | B]."""
    return np.hstack([A, B]).astype(np.float64, copy=False)


def forward_eliminate(
    work: NDArray[np.float64],
    tol: float | None = None,
    matrix_name: str = 'A',
) -> EliminationInfo:
    """
    Reduce the left n x n block of ``work`` to upper-triangular form in place.

    Args:
        work: Augmented array (n, n + m); modified in place
        tol: Singularity threshold. Defaults to n * eps * max|A|
        matrix_name: Name used in the error message

    Returns:
        EliminationInfo describing the pivots

    Raises:
        SingularMatrixError: If a pivot column has no entry above tol
    """
    n = work.shape[0]
    if tol is None:
        tol = singularity_tolerance(n, float(np.max(np.abs(work[:, :n]))))

    pivot_rows = []
    pivots = np.empty(n, dtype=np.float64)
    n_swaps = 0

    for k in range(n):
        # argmax returns the first maximum, so ties go to the lowest row
        p = k + int(np.argmax(np.abs(work[k:, k])))
        pivot = abs(work[p, k])
        # `not >` so that a NaN pivot is also rejected
        if not pivot > tol:
            raise SingularMatrixError(
                f"{matrix_name} is singular to working precision: "
                f"largest pivot candidate in column {k} is {pivot:.3e} "
                f"(tolerance {tol:.3e})",
                matrix_name=matrix_name,
                pivot_index=k,
                pivot_value=float(pivot),
                tolerance=float(tol),
            )
        pivot_rows.append(p)
        pivots[k] = pivot

        if p != k:
            work[[k, p]] = work[[p, k]]
            n_swaps += 1

        factors = work[k + 1:, k] / work[k, k]
        work[k + 1:, k:] -= np.outer(factors, work[k, k:])
        work[k + 1:, k] = 0.0

    return EliminationInfo(
        pivot_rows=tuple(pivot_rows),
        n_swaps=n_swaps,
        min_pivot=float(pivots.min()),
        max_pivot=float(pivots.max()),
        tolerance=float(tol),
    )


def back_substitute(work: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Solve the upper-triangular system held in ``work``.

    Args:
        work: Eliminated augmented array (n, n + m)

    Returns:
        Solution array X of shape (n, m)
    """
    n = work.shape[0]
    m = work.shape[1] - n
    X = np.empty((n, m), dtype=np.float64)
    for i in range(n - 1, -1, -1):
        X[i] = (work[i, n:] - work[i, i + 1:n] @ X[i + 1:]) / work[i, i]
    return X
