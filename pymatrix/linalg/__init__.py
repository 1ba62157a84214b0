"""
Linear algebra on dense matrices.

Submodules:
    solvers: solve() and inverse(), the public Result-returning API
    _elimination: Gaussian elimination kernel on numpy arrays
"""

from pymatrix.linalg.solvers import inverse, solve

__all__ = [
    "solve",
    "inverse",
]
