"""
PyMatrix: dense real matrix algebra for Python.

Row-major float64 matrices with elementwise arithmetic, products, and a
Gaussian-elimination solver and inverse. Every operation writes into a
caller-supplied destination (which may alias a source) and returns a
Result instead of raising.

Submodules:
    matrix: Storage, allocation and element access
    elementwise: copy, add, sub, scale, transpose, identity, equal, allclose
    product: multiply
    linalg: solve, inverse
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import ErrorKind
from pymatrix.core.result import Result
from pymatrix.matrix import Matrix, allocate, release, same_size, shares_buffer
from pymatrix.elementwise import (
    add,
    allclose,
    copy,
    equal,
    identity,
    scale,
    sub,
    transpose,
)
from pymatrix.product import multiply
from pymatrix.linalg import inverse, solve

__all__ = [
    "__version__",
    "ErrorKind",
    "Result",
    # Storage
    "Matrix",
    "allocate",
    "release",
    "same_size",
    "shares_buffer",
    # Elementwise
    "copy",
    "add",
    "sub",
    "scale",
    "transpose",
    "identity",
    "equal",
    "allclose",
    # Product
    "multiply",
    # Linear algebra
    "solve",
    "inverse",
]
