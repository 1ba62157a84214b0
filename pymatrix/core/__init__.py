"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
storage, elementwise, product and linalg modules.

Key components:
    result: Result[P] envelope returned by every operation
    exceptions: Exception hierarchy and ErrorKind taxonomy
    validation: Input validators
    compute: Tolerance tiers and timing
"""

from pymatrix.core.result import Result, returns_result
from pymatrix.core.exceptions import (
    ErrorKind,
    PyMatrixError,
    ValidationError,
    InvalidDimensionsError,
    DimensionError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
    AllocationError,
)

__all__ = [
    # Result
    "Result",
    "returns_result",
    # Exceptions
    "ErrorKind",
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionsError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
    "AllocationError",
]
