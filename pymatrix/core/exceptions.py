"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Each class declares the ErrorKind it reports,
so a raised exception can be turned into a failed Result without
losing the taxonomy.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported by matrix operations."""
    INVALID_DIMENSIONS = 'invalid_dimensions'
    DIMENSION_MISMATCH = 'dimension_mismatch'
    NOT_SQUARE = 'not_square'
    SINGULAR = 'singular'
    ALLOCATION_FAILURE = 'allocation_failure'


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    kind: ErrorKind | None = None


class ValidationError(PyMatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    kind = ErrorKind.DIMENSION_MISMATCH


class InvalidDimensionsError(ValidationError):
    """
    Requested matrix size is not a pair of positive integers.
    
    Attributes:
        rows: Requested number of rows
        cols: Requested number of columns
    """
    kind = ErrorKind.INVALID_DIMENSIONS

    def __init__(self, message: str, rows: object = None, cols: object = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class DimensionError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent.
    
    Raised when an operand or destination does not have the shape the
    operation requires, or when an operand is not allocated.
    """
    kind = ErrorKind.DIMENSION_MISMATCH


class NotSquareError(DimensionError):
    """
    A square matrix was required.
    
    Attributes:
        matrix_name: Name of the offending operand
        shape: Its actual (rows, cols)
    """
    kind = ErrorKind.NOT_SQUARE

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    kind = ErrorKind.SINGULAR


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised when elimination finds no pivot above the singularity
    tolerance in the current column.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Elimination step (column) at which it failed
        pivot_value: Largest remaining magnitude in that column
        tolerance: Threshold the pivot was compared against
    """
    kind = ErrorKind.SINGULAR

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.tolerance = tolerance


class AllocationError(PyMatrixError):
    """
    Element storage could not be allocated.
    
    Attributes:
        rows: Requested number of rows
        cols: Requested number of columns
    """
    kind = ErrorKind.ALLOCATION_FAILURE

    def __init__(self, message: str, rows: int | None = None, cols: int | None = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols
