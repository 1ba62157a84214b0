"""
Result envelope for all PyMatrix operations.

Every public operation reports success or failure through a Result
instead of raising. A failed Result carries the ErrorKind plus the
original exception, so callers keep the "check every call" discipline
while still getting full diagnostics.

Design decisions:
    - Generic over payload P (None for operations that only mutate)
    - Falsy on failure so ``if not op(...)`` reads naturally
    - info dict for flexible metadata (pivots, tolerance, method)
    - timing is optional (only the solver measures phases)
    - Immutable (frozen=True)
"""

import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from pymatrix.core.exceptions import AllocationError, ErrorKind, PyMatrixError

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable outcome of a matrix operation.

    Type Parameters:
        P: The operation's payload type

    Attributes:
        value: Payload on success (a Matrix for allocate, None for
               operations that write into a destination)
        exception: The error that caused failure, or None on success
        info: Structured metadata (method, pivots, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> result = solve(x, A, b)
        >>> if not result:
        ...     print(result.error, result.message)

        >>> A = allocate(3, 3).unwrap()
    """
    value: P | None = None
    exception: PyMatrixError | None = field(default=None, repr=False)
    info: dict[str, Any] = field(default_factory=dict)
    timing: dict[str, float] | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def failure(cls, exception: PyMatrixError) -> 'Result[Any]':
        """Build a failed Result carrying ``exception``."""
        return cls(value=None, exception=exception)

    @property
    def ok(self) -> bool:
        return self.exception is None

    @property
    def error(self) -> ErrorKind | None:
        if self.exception is None:
            return None
        return self.exception.kind

    @property
    def message(self) -> str:
        return '' if self.exception is None else str(self.exception)

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> P | None:
        """Return the payload, re-raising the carried exception on failure."""
        if self.exception is not None:
            raise self.exception
        return self.value

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)


def returns_result(func: Callable[..., Any]) -> Callable[..., Result[Any]]:
    """
    Turn a raising implementation into a Result-returning operation.

    The wrapped function validates and raises PyMatrixError subclasses in
    the usual way. Those, and MemoryError from numpy, come back as a failed
    Result. A Result returned by the function passes through untouched;
    any other return value becomes the payload of a successful Result.
    Exceptions outside the taxonomy (TypeError on a non-Matrix argument,
    for instance) propagate.
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Result[Any]:
        try:
            out = func(*args, **kwargs)
        except PyMatrixError as exc:
            return Result.failure(exc)
        except MemoryError as exc:
            return Result.failure(
                AllocationError(f"{func.__name__}: out of memory ({exc})")
            )
        if isinstance(out, Result):
            return out
        return Result(value=out)

    return wrapper
