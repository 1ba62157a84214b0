"""
Tolerance tiers and numerical thresholds.

Defines precision expectations used by the tolerant comparator, the
singularity test in Gaussian elimination, and the test suite:
- CPU FP64: machine precision for well-conditioned problems
- CPU FP64, ill-conditioned: relaxed for large condition numbers
"""

from dataclasses import dataclass

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Reference: well-conditioned double precision results
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned reference',
)

# Ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Pivot magnitude ratio below which a successful elimination is reported
# as ill-conditioned. Roughly cond(A) > 1e10.
ILL_CONDITIONED_PIVOT_RATIO = 1e-10


def singularity_tolerance(n: int, scale: float) -> float:
    """
    Pivot threshold for an n x n coefficient matrix.

    Uses n * eps * max|A|, the same scaling used for numerical rank
    detection from an R diagonal. A pivot at or below this value is
    treated as zero.

    Args:
        n: Order of the coefficient matrix
        scale: Largest absolute element of the coefficient matrix

    Returns:
        Non-negative threshold (0.0 for an all-zero matrix)
    """
    return n * EPSILON_64 * scale


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a comparison."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
