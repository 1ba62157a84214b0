"""
Shared compute infrastructure for PyMatrix.

Submodules:
    tolerances: Tolerance tiers and the singularity threshold
    timing: Execution timing utilities
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    EPSILON_64,
    ILL_CONDITIONED_PIVOT_RATIO,
    ToleranceTier,
    select_tolerance,
    singularity_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "EPSILON_64",
    "ILL_CONDITIONED_PIVOT_RATIO",
    "select_tolerance",
    "singularity_tolerance",
]
