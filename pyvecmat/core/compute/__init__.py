"""
Shared compute infrastructure for PyVecMat.

IMPORTANT: This is NOT where the value types or operation backends live.
Those go in pyvecmat.linalg and pyvecmat.operations. This module contains
shared timing and comparison infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for approximate comparison
"""

from pyvecmat.core.compute.timing import Timer, timed
from pyvecmat.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    CPU_FP64,
    DISPLAY,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "DISPLAY",
    "select_tolerance",
]
