"""
Core infrastructure for PyVecMat.

This module provides shared abstractions and utilities used by the value
types (pyvecmat.linalg) and the operation layer (pyvecmat.operations).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pyvecmat.core.protocols import Backend
from pyvecmat.core.result import Result
from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    IndexOutOfBoundsError,
    DimensionError,
    NotThreeDimensionalError,
    InvalidMatrixShapeError,
    LengthMismatchError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyVecMatError",
    "ValidationError",
    "IndexOutOfBoundsError",
    "DimensionError",
    "NotThreeDimensionalError",
    "InvalidMatrixShapeError",
    "LengthMismatchError",
]
