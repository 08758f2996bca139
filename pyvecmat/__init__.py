"""
PyVecMat: immutable vector and matrix value types for teaching linear algebra.

A small reference implementation of vector and matrix algebra with
dimension validation on every operation, plus an operation layer that a
visualization front end calls once per user action.

Submodules:
    linalg: Vector and Matrix value types, identity()
    operations: Per-action functions returning displayable results
    core: Exceptions, validation, result envelope, timing, tolerances
"""

__version__ = "0.1.0"

from pyvecmat import operations
from pyvecmat.linalg import Vector, Matrix, identity
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
    "__version__",
    "Vector",
    "Matrix",
    "identity",
    "operations",
    "PyVecMatError",
    "ValidationError",
    "IndexOutOfBoundsError",
    "DimensionError",
    "NotThreeDimensionalError",
    "InvalidMatrixShapeError",
    "LengthMismatchError",
]
