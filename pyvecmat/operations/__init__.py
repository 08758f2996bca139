"""
Operation layer: one call per user action.

Accepts value types or raw user-entered grids, validates them, runs the
operation on a backend, and returns a displayable OperationSolution.

Public API:
    vector_add(a, b)       - vector sum
    vector_scale(a, s)     - vector times scalar
    dot(a, b)              - scalar product
    cross(a, b)            - vector product (3D)
    matrix_add(a, b)       - matrix sum
    matrix_scale(a, s)     - matrix times scalar
    matmul(a, b)           - matrix product
    transpose(a)           - matrix transpose
"""

from pyvecmat.operations.design import OperandDesign
from pyvecmat.operations.solution import OperationParams, OperationSolution
from pyvecmat.operations.solvers import (
    vector_add,
    vector_scale,
    dot,
    cross,
    matrix_add,
    matrix_scale,
    matmul,
    transpose,
)

__all__ = [
    "vector_add",
    "vector_scale",
    "dot",
    "cross",
    "matrix_add",
    "matrix_scale",
    "matmul",
    "transpose",
    "OperandDesign",
    "OperationParams",
    "OperationSolution",
]
