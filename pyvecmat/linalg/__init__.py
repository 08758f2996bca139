"""
Immutable vector and matrix value types.

Public API:
    Vector       - fixed-dimension real vector
    Matrix       - fixed-shape real matrix
    identity(n)  - n x n identity Matrix
"""

from pyvecmat.linalg.vector import Vector
from pyvecmat.linalg.matrix import Matrix, identity

__all__ = [
    "Vector",
    "Matrix",
    "identity",
]
