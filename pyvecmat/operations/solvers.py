"""
Solver dispatch for vector and matrix operations.

One public function per user action. Each builds an OperandDesign from the
raw input, selects a backend, and wraps the Result in an OperationSolution.
Errors raised by validation or by the value types propagate unchanged so the
caller can show str(error) to the user.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pyvecmat.core.exceptions import ValidationError
from pyvecmat.linalg.matrix import Matrix
from pyvecmat.linalg.vector import Vector
from pyvecmat.operations.design import OperandDesign
from pyvecmat.operations.solution import OperationSolution
from pyvecmat.operations.backends.cpu import CPUOperationBackend


BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: BackendChoice) -> CPUOperationBackend:
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUOperationBackend()

    raise ValidationError(f"Unknown backend: {backend!r}. Must be 'auto' or 'cpu'.")


def _run(design: OperandDesign, operation: str, backend: BackendChoice) -> OperationSolution:
    be = _get_backend(backend)
    result = be.solve(design, operation=operation)
    return OperationSolution(_result=result, _design=design)


# --- Vector actions ---

def vector_add(
    a: Vector | ArrayLike,
    b: Vector | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> OperationSolution:
    """
    Element-wise sum of two vectors.

    Raises
    ------
    DimensionError
        If the vectors differ in dimension.
    """
    return _run(OperandDesign.from_vectors(a, b), 'add', backend)


def vector_scale(
    a: Vector | ArrayLike,
    scalar: float,
    *,
    backend: BackendChoice = 'auto',
) -> OperationSolution:
    """Multiply every element of a vector by a scalar."""
    return _run(OperandDesign.from_vectors(a, scalar=scalar), 'scale', backend)


def dot(
    a: Vector | ArrayLike,
    b: Vector | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> OperationSolution:
    """
    Scalar (dot) product of two vectors.

    The solution's value is a float.
    """
    return _run(OperandDesign.from_vectors(a, b), 'dot', backend)


def cross(
    a: Vector | ArrayLike,
    b: Vector | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> OperationSolution:
    """
    Vector product of two 3-dimensional vectors.

    Uses the sign convention of Vector.vector_product.

    Raises
    ------
    NotThreeDimensionalError
        If either vector is not 3-dimensional.
    """
    return _run(OperandDesign.from_vectors(a, b), 'cross', backend)


# --- Matrix actions ---

def matrix_add(
    a: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> OperationSolution:
    """Element-wise sum of two matrices of the same shape."""
    return _run(OperandDesign.from_matrices(a, b), 'add', backend)


def matrix_scale(
    a: Matrix | ArrayLike,
    scalar: float,
    *,
    backend: BackendChoice = 'auto',
) -> OperationSolution:
    """Multiply every element of a matrix by a scalar."""
    return _run(OperandDesign.from_matrices(a, scalar=scalar), 'scale', backend)


def matmul(
    a: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> OperationSolution:
    """
    Matrix product a x b.

    Raises
    ------
    DimensionError
        If the column count of a differs from the row count of b.
    """
    return _run(OperandDesign.from_matrices(a, b), 'matmul', backend)


def transpose(
    a: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> OperationSolution:
    """Transpose of a matrix."""
    return _run(OperandDesign.from_matrices(a), 'transpose', backend)
