"""
OperandDesign: validated operands for one user action.

Wraps the vector or matrix operands (and optional scalar) that a front end
collected from user-entered grids. Raw input is validated here, once, so
backends can assume well-formed value types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike

from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_rectangular,
    check_scalar,
)
from pyvecmat.linalg.matrix import Matrix
from pyvecmat.linalg.vector import Vector


OperandKind = Literal['vector', 'matrix']


def _to_vector(value: Vector | ArrayLike, name: str) -> Vector:
    if isinstance(value, Vector):
        return value
    array = check_array(value, name)
    check_1d(array, name)
    check_finite(array, name)
    return Vector.from_sequence(array)


def _to_matrix(value: Matrix | Vector | ArrayLike, name: str) -> Matrix:
    if isinstance(value, Matrix):
        return value
    if isinstance(value, Vector):
        return Matrix.from_vector(value)
    array = check_rectangular(value, name)
    check_finite(array, name)
    return Matrix.from_rows(array)


def _to_scalar(value: Any, name: str) -> float:
    scalar = check_scalar(value, name)
    check_finite(np.asarray(scalar), name)
    return scalar


@dataclass(frozen=True)
class OperandDesign:
    """
    Operands for a single vector or matrix operation.

    Immutable after construction.

    Construction:
        OperandDesign.from_vectors([1, 2, 3], [4, 5, 6])
        OperandDesign.from_vectors(v, scalar=2.0)
        OperandDesign.from_matrices([[1, 2], [3, 4]], [[5, 6], [7, 8]])
    """
    _kind: OperandKind
    _a: Vector | Matrix
    _b: Vector | Matrix | None = None
    _scalar: float | None = None

    @classmethod
    def from_vectors(
        cls,
        a: Vector | ArrayLike,
        b: Vector | ArrayLike | None = None,
        *,
        scalar: float | None = None,
    ) -> OperandDesign:
        """
        Build a design from one or two vectors.

        Raw sequences must be one-dimensional, numeric and finite.
        """
        return cls(
            _kind='vector',
            _a=_to_vector(a, 'a'),
            _b=None if b is None else _to_vector(b, 'b'),
            _scalar=None if scalar is None else _to_scalar(scalar, 'scalar'),
        )

    @classmethod
    def from_matrices(
        cls,
        a: Matrix | ArrayLike,
        b: Matrix | ArrayLike | None = None,
        *,
        scalar: float | None = None,
    ) -> OperandDesign:
        """
        Build a design from one or two matrices.

        Raw grids must be rectangular, numeric and finite.
        """
        return cls(
            _kind='matrix',
            _a=_to_matrix(a, 'a'),
            _b=None if b is None else _to_matrix(b, 'b'),
            _scalar=None if scalar is None else _to_scalar(scalar, 'scalar'),
        )

    @property
    def kind(self) -> OperandKind:
        return self._kind

    @property
    def a(self) -> Vector | Matrix:
        """First operand."""
        return self._a

    @property
    def b(self) -> Vector | Matrix | None:
        """Second operand, or None for unary operations."""
        return self._b

    @property
    def scalar(self) -> float | None:
        return self._scalar

    def require_b(self, operation: str) -> Vector | Matrix:
        """Second operand, raising if the design has none."""
        if self._b is None:
            raise ValidationError(f"{operation}: requires a second {self._kind} operand")
        return self._b

    def require_scalar(self, operation: str) -> float:
        """Scalar operand, raising if the design has none."""
        if self._scalar is None:
            raise ValidationError(f"{operation}: requires a scalar operand")
        return self._scalar

    @property
    def operand_shapes(self) -> tuple[tuple[int, ...], ...]:
        """Shapes of the vector/matrix operands, (dimension,) for vectors."""
        operands = [self._a] if self._b is None else [self._a, self._b]
        return tuple(_shape_of(x) for x in operands)

    def __repr__(self) -> str:
        shapes = " x ".join(str(s) for s in self.operand_shapes)
        scalar = f", scalar={self._scalar:g}" if self._scalar is not None else ""
        return f"OperandDesign(kind={self._kind}, shapes={shapes}{scalar})"


def _shape_of(value: Vector | Matrix) -> tuple[int, ...]:
    if isinstance(value, Vector):
        return (value.dimension,)
    return value.shape
