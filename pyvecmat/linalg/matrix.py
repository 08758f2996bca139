"""
Matrix: immutable rectangular array of real numbers.

Uses a read-only 2D float64 numpy array as the underlying container. A
Matrix always has at least one row and one column. Every operation returns
a new Matrix and never mutates its receiver or arguments.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.compute.tolerances import ToleranceTier, CPU_FP64
from pyvecmat.core.exceptions import DimensionError, InvalidMatrixShapeError
from pyvecmat.core.validation import (
    check_2d,
    check_consistent_length,
    check_index,
    check_index_pair,
    check_rectangular,
    check_same_shape,
    check_scalar,
    check_size,
)
from pyvecmat.linalg.vector import Vector, _freeze, _hash_key


@dataclass(frozen=True, eq=False, repr=False)
class Matrix:
    """
    Fixed-shape n x m matrix of real numbers, indexed by (row, column).

    Construct via factory classmethods, not directly.

    Construction:
        Matrix.from_size(2, 0.0)          # 2x2 zeros
        Matrix.from_shape(2, 3, 1.0)      # 2x3 ones
        Matrix.copy_of(other)
        Matrix.from_vector(vector)        # 1 x vector.dimension
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.identity(3)
    """
    _rows: NDArray[np.floating[Any]]

    # Keep numpy from treating a Matrix as a sequence in mixed arithmetic
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        rows = _freeze(self._rows)
        check_2d(rows, 'rows')
        if rows.shape[0] < 1 or rows.shape[1] < 1:
            raise InvalidMatrixShapeError(
                f"rows: matrix must have at least one row and one column, got shape {rows.shape}"
            )
        object.__setattr__(self, '_rows', rows)

    # === Factory Methods ===

    @classmethod
    def from_size(cls, n: int, value: float) -> Matrix:
        """Square n x n matrix with every element set to `value`."""
        return cls.from_shape(n, n, value)

    @classmethod
    def from_shape(cls, n: int, m: int, value: float) -> Matrix:
        """
        n x m matrix with every element set to `value`.

        Raises:
            ValidationError: If n < 1, m < 1, or either is not an integer
        """
        n = check_size(n, 'n', minimum=1)
        m = check_size(m, 'm', minimum=1)
        value = check_scalar(value, 'value')
        return cls(_rows=np.full((n, m), value, dtype=np.float64))

    @classmethod
    def copy_of(cls, other: Matrix) -> Matrix:
        """Deep copy of another Matrix."""
        return cls(_rows=other._rows)

    @classmethod
    def from_vector(cls, vector: Vector) -> Matrix:
        """
        Single-row matrix whose row is a copy of the vector's elements.

        Raises:
            InvalidMatrixShapeError: If the vector is empty
        """
        if vector.dimension == 0:
            raise InvalidMatrixShapeError(
                "vector: matrix must have at least one column, got an empty vector",
                row_lengths=(0,),
            )
        return cls(_rows=vector.to_array().reshape(1, -1))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]] | ArrayLike) -> Matrix:
        """
        Matrix holding a copy of the given rows.

        Raises:
            InvalidMatrixShapeError: If there are no rows, no columns, or rows
                differ in length
            ValidationError: If the data is not numeric
        """
        return cls(_rows=check_rectangular(rows, 'rows'))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        return identity(n)

    # === Properties & Access ===

    @property
    def n(self) -> int:
        """First dimension (number of rows)."""
        return int(self._rows.shape[0])

    @property
    def m(self) -> int:
        """Second dimension (number of columns)."""
        return int(self._rows.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n, self.m)

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the matrix data, shape (n, m)."""
        return self._rows.copy()

    def to_2d_list(self) -> list[list[float]]:
        """Rows as new lists of floats."""
        return self._rows.tolist()

    def get_at(self, i: int, j: int) -> float:
        """
        Element at row `i`, column `j`.

        Raises:
            IndexOutOfBoundsError: If i is outside [0, n) or j outside [0, m)
        """
        i, j = check_index_pair((i, j), self.shape, 'index')
        return float(self._rows[i, j])

    def set_at(self, value: float, i: int, j: int) -> Matrix:
        """
        Return a new Matrix with the element at (i, j) set to `value`.

        Raises:
            IndexOutOfBoundsError: If (i, j) is outside the matrix
        """
        return self.set_multiple([value], [(i, j)])

    def set_multiple(
        self,
        values: Sequence[float],
        indices: Sequence[tuple[int, int]],
    ) -> Matrix:
        """
        Return a new Matrix with several elements replaced at once.

        The k-th pair in `indices` is the address of `values[k]`. Every pair
        is validated before any value is written, so a failure leaves no
        partially updated result. Later pairs win when an address repeats.

        Raises:
            LengthMismatchError: If values and indices differ in length
            ValidationError: If a pair is malformed or a value is not real
            IndexOutOfBoundsError: If any pair is outside the matrix
        """
        check_consistent_length(values, indices, 'set_multiple')

        shape = self.shape
        cells = [check_index_pair(pair, shape, 'indices') for pair in indices]
        checked = [check_scalar(value, 'values') for value in values]

        array = self.to_array()
        for (i, j), value in zip(cells, checked):
            array[i, j] = value
        return Matrix(_rows=array)

    def row(self, i: int) -> Vector:
        """Row `i` as a Vector."""
        i = check_index(i, self.n, 'row')
        return Vector.from_sequence(self._rows[i])

    # === Algebra ===

    def add(self, other: Matrix) -> Matrix:
        """
        Element-wise sum with another Matrix of the same shape.

        Raises:
            DimensionError: If shapes differ
        """
        check_same_shape(other.shape, self.shape, 'add')
        return Matrix(_rows=self._rows + other._rows)

    def multiply(self, scalar: float) -> Matrix:
        """Multiply every element by `scalar`."""
        scalar = check_scalar(scalar, 'scalar')
        return Matrix(_rows=self._rows * scalar)

    def matrix_multiplication(self, other: Matrix) -> Matrix:
        """
        Matrix product self x other.

        Result has shape (self.n, other.m). Each cell accumulates
        self[i][k] * other[k][j] over increasing k, starting from 0.0.

        Raises:
            DimensionError: If self.m != other.n
        """
        if self.m != other.n:
            raise DimensionError(
                f"matrix_multiplication: inner dimensions must agree, "
                f"got {self.shape} x {other.shape}",
                expected=self.m,
                actual=other.n,
            )

        a = self._rows.tolist()
        b = other._rows.tolist()
        inner = self.m

        product = []
        for i in range(self.n):
            row = []
            for j in range(other.m):
                acc = 0.0
                for k in range(inner):
                    acc += a[i][k] * b[k][j]
                row.append(acc)
            product.append(row)

        return Matrix(_rows=np.array(product, dtype=np.float64).reshape(self.n, other.m))

    def transpose(self) -> Matrix:
        """Transpose, shape (m, n)."""
        return Matrix(_rows=self._rows.T)

    def allclose(self, other: Matrix, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """Element-wise approximate equality; False if shapes differ."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._rows, other._rows, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    # === Python protocols ===

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self.get_at(i, j)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar: Any) -> Matrix:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matrix_multiplication(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._rows, other._rows, equal_nan=True))

    def __hash__(self) -> int:
        return hash((self.shape, _hash_key(self._rows)))

    def __repr__(self) -> str:
        return f"Matrix({self.to_2d_list()})"


def identity(n: int) -> Matrix:
    """
    n x n identity matrix.

    Built from a zero matrix by setting the diagonal in one set_multiple call.
    """
    zeros = Matrix.from_size(n, 0.0)
    ones = [1.0] * zeros.n
    diagonal = [(i, i) for i in range(zeros.n)]
    return zeros.set_multiple(ones, diagonal)
