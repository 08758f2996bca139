"""
Vector: immutable element of a real vector space.

Uses a read-only float64 numpy array as the underlying container. Every
operation returns a new Vector; no operation mutates its receiver or its
arguments, and no two Vectors share storage.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.compute.tolerances import ToleranceTier, CPU_FP64
from pyvecmat.core.exceptions import NotThreeDimensionalError
from pyvecmat.core.validation import (
    check_array,
    check_1d,
    check_index,
    check_same_dimension,
    check_scalar,
    check_size,
)


def _freeze(array: ArrayLike) -> NDArray[np.floating[Any]]:
    """Private read-only float64 copy of `array`."""
    frozen = np.array(array, dtype=np.float64)
    frozen.setflags(write=False)
    return frozen


def _hash_key(array: NDArray[np.floating[Any]]) -> tuple[float, ...]:
    # NaN hashes by identity, so map it to a fixed value
    return tuple(np.where(np.isnan(array), 0.0, array).ravel().tolist())


@dataclass(frozen=True, eq=False, repr=False)
class Vector:
    """
    Fixed-dimension ordered sequence of real numbers.

    Construct via factory classmethods, not directly.

    Construction:
        Vector.from_size(3)                  # [0, 0, 0]
        Vector.from_size_and_value(3, 1.5)   # [1.5, 1.5, 1.5]
        Vector.copy_of(other)
        Vector.from_sequence([1, 2, 3])
    """
    _elements: NDArray[np.floating[Any]]

    # Keep numpy from treating a Vector as a sequence in mixed arithmetic
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        elements = _freeze(self._elements)
        check_1d(elements, 'elements')
        object.__setattr__(self, '_elements', elements)

    # === Factory Methods ===

    @classmethod
    def from_size(cls, size: int) -> Vector:
        """Vector of `size` zeros. `size` must be an integer >= 0."""
        return cls.from_size_and_value(size, 0.0)

    @classmethod
    def from_size_and_value(cls, size: int, value: float) -> Vector:
        """Vector of `size` copies of `value`."""
        size = check_size(size, 'size')
        value = check_scalar(value, 'value')
        return cls(_elements=np.full(size, value, dtype=np.float64))

    @classmethod
    def copy_of(cls, other: Vector) -> Vector:
        """Element-wise copy of another Vector."""
        return cls(_elements=other._elements)

    @classmethod
    def from_sequence(cls, elements: ArrayLike) -> Vector:
        """
        Vector holding a copy of the given numbers.

        Args:
            elements: 1D sequence or array of real numbers

        Raises:
            ValidationError: If elements are not numeric
            DimensionError: If elements are not one-dimensional
        """
        array = check_array(elements, 'elements')
        check_1d(array, 'elements')
        return cls(_elements=array)

    # === Properties & Access ===

    @property
    def dimension(self) -> int:
        """Number of elements."""
        return int(self._elements.shape[0])

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the elements."""
        return self._elements.copy()

    def to_list(self) -> list[float]:
        """Elements as a new list of floats."""
        return self._elements.tolist()

    def get_at(self, index: int) -> float:
        """
        Element at `index`.

        Raises:
            IndexOutOfBoundsError: If index < 0 or index >= dimension
        """
        i = check_index(index, self.dimension, 'index')
        return float(self._elements[i])

    def set_at(self, value: float, index: int) -> Vector:
        """
        Return a new Vector with the element at `index` set to `value`.

        The receiver is not modified.

        Raises:
            IndexOutOfBoundsError: If index < 0 or index >= dimension
        """
        i = check_index(index, self.dimension, 'index')
        value = check_scalar(value, 'value')

        array = self.to_array()
        array[i] = value
        return Vector(_elements=array)

    # === Algebra ===

    def map(self, f: Callable[[float, int, NDArray[np.floating[Any]]], float]) -> Vector:
        """
        Apply `f` to each element and collect the results in a new Vector.

        `f` is called as f(x, i, elements) in index order, where `elements`
        is a read-only view of this Vector's data.
        """
        elements = self._elements
        return Vector.from_sequence(
            [f(x, i, elements) for i, x in enumerate(elements.tolist())]
        )

    def add(self, other: Vector) -> Vector:
        """
        Element-wise sum with another Vector of the same dimension.

        Raises:
            DimensionError: If dimensions differ
        """
        check_same_dimension(other.dimension, self.dimension, 'add')
        return Vector(_elements=self._elements + other._elements)

    def multiply(self, scalar: float) -> Vector:
        """Multiply every element by `scalar`."""
        scalar = check_scalar(scalar, 'scalar')
        return Vector(_elements=self._elements * scalar)

    def scalar_product(self, other: Vector) -> float:
        """
        Dot product with another Vector of the same dimension.

        Products are accumulated left to right by increasing index so the
        floating-point result is reproducible.

        Raises:
            DimensionError: If dimensions differ
        """
        check_same_dimension(other.dimension, self.dimension, 'scalar_product')

        total = 0.0
        for a, b in zip(self._elements.tolist(), other._elements.tolist()):
            total += b * a
        return total

    def vector_product(self, other: Vector) -> Vector:
        """
        Vector product of two 3-dimensional Vectors.

        Components are
            r0 = a1*b2 - a2*b1
            r1 = a0*b2 - a2*b0
            r2 = a0*b1 - a1*b0
        The middle component is intentionally not negated.

        Raises:
            NotThreeDimensionalError: If either operand is not 3-dimensional
        """
        if self.dimension != 3 or other.dimension != 3:
            raise NotThreeDimensionalError(
                f"vector_product: both vectors must have 3 dimensions, "
                f"got {self.dimension} and {other.dimension}",
                expected=3,
                actual=other.dimension if self.dimension == 3 else self.dimension,
            )

        a0, a1, a2 = self._elements.tolist()
        b0, b1, b2 = other._elements.tolist()

        x = a1 * b2 - a2 * b1
        y = a0 * b2 - a2 * b0
        z = a0 * b1 - a1 * b0

        return Vector.from_sequence([x, y, z])

    def allclose(self, other: Vector, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """Element-wise approximate equality; False if dimensions differ."""
        if self.dimension != other.dimension:
            return False
        return bool(np.allclose(
            self._elements, other._elements, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    # === Python protocols ===

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self._elements.tolist())

    def __getitem__(self, index: int) -> float:
        return self.get_at(index)

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar: Any) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._elements, other._elements, equal_nan=True))

    def __hash__(self) -> int:
        return hash(_hash_key(self._elements))

    def __repr__(self) -> str:
        return f"Vector({self.to_list()})"

    def __str__(self) -> str:
        return ",".join(f"{x:g}" for x in self._elements.tolist())
