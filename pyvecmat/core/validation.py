"""
Input validation utilities for PyVecMat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any, Sequence

from pyvecmat.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    InvalidMatrixShapeError,
    LengthMismatchError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to a freshly allocated array, so the
    result never shares memory with the input. Rejects inputs that result in
    object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64, owned by the caller

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, complex, etc.)
    if (not np.issubdtype(result.dtype, np.number)
            or np.issubdtype(result.dtype, np.complexfloating)):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a single real number and return it as a Python float.

    Args:
        value: Candidate scalar (int, float, numpy real scalar)
        name: Parameter name for error messages

    Returns:
        float(value)

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    return float(value)


def check_size(value: Any, name: str, minimum: int = 0) -> int:
    """
    Validate an integer size argument.

    Args:
        value: Candidate size
        name: Parameter name for error messages
        minimum: Smallest accepted size

    Returns:
        The size as a Python int

    Raises:
        ValidationError: If value is not an integer or is below minimum
    """
    size = _as_int(value, name)
    if size < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {size}")
    return size


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify a single index lies in [0, bound).

    Negative indices are out of bounds; there is no wraparound.

    Args:
        index: Candidate index
        bound: Exclusive upper bound (the dimension)
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfBoundsError: If index < 0 or index >= bound
    """
    i = _as_int(index, name)
    if i < 0 or i >= bound:
        raise IndexOutOfBoundsError(
            f"{name}: index {i} out of bounds for dimension {bound}",
            index=i,
            bounds=bound,
        )
    return i


def check_index_pair(pair: Any, shape: tuple[int, int], name: str) -> tuple[int, int]:
    """
    Verify an (i, j) pair addresses a cell of a matrix with the given shape.

    Args:
        pair: Candidate (row, column) pair
        shape: Matrix shape (n, m)
        name: Parameter name for error messages

    Returns:
        (i, j) as Python ints

    Raises:
        ValidationError: If pair is not a sequence of exactly two integers
        IndexOutOfBoundsError: If either index is outside the shape
    """
    try:
        i, j = pair
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"{name}: expected an (i, j) pair, got {pair!r}"
        ) from e

    i = _as_int(i, name)
    j = _as_int(j, name)
    n, m = shape
    if i < 0 or j < 0 or i >= n or j >= m:
        raise IndexOutOfBoundsError(
            f"{name}: index ({i}, {j}) out of bounds for shape ({n}, {m})",
            index=(i, j),
            bounds=(n, m),
        )
    return i, j


def check_same_dimension(actual: int, expected: int, name: str) -> None:
    """
    Verify two vector dimensions agree.

    Raises:
        DimensionError: If the dimensions differ
    """
    if actual != expected:
        raise DimensionError(
            f"{name}: both vectors must have the same dimension, "
            f"got {expected} and {actual}",
            expected=expected,
            actual=actual,
        )


def check_same_shape(
    actual: tuple[int, int],
    expected: tuple[int, int],
    name: str,
) -> None:
    """
    Verify two matrix shapes agree.

    Raises:
        DimensionError: If the shapes differ
    """
    if actual != expected:
        raise DimensionError(
            f"{name}: matrices must have the same dimensions, "
            f"got {expected} and {actual}",
            expected=expected,
            actual=actual,
        )


def check_rectangular(rows: Any, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate raw row data and convert it to a 2D float64 array.

    Row lengths are compared before conversion so ragged input is reported
    as a shape problem rather than a conversion failure.

    Args:
        rows: Sequence of rows, each a sequence of numbers, or a 2D array
        name: Parameter name for error messages

    Returns:
        2D numpy array of dtype float64, owned by the caller

    Raises:
        InvalidMatrixShapeError: If there are no rows, the rows are empty, or
            rows differ in length
        ValidationError: If a row is not a sequence or data is non-numeric
        DimensionError: If the converted array is not 2D
    """
    if isinstance(rows, np.ndarray):
        array = check_array(rows, name)
        check_2d(array, name)
        if array.shape[0] == 0:
            raise InvalidMatrixShapeError(f"{name}: matrix must have at least one row")
        if array.shape[1] == 0:
            raise InvalidMatrixShapeError(
                f"{name}: matrix must have at least one column",
                row_lengths=(0,) * array.shape[0],
            )
        return array

    try:
        row_lengths = tuple(len(row) for row in rows)
    except TypeError as e:
        raise ValidationError(f"{name}: expected a sequence of rows: {e}") from e

    if not row_lengths:
        raise InvalidMatrixShapeError(f"{name}: matrix must have at least one row")

    if len(set(row_lengths)) > 1:
        raise InvalidMatrixShapeError(
            f"{name}: all matrix rows must have the same size, got row lengths {list(row_lengths)}",
            row_lengths=row_lengths,
        )

    if row_lengths[0] == 0:
        raise InvalidMatrixShapeError(
            f"{name}: matrix must have at least one column",
            row_lengths=row_lengths,
        )

    array = check_array(rows, name)
    check_2d(array, name)
    return array


def check_consistent_length(
    values: Sequence[Any],
    indices: Sequence[Any],
    name: str,
) -> None:
    """
    Verify a value sequence and its index sequence have the same length.

    Raises:
        LengthMismatchError: If the lengths differ
    """
    if len(values) != len(indices):
        raise LengthMismatchError(
            f"{name}: got {len(values)} values for {len(indices)} indices",
            n_values=len(values),
            n_indices=len(indices),
        )


def _as_int(value: Any, name: str) -> int:
    """Convert an integer-like value to int, rejecting floats and bools."""
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from e
