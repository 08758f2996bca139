"""
Exception hierarchy for PyVecMat.

All exceptions inherit from PyVecMatError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyVecMatError(Exception):
    """Base exception for all PyVecMat errors."""
    pass


class ValidationError(PyVecMatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class IndexOutOfBoundsError(ValidationError):
    """
    Element index is outside the valid range.

    Attributes:
        index: The offending index (int for vectors, (i, j) for matrices)
        bounds: The exclusive upper bound(s): dimension or (n, m)
    """

    def __init__(
        self,
        message: str,
        index: int | tuple[int, int] | None = None,
        bounds: int | tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised when vector dimensions or matrix shapes are incompatible with
    the requested operation.

    Attributes:
        expected: Dimension or shape required by the operation
        actual: Dimension or shape that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotThreeDimensionalError(DimensionError):
    """
    Vector product requested on operands that are not 3-dimensional.
    """
    pass


class InvalidMatrixShapeError(DimensionError):
    """
    Raw row data cannot form a rectangular matrix.

    Attributes:
        row_lengths: Length of every supplied row (empty for no rows)
    """

    def __init__(self, message: str, row_lengths: tuple[int, ...] = ()):
        super().__init__(message)
        self.row_lengths = row_lengths


class LengthMismatchError(ValidationError):
    """
    Parallel value and index sequences differ in length.

    Attributes:
        n_values: Number of values supplied
        n_indices: Number of index pairs supplied
    """

    def __init__(
        self,
        message: str,
        n_values: int | None = None,
        n_indices: int | None = None
    ):
        super().__init__(message)
        self.n_values = n_values
        self.n_indices = n_indices
