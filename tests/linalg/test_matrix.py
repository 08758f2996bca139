"""
Tests for the Matrix value type and identity().

Covers the five factories, bounds-checked access, all-or-nothing bulk
updates, and the algebraic operations.
"""

import numpy as np
import pytest

from pyvecmat.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    InvalidMatrixShapeError,
    LengthMismatchError,
    ValidationError,
)
from pyvecmat.linalg import Matrix, Vector, identity


def _every_construction_path():
    """One 2x3 matrix built through each factory (square path is 3x3)."""
    base = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    return [
        Matrix.from_size(3, 0.0),
        Matrix.from_shape(2, 3, 1.0),
        Matrix.copy_of(base),
        Matrix.from_vector(Vector.from_sequence([1, 2, 3])),
        base,
    ]


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_size_square(self):
        m = Matrix.from_size(3, 2.0)
        assert m.shape == (3, 3)
        assert m.to_2d_list() == [[2.0] * 3] * 3

    def test_from_shape(self):
        m = Matrix.from_shape(2, 4, -1.0)
        assert m.n == 2
        assert m.m == 4
        assert np.all(m.to_array() == -1.0)

    @pytest.mark.parametrize("m", [0, -1])
    def test_no_columns_rejected(self, m):
        with pytest.raises(ValidationError, match="m: must be >= 1"):
            Matrix.from_shape(2, m, 0.0)

    @pytest.mark.parametrize("n", [0, -1])
    def test_no_rows_rejected(self, n):
        with pytest.raises(ValidationError, match="n: must be >= 1"):
            Matrix.from_shape(n, 2, 0.0)

    def test_non_integer_size_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            Matrix.from_size(2.5, 0.0)

    def test_copy_of_is_deep(self):
        original = Matrix.from_rows([[1, 2], [3, 4]])
        copy = Matrix.copy_of(original)
        assert copy == original
        assert not np.shares_memory(copy._rows, original._rows)

    def test_from_vector(self):
        v = Vector.from_sequence([1, 2, 3])
        m = Matrix.from_vector(v)
        assert m.shape == (1, 3)
        assert m.to_2d_list() == [[1.0, 2.0, 3.0]]
        assert not np.shares_memory(m._rows, v._elements)

    def test_from_empty_vector_rejected(self):
        with pytest.raises(InvalidMatrixShapeError, match="at least one column"):
            Matrix.from_vector(Vector.from_size(0))

    @pytest.mark.parametrize("rows", [[[]], [[], []], np.zeros((2, 0))])
    def test_empty_rows_rejected(self, rows):
        with pytest.raises(InvalidMatrixShapeError, match="at least one column"):
            Matrix.from_rows(rows)

    def test_direct_construction_copies(self):
        source = np.array([[1.0, 2.0]])
        m = Matrix(_rows=source)
        source[0, 0] = 99.0
        assert m.get_at(0, 0) == 1.0
        assert not m._rows.flags.writeable

    @pytest.mark.parametrize("shape", [(0, 1), (1, 0), (0, 0)])
    def test_direct_construction_requires_a_cell(self, shape):
        with pytest.raises(InvalidMatrixShapeError):
            Matrix(_rows=np.zeros(shape))

    def test_from_rows(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.get_at(1, 2) == 6.0

    def test_from_rows_copies_input(self):
        rows = [[1.0, 2.0], [3.0, 4.0]]
        m = Matrix.from_rows(rows)
        rows[0][0] = 99.0
        assert m.get_at(0, 0) == 1.0

    def test_from_rows_ndarray(self):
        source = np.arange(6, dtype=float).reshape(2, 3)
        m = Matrix.from_rows(source)
        source[0, 0] = 99.0
        assert m.get_at(0, 0) == 0.0

    def test_ragged_rows(self):
        with pytest.raises(InvalidMatrixShapeError) as exc_info:
            Matrix.from_rows([[1, 2], [3]])
        assert exc_info.value.row_lengths == (2, 1)

    def test_empty_rows(self):
        with pytest.raises(InvalidMatrixShapeError):
            Matrix.from_rows([])

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([["a", "b"]])


class TestIdentity:

    @pytest.mark.parametrize("n", [1, 2, 5])
    def test_identity(self, n):
        np.testing.assert_array_equal(identity(n).to_array(), np.eye(n))

    def test_classmethod_matches_function(self):
        assert Matrix.identity(3) == identity(3)

    def test_zero_rejected(self):
        with pytest.raises(ValidationError):
            identity(0)


# ═══════════════════════════════════════════════════════════════════════
# Access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_get_at(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m.get_at(0, 1) == 2.0
        assert m.get_at(1, 0) == 3.0
        assert isinstance(m.get_at(0, 0), float)

    def test_getitem_delegates(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m[1, 1] == 4.0

    @pytest.mark.parametrize("m", _every_construction_path())
    def test_out_of_bounds_every_path(self, m):
        for i, j in [(-1, 0), (0, -1), (m.n, 0), (0, m.m)]:
            with pytest.raises(IndexOutOfBoundsError):
                m.get_at(i, j)

    def test_to_array_is_defensive_copy(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        array = m.to_array()
        array[0, 0] = 99.0
        assert m.get_at(0, 0) == 1.0

    def test_to_2d_list_is_deep_copy(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        rows = m.to_2d_list()
        rows[0][0] = 99.0
        assert m.get_at(0, 0) == 1.0

    def test_internal_storage_read_only(self):
        m = Matrix.from_rows([[1, 2]])
        with pytest.raises(ValueError):
            m._rows[0, 0] = 5.0

    def test_row(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m.row(1) == Vector.from_sequence([3, 4])

    def test_row_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError):
            Matrix.from_rows([[1, 2]]).row(1)


# ═══════════════════════════════════════════════════════════════════════
# set_at / set_multiple
# ═══════════════════════════════════════════════════════════════════════


class TestSetAt:

    def test_round_trip(self):
        m = Matrix.from_size(2, 0.0)
        updated = m.set_at(5.0, 1, 0)
        assert updated.get_at(1, 0) == 5.0
        assert updated.get_at(0, 0) == 0.0
        assert updated.get_at(0, 1) == 0.0
        assert updated.get_at(1, 1) == 0.0

    def test_receiver_unchanged(self):
        m = Matrix.from_size(2, 0.0)
        m.set_at(5.0, 1, 0)
        assert m == Matrix.from_size(2, 0.0)

    def test_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError):
            Matrix.from_size(2, 0.0).set_at(1.0, 2, 0)


class TestSetMultiple:

    def test_sets_all(self):
        m = Matrix.from_shape(2, 3, 0.0)
        updated = m.set_multiple([1.0, 2.0, 3.0], [(0, 0), (1, 1), (1, 2)])
        assert updated.to_2d_list() == [[1.0, 0.0, 0.0], [0.0, 2.0, 3.0]]

    def test_empty_update(self):
        m = Matrix.from_size(2, 1.0)
        assert m.set_multiple([], []) == m

    def test_all_or_nothing(self):
        m = Matrix.from_size(2, 0.0)
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            m.set_multiple([1.0, 2.0], [(0, 0), (2, 2)])
        assert exc_info.value.index == (2, 2)
        assert m == Matrix.from_size(2, 0.0)

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            Matrix.from_size(2, 0.0).set_multiple([1.0], [(0, 0), (1, 1)])

    def test_malformed_pair(self):
        with pytest.raises(ValidationError, match="pair"):
            Matrix.from_size(2, 0.0).set_multiple([1.0], [(0, 0, 0)])

    def test_non_numeric_value(self):
        with pytest.raises(ValidationError, match="values"):
            Matrix.from_size(2, 0.0).set_multiple(["x"], [(0, 0)])

    def test_repeated_address_last_wins(self):
        m = Matrix.from_size(1, 0.0).set_multiple([1.0, 2.0], [(0, 0), (0, 0)])
        assert m.get_at(0, 0) == 2.0


# ═══════════════════════════════════════════════════════════════════════
# Algebra
# ═══════════════════════════════════════════════════════════════════════


class TestAdd:

    def test_add(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[10, 20], [30, 40]])
        assert a.add(b) == Matrix.from_rows([[11, 22], [33, 44]])
        assert a + b == a.add(b)

    def test_shape_mismatch(self):
        a = Matrix.from_shape(2, 3, 0.0)
        b = Matrix.from_shape(3, 2, 0.0)
        with pytest.raises(DimensionError, match="same dimensions") as exc_info:
            a.add(b)
        assert exc_info.value.expected == (2, 3)
        assert exc_info.value.actual == (3, 2)


class TestMultiply:

    def test_multiply(self):
        m = Matrix.from_rows([[1, -2], [3, 0]])
        assert m.multiply(3) == Matrix.from_rows([[3, -6], [9, 0]])

    def test_operators_both_sides(self):
        m = Matrix.from_rows([[1, 2]])
        assert m * 2 == 2 * m == Matrix.from_rows([[2, 4]])

    def test_numpy_scalar_on_the_left(self):
        m = Matrix.from_rows([[1, 2]])
        result = np.float64(2.0) * m
        assert isinstance(result, Matrix)
        assert result == Matrix.from_rows([[2, 4]])


class TestMatrixMultiplication:

    def test_two_by_two(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[5, 6], [7, 8]])
        assert a.matrix_multiplication(b) == Matrix.from_rows([[19, 22], [43, 50]])

    def test_matmul_operator(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[5, 6], [7, 8]])
        assert a @ b == Matrix.from_rows([[19, 22], [43, 50]])

    def test_rectangular_shape(self):
        a = Matrix.from_shape(2, 3, 1.0)
        b = Matrix.from_shape(3, 4, 2.0)
        product = a.matrix_multiplication(b)
        assert product.shape == (2, 4)
        assert np.all(product.to_array() == 6.0)

    def test_row_vector_times_column(self):
        row = Matrix.from_vector(Vector.from_sequence([1, 2, 3]))
        column = row.transpose()
        assert row.matrix_multiplication(column) == Matrix.from_rows([[14]])

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((4, 3))
        b = rng.standard_normal((3, 5))
        product = Matrix.from_rows(a).matrix_multiplication(Matrix.from_rows(b))
        np.testing.assert_allclose(product.to_array(), a @ b, rtol=1e-12, atol=1e-14)

    def test_inner_dimension_mismatch(self):
        a = Matrix.from_shape(2, 3, 1.0)
        b = Matrix.from_shape(2, 3, 1.0)
        with pytest.raises(DimensionError, match="inner dimensions") as exc_info:
            a.matrix_multiplication(b)
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_increasing_k_accumulation(self):
        """(((0 + 1e16) + 1) + -1e16) == 0 in float64."""
        a = Matrix.from_rows([[1e16, 1.0, -1e16]])
        b = Matrix.from_rows([[1.0], [1.0], [1.0]])
        assert a.matrix_multiplication(b).get_at(0, 0) == 0.0


class TestTranspose:

    def test_transpose(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert t.shape == (3, 2)
        assert t == Matrix.from_rows([[1, 4], [2, 5], [3, 6]])

    def test_elementwise(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        for i in range(m.n):
            for j in range(m.m):
                assert t.get_at(j, i) == m.get_at(i, j)

    def test_transpose_not_sharing_storage(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert not np.shares_memory(m.transpose()._rows, m._rows)

    def test_single_row_transposes_to_column(self):
        t = Matrix.from_vector(Vector.from_sequence([1, 2, 3])).transpose()
        assert t.shape == (3, 1)

    @pytest.mark.parametrize("m", _every_construction_path())
    def test_transpose_keeps_a_row_and_a_column(self, m):
        t = m.transpose()
        assert t.n >= 1
        assert t.m >= 1


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_structural_equality(self):
        assert Matrix.from_rows([[1, 2]]) == Matrix.from_vector(Vector.from_sequence([1, 2]))

    def test_shape_matters(self):
        assert Matrix.from_rows([[1, 2]]) != Matrix.from_rows([[1], [2]])

    def test_hash(self):
        a = Matrix.from_size(2, 0.0).set_at(1.0, 0, 0)
        b = Matrix.from_rows([[1, 0], [0, 0]])
        assert hash(a) == hash(b)

    def test_hash_distinguishes_shape(self):
        assert len({Matrix.from_rows([[1, 2]]), Matrix.from_rows([[1], [2]])}) == 2

    def test_nan_equals_copy(self):
        m = Matrix.from_rows([[np.nan, 1.0]])
        copy = Matrix.copy_of(m)
        assert m == copy
        assert hash(m) == hash(copy)

    def test_matrix_not_equal_to_vector(self):
        assert Matrix.from_rows([[1, 2]]) != Vector.from_sequence([1, 2])

    def test_allclose_shape_mismatch(self):
        assert not Matrix.from_size(2, 0.0).allclose(Matrix.from_shape(2, 3, 0.0))

    def test_repr(self):
        assert repr(Matrix.from_rows([[1, 2]])) == "Matrix([[1.0, 2.0]])"
