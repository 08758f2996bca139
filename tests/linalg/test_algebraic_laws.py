"""
Algebraic laws of the value types, checked on seeded random operands.

Exact laws (commutativity, involution, identity) are checked with ==.
Laws that reorder floating-point operations are checked with allclose.
"""

import numpy as np
import pytest

from pyvecmat.core.exceptions import DimensionError
from pyvecmat.linalg import Matrix, Vector, identity


class TestVectorLaws:

    def test_add_commutative(self, random_vectors):
        a, b, _ = random_vectors
        assert a.add(b) == b.add(a)

    def test_add_associative(self, random_vectors):
        a, b, c = random_vectors
        assert a.add(b).add(c).allclose(a.add(b.add(c)))

    @pytest.mark.parametrize("s", [-3.5, 0.0, 1.0, 2.0, 1e3])
    def test_multiply_distributes_over_add(self, random_vectors, s):
        a, b, _ = random_vectors
        assert a.add(b).multiply(s).allclose(a.multiply(s).add(b.multiply(s)))

    def test_scalar_product_commutative(self, random_vectors):
        a, b, _ = random_vectors
        assert a.scalar_product(b) == b.scalar_product(a)

    def test_scalar_product_matches_numpy(self, random_vectors):
        a, b, _ = random_vectors
        np.testing.assert_allclose(
            a.scalar_product(b), np.dot(a.to_array(), b.to_array()), rtol=1e-12
        )

    def test_add_zero_is_identity(self, random_vectors):
        a, _, _ = random_vectors
        assert a.add(Vector.from_size(a.dimension)) == a

    @pytest.mark.parametrize("dims", [(2, 3), (0, 1), (5, 4)])
    def test_mismatched_add_fails(self, dims):
        with pytest.raises(DimensionError):
            Vector.from_size(dims[0]).add(Vector.from_size(dims[1]))

    def test_vector_product_literal_formula(self, rng):
        a0, a1, a2 = rng.standard_normal(3)
        b0, b1, b2 = rng.standard_normal(3)
        result = Vector.from_sequence([a0, a1, a2]).vector_product(
            Vector.from_sequence([b0, b1, b2])
        )
        assert result.to_list() == [
            a1 * b2 - a2 * b1,
            a0 * b2 - a2 * b0,
            a0 * b1 - a1 * b0,
        ]


class TestMatrixLaws:

    def test_add_commutative(self, random_matrices):
        a, b, _ = random_matrices
        assert a.add(b) == b.add(a)

    def test_add_associative(self, random_matrices):
        a, b, c = random_matrices
        assert a.add(b).add(c).allclose(a.add(b.add(c)))

    @pytest.mark.parametrize("s", [-1.0, 0.5, 7.0])
    def test_multiply_distributes_over_add(self, random_matrices, s):
        a, b, _ = random_matrices
        assert a.add(b).multiply(s).allclose(a.multiply(s).add(b.multiply(s)))

    def test_right_identity(self, random_matrices):
        a, _, _ = random_matrices
        assert a.matrix_multiplication(identity(a.m)) == a

    def test_left_identity(self, random_matrices):
        a, _, _ = random_matrices
        assert identity(a.n).matrix_multiplication(a) == a

    def test_transpose_involution(self, random_matrices):
        for a in random_matrices:
            assert a.transpose().transpose() == a

    def test_transpose_of_product(self, random_matrices):
        a, b, _ = random_matrices
        left = a.matrix_multiplication(b.transpose()).transpose()
        right = b.matrix_multiplication(a.transpose())
        assert left.allclose(right)

    def test_transpose_of_row_vector(self):
        row = Matrix.from_vector(Vector.from_sequence([1, 2, 3]))
        assert row.transpose().transpose() == row
