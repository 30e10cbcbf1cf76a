"""
Tests for Matrix storage: construction, element access, derived construction.
"""

import numpy as np
import pytest

from densela import Matrix, Vector
from densela.core.exceptions import (
    DimensionError,
    NotSquareError,
    OutOfRangeError,
    ValidationError,
)


class TestMatrixConstruction:

    def test_zero_filled(self):
        A = Matrix(2, 3)
        assert A.shape == (2, 3)
        assert A.rows == 2
        assert A.cols == 3
        assert A.to_data() == [0.0] * 6

    @pytest.mark.parametrize("rows, cols", [(0, 1), (1, 0), (-2, 3)])
    def test_dimensions_must_be_positive(self, rows, cols):
        with pytest.raises(ValidationError):
            Matrix(rows, cols)

    def test_from_data_row_major(self):
        A = Matrix.from_data(2, 3, [1, 2, 3, 4, 5, 6])
        assert A[0, 2] == 3.0
        assert A[1, 0] == 4.0
        assert A.to_data() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def test_from_data_wrong_length(self):
        """Flat data must fill the matrix exactly; no silent truncation."""
        with pytest.raises(DimensionError, match="expected 6 values"):
            Matrix.from_data(2, 3, [1, 2, 3, 4, 5])
        with pytest.raises(DimensionError):
            Matrix.from_data(2, 2, [1, 2, 3, 4, 5])

    def test_from_rows(self):
        A = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
        assert A.shape == (3, 2)
        assert A.get(2, 1) == 6.0

    def test_from_rows_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_rows([1.0, 2.0])

    def test_from_rows_rejects_empty(self):
        with pytest.raises(DimensionError):
            Matrix.from_rows(np.zeros((0, 3)))

    def test_from_rows_copies(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        A = Matrix.from_rows(source)
        source[0, 0] = -1.0
        assert A[0, 0] == 1.0

    def test_identity(self):
        np.testing.assert_array_equal(Matrix.identity(3).to_numpy(), np.eye(3))

    def test_random_range_and_seed(self):
        A = Matrix.random(10, 10, seed=7)
        B = Matrix.random(10, 10, seed=7)
        data = A.to_numpy()
        assert A == B
        assert np.all(data >= -1.0) and np.all(data <= 1.0)

    def test_random_accepts_generator(self, rng):
        A = Matrix.random(2, 3, seed=rng)
        assert A.shape == (2, 3)


class TestMatrixElementAccess:

    def test_get_set(self):
        A = Matrix(2, 2)
        A.set(0, 1, 3.5)
        assert A.get(0, 1) == 3.5
        A[1, 0] = -2
        assert A[1, 0] == -2.0

    @pytest.mark.parametrize("row, col", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_range(self, row, col):
        A = Matrix(2, 2)
        with pytest.raises(OutOfRangeError):
            A.get(row, col)
        with pytest.raises(OutOfRangeError):
            A.set(row, col, 1.0)

    @pytest.mark.parametrize("key", [0, (0,), (0, 1, 1), "ab"])
    def test_item_key_must_be_pair(self, key):
        A = Matrix(2, 2)
        with pytest.raises(ValidationError, match=r"\(row, col\) pair"):
            A[key]
        with pytest.raises(ValidationError, match=r"\(row, col\) pair"):
            A[key] = 1.0

    def test_item_access(self):
        A = Matrix(2, 2)
        A[1, 0] = 3.5
        assert A[1, 0] == 3.5
        with pytest.raises(OutOfRangeError):
            A[2, 0]

    def test_row_and_col_are_copies(self):
        A = Matrix.from_rows([[1, 2], [3, 4]])
        r = A.row(1)
        c = A.col(0)
        assert r == Vector.from_data([3.0, 4.0])
        assert c == Vector.from_data([1.0, 3.0])
        r[0] = 100.0
        assert A[1, 0] == 3.0

    def test_submatrix(self):
        A = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        S = A.submatrix(1, 3, 0, 2)
        assert S == Matrix.from_rows([[4, 5], [7, 8]])
        S[0, 0] = 0.0
        assert A[1, 0] == 4.0

    def test_submatrix_bounds(self):
        A = Matrix(3, 3)
        with pytest.raises(OutOfRangeError):
            A.submatrix(0, 4, 0, 1)
        with pytest.raises(DimensionError):
            A.submatrix(2, 2, 0, 1)


class TestMatrixInPlace:

    def test_scale_mutates(self):
        A = Matrix.from_rows([[1, 2], [3, 4]])
        A.scale(-1.0)
        assert A.to_data() == [-1.0, -2.0, -3.0, -4.0]

    def test_set_identity(self):
        A = Matrix.from_rows([[5, 6], [7, 8]])
        A.set_identity()
        assert A == Matrix.identity(2)

    def test_set_identity_requires_square(self):
        with pytest.raises(NotSquareError):
            Matrix(2, 3).set_identity()


class TestMatrixDerived:

    def test_symmetric_part(self):
        A = Matrix.from_rows([[1, 4], [2, 3]])
        assert A.symmetric_part() == Matrix.from_rows([[1, 3], [3, 3]])

    def test_frobenius_norm(self):
        A = Matrix.from_rows([[1, 2], [2, 4]])
        assert A.norm() == pytest.approx(5.0)

    def test_equality(self):
        A = Matrix.from_rows([[1, 2], [3, 4]])
        assert A == A.copy()
        assert A != Matrix.from_rows([[1, 2, 0], [3, 4, 0]])
        assert A != Matrix.from_rows([[1, 2], [3, 5]])

    def test_operators(self):
        A = Matrix.from_rows([[1, 2], [3, 4]])
        B = Matrix.identity(2)
        assert (A + B) == Matrix.from_rows([[2, 2], [3, 5]])
        assert (A - B) == Matrix.from_rows([[0, 2], [3, 3]])
        assert (2 * A) == Matrix.from_rows([[2, 4], [6, 8]])
        assert (-A) == Matrix.from_rows([[-1, -2], [-3, -4]])
        assert (A @ B) == A
        assert (A @ Vector.from_data([1, 1])) == Vector.from_data([3, 7])

    def test_transpose_property(self):
        A = Matrix.from_rows([[1, 2, 3]])
        assert A.T == Matrix.from_rows([[1], [2], [3]])

    def test_delegating_methods(self):
        A = Matrix.from_rows([[2, 3], [4, 5]])
        assert A.determinant() == pytest.approx(-2.0)
        assert A.solve(Vector.from_data([8, 14])) == Vector.from_data([1, 2])
        np.testing.assert_allclose(
            (A @ A.inverse()).to_numpy(), np.eye(2), atol=1e-14
        )
        S = Matrix.from_rows([[2, 1], [1, 2]])
        np.testing.assert_allclose(S.eigenvalues().to_numpy(), [1.0, 3.0], atol=1e-14)
