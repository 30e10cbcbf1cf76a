"""
Matrix: dense, owning, row-major float64 storage.
"""

from __future__ import annotations

import numbers
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densela.core.exceptions import DimensionError, ValidationError
from densela.core.validation import (
    check_2d,
    check_array,
    check_index,
    check_scalar,
    check_size,
    check_square,
)
from densela.dense import kernels
from densela.dense.vector import Vector


class Matrix:
    """
    Dense real matrix with rows >= 1 and cols >= 1, stored row-major.

    Each instance exclusively owns its storage. Every derived construction
    (transpose, product, submatrix, row/col extraction) allocates fresh
    storage independent of its source. Mutation happens only through set(),
    item assignment, scale() and set_identity().

    Construction:
        Matrix(rows, cols)                       # zeros
        Matrix.from_data(2, 2, [1, 2, 3, 4])     # flat row-major
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.identity(3)
        Matrix.random(3, 3, seed=0)
    """

    __slots__ = ('_data',)
    __hash__ = None  # mutable

    def __init__(self, rows: int, cols: int):
        rows = check_size(rows, 1, 'rows')
        cols = check_size(cols, 1, 'cols')
        self._data: NDArray[np.float64] = np.zeros((rows, cols), dtype=np.float64)

    @classmethod
    def from_data(cls, rows: int, cols: int, data: ArrayLike) -> Matrix:
        """
        Build a matrix from a flat row-major sequence of rows*cols values.

        Raises:
            DimensionError: If len(data) != rows * cols
        """
        rows = check_size(rows, 1, 'rows')
        cols = check_size(cols, 1, 'cols')
        arr = check_array(data, 'data').ravel()
        if arr.size != rows * cols:
            raise DimensionError(
                f"data: expected {rows * cols} values for a {rows}x{cols} matrix, "
                f"got {arr.size}"
            )
        return cls._from_array(arr.reshape(rows, cols))

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """Build a matrix from a nested sequence (or 2D array) of rows."""
        arr = check_array(rows, 'rows')
        check_2d(arr, 'rows')
        if arr.shape[0] < 1 or arr.shape[1] < 1:
            raise DimensionError(f"rows: matrix must be at least 1x1, got shape {arr.shape}")
        return cls._from_array(arr)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        n = check_size(n, 1, 'n')
        return cls._from_array(np.eye(n, dtype=np.float64))

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        seed: int | np.random.Generator | None = None,
    ) -> Matrix:
        """Matrix with entries drawn uniformly from [-1, 1]."""
        rows = check_size(rows, 1, 'rows')
        cols = check_size(cols, 1, 'cols')
        rng = np.random.default_rng(seed)
        return cls._from_array(rng.uniform(-1.0, 1.0, size=(rows, cols)))

    @classmethod
    def _from_array(cls, arr: NDArray[np.float64]) -> Matrix:
        # Takes ownership of arr; callers pass freshly allocated arrays only.
        mat = cls.__new__(cls)
        mat._data = arr
        return mat

    # --- Shape ---

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    # --- Element access ---

    def get(self, row: int, col: int) -> float:
        """Element (row, col). Raises OutOfRangeError outside the declared bounds."""
        row = check_index(row, self.rows, 'row')
        col = check_index(col, self.cols, 'col')
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite element (row, col) in place."""
        row = check_index(row, self.rows, 'row')
        col = check_index(col, self.cols, 'col')
        self._data[row, col] = check_scalar(value, 'value')

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = _split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = _split_key(key)
        self.set(row, col, value)

    def row(self, i: int) -> Vector:
        i = check_index(i, self.rows, 'row')
        return Vector._from_array(self._data[i, :].copy())

    def col(self, j: int) -> Vector:
        j = check_index(j, self.cols, 'col')
        return Vector._from_array(self._data[:, j].copy())

    def submatrix(
        self,
        row_start: int,
        row_stop: int,
        col_start: int,
        col_stop: int,
    ) -> Matrix:
        """
        Copy of the block [row_start, row_stop) x [col_start, col_stop).

        Raises:
            OutOfRangeError: If a bound lies outside the matrix
            DimensionError: If the block would be empty
        """
        row_start = check_index(row_start, self.rows, 'row_start')
        col_start = check_index(col_start, self.cols, 'col_start')
        row_stop = check_index(row_stop, self.rows + 1, 'row_stop')
        col_stop = check_index(col_stop, self.cols + 1, 'col_stop')
        if row_stop <= row_start or col_stop <= col_start:
            raise DimensionError(
                f"submatrix: empty block rows [{row_start}, {row_stop}), "
                f"cols [{col_start}, {col_stop})"
            )
        return type(self)._from_array(
            self._data[row_start:row_stop, col_start:col_stop].copy()
        )

    # --- Conversion ---

    def to_data(self) -> list[float]:
        """Flat row-major list of all rows*cols values."""
        return self._data.ravel().tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the contents as a (rows, cols) float64 array."""
        return self._data.copy()

    def copy(self) -> Matrix:
        return type(self)._from_array(self._data.copy())

    # --- Arithmetic ---

    def add(self, other: Matrix) -> Matrix:
        return kernels.add(self, other)

    def subtract(self, other: Matrix) -> Matrix:
        return kernels.subtract(self, other)

    def multiply(self, other: Matrix) -> Matrix:
        return kernels.multiply(self, other)

    def matvec(self, v: Vector) -> Vector:
        return kernels.matvec(self, v)

    def transpose(self) -> Matrix:
        return kernels.transpose(self)

    @property
    def T(self) -> Matrix:
        return kernels.transpose(self)

    def norm(self) -> float:
        """Frobenius norm."""
        return kernels.frobenius_norm(self)

    def scale(self, k: float) -> None:
        """Multiply every element by k, in place."""
        self._data *= check_scalar(k, 'k')

    def set_identity(self) -> None:
        """Overwrite with the identity, in place. Raises NotSquareError if not square."""
        check_square(self.shape, 'matrix')
        self._data[...] = np.eye(self.rows)

    def symmetric_part(self) -> Matrix:
        """(A + A') / 2 as a new matrix."""
        check_square(self.shape, 'matrix')
        return type(self)._from_array(0.5 * (self._data + self._data.T))

    # --- Factorization-backed operations ---

    def determinant(self) -> float:
        from densela.linear.solvers import determinant
        return determinant(self)

    def inverse(self) -> Matrix:
        from densela.linear.solvers import inverse
        return inverse(self)

    def solve(self, b: Vector) -> Vector:
        from densela.linear.solvers import solve
        return solve(self, b)

    def eigenvalues(self) -> Vector:
        """Eigenvalues of this symmetric matrix, ascending."""
        from densela.eigen.solvers import eigvalsh
        return eigvalsh(self)

    # --- Operators ---

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return kernels.add(self, other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return kernels.subtract(self, other)

    def __neg__(self) -> Matrix:
        return type(self)._from_array(-self._data)

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Vector):
            return kernels.matvec(self, other)
        if isinstance(other, Matrix):
            return kernels.multiply(self, other)
        return NotImplemented

    def __mul__(self, k: Any) -> Matrix:
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return kernels.scale(self, k)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()})"


def _split_key(key: Any) -> tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValidationError(
            f"Matrix index must be a (row, col) pair, got {key!r}"
        )
    return key[0], key[1]
