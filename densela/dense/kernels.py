"""
Stateless arithmetic kernels over Matrix and Vector.

Every kernel validates its operands before doing any work and returns a
freshly allocated result; none of them mutates an argument. Results are
built through the operand's own type, so this module never needs to import
the storage classes.

Products use the canonical accumulation order

    C[i, j] = (((0 + A[i, 0] B[0, j]) + A[i, 1] B[1, j]) + ...)

so that results are bit-for-bit reproducible across runs and platforms.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar
import numpy as np

from densela.core.exceptions import DimensionError
from densela.core.validation import (
    check_inner_dimensions,
    check_same_shape,
    check_scalar,
)

if TYPE_CHECKING:
    from densela.dense.matrix import Matrix
    from densela.dense.vector import Vector

T = TypeVar('T', 'Matrix', 'Vector')


def add(x: T, y: T) -> T:
    """Element-wise sum. Raises DimensionError if shapes differ."""
    check_same_shape(x.shape, y.shape, ('x', 'y'))
    return type(x)._from_array(x._data + y._data)


def subtract(x: T, y: T) -> T:
    """Element-wise difference x - y. Raises DimensionError if shapes differ."""
    check_same_shape(x.shape, y.shape, ('x', 'y'))
    return type(x)._from_array(x._data - y._data)


def scale(x: T, k: float) -> T:
    """Return a new object with every element multiplied by k."""
    k = check_scalar(k, 'k')
    return type(x)._from_array(x._data * k)


def multiply(A: Matrix, B: Matrix) -> Matrix:
    """
    Matrix product A @ B.

    Accumulates one rank-1 term per inner index k, in increasing k, which
    reproduces the triple-loop summation order for every output element.

    Raises:
        DimensionError: If A.cols != B.rows
    """
    check_inner_dimensions(A.cols, B.rows, ('A', 'B'))
    a = A._data
    b = B._data
    c = np.zeros((A.rows, B.cols), dtype=np.float64)
    for k in range(A.cols):
        c += a[:, k:k + 1] * b[k:k + 1, :]
    return type(A)._from_array(c)


def matvec(A: Matrix, v: Vector) -> Vector:
    """
    Matrix-vector product A @ v, same accumulation order as multiply().

    Raises:
        DimensionError: If A.cols != len(v)
    """
    check_inner_dimensions(A.cols, len(v), ('A', 'v'))
    a = A._data
    x = v._data
    y = np.zeros(A.rows, dtype=np.float64)
    for k in range(A.cols):
        y += a[:, k] * x[k]
    return type(v)._from_array(y)


def transpose(A: Matrix) -> Matrix:
    """Return A' as a new (cols, rows) matrix."""
    return type(A)._from_array(A._data.T.copy())


def dot(u: Vector, v: Vector) -> float:
    """
    Inner product sum(u_i * v_i).

    Raises:
        DimensionError: If lengths differ
    """
    check_same_shape(u.shape, v.shape, ('u', 'v'))
    return float(np.dot(u._data, v._data))


def cross3(u: Vector, v: Vector) -> Vector:
    """
    3D cross product u x v.

    Raises:
        DimensionError: If either vector is not of length 3
    """
    if len(u) != 3 or len(v) != 3:
        raise DimensionError(
            f"cross3 requires length-3 vectors, got len(u)={len(u)}, len(v)={len(v)}"
        )
    a = u._data
    b = v._data
    out = np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ])
    return type(u)._from_array(out)


def norm(v: Vector) -> float:
    """Euclidean norm sqrt(sum(v_i^2)); 0.0 for an empty vector."""
    return float(np.linalg.norm(v._data))


def frobenius_norm(A: Matrix) -> float:
    """Frobenius norm sqrt(sum(A_ij^2))."""
    return float(np.linalg.norm(A._data))
