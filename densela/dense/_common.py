"""
Shared input coercion for the public entry points.

Entry points accept either the storage types or raw array-likes; raw input
is validated and copied into a fresh Matrix/Vector.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from densela.dense.matrix import Matrix
from densela.dense.vector import Vector


def ensure_matrix(A: Matrix | ArrayLike) -> Matrix:
    """Convert a nested sequence or 2D array to Matrix if needed."""
    if isinstance(A, Matrix):
        return A
    return Matrix.from_rows(A)


def ensure_vector(b: Vector | ArrayLike) -> Vector:
    """Convert a 1D sequence or array to Vector if needed."""
    if isinstance(b, Vector):
        return b
    return Vector.from_data(b)
