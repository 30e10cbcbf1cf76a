"""
Linear solver: solve(), inverse() and determinant().

Each call performs its own LU factorization; nothing is cached between
calls. Callers solving many right-hand sides against one matrix can use
lu_factor()/lu_solve() directly.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from densela.core.validation import check_finite, check_inner_dimensions, check_square
from densela.decomposition.lu import lu_factor, lu_solve
from densela.dense._common import ensure_matrix, ensure_vector
from densela.dense.matrix import Matrix
from densela.dense.vector import Vector


def solve(A: Matrix | ArrayLike, b: Vector | ArrayLike) -> Vector:
    """
    Solve the square system A x = b.

    Parameters
    ----------
    A : Matrix or array-like
        Square coefficient matrix (n x n).
    b : Vector or array-like
        Right-hand side of length n.

    Returns
    -------
    Vector
        Solution x, freshly allocated.

    Raises
    ------
    NotSquareError
        If A is not square.
    DimensionError
        If len(b) != A.rows.
    ValidationError
        If A or b contains NaN or Inf.
    SingularMatrixError
        If A is singular to working precision.
    """
    A = ensure_matrix(A)
    b = ensure_vector(b)
    check_square(A.shape, 'A')
    check_inner_dimensions(A.rows, len(b), ('A', 'b'))
    rhs = b.to_numpy()
    check_finite(rhs, 'b')

    factor = lu_factor(A, name='A')
    x = lu_solve(factor, rhs)
    return Vector._from_array(x)


def inverse(A: Matrix | ArrayLike) -> Matrix:
    """
    Inverse of a square matrix, by solving A X = I column by column.

    Raises
    ------
    NotSquareError
        If A is not square.
    SingularMatrixError
        If A is singular to working precision.
    """
    A = ensure_matrix(A)
    check_square(A.shape, 'A')

    factor = lu_factor(A, name='A')
    X = lu_solve(factor, np.eye(A.rows))
    return Matrix._from_array(X)


def determinant(A: Matrix | ArrayLike) -> float:
    """
    Determinant as sign(P) times the product of U's diagonal.

    Never raises SingularMatrixError: a singular or nearly singular matrix
    yields 0.0 or a value close to it, as the arithmetic produces.

    Raises
    ------
    NotSquareError
        If A is not square.
    """
    A = ensure_matrix(A)
    check_square(A.shape, 'A')

    factor = lu_factor(A, check_singular=False, name='A')
    return float(factor.sign * np.prod(np.diag(factor.lu)))
