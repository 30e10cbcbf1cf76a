"""
LU decomposition with partial pivoting.

Computes P A = L U for a square matrix A, where P is a row permutation,
L is unit lower triangular and U is upper triangular. This factorization
is the shared foundation for solve(), inverse() and determinant().

Partial pivoting is not optional: at every step the largest-magnitude
candidate in the pivot column is swapped into place, which bounds the
growth of rounding error during elimination.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from densela.core.compute.tolerances import pivot_tolerance
from densela.core.exceptions import SingularMatrixError
from densela.core.validation import (
    check_finite,
    check_inner_dimensions,
    check_square,
)
from densela.dense.matrix import Matrix


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition with partial pivoting.

    L and U are stored packed in a single array: the strict lower triangle
    of `lu` holds the elimination multipliers (L has an implicit unit
    diagonal) and the upper triangle including the diagonal holds U.

    Attributes:
        lu: Packed factors (n x n)
        perm: Row ordering; row i of P A is row perm[i] of A
        sign: Determinant of P, +1.0 or -1.0 (flipped on every row swap)
        swaps: Number of row interchanges performed
        tolerance: Singularity threshold used for the pivots
    """
    lu: NDArray[np.float64]
    perm: NDArray[np.intp]
    sign: float
    swaps: int
    tolerance: float

    @property
    def n(self) -> int:
        return self.lu.shape[0]

    @property
    def L(self) -> NDArray[np.float64]:
        """Unit lower triangular factor."""
        return np.tril(self.lu, k=-1) + np.eye(self.n)

    @property
    def U(self) -> NDArray[np.float64]:
        """Upper triangular factor."""
        return np.triu(self.lu)

    @property
    def P(self) -> NDArray[np.float64]:
        """Permutation matrix with P A = L U."""
        return np.eye(self.n)[self.perm]

    @property
    def pivots(self) -> NDArray[np.float64]:
        """Diagonal of U."""
        return np.diag(self.lu).copy()


def lu_factor(
    A: Matrix,
    *,
    check_singular: bool = True,
    name: str = 'A',
) -> LUResult:
    """
    Factor a square matrix as P A = L U with partial pivoting.

    At step k the row (>= k) with the largest |A[row, k]| becomes the pivot
    row. If that magnitude is at or below n * eps * max|A| the matrix is
    numerically singular.

    Args:
        A: Square matrix to factor (not modified)
        check_singular: If True, raise on a singular pivot. If False, keep
            going: an exactly-zero pivot column is skipped and tiny pivots
            are used as-is, so the factors still give det(A) (possibly ~0).
        name: Matrix name for error messages

    Returns:
        LUResult with packed factors, permutation and swap sign

    Raises:
        NotSquareError: If A is not square
        ValidationError: If A contains NaN or Inf
        SingularMatrixError: If a pivot is below tolerance and check_singular=True
    """
    check_square(A.shape, name)
    lu = A.to_numpy()
    check_finite(lu, name)

    n = lu.shape[0]
    perm = np.arange(n)
    sign = 1.0
    swaps = 0
    tol = pivot_tolerance(n, float(np.max(np.abs(lu))))

    for k in range(n):
        p = k + int(np.argmax(np.abs(lu[k:, k])))
        pivot = lu[p, k]

        if abs(pivot) <= tol:
            if check_singular:
                raise SingularMatrixError(
                    f"{name} is singular to working precision: largest pivot "
                    f"candidate in column {k} is {abs(pivot):.3e} "
                    f"(tolerance {tol:.3e})",
                    matrix_name=name,
                    pivot_index=k,
                    pivot_value=float(abs(pivot)),
                    tolerance=tol,
                )
            if pivot == 0.0:
                # Column already zero below the diagonal; nothing to eliminate.
                continue

        if p != k:
            lu[[k, p]] = lu[[p, k]]
            perm[[k, p]] = perm[[p, k]]
            sign = -sign
            swaps += 1

        # Multipliers into the L part, then the rank-1 update of the trailing block.
        lu[k + 1:, k] /= lu[k, k]
        lu[k + 1:, k + 1:] -= np.outer(lu[k + 1:, k], lu[k, k + 1:])

    return LUResult(lu=lu, perm=perm, sign=sign, swaps=swaps, tolerance=tol)


def lu_solve(
    factor: LUResult,
    b: NDArray[np.floating[Any]],
) -> NDArray[np.float64]:
    """
    Solve A x = b given the LU factorization of A.

    Applies P to b, forward-substitutes through L, then back-substitutes
    through U. b may be a vector (n,) or a block of right-hand sides (n, m);
    the result has the same shape.

    Args:
        factor: Output of lu_factor() on A
        b: Right-hand side(s)

    Returns:
        Solution array, freshly allocated

    Raises:
        DimensionError: If b's leading dimension != n
        ValidationError: If b contains NaN or Inf
        SingularMatrixError: If U has a zero pivot (factor made with
            check_singular=False)
    """
    n = factor.n
    check_inner_dimensions(n, b.shape[0], ('A', 'b'))
    check_finite(b, 'b')
    lu = factor.lu

    if np.any(np.diag(lu) == 0.0):
        k = int(np.flatnonzero(np.diag(lu) == 0.0)[0])
        raise SingularMatrixError(
            f"U has a zero pivot at position {k}; system has no unique solution",
            matrix_name='U',
            pivot_index=k,
            pivot_value=0.0,
            tolerance=factor.tolerance,
        )

    y = np.array(b, dtype=np.float64)[factor.perm]

    # L y = P b  (unit diagonal)
    for i in range(1, n):
        y[i] -= lu[i, :i] @ y[:i]

    # U x = y
    for i in range(n - 1, -1, -1):
        y[i] -= lu[i, i + 1:] @ y[i + 1:]
        y[i] /= lu[i, i]

    return y
