"""
EigenDesign: validated input for the symmetric eigen solver.

Wraps a square, finite, (by default) symmetric matrix. Immutable after
construction; backends receive a private copy of the data.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densela.core.compute.tolerances import SYMMETRY_TOL
from densela.core.validation import check_finite, check_square
from densela.core.validation import check_symmetric as validate_symmetric
from densela.dense._common import ensure_matrix
from densela.dense.matrix import Matrix


@dataclass(frozen=True)
class EigenDesign:
    """
    Design for symmetric eigenvalue problems.

    Construction:
        EigenDesign.from_matrix(A)
        EigenDesign.from_matrix(A, check_symmetric=False)
    """
    _matrix: NDArray[np.float64]
    _n: int
    _symmetry_checked: bool

    @classmethod
    def from_matrix(
        cls,
        A: Matrix | ArrayLike,
        *,
        check_symmetric: bool = True,
        symmetry_tol: float = SYMMETRY_TOL,
    ) -> EigenDesign:
        """
        Build EigenDesign from a Matrix or 2D array-like.

        Parameters
        ----------
        A : Matrix or array-like
            Square symmetric matrix.
        check_symmetric : bool
            Verify max|A - A'| <= symmetry_tol * max|A|. When False, symmetry
            is the caller's responsibility and results for asymmetric input
            are unspecified.
        symmetry_tol : float
            Relative symmetry tolerance.

        Raises
        ------
        NotSquareError
            If A is not square.
        ValidationError
            If A contains NaN or Inf.
        NotSymmetricError
            If check_symmetric and A is not symmetric within tolerance.
        """
        A = ensure_matrix(A)
        check_square(A.shape, 'A')
        data = A.to_numpy()
        check_finite(data, 'A')
        if check_symmetric:
            validate_symmetric(data, symmetry_tol, 'A')
        return cls(_matrix=data, _n=data.shape[0], _symmetry_checked=check_symmetric)

    @property
    def matrix(self) -> NDArray[np.float64]:
        """Copy of the input matrix (n x n)."""
        return self._matrix.copy()

    @property
    def n(self) -> int:
        return self._n

    @property
    def symmetry_checked(self) -> bool:
        return self._symmetry_checked

    def __repr__(self) -> str:
        return f"EigenDesign(n={self._n}, symmetry_checked={self._symmetry_checked})"
