"""
Symmetric eigen solver solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from densela.core.exceptions import ValidationError
from densela.core.result import Result
from densela.dense.matrix import Matrix
from densela.dense.vector import Vector

if TYPE_CHECKING:
    from densela.eigen.design import EigenDesign


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for a symmetric eigen decomposition.

    eigenvalues are in ascending order; column i of eigenvectors belongs
    to eigenvalues[i]. eigenvectors is None when not requested.
    """
    eigenvalues: NDArray[np.float64]
    eigenvectors: NDArray[np.float64] | None = None


@dataclass
class EigenSolution:
    """
    User-facing eigen decomposition results.

    Wraps Result[EigenParams] and provides convenient accessors. Each
    accessor returns freshly allocated storage.
    """
    _result: Result[EigenParams]
    _design: 'EigenDesign'

    @property
    def eigenvalues(self) -> Vector:
        """Eigenvalues in ascending order."""
        return Vector._from_array(self._result.params.eigenvalues.copy())

    @property
    def eigenvectors(self) -> Matrix | None:
        """Orthonormal eigenvectors as columns, or None if not computed."""
        V = self._result.params.eigenvectors
        if V is None:
            return None
        return Matrix._from_array(V.copy())

    def eigenvector(self, i: int) -> Vector:
        """
        Eigenvector belonging to eigenvalues[i].

        Raises:
            ValidationError: If eigenvectors were not computed
            OutOfRangeError: If i is out of range
        """
        V = self.eigenvectors
        if V is None:
            raise ValidationError("Eigenvectors were not computed (eigenvectors=False)")
        return V.col(i)

    @property
    def converged(self) -> bool:
        return self._result.info['converged']

    @property
    def rotations(self) -> int:
        return self._result.info['rotations']

    @property
    def sweeps(self) -> int:
        return self._result.info['sweeps']

    @property
    def off_diagonal_norm(self) -> float:
        """Frobenius norm of the off-diagonal part at termination."""
        return self._result.info['off_diagonal_norm']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text summary of the decomposition."""
        info = self._result.info
        lines = [
            f"Symmetric eigen decomposition ({info['method']}, {info['strategy']})",
            f"  n = {self._design.n}",
            f"  converged: {info['converged']} "
            f"({info['rotations']} rotations, {info['sweeps']} sweeps)",
            f"  off-diagonal norm: {info['off_diagonal_norm']:.3e} "
            f"(threshold {info['threshold']:.3e})",
            "  eigenvalues:",
        ]
        for i, w in enumerate(self._result.params.eigenvalues):
            lines.append(f"    [{i}] {w: .10g}")
        for w in self._result.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        vectors = self._result.params.eigenvectors is not None
        return (
            f"EigenSolution(n={self._design.n}, converged={self.converged}, "
            f"eigenvectors={vectors})"
        )
