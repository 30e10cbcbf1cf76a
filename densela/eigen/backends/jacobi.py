"""
Jacobi rotation backend for symmetric eigen problems.

Each rotation J(p, q, theta) with tan(2 theta) = 2 A[p,q] / (A[p,p] - A[q,q])
annihilates one off-diagonal pair, and A <- J' A J preserves the spectrum.
Iteration stops once the off-diagonal Frobenius norm is at most
tol * ||A||_F, or when the rotation budget is spent. Hitting the budget is
not an error: the current diagonal is returned with converged=False.

Strategies:
    classical: rotate the largest |A[p,q]| each time (fewest rotations)
    cyclic:    sweep all (p, q) pairs row by row (cheapest per rotation)
"""

from __future__ import annotations

import math
from typing import Literal
import numpy as np
from numpy.typing import NDArray

from densela.core.compute.timing import timed
from densela.core.compute.tolerances import JACOBI_MAX_SWEEPS, JACOBI_TOL
from densela.core.exceptions import ValidationError
from densela.core.result import Result
from densela.eigen.design import EigenDesign
from densela.eigen.solution import EigenParams


Strategy = Literal['classical', 'cyclic']
STRATEGIES = ('classical', 'cyclic')

# Fraction of the last exact off^2 below which the running value is recomputed.
REFRESH_FRACTION = 1e-6


def off_diagonal_norm(a: NDArray[np.float64]) -> float:
    """sqrt(sum_{i != j} a_ij^2)"""
    off = a.copy()
    np.fill_diagonal(off, 0.0)
    return float(np.linalg.norm(off))


def rotate(
    a: NDArray[np.float64],
    v: NDArray[np.float64] | None,
    p: int,
    q: int,
) -> None:
    """
    Apply the Jacobi rotation that zeroes a[p, q] (and a[q, p]), in place.

    a must be symmetric: rows p and q are written from the rotated columns.
    Uses the smaller root t = tan(theta) for stability, so |theta| <= pi/4.
    If v is given, it is post-multiplied by the same rotation.
    """
    apq = a[p, q]
    if apq == 0.0:
        return
    app = a[p, p]
    aqq = a[q, q]

    tau = (aqq - app) / (2.0 * apq)
    t = (1.0 if tau >= 0.0 else -1.0) / (abs(tau) + math.hypot(1.0, tau))
    c = 1.0 / math.sqrt(1.0 + t * t)
    s = t * c

    col_p = a[:, p].copy()
    col_q = a[:, q]
    new_p = c * col_p - s * col_q
    new_q = s * col_p + c * col_q
    a[:, p] = new_p
    a[:, q] = new_q
    a[p, :] = new_p
    a[q, :] = new_q

    a[p, p] = app - t * apq
    a[q, q] = aqq + t * apq
    a[p, q] = 0.0
    a[q, p] = 0.0

    if v is not None:
        vp = v[:, p].copy()
        vq = v[:, q]
        v[:, p] = c * vp - s * vq
        v[:, q] = s * vp + c * vq


class _RowMaxima:
    """
    Largest |a[i, j]| over j > i for every row i, kept current across rotations.

    A rotation on (p, q) only changes rows and columns p and q, so after it
    only rows p and q, rows whose maximum sat in column p or q, and the
    candidates a[i, p], a[i, q] need looking at.
    """

    def __init__(self, a: NDArray[np.float64]):
        n = a.shape[0]
        upper = np.abs(np.triu(a, k=1))
        self._a = a
        self.arg = upper.argmax(axis=1)
        self.val = upper[np.arange(n), self.arg]

    def pivot(self) -> tuple[int, int, float]:
        p = int(np.argmax(self.val))
        return p, int(self.arg[p]), float(self.val[p])

    def update(self, p: int, q: int) -> None:
        a = self._a
        stale = np.flatnonzero((self.arg == p) | (self.arg == q))

        for col in (p, q):
            cand = np.abs(a[:col, col])
            better = np.flatnonzero(cand > self.val[:col])
            self.val[better] = cand[better]
            self.arg[better] = col

        for row in {p, q, *stale.tolist()}:
            self._refresh(row)

    def _refresh(self, row: int) -> None:
        seg = np.abs(self._a[row, row + 1:])
        if seg.size == 0:
            self.val[row] = 0.0
            return
        j = int(np.argmax(seg))
        self.arg[row] = row + 1 + j
        self.val[row] = seg[j]


class JacobiBackend:
    """Jacobi eigenvalue iteration for real symmetric matrices."""

    def __init__(self, strategy: Strategy = 'classical'):
        if strategy not in STRATEGIES:
            raise ValidationError(
                f"Unknown Jacobi strategy: {strategy!r}. Must be one of {STRATEGIES}."
            )
        self._strategy = strategy

    @property
    def name(self) -> str:
        return 'cpu_jacobi'

    @property
    def strategy(self) -> str:
        return self._strategy

    def solve(
        self,
        design: EigenDesign,
        *,
        eigenvectors: bool = True,
        tol: float = JACOBI_TOL,
        max_sweeps: int = JACOBI_MAX_SWEEPS,
    ) -> Result[EigenParams]:
        """
        Diagonalize design.matrix by Jacobi rotations.

        Parameters
        ----------
        design : EigenDesign
        eigenvectors : bool
            Accumulate the rotations into an eigenvector matrix.
        tol : float
            Relative off-diagonal tolerance.
        max_sweeps : int
            Rotation budget in sweeps; one sweep is n(n-1)/2 rotations.
        """
        a = design.matrix
        n = design.n
        v = np.eye(n) if eigenvectors else None
        warnings_list: list[str] = []

        # ||A||_F is invariant under the rotations.
        threshold = tol * float(np.linalg.norm(a))

        with timed() as timer:
            with timer.section('rotations'):
                if self._strategy == 'classical':
                    rotations, sweeps, off = self._classical(a, v, threshold, max_sweeps)
                else:
                    rotations, sweeps, off = self._cyclic(a, v, threshold, max_sweeps)

            with timer.section('sort'):
                eigenvalues = np.diag(a).copy()
                order = np.argsort(eigenvalues, kind='stable')
                eigenvalues = eigenvalues[order]
                vectors = v[:, order] if v is not None else None

        converged = off <= threshold
        if not converged:
            warnings_list.append(
                f"Jacobi iteration did not converge after {rotations} rotations "
                f"({sweeps} sweeps): off-diagonal norm {off:.3e} > {threshold:.3e}"
            )

        return Result(
            params=EigenParams(eigenvalues=eigenvalues, eigenvectors=vectors),
            info={
                'method': 'jacobi',
                'strategy': self._strategy,
                'converged': converged,
                'rotations': rotations,
                'sweeps': sweeps,
                'off_diagonal_norm': off,
                'threshold': threshold,
                'tol': tol,
                'max_sweeps': max_sweeps,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _classical(
        self,
        a: NDArray[np.float64],
        v: NDArray[np.float64] | None,
        threshold: float,
        max_sweeps: int,
    ) -> tuple[int, int, float]:
        n = a.shape[0]
        pairs = n * (n - 1) // 2
        off = off_diagonal_norm(a)
        if pairs == 0:
            return 0, 0, off

        max_rotations = max_sweeps * pairs
        threshold_sq = threshold * threshold
        maxima = _RowMaxima(a)

        # Each rotation removes exactly 2 * a[p, q]^2 from off^2. The running
        # value is only accurate relative to the last exact value, so it is
        # recomputed once per sweep and once it has fallen far below that
        # value or claims convergence.
        off_sq = off * off
        refresh_below = max(threshold_sq, off_sq * REFRESH_FRACTION)
        since_refresh = 0
        rotations = 0
        while rotations < max_rotations:
            if off_sq <= refresh_below or since_refresh >= pairs:
                off = off_diagonal_norm(a)
                if off <= threshold:
                    break
                off_sq = off * off
                refresh_below = max(threshold_sq, off_sq * REFRESH_FRACTION)
                since_refresh = 0

            p, q, largest = maxima.pivot()
            if largest == 0.0:
                break
            apq = a[p, q]
            rotate(a, v, p, q)
            maxima.update(p, q)
            off_sq -= 2.0 * apq * apq
            rotations += 1
            since_refresh += 1

        off = off_diagonal_norm(a)
        sweeps = -(-rotations // pairs)
        return rotations, sweeps, off

    def _cyclic(
        self,
        a: NDArray[np.float64],
        v: NDArray[np.float64] | None,
        threshold: float,
        max_sweeps: int,
    ) -> tuple[int, int, float]:
        n = a.shape[0]
        off = off_diagonal_norm(a)
        rotations = 0
        sweeps = 0
        while off > threshold and sweeps < max_sweeps:
            for p in range(n - 1):
                for q in range(p + 1, n):
                    if a[p, q] != 0.0:
                        rotate(a, v, p, q)
                        rotations += 1
            sweeps += 1
            off = off_diagonal_norm(a)
        return rotations, sweeps, off
