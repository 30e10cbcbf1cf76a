"""
Solver dispatch for symmetric eigen problems.

Provides eigh() as the full entry point (eigenvalues, optional
eigenvectors, convergence diagnostics) and eigvalsh() for eigenvalues only.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from densela.core.compute.tolerances import JACOBI_MAX_SWEEPS, JACOBI_TOL, SYMMETRY_TOL
from densela.core.exceptions import ValidationError
from densela.core.validation import check_scalar, check_size
from densela.dense.matrix import Matrix
from densela.dense.vector import Vector
from densela.eigen.design import EigenDesign
from densela.eigen.solution import EigenSolution
from densela.eigen.backends.jacobi import JacobiBackend


MethodChoice = Literal['jacobi']
StrategyChoice = Literal['classical', 'cyclic']


def _ensure_design(
    A: Matrix | ArrayLike | EigenDesign,
    check_symmetric: bool,
    symmetry_tol: float,
) -> EigenDesign:
    """Convert raw input to EigenDesign if needed."""
    if isinstance(A, EigenDesign):
        return A
    return EigenDesign.from_matrix(
        A, check_symmetric=check_symmetric, symmetry_tol=symmetry_tol
    )


def _get_backend(method: MethodChoice, strategy: StrategyChoice):
    """Select backend by algorithm name."""
    if method == 'jacobi':
        return JacobiBackend(strategy=strategy)

    raise ValidationError(f"Unknown eigen method: {method!r}")


def eigh(
    A: Matrix | ArrayLike | EigenDesign,
    *,
    eigenvectors: bool = True,
    method: MethodChoice = 'jacobi',
    strategy: StrategyChoice = 'classical',
    tol: float = JACOBI_TOL,
    max_sweeps: int = JACOBI_MAX_SWEEPS,
    check_symmetric: bool = True,
    symmetry_tol: float = SYMMETRY_TOL,
) -> EigenSolution:
    """
    Eigen decomposition of a real symmetric matrix.

    Parameters
    ----------
    A : Matrix, array-like or EigenDesign
        Square symmetric matrix.
    eigenvectors : bool
        Also compute orthonormal eigenvectors (columns, same order as the
        eigenvalues).
    method : str
        'jacobi'.
    strategy : str
        'classical' (largest off-diagonal first) or 'cyclic' (row sweeps).
    tol : float
        Stop when the off-diagonal Frobenius norm is <= tol * ||A||_F.
    max_sweeps : int
        Rotation budget, in units of n(n-1)/2 rotations. Exhausting it
        returns the current approximation with converged=False and a
        RuntimeWarning; it does not raise.
    check_symmetric : bool
        Validate symmetry (raises NotSymmetricError). When False, output for
        asymmetric input is unspecified.
    symmetry_tol : float
        Relative symmetry tolerance.

    Returns
    -------
    EigenSolution with eigenvalues in ascending order.
    """
    tol = check_scalar(tol, 'tol')
    if tol < 0.0:
        raise ValidationError(f"tol: must be >= 0, got {tol}")
    max_sweeps = check_size(max_sweeps, 0, 'max_sweeps')

    design = _ensure_design(A, check_symmetric, symmetry_tol)
    be = _get_backend(method, strategy)

    result = be.solve(
        design,
        eigenvectors=eigenvectors,
        tol=tol,
        max_sweeps=max_sweeps,
    )

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return EigenSolution(_result=result, _design=design)


def eigvalsh(
    A: Matrix | ArrayLike | EigenDesign,
    **kwargs,
) -> Vector:
    """
    Eigenvalues of a real symmetric matrix, ascending.

    Accepts the same keyword arguments as eigh() except eigenvectors.
    """
    if 'eigenvectors' in kwargs:
        raise ValidationError("eigvalsh() does not accept 'eigenvectors'; use eigh()")
    return eigh(A, eigenvectors=False, **kwargs).eigenvalues
