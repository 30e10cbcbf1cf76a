"""
Symmetric eigen solver.

Public API:
    eigh(A)       - eigenvalues, eigenvectors and convergence diagnostics
    eigvalsh(A)   - eigenvalues only

Eigenvalues are always returned in ascending order.
"""

from densela.eigen.design import EigenDesign
from densela.eigen.solution import EigenParams, EigenSolution
from densela.eigen.solvers import eigh, eigvalsh

__all__ = [
    "eigh",
    "eigvalsh",
    "EigenDesign",
    "EigenParams",
    "EigenSolution",
]
