"""
Linear systems.

Public API:
    solve(A, b)      - solution of A x = b
    inverse(A)       - A^-1
    determinant(A)   - det(A)
"""

from densela.linear.solvers import solve, inverse, determinant

__all__ = [
    "solve",
    "inverse",
    "determinant",
]
