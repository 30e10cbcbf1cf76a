"""
Matrix decompositions.

Submodules:
    lu: LU factorization with partial pivoting (P A = L U)
"""

from densela.decomposition.lu import LUResult, lu_factor, lu_solve

__all__ = [
    "LUResult",
    "lu_factor",
    "lu_solve",
]
