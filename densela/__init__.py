"""
densela: dense linear algebra for small-to-medium real systems.

Matrix and vector primitives with LU-based solving and a Jacobi symmetric
eigen solver, written for correctness and predictable numerical behavior
rather than peak throughput.

Submodules:
    dense: Vector, Matrix and arithmetic kernels
    decomposition: LU factorization with partial pivoting
    linear: solve, inverse, determinant
    eigen: symmetric eigenvalues and eigenvectors
"""

__version__ = "0.1.0"

from densela.core.exceptions import (
    DenselaError,
    ValidationError,
    DimensionError,
    NotSquareError,
    OutOfRangeError,
    NotSymmetricError,
    NumericalError,
    SingularMatrixError,
)
from densela.dense import (
    Vector,
    Matrix,
    add,
    subtract,
    scale,
    multiply,
    matvec,
    transpose,
    dot,
    cross3,
    norm,
    frobenius_norm,
)
from densela.decomposition import LUResult, lu_factor, lu_solve
from densela.linear import solve, inverse, determinant
from densela.eigen import eigh, eigvalsh, EigenSolution

__all__ = [
    "__version__",
    # Storage
    "Vector",
    "Matrix",
    # Kernels
    "add",
    "subtract",
    "scale",
    "multiply",
    "matvec",
    "transpose",
    "dot",
    "cross3",
    "norm",
    "frobenius_norm",
    # Decomposition
    "LUResult",
    "lu_factor",
    "lu_solve",
    # Linear systems
    "solve",
    "inverse",
    "determinant",
    # Eigen
    "eigh",
    "eigvalsh",
    "EigenSolution",
    # Exceptions
    "DenselaError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "OutOfRangeError",
    "NotSymmetricError",
    "NumericalError",
    "SingularMatrixError",
]
