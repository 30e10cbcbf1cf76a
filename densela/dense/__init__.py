"""
Dense storage types and arithmetic kernels.

Public API:
    Vector, Matrix         - owning float64 containers
    add, subtract, scale   - element-wise kernels
    multiply, matvec       - products in canonical summation order
    transpose              - new (cols, rows) matrix
    dot, cross3, norm      - vector kernels
    frobenius_norm         - matrix norm
"""

from densela.dense.vector import Vector
from densela.dense.matrix import Matrix
from densela.dense.kernels import (
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

__all__ = [
    "Vector",
    "Matrix",
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
]
