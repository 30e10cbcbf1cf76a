"""
Core infrastructure for densela.

This module provides shared abstractions and utilities used by the storage
types and by every algorithm subpackage (decomposition, linear, eigen).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerances
"""

from densela.core.protocols import Backend
from densela.core.result import Result
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

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
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
