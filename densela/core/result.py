"""
Generic result container for iterative densela computations.

The Result class provides a standardized envelope for backends whose
output carries more than a bare array: convergence metadata, timing
breakdowns and non-fatal warnings. Direct kernels (multiply, solve,
determinant) return plain Matrix/Vector/float values instead.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, rotations, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for iterative computations.
    
    Type Parameters:
        P: The algorithm-specific parameter payload type
        
    Attributes:
        params: Algorithm-specific payload (eigenvalues, eigenvectors, ...)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=EigenParams(eigenvalues=w, eigenvectors=V),
        ...     info={'method': 'jacobi', 'converged': True, 'rotations': 23},
        ...     timing={'total_seconds': 0.002, 'rotations': 0.0015},
        ...     backend_name='cpu_jacobi'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
