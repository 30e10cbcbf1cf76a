"""
Core protocols for densela.

Each algorithm family (currently: symmetric eigen solving) is modelled as an
explicit interface with one implementation per capability, selected by name
at the public entry point rather than by inspecting input types.

We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.
"""

from typing import Protocol, TypeVar, runtime_checkable

from densela.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design (validated input) type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.
    
    Each backend knows how to take a validated design object and produce
    a parameter payload wrapped in a Result.
    
    Backends are stateless between calls: all configuration is passed at
    construction time or via keyword arguments to solve(). Concurrent calls
    on independent inputs are therefore safe.
    
    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}', e.g. 'cpu_jacobi'.
        """
        ...
    
    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.
        
        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
