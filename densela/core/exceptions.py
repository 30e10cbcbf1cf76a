"""
Exception hierarchy for densela.

All exceptions inherit from DenselaError to allow catching any
library-specific error. Operation-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenselaError(Exception):
    """Base exception for all densela errors."""
    pass


class ValidationError(DenselaError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.
    
    Raised when matrix/vector shapes don't match expected dimensions
    (add, multiply, dot, cross, solve).
    """
    pass


class NotSquareError(DimensionError):
    """
    A square matrix was required.
    
    Raised by inverse, determinant, identity and eigen solving when
    rows != cols.
    
    Attributes:
        shape: The offending (rows, cols) shape
    """
    
    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class OutOfRangeError(ValidationError, IndexError):
    """
    Element index outside the declared bounds.
    
    Also an IndexError so that plain Python sequence idioms keep working.
    
    Attributes:
        index: The rejected index
        bound: Exclusive upper bound that applied
    """
    
    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class NotSymmetricError(ValidationError):
    """
    Matrix is not symmetric within tolerance.
    
    Attributes:
        max_asymmetry: Largest |A[i, j] - A[j, i]| found
        tolerance: Absolute tolerance that was exceeded
    """
    
    def __init__(
        self,
        message: str,
        max_asymmetry: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.max_asymmetry = max_asymmetry
        self.tolerance = tolerance


class NumericalError(DenselaError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised when factorization meets a pivot whose magnitude is at or below
    the singularity threshold. Distinct from ValidationError so callers can
    branch on numerical degeneracy versus a programming error.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Elimination step at which the pivot failed
        pivot_value: Largest candidate pivot magnitude found
        tolerance: Threshold the pivot was compared against
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.tolerance = tolerance
