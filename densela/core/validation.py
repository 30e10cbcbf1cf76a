"""
Input validation utilities for densela.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except conversion of numeric array-likes to float64)
    - No clamping or wraparound of indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from densela.core.exceptions import (
    ValidationError,
    DimensionError,
    NotSquareError,
    NotSymmetricError,
    OutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result never aliases the input's buffer.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        Freshly allocated numpy.ndarray of dtype float64
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(result, dtype=np.float64, order='C', copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify an element index lies in [0, bound).
    
    Negative indices are rejected rather than wrapped.
    
    Args:
        index: Index to check (any integer-like)
        bound: Exclusive upper bound
        name: Axis/parameter name for error messages
        
    Returns:
        The index as a plain int
        
    Raises:
        ValidationError: If index is not an integer
        OutOfRangeError: If index is outside [0, bound)
    """
    if isinstance(index, (bool, np.bool_)):
        raise ValidationError(f"{name}: index must be an integer, got bool")
    try:
        i = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{name}: index must be an integer, got {type(index).__name__}"
        ) from e
    
    if i < 0 or i >= bound:
        raise OutOfRangeError(
            f"{name}: index {i} out of range [0, {bound})",
            index=i,
            bound=bound,
        )
    return i


def check_same_shape(
    shape_a: tuple[int, ...],
    shape_b: tuple[int, ...],
    names: tuple[str, str],
) -> None:
    """
    Verify two operands have identical shapes (element-wise operations).
    
    Raises:
        DimensionError: If shapes differ
    """
    if shape_a != shape_b:
        raise DimensionError(
            f"Shape mismatch: {names[0]}={shape_a}, {names[1]}={shape_b}"
        )


def check_inner_dimensions(
    left_cols: int,
    right_rows: int,
    names: tuple[str, str],
) -> None:
    """
    Verify inner dimensions agree for a product.
    
    Raises:
        DimensionError: If left_cols != right_rows
    """
    if left_cols != right_rows:
        raise DimensionError(
            f"Inner dimensions do not match: {names[0]} has {left_cols} columns, "
            f"{names[1]} has {right_rows} rows"
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a 2D shape is square.
    
    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise NotSquareError(
            f"{name}: expected square matrix, got shape ({rows}, {cols})",
            shape=(rows, cols),
        )


def check_symmetric(
    array: NDArray[np.floating[Any]],
    rtol: float,
    name: str,
) -> None:
    """
    Verify a square matrix is symmetric within a relative tolerance.
    
    The absolute tolerance is rtol * max|A|, so the check is scale-free.
    
    Args:
        array: Square 2D array
        rtol: Tolerance relative to the largest entry magnitude
        name: Parameter name for error messages
        
    Raises:
        NotSymmetricError: If max|A - A'| exceeds the tolerance
    """
    if array.size == 0:
        return
    scale = float(np.max(np.abs(array)))
    tol = rtol * scale
    asymmetry = float(np.max(np.abs(array - array.T)))
    
    if asymmetry > tol:
        i, j = np.unravel_index(int(np.argmax(np.abs(array - array.T))), array.shape)
        raise NotSymmetricError(
            f"{name}: not symmetric (|A[{i},{j}] - A[{j},{i}]| = {asymmetry:.3e}, "
            f"tolerance {tol:.3e})",
            max_asymmetry=asymmetry,
            tolerance=tol,
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real scalar and return it as a Python float.
    
    Raises:
        ValidationError: If value is not a real number
    """
    if not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    return float(value)


def check_size(value: Any, minimum: int, name: str) -> int:
    """
    Verify a dimension argument is an integer >= minimum.
    
    Raises:
        ValidationError: If value is not an integer or is too small
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: must be an integer, got bool")
    try:
        n = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: must be an integer, got {type(value).__name__}"
        ) from e
    if n < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {n}")
    return n
