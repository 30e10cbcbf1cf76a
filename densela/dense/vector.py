"""
Vector: fixed-length, owning sequence of float64 values.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densela.core.exceptions import NumericalError
from densela.core.validation import (
    check_1d,
    check_array,
    check_index,
    check_scalar,
    check_size,
)
from densela.dense import kernels


class Vector:
    """
    Dense real vector of fixed length n >= 0.

    Each instance exclusively owns its storage: constructors copy their
    input and derived results are freshly allocated. Mutation happens only
    through set(), item assignment, scale() and normalize().

    Construction:
        Vector(n)                  # n zeros
        Vector.from_data([1, 2, 3])
    """

    __slots__ = ('_data',)
    __hash__ = None  # mutable

    def __init__(self, n: int = 0):
        n = check_size(n, 0, 'n')
        self._data: NDArray[np.float64] = np.zeros(n, dtype=np.float64)

    @classmethod
    def from_data(cls, data: ArrayLike) -> Vector:
        """Build a vector from an ordered sequence of real numbers (copied)."""
        arr = check_array(data, 'data')
        check_1d(arr, 'data')
        return cls._from_array(arr)

    @classmethod
    def _from_array(cls, arr: NDArray[np.float64]) -> Vector:
        # Takes ownership of arr; callers pass freshly allocated arrays only.
        vec = cls.__new__(cls)
        vec._data = arr
        return vec

    # --- Shape ---

    def __len__(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def shape(self) -> tuple[int]:
        return (self._data.shape[0],)

    # --- Element access ---

    def get(self, i: int) -> float:
        """Element i. Raises OutOfRangeError outside [0, n)."""
        i = check_index(i, len(self), 'i')
        return float(self._data[i])

    def set(self, i: int, value: float) -> None:
        """Overwrite element i in place. Raises OutOfRangeError outside [0, n)."""
        i = check_index(i, len(self), 'i')
        self._data[i] = check_scalar(value, 'value')

    def __getitem__(self, i: int) -> float:
        return self.get(i)

    def __setitem__(self, i: int, value: float) -> None:
        self.set(i, value)

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._data)

    # --- Conversion ---

    def to_data(self) -> list[float]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the contents as a 1D float64 array."""
        return self._data.copy()

    def copy(self) -> Vector:
        return type(self)._from_array(self._data.copy())

    # --- Arithmetic ---

    def add(self, other: Vector) -> Vector:
        return kernels.add(self, other)

    def subtract(self, other: Vector) -> Vector:
        return kernels.subtract(self, other)

    def dot(self, other: Vector) -> float:
        return kernels.dot(self, other)

    def cross3(self, other: Vector) -> Vector:
        return kernels.cross3(self, other)

    def norm(self) -> float:
        return kernels.norm(self)

    def scale(self, k: float) -> None:
        """Multiply every element by k, in place."""
        self._data *= check_scalar(k, 'k')

    def normalize(self) -> None:
        """
        Scale to unit Euclidean norm, in place.

        Raises:
            NumericalError: If the vector has zero norm
        """
        n = kernels.norm(self)
        if n == 0.0:
            raise NumericalError("Cannot normalize a zero-norm vector")
        self._data /= n

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return kernels.add(self, other)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return kernels.subtract(self, other)

    def __neg__(self) -> Vector:
        return type(self)._from_array(-self._data)

    def __mul__(self, k: Any) -> Vector:
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return kernels.scale(self, k)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()})"
