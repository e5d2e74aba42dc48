"""
Matrix and Vector value objects.

Every public operation accepts either these objects or any array-like;
conversion and validation happen once, at the boundary, through
as_matrix() / as_vector(). After that the data is trusted.

Both types store a private read-only float64 array. Algorithms never
touch that array directly: they call copy() to get a writable working
buffer, and build results through _from_trusted(), which takes its own
copy. A caller's data can therefore never be mutated by, or aliased into,
a result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_not_empty,
)


def _frozen_copy(array: NDArray) -> NDArray[np.floating[Any]]:
    out = np.array(array, dtype=np.float64, copy=True)
    out.setflags(write=False)
    return out


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense real matrix in row-major storage.

    Construction:
        Matrix.from_array([[1, 2], [3, 4]])
        Matrix.identity(3)
        Matrix.zeros(2, 3)
    """
    _data: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, array: ArrayLike, name: str = 'matrix') -> Matrix:
        """Build a Matrix from a nested sequence or 2D array, validating it."""
        arr = check_array(array, name)
        check_2d(arr, name)
        check_not_empty(arr, name)
        check_finite(arr, name)
        return cls._from_trusted(arr)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """n×n identity matrix."""
        return cls._from_trusted(np.eye(size))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """rows×cols zero matrix."""
        return cls._from_trusted(np.zeros((rows, cols)))

    @classmethod
    def _from_trusted(cls, array: NDArray) -> Matrix:
        """Wrap an internally computed array (copied, no validation)."""
        return cls(_data=_frozen_copy(array))

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the entries."""
        return self._data

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def copy(self) -> NDArray[np.floating[Any]]:
        """Writable working copy of the entries."""
        return np.array(self._data, dtype=np.float64, copy=True)

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def allclose(self, other: Matrix | ArrayLike, atol: float = 1e-10) -> bool:
        """Elementwise comparison within an absolute tolerance."""
        other_data = other.data if isinstance(other, Matrix) else np.asarray(other, dtype=np.float64)
        if other_data.shape != self.shape:
            return False
        return bool(np.allclose(self._data, other_data, rtol=0.0, atol=atol))

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)

    def __repr__(self) -> str:
        return f"Matrix({self.rows}×{self.cols}, {self.to_list()})"


@dataclass(frozen=True, eq=False)
class Vector:
    """
    Dense real vector.

    Construction:
        Vector.from_array([3, 4])
    """
    _data: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, array: ArrayLike, name: str = 'vector') -> Vector:
        """Build a Vector from a sequence; an (n, 1) column is flattened."""
        arr = check_array(array, name)
        if arr.ndim == 2 and arr.shape[1] == 1:
            arr = arr.ravel()
        check_1d(arr, name)
        check_not_empty(arr, name)
        check_finite(arr, name)
        return cls._from_trusted(arr)

    @classmethod
    def _from_trusted(cls, array: NDArray) -> Vector:
        return cls(_data=_frozen_copy(array))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the entries."""
        return self._data

    def copy(self) -> NDArray[np.floating[Any]]:
        return np.array(self._data, dtype=np.float64, copy=True)

    def to_list(self) -> list[float]:
        return self._data.tolist()

    def allclose(self, other: Vector | ArrayLike, atol: float = 1e-10) -> bool:
        other_data = other.data if isinstance(other, Vector) else np.asarray(other, dtype=np.float64)
        if other_data.shape != self._data.shape:
            return False
        return bool(np.allclose(self._data, other_data, rtol=0.0, atol=atol))

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)

    def __repr__(self) -> str:
        return f"Vector({self.size}, {self.to_list()})"


def as_matrix(value: Matrix | ArrayLike, name: str = 'matrix') -> Matrix:
    """Return value as a validated Matrix."""
    if isinstance(value, Matrix):
        return value
    return Matrix.from_array(value, name)


def as_vector(value: Vector | ArrayLike, name: str = 'vector') -> Vector:
    """Return value as a validated Vector."""
    if isinstance(value, Vector):
        return value
    return Vector.from_array(value, name)
