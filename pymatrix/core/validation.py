"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    NonSquareMatrixError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (ragged rows, mixed types) or non-numeric
    dtypes. Complex input is rejected: the engine works on real scalars.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

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


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        ValidationError: If any dimension is zero
    """
    if array.size == 0:
        raise ValidationError(f"{name}: empty array with shape {array.shape}")


def check_square(shape: tuple[int, ...], operation: str, name: str = 'matrix') -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (rows, cols) of the matrix
        operation: Human-readable operation name for the message
        name: Parameter name for error messages

    Raises:
        NonSquareMatrixError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise NonSquareMatrixError(
            f"{operation} requires a square matrix, {name} is {rows}×{cols}",
            operation=operation,
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"Cannot perform {operation}: matrices have different dimensions "
            f"({left[0]}×{left[1]} vs {right[0]}×{right[1]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_multipliable(left: tuple[int, ...], right: tuple[int, ...]) -> None:
    """
    Verify left.cols == right.rows.

    Raises:
        DimensionError: If inner dimensions disagree
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"Cannot multiply matrices: {left[0]}×{left[1]} and {right[0]}×{right[1]}",
            operation='multiplication',
            left_shape=left,
            right_shape=right,
        )


def check_consistent_length(
    rows: int,
    size: int,
    names: tuple[str, str],
) -> None:
    """
    Verify a matrix row count matches a vector length.

    Args:
        rows: Number of rows of the matrix
        size: Length of the vector
        names: Parameter names (matrix, vector) for error messages

    Raises:
        DimensionError: If the lengths disagree
    """
    if rows != size:
        raise DimensionError(
            f"Matrix and vector dimensions don't match: "
            f"{names[0]} has {rows} rows, {names[1]} has {size} entries",
            operation='linear_system',
            left_shape=(rows,),
            right_shape=(size,),
        )
