"""
Elimination with partial pivoting.

Two kernels share the same pivot rule (largest magnitude in the current
column, at or below the diagonal):

    gauss_jordan_inverse: reduces [A | I] to [I | A⁻¹]
    gaussian_solve: forward elimination on [A | b] then back substitution

Both return the row swaps and pivots they used, so callers can trace the
swaps and read off the determinant without a second factorization.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class EliminationResult:
    """
    Attributes:
        values: Inverse matrix (n x n) or solution vector (n,)
        swaps: (row, pivot_row) pairs in the order they were applied
        pivots: Pivot value chosen for each column, in column order
    """
    values: NDArray[np.floating[Any]]
    swaps: tuple[tuple[int, int], ...]
    pivots: tuple[float, ...] = ()

    @property
    def determinant(self) -> float:
        """det(A) = (-1)^swaps × product of pivots."""
        return float((-1) ** len(self.swaps) * np.prod(self.pivots))


def _select_pivot(augmented: NDArray, column: int) -> int:
    return column + int(np.argmax(np.abs(augmented[column:, column])))


def _singular(column: int, pivot: float, tol: float, what: str) -> SingularMatrixError:
    return SingularMatrixError(
        f"Matrix is singular and cannot be {what} "
        f"(largest pivot in column {column} is {abs(pivot):.3e}, tolerance {tol:.1e})",
        matrix_name='A',
        pivot_index=column,
        pivot_value=float(pivot),
        tolerance=tol,
    )


def gauss_jordan_inverse(A: NDArray[np.floating[Any]], tol: float) -> EliminationResult:
    """
    Invert square A by Gauss-Jordan elimination on [A | I].

    Raises:
        SingularMatrixError: If the best available pivot is below tol
    """
    n = A.shape[0]
    augmented = np.hstack([np.array(A, dtype=np.float64), np.eye(n)])
    swaps: list[tuple[int, int]] = []
    pivots: list[float] = []

    for i in range(n):
        max_row = _select_pivot(augmented, i)
        if max_row != i:
            augmented[[i, max_row]] = augmented[[max_row, i]]
            swaps.append((i, max_row))

        pivot = augmented[i, i]
        if abs(pivot) < tol:
            raise _singular(i, pivot, tol, 'inverted')
        pivots.append(float(pivot))

        augmented[i] /= pivot
        factors = augmented[:, i].copy()
        factors[i] = 0.0
        augmented -= np.outer(factors, augmented[i])

    return EliminationResult(
        values=augmented[:, n:].copy(),
        swaps=tuple(swaps),
        pivots=tuple(pivots),
    )


def gaussian_solve(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    tol: float
) -> EliminationResult:
    """
    Solve square A x = b by Gaussian elimination with partial pivoting.

    Raises:
        SingularMatrixError: If the best available pivot is below tol
    """
    n = A.shape[0]
    augmented = np.column_stack([np.array(A, dtype=np.float64), np.array(b, dtype=np.float64)])
    swaps: list[tuple[int, int]] = []
    pivots: list[float] = []

    # Forward elimination
    for i in range(n):
        max_row = _select_pivot(augmented, i)
        if max_row != i:
            augmented[[i, max_row]] = augmented[[max_row, i]]
            swaps.append((i, max_row))

        pivot = augmented[i, i]
        if abs(pivot) < tol:
            raise _singular(i, pivot, tol, 'solved')
        pivots.append(float(pivot))

        factors = augmented[i + 1:, i] / pivot
        augmented[i + 1:, i:] -= np.outer(factors, augmented[i, i:])

    # Back substitution
    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        x[i] = (augmented[i, n] - augmented[i, i + 1:n] @ x[i + 1:]) / augmented[i, i]

    return EliminationResult(values=x, swaps=tuple(swaps), pivots=tuple(pivots))
