"""
LU factorization without pivoting (Doolittle form).

L is unit lower-triangular, U is upper-triangular, A = L U. No row
exchanges are performed, so a zero (or tiny) pivot ends the factorization
even when the matrix itself is non-singular; callers that need robustness
on such inputs use the Gauss-Jordan or QR paths instead.

lu_factor() reports failure as a value (LUFailure) so callers such as the
determinant can branch on it directly; lu_cpu() is the raising form.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pymatrix.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class LUFactors:
    """
    Successful LU factorization.

    Attributes:
        L: Unit lower-triangular factor (n x n)
        U: Upper-triangular factor (n x n)
    """
    L: NDArray[np.floating[Any]]
    U: NDArray[np.floating[Any]]

    @property
    def determinant(self) -> float:
        return float(np.prod(np.diag(self.U)))


@dataclass(frozen=True)
class LUFailure:
    """
    Factorization stopped at a pivot below tolerance.

    Attributes:
        pivot_index: Column whose pivot was too small
        pivot_value: The offending pivot
    """
    pivot_index: int
    pivot_value: float


LUOutcome = LUFactors | LUFailure


def lu_factor(A: NDArray[np.floating[Any]], tol: float) -> LUOutcome:
    """
    Unpivoted LU factorization.

    For each pivot column i, rows below i are reduced by
    factor = U[k, i] / U[i, i]; the factors fill column i of L. A pivot is
    only required when there are rows left to eliminate beneath it, so a
    zero in the last diagonal position still yields factors (with a
    singular U).

    Args:
        A: Square matrix (n x n); not modified
        tol: Pivot magnitude below which the factorization fails

    Returns:
        LUFactors on success, LUFailure otherwise
    """
    n = A.shape[0]
    L = np.eye(n)
    U = np.array(A, dtype=np.float64, copy=True)

    for i in range(n - 1):
        pivot = U[i, i]
        if abs(pivot) < tol:
            return LUFailure(pivot_index=i, pivot_value=float(pivot))

        factors = U[i + 1:, i] / pivot
        L[i + 1:, i] = factors
        U[i + 1:, i:] -= np.outer(factors, U[i, i:])
        U[i + 1:, i] = 0.0

    return LUFactors(L=L, U=U)


def lu_cpu(A: NDArray[np.floating[Any]], tol: float) -> LUFactors:
    """
    Unpivoted LU factorization that raises on a small pivot.

    Raises:
        SingularMatrixError: If a pivot magnitude falls below tol
    """
    outcome = lu_factor(A, tol)
    if isinstance(outcome, LUFailure):
        raise SingularMatrixError(
            f"Matrix is singular - cannot perform LU decomposition "
            f"(pivot {outcome.pivot_index} = {outcome.pivot_value:.3e}, tolerance {tol:.1e})",
            matrix_name='A',
            pivot_index=outcome.pivot_index,
            pivot_value=outcome.pivot_value,
            tolerance=tol,
        )
    return outcome


def lu_solve_cpu(
    factors: LUFactors,
    b: NDArray[np.floating[Any]],
    tol: float
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b given A = L U.

    Forward substitution L y = b, then back substitution U x = y.

    Raises:
        SingularMatrixError: If a diagonal entry of U is below tol
    """
    diag_U = np.abs(np.diag(factors.U))
    small = np.flatnonzero(diag_U < tol)
    if small.size > 0:
        index = int(small[0])
        raise SingularMatrixError(
            f"U has a negligible diagonal entry at position {index}; "
            f"back substitution is undefined",
            matrix_name='U',
            pivot_index=index,
            pivot_value=float(factors.U[index, index]),
            tolerance=tol,
        )

    y = solve_triangular(factors.L, b, lower=True, unit_diagonal=True)
    return solve_triangular(factors.U, y, lower=False)
