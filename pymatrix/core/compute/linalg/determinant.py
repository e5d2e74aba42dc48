"""
Determinant and the norm/determinant condition estimate.

The determinant is total over square matrices. 1×1 and 2×2 use closed
forms; larger matrices try the unpivoted LU kernel and multiply the U
diagonal, and when that factorization stops on a small pivot they fall
back to cofactor expansion along the first row. The fallback is O(n!)
but always yields a value, 0 included.
"""

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.linalg.lu import lu_factor, LUFactors, LUFailure

DeterminantMethod = Literal['closed_form', 'lu', 'cofactor']


@dataclass(frozen=True)
class DeterminantOutcome:
    """
    Determinant value plus the branch that produced it.

    Attributes:
        value: The determinant
        method: 'closed_form', 'lu' or 'cofactor'
        lu_failure: The failed LU attempt when method == 'cofactor'
    """
    value: float
    method: DeterminantMethod
    lu_failure: LUFailure | None = None


def cofactor_determinant(A: NDArray[np.floating[Any]]) -> float:
    """Recursive Laplace expansion along the first row."""
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    det = 0.0
    for j in range(n):
        if A[0, j] == 0.0:
            continue
        minor = np.delete(A[1:], j, axis=1)
        det += (-1) ** j * A[0, j] * cofactor_determinant(minor)
    return det


def determinant_outcome(A: NDArray[np.floating[Any]], tol: float) -> DeterminantOutcome:
    """
    Compute the determinant of square A, reporting which branch ran.

    Args:
        A: Square matrix (n x n); not modified
        tol: Pivot tolerance for the LU attempt
    """
    n = A.shape[0]
    if n == 1:
        return DeterminantOutcome(value=float(A[0, 0]), method='closed_form')
    if n == 2:
        value = float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])
        return DeterminantOutcome(value=value, method='closed_form')

    outcome = lu_factor(A, tol)
    if isinstance(outcome, LUFactors):
        return DeterminantOutcome(value=outcome.determinant, method='lu')
    return DeterminantOutcome(
        value=cofactor_determinant(A),
        method='cofactor',
        lu_failure=outcome,
    )


def determinant_cpu(A: NDArray[np.floating[Any]], tol: float) -> float:
    return determinant_outcome(A, tol).value


def frobenius_norm(A: NDArray[np.floating[Any]]) -> float:
    return float(np.sqrt(np.sum(A * A)))


def condition_estimate(A: NDArray[np.floating[Any]], tol: float) -> float:
    """
    Coarse condition number proxy: ‖A‖_F / |det A|.

    This is not the spectral condition number; it only separates
    comfortably invertible matrices from nearly singular ones. Returns inf
    for non-square input or |det A| < tol.
    """
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        return float('inf')
    return condition_from_determinant(A, determinant_cpu(A, tol), tol)


def condition_from_determinant(A: NDArray[np.floating[Any]], det: float, tol: float) -> float:
    """condition_estimate() for a square A whose determinant is already known."""
    if abs(det) < tol:
        return float('inf')
    return frobenius_norm(A) / abs(det)
