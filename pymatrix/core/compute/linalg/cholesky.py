"""
Cholesky factorization A = L Lᵀ for symmetric positive definite A.

Factored by LAPACK potrf. Half the work of LU and no pivoting needed
when A really is SPD. Failure is reported as a value so
the linear-system dispatcher can fall back to LU without exception
control flow.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular
from scipy.linalg.lapack import dpotrf

from pymatrix.core.exceptions import NotPositiveDefiniteError


@dataclass(frozen=True)
class CholeskyFactor:
    """Lower-triangular L with A = L Lᵀ."""
    L: NDArray[np.floating[Any]]

    @property
    def determinant(self) -> float:
        return float(np.prod(np.diag(self.L)) ** 2)


@dataclass(frozen=True)
class CholeskyFailure:
    """
    Why the factorization was rejected.

    Attributes:
        reason: 'not_symmetric' or 'non_positive_pivot'
        pivot_index: Failing diagonal position (None when not symmetric)
    """
    reason: str
    pivot_index: int | None = None


CholeskyOutcome = CholeskyFactor | CholeskyFailure


def is_symmetric(A: NDArray[np.floating[Any]], tol: float) -> bool:
    """Square and |A[i,j] - A[j,i]| <= tol everywhere."""
    if A.shape[0] != A.shape[1]:
        return False
    return bool(np.all(np.abs(A - A.T) <= tol))


def cholesky_factor(A: NDArray[np.floating[Any]], tol: float) -> CholeskyOutcome:
    """
    Factor symmetric A as L Lᵀ.

    The factorization itself is LAPACK potrf. A positive info from potrf
    is the 1-based order of the first leading minor that is not positive
    definite; pivots L[i, i]² that survive potrf but are <= tol are
    rejected too.

    Args:
        A: Square matrix (n x n); not modified
        tol: Symmetry tolerance and minimum admissible pivot

    Returns:
        CholeskyFactor on success, CholeskyFailure otherwise
    """
    if not is_symmetric(A, tol):
        return CholeskyFailure(reason='not_symmetric')

    L, info = dpotrf(A, lower=1, clean=1)
    if info > 0:
        return CholeskyFailure(reason='non_positive_pivot', pivot_index=int(info) - 1)

    small = np.flatnonzero(np.diag(L) ** 2 <= tol)
    if small.size > 0:
        return CholeskyFailure(reason='non_positive_pivot', pivot_index=int(small[0]))

    return CholeskyFactor(L=L)


def cholesky_cpu(A: NDArray[np.floating[Any]], tol: float) -> CholeskyFactor:
    """
    Raising form of cholesky_factor().

    Raises:
        NotPositiveDefiniteError: If A is not symmetric positive definite
    """
    outcome = cholesky_factor(A, tol)
    if isinstance(outcome, CholeskyFailure):
        if outcome.reason == 'not_symmetric':
            message = "Cholesky decomposition requires a symmetric matrix"
        else:
            message = (
                f"Matrix is not positive definite: pivot {outcome.pivot_index} "
                f"is not greater than {tol:.1e}"
            )
        raise NotPositiveDefiniteError(message, matrix_name='A', pivot_index=outcome.pivot_index)
    return outcome


def cholesky_solve_cpu(
    factor: CholeskyFactor,
    b: NDArray[np.floating[Any]]
) -> NDArray[np.floating[Any]]:
    """Solve L y = b, then Lᵀ x = y."""
    y = solve_triangular(factor.L, b, lower=True)
    return solve_triangular(factor.L.T, y, lower=False)
