"""
QR decomposition by classical Gram-Schmidt.

Computes A = QR column by column. Unlike the LU kernel, a column that is
(numerically) a combination of earlier ones does not raise: its Q column
is left at zero and R[j, j] records the tiny residual norm. Rank is then
read off the R diagonal.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pymatrix.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Matrix with orthonormal (or zero) columns (m x n)
        R: Upper triangular matrix (n x n)
        rank: Number of R diagonal entries above tolerance
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def gram_schmidt(A: NDArray[np.floating[Any]], tol: float) -> QRResult:
    """
    Classical Gram-Schmidt QR.

    For column j, the projections onto the previously built columns of Q
    are taken against the original column and accumulated into R[:j, j];
    the residual is normalized into Q[:, j] with its norm in R[j, j].

    Args:
        A: Matrix to decompose (m x n); not modified
        tol: Residual norm below which a column counts as dependent

    Returns:
        QRResult with Q, R and numerical rank
    """
    m, n = A.shape
    Q = np.zeros((m, n))
    R = np.zeros((n, n))

    for j in range(n):
        column = np.array(A[:, j], dtype=np.float64, copy=True)
        for i in range(j):
            projection = float(A[:, j] @ Q[:, i])
            R[i, j] = projection
            column -= projection * Q[:, i]

        norm = float(np.linalg.norm(column))
        R[j, j] = norm
        if norm > tol:
            Q[:, j] = column / norm

    rank = int(np.sum(np.abs(np.diag(R)) > tol))
    return QRResult(Q=Q, R=R, rank=rank)


def qr_solve_cpu(
    qr: QRResult,
    b: NDArray[np.floating[Any]],
    tol: float
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b via an existing QR decomposition of square A.

    The solution is computed as:
        A = QR
        x = R⁻¹ Q'b

    Raises:
        SingularMatrixError: If an R diagonal entry is below tol
    """
    diag_R = np.abs(np.diag(qr.R))
    small = np.flatnonzero(diag_R < tol)
    if small.size > 0:
        index = int(small[0])
        raise SingularMatrixError(
            f"Matrix is rank-deficient: rank={qr.rank}, expected={qr.R.shape[0]}; "
            f"R[{index},{index}] is negligible",
            matrix_name='R',
            pivot_index=index,
            pivot_value=float(qr.R[index, index]),
            tolerance=tol,
        )

    Qtb = qr.Q.T @ b
    return solve_triangular(qr.R, Qtb, lower=False)
