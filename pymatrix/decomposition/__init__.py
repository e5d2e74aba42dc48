"""
Matrix factorizations: LU (unpivoted), QR (Gram-Schmidt), Cholesky.

Public API:
    lu_decomposition(a) -> DecompositionResult
    qr_decomposition(a) -> QRFactors
    qr_decomposition_result(a) -> DecompositionResult
    cholesky_decomposition(a) -> DecompositionResult
"""

from pymatrix.decomposition.solution import (
    DecompositionParams,
    DecompositionResult,
    QRFactors,
)
from pymatrix.decomposition.solvers import (
    lu_decomposition,
    qr_decomposition,
    qr_decomposition_result,
    cholesky_decomposition,
)

__all__ = [
    "lu_decomposition",
    "qr_decomposition",
    "qr_decomposition_result",
    "cholesky_decomposition",
    "DecompositionParams",
    "DecompositionResult",
    "QRFactors",
]
