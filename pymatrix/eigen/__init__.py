"""
Eigenvalue extraction by the QR algorithm.

Public API:
    eigenvalues(a) -> EigenResult
    eigenvectors(a) -> EigenResult
"""

from pymatrix.eigen.solution import Convergence, EigenParams, EigenResult
from pymatrix.eigen.solvers import eigenvalues, eigenvectors

__all__ = [
    "eigenvalues",
    "eigenvectors",
    "Convergence",
    "EigenParams",
    "EigenResult",
]
