"""
Eigenvalue solution types.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.design import Matrix
from pymatrix.core.result import StepRecord


@dataclass(frozen=True)
class Convergence:
    """
    Iteration diagnostics of the QR algorithm.

    Attributes:
        iterations: QR steps performed
        tolerance: Off-diagonal threshold used
        converged: Whether every off-diagonal entry fell to tolerance
            before the iteration cap
    """
    iterations: int
    tolerance: float
    converged: bool


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for eigen computations.

    Attributes:
        eigenvalues: Diagonal of the final iterate, in diagonal order
        eigenvectors: Unit eigenvectors as rows, or None
        convergence: Iteration diagnostics
    """
    eigenvalues: NDArray[np.floating[Any]]
    eigenvectors: Matrix | None
    convergence: Convergence


@dataclass(frozen=True)
class EigenResult(StepRecord):
    """
    User-facing eigen record.

    An unconverged result is still a result: check
    convergence.converged before trusting the values.
    """

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        return self._result.params.eigenvalues

    @property
    def eigenvectors(self) -> Matrix | None:
        return self._result.params.eigenvectors

    @property
    def convergence(self) -> Convergence:
        return self._result.params.convergence

    @property
    def converged(self) -> bool:
        return self._result.params.convergence.converged

