"""
Decomposition result types.
"""

from dataclasses import dataclass
from typing import Literal

from pymatrix.core.design import Matrix
from pymatrix.core.result import StepRecord

DecompositionKind = Literal['LU', 'QR', 'Cholesky']


@dataclass(frozen=True)
class DecompositionParams:
    """
    Parameter payload for a factorization.

    Attributes:
        factors: Ordered factors, (L, U), (Q, R) or (L, Lᵀ)
        kind: 'LU', 'QR' or 'Cholesky'
    """
    factors: tuple[Matrix, ...]
    kind: DecompositionKind


@dataclass(frozen=True)
class QRFactors:
    """
    Q and R as plain Matrix values, returned by qr_decomposition().

    Attributes:
        Q: Columns orthonormal, or zero for dependent columns (m x n)
        R: Upper triangular (n x n)
    """
    Q: Matrix
    R: Matrix

    def __iter__(self):
        return iter((self.Q, self.R))


@dataclass(frozen=True)
class DecompositionResult(StepRecord):
    """
    User-facing factorization record.

    Metadata keys (all optional): rank, condition, determinant.
    """

    @property
    def factors(self) -> tuple[Matrix, ...]:
        return self._result.params.factors

    @property
    def kind(self) -> DecompositionKind:
        return self._result.params.kind

    def reconstruct(self) -> Matrix:
        """Product of the factors, left to right."""
        product = self.factors[0].data
        for factor in self.factors[1:]:
            product = product @ factor.data
        return Matrix._from_trusted(product)
