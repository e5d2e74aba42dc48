"""
Linear system design.

Bundles a validated square coefficient matrix A with a right-hand side b
and the tolerance used for every numerical decision about them. The
condition estimate and symmetry check are computed at most once and
shared by method selection and the backends.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.design import Matrix, Vector, as_matrix, as_vector
from pymatrix.core.compute.linalg import condition_estimate, is_symmetric
from pymatrix.core.validation import check_consistent_length, check_square


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Square system A x = b.

    Construction:
        LinearSystemDesign.build(A, b, tolerance=1e-10)
    """
    _A: Matrix
    _b: Vector
    _tolerance: float

    @classmethod
    def build(
        cls,
        A: Matrix | ArrayLike,
        b: Vector | ArrayLike,
        tolerance: float,
    ) -> LinearSystemDesign:
        """
        Validate and build.

        Raises:
            DimensionError: If A.rows != b.size
            NonSquareMatrixError: If A is not square
        """
        A_mat = as_matrix(A, 'A')
        b_vec = as_vector(b, 'b')
        check_consistent_length(A_mat.rows, b_vec.size, names=('A', 'b'))
        check_square(A_mat.shape, 'Linear system solve', 'A')
        return cls(_A=A_mat, _b=b_vec, _tolerance=tolerance)

    # === Properties ===

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n), read-only."""
        return self._A.data

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,), read-only."""
        return self._b.data

    @property
    def n(self) -> int:
        return self._A.rows

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @cached_property
    def condition(self) -> float:
        """Frobenius-norm / |det| condition estimate of A."""
        return condition_estimate(self.A, self._tolerance)

    @cached_property
    def is_symmetric(self) -> bool:
        return is_symmetric(self.A, self._tolerance)

    @property
    def has_positive_diagonal(self) -> bool:
        return bool(np.all(np.diag(self.A) > 0))

    def residual(self, x: NDArray[np.floating[Any]]) -> float:
        """Euclidean norm ‖A x - b‖₂."""
        return float(np.linalg.norm(self.A @ x - self.b))
