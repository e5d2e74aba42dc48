"""
Result types for matrix-valued and scalar-valued operations.

MatrixResult is shared by arithmetic and by inversion; ScalarResult by
trace, rank and the traced determinant.
"""

from dataclasses import dataclass

from pymatrix.core.design import Matrix
from pymatrix.core.result import StepRecord


@dataclass(frozen=True)
class MatrixParams:
    """Payload for operations that produce a matrix."""
    result: Matrix


@dataclass(frozen=True)
class ScalarParams:
    """Payload for operations that produce a single number."""
    value: float | int


@dataclass(frozen=True)
class MatrixResult(StepRecord):
    """
    Matrix output of an operation with its step trace.

    Metadata keys:
        operation: e.g. 'matrix_addition'
        complexity: e.g. 'O(mn)', 'O(n³)'
        condition: condition estimate (when computed)
        determinant: determinant (when cheaply available)
    """

    @property
    def result(self) -> Matrix:
        return self._result.params.result


@dataclass(frozen=True)
class ScalarResult(StepRecord):
    """Scalar output (trace, rank, determinant) with its step trace."""

    @property
    def value(self) -> float | int:
        return self._result.params.value
