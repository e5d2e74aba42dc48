"""
Linear system solution types.
"""

from dataclasses import dataclass

from pymatrix.core.design import Vector
from pymatrix.core.result import StepRecord


@dataclass(frozen=True)
class SystemParams:
    """
    Parameter payload for a solved system.

    Attributes:
        solution: x with A x ≈ b
        residual: ‖A x - b‖₂, computed from the original A and b
        condition: Norm/determinant condition estimate of A
    """
    solution: Vector
    residual: float
    condition: float


@dataclass(frozen=True)
class SystemResult(StepRecord):
    """
    User-facing linear system record.

    The residual is an independent self-check: for a well-conditioned A
    it should be a small multiple of tolerance × ‖b‖.
    """

    @property
    def solution(self) -> Vector:
        return self._result.params.solution

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def residual(self) -> float:
        return self._result.params.residual

    @property
    def condition(self) -> float:
        return self._result.params.condition


@dataclass(frozen=True)
class SolveResult(StepRecord):
    """
    Plain-list form of a solved system, for callers that pass b as a
    sequence and want a sequence back.

    Metadata keys: operation, method, complexity, residual.
    """

    @property
    def values(self) -> list[float]:
        return self._result.params.solution.to_list()
