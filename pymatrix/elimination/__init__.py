"""
Elimination-based scalar and inverse computations.

Public API:
    determinant(a) -> float
    determinant_result(a) -> ScalarResult
    inverse(a) -> MatrixResult
    rank(a) -> ScalarResult
    condition_number(a) -> float
"""

from pymatrix.elimination.solvers import (
    determinant,
    determinant_result,
    inverse,
    rank,
    condition_number,
)

__all__ = [
    "determinant",
    "determinant_result",
    "inverse",
    "rank",
    "condition_number",
]
