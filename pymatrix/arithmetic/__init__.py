"""
Elementwise and product operations.

Public API:
    add, subtract, scalar_multiply, transpose, multiply, power -> MatrixResult
    trace -> ScalarResult

Example:
    >>> from pymatrix.arithmetic import multiply
    >>> result = multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])
    >>> result.result.to_list()
    [[19.0, 22.0], [43.0, 50.0]]
"""

from pymatrix.arithmetic.solution import MatrixResult, MatrixParams, ScalarResult, ScalarParams
from pymatrix.arithmetic.solvers import (
    add,
    subtract,
    scalar_multiply,
    transpose,
    multiply,
    power,
    trace,
)

__all__ = [
    "add",
    "subtract",
    "scalar_multiply",
    "transpose",
    "multiply",
    "power",
    "trace",
    "MatrixResult",
    "MatrixParams",
    "ScalarResult",
    "ScalarParams",
]
