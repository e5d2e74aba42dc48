"""
Square linear systems A x = b.

Public API:
    solve_linear_system(A, b, method='auto') -> SystemResult
    solve(A, b) -> SolveResult

solve_linear_system() handles:
    - Input validation
    - Design construction
    - Method selection (gaussian, cholesky, lu, qr)
    - Residual and condition reporting

Example:
    >>> from pymatrix.linsys import solve_linear_system
    >>> result = solve_linear_system([[1, 0], [0, 1]], [3, 4])
    >>> result.solution.to_list(), result.method
    ([3.0, 4.0], 'gaussian_elimination')
"""

from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import SystemParams, SystemResult, SolveResult
from pymatrix.linsys.solvers import solve_linear_system, solve, select_method

__all__ = [
    "solve_linear_system",
    "solve",
    "select_method",
    "LinearSystemDesign",
    "SystemParams",
    "SystemResult",
    "SolveResult",
]
