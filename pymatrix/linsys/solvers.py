"""
Solver dispatch for square linear systems.

This module provides solve_linear_system() and solve() (public API) and
backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.design import Matrix, Vector
from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import SystemParams, SystemResult, SolveResult
from pymatrix.linsys.backends import GaussianBackend, LUBackend, QRBackend, CholeskyBackend


# Type alias for method selection
MethodChoice = Literal['auto', 'gaussian', 'cholesky', 'lu', 'qr']


def select_method(design: LinearSystemDesign, config: EngineConfig) -> str:
    """
    Choose a solution method from the shape and properties of A.

    Priority:
        1. n <= config.gaussian_max_size          -> 'gaussian'
        2. symmetric with positive diagonal       -> 'cholesky'
        3. condition < ill_conditioned_threshold  -> 'lu'
        4. otherwise                              -> 'qr'
    """
    if design.n <= config.gaussian_max_size:
        return 'gaussian'

    if design.is_symmetric and design.has_positive_diagonal:
        return 'cholesky'

    if design.condition < config.ill_conditioned_threshold:
        return 'lu'

    return 'qr'


def _get_backend(method: str, config: EngineConfig) -> Backend[LinearSystemDesign, SystemParams]:
    """
    Instantiate the backend for a method name.

    Raises:
        ValueError: If unknown method specified
    """
    if method == 'gaussian':
        return GaussianBackend(config)
    elif method == 'cholesky':
        return CholeskyBackend(config)
    elif method == 'lu':
        return LUBackend(config)
    elif method == 'qr':
        return QRBackend(config)
    else:
        raise ValueError(f"Unknown method: {method!r}")


def solve_linear_system(
    A: Matrix | ArrayLike,
    b: Vector | ArrayLike,
    *,
    method: MethodChoice = 'auto',
    config: EngineConfig = DEFAULT_CONFIG,
) -> SystemResult:
    """
    Solve the square system A x = b.

    With method='auto' the algorithm is picked by select_method(); any
    other value forces that backend. Whatever the method, the result
    carries the residual ‖A x - b‖₂ and the condition estimate of A.

    Args:
        A: Coefficient matrix (n x n)
        b: Right-hand side (n,)
        method: 'auto', 'gaussian', 'cholesky', 'lu' or 'qr'
        config: Engine configuration

    Returns:
        SystemResult with solution, method, steps, residual, condition

    Raises:
        DimensionError: If A.rows != b.size
        NonSquareMatrixError: If A is not square
        SingularMatrixError: If the chosen method meets a negligible pivot
        ValueError: If method is unknown
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = LinearSystemDesign.build(A, b, config.tolerance)

    # === Select Backend ===
    chosen = select_method(design, config) if method == 'auto' else method
    backend = _get_backend(chosen, config)

    steps = [
        "Solving linear system Ax = b",
        f"Matrix size: {design.n}×{design.n}, Vector size: {design.n}",
        f"Selected method: {chosen}",
    ]

    # === Solve ===
    result = backend.solve(design)

    # === Wrap and Return ===
    return SystemResult(Result(
        params=result.params,
        info={**result.info, 'selected_method': chosen},
        steps=tuple(steps) + result.steps,
        timing=result.timing,
        backend_name=result.backend_name,
        warnings=result.warnings,
    ))


def solve(
    A: Matrix | ArrayLike,
    b: Vector | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> SolveResult:
    """
    Solve A x = b with automatic method selection, returning a list.

    Example:
        >>> solve([[2, 0], [0, 4]], [2, 8]).values
        [1.0, 2.0]
    """
    system = solve_linear_system(A, b, config=config)
    n = system.solution.size
    steps = [
        "Solving linear system Ax = b",
        f"Matrix A: {n}×{n}, vector b: {n} elements",
    ]

    return SolveResult(Result(
        params=SystemParams(
            solution=system.solution,
            residual=system.residual,
            condition=system.condition,
        ),
        info={
            'operation': 'linear_system_solve',
            'method': system.method,
            'complexity': 'O(n³)',
            'residual': system.residual,
        },
        steps=tuple(steps) + system.steps,
        timing=system.timing,
        backend_name=system.backend_name,
        warnings=system.warnings,
    ))
