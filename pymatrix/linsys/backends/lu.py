"""
LU backend.

Unpivoted LU factorization followed by forward substitution L y = b and
back substitution U x = y. Fails on a small pivot, like the plain LU
decomposition it reuses.
"""

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.linalg import lu_cpu, lu_solve_cpu
from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import SystemParams
from pymatrix.linsys.backends._result import system_result


class LUBackend:
    """
    Implements the Backend protocol for LinearSystemDesign -> SystemParams.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    def name(self) -> str:
        return 'lu_decomposition'

    def solve(self, design: LinearSystemDesign) -> Result[SystemParams]:
        """
        Raises:
            SingularMatrixError: If a pivot or U diagonal entry is below tolerance
        """
        tol = self._config.tolerance
        timer = Timer()
        timer.start()
        steps = [f"Performing LU decomposition on {design.n}×{design.n} matrix"]

        with timer.section('factorization'):
            factors = lu_cpu(design.A, tol)

        steps.append("Solving Ly = b using forward substitution")
        steps.append("Solving Ux = y using back substitution")
        with timer.section('substitution'):
            x = lu_solve_cpu(factors, design.b, tol)

        return system_result(design, x, steps, timer, self.name)
