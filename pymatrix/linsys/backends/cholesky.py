"""
Cholesky backend.

Factors A = L Lᵀ and solves the two triangular systems. Method selection
only checks symmetry and a positive diagonal, which does not guarantee
positive definiteness; when the factorization rejects A this backend
records the fact and hands the system to LUBackend.
"""

import warnings

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.linalg import cholesky_factor, cholesky_solve_cpu, CholeskyFailure
from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import SystemParams
from pymatrix.linsys.backends._result import system_result
from pymatrix.linsys.backends.lu import LUBackend


class CholeskyBackend:
    """
    Implements the Backend protocol for LinearSystemDesign -> SystemParams.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    def name(self) -> str:
        return 'cholesky'

    def solve(self, design: LinearSystemDesign) -> Result[SystemParams]:
        """
        Raises:
            SingularMatrixError: If the LU fallback meets a small pivot
        """
        timer = Timer()
        timer.start()
        steps = [f"Performing Cholesky decomposition on {design.n}×{design.n} matrix"]

        with timer.section('factorization'):
            outcome = cholesky_factor(design.A, self._config.tolerance)

        if isinstance(outcome, CholeskyFailure):
            return self._fallback(design, outcome, steps)

        steps.append("Solving Ly = b using forward substitution")
        steps.append("Solving Lᵀx = y using back substitution")
        with timer.section('substitution'):
            x = cholesky_solve_cpu(outcome, design.b)

        return system_result(design, x, steps, timer, self.name)

    def _fallback(
        self,
        design: LinearSystemDesign,
        failure: CholeskyFailure,
        steps: list[str],
    ) -> Result[SystemParams]:
        if failure.reason == 'not_symmetric':
            reason = "matrix is not symmetric"
        else:
            reason = f"pivot {failure.pivot_index} is not positive"
        message = f"Cholesky factorization failed ({reason}); falling back to LU decomposition"
        warnings.warn(message, RuntimeWarning, stacklevel=4)

        steps.append(message)
        result = LUBackend(self._config).solve(design)
        return Result(
            params=result.params,
            info=result.info,
            steps=tuple(steps) + result.steps,
            timing=result.timing,
            backend_name=result.backend_name,
            warnings=result.warnings + (message,),
        )
