"""
Gaussian elimination backend.

Forward elimination with partial pivoting on [A | b], then back
substitution. Used for small systems.
"""

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.linalg import gaussian_solve
from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import SystemParams
from pymatrix.linsys.backends._result import system_result


class GaussianBackend:
    """
    Implements the Backend protocol for LinearSystemDesign -> SystemParams.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    def name(self) -> str:
        return 'gaussian_elimination'

    def solve(self, design: LinearSystemDesign) -> Result[SystemParams]:
        """
        Raises:
            SingularMatrixError: If no usable pivot exists in some column
        """
        timer = Timer()
        timer.start()
        steps = ["Forward elimination phase"]

        with timer.section('elimination'):
            elimination = gaussian_solve(design.A, design.b, self._config.tolerance)

        steps.extend(
            f"Swapped rows {row} and {pivot_row} (partial pivoting)"
            for row, pivot_row in elimination.swaps
        )
        steps.append("Back substitution phase")
        return system_result(design, elimination.values, steps, timer, self.name)
