"""
QR backend.

Gram-Schmidt QR, then R x = Qᵀ b by back substitution. Chosen for
systems whose condition estimate is too large for LU.
"""

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.linalg import gram_schmidt, qr_solve_cpu
from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import SystemParams
from pymatrix.linsys.backends._result import system_result


class QRBackend:
    """
    Implements the Backend protocol for LinearSystemDesign -> SystemParams.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    def name(self) -> str:
        return 'qr_decomposition'

    def solve(self, design: LinearSystemDesign) -> Result[SystemParams]:
        """
        Raises:
            SingularMatrixError: If A is numerically rank-deficient
        """
        tol = self._config.tolerance
        timer = Timer()
        timer.start()
        steps = [f"Performing QR decomposition on {design.n}×{design.n} matrix"]

        with timer.section('factorization'):
            qr = gram_schmidt(design.A, tol)

        steps.append("Computing Q^T * b")
        steps.append("Solving Rx = Q^T*b using back substitution")
        with timer.section('substitution'):
            x = qr_solve_cpu(qr, design.b, tol)

        return system_result(design, x, steps, timer, self.name)
