"""
MatrixEngine: one object owning an EngineConfig and exposing every
operation.

The engine holds no state besides its configuration, which is frozen, so
a single instance can be shared freely between callers and threads. Each
method validates its operands, works on private copies and returns an
immutable record.

Example:
    >>> from pymatrix import MatrixEngine
    >>> engine = MatrixEngine()
    >>> engine.determinant([[1, 2], [3, 4]])
    -2.0
    >>> engine.inverse([[2, 0], [0, 2]]).result.to_list()
    [[0.5, 0.0], [0.0, 0.5]]
"""

from numpy.typing import ArrayLike

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.design import Matrix, Vector
from pymatrix import arithmetic, decomposition, elimination, eigen, linsys
from pymatrix.arithmetic import MatrixResult, ScalarResult
from pymatrix.decomposition import DecompositionResult, QRFactors
from pymatrix.eigen import EigenResult
from pymatrix.linsys import SystemResult, SolveResult
from pymatrix.linsys.solvers import MethodChoice

MatrixLike = Matrix | ArrayLike
VectorLike = Vector | ArrayLike


class MatrixEngine:
    """
    Dense real linear-algebra engine with step-by-step traces.

    Args:
        config: Numerical thresholds; defaults to DEFAULT_CONFIG
            (tolerance 1e-10, 1000 max iterations)
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def tolerance(self) -> float:
        return self._config.tolerance

    @property
    def max_iterations(self) -> int:
        return self._config.max_iterations

    # === Arithmetic ===

    def add(self, a: MatrixLike, b: MatrixLike) -> MatrixResult:
        return arithmetic.add(a, b, config=self._config)

    def subtract(self, a: MatrixLike, b: MatrixLike) -> MatrixResult:
        return arithmetic.subtract(a, b, config=self._config)

    def scalar_multiply(self, a: MatrixLike, scalar: float) -> MatrixResult:
        return arithmetic.scalar_multiply(a, scalar, config=self._config)

    def transpose(self, a: MatrixLike) -> MatrixResult:
        return arithmetic.transpose(a, config=self._config)

    def multiply(self, a: MatrixLike, b: MatrixLike) -> MatrixResult:
        return arithmetic.multiply(a, b, config=self._config)

    def power(self, a: MatrixLike, n: int) -> MatrixResult:
        return arithmetic.power(a, n, config=self._config)

    def trace(self, a: MatrixLike) -> ScalarResult:
        return arithmetic.trace(a, config=self._config)

    # === Determinant, inversion, rank ===

    def determinant(self, a: MatrixLike) -> float:
        return elimination.determinant(a, config=self._config)

    def determinant_result(self, a: MatrixLike) -> ScalarResult:
        return elimination.determinant_result(a, config=self._config)

    def inverse(self, a: MatrixLike) -> MatrixResult:
        return elimination.inverse(a, config=self._config)

    def rank(self, a: MatrixLike) -> ScalarResult:
        return elimination.rank(a, config=self._config)

    def condition_number(self, a: MatrixLike) -> float:
        return elimination.condition_number(a, config=self._config)

    # === Decompositions ===

    def lu_decomposition(self, a: MatrixLike) -> DecompositionResult:
        return decomposition.lu_decomposition(a, config=self._config)

    def qr_decomposition(self, a: MatrixLike) -> QRFactors:
        return decomposition.qr_decomposition(a, config=self._config)

    def qr_decomposition_result(self, a: MatrixLike) -> DecompositionResult:
        return decomposition.qr_decomposition_result(a, config=self._config)

    def cholesky_decomposition(self, a: MatrixLike) -> DecompositionResult:
        return decomposition.cholesky_decomposition(a, config=self._config)

    # === Eigen ===

    def eigenvalues(self, a: MatrixLike) -> EigenResult:
        return eigen.eigenvalues(a, config=self._config)

    def eigenvectors(self, a: MatrixLike) -> EigenResult:
        return eigen.eigenvectors(a, config=self._config)

    # === Linear systems ===

    def solve_linear_system(
        self,
        A: MatrixLike,
        b: VectorLike,
        *,
        method: MethodChoice = 'auto',
    ) -> SystemResult:
        return linsys.solve_linear_system(A, b, method=method, config=self._config)

    def solve(self, A: MatrixLike, b: VectorLike) -> SolveResult:
        return linsys.solve(A, b, config=self._config)

    def __repr__(self) -> str:
        return (
            f"MatrixEngine(tolerance={self._config.tolerance:g}, "
            f"max_iterations={self._config.max_iterations})"
        )
