"""
pymatrix: dense real linear algebra with step-by-step explanations.

The numerical matrix engine of a symbolic-mathematics toolkit. Every
operation returns its numeric result together with a human-readable
trace of the stages performed and metadata (complexity, condition
estimate, determinant when cheap).

Submodules:
    arithmetic: add, subtract, scalar_multiply, transpose, multiply, power, trace
    decomposition: LU, QR (Gram-Schmidt), Cholesky
    elimination: determinant, inverse, rank, condition number
    eigen: eigenvalues (QR algorithm), eigenvectors
    linsys: linear system dispatcher (gaussian / cholesky / lu / qr)
"""

__version__ = "0.1.0"

from pymatrix.core import (
    Matrix,
    Vector,
    EngineConfig,
    DEFAULT_CONFIG,
    PyMatrixError,
    ValidationError,
    DimensionError,
    NonSquareMatrixError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceWarning,
)
from pymatrix import arithmetic
from pymatrix import decomposition
from pymatrix import elimination
from pymatrix import eigen
from pymatrix import linsys
from pymatrix.engine import MatrixEngine

__all__ = [
    "__version__",
    "MatrixEngine",
    "Matrix",
    "Vector",
    "EngineConfig",
    "DEFAULT_CONFIG",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NonSquareMatrixError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceWarning",
    "arithmetic",
    "decomposition",
    "elimination",
    "eigen",
    "linsys",
]
