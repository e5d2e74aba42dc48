"""
Linear algebra kernels for pymatrix.

All kernels follow these conventions:
    - Inputs are float64 NumPy arrays and are never modified
    - Each kernel allocates its own working buffers
    - Failures that callers branch on are returned as values
      (LUFailure, CholeskyFailure); raising forms are suffixed _cpu
    - Step traces are produced by the operation modules, not here

Submodules:
    lu: Unpivoted LU factorization and LU solve
    qr: Gram-Schmidt QR and QR solve
    cholesky: Cholesky factorization and solve
    determinant: Determinant (LU with cofactor fallback), condition estimate
    elimination: Gauss-Jordan inverse, Gaussian elimination solve
    product: Standard and Strassen products
"""

from pymatrix.core.compute.linalg.lu import (
    LUFactors,
    LUFailure,
    LUOutcome,
    lu_factor,
    lu_cpu,
    lu_solve_cpu,
)
from pymatrix.core.compute.linalg.qr import (
    QRResult,
    gram_schmidt,
    qr_solve_cpu,
)
from pymatrix.core.compute.linalg.cholesky import (
    CholeskyFactor,
    CholeskyFailure,
    CholeskyOutcome,
    is_symmetric,
    cholesky_factor,
    cholesky_cpu,
    cholesky_solve_cpu,
)
from pymatrix.core.compute.linalg.determinant import (
    DeterminantOutcome,
    cofactor_determinant,
    determinant_outcome,
    determinant_cpu,
    frobenius_norm,
    condition_estimate,
    condition_from_determinant,
)
from pymatrix.core.compute.linalg.elimination import (
    EliminationResult,
    gauss_jordan_inverse,
    gaussian_solve,
)
from pymatrix.core.compute.linalg.product import (
    standard_product,
    strassen_product,
    uses_strassen,
    matmul,
)

__all__ = [
    # LU
    "LUFactors",
    "LUFailure",
    "LUOutcome",
    "lu_factor",
    "lu_cpu",
    "lu_solve_cpu",
    # QR
    "QRResult",
    "gram_schmidt",
    "qr_solve_cpu",
    # Cholesky
    "CholeskyFactor",
    "CholeskyFailure",
    "CholeskyOutcome",
    "is_symmetric",
    "cholesky_factor",
    "cholesky_cpu",
    "cholesky_solve_cpu",
    # Determinant
    "DeterminantOutcome",
    "cofactor_determinant",
    "determinant_outcome",
    "determinant_cpu",
    "frobenius_norm",
    "condition_estimate",
    "condition_from_determinant",
    # Elimination
    "EliminationResult",
    "gauss_jordan_inverse",
    "gaussian_solve",
    # Products
    "standard_product",
    "strassen_product",
    "uses_strassen",
    "matmul",
]
