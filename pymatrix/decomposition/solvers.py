"""
Factorization entry points.

Public API:
    lu_decomposition(a) -> DecompositionResult ('LU')
    qr_decomposition(a) -> QRFactors
    qr_decomposition_result(a) -> DecompositionResult ('QR')
    cholesky_decomposition(a) -> DecompositionResult ('Cholesky')

LU and QR deliberately differ in how they treat near-dependence: LU has
no pivoting and raises SingularMatrixError on the first small pivot,
while Gram-Schmidt QR tolerates dependent columns and leaves them as zero
columns of Q. Callers needing robustness on nearly singular matrices
should use QR or Gauss-Jordan inversion.
"""

from typing import Any
from numpy.typing import ArrayLike

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.design import Matrix, as_matrix
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.linalg import (
    lu_cpu,
    gram_schmidt,
    cholesky_cpu,
    condition_estimate,
)
from pymatrix.core.validation import check_square
from pymatrix.decomposition.solution import DecompositionParams, DecompositionResult, QRFactors


def lu_decomposition(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> DecompositionResult:
    """
    LU decomposition without pivoting: A = L U.

    L is unit lower-triangular, U upper-triangular.

    Raises:
        NonSquareMatrixError: If A is not square
        SingularMatrixError: If a pivot falls below config.tolerance
    """
    A = as_matrix(a, 'a')
    check_square(A.shape, 'LU decomposition', 'a')
    n = A.rows

    timer = Timer()
    timer.start()
    steps = [
        f"Performing LU decomposition on {n}×{n} matrix",
        "L will be lower triangular, U will be upper triangular",
    ]

    with timer.section('factorization'):
        factors = lu_cpu(A.data, config.tolerance)

    steps.extend(f"Completed elimination for column {i}" for i in range(5, n, 5))
    steps.append("LU decomposition complete: A = L × U")

    with timer.section('condition'):
        condition = condition_estimate(A.data, config.tolerance)

    timer.stop()
    return DecompositionResult(Result(
        params=DecompositionParams(
            factors=(Matrix._from_trusted(factors.L), Matrix._from_trusted(factors.U)),
            kind='LU',
        ),
        info={'determinant': factors.determinant, 'condition': condition},
        steps=tuple(steps),
        timing=timer.result(),
        backend_name='doolittle',
    ))


def qr_decomposition(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> QRFactors:
    """
    QR decomposition by classical Gram-Schmidt: A = Q R.

    Accepts any m×n matrix. Dependent columns do not raise; their Q
    column is zero.
    """
    A = as_matrix(a, 'a')
    qr = gram_schmidt(A.data, config.tolerance)
    return QRFactors(Q=Matrix._from_trusted(qr.Q), R=Matrix._from_trusted(qr.R))


def qr_decomposition_result(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> DecompositionResult:
    """
    QR decomposition with step trace and rank/condition metadata.
    """
    A = as_matrix(a, 'a')
    m, n = A.shape

    timer = Timer()
    timer.start()
    steps = [
        f"Performing QR decomposition on {m}×{n} matrix using Gram-Schmidt",
        "Q will have orthonormal columns, R will be upper triangular",
    ]

    with timer.section('factorization'):
        qr = gram_schmidt(A.data, config.tolerance)

    if qr.rank < n:
        steps.append(
            f"{n - qr.rank} column(s) are linearly dependent on earlier columns; "
            f"their Q columns are left as zero"
        )
    steps.append("QR decomposition complete: A = Q × R")

    info: dict[str, Any] = {'rank': qr.rank}
    if A.is_square:
        with timer.section('condition'):
            info['condition'] = condition_estimate(A.data, config.tolerance)

    timer.stop()
    return DecompositionResult(Result(
        params=DecompositionParams(
            factors=(Matrix._from_trusted(qr.Q), Matrix._from_trusted(qr.R)),
            kind='QR',
        ),
        info=info,
        steps=tuple(steps),
        timing=timer.result(),
        backend_name='gram_schmidt',
    ))


def cholesky_decomposition(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> DecompositionResult:
    """
    Cholesky decomposition A = L Lᵀ of a symmetric positive definite matrix.

    Factors are returned as (L, Lᵀ).

    Raises:
        NonSquareMatrixError: If A is not square
        NotPositiveDefiniteError: If A is not symmetric positive definite
    """
    A = as_matrix(a, 'a')
    check_square(A.shape, 'Cholesky decomposition', 'a')
    n = A.rows

    timer = Timer()
    timer.start()
    steps = [
        f"Performing Cholesky decomposition on {n}×{n} matrix",
        "Checking symmetry, then computing L row by row so that A = L × Lᵀ",
    ]

    with timer.section('factorization'):
        factor = cholesky_cpu(A.data, config.tolerance)

    steps.append("Cholesky decomposition complete: A = L × Lᵀ")

    with timer.section('condition'):
        condition = condition_estimate(A.data, config.tolerance)

    timer.stop()
    return DecompositionResult(Result(
        params=DecompositionParams(
            factors=(Matrix._from_trusted(factor.L), Matrix._from_trusted(factor.L.T)),
            kind='Cholesky',
        ),
        info={'determinant': factor.determinant, 'condition': condition},
        steps=tuple(steps),
        timing=timer.result(),
        backend_name='cholesky_banachiewicz',
    ))
