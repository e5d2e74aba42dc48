"""
Determinant, inversion, rank and the condition estimate.

Public API:
    determinant(a) -> float
    determinant_result(a) -> ScalarResult
    inverse(a) -> MatrixResult
    rank(a) -> ScalarResult
    condition_number(a) -> float

The determinant never fails for a square matrix: when unpivoted LU stops
on a small pivot the value comes from cofactor expansion instead.
Inversion does fail on singular input, since no inverse exists.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.design import Matrix, as_matrix
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.linalg import (
    determinant_outcome,
    condition_estimate,
    condition_from_determinant,
    gauss_jordan_inverse,
)
from pymatrix.core.validation import check_square
from pymatrix.arithmetic.solution import MatrixParams, MatrixResult, ScalarParams, ScalarResult


def determinant(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """
    Determinant of a square matrix.

    Raises:
        NonSquareMatrixError: If A is not square
    """
    A = as_matrix(a, 'a')
    check_square(A.shape, 'Determinant', 'a')
    return determinant_outcome(A.data, config.tolerance).value


def determinant_result(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ScalarResult:
    """
    Determinant with a step trace and the branch taken in metadata
    ('closed_form', 'lu' or 'cofactor').

    Raises:
        NonSquareMatrixError: If A is not square
    """
    A = as_matrix(a, 'a')
    check_square(A.shape, 'Determinant', 'a')
    n = A.rows

    timer = Timer()
    timer.start()
    steps = [f"Computing determinant of {n}×{n} matrix"]

    with timer.section('determinant'):
        outcome = determinant_outcome(A.data, config.tolerance)

    if outcome.method == 'closed_form':
        if n == 1:
            steps.append("1×1 matrix: determinant is the single entry")
        else:
            steps.append("2×2 matrix: det = a·d - b·c")
        complexity = 'O(1)'
    elif outcome.method == 'lu':
        steps.append("LU decomposition succeeded without pivoting")
        steps.append("det(A) = product of the diagonal of U")
        complexity = 'O(n³)'
    else:
        failure = outcome.lu_failure
        steps.append(
            f"LU decomposition stopped at pivot {failure.pivot_index} "
            f"(|{failure.pivot_value:.3e}| < {config.tolerance:.1e})"
        )
        steps.append("Falling back to cofactor expansion along the first row")
        complexity = 'O(n!)'
    steps.append(f"Determinant = {outcome.value:g}")

    timer.stop()
    return ScalarResult(Result(
        params=ScalarParams(value=outcome.value),
        info={'operation': 'determinant', 'method': outcome.method, 'complexity': complexity},
        steps=tuple(steps),
        timing=timer.result(),
        backend_name=outcome.method,
    ))


def inverse(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MatrixResult:
    """
    Inverse by Gauss-Jordan elimination on [A | I] with partial pivoting.

    The determinant in the metadata is read off the elimination pivots,
    and the condition estimate reuses it.

    Raises:
        NonSquareMatrixError: If A is not square
        SingularMatrixError: If no pivot of magnitude >= config.tolerance exists
    """
    A = as_matrix(a, 'a')
    check_square(A.shape, 'Inversion', 'a')
    n = A.rows

    timer = Timer()
    timer.start()
    steps = [f"Computing inverse of {n}×{n} matrix using Gauss-Jordan elimination"]

    with timer.section('gauss_jordan'):
        elimination = gauss_jordan_inverse(A.data, config.tolerance)

    steps.extend(f"Swapped rows {row} and {pivot_row}" for row, pivot_row in elimination.swaps)
    steps.append("Matrix inversion complete")
    steps.append("Verification: A × A⁻¹ should equal identity matrix")

    with timer.section('diagnostics'):
        info: dict[str, Any] = {
            'operation': 'matrix_inversion',
            'complexity': 'O(n³)',
            'condition': condition_from_determinant(A.data, elimination.determinant, config.tolerance),
            'determinant': elimination.determinant,
        }

    timer.stop()
    return MatrixResult(Result(
        params=MatrixParams(result=Matrix._from_trusted(elimination.values)),
        info=info,
        steps=tuple(steps),
        timing=timer.result(),
        backend_name='gauss_jordan',
    ))


def rank(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ScalarResult:
    """
    Numerical rank by row reduction to echelon form.

    In each column the first row at or below the current rank whose entry
    exceeds config.tolerance becomes the pivot.
    """
    A = as_matrix(a, 'a')
    m, n = A.shape
    tol = config.tolerance

    timer = Timer()
    timer.start()
    steps = [
        f"Computing rank of {m}×{n} matrix",
        "Performing row reduction to echelon form",
    ]

    work = A.copy()
    r = 0
    with timer.section('row_reduction'):
        for col in range(n):
            if r == m:
                break
            candidates = np.flatnonzero(np.abs(work[r:, col]) > tol)
            if candidates.size == 0:
                steps.append(f"Column {col}: No pivot found, skipping")
                continue

            pivot_row = r + int(candidates[0])
            if pivot_row != r:
                work[[r, pivot_row]] = work[[pivot_row, r]]
                steps.append(f"Swapped rows {r} and {pivot_row}")

            factors = work[r + 1:, col] / work[r, col]
            work[r + 1:, col:] -= np.outer(factors, work[r, col:])
            r += 1
            steps.append(f"Found pivot in column {col}, rank = {r}")

    steps.append(f"Final rank: {r}")
    timer.stop()
    return ScalarResult(Result(
        params=ScalarParams(value=r),
        info={
            'operation': 'matrix_rank',
            'complexity': 'O(min(m,n) * m * n)',
            'is_full_rank': r == min(m, n),
        },
        steps=tuple(steps),
        timing=timer.result(),
        backend_name='row_echelon',
    ))


def condition_number(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """
    Frobenius-norm / |determinant| condition estimate.

    A coarse proxy, not the spectral condition number; inf for singular
    (|det| < tolerance) or non-square matrices.
    """
    A = as_matrix(a, 'a')
    return condition_estimate(A.data, config.tolerance)
