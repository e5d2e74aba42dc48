"""
Eigenvalues by the unshifted QR algorithm.

Public API:
    eigenvalues(a) -> EigenResult
    eigenvectors(a) -> EigenResult (with eigenvectors)

Each step factors the current iterate A_k = Q R and forms A_{k+1} = R Q,
a similarity transform, so the diagonal tends to the eigenvalues. No
shifts are applied: convergence is guaranteed only for real eigenvalues
of distinct magnitude (or symmetric input). Complex pairs and equal
magnitudes stall until max_iterations; that is reported through
convergence.converged and a ConvergenceWarning, not raised.
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import lu_factor, lu_solve

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.design import Matrix, as_matrix
from pymatrix.core.exceptions import ConvergenceWarning
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.linalg import gram_schmidt, matmul
from pymatrix.core.validation import check_square
from pymatrix.eigen.solution import Convergence, EigenParams, EigenResult

# Inverse iteration settings for eigenvectors
_INVERSE_ITERATIONS = 20
_RELATIVE_SHIFT = 1e-8


def _off_diagonal_converged(A: NDArray[np.floating[Any]], tol: float) -> bool:
    off_diagonal = A - np.diag(np.diag(A))
    return bool(np.all(np.abs(off_diagonal) <= tol))


def _qr_iteration(
    A: Matrix,
    config: EngineConfig,
    steps: list[str],
    timer: Timer,
) -> tuple[NDArray[np.floating[Any]], Convergence]:
    work = A.copy()
    iterations = 0
    converged = False

    with timer.section('qr_iteration'):
        while iterations < config.max_iterations and not converged:
            qr = gram_schmidt(work, config.tolerance)
            work = matmul(qr.R, qr.Q, config.strassen_threshold, config.strassen_leaf_size)
            iterations += 1
            converged = _off_diagonal_converged(work, config.tolerance)

            if iterations % config.progress_interval == 0:
                steps.append(f"Iteration {iterations}: Continuing QR decomposition")

    values = np.diag(work).copy()
    values.setflags(write=False)
    return values, Convergence(
        iterations=iterations,
        tolerance=config.tolerance,
        converged=converged,
    )


def _convergence_warning(convergence: Convergence) -> str:
    message = (
        f"QR algorithm did not converge after {convergence.iterations} iterations "
        f"(off-diagonal tolerance {convergence.tolerance:.1e}); "
        f"eigenvalues are the diagonal of the last iterate"
    )
    warnings.warn(message, ConvergenceWarning, stacklevel=3)
    return message


def eigenvalues(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> EigenResult:
    """
    Eigenvalues of a square matrix by unshifted QR iteration.

    Iterates at most config.max_iterations times, stopping once every
    off-diagonal magnitude is <= config.tolerance. Eigenvalues are
    reported in diagonal order of the final iterate.

    Raises:
        NonSquareMatrixError: If A is not square

    Warns:
        ConvergenceWarning: If the iteration cap is reached first
    """
    A = as_matrix(a, 'a')
    check_square(A.shape, 'Eigenvalue computation', 'a')

    timer = Timer()
    timer.start()
    steps = [
        f"Computing eigenvalues for {A.rows}×{A.cols} matrix",
        f"Using QR algorithm with {config.max_iterations} max iterations",
    ]

    values, convergence = _qr_iteration(A, config, steps, timer)

    warning_messages: tuple[str, ...] = ()
    if convergence.converged:
        steps.append(f"Converged after {convergence.iterations} iterations")
    else:
        steps.append(f"Stopped after {convergence.iterations} iterations without converging")
        warning_messages = (_convergence_warning(convergence),)
    steps.append(f"Eigenvalues: [{', '.join(f'{v:.6f}' for v in values)}]")

    timer.stop()
    return EigenResult(Result(
        params=EigenParams(eigenvalues=values, eigenvectors=None, convergence=convergence),
        info={'operation': 'eigenvalues', 'method': 'qr_algorithm', 'complexity': 'O(k·n³)'},
        steps=tuple(steps),
        timing=timer.result(),
        backend_name='unshifted_qr',
        warnings=warning_messages,
    ))


def _inverse_iteration(
    A: NDArray[np.floating[Any]],
    eigenvalue: float,
) -> NDArray[np.floating[Any]]:
    """Unit eigenvector for eigenvalue by shifted inverse iteration."""
    n = A.shape[0]
    shift = eigenvalue + _RELATIVE_SHIFT * max(1.0, abs(eigenvalue))
    factors = lu_factor(A - shift * np.eye(n))

    v = np.arange(1.0, n + 1.0)
    v /= np.linalg.norm(v)
    for _ in range(_INVERSE_ITERATIONS):
        w = lu_solve(factors, v)
        v = w / np.linalg.norm(w)

    # Fix the sign: largest-magnitude component positive
    if v[np.argmax(np.abs(v))] < 0:
        v = -v
    return v


def eigenvectors(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> EigenResult:
    """
    Eigenvalues plus one unit eigenvector per eigenvalue.

    Eigenvalues come from eigenvalues(); each eigenvector is found by
    inverse iteration on A - (λ + δ)I with a tiny relative shift δ.
    Eigenvectors are the rows of the returned matrix, in eigenvalue
    order. Repeated eigenvalues may yield repeated vectors.

    Raises:
        NonSquareMatrixError: If A is not square

    Warns:
        ConvergenceWarning: If the eigenvalue iteration did not converge
    """
    A = as_matrix(a, 'a')
    check_square(A.shape, 'Eigenvector computation', 'a')
    n = A.rows

    timer = Timer()
    timer.start()
    steps = [f"Computing eigenvectors for {n}×{n} matrix"]

    values, convergence = _qr_iteration(A, config, steps, timer)
    steps.append(f"Found {len(values)} eigenvalues")

    warning_messages: tuple[str, ...] = ()
    if not convergence.converged:
        warning_messages = (_convergence_warning(convergence),)

    vectors = np.zeros((n, n))
    with timer.section('inverse_iteration'):
        for i, value in enumerate(values):
            steps.append(f"Finding eigenvector for eigenvalue λ = {value:.6f}")
            vectors[i] = _inverse_iteration(A.data, float(value))
    steps.append(f"Computed {n} eigenvectors")

    timer.stop()
    return EigenResult(Result(
        params=EigenParams(
            eigenvalues=values,
            eigenvectors=Matrix._from_trusted(vectors),
            convergence=convergence,
        ),
        info={'operation': 'eigenvectors', 'method': 'qr_algorithm+inverse_iteration'},
        steps=tuple(steps),
        timing=timer.result(),
        backend_name='unshifted_qr',
        warnings=warning_messages,
    ))
