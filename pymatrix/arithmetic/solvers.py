"""
Elementwise and product operations.

Public API:
    add(a, b), subtract(a, b), scalar_multiply(a, s), transpose(a)
        -> MatrixResult, complexity O(mn)
    multiply(a, b) -> MatrixResult, standard O(n³) or Strassen O(n^2.807)
    power(a, n) -> MatrixResult by repeated multiplication
    trace(a) -> ScalarResult

Operands may be Matrix objects or any array-like; they are validated at
this boundary and never modified.
"""

import numbers
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.design import Matrix, as_matrix
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.linalg import (
    determinant_cpu,
    condition_estimate,
    standard_product,
    strassen_product,
    uses_strassen,
)
from pymatrix.core.validation import check_same_shape, check_multipliable, check_square
from pymatrix.arithmetic.solution import MatrixParams, MatrixResult, ScalarParams, ScalarResult


def _matrix_result(
    C: NDArray,
    info: dict[str, Any],
    steps: list[str],
    timer: Timer,
    backend_name: str,
) -> MatrixResult:
    timer.stop()
    return MatrixResult(Result(
        params=MatrixParams(result=Matrix._from_trusted(C)),
        info=info,
        steps=tuple(steps),
        timing=timer.result(),
        backend_name=backend_name,
    ))


def _elementwise(
    C: NDArray,
    operation: str,
    steps: list[str],
    timer: Timer,
    config: EngineConfig,
) -> MatrixResult:
    info: dict[str, Any] = {'operation': operation, 'complexity': 'O(mn)'}
    if C.shape[0] == C.shape[1]:
        with timer.section('determinant'):
            info['determinant'] = determinant_cpu(C, config.tolerance)
    return _matrix_result(C, info, steps, timer, 'elementwise')


def add(
    a: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MatrixResult:
    """
    Elementwise sum C = A + B.

    When the operands are square the metadata also carries det(C).

    Raises:
        DimensionError: If A and B differ in shape
    """
    A = as_matrix(a, 'a')
    B = as_matrix(b, 'b')
    check_same_shape(A.shape, B.shape, 'addition')

    timer = Timer()
    timer.start()
    steps = [f"Adding matrices of size {A.rows}×{A.cols}"]
    with timer.section('elementwise'):
        C = A.data + B.data
    steps.append("Result: Each element C[i,j] = A[i,j] + B[i,j]")
    return _elementwise(C, 'matrix_addition', steps, timer, config)


def subtract(
    a: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MatrixResult:
    """
    Elementwise difference C = A - B.

    Raises:
        DimensionError: If A and B differ in shape
    """
    A = as_matrix(a, 'a')
    B = as_matrix(b, 'b')
    check_same_shape(A.shape, B.shape, 'subtraction')

    timer = Timer()
    timer.start()
    steps = [f"Subtracting matrices of size {A.rows}×{A.cols}"]
    with timer.section('elementwise'):
        C = A.data - B.data
    steps.append("Result: Each element C[i,j] = A[i,j] - B[i,j]")
    return _elementwise(C, 'matrix_subtraction', steps, timer, config)


def scalar_multiply(
    a: Matrix | ArrayLike,
    scalar: float,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MatrixResult:
    """
    Scale every entry: C = s·A.

    Raises:
        ValidationError: If scalar is not a finite real number
    """
    A = as_matrix(a, 'a')
    if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real) or not np.isfinite(scalar):
        raise ValidationError(f"scalar: expected a finite real number, got {scalar!r}")

    timer = Timer()
    timer.start()
    steps = [f"Multiplying {A.rows}×{A.cols} matrix by scalar {scalar:g}"]
    with timer.section('elementwise'):
        C = A.data * float(scalar)
    steps.append(f"Result: Each element C[i,j] = {scalar:g} * A[i,j]")
    return _elementwise(C, 'scalar_multiplication', steps, timer, config)


def transpose(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MatrixResult:
    """Transpose: C[j, i] = A[i, j]."""
    A = as_matrix(a, 'a')

    timer = Timer()
    timer.start()
    steps = [f"Transposing {A.rows}×{A.cols} matrix to {A.cols}×{A.rows}"]
    with timer.section('elementwise'):
        C = A.data.T.copy()
    steps.append("Result: Each element C[j,i] = A[i,j]")
    return _elementwise(C, 'matrix_transpose', steps, timer, config)


def multiply(
    a: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MatrixResult:
    """
    Matrix product C = A B.

    Products whose result has more than config.strassen_threshold rows
    or columns go through Strassen recursion; the numeric result is the
    same as the standard product up to rounding. The metadata names the
    algorithm used.

    Raises:
        DimensionError: If A.cols != B.rows
    """
    A = as_matrix(a, 'a')
    B = as_matrix(b, 'b')
    check_multipliable(A.shape, B.shape)

    timer = Timer()
    timer.start()
    steps = [
        f"Multiplying {A.rows}×{A.cols} matrix with {B.rows}×{B.cols} matrix",
        f"Result will be {A.rows}×{B.cols} matrix",
    ]

    if uses_strassen(A.rows, B.cols, config.strassen_threshold):
        steps.append("Using Strassen's algorithm for large matrix multiplication")
        with timer.section('product'):
            C = strassen_product(A.data, B.data, config.strassen_leaf_size)
        steps.append(
            f"Split into 2×2 blocks recursively, 7 block products per level, "
            f"direct products below {config.strassen_leaf_size}×{config.strassen_leaf_size}"
        )
        info: dict[str, Any] = {
            'operation': 'matrix_multiplication_strassen',
            'complexity': 'O(n^2.807)',
        }
        return _matrix_result(C, info, steps, timer, 'strassen')

    with timer.section('product'):
        C = standard_product(A.data, B.data)
    steps.append(f"Each element C[i,j] = Σ(A[i,k] * B[k,j]) for k=0 to {A.cols - 1}")

    info = {'operation': 'matrix_multiplication', 'complexity': 'O(n³)'}
    if C.shape[0] == C.shape[1]:
        with timer.section('condition'):
            info['condition'] = condition_estimate(C, config.tolerance)
    return _matrix_result(C, info, steps, timer, 'standard')


def power(
    a: Matrix | ArrayLike,
    n: int,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MatrixResult:
    """
    Non-negative integer matrix power Aⁿ by repeated multiplication.

    Raises:
        NonSquareMatrixError: If A is not square
        ValidationError: If n is not a non-negative integer
    """
    A = as_matrix(a, 'a')
    check_square(A.shape, 'Matrix power', 'a')
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValidationError(f"n: expected an integer exponent, got {n!r}")
    if n < 0:
        raise ValidationError(f"n: negative powers not supported, got {n}")

    timer = Timer()
    timer.start()
    steps = [f"Computing matrix power A^{n}"]

    if n == 0:
        steps.append("A^0 = Identity matrix")
        info: dict[str, Any] = {'operation': 'matrix_power', 'complexity': 'O(1)', 'determinant': 1.0}
        return _matrix_result(np.eye(A.rows), info, steps, timer, 'repeated_multiplication')

    if n == 1:
        steps.append("A^1 = A")
        with timer.section('determinant'):
            det = determinant_cpu(A.data, config.tolerance)
        info = {'operation': 'matrix_power', 'complexity': 'O(1)', 'determinant': det}
        return _matrix_result(A.data, info, steps, timer, 'repeated_multiplication')

    current = A
    with timer.section('product'):
        for i in range(1, n):
            current = multiply(current, A, config=config).result
            steps.append(f"Step {i}: Computing A^{i + 1}")

    with timer.section('determinant'):
        det = determinant_cpu(current.data, config.tolerance)
    info = {'operation': 'matrix_power', 'complexity': f'O(n³ * {n})', 'determinant': det}
    return _matrix_result(current.data, info, steps, timer, 'repeated_multiplication')


def trace(
    a: Matrix | ArrayLike,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ScalarResult:
    """
    Sum of the diagonal entries.

    Raises:
        NonSquareMatrixError: If A is not square
    """
    A = as_matrix(a, 'a')
    check_square(A.shape, 'Trace', 'a')

    timer = Timer()
    timer.start()
    diagonal = [float(v) for v in np.diag(A.data)]
    value = float(sum(diagonal))
    terms = [f"{v:g}" for v in diagonal]
    steps = [
        f"Computing trace of {A.rows}×{A.cols} matrix",
        f"Diagonal elements: [{', '.join(terms)}]",
        f"Trace = {' + '.join(terms)} = {value:g}",
    ]
    timer.stop()
    return ScalarResult(Result(
        params=ScalarParams(value=value),
        info={
            'operation': 'matrix_trace',
            'complexity': 'O(n)',
            'diagonal_elements': diagonal,
        },
        steps=tuple(steps),
        timing=timer.result(),
        backend_name='diagonal_sum',
    ))
