"""
Tests for linear system solving and method selection.

Method selection, in order:
    n <= 10                               -> gaussian
    symmetric with positive diagonal      -> cholesky (LU if not PD)
    condition estimate < 1e12             -> lu
    otherwise                             -> qr
"""

import numpy as np
import pytest

from pymatrix.core import (
    DEFAULT_CONFIG,
    Backend,
    DimensionError,
    EngineConfig,
    NonSquareMatrixError,
    SingularMatrixError,
)
from pymatrix.linsys import LinearSystemDesign, select_method, solve, solve_linear_system
from pymatrix.linsys.backends import CholeskyBackend, GaussianBackend, LUBackend, QRBackend


@pytest.fixture
def spd_12(rng):
    M = rng.standard_normal((12, 12))
    A = M @ M.T + 12 * np.eye(12)
    return (A + A.T) / 2


@pytest.fixture
def nonsymmetric_12(rng):
    return rng.standard_normal((12, 12)) + 12 * np.eye(12)


@pytest.fixture
def indefinite_12():
    """Symmetric, diagonal all ones, off-diagonal all twos: det = -23."""
    return 2.0 * np.ones((12, 12)) - np.eye(12)


# ═══════════════════════════════════════════════════════════════════════
# Basic solving
# ═══════════════════════════════════════════════════════════════════════


class TestSolveLinearSystem:

    def test_identity(self):
        result = solve_linear_system([[1, 0], [0, 1]], [3, 4])
        assert result.solution.to_list() == [3.0, 4.0]
        assert result.method == 'gaussian_elimination'
        assert result.residual == pytest.approx(0.0, abs=1e-12)
        assert result.condition == pytest.approx(np.sqrt(2.0))

    def test_steps(self):
        result = solve_linear_system([[2, 1], [1, 3]], [3, 5])
        assert result.steps[0] == "Solving linear system Ax = b"
        assert result.steps[1] == "Matrix size: 2×2, Vector size: 2"
        assert result.steps[2] == "Selected method: gaussian"
        assert result.steps[-1] == "Back substitution phase"
        assert result.metadata['selected_method'] == 'gaussian'

    def test_residual_bound(self, well_conditioned, rng):
        b = rng.standard_normal(5)
        result = solve_linear_system(well_conditioned, b)
        assert result.residual <= 100 * DEFAULT_CONFIG.tolerance * np.linalg.norm(b)
        np.testing.assert_allclose(
            result.solution.data, np.linalg.solve(well_conditioned, b), atol=1e-10
        )

    def test_column_vector_b(self):
        result = solve_linear_system([[2, 0], [0, 4]], [[2], [8]])
        assert result.solution.to_list() == [1.0, 2.0]

    def test_inputs_not_modified(self):
        A = np.array([[0.0, 2.0], [3.0, 1.0]])
        b = np.array([4.0, 5.0])
        solve_linear_system(A, b)
        np.testing.assert_array_equal(A, [[0.0, 2.0], [3.0, 1.0]])
        np.testing.assert_array_equal(b, [4.0, 5.0])


class TestErrors:

    def test_length_mismatch(self):
        with pytest.raises(DimensionError) as exc_info:
            solve_linear_system([[1, 0], [0, 1]], [1, 2, 3])
        assert not isinstance(exc_info.value, NonSquareMatrixError)
        assert exc_info.value.operation == 'linear_system'

    def test_non_square(self):
        with pytest.raises(NonSquareMatrixError):
            solve_linear_system([[1, 2, 3], [4, 5, 6]], [1, 2])

    def test_singular(self):
        with pytest.raises(SingularMatrixError):
            solve_linear_system([[1, 1], [1, 1]], [1, 2])

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown method"):
            solve_linear_system([[1, 0], [0, 1]], [1, 2], method='svd')


# ═══════════════════════════════════════════════════════════════════════
# Method selection
# ═══════════════════════════════════════════════════════════════════════


class TestMethodSelection:

    def test_small_goes_to_gaussian(self, spd_matrix):
        design = LinearSystemDesign.build(spd_matrix, np.ones(4), 1e-10)
        assert select_method(design, DEFAULT_CONFIG) == 'gaussian'

    def test_spd_goes_to_cholesky(self, spd_12):
        x_true = np.arange(1.0, 13.0)
        result = solve_linear_system(spd_12, spd_12 @ x_true)
        assert result.method == 'cholesky'
        assert result.warnings == ()
        np.testing.assert_allclose(result.solution.data, x_true, atol=1e-8)

    def test_nonsymmetric_goes_to_lu(self, nonsymmetric_12):
        x_true = np.linspace(-1.0, 1.0, 12)
        result = solve_linear_system(nonsymmetric_12, nonsymmetric_12 @ x_true)
        assert result.method == 'lu_decomposition'
        assert result.metadata['selected_method'] == 'lu'
        np.testing.assert_allclose(result.solution.data, x_true, atol=1e-8)

    def test_ill_conditioned_goes_to_qr(self):
        A = np.triu(np.ones((12, 12)), k=1) + 0.1 * np.eye(12)
        design = LinearSystemDesign.build(A, np.ones(12), 1e-10)
        assert design.condition == float('inf')
        assert select_method(design, DEFAULT_CONFIG) == 'qr'

    def test_qr_via_config_threshold(self, rng):
        A = rng.standard_normal((4, 4)) + 4 * np.eye(4)
        x_true = np.array([1.0, 2.0, 3.0, 4.0])
        config = EngineConfig(gaussian_max_size=2, ill_conditioned_threshold=1e-6)
        result = solve_linear_system(A, A @ x_true, config=config)
        assert result.method == 'qr_decomposition'
        np.testing.assert_allclose(result.solution.data, x_true, atol=1e-9)

    def test_cholesky_falls_back_to_lu(self, indefinite_12):
        x_true = np.ones(12)
        with pytest.warns(RuntimeWarning, match="falling back to LU"):
            result = solve_linear_system(indefinite_12, indefinite_12 @ x_true)
        assert result.method == 'lu_decomposition'
        assert result.metadata['selected_method'] == 'cholesky'
        assert any("not positive" in w for w in result.warnings)
        np.testing.assert_allclose(result.solution.data, x_true, atol=1e-9)

    def test_fallback_warning_points_at_caller(self, indefinite_12):
        with pytest.warns(RuntimeWarning, match="falling back to LU") as record:
            solve_linear_system(indefinite_12, np.ones(12))
        assert record[0].filename == __file__


class TestForcedMethods:

    A = np.array([[4.0, 1.0, 0.0], [1.0, 3.0, 1.0], [0.0, 1.0, 2.0]])
    b = np.array([1.0, 2.0, 3.0])

    @pytest.mark.parametrize("method,name", [
        ('gaussian', 'gaussian_elimination'),
        ('cholesky', 'cholesky'),
        ('lu', 'lu_decomposition'),
        ('qr', 'qr_decomposition'),
    ])
    def test_forced(self, method, name):
        result = solve_linear_system(self.A, self.b, method=method)
        assert result.method == name
        assert result.backend_name == name
        np.testing.assert_allclose(result.solution.data, np.linalg.solve(self.A, self.b), atol=1e-10)
        assert result.residual < 1e-10

    def test_forced_lu_fails_on_zero_pivot(self):
        with pytest.raises(SingularMatrixError):
            solve_linear_system([[0, 1], [1, 0]], [1, 2], method='lu')

    def test_forced_gaussian_pivots_past_zero(self):
        result = solve_linear_system([[0, 1], [1, 0]], [1, 2], method='gaussian')
        assert result.solution.to_list() == [2.0, 1.0]
        assert "Swapped rows 0 and 1 (partial pivoting)" in result.steps


# ═══════════════════════════════════════════════════════════════════════
# Design and backends
# ═══════════════════════════════════════════════════════════════════════


class TestDesign:

    def test_properties(self):
        design = LinearSystemDesign.build([[2, 1], [1, 2]], [1, 1], 1e-10)
        assert design.n == 2
        assert design.is_symmetric
        assert design.has_positive_diagonal
        assert design.condition == pytest.approx(np.sqrt(10.0) / 3.0)
        assert design.residual(np.array([1 / 3, 1 / 3])) == pytest.approx(0.0, abs=1e-12)

    def test_arrays_read_only(self):
        design = LinearSystemDesign.build([[2, 1], [1, 2]], [1, 1], 1e-10)
        with pytest.raises(ValueError):
            design.A[0, 0] = 0.0


class TestBackends:

    @pytest.mark.parametrize("backend_cls", [GaussianBackend, LUBackend, QRBackend, CholeskyBackend])
    def test_protocol(self, backend_cls):
        assert isinstance(backend_cls(), Backend)

    def test_backend_result_has_timing(self):
        design = LinearSystemDesign.build([[4, 1], [1, 3]], [1, 2], 1e-10)
        result = CholeskyBackend().solve(design)
        assert result.info['method'] == 'cholesky'
        assert 'factorization' in result.timing
        assert 'total_seconds' in result.timing


# ═══════════════════════════════════════════════════════════════════════
# solve()
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    def test_values(self):
        result = solve([[2, 0], [0, 4]], [2, 8])
        assert result.values == [1.0, 2.0]

    def test_metadata(self):
        result = solve([[2, 0], [0, 4]], [2, 8])
        metadata = result.metadata
        assert metadata['operation'] == 'linear_system_solve'
        assert metadata['method'] == 'gaussian_elimination'
        assert metadata['complexity'] == 'O(n³)'
        assert metadata['residual'] == pytest.approx(0.0, abs=1e-12)
        assert result.steps[1] == "Matrix A: 2×2, vector b: 2 elements"
