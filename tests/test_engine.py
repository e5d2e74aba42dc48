"""
Tests for the MatrixEngine facade.

The engine owns one EngineConfig and threads it into every operation;
these tests cover the six reference scenarios end to end and check that
a non-default configuration actually reaches the algorithms.
"""

import numpy as np
import pytest

import pymatrix
from pymatrix import (
    ConvergenceWarning,
    DimensionError,
    EngineConfig,
    MatrixEngine,
    NonSquareMatrixError,
    SingularMatrixError,
)


@pytest.fixture
def engine():
    return MatrixEngine()


class TestScenarios:

    def test_add(self, engine):
        result = engine.add([[1, 2], [3, 4]], [[5, 6], [7, 8]])
        assert result.result.to_list() == [[6.0, 8.0], [10.0, 12.0]]

    def test_multiply(self, engine):
        result = engine.multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])
        assert result.result.to_list() == [[19.0, 22.0], [43.0, 50.0]]

    def test_determinant(self, engine):
        assert engine.determinant([[1, 2], [3, 4]]) == -2.0

    def test_inverse(self, engine):
        result = engine.inverse([[2, 0], [0, 2]])
        assert result.result.to_list() == [[0.5, 0.0], [0.0, 0.5]]

    def test_solve_linear_system(self, engine):
        result = engine.solve_linear_system([[1, 0], [0, 1]], [3, 4])
        assert result.solution.to_list() == [3.0, 4.0]
        assert result.residual == pytest.approx(0.0, abs=1e-12)

    def test_eigenvalues(self, engine):
        result = engine.eigenvalues([[2, 0], [0, 5]])
        assert sorted(result.eigenvalues.tolist()) == [2.0, 5.0]
        assert result.converged


class TestDelegation:

    def test_remaining_operations(self, engine):
        A = [[4, 1], [1, 3]]
        assert engine.subtract(A, A).result.to_list() == [[0.0, 0.0], [0.0, 0.0]]
        assert engine.scalar_multiply(A, 2).result.to_list() == [[8.0, 2.0], [2.0, 6.0]]
        assert engine.transpose([[1, 2]]).result.shape == (2, 1)
        assert engine.power(A, 2).result.to_list() == [[17.0, 7.0], [7.0, 10.0]]
        assert engine.trace(A).value == 7.0
        assert engine.rank(A).value == 2
        assert engine.determinant_result(A).value == 11.0
        assert engine.condition_number(A) == pytest.approx(np.sqrt(27.0) / 11.0)

    def test_decompositions(self, engine):
        A = [[4, 1], [1, 3]]
        assert engine.lu_decomposition(A).kind == 'LU'
        Q, R = engine.qr_decomposition(A)
        np.testing.assert_allclose(Q.data @ R.data, A, atol=1e-10)
        assert engine.qr_decomposition_result(A).metadata['rank'] == 2
        np.testing.assert_allclose(engine.cholesky_decomposition(A).reconstruct().data, A, atol=1e-12)

    def test_eigenvectors(self, engine):
        result = engine.eigenvectors([[2, 0], [0, 5]])
        assert result.eigenvectors.shape == (2, 2)

    def test_solve_with_method(self, engine):
        result = engine.solve_linear_system([[4, 1], [1, 3]], [1, 2], method='qr')
        assert result.method == 'qr_decomposition'
        assert engine.solve([[4, 1], [1, 3]], [5, 4]).values == pytest.approx([1.0, 1.0])

    def test_errors_propagate(self, engine):
        with pytest.raises(DimensionError):
            engine.add([[1, 2]], [[1], [2]])
        with pytest.raises(NonSquareMatrixError):
            engine.determinant([[1, 2, 3]])
        with pytest.raises(SingularMatrixError):
            engine.inverse([[1, 1], [1, 1]])


class TestConfiguration:

    def test_defaults(self, engine):
        assert engine.tolerance == 1e-10
        assert engine.max_iterations == 1000
        assert engine.config == EngineConfig()

    def test_max_iterations_reaches_eigen(self):
        engine = MatrixEngine(EngineConfig(max_iterations=5))
        with pytest.warns(ConvergenceWarning):
            result = engine.eigenvalues([[0, -1], [1, 0]])
        assert result.convergence.iterations == 5

    def test_tolerance_reaches_inverse(self):
        engine = MatrixEngine(EngineConfig(tolerance=1e-3))
        with pytest.raises(SingularMatrixError):
            engine.inverse([[1.0, 0.0], [0.0, 1e-4]])

    def test_config_is_read_only(self, engine):
        with pytest.raises(AttributeError):
            engine.config = EngineConfig(tolerance=1e-6)

    def test_repr(self, engine):
        assert repr(engine) == "MatrixEngine(tolerance=1e-10, max_iterations=1000)"


class TestPackage:

    def test_version(self):
        assert pymatrix.__version__ == "0.1.0"

    def test_subpackages_exported(self):
        assert callable(pymatrix.arithmetic.add)
        assert callable(pymatrix.linsys.solve_linear_system)
        assert callable(pymatrix.eigen.eigenvalues)
