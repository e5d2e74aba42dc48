"""
Tests for the Matrix and Vector value objects.

The important property is isolation: a caller's buffer is never aliased
into a Matrix, and a Matrix's storage can't be written through.
"""

import numpy as np
import pytest

from pymatrix.core.design import Matrix, Vector, as_matrix, as_vector
from pymatrix.core.exceptions import DimensionError, ValidationError


class TestMatrixConstruction:

    def test_from_nested_list(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m.rows == 2
        assert m.cols == 3
        assert m.shape == (2, 3)
        assert not m.is_square
        assert m.to_list() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    def test_identity_and_zeros(self):
        np.testing.assert_array_equal(Matrix.identity(3).data, np.eye(3))
        assert Matrix.zeros(2, 4).shape == (2, 4)
        assert Matrix.identity(3).is_square

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_array([1, 2, 3])

    def test_rejects_empty(self):
        with pytest.raises(ValidationError, match="empty"):
            Matrix.from_array([[]])

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Matrix.from_array([[1.0, np.nan]])

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            Matrix.from_array([[1, 2], [3]])


class TestMatrixIsolation:

    def test_caller_buffer_not_aliased(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_array(source)
        source[0, 0] = 100.0
        assert m.data[0, 0] == 1.0

    def test_data_is_read_only(self):
        m = Matrix.from_array([[1.0, 2.0]])
        with pytest.raises(ValueError):
            m.data[0, 0] = 5.0

    def test_copy_is_writable_and_independent(self):
        m = Matrix.from_array([[1.0, 2.0]])
        work = m.copy()
        work[0, 0] = 5.0
        assert m.data[0, 0] == 1.0

    def test_numpy_interop(self):
        m = Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_array_equal(np.asarray(m), [[1.0, 2.0], [3.0, 4.0]])


class TestMatrixComparison:

    def test_allclose(self):
        m = Matrix.from_array([[1.0, 2.0]])
        assert m.allclose([[1.0, 2.0 + 1e-12]])
        assert not m.allclose([[1.0, 2.1]])
        assert not m.allclose([[1.0], [2.0]])
        assert m.allclose(Matrix.from_array([[1.0, 2.0]]))

    def test_repr(self):
        assert repr(Matrix.from_array([[1, 2]])) == "Matrix(1×2, [[1.0, 2.0]])"


class TestVector:

    def test_from_list(self):
        v = Vector.from_array([3, 4])
        assert v.size == 2
        assert v.to_list() == [3.0, 4.0]

    def test_column_is_flattened(self):
        v = Vector.from_array([[1.0], [2.0], [3.0]])
        assert v.size == 3

    def test_rejects_matrix(self):
        with pytest.raises(DimensionError):
            Vector.from_array([[1.0, 2.0], [3.0, 4.0]])

    def test_read_only(self):
        v = Vector.from_array([1.0, 2.0])
        with pytest.raises(ValueError):
            v.data[0] = 3.0

    def test_allclose(self):
        assert Vector.from_array([1.0, 2.0]).allclose([1.0, 2.0])
        assert not Vector.from_array([1.0, 2.0]).allclose([1.0, 2.0, 3.0])


class TestCoercion:

    def test_as_matrix_passes_through(self):
        m = Matrix.identity(2)
        assert as_matrix(m) is m

    def test_as_matrix_uses_parameter_name(self):
        with pytest.raises(ValidationError, match="lhs"):
            as_matrix([[np.inf]], 'lhs')

    def test_as_vector(self):
        v = Vector.from_array([1.0])
        assert as_vector(v) is v
        assert as_vector([1, 2]).size == 2
