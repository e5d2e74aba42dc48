"""
Tests for the pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Diagnostic attributes on DimensionError, NonSquareMatrixError,
      SingularMatrixError, NotPositiveDefiniteError
    - Default attribute values (None for optional attributes)
    - ConvergenceWarning is a warning, not an error
"""

import warnings

import pytest

from pymatrix.core.exceptions import (
    ConvergenceWarning,
    DimensionError,
    NonSquareMatrixError,
    NotPositiveDefiniteError,
    NumericalError,
    PyMatrixError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_non_square_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise NonSquareMatrixError("not square", shape=(2, 3))

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_not_positive_definite_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NotPositiveDefiniteError("not PD")

    def test_numerical_error_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_convergence_warning_is_runtime_warning(self):
        assert issubclass(ConvergenceWarning, RuntimeWarning)
        assert not issubclass(ConvergenceWarning, PyMatrixError)

    def test_convergence_warning_can_be_issued(self):
        with pytest.warns(ConvergenceWarning, match="did not converge"):
            warnings.warn("did not converge", ConvergenceWarning)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:

    def test_attributes(self):
        err = DimensionError(
            "Cannot multiply matrices: 2×3 and 2×2",
            operation='multiplication',
            left_shape=(2, 3),
            right_shape=(2, 2),
        )
        assert err.operation == 'multiplication'
        assert err.left_shape == (2, 3)
        assert err.right_shape == (2, 2)
        assert "2×3" in str(err)

    def test_defaults_none(self):
        err = DimensionError("wrong shape")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestNonSquareMatrixError:

    def test_shape_is_recorded(self):
        err = NonSquareMatrixError("Inversion requires a square matrix", operation='Inversion', shape=(2, 3))
        assert err.shape == (2, 3)
        assert err.left_shape == (2, 3)
        assert err.right_shape is None
        assert err.operation == 'Inversion'


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "pivot too small",
            matrix_name='A',
            pivot_index=2,
            pivot_value=1e-14,
            tolerance=1e-10,
        )
        assert err.matrix_name == 'A'
        assert err.pivot_index == 2
        assert err.pivot_value == 1e-14
        assert err.tolerance == 1e-10
        assert str(err) == "pivot too small"

    def test_defaults_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_index is None
        assert err.pivot_value is None
        assert err.tolerance is None


class TestNotPositiveDefiniteError:

    def test_attributes(self):
        err = NotPositiveDefiniteError("not PD", matrix_name='A', pivot_index=1)
        assert err.matrix_name == 'A'
        assert err.pivot_index == 1

    def test_defaults_none(self):
        err = NotPositiveDefiniteError("not PD")
        assert err.matrix_name is None
        assert err.pivot_index is None
