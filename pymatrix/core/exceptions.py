"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Structural errors (shapes) derive from ValidationError,
      numerical errors (pivots) derive from NumericalError
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (arrays, exponents, configuration
    values) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: Shape of the first operand, if relevant
        right_shape: Shape of the second operand, if relevant
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NonSquareMatrixError(DimensionError):
    """
    A square-only operation received a non-square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, ...] | None = None
    ):
        super().__init__(message, operation=operation, left_shape=shape)
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination meets a pivot whose magnitude is below the
    engine tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row/column index of the failing pivot, if known
        pivot_value: Value of the failing pivot, if known
        tolerance: Threshold the pivot was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.tolerance = tolerance


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not symmetric positive definite.

    Raised by the Cholesky factorization when the input is not symmetric
    or a diagonal pivot is not strictly positive.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Index of the failing diagonal pivot, if any
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index


class ConvergenceWarning(RuntimeWarning):
    """
    Iterative algorithm stopped at its iteration cap without converging.

    Issued (never raised) by the eigenvalue solver; the partial result is
    still returned and flagged as unconverged.
    """
    pass
