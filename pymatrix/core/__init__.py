"""
Core infrastructure for pymatrix.

This module provides shared abstractions, utilities, and numeric kernels
used by all operation subpackages (arithmetic, decomposition, eigen, ...).

Key components:
    design: Matrix and Vector value objects
    config: EngineConfig (tolerance, iteration cap, thresholds)
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and linear algebra kernels
"""

from pymatrix.core.design import Matrix, Vector, as_matrix, as_vector
from pymatrix.core.config import EngineConfig, DEFAULT_CONFIG
from pymatrix.core.result import Result, StepRecord
from pymatrix.core.protocols import Backend
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NonSquareMatrixError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceWarning,
)

__all__ = [
    # Values
    "Matrix",
    "Vector",
    "as_matrix",
    "as_vector",
    # Configuration
    "EngineConfig",
    "DEFAULT_CONFIG",
    # Result
    "Result",
    "StepRecord",
    "Backend",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NonSquareMatrixError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceWarning",
]
