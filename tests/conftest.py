"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Non-symmetric, diagonally dominant 5x5 matrix (LU succeeds without pivoting)."""
    n = 5
    return rng.standard_normal((n, n)) + n * np.eye(n)


@pytest.fixture
def spd_matrix(rng):
    """Symmetric positive definite 4x4 matrix with eigenvalues 1, 2, 4, 8."""
    Q, _ = np.linalg.qr(rng.standard_normal((4, 4)))
    A = Q @ np.diag([1.0, 2.0, 4.0, 8.0]) @ Q.T
    return (A + A.T) / 2
