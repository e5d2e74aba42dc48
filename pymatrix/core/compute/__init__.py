"""
Shared compute infrastructure for pymatrix.

IMPORTANT: This is NOT where the public operations live. Those go in
their own subpackages (arithmetic, decomposition, ...). This module
contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    linalg: Linear algebra kernels (LU, QR, Cholesky, elimination, products)
"""

from pymatrix.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
