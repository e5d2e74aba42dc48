"""
Linear system backends.

Each backend implements the Backend protocol for
LinearSystemDesign -> SystemParams and reports its name as the method.
"""

from pymatrix.linsys.backends.gaussian import GaussianBackend
from pymatrix.linsys.backends.lu import LUBackend
from pymatrix.linsys.backends.qr import QRBackend
from pymatrix.linsys.backends.cholesky import CholeskyBackend

__all__ = [
    "GaussianBackend",
    "LUBackend",
    "QRBackend",
    "CholeskyBackend",
]
