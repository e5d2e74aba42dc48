"""
Matrix products.

standard_product is the ordinary O(n³) product. strassen_product applies
Strassen's seven-multiplication recursion, zero-padding each odd
dimension at each level and switching to the standard product once any
block dimension is no larger than leaf_size. Both return the same
product up to rounding.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def standard_product(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]]
) -> NDArray[np.floating[Any]]:
    """C[i, j] = Σ_k A[i, k] B[k, j]."""
    return A @ B


def strassen_product(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
    leaf_size: int
) -> NDArray[np.floating[Any]]:
    """
    Strassen multiplication for arbitrary (m x k) @ (k x n).

    Args:
        A: Left operand (m x k)
        B: Right operand (k x n)
        leaf_size: Blocks with any dimension at or below this are multiplied directly

    Returns:
        Product (m x n)
    """
    m, k = A.shape
    n = B.shape[1]
    # A thin operand gains nothing from splitting
    if min(m, k, n) <= leaf_size:
        return standard_product(A, B)

    # Pad each dimension to even on its own so the blocks stay rectangular
    m2, k2, n2 = m + m % 2, k + k % 2, n + n % 2
    A_pad = np.zeros((m2, k2))
    B_pad = np.zeros((k2, n2))
    A_pad[:m, :k] = A
    B_pad[:k, :n] = B

    hm, hk, hn = m2 // 2, k2 // 2, n2 // 2
    A11, A12, A21, A22 = A_pad[:hm, :hk], A_pad[:hm, hk:], A_pad[hm:, :hk], A_pad[hm:, hk:]
    B11, B12, B21, B22 = B_pad[:hk, :hn], B_pad[:hk, hn:], B_pad[hk:, :hn], B_pad[hk:, hn:]

    M1 = strassen_product(A11 + A22, B11 + B22, leaf_size)
    M2 = strassen_product(A21 + A22, B11, leaf_size)
    M3 = strassen_product(A11, B12 - B22, leaf_size)
    M4 = strassen_product(A22, B21 - B11, leaf_size)
    M5 = strassen_product(A11 + A12, B22, leaf_size)
    M6 = strassen_product(A21 - A11, B11 + B12, leaf_size)
    M7 = strassen_product(A12 - A22, B21 + B22, leaf_size)

    C = np.empty((m2, n2))
    C[:hm, :hn] = M1 + M4 - M5 + M7
    C[:hm, hn:] = M3 + M5
    C[hm:, :hn] = M2 + M4
    C[hm:, hn:] = M1 - M2 + M3 + M6

    return C[:m, :n]


def uses_strassen(rows: int, cols: int, threshold: int) -> bool:
    """The product of an (rows x ·) by a (· x cols) matrix takes the Strassen path."""
    return rows > threshold or cols > threshold


def matmul(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
    threshold: int,
    leaf_size: int
) -> NDArray[np.floating[Any]]:
    """Product using Strassen above threshold, standard product otherwise."""
    if uses_strassen(A.shape[0], B.shape[1], threshold):
        return strassen_product(A, B, leaf_size)
    return standard_product(A, B)
