"""
Vector primitives.

Every function copies its inputs to float64 before computing and returns
a freshly allocated result; caller buffers are never written to.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymahalanobis.core.validation import check_array, check_1d, check_equal_length


def as_vector(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validated float64 1D copy of ``values``."""
    arr = check_array(values, name)
    check_1d(arr, name)
    return arr


def dot(a: ArrayLike, b: ArrayLike) -> float:
    """
    Inner product of two vectors.

    Args:
        a: First vector (length n)
        b: Second vector (length n)

    Returns:
        sum(a[i] * b[i])

    Raises:
        UnequalLengthError: If the vectors differ in length
    """
    a_arr = as_vector(a, 'a')
    b_arr = as_vector(b, 'b')
    check_equal_length(a_arr, b_arr, ('a', 'b'))
    return float(np.sum(a_arr * b_arr))


def subtract(a: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Element-wise difference ``a - b``.

    Raises:
        UnequalLengthError: If the vectors differ in length
    """
    a_arr = as_vector(a, 'a')
    b_arr = as_vector(b, 'b')
    check_equal_length(a_arr, b_arr, ('a', 'b'))
    return a_arr - b_arr


def transpose_to_column(v: ArrayLike) -> NDArray[np.floating[Any]]:
    """Reinterpret a row vector as an (n, 1) column matrix."""
    return as_vector(v, 'v').reshape(-1, 1)
