"""
Dense matrix primitives.

Matrices are 2D float64 ndarrays. Inputs given as nested sequences are
checked for raggedness before conversion, so a non-rectangular matrix is
reported as such rather than as a numpy conversion failure.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymahalanobis.core.exceptions import DimensionMismatchError, ValidationError
from pymahalanobis.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_rectangular,
    check_square,
)
from pymahalanobis.core.compute.linalg.vector import as_vector


def as_matrix(rows: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validated float64 2D copy of ``rows``.

    Raises:
        InvalidDatasetSizeError: If rows are ragged or there are none
        ValidationError: If entries are non-numeric or non-finite
    """
    check_rectangular(rows, name)
    arr = check_array(rows, name)
    check_2d(arr, name)
    check_finite(arr, name)
    return arr


def _is_flat(values: ArrayLike) -> bool:
    """True if ``values`` is a 1D vector rather than a nested matrix."""
    if isinstance(values, np.ndarray):
        return values.ndim == 1
    return all(np.ndim(v) == 0 for v in values)


def identity(n: int) -> NDArray[np.floating[Any]]:
    """
    n x n identity matrix.

    Raises:
        ValidationError: If n is not a non-negative integer
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
        raise ValidationError(f"n: expected a non-negative integer, got {n!r}")

    result = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        result[i, i] = 1.0
    return result


def transpose(a: ArrayLike) -> NDArray[np.floating[Any]]:
    """Transpose of a matrix, as a new array."""
    return as_matrix(a, 'a').T.copy()


def multiply(a: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product ``a @ b``.

    Entry (i, j) of the result is the dot product of row i of ``a`` with
    column j of ``b``. A 1D ``b`` is treated as a column vector and the
    product is returned as a 1D vector.

    Raises:
        DimensionMismatchError: If columns(a) != rows(b)
    """
    a_arr = as_matrix(a, 'a')

    vector_rhs = _is_flat(b)
    if vector_rhs:
        b_arr = as_vector(b, 'b').reshape(-1, 1)
    else:
        b_arr = as_matrix(b, 'b')

    if a_arr.shape[1] != b_arr.shape[0]:
        raise DimensionMismatchError(
            f"Cannot multiply {a_arr.shape[0]}x{a_arr.shape[1]} by "
            f"{b_arr.shape[0]}x{b_arr.shape[1]}: inner dimensions differ",
            expected=a_arr.shape[1],
            actual=b_arr.shape[0],
        )

    n_rows, n_cols = a_arr.shape[0], b_arr.shape[1]
    result = np.zeros((n_rows, n_cols), dtype=np.float64)
    for i in range(n_rows):
        for j in range(n_cols):
            result[i, j] = np.sum(a_arr[i, :] * b_arr[:, j])

    if vector_rhs:
        return result[:, 0]
    return result


def assert_square(a: ArrayLike, name: str = 'matrix') -> None:
    """
    Raises:
        NonSquareMatrixError: If row count differs from any row's length
    """
    check_rectangular(a, name)
    check_square(check_array(a, name), name)


def assert_rectangular(rows: ArrayLike, name: str = 'dataset') -> None:
    """
    Raises:
        InvalidDatasetSizeError: If rows have unequal length
    """
    check_rectangular(rows, name)
