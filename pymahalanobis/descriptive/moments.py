"""
Sample moments: mean, variance, covariance, and their matrix forms.

Variance and covariance use the unbiased (Bessel-corrected, n-1)
denominator. Everything is computed in full float64 precision; nothing
is rounded.

Datasets follow the row-is-variable convention: a dataset of shape
(p, n) holds p variables, each observed n times. Use
MahalanobisDesign.from_observations() for data laid out the other way.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymahalanobis.core.validation import check_equal_length, check_min_samples
from pymahalanobis.core.compute.linalg.vector import as_vector
from pymahalanobis.core.compute.linalg.matrix import as_matrix


def mean(v: ArrayLike) -> float:
    """
    Arithmetic mean.

    Raises:
        DegenerateInputError: If v is empty
    """
    arr = as_vector(v, 'v')
    check_min_samples(arr, 1, 'v')
    return float(np.sum(arr) / len(arr))


def variance(v: ArrayLike) -> float:
    """
    Unbiased sample variance, sum((v - mean)^2) / (n - 1).

    Raises:
        DegenerateInputError: If v has fewer than 2 elements

    Example:
        >>> variance([2, 4, 6, 8, 10])
        10.0
    """
    arr = as_vector(v, 'v')
    check_min_samples(arr, 2, 'v')
    centered = arr - mean(arr)
    return float(np.sum(centered * centered) / (len(arr) - 1))


def covariance(x: ArrayLike, y: ArrayLike) -> float:
    """
    Unbiased sample covariance, sum((x - mean_x)(y - mean_y)) / (n - 1).

    Raises:
        UnequalLengthError: If x and y differ in length
        DegenerateInputError: If fewer than 2 paired observations

    Example:
        >>> covariance([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
        5.0
    """
    x_arr = as_vector(x, 'x')
    y_arr = as_vector(y, 'y')
    check_equal_length(x_arr, y_arr, ('x', 'y'))
    check_min_samples(x_arr, 2, 'x')
    return float(
        np.sum((x_arr - mean(x_arr)) * (y_arr - mean(y_arr))) / (len(x_arr) - 1)
    )


def mean_vector(dataset: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Per-variable means of a row-is-variable dataset.

    Args:
        dataset: (p, n) array, one row per variable

    Returns:
        (p,) vector of row means

    Raises:
        InvalidDatasetSizeError: If rows have unequal length
        DegenerateInputError: If there are no observations
    """
    data = as_matrix(dataset, 'dataset')
    return np.array([mean(row) for row in data], dtype=np.float64)


def covariance_matrix(dataset: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Sample covariance matrix of a row-is-variable dataset.

    Entry (i, i) is variance(row i); entry (i, j) is covariance(row i,
    row j). Only the upper triangle is computed and then mirrored, so the
    result is exactly symmetric.

    Args:
        dataset: (p, n) array, one row per variable

    Returns:
        (p, p) symmetric matrix

    Raises:
        InvalidDatasetSizeError: If rows have unequal length
        DegenerateInputError: If there are fewer than 2 observations

    Example:
        >>> covariance_matrix([[0, 1, 2], [2, 1, 0]])
        array([[ 1., -1.],
               [-1.,  1.]])
    """
    data = as_matrix(dataset, 'dataset')
    p = data.shape[0]

    result = np.zeros((p, p), dtype=np.float64)
    for i in range(p):
        result[i, i] = variance(data[i])
        for j in range(i + 1, p):
            result[i, j] = covariance(data[i], data[j])
            result[j, i] = result[i, j]

    return result
