"""
Input validation utilities for pymahalanobis.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymahalanobis.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidDatasetSizeError,
    NonSquareMatrixError,
    UnequalLengthError,
    DegenerateInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to a freshly allocated numpy
    array. Rejects inputs that result in object dtype (indicating mixed
    types, ragged rows, or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64, never sharing memory with the input

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a sequence of rows is non-empty and every row has equal length.

    Runs before numpy conversion so that ragged nested lists are reported
    as a dataset-size problem instead of an object-dtype conversion error.
    Arrays that are already 2D pass trivially.

    Args:
        rows: Nested sequence or 2D array
        name: Parameter name for error messages

    Raises:
        InvalidDatasetSizeError: If there are no rows, or rows differ in length
    """
    if isinstance(rows, np.ndarray):
        if rows.ndim == 2 and rows.shape[0] > 0:
            return
        if rows.ndim != 2 and rows.dtype != object:
            raise InvalidDatasetSizeError(
                f"{name}: expected a 2D collection of rows, got shape {rows.shape}",
                actual=rows.shape,
            )

    if len(rows) == 0:
        raise InvalidDatasetSizeError(f"{name}: has no rows", actual=0)

    lengths = []
    for i, row in enumerate(rows):
        if not isinstance(row, (Sequence, np.ndarray)) or isinstance(row, (str, bytes)):
            raise InvalidDatasetSizeError(
                f"{name}: row {i} is not a sequence of numbers"
            )
        lengths.append(len(row))

    if len(set(lengths)) > 1:
        raise InvalidDatasetSizeError(
            f"{name}: all rows must have the same number of columns, "
            f"got row lengths {lengths}",
            expected=lengths[0],
            actual=tuple(lengths),
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is a 2D matrix with as many rows as columns.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        NonSquareMatrixError: If array is not 2D or not square
    """
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise NonSquareMatrixError(
            f"{name}: matrix is not square, got shape {array.shape}",
            shape=tuple(array.shape),
        )


def check_equal_length(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    names: tuple[str, str],
) -> None:
    """
    Verify two vectors have the same number of elements.

    Args:
        a: First vector
        b: Second vector
        names: Parameter names for error messages

    Raises:
        UnequalLengthError: If lengths differ
    """
    if len(a) != len(b):
        raise UnequalLengthError(
            f"Vectors must have equal length: {names[0]}={len(a)}, {names[1]}={len(b)}",
            expected=len(a),
            actual=len(b),
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Samples are counted along the last axis: elements of a vector, or
    columns (observations) of a row-is-variable dataset.

    Args:
        array: Array to check
        min_samples: Minimum required samples
        name: Parameter name for error messages

    Raises:
        DegenerateInputError: If array has fewer than min_samples
    """
    n = array.shape[-1] if array.ndim > 0 else 0
    if n < min_samples:
        raise DegenerateInputError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            n=n,
            minimum=min_samples,
        )
