"""
Solver dispatch for Mahalanobis distance.

This module provides mahalanobis() (full solution object), calculate()
(plain float), and backend selection.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal
import warnings

from numpy.typing import ArrayLike

from pymahalanobis.core.datasource import DataSource
from pymahalanobis.core.exceptions import ValidationError
from pymahalanobis.distance.design import MahalanobisDesign
from pymahalanobis.distance.solution import MahalanobisSolution
from pymahalanobis.distance.backends import CholeskyBackend, InverseBackend


MethodChoice = Literal['cholesky', 'inverse']
DatasetLike = ArrayLike | Mapping[str, ArrayLike] | DataSource | MahalanobisDesign


def mahalanobis(
    point: ArrayLike,
    dataset: DatasetLike,
    *,
    method: MethodChoice = 'cholesky',
    decimals: int | None = None,
) -> MahalanobisSolution:
    """
    Mahalanobis distance of a point from the distribution of a sample.

        D = sqrt((x - mu)' Sigma^-1 (x - mu))

    where mu and Sigma are the sample mean vector and the unbiased sample
    covariance matrix of ``dataset``.

    Args:
        point: Coordinates (p,), one per variable.
        dataset: Sample with ROWS AS VARIABLES, shape (p, n). Also accepts
            a mapping of variable name -> observations, a DataSource, or a
            MahalanobisDesign (whose dataset is reused). For data with one
            observation per row, build the design with
            MahalanobisDesign.from_observations().
        method: Solve strategy:
            - 'cholesky': factor Sigma = L L' and solve L z = x - mu
              (default, numerically preferred)
            - 'inverse': invert Sigma by Gauss-Jordan elimination
        decimals: Round the reported distance to this many decimals.
            Intermediate values are never rounded.

    Returns:
        MahalanobisSolution with the distance and intermediate quantities

    Raises:
        InvalidDatasetSizeError: If dataset rows are ragged
        DegenerateInputError: If dataset has fewer than 2 observations
        UnequalLengthError: If len(point) != number of variables
        NotPositiveDefiniteError: If Sigma is singular or indefinite (Cholesky)
        SingularMatrixError: If Sigma is singular (inversion)
        ValidationError: If method or decimals is invalid

    Example:
        >>> from pymahalanobis import mahalanobis
        >>> sol = mahalanobis([4, 5], [[2, 3, 4, 5, 6], [3, 5, 4, 6, 8]])
        >>> round(sol.distance, 5)
        0.24343
    """
    if decimals is not None and (isinstance(decimals, bool) or not isinstance(decimals, int)):
        raise ValidationError(f"decimals: expected an int or None, got {decimals!r}")

    design = MahalanobisDesign.build(point, dataset)
    backend_impl = _get_backend(method)

    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return MahalanobisSolution(_result=result, _design=design, _decimals=decimals)


def calculate(
    point: ArrayLike,
    dataset: DatasetLike,
    *,
    method: MethodChoice = 'cholesky',
    decimals: int | None = None,
) -> float:
    """
    Mahalanobis distance as a plain float.

    Same arguments and errors as mahalanobis().

    Example:
        >>> round(calculate([4, 5], [[2, 3, 4, 5, 6], [3, 5, 4, 6, 8]]), 5)
        0.24343
    """
    return mahalanobis(point, dataset, method=method, decimals=decimals).distance


def _get_backend(method: MethodChoice):
    """
    Select and instantiate the backend for a solve strategy.

    Raises:
        ValidationError: If the method is unknown
    """
    if method == 'cholesky':
        return CholeskyBackend()
    elif method == 'inverse':
        return InverseBackend()
    else:
        raise ValidationError(
            f"Unknown method: {method!r}. Must be 'cholesky' or 'inverse'."
        )
