"""
Cholesky backend for Mahalanobis distance.

The preferred solve strategy. Never forms Sigma^-1: it factors
Sigma = L L', solves L z = x - mu by forward substitution, and returns
||z||, since (x - mu)' Sigma^-1 (x - mu) = z'z.
"""

from typing import Any
import math

from pymahalanobis.core.result import Result
from pymahalanobis.core.compute.timing import Timer
from pymahalanobis.core.compute.linalg import (
    cholesky,
    dot,
    forward_substitution,
    subtract,
)
from pymahalanobis.descriptive import covariance_matrix, mean_vector
from pymahalanobis.distance.design import MahalanobisDesign
from pymahalanobis.distance.solution import DistanceParams


class CholeskyBackend:
    """
    CPU backend using Cholesky factorization and forward substitution.

    Implements the Backend protocol for MahalanobisDesign -> DistanceParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_cholesky'

    def solve(self, design: MahalanobisDesign) -> Result[DistanceParams]:
        """
        Algorithm:
            1. Sigma = covariance_matrix(dataset), mu = mean_vector(dataset)
            2. d = point - mu
            3. L = cholesky(Sigma)
            4. z = forward_substitution(L, d)
            5. distance = sqrt(z . z)

        Raises:
            NotPositiveDefiniteError: If Sigma is singular or indefinite
        """
        timer = Timer()
        timer.start()

        dataset = design.dataset

        with timer.section('statistics'):
            sigma = covariance_matrix(dataset)
            mu = mean_vector(dataset)
            diff = subtract(design.point, mu)

        with timer.section('cholesky'):
            L = cholesky(sigma, matrix_name='covariance matrix')

        with timer.section('forward_substitution'):
            z = forward_substitution(L, diff)

        squared = dot(z, z)
        timer.stop()

        params = DistanceParams(
            distance=math.sqrt(squared),
            squared_distance=squared,
            mean_vector=mu,
            covariance_matrix=sigma,
            difference=diff,
            factor=L,
            whitened=z,
        )

        info: dict[str, Any] = {
            'method': 'cholesky',
            'p': design.p,
            'n': design.n,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
