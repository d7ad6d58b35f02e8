"""
Gauss-Jordan backend for Mahalanobis distance.

Computes Sigma^-1 explicitly and evaluates the quadratic form
(x - mu)' Sigma^-1 (x - mu). Less stable than the Cholesky backend, but
it does not require Sigma to be positive definite to proceed, so it is
kept both for parity with older callers and as a cross-check.
"""

from typing import Any
import math

from pymahalanobis.core.exceptions import NotPositiveDefiniteError
from pymahalanobis.core.result import Result
from pymahalanobis.core.compute.timing import Timer
from pymahalanobis.core.compute.tolerances import ILL_CONDITIONED_PIVOT_RATIO
from pymahalanobis.core.compute.linalg import (
    dot,
    gauss_jordan,
    multiply,
    subtract,
)
from pymahalanobis.descriptive import covariance_matrix, mean_vector
from pymahalanobis.distance.design import MahalanobisDesign
from pymahalanobis.distance.solution import DistanceParams


class InverseBackend:
    """
    CPU backend using Gauss-Jordan inversion with partial pivoting.

    Implements the Backend protocol for MahalanobisDesign -> DistanceParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: MahalanobisDesign) -> Result[DistanceParams]:
        """
        Algorithm:
            1. Sigma = covariance_matrix(dataset), mu = mean_vector(dataset)
            2. d = point - mu
            3. Sigma^-1 = gauss_jordan(Sigma)
            4. distance = sqrt((Sigma^-1 d) . d)

        Raises:
            SingularMatrixError: If Sigma is singular
            NotPositiveDefiniteError: If the quadratic form comes out negative
        """
        timer = Timer()
        timer.start()

        dataset = design.dataset
        warnings_list: list[str] = []

        with timer.section('statistics'):
            sigma = covariance_matrix(dataset)
            mu = mean_vector(dataset)
            diff = subtract(design.point, mu)

        with timer.section('inversion'):
            inversion = gauss_jordan(sigma, matrix_name='covariance matrix')

        with timer.section('quadratic_form'):
            squared = dot(multiply(inversion.inverse, diff), diff)

        timer.stop()

        if squared < 0.0:
            raise NotPositiveDefiniteError(
                f"covariance matrix is not positive definite: "
                f"quadratic form evaluated to {squared:.6g}",
                matrix_name='covariance matrix',
                pivot_value=squared,
            )

        if inversion.pivot_ratio < ILL_CONDITIONED_PIVOT_RATIO:
            warnings_list.append(
                f"covariance matrix is ill-conditioned "
                f"(pivot ratio {inversion.pivot_ratio:.3g}); "
                f"prefer method='cholesky'"
            )

        params = DistanceParams(
            distance=math.sqrt(squared),
            squared_distance=squared,
            mean_vector=mu,
            covariance_matrix=sigma,
            difference=diff,
            inverse_covariance=inversion.inverse,
        )

        info: dict[str, Any] = {
            'method': 'inverse',
            'p': design.p,
            'n': design.n,
            'pivot_ratio': inversion.pivot_ratio,
            'row_swaps': inversion.row_swaps,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
