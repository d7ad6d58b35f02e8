"""
Mahalanobis distance solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pymahalanobis.core.exceptions import ValidationError
from pymahalanobis.core.result import Result

if TYPE_CHECKING:
    from pymahalanobis.distance.design import MahalanobisDesign


@dataclass(frozen=True)
class DistanceParams:
    """
    Parameter payload for a Mahalanobis distance.

    Fields that only one solve strategy produces are None for the other:
    the Cholesky path fills factor and whitened, the inversion path fills
    inverse_covariance.
    """
    distance: float
    squared_distance: float
    mean_vector: NDArray[np.floating[Any]]
    covariance_matrix: NDArray[np.floating[Any]]
    difference: NDArray[np.floating[Any]]
    factor: NDArray[np.floating[Any]] | None = None
    whitened: NDArray[np.floating[Any]] | None = None
    inverse_covariance: NDArray[np.floating[Any]] | None = None


@dataclass
class MahalanobisSolution:
    """
    User-facing Mahalanobis distance result.

    Wraps Result[DistanceParams] and provides convenient accessors.
    ``float(solution)`` is the distance.
    """
    _result: Result[DistanceParams]
    _design: 'MahalanobisDesign'
    _decimals: int | None = None

    def __float__(self) -> float:
        return self.distance

    @property
    def distance(self) -> float:
        """Mahalanobis distance, rounded if ``decimals`` was requested."""
        d = self._result.params.distance
        if self._decimals is not None:
            return round(d, self._decimals)
        return d

    @property
    def squared_distance(self) -> float:
        """Unrounded squared distance (d' Sigma^-1 d)."""
        return self._result.params.squared_distance

    @property
    def mean_vector(self) -> NDArray[np.floating[Any]]:
        return self._result.params.mean_vector

    @property
    def covariance_matrix(self) -> NDArray[np.floating[Any]]:
        return self._result.params.covariance_matrix

    @property
    def difference(self) -> NDArray[np.floating[Any]]:
        """point - mean_vector."""
        return self._result.params.difference

    @property
    def factor(self) -> NDArray[np.floating[Any]] | None:
        """Lower Cholesky factor of the covariance matrix (Cholesky path)."""
        return self._result.params.factor

    @property
    def whitened(self) -> NDArray[np.floating[Any]] | None:
        """z solving L z = point - mean (Cholesky path); distance = ||z||."""
        return self._result.params.whitened

    @property
    def inverse_covariance(self) -> NDArray[np.floating[Any]] | None:
        """Inverse covariance matrix (inversion path)."""
        return self._result.params.inverse_covariance

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def p(self) -> int:
        return self._design.p

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def variables(self) -> tuple[str, ...] | None:
        return self._design.variables

    # --- Outlier diagnostics ---

    @property
    def p_value(self) -> float:
        """
        Upper-tail probability of the squared distance under chi-square(p).

        Valid as an outlier score when the sample is roughly multivariate
        normal and large enough that estimation error in the mean and
        covariance is negligible.
        """
        return float(stats.chi2.sf(self.squared_distance, df=self.p))

    def is_outlier(self, alpha: float = 0.05) -> bool:
        """
        True if the point lies outside the (1 - alpha) chi-square ellipsoid.

        Raises:
            ValidationError: If alpha is not in (0, 1)
        """
        if not 0.0 < alpha < 1.0:
            raise ValidationError(f"alpha: must be in (0, 1), got {alpha}")
        return self.p_value < alpha

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text summary."""
        names = self.variables or tuple(f"V{i + 1}" for i in range(self.p))
        width = max(max(len(name) for name in names), 8)

        lines = [
            "Mahalanobis distance",
            "=" * 40,
            f"Method:        {self.method} ({self.backend_name})",
            f"Variables:     {self.p}",
            f"Observations:  {self.n}",
            "",
            f"{'':<{width}}  {'point':>12}  {'mean':>12}  {'diff':>12}",
        ]
        point = self._design.point
        for name, x, mu, d in zip(names, point, self.mean_vector, self.difference):
            lines.append(f"{name:<{width}}  {x:>12.6g}  {mu:>12.6g}  {d:>12.6g}")

        lines.extend([
            "",
            f"Distance:          {self.distance:.6g}",
            f"Squared distance:  {self.squared_distance:.6g}",
            f"Chi-square p-value ({self.p} df): {self.p_value:.4g}",
        ])

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MahalanobisSolution(distance={self.distance:.6g}, "
            f"method={self.method!r}, p={self.p}, n={self.n})"
        )
