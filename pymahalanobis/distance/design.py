"""
MahalanobisDesign: validated point + dataset pair.

The design is where the row-is-variable convention is enforced. A dataset
of shape (p, n) holds p variables observed n times each; the point must
have p coordinates. Data laid out one observation per row (the
numpy.cov(rowvar=False) / DataFrame layout) goes through
from_observations(), which transposes it.

Construction:
    MahalanobisDesign.from_arrays(point, dataset)          # rows are variables
    MahalanobisDesign.from_observations(point, data)       # rows are observations
    MahalanobisDesign.from_datasource(point, ds, variables=['x', 'y'])
    MahalanobisDesign.build(point, dataset)                # dispatches on type
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymahalanobis.core.datasource import DataSource
from pymahalanobis.core.exceptions import UnequalLengthError
from pymahalanobis.core.validation import check_finite, check_min_samples
from pymahalanobis.core.compute.linalg.vector import as_vector
from pymahalanobis.core.compute.linalg.matrix import as_matrix


@dataclass(frozen=True)
class MahalanobisDesign:
    """
    A point and the sample it is measured against.

    Immutable after construction. Holds private copies of both arrays.
    """
    _point: NDArray[np.floating[Any]]
    _dataset: NDArray[np.floating[Any]]
    _variables: tuple[str, ...] | None = None

    @classmethod
    def build(
        cls,
        point: ArrayLike,
        dataset: ArrayLike | Mapping[str, ArrayLike] | DataSource | MahalanobisDesign,
    ) -> MahalanobisDesign:
        """
        Build a design from whatever the caller has.

        Mappings and DataSources are read as named variables; anything
        else is taken as a row-is-variable dataset.
        """
        if isinstance(dataset, MahalanobisDesign):
            return cls._build(point, dataset.dataset, dataset.variables)
        if isinstance(dataset, DataSource):
            return cls.from_datasource(point, dataset)
        if isinstance(dataset, Mapping):
            return cls.from_datasource(point, DataSource.from_mapping(dataset))
        return cls.from_arrays(point, dataset)

    @classmethod
    def from_arrays(cls, point: ArrayLike, dataset: ArrayLike) -> MahalanobisDesign:
        """
        Args:
            point: (p,) coordinates
            dataset: (p, n) array, one row per variable
        """
        return cls._build(point, dataset)

    @classmethod
    def from_observations(cls, point: ArrayLike, data: ArrayLike) -> MahalanobisDesign:
        """
        Args:
            point: (p,) coordinates
            data: (n, p) array, one row per observation
        """
        if hasattr(data, 'columns') and hasattr(data, 'to_numpy'):
            variables = tuple(str(c) for c in data.columns)
            observations = as_matrix(data.to_numpy(dtype=np.float64), 'data')
            return cls._build(point, observations.T, variables)
        observations = as_matrix(data, 'data')
        return cls._build(point, observations.T)

    @classmethod
    def from_datasource(
        cls,
        point: ArrayLike,
        source: DataSource,
        *,
        variables: list[str] | None = None,
    ) -> MahalanobisDesign:
        """
        Args:
            point: (p,) coordinates, in the order of ``variables``
            source: DataSource holding one array per variable
            variables: Names to use. All variables in source order if None.
        """
        names = source.keys() if variables is None else tuple(variables)
        return cls._build(point, source.to_dataset(list(names)), names)

    @classmethod
    def _build(
        cls,
        point: ArrayLike,
        dataset: ArrayLike,
        variables: tuple[str, ...] | None = None,
    ) -> MahalanobisDesign:
        """Internal builder with validation."""
        data = as_matrix(dataset, 'dataset')
        check_min_samples(data, 2, 'dataset')

        x = as_vector(point, 'point')
        check_finite(x, 'point')

        p = data.shape[0]
        if len(x) != p:
            raise UnequalLengthError(
                f"point has {len(x)} coordinates but dataset has {p} variables "
                f"(dataset rows are variables, columns are observations)",
                expected=p,
                actual=len(x),
            )

        return cls(_point=x, _dataset=data, _variables=variables)

    @property
    def point(self) -> NDArray[np.floating[Any]]:
        """Point coordinates (p,)."""
        return self._point.copy()

    @property
    def dataset(self) -> NDArray[np.floating[Any]]:
        """Dataset (p, n), one row per variable."""
        return self._dataset.copy()

    @property
    def p(self) -> int:
        """Number of variables."""
        return self._dataset.shape[0]

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._dataset.shape[1]

    @property
    def variables(self) -> tuple[str, ...] | None:
        """Variable names, or None if not available."""
        return self._variables

    def __repr__(self) -> str:
        return f"MahalanobisDesign(p={self.p}, n={self.n})"
