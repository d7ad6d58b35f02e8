"""
Named-variable data container for pymahalanobis.

DataSource is the "I have data" abstraction. It holds one 1D array per
named variable and knows nothing about distances; a design picks the
variables it needs and stacks them into a row-is-variable dataset.

Usage:
    from pymahalanobis import DataSource

    ds = DataSource.from_arrays(x=[2, 3, 4], y=[3, 5, 4])
    ds = DataSource.from_mapping({'x': [2, 3, 4], 'y': [3, 5, 4]})
    ds = DataSource.from_dataframe(df)
    ds = DataSource.from_file("data.csv")

    ds.keys()  # ('x', 'y')
    x = ds['x']
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymahalanobis.core.exceptions import ValidationError, InvalidDatasetSizeError
from pymahalanobis.core.validation import check_array, check_1d

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class DataSource:
    """
    Ordered collection of named variables, each a float64 vector.

    Construct via factory classmethods, not directly. All variables have
    the same number of observations; this is checked on construction.
    """
    _data: dict[str, NDArray[np.floating[Any]]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Array Access ===

    def keys(self) -> tuple[str, ...]:
        """Variable names in insertion order."""
        return tuple(self._data.keys())

    def __getitem__(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Access a named variable.

        Raises:
            KeyError: If key not found, with a message listing available keys

        Example:
            >>> ds = DataSource.from_arrays(x=[1, 2], y=[3, 4])
            >>> ds['z']  # KeyError: "DataSource has no variable 'z'. Available: ('x', 'y')"
        """
        if key not in self._data:
            raise KeyError(
                f"DataSource has no variable '{key}'. Available: {self.keys()}"
            )
        return self._data[key].copy()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    # === Properties ===

    @property
    def n_variables(self) -> int:
        return len(self._data)

    @property
    def n_observations(self) -> int:
        """Number of observations per variable."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata.copy()

    def to_dataset(self, variables: list[str] | None = None) -> NDArray[np.floating[Any]]:
        """
        Stack variables into a row-is-variable dataset.

        Args:
            variables: Names to include, in order. All variables if None.

        Returns:
            Array of shape (n_variables, n_observations)
        """
        names = self.keys() if variables is None else tuple(variables)
        if not names:
            raise ValidationError("No variables selected")
        return np.vstack([self[name] for name in names])

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, **named_arrays: ArrayLike) -> DataSource:
        """Construct from keyword arrays, one per variable."""
        return cls.from_mapping(named_arrays, source='arrays')

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, ArrayLike],
        *,
        source: str = 'mapping',
        source_path: str | None = None,
    ) -> DataSource:
        """
        Construct from a mapping of variable name to observations.

        Raises:
            ValidationError: If the mapping is empty or a variable is not 1D numeric
            InvalidDatasetSizeError: If variables differ in length
        """
        if not mapping:
            raise ValidationError("DataSource needs at least one variable")

        storage: dict[str, NDArray[np.floating[Any]]] = {}
        for name, values in mapping.items():
            arr = check_array(values, str(name))
            check_1d(arr, str(name))
            storage[str(name)] = arr

        lengths = {name: len(arr) for name, arr in storage.items()}
        if len(set(lengths.values())) > 1:
            raise InvalidDatasetSizeError(
                f"All variables must have the same number of observations, got {lengths}",
                actual=tuple(lengths.values()),
            )

        metadata: dict[str, Any] = {
            'n_observations': next(iter(lengths.values())),
            'source': source,
        }
        if source_path:
            metadata['source_path'] = source_path

        return cls(_data=storage, _metadata=metadata)

    @classmethod
    def from_dataframe(cls, df: 'pd.DataFrame', *, source_path: str | None = None) -> DataSource:
        """Construct from a pandas DataFrame; each column is a variable."""
        storage = {str(col): check_array(df[col], str(col)) for col in df.columns}
        return cls.from_mapping(storage, source='dataframe', source_path=source_path)

    @classmethod
    def from_file(cls, path: str | Path, *, columns: list[str] | None = None) -> DataSource:
        """
        Construct from a file.

        Supported formats:
            .csv / .tsv  header row of variable names, one observation per line
            .npy         2D array, one observation per row; variables named V1..Vp
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in ('.csv', '.tsv'):
            import pandas as pd
            sep = '\t' if suffix == '.tsv' else ','
            df = pd.read_csv(path, sep=sep, usecols=columns)
            return cls.from_dataframe(df, source_path=str(path))
        elif suffix == '.npy':
            data = np.load(path)
            if data.ndim != 2:
                raise ValidationError(
                    f"{path.name}: expected a 2D array, got shape {data.shape}"
                )
            names = columns or [f"V{j + 1}" for j in range(data.shape[1])]
            if len(names) != data.shape[1]:
                raise ValidationError(
                    f"{path.name}: {len(names)} column names for {data.shape[1]} columns"
                )
            return cls.from_mapping(
                {name: data[:, j] for j, name in enumerate(names)},
                source='npy',
                source_path=str(path),
            )
        else:
            raise ValidationError(f"Unknown file format: {suffix}")
