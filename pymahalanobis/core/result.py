"""
Generic result container for all pymahalanobis computations.

The Result class provides a standardized envelope that every solve
strategy returns. This enables shared tooling for timing, reproducibility
and warnings while allowing each strategy to define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivots, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
    - provenance records the library and numpy versions that produced it
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software stack that produced a result."""
    from pymahalanobis import __version__

    return {
        'pymahalanobis_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for distance computations.

    Type Parameters:
        P: The payload type produced by a backend

    Attributes:
        params: Computed quantities (distance, factor, inverse, ...)
        info: Structured metadata (method, pivot order, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Software versions used for the computation

    Examples:
        >>> Result(
        ...     params=DistanceParams(distance=0.24, ...),
        ...     info={'method': 'cholesky'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_cholesky'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
