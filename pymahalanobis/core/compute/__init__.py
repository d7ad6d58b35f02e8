"""
Shared compute infrastructure for pymahalanobis.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot thresholds and comparison tolerance tiers
    linalg: Linear algebra kernels (Cholesky, forward substitution, inversion)
"""

from pymahalanobis.core.compute.timing import Timer, timed

__all__ = [
    # Timing
    "Timer",
    "timed",
]
