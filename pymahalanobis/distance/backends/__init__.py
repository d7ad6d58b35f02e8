"""
Solve strategies for Mahalanobis distance.

    CholeskyBackend   Cholesky + forward substitution (default)
    InverseBackend    Gauss-Jordan inversion
"""

from pymahalanobis.distance.backends.cholesky import CholeskyBackend
from pymahalanobis.distance.backends.inverse import InverseBackend

__all__ = [
    "CholeskyBackend",
    "InverseBackend",
]
