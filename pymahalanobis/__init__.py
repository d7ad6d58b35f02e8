"""
pymahalanobis: Mahalanobis distance from first principles.

Sample statistics, Cholesky factorization, forward substitution and
Gauss-Jordan inversion written out explicitly, with every degenerate
case (ragged data, too few observations, singular covariance) reported
as a typed exception.

Submodules:
    descriptive: Sample mean, variance, covariance and covariance matrix
    distance: Mahalanobis distance (Cholesky and inversion paths)
    core: Exceptions, validation, result envelope, linear algebra kernels
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pymahalanobis import descriptive
from pymahalanobis import distance
from pymahalanobis.core.datasource import DataSource
from pymahalanobis.distance import mahalanobis, calculate, MahalanobisDesign

__all__ = [
    "__version__",
    "descriptive",
    "distance",
    "DataSource",
    "mahalanobis",
    "calculate",
    "MahalanobisDesign",
]
