"""
Mahalanobis distance module.

Public API:
    mahalanobis(point, dataset)   - Full solution (distance, factor, p-value, ...)
    calculate(point, dataset)     - Distance as a float

Datasets are laid out with one row per variable. Use
MahalanobisDesign.from_observations() for one row per observation.
"""

from pymahalanobis.distance.design import MahalanobisDesign
from pymahalanobis.distance.solution import DistanceParams, MahalanobisSolution
from pymahalanobis.distance.solvers import mahalanobis, calculate

__all__ = [
    "mahalanobis",
    "calculate",
    "MahalanobisDesign",
    "DistanceParams",
    "MahalanobisSolution",
]
