"""
Descriptive statistics module.

Sample moments for row-is-variable datasets, Bessel-corrected to match
numpy.cov(ddof=1) and R's var()/cov().

Public API:
    mean(v)                      - Arithmetic mean
    variance(v)                  - Sample variance (n-1)
    covariance(x, y)             - Sample covariance (n-1)
    mean_vector(dataset)         - Per-variable means
    covariance_matrix(dataset)   - Covariance matrix
"""

from pymahalanobis.descriptive.moments import (
    mean,
    variance,
    covariance,
    mean_vector,
    covariance_matrix,
)

__all__ = [
    "mean",
    "variance",
    "covariance",
    "mean_vector",
    "covariance_matrix",
]
