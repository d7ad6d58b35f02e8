"""
Core infrastructure for pymahalanobis.

This module provides shared abstractions, utilities, and numerical kernels
used by the descriptive statistics and distance modules.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    datasource: Named-variable data container
    compute: Timing, tolerances, linear algebra kernels
"""

from pymahalanobis.core.protocols import Backend
from pymahalanobis.core.result import Result
from pymahalanobis.core.datasource import DataSource
from pymahalanobis.core.exceptions import (
    PyMahalanobisError,
    ValidationError,
    DimensionError,
    UnequalLengthError,
    InvalidDatasetSizeError,
    NonSquareMatrixError,
    DimensionMismatchError,
    DegenerateInputError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)

__all__ = [
    # Protocols
    "Backend",
    # Data
    "DataSource",
    # Result
    "Result",
    # Exceptions
    "PyMahalanobisError",
    "ValidationError",
    "DimensionError",
    "UnequalLengthError",
    "InvalidDatasetSizeError",
    "NonSquareMatrixError",
    "DimensionMismatchError",
    "DegenerateInputError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
]
