"""
Exception hierarchy for pymahalanobis.

All exceptions inherit from PyMahalanobisError to allow catching any
library-specific error. Two families sit underneath:

    ValidationError   the caller handed us something unusable
                      (wrong shapes, too few observations)
    NumericalError    the inputs were well-formed but the arithmetic
                      cannot proceed (zero pivot, indefinite matrix)

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMahalanobisError(Exception):
    """Base exception for all pymahalanobis errors."""
    pass


class ValidationError(PyMahalanobisError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.

    Attributes:
        expected: Expected length or shape, if known
        actual: Observed length or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class UnequalLengthError(DimensionError):
    """Two vectors that must be paired element-wise differ in length."""
    pass


class InvalidDatasetSizeError(DimensionError):
    """Dataset rows do not all have the same number of columns."""
    pass


class NonSquareMatrixError(DimensionError):
    """
    A square matrix was required.

    Attributes:
        shape: Shape of the offending matrix (rows, columns) when it is 2D
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message, actual=shape)
        self.shape = shape


class DimensionMismatchError(DimensionError):
    """Inner dimensions of a matrix product do not agree."""
    pass


class DegenerateInputError(ValidationError):
    """
    Input has too few elements for the requested statistic.

    Raised for empty vectors and datasets, and for sample statistics
    whose n-1 denominator would be zero or negative.

    Attributes:
        n: Number of elements (or observations) supplied
        minimum: Minimum number required
    """

    def __init__(self, message: str, n: int, minimum: int):
        super().__init__(message)
        self.n = n
        self.minimum = minimum


class NumericalError(PyMahalanobisError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires a nonzero pivot (Gauss-Jordan
    elimination, forward substitution) and finds one that is zero or
    below tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row/column index at which elimination failed
        pivot_value: The offending pivot value
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class NotPositiveDefiniteError(SingularMatrixError):
    """
    Matrix is not positive definite.

    Raised when the Cholesky factorization meets a non-positive radicand
    on the diagonal, i.e. the covariance matrix is singular (a variable is
    constant or a linear combination of others) or indefinite.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Diagonal position where the factorization failed
        pivot_value: The radicand A[i][i] - sum that was not positive
    """
    pass
