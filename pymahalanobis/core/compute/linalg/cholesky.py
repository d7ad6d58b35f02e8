"""
Cholesky decomposition.

Factors a symmetric positive-definite matrix A into a lower-triangular L
with L L' = A, using the Cholesky-Banachiewicz ordering: L is filled row
by row, left to right, and only the lower triangle of A is ever read.
Symmetry of A is assumed, not checked.

A radicand on the diagonal that is not positive (or is within
PIVOT_TOLERANCE of zero relative to A[i][i]) raises
NotPositiveDefiniteError instead of producing NaN or Inf, and the
resulting error names the diagonal position where factorization stopped.
That position is the first variable that is (numerically) a linear
combination of the ones before it.
"""

from typing import Any
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymahalanobis.core.exceptions import NotPositiveDefiniteError
from pymahalanobis.core.validation import check_square
from pymahalanobis.core.compute.linalg.matrix import as_matrix
from pymahalanobis.core.compute.tolerances import PIVOT_TOLERANCE


def cholesky(
    a: ArrayLike,
    matrix_name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Lower-triangular Cholesky factor of a positive-definite matrix.

    Args:
        a: Square matrix (m x m), assumed symmetric positive-definite
        matrix_name: Description used in error messages

    Returns:
        L (m x m) with zeros above the diagonal and L @ L.T == a

    Raises:
        NonSquareMatrixError: If a is not square
        NotPositiveDefiniteError: If a diagonal radicand is not positive

    Example:
        >>> cholesky([[1, -2], [2, 5]])
        array([[1., 0.],
               [2., 1.]])
    """
    A = as_matrix(a, matrix_name)
    check_square(A, matrix_name)

    m = A.shape[0]
    L = np.zeros((m, m), dtype=np.float64)

    for i in range(m):
        for k in range(i + 1):
            s = float(np.sum(L[i, :k] * L[k, :k]))

            if i == k:
                radicand = A[i, i] - s
                # Relative to A[i, i]: cancellation leaves ~eps-sized residue
                # on exactly collinear data.
                if not radicand > PIVOT_TOLERANCE * abs(A[i, i]):
                    raise NotPositiveDefiniteError(
                        f"{matrix_name} is not positive definite: "
                        f"diagonal {i} leaves radicand {radicand:.6g} after elimination",
                        matrix_name=matrix_name,
                        pivot_index=i,
                        pivot_value=float(radicand),
                    )
                L[i, k] = math.sqrt(radicand)
            else:
                L[i, k] = (A[i, k] - s) / L[k, k]

    return L
