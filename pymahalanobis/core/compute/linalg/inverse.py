"""
Matrix inversion by Gauss-Jordan elimination with partial pivoting.

This is the alternative to Cholesky + forward substitution. It works for
any nonsingular square matrix (no symmetry or definiteness assumed) but
squares the conditioning problem when used to form a quadratic form, so
the Cholesky path is preferred for distances.

Algorithm on the augmented matrix [A | I], for each column k:
    1. pick the row r >= k with the largest |value| in column k
    2. swap rows r and k
    3. fail if the pivot is (numerically) zero
    4. divide row k by the pivot
    5. subtract multiples of row k from every other row to clear column k
After m columns the right half holds A^-1.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymahalanobis.core.exceptions import SingularMatrixError
from pymahalanobis.core.validation import check_square
from pymahalanobis.core.compute.linalg.matrix import as_matrix, identity
from pymahalanobis.core.compute.tolerances import PIVOT_TOLERANCE


@dataclass(frozen=True)
class InversionResult:
    """
    Result of Gauss-Jordan inversion.

    Attributes:
        inverse: A^-1 (m x m)
        pivots: Absolute pivot values in elimination order (m,)
        row_swaps: (k, r) pairs for every row interchange performed
    """
    inverse: NDArray[np.floating[Any]]
    pivots: NDArray[np.floating[Any]]
    row_swaps: tuple[tuple[int, int], ...]

    @property
    def pivot_ratio(self) -> float:
        """Smallest over largest absolute pivot; 1.0 for an empty matrix."""
        if len(self.pivots) == 0:
            return 1.0
        return float(np.min(self.pivots) / np.max(self.pivots))


def gauss_jordan(
    a: ArrayLike,
    matrix_name: str = 'matrix',
) -> InversionResult:
    """
    Invert a square matrix with Gauss-Jordan elimination.

    A pivot counts as zero when its magnitude is at or below
    PIVOT_TOLERANCE times the largest absolute entry of A, so the test
    does not depend on the units of A. An all-zero matrix always fails.

    Args:
        a: Square matrix (m x m)
        matrix_name: Description used in error messages

    Returns:
        InversionResult with the inverse and pivot diagnostics

    Raises:
        NonSquareMatrixError: If a is not square
        SingularMatrixError: If a zero pivot is encountered
    """
    A = as_matrix(a, matrix_name)
    check_square(A, matrix_name)

    m = A.shape[0]
    augmented = np.hstack([A, identity(m)])
    scale = float(np.max(np.abs(A))) if m > 0 else 0.0
    threshold = PIVOT_TOLERANCE * scale

    pivots = np.zeros(m, dtype=np.float64)
    swaps: list[tuple[int, int]] = []

    for k in range(m):
        r = k + int(np.argmax(np.abs(augmented[k:, k])))
        if r != k:
            augmented[[k, r]] = augmented[[r, k]]
            swaps.append((k, r))

        pivot = augmented[k, k]
        if abs(pivot) <= threshold:
            raise SingularMatrixError(
                f"{matrix_name} is singular: no usable pivot in column {k} "
                f"(largest candidate {pivot:.6g})",
                matrix_name=matrix_name,
                pivot_index=k,
                pivot_value=float(pivot),
            )
        pivots[k] = abs(pivot)

        augmented[k] = augmented[k] / pivot
        for i in range(m):
            if i != k:
                augmented[i] = augmented[i] - augmented[i, k] * augmented[k]

    return InversionResult(
        inverse=augmented[:, m:].copy(),
        pivots=pivots,
        row_swaps=tuple(swaps),
    )


def invert(a: ArrayLike, matrix_name: str = 'matrix') -> NDArray[np.floating[Any]]:
    """
    Inverse of a square matrix.

    Convenience wrapper around gauss_jordan() that discards diagnostics.

    Raises:
        NonSquareMatrixError: If a is not square
        SingularMatrixError: If a is singular
    """
    return gauss_jordan(a, matrix_name).inverse
