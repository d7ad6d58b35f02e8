"""
Triangular solvers.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymahalanobis.core.exceptions import SingularMatrixError, UnequalLengthError
from pymahalanobis.core.validation import check_square
from pymahalanobis.core.compute.linalg.matrix import as_matrix
from pymahalanobis.core.compute.linalg.vector import as_vector
from pymahalanobis.core.compute.tolerances import PIVOT_TOLERANCE


def forward_substitution(
    L: ArrayLike,
    b: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """
    Solve L x = b for lower-triangular L.

    Computes x[i] = (b[i] - L[i, :i] . x[:i]) / L[i, i] for i = 0..m-1.
    Entries of L above the diagonal are never read.

    Args:
        L: Lower-triangular matrix (m x m)
        b: Right-hand side (m,)

    Returns:
        Solution vector x (m,)

    Raises:
        NonSquareMatrixError: If L is not square
        UnequalLengthError: If len(b) != rows(L)
        SingularMatrixError: If |L[i, i]| <= PIVOT_TOLERANCE * max|diag(L)|
            for some i (any zero diagonal entry always fails)
    """
    L_arr = as_matrix(L, 'L')
    check_square(L_arr, 'L')
    b_arr = as_vector(b, 'b')

    m = L_arr.shape[0]
    if len(b_arr) != m:
        raise UnequalLengthError(
            f"Right-hand side has {len(b_arr)} entries but L has {m} rows",
            expected=m,
            actual=len(b_arr),
        )

    scale = float(np.max(np.abs(np.diag(L_arr)))) if m > 0 else 0.0
    threshold = PIVOT_TOLERANCE * scale

    x = np.zeros(m, dtype=np.float64)
    for i in range(m):
        pivot = L_arr[i, i]
        if abs(pivot) <= threshold:
            raise SingularMatrixError(
                f"L is singular: diagonal entry {i} is {pivot:.6g}",
                matrix_name='L',
                pivot_index=i,
                pivot_value=float(pivot),
            )
        x[i] = (b_arr[i] - np.sum(L_arr[i, :i] * x[:i])) / pivot

    return x
