"""
Linear algebra kernels for pymahalanobis.

Small dense-matrix routines written out explicitly rather than delegated
to LAPACK, so that every failure mode (ragged input, zero pivot,
indefinite matrix) surfaces as a typed exception instead of NaN.

All functions follow these conventions:
    - Inputs are copied to float64; caller arrays are never modified
    - Outputs are freshly allocated NumPy arrays
    - Errors are raised immediately with clear messages

Submodules:
    vector: dot product, subtraction, column reshaping
    matrix: identity, product, transpose, shape assertions
    cholesky: Cholesky-Banachiewicz factorization
    triangular: forward substitution
    inverse: Gauss-Jordan inversion with partial pivoting
"""

from pymahalanobis.core.compute.linalg.vector import (
    as_vector,
    dot,
    subtract,
    transpose_to_column,
)
from pymahalanobis.core.compute.linalg.matrix import (
    as_matrix,
    identity,
    multiply,
    transpose,
    assert_square,
    assert_rectangular,
)
from pymahalanobis.core.compute.linalg.cholesky import cholesky
from pymahalanobis.core.compute.linalg.triangular import forward_substitution
from pymahalanobis.core.compute.linalg.inverse import (
    InversionResult,
    gauss_jordan,
    invert,
)

__all__ = [
    # Vectors
    "as_vector",
    "dot",
    "subtract",
    "transpose_to_column",
    # Matrices
    "as_matrix",
    "identity",
    "multiply",
    "transpose",
    "assert_square",
    "assert_rectangular",
    # Factorizations and solvers
    "cholesky",
    "forward_substitution",
    "InversionResult",
    "gauss_jordan",
    "invert",
]
