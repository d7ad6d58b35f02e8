"""
Numerical tolerances.

Two kinds of constants live here:
- thresholds the kernels use to decide that a pivot is zero or that a
  factorization is ill-conditioned;
- ToleranceTier presets describing how closely two computed results are
  expected to agree (used by the test suite and by select_tolerance).
"""

from dataclasses import dataclass


# A pivot whose magnitude is at or below this is treated as zero.
# Each kernel scales it to the input: Cholesky by A[i][i], Gauss-Jordan by
# max|A|, forward substitution by max|diag(L)|.
PIVOT_TOLERANCE: float = 1e-12

# Smallest/largest absolute pivot ratio below which Gauss-Jordan inversion
# is flagged as ill-conditioned. The inverse is still returned.
ILL_CONDITIONED_PIVOT_RATIO: float = 1e-8


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Pure-Python kernels vs. LAPACK on well-conditioned input
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

# Cholesky path vs. Gauss-Jordan path
PATH_EQUIVALENCE = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='path_equivalence',
    description='Cholesky and inversion distances on the same data',
)

# Published reference values quoted to 5 decimals
REFERENCE_VALUES = ToleranceTier(
    rtol=0.0,
    atol=1e-5,
    name='reference_values',
    description='Hand-computed reference values rounded to 5 decimals',
)

# Either path on ill-conditioned covariance (pivot ratio below threshold)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned covariance',
)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select the tolerance tier for comparing a backend against a reference."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    if 'gauss_jordan' in backend_name:
        return PATH_EQUIVALENCE
    return CPU_FP64
