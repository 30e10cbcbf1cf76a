"""
Numerical tolerances for densela.

Two kinds of constants live here:
- algorithm thresholds (pivot singularity, Jacobi convergence, symmetry),
  used as keyword defaults by the public entry points;
- comparison tiers, used by the test suite and benchmarks when checking
  results against a reference implementation.
"""

from dataclasses import dataclass

import numpy as np


# Double precision unit roundoff
EPS = float(np.finfo(np.float64).eps)

# A pivot is singular when |pivot| <= PIVOT_TOLERANCE_FACTOR * n * EPS * max|A|.
PIVOT_TOLERANCE_FACTOR = 1.0

# Jacobi stops once the off-diagonal Frobenius norm is at most
# JACOBI_TOL * ||A||_F.
JACOBI_TOL = 1e-14

# Rotation cap is JACOBI_MAX_SWEEPS * n(n-1)/2.
JACOBI_MAX_SWEEPS = 100

# Symmetry check: max|A - A'| <= SYMMETRY_TOL * max|A|
SYMMETRY_TOL = 1e-10


def pivot_tolerance(n: int, scale: float) -> float:
    """Singularity threshold for an n x n matrix whose largest |entry| is scale."""
    return PIVOT_TOLERANCE_FACTOR * n * EPS * scale


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned problems: agreement to near machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

# Ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Condition number above which comparisons use the relaxed tier.
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(condition_number: float | None = None) -> ToleranceTier:
    """Select the comparison tier for a problem of the given condition number."""
    if condition_number is not None and condition_number > ILL_CONDITIONED_THRESHOLD:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
