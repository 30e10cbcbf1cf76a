"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densela import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Random 6x6 matrix made diagonally dominant (cond ~ 1-10)."""
    n = 6
    a = rng.standard_normal((n, n))
    a += np.diag(np.sum(np.abs(a), axis=1) + 1.0)
    return a


@pytest.fixture
def symmetric(rng):
    """Random symmetric 5x5 matrix with a spread of eigenvalues."""
    a = rng.standard_normal((5, 5))
    return a + a.T


@pytest.fixture
def spd(rng):
    """Random symmetric positive definite 8x8 matrix."""
    a = rng.standard_normal((8, 8))
    return a @ a.T + 8.0 * np.eye(8)


@pytest.fixture
def rank_deficient():
    """The 2x2 rank-1 matrix [[1, 2], [2, 4]]."""
    return Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]])
