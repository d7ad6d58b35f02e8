"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spd_matrix(rng):
    """Well-conditioned 4x4 symmetric positive-definite matrix."""
    A = rng.standard_normal((4, 4))
    return A @ A.T + 4.0 * np.eye(4)


@pytest.fixture
def correlated_dataset(rng):
    """Three correlated variables, 200 observations, rows are variables."""
    n = 200
    x = rng.standard_normal(n)
    y = 0.8 * x + 0.6 * rng.standard_normal(n)
    z = -0.5 * x + 0.3 * y + rng.standard_normal(n)
    return np.vstack([x, y, z])


@pytest.fixture
def reference_data():
    """Two variables, five observations, with a hand-computed distance."""
    point = [4, 5]
    dataset = [
        [2, 3, 4, 5, 6],
        [3, 5, 4, 6, 8],
    ]
    return point, dataset, 0.24343
