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
def tall_system(rng):
    """Over-determined real system with full column rank."""
    n, p = 50, 4
    M = rng.standard_normal((n, p))
    x_true = np.array([1.0, -2.0, 0.5, 3.0])
    b = M @ x_true + rng.standard_normal(n) * 0.1
    return M, b, x_true


@pytest.fixture
def complex_system(rng):
    """Over-determined complex system with full column rank."""
    n, p = 40, 3
    M = rng.standard_normal((n, p)) + 1j * rng.standard_normal((n, p))
    b = rng.standard_normal(n) + 1j * rng.standard_normal(n)
    return M, b


@pytest.fixture
def spd_matrix(rng):
    """Well-conditioned symmetric positive definite 5 x 5 matrix."""
    B = rng.standard_normal((8, 5))
    return B.T @ B + 0.5 * np.eye(5)


@pytest.fixture
def hpd_matrix(rng):
    """Well-conditioned Hermitian positive definite 4 x 4 matrix."""
    B = rng.standard_normal((6, 4)) + 1j * rng.standard_normal((6, 4))
    return B.conj().T @ B + 0.5 * np.eye(4)
