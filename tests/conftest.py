"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from quadfit.quadratic import QuadraticFitter

# Reference curve used throughout the suite
A_TRUE, B_TRUE, C_TRUE = 1.23, -9.87, 0.01


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def three_point_fitter():
    """Fitter holding the three noise-free points of the reference curve."""
    fitter = QuadraticFitter(3)
    fitter.add(-1.0, 11.11)
    fitter.add(0.0, 0.01)
    fitter.add(1.0, -8.63)
    return fitter


@pytest.fixture
def quadratic_samples(rng):
    """Noise-free samples of the reference curve at 8 random x on [-1, 1)."""
    x = rng.uniform(-1, 1, size=8)
    y = A_TRUE * x**2 + B_TRUE * x + C_TRUE
    return x, y, np.array([A_TRUE, B_TRUE, C_TRUE])
