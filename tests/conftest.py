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
def normal_sample(rng):
    """Moderate-size sample from N(10, 2^2)."""
    return rng.normal(10.0, 2.0, size=200)


@pytest.fixture
def two_samples(rng):
    """Two samples whose means differ by one standard deviation."""
    x = rng.normal(0.0, 1.0, size=40)
    y = rng.normal(1.0, 1.0, size=35)
    return x, y
