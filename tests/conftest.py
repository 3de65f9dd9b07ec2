"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from statengine.core.sample import Sample


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def paired_sample(rng):
    """Linearly related (x, y) pairs with noise."""
    x = rng.uniform(0.0, 10.0, 50)
    y = 2.0 * x + 1.0 + rng.standard_normal(50)
    return Sample.from_pairs(np.column_stack([x, y]))


@pytest.fixture
def normal_values(rng):
    """200 draws from N(10, 2^2)."""
    return rng.normal(10.0, 2.0, 200)
