# tests/conftest.py
import numpy as np
import pytest


@pytest.fixture
def linear_data():
    """Rows [1, x] with y = 2x + 1 plus a little noise."""
    rng = np.random.RandomState(0)
    x = np.linspace(-1, 1, 20)
    y = 2 * x + 1 + 0.05 * rng.randn(len(x))
    return np.column_stack([np.ones_like(x), x]), y


@pytest.fixture
def separable_data():
    """Rows [1, x, y]; x > 0 is class +1, x < 0 is class -1."""
    rng = np.random.RandomState(1)
    x = np.concatenate([rng.uniform(0.5, 2, 10), -rng.uniform(0.5, 2, 10)])
    y = rng.uniform(-1, 1, 20)
    labels = np.concatenate([np.ones(10), -np.ones(10)])
    return np.column_stack([np.ones(20), x, y]), labels
