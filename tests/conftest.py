"""
Pytest configuration and shared fixtures for SmallWorld tests
"""

import pytest
import numpy as np


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible graphs and searches."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_vectors() -> np.ndarray:
    """Generate sample vectors for testing."""
    return np.random.default_rng(42).random((10, 8))


@pytest.fixture
def dimension() -> int:
    """Standard vector dimension for testing."""
    return 8
