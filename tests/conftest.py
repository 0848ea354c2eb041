"""
Pytest configuration and shared fixtures for bsp_geometry test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import pytest

import numpy as np

from bsp_geometry import ArcsSet, IntervalsSet, RegionFactory
from bsp_geometry.config import reset_config

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "mathematical: Mathematical property validation tests")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")
    config.addinivalue_line("markers", "fast: Fast tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


# =============================================================================
# Tolerance Fixtures
# =============================================================================


@pytest.fixture
def tolerance():
    """Tolerance used by most region tests."""
    return 1.0e-10


@pytest.fixture(params=[1.0e-10, 1.0e-6, 1.0e-3])
def any_tolerance(request):
    """Parametrized tolerance for tests independent of its magnitude."""
    return request.param


# =============================================================================
# Region Fixtures
# =============================================================================


@pytest.fixture
def factory():
    """Region factory."""
    return RegionFactory()


@pytest.fixture
def half_circle(tolerance):
    """Upper half of the circle, [0, π]."""
    return ArcsSet.from_bounds(0.0, np.pi, tolerance)


@pytest.fixture
def wrapping_arcs(tolerance):
    """Arc crossing the angle 0, [5.7, 2.3 + 2π]."""
    return ArcsSet.from_bounds(5.7, 2.3, tolerance)


@pytest.fixture
def two_arcs(factory, tolerance):
    """[1, 3] ∪ [5, 6], built from a difference."""
    return factory.difference(ArcsSet.from_bounds(1.0, 6.0, tolerance), ArcsSet.from_bounds(3.0, 5.0, tolerance))


@pytest.fixture
def unit_interval(tolerance):
    """Intervals set [0, 1]."""
    return IntervalsSet.from_bounds(0.0, 1.0, tolerance)


@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return np.random.default_rng(42)
