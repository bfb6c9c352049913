"""
Pytest configuration and shared fixtures for the mazegen test suite.
"""

import random

import pytest

from mazegen.config import MazeConfig
from mazegen.utils.maze_logging import configure_logging

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep package loggers quiet and reset them after every test."""
    configure_logging(level="WARNING", use_colors=False)
    yield
    configure_logging(level="WARNING", use_colors=False)


# =============================================================================
# Random Sources
# =============================================================================


class ScriptedRandom(random.Random):
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.position = 0
        self.calls = 0

    def randrange(self, start, stop=None, step=1):
        if stop is None:
            start, stop = 0, start
        self.calls += 1
        value = self.values[self.position % len(self.values)]
        self.position += 1
        return start + value % (stop - start)


@pytest.fixture
def seeded_rng():
    """Reproducible standard random source."""
    return random.Random(1234)


@pytest.fixture
def zero_rng():
    """Random source whose every draw is 0."""
    return ScriptedRandom([0])


@pytest.fixture
def scripted_rng_factory():
    """Build scripted random sources from a list of draws."""
    return ScriptedRandom


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def small_config():
    """Small reproducible maze with square 10-unit cells."""
    return MazeConfig(rows=3, cols=4, width=40.0, height=30.0, seed=7)


@pytest.fixture
def default_config():
    """Classic 5 x 10 layout with a fixed seed."""
    return MazeConfig(seed=42)
