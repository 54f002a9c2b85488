"""Pytest configuration for the variates test suite."""

import numpy as np
import pytest

from variates.source import GeneratorSource


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-statistical",
        action="store_true",
        default=False,
        help="Run goodness-of-fit tests (skipped by default, large sample sizes)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "statistical: mark test as a goodness-of-fit test (skipped unless --run-statistical is passed)",
    )
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (large sample sizes, may take several seconds)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip statistical tests unless the corresponding flag is passed."""
    if config.getoption("--run-statistical"):
        return
    skip_statistical = pytest.mark.skip(reason="need --run-statistical option to run")
    for item in items:
        if "statistical" in item.keywords:
            item.add_marker(skip_statistical)


class CountingSource(GeneratorSource):
    """GeneratorSource that records how many deviates of each kind were drawn."""

    def __init__(self, rng: np.random.Generator):
        super().__init__(rng)
        self.uniform_calls = 0
        self.normal_calls = 0
        self.int_calls = 0

    @property
    def total_calls(self) -> int:
        return self.uniform_calls + self.normal_calls + self.int_calls

    def next_uniform(self) -> float:
        self.uniform_calls += 1
        return super().next_uniform()

    def next_standard_normal(self) -> float:
        self.normal_calls += 1
        return super().next_standard_normal()

    def next_int_in_range(self, low: int, high: int) -> int:
        self.int_calls += 1
        return super().next_int_in_range(low, high)


class ReplaySource:
    """Source that hands out a fixed script of deviates, in order."""

    def __init__(self, uniforms=(), normals=(), ints=()):
        self._uniforms = list(uniforms)
        self._normals = list(normals)
        self._ints = list(ints)

    def next_uniform(self) -> float:
        return self._uniforms.pop(0)

    def next_standard_normal(self) -> float:
        return self._normals.pop(0)

    def next_int_in_range(self, low: int, high: int) -> int:
        return self._ints.pop(0)


@pytest.fixture
def source():
    """Seeded source for reproducible tests."""
    return GeneratorSource(np.random.default_rng(12345))


@pytest.fixture
def counting_source():
    """Seeded source that counts the deviates it hands out."""
    return CountingSource(np.random.default_rng(2024))


@pytest.fixture
def replay_source():
    """Factory for sources replaying a fixed script of deviates."""
    return ReplaySource
