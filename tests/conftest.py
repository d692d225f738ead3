"""Pytest fixtures for all tests."""

import pytest

import internal.logging as logging_module
from core.generator import UlidGenerator


class StepEntropy:
    """Deterministic entropy: 0x01.., 0x02.., ... for each draw."""

    def __init__(self):
        self.calls = 0

    def __call__(self, size):
        self.calls += 1
        return bytes([self.calls]) * size


@pytest.fixture(autouse=True)
def reset_logger():
    """Give every test a fresh default logger."""
    logging_module._logger = None
    yield
    logging_module._logger = None


@pytest.fixture
def timestamp():
    """Fixed millisecond timestamp."""
    return 1234567890123


@pytest.fixture
def fixed_clock(timestamp):
    """Clock frozen at `timestamp`."""
    return lambda: timestamp


@pytest.fixture
def entropy():
    """Deterministic entropy source."""
    return StepEntropy()


@pytest.fixture
def generator(fixed_clock, entropy):
    """Monotonic generator on a frozen clock."""
    return UlidGenerator(clock=fixed_clock, entropy=entropy)
