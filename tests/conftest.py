"""Shared fixtures for the compensated-summation tests."""

import pytest

from kahansum import SumConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against a float64, classical-update config."""
    previous = set_config(SumConfig(dtype="float64"))
    yield
    set_config(previous)
