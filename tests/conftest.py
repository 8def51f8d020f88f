"""Shared pytest fixtures."""

import pytest

from rayforge import utils


@pytest.fixture(autouse=True)
def seeded_random():
    """Give every test the same random stream."""
    utils.seed(12345)
    yield
