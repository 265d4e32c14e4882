"""Shared pytest fixtures for chain alert tests."""

import pytest

# Import all fixtures for global availability
from tests.fixtures.chain_fixtures import *


@pytest.fixture
def lake_path(tmp_path):
    """
    Fresh Delta Lake directory for each test.

    Example:
        def test_with_lake(lake_path):
            alerts_path = lake_path / "alerts"
    """
    return tmp_path / "lake"
