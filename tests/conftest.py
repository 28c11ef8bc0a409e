"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from bargraph import BargraphConfig, BicolorBargraph


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_bus():
    """Create mock bus writer."""
    bus = Mock()
    bus.write = Mock(return_value=None)
    return bus


@pytest.fixture
def three_device_config():
    """Config for three chained bargraphs."""
    return BargraphConfig(addresses=[0x70, 0x71, 0x72])


@pytest.fixture
def bargraph(mock_bus):
    """Single-device bargraph with construction writes cleared."""
    driver = BicolorBargraph(mock_bus)
    mock_bus.write.reset_mock()
    return driver


@pytest.fixture
def bargraphs(mock_bus, three_device_config):
    """Three-device bargraph with construction writes cleared."""
    driver = BicolorBargraph(mock_bus, three_device_config)
    mock_bus.write.reset_mock()
    return driver
