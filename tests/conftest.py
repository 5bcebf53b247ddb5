"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from chromapick.core import PickerSession
from chromapick.models import Color, PickerConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def on_color_change():
    """Host callback that records every notified hex value."""
    return Mock()


@pytest.fixture
def session(on_color_change):
    """Picker session seeded with the default blue preset."""
    return PickerSession("#007AFF", on_color_change=on_color_change)


@pytest.fixture
def red():
    """Pure red."""
    return Color(r=255, g=0, b=0)


@pytest.fixture
def config_path(temp_dir):
    """Config file location inside the temp directory."""
    return temp_dir / "config.json"


@pytest.fixture
def config():
    """Config that does not remember colors."""
    return PickerConfig(initial_color="#34C759", remember_last_color=False)
