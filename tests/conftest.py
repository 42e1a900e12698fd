"""Pytest configuration and shared fixtures."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from taskbot.config import ConfigModel, reset_config  # noqa: E402
from taskbot.parser import CommandParser  # noqa: E402


FIXED_TODAY = date(2024, 1, 1)


@pytest.fixture(autouse=True)
def fresh_config():
    """Never leak a loaded configuration between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def parser():
    """Parser whose notion of today is 1 January 2024."""
    return CommandParser(today=lambda: FIXED_TODAY)


@pytest.fixture
def config(tmp_path):
    """Configuration keeping all files under the test's tmp directory."""
    return ConfigModel(data_dir=str(tmp_path), show_banner=False)
