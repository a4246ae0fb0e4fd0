"""Pytest configuration and shared fixtures."""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from simon.storage import Storage  # noqa: E402
from simon.ui import Ui  # noqa: E402


@pytest.fixture()
def console():
    """A wide, colourless console writing into a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture()
def ui(console):
    return Ui(console)


@pytest.fixture()
def storage(tmp_path):
    return Storage(tmp_path / "tasks.md")
