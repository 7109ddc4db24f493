"""Pytest configuration and fixtures for chronal tests."""

from __future__ import annotations

import datetime
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add the parent directory to sys.path so chronal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chronal import config  # noqa: E402
from chronal.clock import FixedClock  # noqa: E402

# Saturday
FIXED_NOW = datetime.datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def clock() -> FixedClock:
    """A clock pinned to 2024-06-15 12:00:00 (a Saturday)."""
    return FixedClock(FIXED_NOW)


@pytest.fixture(autouse=True)
def _reset_config() -> Generator[None]:
    """Restore default configuration after each test."""
    yield
    config.reset_config()
