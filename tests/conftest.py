"""Pytest configuration and fixtures for utctime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so utctime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from utctime.core.broken_down import BrokenDownTime  # noqa: E402


class FakeCalendarAccess:
    """CalendarAccess returning a fixed answer and recording requests."""

    def __init__(self, result: BrokenDownTime | None) -> None:
        self.result = result
        self.requests: list[int] = []

    def get_utc_broken_down(self, seconds: int) -> BrokenDownTime | None:
        self.requests.append(seconds)
        return self.result


@pytest.fixture
def fake_calendar_access():
    """Factory for FakeCalendarAccess instances."""
    return FakeCalendarAccess
