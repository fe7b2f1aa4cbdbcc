"""Platform-facing collaborators: the system clock and UTC breakdown.

Classes:
    Clock: Current Unix time in whole seconds.
    SafeCalendarAccess: Thread-safe ``gmtime`` returning BrokenDownTime.
    CalendarAccess: Protocol satisfied by SafeCalendarAccess and test fakes.
"""

from __future__ import annotations

from utctime.system.clock import Clock
from utctime.system.safe_calendar import CalendarAccess, SafeCalendarAccess

__all__: list[str] = [
    "CalendarAccess",
    "Clock",
    "SafeCalendarAccess",
]
