"""BrokenDownTime value type.

This module provides the BrokenDownTime class, a UTC wall-clock instant
split into calendar fields, in the spirit of C's ``struct tm`` but with a
full year and a 1-based month.
"""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BrokenDownTime:
    """A UTC calendar timestamp split into its fields.

    BrokenDownTime carries no timezone: every instance is implicitly UTC.
    Fields are not range-checked, so callers can feed out-of-range values
    to the epoch arithmetic and get its defined (if meaningless) result.

    Attributes:
        year: The full year (e.g. 2018).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-60, to tolerate an encoded leap second).
        is_dst: Always False; kept for parity with ``struct tm``.

    Examples:
        >>> bdt = BrokenDownTime(2017, 8, 3, 19, 53, 14)
        >>> bdt.month
        8
        >>> bdt.as_tuple()
        (2017, 8, 3, 19, 53, 14)
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    is_dst: bool = False

    @classmethod
    def from_struct_time(cls, value: time.struct_time) -> BrokenDownTime:
        """Create a BrokenDownTime from a ``time.struct_time``.

        The struct's DST flag is discarded; the result is always UTC.

        Args:
            value: A struct as returned by ``time.gmtime``.

        Returns:
            A new BrokenDownTime.
        """
        return cls(
            year=value.tm_year,
            month=value.tm_mon,
            day=value.tm_mday,
            hour=value.tm_hour,
            minute=value.tm_min,
            second=value.tm_sec,
        )

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """Return (year, month, day, hour, minute, second)."""
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


__all__ = ["BrokenDownTime"]
