"""Epoch conversion for broken-down UTC timestamps.

This module provides the calendar arithmetic that turns a BrokenDownTime
into Unix epoch seconds.

Functions:
    to_epoch_seconds: Convert a BrokenDownTime to Unix seconds.

The computation is closed-form (constant time, no iteration over years or
days) and never consults the host's timezone database, so it gives the same
answer on every platform, including ones without a UTC-only ``timegm``.

Examples:
    >>> from utctime.core import BrokenDownTime
    >>> from utctime.convert import to_epoch_seconds

    >>> to_epoch_seconds(BrokenDownTime(1970, 1, 1))
    0

    >>> to_epoch_seconds(BrokenDownTime(1969, 12, 31, 23, 59, 59))
    -1
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from utctime._internal.calendar import days_before_month, leap_days_since_epoch
from utctime._internal.constants import (
    EPOCH_YEAR,
    MONTHS_PER_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_YEAR,
    TM_YEAR_BASE,
)
from utctime.errors import MissingArgumentError

if TYPE_CHECKING:
    from utctime.core.broken_down import BrokenDownTime


def to_epoch_seconds(utc: "BrokenDownTime") -> int:
    """Convert a broken-down UTC timestamp to Unix epoch seconds.

    Fields are not validated. A month outside 1-12 is carried into the year
    (month 13 of 2017 is January 2018); days, hours, minutes and seconds
    beyond their usual ranges simply add their weight, so day 32 of January
    lands on February 1st and second 60 on the next minute.

    Dates before 1970 produce negative results.

    Args:
        utc: The broken-down time, interpreted as UTC.

    Returns:
        Seconds since 1970-01-01 00:00:00 UTC.

    Raises:
        MissingArgumentError: If utc is None.

    Examples:
        >>> from utctime.core import BrokenDownTime

        >>> to_epoch_seconds(BrokenDownTime(2000, 1, 1))
        946684800

        >>> to_epoch_seconds(BrokenDownTime(2017, 8, 3, 19, 53, 14))
        1501789994

        >>> to_epoch_seconds(BrokenDownTime(1900, 1, 1))
        -2208988800
    """
    if utc is None:
        raise MissingArgumentError("utc")

    # struct tm representation: years since 1900, 0-based month
    tm_year = utc.year - TM_YEAR_BASE
    tm_mon = utc.month - 1
    year_carry, tm_mon = divmod(tm_mon, MONTHS_PER_YEAR)
    tm_year += year_carry

    years_since_epoch = tm_year + TM_YEAR_BASE - EPOCH_YEAR
    seconds = (
        years_since_epoch * SECONDS_PER_YEAR
        + leap_days_since_epoch(years_since_epoch) * SECONDS_PER_DAY
    )

    # Months elapsed in the target year
    seconds += days_before_month(tm_year + TM_YEAR_BASE, tm_mon) * SECONDS_PER_DAY

    # Days elapsed in the month, then the time of day
    seconds += (
        (utc.day - 1) * SECONDS_PER_DAY
        + utc.hour * SECONDS_PER_HOUR
        + utc.minute * SECONDS_PER_MINUTE
        + utc.second
    )
    return seconds


__all__ = ["to_epoch_seconds"]
