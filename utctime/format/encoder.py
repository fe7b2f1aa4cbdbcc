"""Encoding of millisecond time points as UTC ISO 8601 strings.

This module provides Iso8601Encoder, which renders a time point as
``YYYY-MM-DDTHH:MM:SS.mmmZ`` (always 24 characters, always UTC, always
millisecond precision).

The encoder does not do calendar arithmetic itself. It hands the
whole-second part to a CalendarAccess object supplied at construction,
normally a SafeCalendarAccess shared with the rest of the application.

Examples:
    >>> from utctime.format import Iso8601Encoder
    >>> from utctime.system import SafeCalendarAccess

    >>> encoder = Iso8601Encoder(SafeCalendarAccess())
    >>> encoder.encode(0)
    '1970-01-01T00:00:00.000Z'

    >>> encoder.encode(1005)
    '1970-01-01T00:00:01.005Z'
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import TYPE_CHECKING, Union

from utctime._internal.constants import MILLIS_PER_SECOND
from utctime.convert.epoch import to_epoch_seconds
from utctime.core.broken_down import BrokenDownTime
from utctime.errors import CalendarLookupError, FormatError, MissingArgumentError

if TYPE_CHECKING:
    from utctime.system.safe_calendar import CalendarAccess

logger = logging.getLogger(__name__)

# Length of YYYY-MM-DDTHH:MM:SS
DATE_TIME_LENGTH: int = 19
# Length of the full output, YYYY-MM-DDTHH:MM:SS.mmmZ
ENCODED_OUTPUT_LENGTH: int = DATE_TIME_LENGTH + len(".000Z")

TimePoint = Union[int, _datetime.datetime]


def format_date_time(utc: BrokenDownTime) -> str:
    """Format UTC fields as ``YYYY-MM-DDTHH:MM:SS`` with zero padding.

    Widths are minimums: years past 9999 produce a longer string and
    negative years a leading sign, both of which the encoder rejects.
    """
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
    )


def to_epoch_millis(value: TimePoint) -> int:
    """Normalize a time point to integer milliseconds since the epoch.

    Args:
        value: Milliseconds as an int, or an aware datetime.

    Returns:
        Milliseconds since 1970-01-01 00:00:00 UTC. Sub-millisecond parts of
        a datetime are dropped.

    Raises:
        MissingArgumentError: If value is None.
        TypeError: If value is neither an int nor a datetime (bool is rejected).
        ValueError: If value is a naive datetime.
        FormatError: If the UTC instant of an aware datetime falls outside
            years 1-9999 (e.g. 0001-01-01T00:00+01:00).
    """
    if value is None:
        raise MissingArgumentError("time_point")
    if isinstance(value, _datetime.datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError(
                "datetime must be timezone-aware; naive values have no defined UTC instant"
            )
        try:
            utc = value.astimezone(_datetime.timezone.utc)
        except OverflowError as e:
            logger.error("convert_time_to_utc_iso8601_failed: %s is out of range in UTC", value)
            raise FormatError(f"{value.isoformat()} has no UTC instant within years 1-9999") from e
        seconds = to_epoch_seconds(
            BrokenDownTime(utc.year, utc.month, utc.day, utc.hour, utc.minute, utc.second)
        )
        return seconds * MILLIS_PER_SECOND + utc.microsecond // 1000
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int milliseconds or datetime, got {type(value).__name__}")
    return value


class Iso8601Encoder:
    """Renders time points as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Args:
        calendar_access: Breaks whole epoch seconds down into UTC fields.
            Held by reference; the same instance may be shared by many
            encoders and threads.
    """

    def __init__(self, calendar_access: CalendarAccess) -> None:
        if calendar_access is None:
            raise MissingArgumentError("calendar_access")
        self._calendar_access = calendar_access

    @property
    def calendar_access(self) -> CalendarAccess:
        return self._calendar_access

    def encode(self, time_point: TimePoint) -> str:
        """Encode a time point as a 24-character UTC string.

        The millisecond remainder is taken with floor semantics, so it is
        always 0-999: for time points before the epoch the borrow goes into
        the seconds (-1 ms encodes as ``1969-12-31T23:59:59.999Z``).

        Args:
            time_point: Milliseconds since the epoch, or an aware datetime.

        Returns:
            The encoded string, exactly 24 characters.

        Raises:
            MissingArgumentError: If time_point is None.
            TypeError: If time_point has an unsupported type.
            ValueError: If time_point is a naive datetime.
            CalendarLookupError: If the calendar access cannot break the
                seconds down (e.g. the platform cannot represent the year).
            FormatError: If the date-time part does not fit the 19-character
                layout, i.e. the year is outside 0000-9999, or an aware
                datetime shifts outside years 1-9999 in UTC.
        """
        millis = to_epoch_millis(time_point)
        seconds, remainder = divmod(millis, MILLIS_PER_SECOND)

        utc = self._calendar_access.get_utc_broken_down(seconds)
        if utc is None:
            logger.error(
                "convert_time_to_utc_iso8601_failed: cannot retrieve calendar fields for %d",
                seconds,
            )
            raise CalendarLookupError(seconds)

        date_time = format_date_time(utc)
        # A negative year like -001 keeps the length but is not a valid layout
        if len(date_time) != DATE_TIME_LENGTH or not date_time[:4].isdigit():
            logger.error(
                "convert_time_to_utc_iso8601_failed: formatting produced %r", date_time
            )
            raise FormatError(
                f"formatted date-time {date_time!r} does not fit YYYY-MM-DDTHH:MM:SS"
            )

        return f"{date_time}.{remainder:03d}Z"


__all__ = [
    "Iso8601Encoder",
    "format_date_time",
    "to_epoch_millis",
    "DATE_TIME_LENGTH",
    "ENCODED_OUTPUT_LENGTH",
]
