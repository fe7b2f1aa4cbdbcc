"""TimeConverter: the SDK-facing bundle of time conversions.

TimeConverter composes the epoch arithmetic, the fixed-format decoder and
encoder, and the clock. Its collaborators are passed in (or created per
instance) rather than looked up from process-wide singletons, so tests and
embedders decide which calendar access and clock it uses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from utctime.convert.epoch import to_epoch_seconds
from utctime.format.decoder import decode
from utctime.format.encoder import Iso8601Encoder, TimePoint
from utctime.system.clock import Clock
from utctime.system.safe_calendar import SafeCalendarAccess

if TYPE_CHECKING:
    from utctime.core.broken_down import BrokenDownTime
    from utctime.system.safe_calendar import CalendarAccess


class TimeConverter:
    """Converts between broken-down UTC time, encoded strings and epoch values.

    Every method is stateless with respect to the caller and safe to call
    from several threads at once, provided the calendar access is (the
    default SafeCalendarAccess is).

    Args:
        calendar_access: UTC breakdown used by the encoder. A private
            SafeCalendarAccess is created when omitted.
        clock: Source of the current time. A Clock over ``time.time`` is
            created when omitted.

    Examples:
        >>> converter = TimeConverter()
        >>> converter.iso8601_to_unix("2017-08-03T19:53:14+0000")
        1501789994
        >>> converter.to_utc_iso8601(1501789994123)
        '2017-08-03T19:53:14.123Z'
    """

    def __init__(
        self,
        calendar_access: CalendarAccess | None = None,
        clock: Clock | None = None,
    ) -> None:
        if calendar_access is None:
            calendar_access = SafeCalendarAccess()
        self._encoder = Iso8601Encoder(calendar_access)
        self._clock = clock if clock is not None else Clock()

    @property
    def calendar_access(self) -> CalendarAccess:
        return self._encoder.calendar_access

    def to_utc_epoch(self, utc: BrokenDownTime) -> int:
        """Convert broken-down UTC fields to epoch seconds.

        See :func:`utctime.convert.to_epoch_seconds`.
        """
        return to_epoch_seconds(utc)

    def iso8601_to_unix(self, text: str) -> int:
        """Decode ``YYYY-MM-DDTHH:MM:SS+XXXX`` to epoch seconds.

        See :func:`utctime.format.decode`.
        """
        return decode(text)

    def current_unix_time(self) -> int:
        """Return the current time in whole epoch seconds.

        Raises:
            ClockError: If the clock reads before the epoch.
        """
        return self._clock.now()

    def to_utc_iso8601(self, time_point: TimePoint) -> str:
        """Encode a time point as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

        See :meth:`utctime.format.Iso8601Encoder.encode`.
        """
        return self._encoder.encode(time_point)


__all__ = ["TimeConverter"]
