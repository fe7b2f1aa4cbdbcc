"""Current Unix time from the system clock."""

from __future__ import annotations

import logging
import math
import time
from typing import Callable

from utctime.errors import ClockError

logger = logging.getLogger(__name__)


class Clock:
    """Reads the system clock as whole Unix epoch seconds.

    Args:
        time_source: Returns seconds since the epoch as a float. Defaults to
            ``time.time``.

    Examples:
        >>> Clock(time_source=lambda: 1501789994.7).now()
        1501789994
    """

    def __init__(self, time_source: Callable[[], float] = time.time) -> None:
        self._time_source = time_source

    def now(self) -> int:
        """Return the current time in whole seconds since the epoch.

        Fractions are floored, matching ``time_t`` truncation for
        non-negative readings.

        Raises:
            ClockError: If the clock reads before 1970-01-01 00:00:00 UTC.
                Such a reading means the clock is unset or broken; calling
                again later may succeed.
        """
        reading = self._time_source()
        seconds = math.floor(reading)
        if seconds < 0:
            logger.error("get_current_unix_time_failed: clock reads %r", reading)
            raise ClockError(reading)
        return seconds


__all__ = ["Clock"]
