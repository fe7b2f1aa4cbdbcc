"""Thread-safe access to the platform's UTC calendar breakdown.

SafeCalendarAccess turns epoch seconds into a BrokenDownTime using
``time.gmtime``. Calls are serialized behind a lock, so a single instance
can be shared by any number of threads even on platforms where the
underlying C ``gmtime`` keeps static state.

There is deliberately no local-time counterpart: conversions in this
package never go through the host's timezone rules.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Protocol

from utctime._internal.constants import MAX_EPOCH_SECONDS, MIN_EPOCH_SECONDS
from utctime.core.broken_down import BrokenDownTime

logger = logging.getLogger(__name__)


class CalendarAccess(Protocol):
    """Anything able to break epoch seconds down into UTC fields."""

    def get_utc_broken_down(self, seconds: int) -> BrokenDownTime | None:
        ...


class SafeCalendarAccess:
    """Lock-guarded wrapper around the platform ``gmtime``.

    Args:
        gmtime: The breakdown primitive. Defaults to ``time.gmtime``; tests
            substitute fakes to simulate platform failures.

    Examples:
        >>> access = SafeCalendarAccess()
        >>> access.get_utc_broken_down(0)
        BrokenDownTime(year=1970, month=1, day=1, hour=0, minute=0, second=0, is_dst=False)
    """

    def __init__(
        self,
        *,
        gmtime: Callable[[int], time.struct_time] = time.gmtime,
    ) -> None:
        self._gmtime = gmtime
        self._lock = threading.Lock()

    def get_utc_broken_down(self, seconds: int) -> BrokenDownTime | None:
        """Break epoch seconds down into UTC calendar fields.

        Args:
            seconds: Seconds since the epoch. May be negative.

        Returns:
            The UTC fields, or None if the value is outside the signed 64-bit
            range or the platform cannot represent it.
        """
        if not MIN_EPOCH_SECONDS <= seconds <= MAX_EPOCH_SECONDS:
            logger.debug("epoch value %d is outside the 64-bit range", seconds)
            return None
        with self._lock:
            try:
                value = self._gmtime(seconds)
            except (OverflowError, OSError, ValueError) as exc:
                logger.debug("gmtime(%d) failed: %s", seconds, exc)
                return None
        return BrokenDownTime.from_struct_time(value)


__all__ = ["CalendarAccess", "SafeCalendarAccess"]
