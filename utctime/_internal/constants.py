"""Internal constants for utctime.

These constants define the calendar magic numbers used by the epoch
arithmetic and the millisecond split. This module is not part of the
public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

DAYS_PER_YEAR: int = 365
SECONDS_PER_YEAR: int = DAYS_PER_YEAR * SECONDS_PER_DAY
MONTHS_PER_YEAR: int = 12

# Year bases
EPOCH_YEAR: int = 1970
TM_YEAR_BASE: int = 1900  # struct tm counts years from 1900

# Cumulative days before each month (0-indexed months), non-leap years
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0,
    31,                                                    # Jan
    31 + 28,                                               # Feb
    31 + 28 + 31,                                          # Mar
    31 + 28 + 31 + 30,                                     # Apr
    31 + 28 + 31 + 30 + 31,                                # May
    31 + 28 + 31 + 30 + 31 + 30,                           # Jun
    31 + 28 + 31 + 30 + 31 + 30 + 31,                      # Jul
    31 + 28 + 31 + 30 + 31 + 30 + 31 + 31,                 # Aug
    31 + 28 + 31 + 30 + 31 + 30 + 31 + 31 + 30,            # Sep
    31 + 28 + 31 + 30 + 31 + 30 + 31 + 31 + 30 + 31,       # Oct
    31 + 28 + 31 + 30 + 31 + 30 + 31 + 31 + 30 + 31 + 30,  # Nov
)

# Same, for leap years
DAYS_BEFORE_MONTH_LEAP: tuple[int, ...] = (
    0,
    31,                                                    # Jan
    31 + 29,                                               # Feb
    31 + 29 + 31,                                          # Mar
    31 + 29 + 31 + 30,                                     # Apr
    31 + 29 + 31 + 30 + 31,                                # May
    31 + 29 + 31 + 30 + 31 + 30,                           # Jun
    31 + 29 + 31 + 30 + 31 + 30 + 31,                      # Jul
    31 + 29 + 31 + 30 + 31 + 30 + 31 + 31,                 # Aug
    31 + 29 + 31 + 30 + 31 + 30 + 31 + 31 + 30,            # Sep
    31 + 29 + 31 + 30 + 31 + 30 + 31 + 31 + 30 + 31,       # Oct
    31 + 29 + 31 + 30 + 31 + 30 + 31 + 31 + 30 + 31 + 30,  # Nov
)

# Leap-day counting bases for years on or after the epoch year
POS_BASE_4: int = (EPOCH_YEAR + 3) % 4
POS_BASE_100: int = (EPOCH_YEAR + 99) % 100
POS_BASE_400: int = (EPOCH_YEAR + 399) % 400

# Leap-day counting bases for years before the epoch year (truncating division)
NEG_BASE_4: int = 4 - (EPOCH_YEAR % 4)
NEG_BASE_100: int = 100 - (EPOCH_YEAR % 100)
NEG_BASE_400: int = 400 - (EPOCH_YEAR % 400)

# Signed 64-bit seconds counter limits
MIN_EPOCH_SECONDS: int = -(2**63)
MAX_EPOCH_SECONDS: int = 2**63 - 1


__all__ = [
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "DAYS_PER_YEAR",
    "SECONDS_PER_YEAR",
    "MONTHS_PER_YEAR",
    "EPOCH_YEAR",
    "TM_YEAR_BASE",
    "DAYS_BEFORE_MONTH",
    "DAYS_BEFORE_MONTH_LEAP",
    "POS_BASE_4",
    "POS_BASE_100",
    "POS_BASE_400",
    "NEG_BASE_4",
    "NEG_BASE_100",
    "NEG_BASE_400",
    "MIN_EPOCH_SECONDS",
    "MAX_EPOCH_SECONDS",
]
