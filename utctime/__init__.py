"""utctime: platform-independent UTC time conversions for client SDKs.

utctime converts between three representations of an instant without
relying on the host's timezone database or local-time functions:

    - broken-down UTC calendar fields (BrokenDownTime)
    - fixed-layout strings (YYYY-MM-DDTHH:MM:SS+XXXX in,
      YYYY-MM-DDTHH:MM:SS.mmmZ out)
    - Unix epoch seconds

Core Types:
    BrokenDownTime: UTC calendar fields
    TimeConverter: Facade bundling every conversion

Functions:
    to_epoch_seconds: BrokenDownTime -> epoch seconds
    decode: Encoded string -> epoch seconds

Classes:
    Iso8601Encoder: Epoch milliseconds -> encoded string
    SafeCalendarAccess: Thread-safe UTC breakdown
    Clock: Current epoch seconds

Exceptions:
    UtcTimeError: Base exception
    MissingArgumentError, LengthMismatchError, FieldParseError,
    CalendarLookupError, FormatError, ClockError

Example:
    >>> from utctime import TimeConverter
    >>> converter = TimeConverter()
    >>> converter.iso8601_to_unix("2017-08-03T19:53:14+0000")
    1501789994
    >>> converter.to_utc_iso8601(0)
    '1970-01-01T00:00:00.000Z'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from utctime.core.broken_down import BrokenDownTime

# Conversions
from utctime.convert.epoch import to_epoch_seconds
from utctime.format.decoder import decode
from utctime.format.encoder import Iso8601Encoder
from utctime.system.clock import Clock
from utctime.system.safe_calendar import SafeCalendarAccess
from utctime.converter import TimeConverter

# Exceptions
from utctime.errors import (
    CalendarLookupError,
    ClockError,
    FieldParseError,
    FormatError,
    LengthMismatchError,
    MissingArgumentError,
    ParseError,
    UtcTimeError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "BrokenDownTime",
    "TimeConverter",
    # Conversions
    "to_epoch_seconds",
    "decode",
    "Iso8601Encoder",
    "Clock",
    "SafeCalendarAccess",
    # Exceptions
    "UtcTimeError",
    "MissingArgumentError",
    "ParseError",
    "LengthMismatchError",
    "FieldParseError",
    "CalendarLookupError",
    "FormatError",
    "ClockError",
]
