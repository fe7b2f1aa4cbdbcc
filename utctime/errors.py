"""utctime exception hierarchy.

All utctime-specific exceptions inherit from UtcTimeError. Each subclass
carries a stable ``error_code`` string identifying the failure kind, used by
the JSON-lines worker and by callers that need to tell failures apart
without matching on class names.
"""

from __future__ import annotations


class UtcTimeError(Exception):
    """Base exception for all utctime errors."""

    error_code: str = "UtcTimeError"


class MissingArgumentError(UtcTimeError):
    """A required value was not provided.

    Raised when ``None`` is passed where a timestamp, string or broken-down
    time is required.
    """

    error_code = "NullOutputParameter"

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class ParseError(UtcTimeError):
    """Failed to decode an encoded time string."""

    error_code = "ParseError"


class LengthMismatchError(ParseError):
    """Encoded time string does not have the fixed layout length.

    Examples:
        - "2017-08-03T19:53:14" (no postfix)
        - "2017-08-03T19:53:14.000+0000" (fractional seconds)
    """

    error_code = "LengthMismatch"

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"unexpected time string length: expected {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class FieldParseError(ParseError):
    """A fixed-width field of an encoded time string is not numeric."""

    error_code = "FieldParseError"

    def __init__(self, field: str, text: str) -> None:
        super().__init__(f"error parsing {field}: {text!r}")
        self.field = field
        self.text = text


class CalendarLookupError(UtcTimeError):
    """The platform could not break an epoch value down into UTC fields."""

    error_code = "CalendarLookupFailed"

    def __init__(self, seconds: int) -> None:
        super().__init__(f"cannot retrieve UTC calendar fields for {seconds}")
        self.seconds = seconds


class FormatError(UtcTimeError):
    """Formatting a broken-down time produced an impossible result.

    The date-time layout always yields 19 characters; an empty or
    differently sized result (e.g. a five-digit year) is reported here.
    """

    error_code = "FormatError"


class ClockError(UtcTimeError):
    """The system clock reported a time before the Unix epoch."""

    error_code = "ClockError"

    def __init__(self, reading: float) -> None:
        super().__init__(f"system clock reading is before the epoch: {reading}")
        self.reading = reading


__all__ = [
    "UtcTimeError",
    "MissingArgumentError",
    "ParseError",
    "LengthMismatchError",
    "FieldParseError",
    "CalendarLookupError",
    "FormatError",
    "ClockError",
]
