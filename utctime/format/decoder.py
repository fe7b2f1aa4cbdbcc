"""Decoding of fixed-layout ISO 8601 time strings.

This module provides decode, which converts a string of the shape
``YYYY-MM-DDTHH:MM:SS+XXXX`` (exactly 24 characters) into Unix epoch
seconds.

Fields are sliced at fixed offsets from the layout table rather than found
by scanning for separators. Consequences worth knowing:

- Separator characters are never inspected; ``2017/08/03 19.53.14+0000``
  decodes the same as ``2017-08-03T19:53:14+0000``.
- The 5-character ``+XXXX`` postfix is only counted toward the length. Its
  sign and digits are not interpreted, and the result is always the
  wall-clock fields read as UTC, whatever offset the postfix spells.

Examples:
    >>> from utctime.format import decode

    >>> decode("2017-08-03T19:53:14+0000")
    1501789994

    >>> decode("1970-01-01T00:00:00+0000")
    0
"""

from __future__ import annotations

import logging

from utctime._internal.parsing import parse_integer
from utctime.convert.epoch import to_epoch_seconds
from utctime.core.broken_down import BrokenDownTime
from utctime.errors import FieldParseError, LengthMismatchError, MissingArgumentError
from utctime.format.layout import ENCODED_LENGTH, FIELDS

logger = logging.getLogger(__name__)


def decode_fields(text: str) -> BrokenDownTime:
    """Slice and parse the six numeric fields of an encoded time string.

    Args:
        text: The encoded string.

    Returns:
        The UTC fields as a BrokenDownTime (is_dst always False).

    Raises:
        MissingArgumentError: If text is None.
        TypeError: If text is not a string.
        LengthMismatchError: If text is not exactly ENCODED_LENGTH characters.
        FieldParseError: If a field is not purely numeric.
    """
    if text is None:
        raise MissingArgumentError("text")
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    if len(text) != ENCODED_LENGTH:
        logger.error(
            "convert_iso8601_to_unix_failed: unexpected time string length %d",
            len(text),
        )
        raise LengthMismatchError(ENCODED_LENGTH, len(text))

    values: dict[str, int] = {}
    for field in FIELDS:
        raw = field.extract(text)
        value = parse_integer(raw)
        if value is None:
            logger.error(
                "convert_iso8601_to_unix_failed: error parsing %s, input %r",
                field.name,
                text,
            )
            raise FieldParseError(field.name, raw)
        values[field.name] = value

    return BrokenDownTime(is_dst=False, **values)


def decode(text: str) -> int:
    """Decode an encoded time string into Unix epoch seconds.

    Args:
        text: A string of the shape ``YYYY-MM-DDTHH:MM:SS+XXXX``.

    Returns:
        Seconds since 1970-01-01 00:00:00 UTC. Negative for years before 1970.

    Raises:
        MissingArgumentError: If text is None.
        TypeError: If text is not a string.
        LengthMismatchError: If text is not exactly 24 characters.
        FieldParseError: If a field is not purely numeric. The exception's
            ``field`` attribute names it ("year", "month", ...).

    Examples:
        >>> decode("2000-01-01T00:00:00+0000")
        946684800

        >>> decode("2017-08-03T19:53:14")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        LengthMismatchError: unexpected time string length: expected 24, got 19
    """
    return to_epoch_seconds(decode_fields(text))


__all__ = ["decode", "decode_fields"]
