"""Integer parsing for fixed-width string fields.

This module is not part of the public API.
"""

from __future__ import annotations


def parse_integer(text: str) -> int | None:
    """Parse a non-negative decimal integer made only of ASCII digits.

    Unlike ``int()``, this rejects signs, surrounding whitespace, underscores
    and non-ASCII digits, so a fixed-width field either holds a plain number
    or is reported as unparseable.

    Args:
        text: The field text.

    Returns:
        The parsed integer, or None if the text is empty or not purely numeric.

    Examples:
        >>> parse_integer("0042")
        42
        >>> parse_integer(" 42") is None
        True
        >>> parse_integer("-1") is None
        True
    """
    if not text or not text.isascii() or not text.isdigit():
        return None
    return int(text)


__all__ = ["parse_integer"]
