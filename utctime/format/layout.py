"""Fixed layout of the encoded input time string.

The decoder accepts strings of the shape::

    YYYY-MM-DDTHH:MM:SS+XXXX
    0123456789012345678901234

Every field sits at a fixed offset. The offsets are computed once from the
field widths and separator widths below, so the table is the single source
of truth for the layout and the expected length.
"""

from __future__ import annotations

from typing import NamedTuple

# Field widths
YEAR_WIDTH: int = 4
MONTH_WIDTH: int = 2
DAY_WIDTH: int = 2
HOUR_WIDTH: int = 2
MINUTE_WIDTH: int = 2
SECOND_WIDTH: int = 2
POSTFIX_WIDTH: int = 4

# Separators between fields
DASH_SEPARATOR: str = "-"
T_SEPARATOR: str = "T"
COLON_SEPARATOR: str = ":"
PLUS_SEPARATOR: str = "+"


class FieldSpec(NamedTuple):
    """Position of one numeric field inside the encoded string."""

    name: str
    offset: int
    width: int

    @property
    def end(self) -> int:
        return self.offset + self.width

    def extract(self, text: str) -> str:
        return text[self.offset:self.end]


def _build_layout(
    parts: tuple[tuple[str, int, str], ...],
) -> tuple[tuple[FieldSpec, ...], int]:
    """Lay out (name, width, trailing separator) rows end to end.

    Returns:
        The field table and the offset just past the last separator.
    """
    fields = []
    offset = 0
    for name, width, separator in parts:
        fields.append(FieldSpec(name, offset, width))
        offset += width + len(separator)
    return tuple(fields), offset


FIELDS, _POSTFIX_OFFSET = _build_layout(
    (
        ("year", YEAR_WIDTH, DASH_SEPARATOR),
        ("month", MONTH_WIDTH, DASH_SEPARATOR),
        ("day", DAY_WIDTH, T_SEPARATOR),
        ("hour", HOUR_WIDTH, COLON_SEPARATOR),
        ("minute", MINUTE_WIDTH, COLON_SEPARATOR),
        ("second", SECOND_WIDTH, PLUS_SEPARATOR),
    )
)

# The sign character is counted by the "second" row's trailing separator.
ENCODED_LENGTH: int = _POSTFIX_OFFSET + POSTFIX_WIDTH  # 24


__all__ = [
    "FieldSpec",
    "FIELDS",
    "ENCODED_LENGTH",
]
