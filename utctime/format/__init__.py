"""Fixed-format encoding and decoding.

This module provides conversions between epoch values and the two
fixed-layout strings used on the wire:
    - Input:  YYYY-MM-DDTHH:MM:SS+XXXX (decoded to epoch seconds)
    - Output: YYYY-MM-DDTHH:MM:SS.mmmZ (encoded from epoch milliseconds)

The two layouts are intentionally asymmetric: the input postfix is only
length-checked, while the output always ends in a literal ``Z``.

Functions:
    decode: Decode an input string to epoch seconds.
    decode_fields: Decode an input string to a BrokenDownTime.

Classes:
    Iso8601Encoder: Encode millisecond time points.

Examples:
    >>> from utctime.format import decode
    >>> decode("2017-08-03T19:53:14+0000")
    1501789994
"""

from __future__ import annotations

from utctime.format.decoder import decode, decode_fields
from utctime.format.encoder import Iso8601Encoder
from utctime.format.layout import ENCODED_LENGTH, FIELDS, FieldSpec

__all__: list[str] = [
    # Decoding
    "decode",
    "decode_fields",
    "ENCODED_LENGTH",
    "FIELDS",
    "FieldSpec",
    # Encoding
    "Iso8601Encoder",
]
