"""Internal utilities for utctime.

This module contains private implementation details:
    - Constants and magic numbers
    - Closed-form calendar helpers
    - Fixed-width field parsing

Note: This module is not part of the public API.
"""

from __future__ import annotations

from utctime._internal.calendar import (
    days_before_month,
    is_leap_year,
    leap_days_since_epoch,
)
from utctime._internal.parsing import parse_integer

__all__: list[str] = [
    "days_before_month",
    "is_leap_year",
    "leap_days_since_epoch",
    "parse_integer",
]
