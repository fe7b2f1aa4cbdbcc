"""Epoch conversion utilities.

This module provides the calendar arithmetic engine converting
broken-down UTC timestamps to Unix epoch seconds.

Examples:
    >>> from utctime.core import BrokenDownTime
    >>> from utctime.convert import to_epoch_seconds

    >>> to_epoch_seconds(BrokenDownTime(2000, 3, 1))
    951868800
"""

from __future__ import annotations

from utctime.convert.epoch import to_epoch_seconds

__all__ = [
    "to_epoch_seconds",
]
