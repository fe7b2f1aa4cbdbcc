"""Core value types for utctime.

Types:
    BrokenDownTime: UTC calendar fields (year, month, day, hour, minute, second)
"""

from __future__ import annotations

from utctime.core.broken_down import BrokenDownTime

__all__: list[str] = [
    "BrokenDownTime",
]
