"""Calendar utilities for utctime.

This module provides the closed-form helpers used by the epoch arithmetic:
leap year logic, leap-day counting relative to 1970, and cumulative
days-before-month lookups. Nothing here iterates over years or days, and
nothing consults the host's timezone database.

Years are counted in the proleptic Gregorian calendar.

This module is not part of the public API.
"""

from __future__ import annotations

from utctime._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_BEFORE_MONTH_LEAP,
    NEG_BASE_4,
    NEG_BASE_100,
    NEG_BASE_400,
    POS_BASE_4,
    POS_BASE_100,
    POS_BASE_400,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The full year to check (e.g. 2024, not 124).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2004)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (C semantics).

    ``//`` floors toward negative infinity, so negative numerators are
    divided by magnitude and the sign restored.
    """
    if numerator < 0:
        return -(-numerator // denominator)
    return numerator // denominator


def leap_days_since_epoch(years_since_epoch: int) -> int:
    """Count the leap days between 1970 and ``1970 + years_since_epoch``.

    For a non-negative offset this is the number of February 29ths in the
    years ``[1970, 1970 + years_since_epoch)``. For a negative offset it is
    minus the number of February 29ths in ``[1970 + years_since_epoch, 1970)``,
    so that ``years * 365 + leap_days`` is the signed day count from the
    epoch to January 1st of the target year.

    The two branches use different base constants. The positive branch
    shifts the offset so the first leap year after 1970 (1972) is counted
    once its year is complete; the negative branch uses division rounding
    toward zero, with bases chosen so that 1968, 1900 and 1600 fall on
    exact multiples. Both agree at offset 0.

    Args:
        years_since_epoch: Target year minus 1970. May be negative.

    Returns:
        Signed number of leap days.

    Examples:
        >>> leap_days_since_epoch(0)
        0
        >>> leap_days_since_epoch(30)  # 1972..1996
        7
        >>> leap_days_since_epoch(31)  # 2000 included
        8
        >>> leap_days_since_epoch(-2)  # 1968
        -1
        >>> leap_days_since_epoch(-70)  # 1900 itself is not a leap year
        -17
    """
    y = years_since_epoch
    if y >= 0:
        return (
            (y + POS_BASE_4) // 4
            - (y + POS_BASE_100) // 100
            + (y + POS_BASE_400) // 400
        )
    return (
        _trunc_div(y - NEG_BASE_4, 4)
        - _trunc_div(y - NEG_BASE_100, 100)
        + _trunc_div(y - NEG_BASE_400, 400)
    )


def days_before_month(year: int, month_index: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The full year (selects the leap or common table).
        month_index: The 0-based month (0 = January, 11 = December).

    Returns:
        Number of days before the month in that year.

    Raises:
        IndexError: If month_index is outside 0-11.
    """
    if month_index < 0:
        raise IndexError(f"month index must be 0-11, got {month_index}")
    table = DAYS_BEFORE_MONTH_LEAP if is_leap_year(year) else DAYS_BEFORE_MONTH
    return table[month_index]


__all__ = [
    "is_leap_year",
    "leap_days_since_epoch",
    "days_before_month",
]
