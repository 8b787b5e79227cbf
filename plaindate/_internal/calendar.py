"""Calendar utilities for plaindate.

This module provides the leap year rule and month-length lookups of the
proleptic Gregorian calendar.

This module is not part of the public API.
"""

from __future__ import annotations

from plaindate._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def month_length(year: int, month: int) -> int:
    """Return the length of a month, wrapping months outside 1-12.

    Day arithmetic runs on dates that were never validated, so the
    lookup must not fail: month 13 reads as January, month 0 as
    December.
    """
    return days_in_month(year, (month - 1) % 12 + 1)


def month_lengths(year: int) -> list[int]:
    """Return the twelve month lengths of a year, January first.

    Examples:
        >>> month_lengths(2024)[1]
        29
        >>> month_lengths(2023)[1]
        28
    """
    return [days_in_month(year, month) for month in range(1, 13)]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


__all__ = [
    "is_leap_year",
    "days_in_month",
    "month_length",
    "month_lengths",
    "days_in_year",
]
