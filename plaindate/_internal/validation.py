"""Validation utilities for plaindate.

Validity in plaindate is a query, not a constructor guard: these helpers
return booleans and never raise.

This module is not part of the public API.
"""

from __future__ import annotations

from plaindate._internal.calendar import days_in_month


def is_integer_token(value: str) -> bool:
    """Check that a string is the plain decimal spelling of an integer.

    The token must format back to itself, with one allowance: a single
    leading zero in front of the canonical form is accepted. "05" and
    "00" pass; "005", "+5", " 5", "5.0" and "1_0" do not.

    Args:
        value: The token to check.

    Returns:
        True if the token is accepted.

    Examples:
        >>> is_integer_token("2024")
        True
        >>> is_integer_token("05")
        True
        >>> is_integer_token("NOV")
        False
    """
    try:
        number = int(value)
    except ValueError:
        return False
    return value == str(number) or value == f"0{number}"


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    """Return True if year, month and day form a real calendar date.

    Years before 1 are rejected.

    Examples:
        >>> is_valid_ymd(2024, 2, 29)
        True
        >>> is_valid_ymd(2023, 2, 29)
        False
        >>> is_valid_ymd(0, 1, 1)
        False
    """
    if year < 1 or month < 1 or month > 12 or day < 1:
        return False
    return day <= days_in_month(year, month)


__all__ = [
    "is_integer_token",
    "is_valid_ymd",
]
