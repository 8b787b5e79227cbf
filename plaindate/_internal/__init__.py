"""Internal utilities for plaindate.

This module contains private implementation details:
    - Calendar tables and reference constants
    - Leap year and month-length helpers
    - Boolean validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from plaindate._internal.calendar import (
    days_in_month,
    days_in_year,
    is_leap_year,
    month_length,
    month_lengths,
)
from plaindate._internal.validation import is_integer_token, is_valid_ymd

__all__: list[str] = [
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "month_length",
    "month_lengths",
    "is_integer_token",
    "is_valid_ymd",
]
