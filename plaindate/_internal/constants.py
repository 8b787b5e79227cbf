"""Internal constants for plaindate.

These constants define the calendar tables and reference points used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Weekday reference: 1970-01-01 was a Thursday (Sunday=0)
EPOCH: tuple[int, int, int] = (1970, 1, 1)
EPOCH_DAY_OF_WEEK: int = 4

# Indexed by day of week, Sunday first
WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Range of years representable by datetime.datetime
MIN_INSTANT_YEAR: int = 1
MAX_INSTANT_YEAR: int = 9999


__all__ = [
    "DAYS_IN_MONTH",
    "EPOCH",
    "EPOCH_DAY_OF_WEEK",
    "WEEKDAY_NAMES",
    "MIN_INSTANT_YEAR",
    "MAX_INSTANT_YEAR",
]
