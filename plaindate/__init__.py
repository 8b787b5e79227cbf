"""plaindate: calendar dates without time of day or timezone.

plaindate provides PlainDate, an immutable (year, month, day) value in
the proleptic Gregorian calendar, for code that needs to reason about
"which day" without instants, offsets or daylight-saving transitions.

Core Types:
    PlainDate: Calendar date (year, month, day)

Units:
    DayOfWeek: Sunday-first day of week (SUNDAY=0 .. SATURDAY=6)

Format Functions:
    parse_iso_date: Parse a YYYY-MM-DD string
    format_iso_date: Format a PlainDate as YYYY-MM-DD

Exceptions:
    PlainDateError: Base exception
    ParseError: Failed to parse string
    MalformedInputError: String is not three integer components
    InvalidDateError: Components name no calendar day
    ConversionError: Date cannot be represented as a datetime

Example:
    >>> from plaindate import PlainDate
    >>> start = PlainDate.from_iso_string("2024-02-15")
    >>> start.add_days(15).to_iso_string()
    '2024-03-01'
    >>> start.get_days_difference(PlainDate(2025, 2, 15))
    366
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from plaindate.core.plain_date import PlainDate

# Units
from plaindate.units.weekday import DayOfWeek

# Exceptions
from plaindate.errors import (
    ConversionError,
    InvalidDateError,
    MalformedInputError,
    ParseError,
    PlainDateError,
)

# Format functions
from plaindate.format import format_iso_date, parse_iso_date

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "PlainDate",
    # Units
    "DayOfWeek",
    # Exceptions
    "PlainDateError",
    "ParseError",
    "MalformedInputError",
    "InvalidDateError",
    "ConversionError",
    # Format functions
    "parse_iso_date",
    "format_iso_date",
]
