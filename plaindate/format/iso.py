"""ISO date formatting and parsing.

This module converts PlainDate values to and from the YYYY-MM-DD text
form.

Functions:
    format_iso_date: Format a PlainDate as YYYY-MM-DD.
    parse_iso_date: Parse YYYY-MM-DD text into a PlainDate.

The year is written as-is, without padding to four digits; month and
day are zero-padded to two. Parsing splits on "-", so a negative year
cannot be read back.

Examples:
    >>> from plaindate import PlainDate
    >>> from plaindate.format import format_iso_date, parse_iso_date

    >>> format_iso_date(PlainDate(2024, 3, 1))
    '2024-03-01'

    >>> parse_iso_date("2024-03-01")
    PlainDate(2024, 3, 1)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from plaindate._internal.validation import is_integer_token
from plaindate.errors import InvalidDateError, MalformedInputError, ParseError

if TYPE_CHECKING:
    from plaindate.core.plain_date import PlainDate

logger = logging.getLogger(__name__)


def _pad(value: int) -> str:
    # Anything below 10 gets one "0", negatives included ("0-1")
    return f"0{value}" if value < 10 else str(value)


def format_iso_date(date: PlainDate) -> str:
    """Format a date as YYYY-MM-DD.

    Fields are written as stored, so invalid dates format too.

    Examples:
        >>> format_iso_date(PlainDate(2024, 1, 5))
        '2024-01-05'
        >>> format_iso_date(PlainDate(987, 10, 12))
        '987-10-12'
    """
    return f"{date.year}-{_pad(date.month)}-{_pad(date.day)}"


def _read(text: str) -> PlainDate:
    # Import here to avoid circular imports
    from plaindate.core.plain_date import PlainDate

    parts = text.split("-")
    if len(parts) != 3:
        raise MalformedInputError(
            f"Expression '{text}' is not a valid ISO string", text, text
        )

    for part in parts:
        if not is_integer_token(part):
            raise MalformedInputError(
                f"Expression '{part}' in '{text}' is not valid", text, part
            )

    year, month, day = (int(part) for part in parts)
    date = PlainDate(year, month, day)
    if not date.is_valid():
        raise InvalidDateError(f"Expression '{text}' is not a valid date", text)
    return date


def parse_iso_date(text: str, fallback: PlainDate | None = None) -> PlainDate:
    """Parse a YYYY-MM-DD string into a PlainDate.

    Parsing runs in three steps: the string must split on "-" into
    exactly three components, each component must be an integer token
    (see is_integer_token), and the resulting date must be valid.

    Args:
        text: The string to parse.
        fallback: Returned instead of raising when parsing fails. It is
            returned as given, without being validated.

    Returns:
        The parsed date, or the fallback.

    Raises:
        MalformedInputError: If the string has the wrong shape and no
            fallback was given.
        InvalidDateError: If the string names no calendar day and no
            fallback was given.

    Examples:
        >>> parse_iso_date("2024-02-29")
        PlainDate(2024, 2, 29)

        >>> parse_iso_date("2025-02-29", PlainDate(1980, 1, 1))
        PlainDate(1980, 1, 1)

        >>> parse_iso_date("2025-02-29")
        Traceback (most recent call last):
        ...
        InvalidDateError: Expression '2025-02-29' is not a valid date
    """
    try:
        return _read(text)
    except ParseError as exc:
        if fallback is None:
            raise
        logger.debug("Using fallback %s: %s", fallback, exc)
        return fallback


__all__ = [
    "format_iso_date",
    "parse_iso_date",
]
