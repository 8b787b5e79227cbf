"""Date formatting and parsing.

This module provides functions for converting dates to and from their
YYYY-MM-DD string representation.

Functions:
    format_iso_date: Format a PlainDate as YYYY-MM-DD.
    parse_iso_date: Parse YYYY-MM-DD text, with an optional fallback.
"""

from __future__ import annotations

from plaindate.format.iso import format_iso_date, parse_iso_date

__all__: list[str] = [
    "format_iso_date",
    "parse_iso_date",
]
