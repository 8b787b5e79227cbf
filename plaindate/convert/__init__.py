"""Instant conversion utilities.

This module provides functions for converting dates to and from
datetime instants under an explicit calendar rule:
    - Local timezone rule (date_from_local, local_midnight)
    - UTC rule (date_from_utc, utc_midnight)

Examples:
    >>> from datetime import datetime
    >>> from plaindate.convert import date_from_local, local_midnight

    >>> d = date_from_local(datetime(2024, 1, 1))
    >>> local_midnight(d).hour
    0
"""

from __future__ import annotations

from plaindate.convert.instant import (
    Clock,
    date_from_local,
    date_from_utc,
    local_midnight,
    system_clock,
    utc_midnight,
)

__all__ = [
    "Clock",
    "system_clock",
    "date_from_local",
    "date_from_utc",
    "local_midnight",
    "utc_midnight",
]
