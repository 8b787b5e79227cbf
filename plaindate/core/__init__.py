"""Core calendar types.

This module provides:
    - PlainDate: Civil date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from plaindate.core.plain_date import PlainDate

__all__: list[str] = [
    "PlainDate",
]
