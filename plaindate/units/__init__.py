"""Calendar units and enumerations.

This module provides:
    - DayOfWeek: Sunday-first day of week enum
"""

from __future__ import annotations

from plaindate.units.weekday import DayOfWeek

__all__: list[str] = [
    "DayOfWeek",
]
