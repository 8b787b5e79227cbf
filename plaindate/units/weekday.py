"""DayOfWeek enumeration.

This module provides the DayOfWeek enum used by PlainDate.get_day_of_week().
Numbering starts at Sunday, unlike Python's datetime.weekday().
"""

from __future__ import annotations

from enum import IntEnum

from plaindate._internal.constants import WEEKDAY_NAMES


class DayOfWeek(IntEnum):
    """Day of the week, Sunday=0 through Saturday=6.

    Members compare and index like plain integers, so a DayOfWeek can be
    used wherever the raw 0-6 index is expected.

    Examples:
        >>> DayOfWeek.THURSDAY
        <DayOfWeek.THURSDAY: 4>

        >>> DayOfWeek(0).english_name
        'Sunday'

        >>> DayOfWeek.SATURDAY.is_weekend
        True
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def english_name(self) -> str:
        """Return the English name of the day, e.g. 'Monday'."""
        return WEEKDAY_NAMES[self.value]

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self in (DayOfWeek.SATURDAY, DayOfWeek.SUNDAY)


__all__ = ["DayOfWeek"]
