"""Conversions between PlainDate and datetime instants.

These four functions are the only timezone-sensitive part of the
library. Each one names the calendar rule it applies, so callers choose
between the local and the UTC reading deliberately.

Functions:
    date_from_local: Calendar fields of an instant in the local timezone.
    date_from_utc: Calendar fields of an instant in UTC.
    local_midnight: Aware datetime at local midnight of a date.
    utc_midnight: Aware datetime at UTC midnight of a date.
    system_clock: The default clock for PlainDate.today().

Naive datetimes are read as local wall time, matching how
datetime.astimezone() treats them.

Examples:
    >>> from datetime import datetime, timezone
    >>> from plaindate.convert import date_from_utc, utc_midnight

    >>> date_from_utc(datetime(2024, 1, 1, 3, 0, tzinfo=timezone.utc))
    PlainDate(2024, 1, 1)

    >>> utc_midnight(PlainDate(2022, 9, 28)).isoformat()
    '2022-09-28T00:00:00+00:00'
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Callable

from plaindate._internal.constants import MAX_INSTANT_YEAR, MIN_INSTANT_YEAR
from plaindate.errors import ConversionError

if TYPE_CHECKING:
    from plaindate.core.plain_date import PlainDate

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current local time as a naive datetime."""
    return datetime.now()


def _local_offset(instant: datetime) -> timedelta:
    # Naive instants are taken as local wall time by timestamp()
    return timedelta(seconds=time.localtime(instant.timestamp()).tm_gmtoff)


def _shifted(instant: datetime, offset: timedelta) -> PlainDate:
    # Whole-day shift applied on PlainDate, whose years are unbounded
    from plaindate.core.plain_date import PlainDate

    clock = timedelta(
        hours=instant.hour,
        minutes=instant.minute,
        seconds=instant.second,
        microseconds=instant.microsecond,
    )
    days = (clock + offset) // timedelta(days=1)
    return PlainDate(instant.year, instant.month, instant.day).add_days(days)


def date_from_local(instant: datetime) -> PlainDate:
    """Return the calendar date of an instant in the local timezone.

    Aware instants are moved from their own offset to the host's local
    offset at that instant; naive instants already are local wall time.
    The result may fall in year 0 or 10000 when an instant at the edge
    of the datetime range crosses midnight.

    Args:
        instant: The datetime to read.

    Returns:
        The local calendar date.
    """
    offset = instant.utcoffset()
    if offset is None:
        return _shifted(instant, timedelta(0))
    return _shifted(instant, _local_offset(instant) - offset)


def date_from_utc(instant: datetime) -> PlainDate:
    """Return the calendar date of an instant in UTC.

    A naive instant is taken as local wall time and shifted to UTC, so
    near local midnight the result can differ by one day from
    date_from_local() on the same value.

    Args:
        instant: The datetime to read.

    Returns:
        The UTC calendar date.

    Examples:
        >>> from datetime import datetime, timedelta, timezone
        >>> tz = timezone(timedelta(hours=-5))
        >>> date_from_utc(datetime(2023, 12, 31, 22, 0, tzinfo=tz))
        PlainDate(2024, 1, 1)
    """
    offset = instant.utcoffset()
    if offset is None:
        offset = _local_offset(instant)
    return _shifted(instant, -offset)


def _out_of_range(date: PlainDate) -> ConversionError:
    return ConversionError(
        f"{date} is outside the datetime range "
        f"({MIN_INSTANT_YEAR}-{MAX_INSTANT_YEAR})"
    )


def _midnight(date: PlainDate) -> datetime:
    # Roll surplus months into years and surplus days across months
    year = date.year + (date.month - 1) // 12
    month = (date.month - 1) % 12 + 1
    if year < MIN_INSTANT_YEAR or year > MAX_INSTANT_YEAR:
        raise _out_of_range(date)
    try:
        return datetime(year, month, 1) + timedelta(days=date.day - 1)
    except OverflowError as exc:
        raise _out_of_range(date) from exc


def local_midnight(date: PlainDate) -> datetime:
    """Return an aware datetime at local midnight of the date.

    The offset is the host's offset in effect at that midnight. The
    datetime is built directly in that offset, so year 1 and year 9999
    dates convert even when the same instant in UTC would leave the
    datetime range.

    Args:
        date: The date to convert.

    Returns:
        Midnight in the host's local timezone, carrying that zone's
        offset and abbreviation for the date.

    Raises:
        ConversionError: If the date falls outside years 1-9999, or the
            platform cannot look up the local offset.
    """
    naive = _midnight(date)
    try:
        local = time.localtime(naive.timestamp())
    except (OverflowError, OSError, ValueError) as exc:
        raise ConversionError(f"{date} has no local midnight: {exc}") from exc
    zone = timezone(timedelta(seconds=local.tm_gmtoff), local.tm_zone)
    return naive.replace(tzinfo=zone)


def utc_midnight(date: PlainDate) -> datetime:
    """Return an aware datetime at UTC midnight of the date.

    Raises:
        ConversionError: If the date falls outside years 1-9999.
    """
    return _midnight(date).replace(tzinfo=timezone.utc)


__all__ = [
    "Clock",
    "system_clock",
    "date_from_local",
    "date_from_utc",
    "local_midnight",
    "utc_midnight",
]
