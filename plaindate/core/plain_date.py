"""PlainDate class representing a calendar date.

This module provides the PlainDate class for representing civil dates
in the proleptic Gregorian calendar, without time of day or timezone.
"""

from __future__ import annotations

from datetime import datetime

from plaindate._internal.calendar import (
    days_in_year,
    is_leap_year,
    month_length,
    month_lengths,
)
from plaindate._internal.constants import EPOCH, EPOCH_DAY_OF_WEEK, WEEKDAY_NAMES
from plaindate._internal.validation import is_valid_ymd
from plaindate.convert.instant import (
    Clock,
    date_from_local,
    date_from_utc,
    local_midnight,
    system_clock,
    utc_midnight,
)
from plaindate.format.iso import format_iso_date, parse_iso_date
from plaindate.units.weekday import DayOfWeek


class PlainDate:
    """A calendar date in the proleptic Gregorian calendar.

    PlainDate holds a year, month and day and nothing else: no time of
    day, no timezone, no offset. It answers "which day" questions such
    as ordering, day counts and weekdays.

    Construction never fails. Any three integers make a PlainDate, and
    whether they name a real day is asked separately with is_valid().
    This lets a parser build a candidate first and check it second, and
    lets invalid intermediate values be inspected instead of raising.

    Instances are immutable. add_days(), sub_days() and clone() return
    new instances; the receiver never changes.

    Attributes:
        year: The year (valid dates have year >= 1).
        month: The month (valid dates have 1-12).
        day: The day of the month (valid dates stay within the month).

    Examples:
        >>> d = PlainDate(2024, 2, 15)
        >>> d.add_days(14)
        PlainDate(2024, 2, 29)

        >>> d.get_day_of_week_str()
        'Thursday'

        >>> PlainDate(2023, 2, 29).is_valid()
        False
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a PlainDate from year, month, and day.

        No validation is performed; see is_valid().

        Examples:
            >>> PlainDate(2024, 1, 15)
            PlainDate(2024, 1, 15)

            >>> PlainDate(2024, 2, 30)  # Constructs, but is not valid
            PlainDate(2024, 2, 30)
        """
        self._year = year
        self._month = month
        self._day = day

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Return True if the year is a Gregorian leap year.

        Examples:
            >>> PlainDate.is_leap_year(2000)
            True
            >>> PlainDate.is_leap_year(2100)
            False
        """
        return is_leap_year(year)

    @staticmethod
    def days_in_month(year: int) -> list[int]:
        """Return the number of days in each month of a year.

        Returns:
            Twelve month lengths, January first. February is 29 in
            leap years.
        """
        return month_lengths(year)

    @classmethod
    def from_local_datetime(cls, instant: datetime) -> PlainDate:
        """Return the date of an instant as seen in the local timezone.

        If you want the UTC calendar date instead, see
        from_utc_datetime().

        Examples:
            >>> PlainDate.from_local_datetime(datetime(2024, 1, 1, 23, 59))
            PlainDate(2024, 1, 1)
        """
        date = date_from_local(instant)
        return cls(date.year, date.month, date.day)

    @classmethod
    def from_utc_datetime(cls, instant: datetime) -> PlainDate:
        """Return the date of an instant as seen in UTC.

        If you want the local calendar date instead, see
        from_local_datetime(). Naive instants are read as local time.
        """
        date = date_from_utc(instant)
        return cls(date.year, date.month, date.day)

    @classmethod
    def from_iso_string(
        cls, text: str, fallback: PlainDate | None = None
    ) -> PlainDate:
        """Parse a date from a YYYY-MM-DD string.

        Args:
            text: The string to parse.
            fallback: Returned as-is instead of raising on failure.

        Returns:
            The parsed date, or the fallback.

        Raises:
            MalformedInputError: If the string is not three integer
                components separated by "-".
            InvalidDateError: If the components name no calendar day.

        Examples:
            >>> PlainDate.from_iso_string("2125-11-29")
            PlainDate(2125, 11, 29)

            >>> PlainDate.from_iso_string("2024-11-31", PlainDate(1980, 1, 1))
            PlainDate(1980, 1, 1)
        """
        date = parse_iso_date(text, fallback)
        if date is fallback:
            return fallback
        return cls(date.year, date.month, date.day)

    @classmethod
    def today(cls, clock: Clock = system_clock) -> PlainDate:
        """Return the current date in the local timezone.

        Args:
            clock: Zero-argument callable returning the current instant.
                Pass a fixed clock to make "today" deterministic.

        Examples:
            >>> PlainDate.today(lambda: datetime(2000, 2, 1, 9, 30))
            PlainDate(2000, 2, 1)
        """
        date = date_from_local(clock())
        return cls(date.year, date.month, date.day)

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day component."""
        return self._day

    def is_valid(self) -> bool:
        """Return True if this date names a real calendar day.

        Fails for years before 1, months outside 1-12, and days outside
        the length of the month. Never raises.

        Examples:
            >>> PlainDate(2024, 2, 29).is_valid()
            True
            >>> PlainDate(2023, 13, 1).is_valid()
            False
        """
        return is_valid_ymd(self._year, self._month, self._day)

    def clone(self) -> PlainDate:
        """Return a new PlainDate equal to this one."""
        return type(self)(self._year, self._month, self._day)

    def to_iso_string(self) -> str:
        """Return the date as YYYY-MM-DD.

        Month and day are zero-padded to two digits; the year is not
        padded.

        Examples:
            >>> PlainDate(2024, 3, 1).to_iso_string()
            '2024-03-01'
        """
        return format_iso_date(self)

    def to_local_datetime(self) -> datetime:
        """Return an aware datetime at local midnight of this date.

        Raises:
            ConversionError: If the date falls outside years 1-9999.
        """
        return local_midnight(self)

    def to_utc_datetime(self) -> datetime:
        """Return an aware datetime at UTC midnight of this date.

        Raises:
            ConversionError: If the date falls outside years 1-9999.
        """
        return utc_midnight(self)

    def add_days(self, days: int) -> PlainDate:
        """Return a new PlainDate the given number of days later.

        Negative values move backwards, as sub_days() does.

        Examples:
            >>> PlainDate(2024, 12, 29).add_days(7)
            PlainDate(2025, 1, 5)

            >>> PlainDate(2023, 2, 15).add_days(14)
            PlainDate(2023, 3, 1)
        """
        if days < 0:
            return self.sub_days(-days)

        year, month, day = self._year, self._month, self._day

        while days > 0:
            length = month_length(year, month)
            if day + days > length:
                # Jump to the first of the next month
                days -= length - day + 1
                day = 1
                month += 1
                if month > 12:
                    month = 1
                    year += 1
            else:
                day += days
                days = 0

        return PlainDate(year, month, day)

    def sub_days(self, days: int) -> PlainDate:
        """Return a new PlainDate the given number of days earlier.

        Negative values move forwards, as add_days() does.

        Examples:
            >>> PlainDate(2024, 1, 3).sub_days(7)
            PlainDate(2023, 12, 27)

            >>> PlainDate(2024, 3, 3).sub_days(7)
            PlainDate(2024, 2, 25)
        """
        if days < 0:
            return self.add_days(-days)

        year, month, day = self._year, self._month, self._day

        while days > 0:
            if day > days:
                day -= days
                days = 0
            else:
                # Jump to the last day of the previous month
                days -= day
                month -= 1
                if month < 1:
                    month = 12
                    year -= 1
                day = month_length(year, month)

        return PlainDate(year, month, day)

    def get_days_difference(self, to: PlainDate) -> int:
        """Return the number of days from this date to another.

        The result is positive when `to` is later, negative when it is
        earlier, and a.get_days_difference(b) is always
        -b.get_days_difference(a).

        Examples:
            >>> PlainDate(2024, 2, 15).get_days_difference(PlainDate(2024, 3, 1))
            15
            >>> PlainDate(2024, 2, 15).get_days_difference(PlainDate(2025, 2, 15))
            366
            >>> PlainDate(2024, 2, 15).get_days_difference(PlainDate(2024, 1, 15))
            -31
        """
        if self.is_after(to):
            return -to.get_days_difference(self)

        if self._year == to._year:
            if self._month == to._month:
                return to._day - self._day

            total = month_length(self._year, self._month) - self._day
            for month in range(self._month + 1, to._month):
                total += month_length(self._year, month)
            return total + to._day

        # Rest of this year, the full years between, then into `to`'s year
        total = self.get_days_difference(PlainDate(self._year, 12, 31)) + 1
        for year in range(self._year + 1, to._year):
            total += days_in_year(year)
        return total + PlainDate(to._year, 1, 1).get_days_difference(to)

    def get_day_of_week(self) -> DayOfWeek:
        """Return the day of the week, Sunday=0 through Saturday=6.

        Counted from 1970-01-01, a Thursday. Dates before that epoch
        work too.

        Examples:
            >>> PlainDate(1970, 1, 1).get_day_of_week()
            <DayOfWeek.THURSDAY: 4>
            >>> PlainDate(2025, 1, 19).get_day_of_week()
            <DayOfWeek.SUNDAY: 0>
        """
        offset = PlainDate(*EPOCH).get_days_difference(self)
        return DayOfWeek((EPOCH_DAY_OF_WEEK + offset) % 7)

    def get_day_of_week_str(self) -> str:
        """Return the English name of the day of the week.

        Examples:
            >>> PlainDate(2023, 3, 6).get_day_of_week_str()
            'Monday'
        """
        return WEEKDAY_NAMES[self.get_day_of_week()]

    def is_equal(self, date: PlainDate) -> bool:
        """Return True if both dates have the same year, month and day."""
        return (
            self._year == date._year
            and self._month == date._month
            and self._day == date._day
        )

    def is_before(self, date: PlainDate) -> bool:
        """Return True if this date is strictly earlier than another."""
        if self._year != date._year:
            return self._year < date._year
        if self._month != date._month:
            return self._month < date._month
        return self._day < date._day

    def is_after(self, date: PlainDate) -> bool:
        """Return True if this date is strictly later than another."""
        return not self.is_before(date) and not self.is_equal(date)

    def is_before_or_equal(self, date: PlainDate) -> bool:
        return self.is_before(date) or self.is_equal(date)

    def is_after_or_equal(self, date: PlainDate) -> bool:
        return self.is_after(date) or self.is_equal(date)

    def is_in_interval(self, start: PlainDate, end: PlainDate) -> bool:
        """Return True if this date lies between two dates, inclusive.

        The bounds may be given in either order.

        Examples:
            >>> d = PlainDate(2024, 2, 15)
            >>> d.is_in_interval(PlainDate(2024, 2, 1), PlainDate(2024, 3, 1))
            True
            >>> d.is_in_interval(PlainDate(2024, 2, 16), PlainDate(2024, 2, 15))
            True
        """
        if end.is_before(start):
            start, end = end, start
        return self.is_after_or_equal(start) and self.is_before_or_equal(end)

    def __add__(self, other: object) -> PlainDate:
        """Add a number of days.

        Examples:
            >>> PlainDate(2024, 2, 28) + 1
            PlainDate(2024, 2, 29)
        """
        if not isinstance(other, int):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(other)

    def __radd__(self, other: object) -> PlainDate:
        return self.__add__(other)

    def __sub__(self, other: object) -> PlainDate | int:
        """Subtract a number of days, or another date.

        When subtracting an int, returns a new PlainDate.
        When subtracting a PlainDate, returns the signed day count.

        Examples:
            >>> PlainDate(2024, 3, 1) - 1
            PlainDate(2024, 2, 29)

            >>> PlainDate(2024, 3, 1) - PlainDate(2024, 2, 15)
            15
        """
        if isinstance(other, PlainDate):
            return other.get_days_difference(self)
        if isinstance(other, int):
            return self.sub_days(other)
        return NotImplemented

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self.is_equal(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self.is_before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self.is_before_or_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self.is_after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PlainDate):
            return NotImplemented
        return self.is_after_or_equal(other)

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a string like 'PlainDate(2024, 1, 15)'."""
        return f"PlainDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the YYYY-MM-DD representation."""
        return self.to_iso_string()


__all__ = ["PlainDate"]
