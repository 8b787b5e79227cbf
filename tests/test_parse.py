"""Tests for ISO string parsing.

These tests cover PlainDate.from_iso_string() and the module-level
parse_iso_date() it delegates to, including the exact error messages
and the fallback behaviour.
"""

from __future__ import annotations

import logging

import pytest

from plaindate import PlainDate
from plaindate.errors import (
    InvalidDateError,
    MalformedInputError,
    ParseError,
    PlainDateError,
)
from plaindate.format import format_iso_date, parse_iso_date


class TestParseValid:
    """Tests for strings that parse."""

    def test_standard_date(self) -> None:
        """Test parsing a standard date."""
        d = PlainDate.from_iso_string("2125-11-29")
        assert d == PlainDate(2125, 11, 29)

    def test_leap_day(self) -> None:
        """Feb 29 parses in a leap year."""
        assert PlainDate.from_iso_string("2024-02-29") == PlainDate(2024, 2, 29)
        assert PlainDate.from_iso_string("2000-02-29") == PlainDate(2000, 2, 29)

    def test_unpadded_components(self) -> None:
        """Single-digit month and day need no padding."""
        assert PlainDate.from_iso_string("2024-1-5") == PlainDate(2024, 1, 5)

    def test_short_year(self) -> None:
        """Years below 1000 parse without padding."""
        assert PlainDate.from_iso_string("987-10-12") == PlainDate(987, 10, 12)
        assert PlainDate.from_iso_string("1-01-01") == PlainDate(1, 1, 1)

    def test_year_with_one_leading_zero(self) -> None:
        """A single leading zero is tolerated in any component."""
        assert PlainDate.from_iso_string("02024-01-01") == PlainDate(2024, 1, 1)

    def test_returns_plain_date(self) -> None:
        """The result is a valid PlainDate."""
        d = parse_iso_date("2022-09-28")
        assert isinstance(d, PlainDate)
        assert d.is_valid()


class TestParseMalformed:
    """Tests for strings with the wrong shape."""

    def test_too_many_components(self) -> None:
        """Four components are rejected, naming the whole input."""
        with pytest.raises(MalformedInputError) as exc_info:
            PlainDate.from_iso_string("2125-11-29-12")
        assert str(exc_info.value) == "Expression '2125-11-29-12' is not a valid ISO string"
        assert exc_info.value.expression == "2125-11-29-12"
        assert exc_info.value.text == "2125-11-29-12"

    def test_too_few_components(self) -> None:
        """Two components, or none, are rejected."""
        with pytest.raises(MalformedInputError, match="is not a valid ISO string"):
            PlainDate.from_iso_string("2024-01")
        with pytest.raises(MalformedInputError, match="is not a valid ISO string"):
            PlainDate.from_iso_string("")
        with pytest.raises(MalformedInputError, match="is not a valid ISO string"):
            PlainDate.from_iso_string("2024/01/15")

    def test_fractional_day(self) -> None:
        """A fractional component is named in the message."""
        with pytest.raises(MalformedInputError) as exc_info:
            PlainDate.from_iso_string("2125-11-29.5")
        assert str(exc_info.value) == "Expression '29.5' in '2125-11-29.5' is not valid"
        assert exc_info.value.expression == "29.5"
        assert exc_info.value.text == "2125-11-29.5"

    def test_month_name(self) -> None:
        """A month name is not an integer."""
        with pytest.raises(MalformedInputError) as exc_info:
            PlainDate.from_iso_string("2125-NOV-29")
        assert str(exc_info.value) == "Expression 'NOV' in '2125-NOV-29' is not valid"

    def test_word_year(self) -> None:
        """A word in the year position is rejected."""
        with pytest.raises(MalformedInputError) as exc_info:
            PlainDate.from_iso_string("foobar-12-29")
        assert str(exc_info.value) == "Expression 'foobar' in 'foobar-12-29' is not valid"

    def test_first_bad_component_reported(self) -> None:
        """Components are checked left to right."""
        with pytest.raises(MalformedInputError) as exc_info:
            PlainDate.from_iso_string("foo-bar-baz")
        assert exc_info.value.expression == "foo"

    def test_full_iso_timestamp(self) -> None:
        """A timestamp suffix makes the day component invalid."""
        with pytest.raises(MalformedInputError) as exc_info:
            PlainDate.from_iso_string("2125-11-29T00:00:00.000Z")
        assert str(exc_info.value) == (
            "Expression '29T00:00:00.000Z' in '2125-11-29T00:00:00.000Z' is not valid"
        )

    def test_two_leading_zeros(self) -> None:
        """More than one leading zero is rejected."""
        with pytest.raises(MalformedInputError) as exc_info:
            PlainDate.from_iso_string("2024-005-01")
        assert exc_info.value.expression == "005"

    def test_signs_and_whitespace(self) -> None:
        """Explicit plus signs and surrounding spaces are rejected."""
        with pytest.raises(MalformedInputError):
            PlainDate.from_iso_string("2024-+1-01")
        with pytest.raises(MalformedInputError):
            PlainDate.from_iso_string(" 2024-01-01")
        with pytest.raises(MalformedInputError):
            PlainDate.from_iso_string("2024-01-01\n")

    def test_negative_year_not_parseable(self) -> None:
        """A leading minus splits into an extra, empty component."""
        with pytest.raises(MalformedInputError, match="is not a valid ISO string"):
            PlainDate.from_iso_string("-2024-01-01")

        with pytest.raises(MalformedInputError) as exc_info:
            PlainDate.from_iso_string("-01-01")
        assert exc_info.value.expression == ""
        assert str(exc_info.value) == "Expression '' in '-01-01' is not valid"


class TestParseInvalidDate:
    """Tests for well-formed strings that name no calendar day."""

    def test_month_out_of_range(self) -> None:
        """Month 14 is invalid."""
        with pytest.raises(InvalidDateError) as exc_info:
            PlainDate.from_iso_string("2024-14-01")
        assert str(exc_info.value) == "Expression '2024-14-01' is not a valid date"
        assert exc_info.value.text == "2024-14-01"

    def test_day_past_month_end(self) -> None:
        """November 31 and 32 are invalid."""
        with pytest.raises(InvalidDateError) as exc_info:
            PlainDate.from_iso_string("2024-11-31")
        assert str(exc_info.value) == "Expression '2024-11-31' is not a valid date"

        with pytest.raises(InvalidDateError) as exc_info:
            PlainDate.from_iso_string("2024-11-32")
        assert str(exc_info.value) == "Expression '2024-11-32' is not a valid date"

    def test_leap_day_in_common_year(self) -> None:
        """Feb 29 2025 is invalid."""
        with pytest.raises(InvalidDateError) as exc_info:
            PlainDate.from_iso_string("2025-02-29")
        assert str(exc_info.value) == "Expression '2025-02-29' is not a valid date"

    def test_zero_components(self) -> None:
        """Zero components pass the token check but are not valid dates."""
        with pytest.raises(InvalidDateError):
            PlainDate.from_iso_string("2024-00-01")
        with pytest.raises(InvalidDateError):
            PlainDate.from_iso_string("0-01-01")


class TestParseFallback:
    """Tests for the fallback argument."""

    FALLBACK = PlainDate(1980, 1, 1)

    def test_fallback_on_every_failure(self) -> None:
        """Every failing input returns the fallback."""
        for text in (
            "2125-11-29-12",
            "2125-11-29.5",
            "2125-NOV-29",
            "foobar-12-29",
            "2024-14-01",
            "2024-11-31",
            "2024-11-32",
            "2025-02-29",
        ):
            result = PlainDate.from_iso_string(text, self.FALLBACK)
            assert result.to_iso_string() == "1980-01-01"

    def test_fallback_returned_verbatim(self) -> None:
        """The very same fallback object comes back."""
        fallback = PlainDate(1980, 1, 1)
        assert PlainDate.from_iso_string("nope", fallback) is fallback

    def test_invalid_fallback_not_checked(self) -> None:
        """An invalid fallback is still returned."""
        fallback = PlainDate(2023, 2, 30)
        result = PlainDate.from_iso_string("2024-11-31", fallback)
        assert result is fallback
        assert not result.is_valid()

    def test_fallback_unused_on_success(self) -> None:
        """A parseable string ignores the fallback."""
        result = parse_iso_date("2024-02-29", self.FALLBACK)
        assert result == PlainDate(2024, 2, 29)

    def test_fallback_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Substituting the fallback is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="plaindate.format.iso"):
            parse_iso_date("2024-11-31", self.FALLBACK)
        assert "Using fallback 1980-01-01" in caplog.text
        assert "is not a valid date" in caplog.text


class TestParseErrors:
    """Tests for the parse exception hierarchy."""

    def test_hierarchy(self) -> None:
        """Both parse errors share ParseError and PlainDateError."""
        assert issubclass(MalformedInputError, ParseError)
        assert issubclass(InvalidDateError, ParseError)
        assert issubclass(ParseError, PlainDateError)

    def test_value_error_compatible(self) -> None:
        """Parse errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            PlainDate.from_iso_string("2024-02-30")
        with pytest.raises(ValueError):
            PlainDate.from_iso_string("yesterday")


class TestRoundTrip:
    """Tests for format then parse."""

    def test_round_trip_sample(self) -> None:
        """Valid dates survive formatting and parsing."""
        dates = [
            PlainDate(1, 1, 1),
            PlainDate(999, 12, 31),
            PlainDate(1900, 2, 28),
            PlainDate(2000, 2, 29),
            PlainDate(2024, 10, 9),
            PlainDate(9999, 12, 31),
        ]
        for d in dates:
            assert PlainDate.from_iso_string(d.to_iso_string()).is_equal(d)

    def test_round_trip_every_day_of_leap_year(self) -> None:
        """Every day of 2024 round-trips."""
        d = PlainDate(2024, 1, 1)
        while d.year == 2024:
            assert parse_iso_date(format_iso_date(d)) == d
            d = d.add_days(1)
