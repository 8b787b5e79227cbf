"""plaindate exception hierarchy.

All plaindate-specific exceptions inherit from PlainDateError.
"""

from __future__ import annotations


class PlainDateError(Exception):
    """Base exception for all plaindate errors."""

    pass


class ParseError(PlainDateError, ValueError):
    """Failed to read a date from its ISO string.

    Attributes:
        text: The complete string that was being parsed.
    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class MalformedInputError(ParseError):
    """The string does not have the YYYY-MM-DD shape.

    Raised when the string does not split into exactly three
    dash-separated components, or when a component is not an
    integer token.

    Attributes:
        expression: The offending token, or the whole input when the
            component count is wrong.

    Examples:
        - "2125-11-29-12" (four components)
        - "2125-NOV-29" (non-numeric month)
        - "2125-11-29.5" (fractional day)
    """

    def __init__(self, message: str, text: str, expression: str) -> None:
        super().__init__(message, text)
        self.expression = expression


class InvalidDateError(ParseError):
    """The string is well formed but names no calendar day.

    Examples:
        - "2024-14-01" (month 14)
        - "2024-11-31" (November has 30 days)
        - "2025-02-29" (2025 is not a leap year)
    """

    pass


class ConversionError(PlainDateError):
    """A date cannot be represented as a datetime.

    Raised by the midnight conversions when the date, once its fields
    are normalised, falls outside the years datetime supports (1-9999).
    """

    pass


__all__ = [
    "PlainDateError",
    "ParseError",
    "MalformedInputError",
    "InvalidDateError",
    "ConversionError",
]
