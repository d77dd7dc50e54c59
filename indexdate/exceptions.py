"""Custom exceptions for indexdate.

The public conversion functions never let these escape; they are raised by
the strict helpers and caught where a sentinel value is returned instead.
"""


class IndexDateError(Exception):
    """Base exception for all indexdate errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class DateParseError(IndexDateError):
    """Input could not be parsed with the requested pattern or timezone."""


class PatternError(DateParseError):
    """Pattern cannot be translated to a strftime pattern."""


class DateRangeError(IndexDateError):
    """Timestamp lies outside the years datetime can represent."""
