"""Kalends exception hierarchy.

All Kalends-specific exceptions inherit from KalendsError.
"""

from __future__ import annotations


class KalendsError(Exception):
    """Base exception for all Kalends errors.

    Attributes:
        field: Name of the offending field, when one applies.
        value: The offending value, when one applies.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class RangeError(KalendsError):
    """A value fell outside its declared range.

    Raised when a constructor argument is out of bounds, or when
    arithmetic pushes a result outside the representable range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Adding an interval that moves a date past year 9999
        - Interval whose day count exceeds 999,999,999
    """

    pass


class DomainError(KalendsError):
    """Operation undefined for its operands.

    Examples:
        - Dividing an interval by zero
        - Interval modulo a zero-length interval
    """

    pass


class ParseError(KalendsError):
    """Failed to parse or format a string representation.

    Examples:
        - Wrong digit count in an ISO 8601 string
        - Malformed separator
        - Unrecognized strftime directive
    """

    pass


__all__ = [
    "KalendsError",
    "RangeError",
    "DomainError",
    "ParseError",
]
