"""picotime exception hierarchy.

All picotime-specific exceptions inherit from PicotimeError.
"""

from __future__ import annotations


class PicotimeError(Exception):
    """Base exception for all picotime errors."""

    pass


class InvalidArgumentError(PicotimeError):
    """Invalid input values.

    Raised when a calendar component lies outside its valid domain.
    Values are never clamped into range.

    Examples:
        - Year outside 1-9999
        - Month value outside 1-12
        - Day value past the end of the month (leap-year aware)
        - Hour value outside 0-23
        - Sub-second field outside 0-999
    """

    pass


class ParseError(InvalidArgumentError):
    """Failed to parse string representation.

    Raised when a string does not match the datetime grammar.

    Examples:
        - Wrong separator between date and time
        - Missing or extra characters
        - More than twelve sub-second digits
    """

    pass


class OutOfRangeError(PicotimeError):
    """Value not representable.

    Raised when a tick count or the result of an arithmetic operation
    falls outside the representable extent of the target type.

    Examples:
        - A GPS tick count before 0001-01-01T00:00:00
        - Adding a duration that runs past year 9999
        - A duration exceeding the signed 128-bit tick range
    """

    pass


__all__ = [
    "PicotimeError",
    "InvalidArgumentError",
    "ParseError",
    "OutOfRangeError",
]
