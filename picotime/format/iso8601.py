"""ISO 8601 formatting and parsing.

This module converts DateTime values and time points to and from a
fixed-width subset of ISO 8601 extended format.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a DateTime.
    format_iso8601: Format a DateTime or time point as an ISO 8601 string.

Grammar:
    datetime    ::= date sep time [ "." subseconds ]
    date        ::= YYYY "-" MM "-" DD
    time        ::= hh ":" mm ":" ss
    sep         ::= "T" | " "
    subseconds  ::= 1*12 DIGIT

Every field has exactly the width shown and only ASCII digits are
accepted. There are no time zone designators, no negative years and no
compact forms. Sub-seconds are right-padded with zeros to twelve digits,
then read as four 3-digit fields (millisecond, microsecond, nanosecond,
picosecond).

Examples:
    >>> from picotime import DateTime
    >>> dt = parse_iso8601("2001-02-03T04:05:06.789")
    >>> dt.millisecond
    789

    >>> format_iso8601(DateTime(2000, 1, 2, 3, 4, 5))
    '2000-01-02T03:04:05'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from picotime._internal.constants import (
    MAX_SUBSECOND_DIGITS,
    SUBSECOND_FIELD_DIGITS,
)
from picotime.errors import ParseError

if TYPE_CHECKING:
    from picotime.core.datetime import DateTime
    from picotime.core.timepoint import TimePoint

# Type alias for formattable objects
FormattableType = Union["DateTime", "TimePoint"]

_SEPARATORS = ("T", " ")


class _Scanner:
    """Cursor over an input string for the fixed ISO 8601 grammar."""

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def peek(self) -> str | None:
        if self.at_end():
            return None
        return self._text[self._pos]

    def error(self, expected: str) -> ParseError:
        found = self.peek()
        what = "end of input" if found is None else repr(found)
        return ParseError(
            f"invalid ISO 8601 datetime {self._text!r}: "
            f"expected {expected} at position {self._pos}, found {what}"
        )

    def expect(self, *choices: str) -> str:
        """Consume one character that must be one of choices."""
        c = self.peek()
        if c is None or c not in choices:
            raise self.error(" or ".join(repr(x) for x in choices))
        self._pos += 1
        return c

    def digits(self, width: int, name: str) -> str:
        """Consume exactly width ASCII digits."""
        start = self._pos
        for _ in range(width):
            c = self.peek()
            if c is None or not ("0" <= c <= "9"):
                raise self.error(f"{width}-digit {name}")
            self._pos += 1
        return self._text[start : self._pos]

    def digit_run(self) -> str:
        """Consume the longest run of ASCII digits (possibly empty)."""
        start = self._pos
        while True:
            c = self.peek()
            if c is None or not ("0" <= c <= "9"):
                break
            self._pos += 1
        return self._text[start : self._pos]

    def finish(self) -> None:
        if not self.at_end():
            raise self.error("end of input")


def _split_subseconds(digits: str) -> list[int]:
    """Right-pad to twelve digits and split into 3-digit fields.

    Examples:
        >>> _split_subseconds("78")
        [780, 0, 0, 0]
    """
    padded = digits.ljust(MAX_SUBSECOND_DIGITS, "0")
    return [
        int(padded[i : i + SUBSECOND_FIELD_DIGITS])
        for i in range(0, MAX_SUBSECOND_DIGITS, SUBSECOND_FIELD_DIGITS)
    ]


def parse_iso8601(s: str) -> DateTime:
    """Parse an ISO 8601 string into a DateTime.

    The entire string must match the grammar; leading or trailing
    characters (including whitespace) are rejected.

    Args:
        s: The ISO 8601 string to parse.

    Returns:
        The parsed DateTime.

    Raises:
        ParseError: If the string does not match the grammar or has more
            than twelve sub-second digits.
        InvalidArgumentError: If a parsed component is out of range, for
            example "2001-02-29T00:00:00".

    Examples:
        >>> parse_iso8601("2000-01-02 03:04:05.006007008009").picosecond
        9

        >>> parse_iso8601("2000-01-02T03:04:05Z")
        Traceback (most recent call last):
        ...
        ParseError: invalid ISO 8601 datetime '2000-01-02T03:04:05Z': expected end of input at position 19, found 'Z'
    """
    # Import here to avoid circular imports
    from picotime.core.datetime import DateTime

    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")

    scanner = _Scanner(s)
    year = int(scanner.digits(4, "year"))
    scanner.expect("-")
    month = int(scanner.digits(2, "month"))
    scanner.expect("-")
    day = int(scanner.digits(2, "day"))
    scanner.expect(*_SEPARATORS)
    hour = int(scanner.digits(2, "hour"))
    scanner.expect(":")
    minute = int(scanner.digits(2, "minute"))
    scanner.expect(":")
    second = int(scanner.digits(2, "second"))

    subseconds = [0, 0, 0, 0]
    if scanner.peek() == ".":
        scanner.expect(".")
        digits = scanner.digit_run()
        if not digits:
            raise scanner.error("sub-second digits")
        if len(digits) > MAX_SUBSECOND_DIGITS:
            raise ParseError(
                f"invalid ISO 8601 datetime {s!r}: at most "
                f"{MAX_SUBSECOND_DIGITS} sub-second digits allowed, got {len(digits)}"
            )
        subseconds = _split_subseconds(digits)
    scanner.finish()

    millisecond, microsecond, nanosecond, picosecond = subseconds
    return DateTime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        millisecond,
        microsecond,
        nanosecond,
        picosecond,
    )


def format_iso8601(value: FormattableType) -> str:
    """Format a DateTime or time point as an ISO 8601 string.

    Sub-seconds are written only when non-zero, as the 12-digit fraction
    with trailing zeros removed.

    Args:
        value: A DateTime or TimePoint (such as GPSTime).

    Returns:
        ISO 8601 formatted string.

    Raises:
        TypeError: If value is neither a DateTime nor a TimePoint.

    Examples:
        >>> from picotime import DateTime
        >>> format_iso8601(DateTime(2000, 1, 2, 3, 4, 5, 6, 7, 8, 9))
        '2000-01-02T03:04:05.006007008009'

        >>> format_iso8601(DateTime(2000, 1, 2, 3, 4, 5, 780))
        '2000-01-02T03:04:05.78'
    """
    # Import here to avoid circular imports
    from picotime.core.datetime import DateTime
    from picotime.core.timepoint import TimePoint

    if isinstance(value, TimePoint):
        value = value.to_datetime()
    elif not isinstance(value, DateTime):
        raise TypeError(
            f"expected DateTime or TimePoint, got {type(value).__name__}"
        )

    return f"{value.date().to_iso_format()}T{value.time_of_day().to_iso_format()}"


__all__ = ["parse_iso8601", "format_iso8601"]
