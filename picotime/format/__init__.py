"""Temporal formatting and parsing.

This module provides functions for converting picotime objects to and
from string representations:
    - ISO 8601 formatting and parsing of DateTime and time points
    - Human-readable formatting of Duration

Functions:
    parse_iso8601: Parse an ISO 8601 datetime string.
    format_iso8601: Format a DateTime or time point as ISO 8601.
    format_duration: Format a Duration such as "1d23h4m56.789s".

Classes:
    DurationFormat: Options for format_duration.

Examples:
    >>> from picotime import DateTime
    >>> from picotime.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2001-02-03T04:05:06.789").millisecond
    789

    >>> format_iso8601(DateTime(2000, 1, 2, 3, 4, 5))
    '2000-01-02T03:04:05'
"""

from __future__ import annotations

from picotime.format.duration import DurationFormat, format_duration
from picotime.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
    # Duration
    "DurationFormat",
    "format_duration",
]
