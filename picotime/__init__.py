"""Picotime: exact, wide-range time types with picosecond resolution.

Picotime provides fixed-point durations and calendar date/time values
for scientific and navigation software, specialized to the continuous
GPS time scale.

Core Types:
    Duration: Signed 128-bit count of picoseconds
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, sub-second fields)
    DateTime: Ten-component calendar reading with picosecond resolution
    GPSTime: Instant on the GPS time scale

Units:
    TimeScale: Continuous time scales (GPS)
    Weekday: Day of the week

Functions:
    parse_iso8601: Parse an ISO 8601 datetime string
    format_iso8601: Format a DateTime or GPSTime as ISO 8601
    format_duration: Format a Duration for humans

Rounding functions (trunc, floor, ceil, round) are in picotime.arithmetic.

Exceptions:
    PicotimeError: Base exception
    InvalidArgumentError: Component or string outside its domain
    ParseError: String does not match the grammar
    OutOfRangeError: Value not representable

Example:
    >>> from picotime import Duration, GPSTime
    >>> t = GPSTime(1980, 1, 6) + Duration(hours=1, minutes=2, seconds=3)
    >>> str(t)
    '1980-01-06T01:02:03'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from picotime.core.date import Date
from picotime.core.datetime import DateTime
from picotime.core.duration import Duration
from picotime.core.time import Time
from picotime.core.timepoint import GPSTime, TimePoint

# Units
from picotime.units.timescale import TimeScale
from picotime.units.weekday import Weekday

# Exceptions
from picotime.errors import (
    InvalidArgumentError,
    OutOfRangeError,
    ParseError,
    PicotimeError,
)

# Clocks
from picotime.clock import Clock, FixedClock, GPSClock, SystemClock

# Functions
from picotime.format import (
    DurationFormat,
    format_duration,
    format_iso8601,
    parse_iso8601,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Duration",
    "GPSTime",
    "Time",
    "TimePoint",
    # Units
    "TimeScale",
    "Weekday",
    # Exceptions
    "PicotimeError",
    "InvalidArgumentError",
    "ParseError",
    "OutOfRangeError",
    # Clocks
    "Clock",
    "SystemClock",
    "GPSClock",
    "FixedClock",
    # Functions
    "parse_iso8601",
    "format_iso8601",
    "DurationFormat",
    "format_duration",
]
