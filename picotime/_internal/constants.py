"""Internal constants for picotime.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions (one tick is one picosecond)
PICOS_PER_NANOSECOND: int = 1_000
PICOS_PER_MICROSECOND: int = 1_000_000
PICOS_PER_MILLISECOND: int = 1_000_000_000
PICOS_PER_SECOND: int = 1_000_000_000_000
PICOS_PER_MINUTE: int = 60 * PICOS_PER_SECOND
PICOS_PER_HOUR: int = 60 * PICOS_PER_MINUTE
PICOS_PER_DAY: int = 24 * PICOS_PER_HOUR  # 86_400_000_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Tick counts are confined to a signed 128-bit integer
INT128_MIN: int = -(2**127)
INT128_MAX: int = 2**127 - 1

# Year limits of the calendar value
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Sub-second fields: milli, micro, nano, pico, three decimal digits each
SUBSECOND_FIELD_DIGITS: int = 3
SUBSECOND_FIELD_BOUND: int = 10**SUBSECOND_FIELD_DIGITS
MAX_SUBSECOND_DIGITS: int = 4 * SUBSECOND_FIELD_DIGITS

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Epochs as (year, month, day) at midnight
GPS_EPOCH: tuple[int, int, int] = (1980, 1, 6)

# 1970-01-01 was a Thursday (Monday=0)
UNIX_EPOCH_WEEKDAY: int = 3


__all__ = [
    "PICOS_PER_NANOSECOND",
    "PICOS_PER_MICROSECOND",
    "PICOS_PER_MILLISECOND",
    "PICOS_PER_SECOND",
    "PICOS_PER_MINUTE",
    "PICOS_PER_HOUR",
    "PICOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "INT128_MIN",
    "INT128_MAX",
    "MIN_YEAR",
    "MAX_YEAR",
    "SUBSECOND_FIELD_DIGITS",
    "SUBSECOND_FIELD_BOUND",
    "MAX_SUBSECOND_DIGITS",
    "DAYS_IN_MONTH",
    "GPS_EPOCH",
    "UNIX_EPOCH_WEEKDAY",
]
