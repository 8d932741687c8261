"""Core temporal types.

This module provides the fundamental temporal types:
    - Duration: Signed time span with picosecond resolution
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with picosecond resolution
    - DateTime: Ten-component calendar reading, independent of time scale
    - TimePoint: Instant on a continuous time scale (base class)
    - GPSTime: Instant on the GPS time scale
"""

from __future__ import annotations

from picotime.core.date import Date
from picotime.core.datetime import DateTime
from picotime.core.duration import Duration
from picotime.core.time import Time
from picotime.core.timepoint import GPSTime, TimePoint

__all__: list[str] = [
    "Date",
    "DateTime",
    "Duration",
    "GPSTime",
    "Time",
    "TimePoint",
]
