"""Clock sources for the current instant.

A clock is anything with a ``now()`` method returning the current
instant as an integer count of picoseconds since the clock's epoch.
This is the only time-varying input to the library. No clock here
promises monotonicity: the host may step the system clock at any time.

Classes:
    Clock: Protocol implemented by every clock.
    SystemClock: UTC (POSIX) picoseconds since 1970-01-01, from the host.
    GPSClock: GPS picoseconds since 1980-01-06, derived from a UTC clock.
    FixedClock: Always returns the same instant.

Functions:
    gps_utc_offset: GPS - UTC in whole seconds at a POSIX time.
    utc_to_gps: Convert POSIX picoseconds to GPS picoseconds.

GPS time never inserts leap seconds, so it runs ahead of UTC by the
number of leap seconds inserted since 1980-01-06.

Examples:
    >>> clock = GPSClock(FixedClock(0))
    >>> clock.now() < 0
    True
"""

from __future__ import annotations

import bisect
import logging
import time
from typing import Protocol

from picotime._internal.calendar import days_from_civil
from picotime._internal.constants import (
    GPS_EPOCH,
    PICOS_PER_NANOSECOND,
    PICOS_PER_SECOND,
    SECONDS_PER_DAY,
)

logger = logging.getLogger(__name__)

# (date on which the new offset takes effect, GPS - UTC in seconds)
_LEAP_SECONDS: tuple[tuple[tuple[int, int, int], int], ...] = (
    ((1981, 7, 1), 1),
    ((1982, 7, 1), 2),
    ((1983, 7, 1), 3),
    ((1985, 7, 1), 4),
    ((1988, 1, 1), 5),
    ((1990, 1, 1), 6),
    ((1991, 1, 1), 7),
    ((1992, 7, 1), 8),
    ((1993, 7, 1), 9),
    ((1994, 7, 1), 10),
    ((1996, 1, 1), 11),
    ((1997, 7, 1), 12),
    ((1999, 1, 1), 13),
    ((2006, 1, 1), 14),
    ((2009, 1, 1), 15),
    ((2012, 7, 1), 16),
    ((2015, 7, 1), 17),
    ((2017, 1, 1), 18),
)

_LEAP_THRESHOLDS: list[int] = [
    days_from_civil(*ymd) * SECONDS_PER_DAY for ymd, _ in _LEAP_SECONDS
]
_LEAP_OFFSETS: list[int] = [offset for _, offset in _LEAP_SECONDS]

# POSIX seconds at the GPS epoch
GPS_EPOCH_POSIX_SECONDS: int = days_from_civil(*GPS_EPOCH) * SECONDS_PER_DAY


class Clock(Protocol):
    """A source of the current instant."""

    def now(self) -> int:
        """Return picoseconds since the clock's epoch."""
        ...


class SystemClock:
    """The host's wall clock, as POSIX picoseconds since 1970-01-01 UTC."""

    def now(self) -> int:
        return time.time_ns() * PICOS_PER_NANOSECOND

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """A clock stopped at a given tick count.

    Examples:
        >>> FixedClock(42).now()
        42
    """

    __slots__ = ("_ticks",)

    def __init__(self, ticks: int) -> None:
        self._ticks = ticks

    def now(self) -> int:
        return self._ticks

    def __repr__(self) -> str:
        return f"FixedClock({self._ticks})"


def gps_utc_offset(posix_seconds: int) -> int:
    """Return GPS - UTC in whole seconds at a POSIX timestamp.

    Instants before the first leap second after the GPS epoch (including
    those before the epoch itself) have an offset of zero.

    Args:
        posix_seconds: Seconds since 1970-01-01T00:00:00 UTC.

    Returns:
        Number of leap seconds separating GPS from UTC.

    Examples:
        >>> gps_utc_offset(0)
        0
        >>> gps_utc_offset(1_500_000_000)  # July 2017
        18
    """
    index = bisect.bisect_right(_LEAP_THRESHOLDS, posix_seconds)
    return _LEAP_OFFSETS[index - 1] if index else 0


def utc_to_gps(posix_picos: int) -> int:
    """Convert POSIX picoseconds to GPS picoseconds since 1980-01-06.

    Args:
        posix_picos: Picoseconds since 1970-01-01T00:00:00 UTC.

    Returns:
        Picoseconds since the GPS epoch on the GPS time scale.
    """
    offset = gps_utc_offset(posix_picos // PICOS_PER_SECOND)
    logger.debug("GPS-UTC offset at %d ps: %d s", posix_picos, offset)
    return posix_picos + (offset - GPS_EPOCH_POSIX_SECONDS) * PICOS_PER_SECOND


class GPSClock:
    """GPS time derived from a UTC clock.

    Args:
        utc_clock: Source of POSIX picoseconds. Defaults to SystemClock().
    """

    __slots__ = ("_utc_clock",)

    def __init__(self, utc_clock: Clock | None = None) -> None:
        self._utc_clock: Clock = utc_clock if utc_clock is not None else SystemClock()

    def now(self) -> int:
        posix_picos = self._utc_clock.now()
        logger.debug("sampled %r: %d ps", self._utc_clock, posix_picos)
        return utc_to_gps(posix_picos)

    def __repr__(self) -> str:
        return f"GPSClock({self._utc_clock!r})"


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "GPSClock",
    "GPS_EPOCH_POSIX_SECONDS",
    "gps_utc_offset",
    "utc_to_gps",
]
