"""TimeScale enumeration for continuous time scales.

This module provides the TimeScale enum. A time scale fixes the epoch
that tick counts are measured from and the clock that samples the
current instant. Time points carry their scale as a marker; everything
scale-specific is looked up in a table keyed by the scale.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, NamedTuple

from picotime._internal.calendar import days_from_civil
from picotime._internal.constants import GPS_EPOCH
from picotime.clock import Clock, GPSClock


class TimeScale(Enum):
    """A continuous (leap-second free) time scale.

    Examples:
        >>> TimeScale.GPS.epoch
        (1980, 1, 6)

        >>> TimeScale.GPS.epoch_days
        3657
    """

    GPS = "GPS"  # Global Positioning System time

    @property
    def epoch(self) -> tuple[int, int, int]:
        """Return the (year, month, day) whose midnight is tick zero."""
        return _SCALES[self].epoch

    @property
    def epoch_days(self) -> int:
        """Return the epoch as a day count relative to 1970-01-01."""
        return days_from_civil(*self.epoch)

    def default_clock(self) -> Clock:
        """Return a clock reporting picoseconds since this scale's epoch."""
        return _SCALES[self].clock_factory()


class _ScaleInfo(NamedTuple):
    epoch: tuple[int, int, int]
    clock_factory: Callable[[], Clock]


_SCALES: dict[TimeScale, _ScaleInfo] = {
    TimeScale.GPS: _ScaleInfo(epoch=GPS_EPOCH, clock_factory=GPSClock),
}


__all__ = ["TimeScale"]
