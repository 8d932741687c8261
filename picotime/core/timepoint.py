"""Time points on a continuous time scale.

This module provides TimePoint, an instant measured as picoseconds since
the epoch of a time scale, and GPSTime, the time point on the Global
Positioning System time scale.

A time point converts losslessly to and from the ten DateTime
components over 0001-01-01T00:00:00 through
9999-12-31T23:59:59.999999999999. Because the scale never inserts leap
seconds, tick arithmetic always equals elapsed time on that scale.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from picotime._internal.constants import PICOS_PER_DAY
from picotime.clock import Clock
from picotime.core.date import Date
from picotime.core.datetime import DateTime
from picotime.core.duration import Duration
from picotime.core.time import Time
from picotime.errors import OutOfRangeError
from picotime.units.timescale import TimeScale
from picotime.units.weekday import Weekday

TP = TypeVar("TP", bound="TimePoint")


class TimePoint:
    """An instant on a time scale, with picosecond resolution.

    A TimePoint stores a single signed tick count of picoseconds relative
    to the epoch of its time scale. The scale is a class-level marker:
    each concrete time point type sets ``scale`` and inherits everything
    else, with scale-specific data (epoch, clock) looked up from the
    TimeScale. Time points on different scales never compare or
    subtract.

    Every value lies in the range [min(), max()]. Construction from a
    tick count, and arithmetic, raise OutOfRangeError for anything
    outside it.

    TimePoint itself names no scale and cannot be instantiated; use a
    concrete subclass such as GPSTime.
    """

    __slots__ = ("_ticks",)

    scale: ClassVar[TimeScale]

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
        nanosecond: int = 0,
        picosecond: int = 0,
    ) -> None:
        """Create a time point from calendar components.

        Raises:
            InvalidArgumentError: If any component is out of range.
        """
        dt = DateTime(
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
        self._ticks: int = self._ticks_from_datetime(dt)

    @classmethod
    def _time_scale(cls) -> TimeScale:
        scale = getattr(cls, "scale", None)
        if scale is None:
            raise TypeError(
                f"{cls.__name__} has no time scale; "
                "use a concrete subclass such as GPSTime"
            )
        return scale

    @classmethod
    def _epoch_picos(cls) -> int:
        return cls._time_scale().epoch_days * PICOS_PER_DAY

    @classmethod
    def _ticks_from_datetime(cls, dt: DateTime) -> int:
        return dt._total_picos() - cls._epoch_picos()

    @classmethod
    def _from_ticks_unchecked(cls: type[TP], ticks: int) -> TP:
        cls._time_scale()
        instance = object.__new__(cls)
        instance._ticks = ticks
        return instance

    @classmethod
    def _tick_range(cls) -> tuple[int, int]:
        return (
            cls._ticks_from_datetime(DateTime.min()),
            cls._ticks_from_datetime(DateTime.max()),
        )

    @classmethod
    def from_ticks(cls: type[TP], ticks: int) -> TP:
        """Create a time point from picoseconds since the scale epoch.

        Args:
            ticks: Signed tick count relative to the epoch.

        Raises:
            OutOfRangeError: If the tick count lies outside [min(), max()].

        Examples:
            >>> GPSTime.from_ticks(0)
            GPSTime(1980, 1, 6, 0, 0, 0, 0, 0, 0, 0)
        """
        low, high = cls._tick_range()
        if ticks < low or ticks > high:
            raise OutOfRangeError(
                f"{ticks} picoseconds since the {cls.scale.value} epoch is outside "
                f"the representable range of {cls.__name__}"
            )
        return cls._from_ticks_unchecked(ticks)

    @classmethod
    def from_time_since_epoch(cls: type[TP], duration: Duration) -> TP:
        """Create a time point from a Duration since the scale epoch.

        Raises:
            OutOfRangeError: If the result lies outside [min(), max()].
        """
        return cls.from_ticks(duration.count())

    @classmethod
    def from_datetime(cls: type[TP], dt: DateTime) -> TP:
        """Create a time point reading the given calendar components."""
        return cls._from_ticks_unchecked(cls._ticks_from_datetime(dt))

    @classmethod
    def from_iso_format(cls: type[TP], s: str) -> TP:
        """Parse a time point from its ISO 8601 representation.

        Raises:
            ParseError: If the string does not match the grammar.
            InvalidArgumentError: If any component is out of range.

        Examples:
            >>> GPSTime.from_iso_format("1980-01-06T00:00:00.5").ticks()
            500000000000
        """
        return cls.from_datetime(DateTime.from_iso_format(s))

    @classmethod
    def now(cls: type[TP], clock: Clock | None = None) -> TP:
        """Return the current time on this time scale.

        Args:
            clock: Clock reporting picoseconds since the scale epoch.
                Defaults to the scale's own clock.

        Raises:
            OutOfRangeError: If the clock reports an unrepresentable instant.
        """
        if clock is None:
            clock = cls._time_scale().default_clock()
        return cls.from_ticks(clock.now())

    @classmethod
    def min(cls: type[TP]) -> TP:
        """Return the earliest representable time point."""
        return cls.from_datetime(DateTime.min())

    @classmethod
    def max(cls: type[TP]) -> TP:
        """Return the latest representable time point."""
        return cls.from_datetime(DateTime.max())

    @classmethod
    def epoch(cls: type[TP]) -> TP:
        """Return the time point at tick zero."""
        return cls._from_ticks_unchecked(0)

    @staticmethod
    def resolution() -> Duration:
        """Return the smallest difference between unequal time points."""
        return Duration.resolution()

    def ticks(self) -> int:
        """Return picoseconds since the scale epoch."""
        return self._ticks

    def time_since_epoch(self) -> Duration:
        """Return the time elapsed since the scale epoch."""
        return Duration._from_ticks(self._ticks)

    def to_datetime(self) -> DateTime:
        """Return the calendar reading of this time point."""
        days, picos = divmod(self._ticks + self._epoch_picos(), PICOS_PER_DAY)
        return DateTime._from_internal(days, picos)

    # Components (delegated to DateTime)

    @property
    def year(self) -> int:
        return self.to_datetime().year

    @property
    def month(self) -> int:
        return self.to_datetime().month

    @property
    def day(self) -> int:
        return self.to_datetime().day

    @property
    def hour(self) -> int:
        return self.time_of_day().hour

    @property
    def minute(self) -> int:
        return self.time_of_day().minute

    @property
    def second(self) -> int:
        return self.time_of_day().second

    @property
    def millisecond(self) -> int:
        return self.time_of_day().millisecond

    @property
    def microsecond(self) -> int:
        return self.time_of_day().microsecond

    @property
    def nanosecond(self) -> int:
        return self.time_of_day().nanosecond

    @property
    def picosecond(self) -> int:
        return self.time_of_day().picosecond

    def components(self) -> tuple[int, int, int, int, int, int, int, int, int, int]:
        """Return all ten calendar components, most significant first."""
        return self.to_datetime().components()

    def date(self) -> Date:
        """Return the calendar date."""
        return self.to_datetime().date()

    def time_of_day(self) -> Time:
        """Return the time of day."""
        return self.to_datetime().time_of_day()

    def weekday(self) -> Weekday:
        """Return the day of the week."""
        return self.to_datetime().weekday()

    def increment(self: TP) -> TP:
        """Return the time point one tick later.

        Raises:
            OutOfRangeError: If this is already max().
        """
        return self.from_ticks(self._ticks + 1)

    def decrement(self: TP) -> TP:
        """Return the time point one tick earlier.

        Raises:
            OutOfRangeError: If this is already min().
        """
        return self.from_ticks(self._ticks - 1)

    def to_iso_format(self) -> str:
        """Return the time point as an ISO 8601 string."""
        from picotime.format.iso8601 import format_iso8601

        return format_iso8601(self)

    # Arithmetic

    def __add__(self: TP, other: object) -> TP:
        """Offset this time point forward by a Duration.

        Raises:
            OutOfRangeError: If the result is not representable.

        Examples:
            >>> t = GPSTime.epoch() + Duration(hours=1, minutes=2, seconds=3)
            >>> t == GPSTime(1980, 1, 6, 1, 2, 3)
            True
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self.from_ticks(self._ticks + other.count())

    def __radd__(self: TP, other: object) -> TP:
        """Support Duration + time point."""
        return self.__add__(other)

    def __sub__(self, other: object) -> TimePoint | Duration:
        """Subtract a Duration, or another time point on the same scale.

        Returns:
            A time point when subtracting a Duration; the elapsed
            Duration when subtracting a time point.

        Raises:
            TypeError: If other is a time point on a different scale.
            OutOfRangeError: If the result is not representable.
        """
        if isinstance(other, Duration):
            return self.from_ticks(self._ticks - other.count())
        if isinstance(other, TimePoint):
            self._check_same_scale(other)
            return Duration._from_ticks(self._ticks - other._ticks)
        return NotImplemented

    # Comparison

    def _check_same_scale(self, other: TimePoint) -> None:
        if other.scale is not self.scale:
            raise TypeError(
                f"can't mix {self.scale.value} and {other.scale.value} time points"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePoint) or other.scale is not self.scale:
            return NotImplemented
        return self._ticks == other._ticks

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        self._check_same_scale(other)
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        self._check_same_scale(other)
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        self._check_same_scale(other)
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        self._check_same_scale(other)
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        return hash((self.scale, self._ticks))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.components()}"

    def __str__(self) -> str:
        return self.to_iso_format()


class GPSTime(TimePoint):
    """A time point in Global Positioning System (GPS) time.

    GPS time is an atomic time scale implemented by GPS satellites and
    ground stations. Unlike UTC, it is continuous: leap seconds are
    never inserted, so the offset between GPS and UTC grows each time a
    leap second is added to UTC. Tick zero is 1980-01-06T00:00:00.

    Examples:
        >>> t = GPSTime(2000, 1, 2, 3, 4, 5, 6, 7, 8, 9)
        >>> str(t)
        '2000-01-02T03:04:05.006007008009'

        >>> (t - GPSTime.epoch()) > Duration.from_days(7000)
        True
    """

    __slots__ = ()

    scale = TimeScale.GPS


__all__ = ["TimePoint", "GPSTime"]
