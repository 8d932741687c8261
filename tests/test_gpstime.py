"""Tests for GPSTime.

These tests verify conversion between calendar components and tick
counts on the GPS time scale, epoch-relative arithmetic, range checking,
and sampling the current time.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from picotime import (
    DateTime,
    Duration,
    FixedClock,
    GPSTime,
    InvalidArgumentError,
    OutOfRangeError,
    TimeScale,
    Weekday,
)
from picotime._internal.constants import PICOS_PER_DAY, PICOS_PER_SECOND
from picotime.core.timepoint import TimePoint


class TestGPSTimeConstruction:
    """Tests for GPSTime construction."""

    def test_epoch_is_tick_zero(self) -> None:
        """1980-01-06T00:00:00 is tick zero."""
        assert GPSTime(1980, 1, 6).ticks() == 0
        assert GPSTime.epoch() == GPSTime(1980, 1, 6)
        assert GPSTime.scale is TimeScale.GPS

    def test_from_ticks(self) -> None:
        """Tick counts map to calendar components."""
        assert GPSTime.from_ticks(PICOS_PER_DAY + 1).components() == (
            1980,
            1,
            7,
            0,
            0,
            0,
            0,
            0,
            0,
            1,
        )
        assert GPSTime.from_ticks(-1).components() == (
            1980,
            1,
            5,
            23,
            59,
            59,
            999,
            999,
            999,
            999,
        )

    def test_component_round_trip(self, sample_components: tuple[int, ...]) -> None:
        """Components convert to ticks and back without loss."""
        t = GPSTime(*sample_components)
        assert t.components() == sample_components
        assert GPSTime.from_ticks(t.ticks()) == t
        assert GPSTime.from_time_since_epoch(t.time_since_epoch()) == t

    def test_component_accessors(self, sample_components: tuple[int, ...]) -> None:
        """Each of the ten accessors."""
        t = GPSTime(*sample_components)
        assert (t.year, t.month, t.day) == (2000, 1, 2)
        assert (t.hour, t.minute, t.second) == (3, 4, 5)
        assert (t.millisecond, t.microsecond, t.nanosecond, t.picosecond) == (
            6,
            7,
            8,
            9,
        )
        assert t.date().to_tuple() == (2000, 1, 2)
        assert t.time_of_day().hour == 3

    def test_weekday(self) -> None:
        """The GPS epoch fell on a Sunday."""
        assert GPSTime.epoch().weekday() is Weekday.SUNDAY
        assert GPSTime(2021, 4, 3).weekday() is Weekday.SATURDAY

    def test_invalid_components(self) -> None:
        """Invalid components raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            GPSTime(1900, 2, 29)
        with pytest.raises(InvalidArgumentError):
            GPSTime(2000, 1, 1, 24)

    def test_datetime_conversion(self, sample_components: tuple[int, ...]) -> None:
        """from_datetime and to_datetime are inverses."""
        dt = DateTime(*sample_components)
        t = GPSTime.from_datetime(dt)
        assert t.to_datetime() == dt

    def test_base_class_needs_a_scale(self) -> None:
        """TimePoint names no scale, so it cannot be constructed."""
        with pytest.raises(TypeError, match="no time scale"):
            TimePoint(2000, 1, 1)
        with pytest.raises(TypeError, match="no time scale"):
            TimePoint.epoch()
        with pytest.raises(TypeError, match="no time scale"):
            TimePoint.now(FixedClock(0))


class TestGPSTimeRange:
    """Tests for the representable range."""

    def test_min_and_max(self) -> None:
        """min() and max() match the DateTime extent."""
        assert GPSTime.min().to_datetime() == DateTime.min()
        assert GPSTime.max().to_datetime() == DateTime.max()
        assert GPSTime.min().ticks() == -(719162 + 3657) * PICOS_PER_DAY

    def test_from_ticks_out_of_range(self) -> None:
        """Tick counts outside [min, max] raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            GPSTime.from_ticks(GPSTime.min().ticks() - 1)
        with pytest.raises(OutOfRangeError):
            GPSTime.from_ticks(GPSTime.max().ticks() + 1)

    def test_arithmetic_out_of_range(self) -> None:
        """Stepping past either end raises OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            GPSTime.max().increment()
        with pytest.raises(OutOfRangeError):
            GPSTime.min().decrement()
        with pytest.raises(OutOfRangeError):
            GPSTime.max() + Duration(picoseconds=1)
        with pytest.raises(OutOfRangeError):
            GPSTime.min() - Duration(days=1)

    def test_resolution(self) -> None:
        """Resolution is one picosecond."""
        assert GPSTime.resolution() == Duration(picoseconds=1)


class TestGPSTimeArithmetic:
    """Tests for GPSTime arithmetic operations."""

    def test_epoch_plus_duration(self) -> None:
        """Epoch + 1h2m3s is 01:02:03 on the epoch day."""
        t = GPSTime.epoch() + Duration(hours=1, minutes=2, seconds=3)
        assert t == GPSTime(1980, 1, 6, 1, 2, 3)
        assert Duration(hours=1, minutes=2, seconds=3) + GPSTime.epoch() == t

    def test_group_laws(self, sample_components: tuple[int, ...]) -> None:
        """(a + d) - d == a and a - a == zero."""
        a = GPSTime(*sample_components)
        d = Duration(days=-400, picoseconds=3)
        assert (a + d) - d == a
        assert a - a == Duration()

    def test_difference(self) -> None:
        """Subtracting time points yields the elapsed Duration."""
        a = GPSTime(2000, 1, 2)
        b = GPSTime(2000, 1, 1, 23)
        assert a - b == Duration(hours=1)
        assert b - a == Duration(hours=-1)

    def test_increment_decrement(self) -> None:
        """Step by one tick."""
        t = GPSTime.epoch()
        assert t.increment().ticks() == 1
        assert t.decrement().ticks() == -1
        assert t.increment().decrement() == t

    def test_augmented_assignment(self) -> None:
        """+= and -= rebind to a new value."""
        t = GPSTime.epoch()
        original = t
        t += Duration(seconds=1)
        t -= Duration(milliseconds=500)
        assert t.ticks() == PICOS_PER_SECOND // 2
        assert original.ticks() == 0

    def test_add_non_duration(self) -> None:
        """Only durations can be added."""
        with pytest.raises(TypeError):
            GPSTime.epoch() + 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            GPSTime.epoch() + GPSTime.epoch()  # type: ignore[operator]


class TestGPSTimeComparison:
    """Tests for GPSTime comparison operations."""

    def test_total_order(self) -> None:
        """Ordering by tick count matches calendar order."""
        a = GPSTime(1979, 12, 31, 23, 59, 59)
        b = GPSTime.epoch()
        c = GPSTime(1980, 1, 6, 0, 0, 0, 0, 0, 0, 1)
        assert a < b < c
        assert c >= b >= a
        assert a != c

    def test_hash(self) -> None:
        """Equal time points hash alike."""
        assert hash(GPSTime.from_ticks(5)) == hash(GPSTime.epoch() + Duration(picoseconds=5))

    def test_not_equal_to_datetime(self) -> None:
        """A time point is not a DateTime."""
        assert GPSTime.epoch() != DateTime(1980, 1, 6)
        with pytest.raises(TypeError):
            GPSTime.epoch() < DateTime(1980, 1, 6)  # type: ignore[operator]

    def test_mixing_scales(self) -> None:
        """Time points on different scales never compare or subtract."""

        class OtherTime(TimePoint):
            __slots__ = ()
            scale = SimpleNamespace(value="OTHER")  # type: ignore[assignment]

        other = OtherTime._from_ticks_unchecked(0)
        assert GPSTime.epoch() != other
        with pytest.raises(TypeError):
            GPSTime.epoch() < other
        with pytest.raises(TypeError):
            GPSTime.epoch() - other


class TestGPSTimeStrings:
    """Tests for GPSTime string conversion."""

    def test_str(self, sample_components: tuple[int, ...]) -> None:
        """str() is the ISO 8601 representation."""
        assert str(GPSTime(*sample_components)) == "2000-01-02T03:04:05.006007008009"
        assert str(GPSTime(2000, 1, 2, 3, 4, 5)) == "2000-01-02T03:04:05"

    def test_repr(self, sample_components: tuple[int, ...]) -> None:
        """repr lists the ten components."""
        assert repr(GPSTime(*sample_components)) == "GPSTime(2000, 1, 2, 3, 4, 5, 6, 7, 8, 9)"

    def test_from_iso_format(self) -> None:
        """Parse into a time point."""
        t = GPSTime.from_iso_format("1980-01-06T00:00:00.5")
        assert t.ticks() == PICOS_PER_SECOND // 2

    def test_string_round_trip(self) -> None:
        """parse(format(t)) == t."""
        for t in (
            GPSTime.min(),
            GPSTime.max(),
            GPSTime.epoch().decrement(),
            GPSTime(2000, 1, 2, 3, 4, 5, 6, 7, 8, 9),
            GPSTime(2000, 1, 2, 3, 4, 5, 780),
        ):
            assert GPSTime.from_iso_format(str(t)) == t


class TestGPSTimeNow:
    """Tests for sampling the current time."""

    def test_now_with_fixed_clock(self) -> None:
        """now() reads ticks from the given clock."""
        assert GPSTime.now(FixedClock(42)).ticks() == 42

    def test_now_out_of_range(self) -> None:
        """A clock reporting an unrepresentable instant is rejected."""
        with pytest.raises(OutOfRangeError):
            GPSTime.now(FixedClock(GPSTime.max().ticks() + 1))

    def test_now_default_clock(self) -> None:
        """The default clock reports a plausible present."""
        t = GPSTime.now()
        assert t > GPSTime(2017, 1, 1)
        assert t < GPSTime.max()
