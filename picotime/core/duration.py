"""Duration class representing a span of time.

This module provides the Duration class for representing time spans
with picosecond precision.
"""

from __future__ import annotations

from picotime._internal.constants import (
    INT128_MAX,
    INT128_MIN,
    PICOS_PER_DAY,
    PICOS_PER_HOUR,
    PICOS_PER_MICROSECOND,
    PICOS_PER_MILLISECOND,
    PICOS_PER_MINUTE,
    PICOS_PER_NANOSECOND,
    PICOS_PER_SECOND,
)
from picotime.errors import OutOfRangeError


def _scale(count: int | float, picos_per_unit: int) -> int:
    """Convert a count of some unit to a tick count.

    Integer counts are scaled exactly. Floating-point counts are first
    converted to a floating-point number of picoseconds, then truncated
    toward zero. NaN and infinite inputs are a caller error and raise the
    interpreter's own conversion exception.
    """
    if isinstance(count, int):
        return count * picos_per_unit
    return int(float(count) * picos_per_unit)


def _trunc_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = dividend // divisor
    if quotient < 0 and quotient * divisor != dividend:
        quotient += 1
    return quotient


def _trunc_mod(dividend: int, divisor: int) -> int:
    """Remainder of truncating division; takes the sign of the dividend."""
    return dividend - _trunc_div(dividend, divisor) * divisor


class Duration:
    """A signed span of time with picosecond precision.

    Duration describes a span of time using a fixed-point representation:
    a single integer count of picosecond ticks. The tick count is confined
    to the signed 128-bit range, which covers roughly +/-5e18 years
    without loss of precision. Any construction or arithmetic result
    outside that range raises OutOfRangeError.

    Duration supports the natural integer-like arithmetic operations.
    Division and modulo truncate toward zero, so that
    ``a == (a / n) * n + a % n`` holds for any nonzero divisor.

    Examples:
        >>> d = Duration.from_days(1.5)
        >>> d.total_seconds
        129600.0

        >>> Duration.from_seconds(1) + Duration.from_milliseconds(500)
        Duration(picoseconds=1500000000000)

        >>> str(Duration.from_seconds(754))
        '12m34s'
    """

    __slots__ = ("_ticks",)

    def __init__(
        self,
        days: int | float = 0,
        hours: int | float = 0,
        minutes: int | float = 0,
        seconds: int | float = 0,
        milliseconds: int | float = 0,
        microseconds: int | float = 0,
        nanoseconds: int | float = 0,
        picoseconds: int | float = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero, and are summed.
        Each component is converted to ticks independently, so a
        floating-point component is truncated on its own.

        Args:
            days: Number of days (86400 seconds each).
            hours: Number of hours.
            minutes: Number of minutes.
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.
            microseconds: Number of microseconds.
            nanoseconds: Number of nanoseconds.
            picoseconds: Number of picoseconds.

        Raises:
            OutOfRangeError: If the total exceeds the 128-bit tick range.

        Examples:
            >>> Duration()
            Duration(picoseconds=0)

            >>> Duration(seconds=1, milliseconds=500)
            Duration(picoseconds=1500000000000)
        """
        ticks = (
            _scale(days, PICOS_PER_DAY)
            + _scale(hours, PICOS_PER_HOUR)
            + _scale(minutes, PICOS_PER_MINUTE)
            + _scale(seconds, PICOS_PER_SECOND)
            + _scale(milliseconds, PICOS_PER_MILLISECOND)
            + _scale(microseconds, PICOS_PER_MICROSECOND)
            + _scale(nanoseconds, PICOS_PER_NANOSECOND)
            + _scale(picoseconds, 1)
        )
        self._ticks: int = self._check(ticks)

    @staticmethod
    def _check(ticks: int) -> int:
        if ticks < INT128_MIN or ticks > INT128_MAX:
            raise OutOfRangeError(
                f"duration of {ticks} picoseconds exceeds the 128-bit tick range"
            )
        return ticks

    @classmethod
    def _from_ticks(cls, ticks: int) -> Duration:
        """Create a Duration from a raw tick count.

        This is an internal factory method that bypasses component
        conversion but still enforces the tick range.
        """
        instance = object.__new__(cls)
        instance._ticks = cls._check(ticks)
        return instance

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return cls._from_ticks(0)

    @classmethod
    def min(cls) -> Duration:
        """Return the most negative representable Duration."""
        return cls._from_ticks(INT128_MIN)

    @classmethod
    def max(cls) -> Duration:
        """Return the largest representable Duration."""
        return cls._from_ticks(INT128_MAX)

    @classmethod
    def resolution(cls) -> Duration:
        """Return the smallest possible difference between unequal durations.

        Returns:
            A Duration of one tick (one picosecond).
        """
        return cls._from_ticks(1)

    @classmethod
    def from_days(cls, days: int | float) -> Duration:
        """Create a Duration from a number of days.

        A day always contains exactly 86400 seconds.

        Args:
            days: Number of days (can be negative or fractional).

        Returns:
            A Duration representing the specified number of days.

        Examples:
            >>> Duration.from_days(1) == Duration.from_hours(24)
            True
        """
        return cls._from_ticks(_scale(days, PICOS_PER_DAY))

    @classmethod
    def from_hours(cls, hours: int | float) -> Duration:
        """Create a Duration from a number of hours.

        Args:
            hours: Number of hours (can be negative or fractional).

        Returns:
            A Duration representing the specified number of hours.
        """
        return cls._from_ticks(_scale(hours, PICOS_PER_HOUR))

    @classmethod
    def from_minutes(cls, minutes: int | float) -> Duration:
        """Create a Duration from a number of minutes.

        Args:
            minutes: Number of minutes (can be negative or fractional).

        Returns:
            A Duration representing the specified number of minutes.
        """
        return cls._from_ticks(_scale(minutes, PICOS_PER_MINUTE))

    @classmethod
    def from_seconds(cls, seconds: int | float) -> Duration:
        """Create a Duration from a number of seconds.

        Args:
            seconds: Number of seconds (can be negative or fractional).

        Returns:
            A Duration representing the specified number of seconds.

        Examples:
            >>> Duration.from_seconds(0.5) == Duration.from_milliseconds(500)
            True
        """
        return cls._from_ticks(_scale(seconds, PICOS_PER_SECOND))

    @classmethod
    def from_milliseconds(cls, milliseconds: int | float) -> Duration:
        """Create a Duration from a number of milliseconds."""
        return cls._from_ticks(_scale(milliseconds, PICOS_PER_MILLISECOND))

    @classmethod
    def from_microseconds(cls, microseconds: int | float) -> Duration:
        """Create a Duration from a number of microseconds."""
        return cls._from_ticks(_scale(microseconds, PICOS_PER_MICROSECOND))

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int | float) -> Duration:
        """Create a Duration from a number of nanoseconds."""
        return cls._from_ticks(_scale(nanoseconds, PICOS_PER_NANOSECOND))

    @classmethod
    def from_picoseconds(cls, picoseconds: int | float) -> Duration:
        """Create a Duration from a number of picoseconds.

        Examples:
            >>> Duration.from_picoseconds(123).count()
            123
        """
        return cls._from_ticks(_scale(picoseconds, 1))

    def count(self) -> int:
        """Return the tick count (number of picoseconds)."""
        return self._ticks

    @property
    def total_seconds(self) -> float:
        """Return the total duration as seconds (approximate).

        Note: This conversion may lose precision for very large or very
        precise durations due to floating-point representation limits.
        For exact calculations, use count().

        Examples:
            >>> Duration(days=1, hours=1).total_seconds
            90000.0
        """
        return self._ticks / PICOS_PER_SECOND

    @property
    def is_negative(self) -> bool:
        """Return True if this is a negative duration."""
        return self._ticks < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length duration."""
        return self._ticks == 0

    def increment(self) -> Duration:
        """Return this duration lengthened by one tick.

        Examples:
            >>> Duration().increment()
            Duration(picoseconds=1)
        """
        return Duration._from_ticks(self._ticks + 1)

    def decrement(self) -> Duration:
        """Return this duration shortened by one tick.

        Examples:
            >>> Duration().decrement()
            Duration(picoseconds=-1)
        """
        return Duration._from_ticks(self._ticks - 1)

    def __add__(self, other: object) -> Duration:
        """Add two durations.

        Raises:
            OutOfRangeError: If the sum exceeds the tick range.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration._from_ticks(self._ticks + other._ticks)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        """Subtract one duration from another."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration._from_ticks(self._ticks - other._ticks)

    def __mul__(self, other: object) -> Duration:
        """Multiply a duration by a scalar.

        Integer multipliers are exact. Floating-point multipliers operate
        on the floating-point tick count and truncate toward zero.

        Args:
            other: An integer or float multiplier.

        Returns:
            A new Duration scaled by the multiplier.

        Examples:
            >>> Duration(seconds=30) * 3 == Duration(seconds=90)
            True
        """
        if isinstance(other, int):
            return Duration._from_ticks(self._ticks * other)
        if isinstance(other, float):
            return Duration._from_ticks(int(float(self._ticks) * other))
        return NotImplemented

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Duration:
        """Divide a duration by a scalar, truncating toward zero.

        Integer division is exact. Floating-point division operates on
        the floating-point tick count.

        Args:
            other: An integer or float divisor.

        Returns:
            A new Duration representing the quotient.

        Raises:
            ZeroDivisionError: If other is zero.

        Examples:
            >>> Duration(picoseconds=-7) / 2
            Duration(picoseconds=-3)
        """
        if isinstance(other, int):
            if other == 0:
                raise ZeroDivisionError("duration division by zero")
            return Duration._from_ticks(_trunc_div(self._ticks, other))
        if isinstance(other, float):
            if other == 0.0:
                raise ZeroDivisionError("duration division by zero")
            return Duration._from_ticks(int(float(self._ticks) / other))
        return NotImplemented

    def __mod__(self, other: object) -> Duration:
        """Compute the remainder after truncating division.

        The result has the sign of the dividend (this duration).

        Args:
            other: A Duration, or an integer tick count.

        Raises:
            ZeroDivisionError: If the modulus is zero.

        Examples:
            >>> Duration(picoseconds=-7) % Duration(picoseconds=2)
            Duration(picoseconds=-1)
        """
        if isinstance(other, Duration):
            modulus = other._ticks
        elif isinstance(other, int):
            modulus = other
        else:
            return NotImplemented
        if modulus == 0:
            raise ZeroDivisionError("duration modulo by zero")
        return Duration._from_ticks(_trunc_mod(self._ticks, modulus))

    def __neg__(self) -> Duration:
        """Return the negation of this duration."""
        return Duration._from_ticks(-self._ticks)

    def __pos__(self) -> Duration:
        """Return this duration (unary +)."""
        return self

    def __abs__(self) -> Duration:
        """Return the magnitude of this duration.

        Examples:
            >>> abs(Duration(seconds=-123)) == Duration(seconds=123)
            True
        """
        if self._ticks < 0:
            return -self
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks == other._ticks

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __repr__(self) -> str:
        return f"Duration(picoseconds={self._ticks})"

    def __str__(self) -> str:
        """Return a human-readable string such as '1d23h4m56.789s'."""
        from picotime.format.duration import format_duration

        return format_duration(self)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return self._ticks != 0


__all__ = ["Duration"]
