"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with picosecond precision.
"""

from __future__ import annotations

from picotime._internal.constants import (
    PICOS_PER_HOUR,
    PICOS_PER_MICROSECOND,
    PICOS_PER_MILLISECOND,
    PICOS_PER_MINUTE,
    PICOS_PER_NANOSECOND,
    PICOS_PER_SECOND,
    SUBSECOND_FIELD_BOUND,
)
from picotime._internal.validation import validate_range
from picotime.core.duration import Duration

_SUBSECOND = (0, SUBSECOND_FIELD_BOUND)


class Time:
    """A time of day with picosecond precision.

    Time represents the time portion of a day on a 24-hour clock, from
    midnight (00:00:00) to just before the next midnight
    (23:59:59.999999999999). It does not include any date information.

    The internal representation stores the total picoseconds since
    midnight in a single `_picos` slot.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).
        microsecond: The microsecond component (0-999).
        nanosecond: The nanosecond component (0-999).
        picosecond: The picosecond component (0-999).

    Examples:
        >>> t = Time(14, 30, 45, millisecond=6, picosecond=9)
        >>> t.second, t.millisecond, t.microsecond, t.picosecond
        (45, 6, 0, 9)

        >>> str(t.subsecond)
        '6.000000009ms'
    """

    __slots__ = ("_picos",)

    @validate_range(
        hour=(0, 24),
        minute=(0, 60),
        second=(0, 60),
        millisecond=_SUBSECOND,
        microsecond=_SUBSECOND,
        nanosecond=_SUBSECOND,
        picosecond=_SUBSECOND,
    )
    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        millisecond: int = 0,
        microsecond: int = 0,
        nanosecond: int = 0,
        picosecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Each sub-second field holds three decimal digits of the fraction:
        Time(0, 0, 0, millisecond=1, microsecond=2) is 00:00:00.001002.

        Raises:
            InvalidArgumentError: If any component is out of range.
        """
        self._picos: int = (
            hour * PICOS_PER_HOUR
            + minute * PICOS_PER_MINUTE
            + second * PICOS_PER_SECOND
            + millisecond * PICOS_PER_MILLISECOND
            + microsecond * PICOS_PER_MICROSECOND
            + nanosecond * PICOS_PER_NANOSECOND
            + picosecond
        )

    @classmethod
    def _from_picos(cls, picos: int) -> Time:
        """Create a Time from picoseconds since midnight, bypassing validation."""
        instance = object.__new__(cls)
        instance._picos = picos
        return instance

    @classmethod
    def midnight(cls) -> Time:
        """Return 00:00:00."""
        return cls._from_picos(0)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._picos // PICOS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._picos % PICOS_PER_HOUR) // PICOS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._picos % PICOS_PER_MINUTE) // PICOS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the millisecond component (0-999)."""
        return (self._picos % PICOS_PER_SECOND) // PICOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the microsecond component (0-999).

        This is the microseconds within the current millisecond, not the
        total microseconds within the second.
        """
        return (self._picos % PICOS_PER_MILLISECOND) // PICOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond component (0-999)."""
        return (self._picos % PICOS_PER_MICROSECOND) // PICOS_PER_NANOSECOND

    @property
    def picosecond(self) -> int:
        """Return the picosecond component (0-999)."""
        return self._picos % PICOS_PER_NANOSECOND

    @property
    def subsecond(self) -> Duration:
        """Return the fraction of the current second as a Duration."""
        return Duration._from_ticks(self._picos % PICOS_PER_SECOND)

    def since_midnight(self) -> Duration:
        """Return the time elapsed since midnight."""
        return Duration._from_ticks(self._picos)

    def to_iso_format(self) -> str:
        """Return the time as hh:mm:ss with trimmed sub-seconds.

        Examples:
            >>> Time(4, 5, 6, millisecond=780).to_iso_format()
            '04:05:06.78'
        """
        text = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        fraction = self._picos % PICOS_PER_SECOND
        if fraction:
            text += f".{fraction:012d}".rstrip("0")
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._picos == other._picos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._picos < other._picos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._picos <= other._picos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._picos > other._picos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._picos >= other._picos

    def __hash__(self) -> int:
        return hash(self._picos)

    def __repr__(self) -> str:
        return (
            f"Time({self.hour}, {self.minute}, {self.second}, "
            f"millisecond={self.millisecond}, microsecond={self.microsecond}, "
            f"nanosecond={self.nanosecond}, picosecond={self.picosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Time"]
