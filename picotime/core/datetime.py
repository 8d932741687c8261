"""DateTime class, a broken-down calendar date and time.

This module provides the DateTime class for representing a date and
time of day as ten calendar components with picosecond resolution.
"""

from __future__ import annotations

from picotime._internal.calendar import civil_from_days, weekday_from_days
from picotime._internal.constants import MAX_YEAR, MIN_YEAR, PICOS_PER_DAY
from picotime.core.date import Date
from picotime.core.time import Time
from picotime.units.weekday import Weekday


class DateTime:
    """A "broken-down" date and time with picosecond resolution.

    A DateTime consists of date and time-of-day components. The date
    components follow the proleptic Gregorian calendar; only years 1
    through 9999 may be represented. The time components use a 24-hour
    clock and have no leap second.

    DateTime is scale-agnostic: it names a calendar reading, not an
    instant. Time points on a specific time scale (see GPSTime) convert
    to and from DateTime.

    The internal representation is a day count relative to 1970-01-01
    plus picoseconds since midnight. Ordering by that pair is the same as
    lexicographic ordering over the ten components.

    Attributes:
        year: The year component (1-9999).
        month: The month component (1-12).
        day: The day component.
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).
        microsecond: The microsecond component (0-999).
        nanosecond: The nanosecond component (0-999).
        picosecond: The picosecond component (0-999).

    Examples:
        >>> dt = DateTime(2000, 1, 2, 3, 4, 5, 6, 7, 8, 9)
        >>> dt.year, dt.picosecond
        (2000, 9)
        >>> str(dt)
        '2000-01-02T03:04:05.006007008009'

        >>> DateTime.from_iso_format("2001-02-03 04:05:06.78").millisecond
        780
    """

    __slots__ = ("_days", "_picos")

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
        """Create a DateTime from component parts.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).
            microsecond: The microsecond (0-999).
            nanosecond: The nanosecond (0-999).
            picosecond: The picosecond (0-999).

        Raises:
            InvalidArgumentError: If any component is out of range.
        """
        # Validate date components by creating a Date (reuse validation)
        date = Date(year, month, day)

        # Validate time components by creating a Time (reuse validation)
        time = Time(
            hour,
            minute,
            second,
            millisecond=millisecond,
            microsecond=microsecond,
            nanosecond=nanosecond,
            picosecond=picosecond,
        )

        self._days: int = date._days
        self._picos: int = time._picos

    @classmethod
    def _from_internal(cls, days: int, picos: int) -> DateTime:
        """Create a DateTime from a day count and picoseconds since midnight.

        This is an internal factory method that bypasses validation.
        """
        instance = object.__new__(cls)
        instance._days = days
        instance._picos = picos
        return instance

    @classmethod
    def min(cls) -> DateTime:
        """Return the earliest valid DateTime, 0001-01-01T00:00:00."""
        return cls(MIN_YEAR, 1, 1)

    @classmethod
    def max(cls) -> DateTime:
        """Return the latest valid DateTime, 9999-12-31T23:59:59.999999999999."""
        return cls(MAX_YEAR, 12, 31, 23, 59, 59, 999, 999, 999, 999)

    @classmethod
    def combine(cls, date: Date, time: Time) -> DateTime:
        """Create a DateTime from a Date and a Time."""
        return cls._from_internal(date._days, time._picos)

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse a DateTime from its ISO 8601 representation.

        See picotime.format.iso8601.parse_iso8601 for the grammar.

        Raises:
            ParseError: If the string does not match the grammar.
            InvalidArgumentError: If any component is out of range.
        """
        from picotime.format.iso8601 import parse_iso8601

        return parse_iso8601(s)

    # Date components

    @property
    def year(self) -> int:
        """Return the year component."""
        return civil_from_days(self._days)[0]

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return civil_from_days(self._days)[1]

    @property
    def day(self) -> int:
        """Return the day component."""
        return civil_from_days(self._days)[2]

    # Time components (delegated to Time)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self.time_of_day().hour

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self.time_of_day().minute

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self.time_of_day().second

    @property
    def millisecond(self) -> int:
        """Return the millisecond component (0-999)."""
        return self.time_of_day().millisecond

    @property
    def microsecond(self) -> int:
        """Return the microsecond component (0-999)."""
        return self.time_of_day().microsecond

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond component (0-999)."""
        return self.time_of_day().nanosecond

    @property
    def picosecond(self) -> int:
        """Return the picosecond component (0-999)."""
        return self.time_of_day().picosecond

    def components(self) -> tuple[int, int, int, int, int, int, int, int, int, int]:
        """Return all ten components, most significant first.

        Examples:
            >>> DateTime(2000, 1, 2, 3, 4, 5).components()
            (2000, 1, 2, 3, 4, 5, 0, 0, 0, 0)
        """
        year, month, day = civil_from_days(self._days)
        t = self.time_of_day()
        return (
            year,
            month,
            day,
            t.hour,
            t.minute,
            t.second,
            t.millisecond,
            t.microsecond,
            t.nanosecond,
            t.picosecond,
        )

    def date(self) -> Date:
        """Return the calendar date."""
        return Date._from_days(self._days)

    def time_of_day(self) -> Time:
        """Return the time of day."""
        return Time._from_picos(self._picos)

    def weekday(self) -> Weekday:
        """Return the day of the week.

        Examples:
            >>> DateTime(1920, 2, 29).weekday()
            <Weekday.SUNDAY: 6>
        """
        return Weekday(weekday_from_days(self._days))

    def replace(self, **changes: int) -> DateTime:
        """Return a new DateTime with the given components replaced.

        Any component not specified retains its current value. The result
        is validated like a freshly constructed DateTime.

        Raises:
            TypeError: If a keyword is not a component name.
            InvalidArgumentError: If the result is not a valid DateTime.

        Examples:
            >>> DateTime(2000, 1, 31).replace(month=2)
            Traceback (most recent call last):
            ...
            InvalidArgumentError: day must be between 1 and 29 for 2000-02, got 31
        """
        fields = dict(zip(_COMPONENT_NAMES, self.components()))
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"unknown DateTime component(s): {sorted(unknown)}")
        fields.update(changes)
        return DateTime(**fields)

    def _key(self) -> tuple[int, int]:
        return (self._days, self._picos)

    def _total_picos(self) -> int:
        """Return picoseconds since 1970-01-01T00:00:00."""
        return self._days * PICOS_PER_DAY + self._picos

    def to_iso_format(self) -> str:
        """Return the datetime as an ISO 8601 string.

        Examples:
            >>> DateTime(2000, 1, 2, 3, 4, 5).to_iso_format()
            '2000-01-02T03:04:05'
        """
        from picotime.format.iso8601 import format_iso8601

        return format_iso8601(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"DateTime{self.components()}"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


_COMPONENT_NAMES: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
    "microsecond",
    "nanosecond",
    "picosecond",
)


__all__ = ["DateTime"]
