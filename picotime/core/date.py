"""Date class representing a calendar date.

This module provides the Date class, the year/month/day triple returned
by the date() accessor of the datetime and time point types.
"""

from __future__ import annotations

from picotime._internal.calendar import (
    civil_from_days,
    days_from_civil,
    is_leap_year,
    ordinal_to_ymd,
    weekday_from_days,
    ymd_to_ordinal,
)
from picotime._internal.validation import validate_date
from picotime.units.weekday import Weekday


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. The proleptic Gregorian calendar extends the Gregorian
    leap-year rules to dates before the calendar's adoption in 1582.
    Years 1 through 9999 are supported.

    The internal representation is a signed count of days since
    1970-01-01, so dates order and hash by that count.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2021, 4, 3)
        >>> d.weekday()
        <Weekday.SATURDAY: 5>

        >>> Date(2000, 2, 29)  # Valid leap year date
        Date(2000, 2, 29)
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            InvalidArgumentError: If any component is out of range.

        Examples:
            >>> Date(1900, 2, 29)  # 1900 is not a leap year
            Traceback (most recent call last):
            ...
            InvalidArgumentError: day must be between 1 and 28 for 1900-02, got 29
        """
        validate_date(year, month, day)
        self._days: int = days_from_civil(year, month, day)

    @classmethod
    def _from_days(cls, days: int) -> Date:
        """Create a Date from a day count, bypassing validation."""
        instance = object.__new__(cls)
        instance._days = days
        return instance

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Date:
        """Create a Date from an ordinal day number (0001-01-01 is 1).

        Raises:
            InvalidArgumentError: If the ordinal falls outside years 1-9999.
        """
        return cls(*ordinal_to_ymd(ordinal))

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
        """Return the day of the month."""
        return civil_from_days(self._days)[2]

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date falls in a leap year."""
        return is_leap_year(self.year)

    def weekday(self) -> Weekday:
        """Return the day of the week."""
        return Weekday(weekday_from_days(self._days))

    def to_ordinal(self) -> int:
        """Return the ordinal day number (0001-01-01 is 1)."""
        return ymd_to_ordinal(*civil_from_days(self._days))

    def days_since_unix_epoch(self) -> int:
        """Return the signed number of days since 1970-01-01."""
        return self._days

    def to_tuple(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return civil_from_days(self._days)

    def to_iso_format(self) -> str:
        """Return the date as YYYY-MM-DD.

        Examples:
            >>> Date(1, 2, 3).to_iso_format()
            '0001-02-03'
        """
        year, month, day = civil_from_days(self._days)
        return f"{year:04d}-{month:02d}-{day:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = civil_from_days(self._days)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Date"]
