"""Weekday enumeration.

This module provides the Weekday enum for the day of the week of a
calendar date.
"""

from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, Monday=0 through Sunday=6.

    Examples:
        >>> Weekday(5)
        <Weekday.SATURDAY: 5>

        >>> Weekday.SUNDAY.is_weekend
        True
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self >= Weekday.SATURDAY


__all__ = ["Weekday"]
