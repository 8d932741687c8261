"""Calendar utilities for picotime.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap year logic and exact conversion between calendar dates
and a signed count of days.

Day 0 = 1970-01-01 (the Unix epoch)

The conversions are closed-form. They work on 400-year eras of exactly
146097 days, with years starting on March 1 so that the leap day falls
at the end of the year. No iteration, no floating point.

This module is not part of the public API.
"""

from __future__ import annotations

from picotime._internal.constants import DAYS_IN_MONTH, UNIX_EPOCH_WEEKDAY

DAYS_PER_ERA: int = 146_097

# Days from 0000-03-01 to 1970-01-01
_EPOCH_SHIFT: int = 719_468

# Ordinal (0001-01-01 == 1) of 1970-01-01
_UNIX_EPOCH_ORDINAL: int = 719_163


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of the last day in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a count of days since 1970-01-01.

    The input is not validated; any (year, month, day) with month in 1-12
    yields the day count of the corresponding proleptic Gregorian date.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Signed number of days relative to 1970-01-01.

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(1980, 1, 6)
        3657
        >>> days_from_civil(1969, 12, 31)
        -1
    """
    # Shift to a March-based year: Jan and Feb belong to the previous year
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400  # [0, 399]
    shifted_month = month - 3 if month > 2 else month + 9  # Mar=0 .. Feb=11
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1  # [0, 365]
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )  # [0, 146096]
    return era * DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert a count of days since 1970-01-01 to year, month, day.

    This is the exact inverse of days_from_civil().

    Args:
        days: Signed number of days relative to 1970-01-01.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(11016)
        (2000, 2, 29)
    """
    z = days + _EPOCH_SHIFT
    era = z // DAYS_PER_ERA
    day_of_era = z - era * DAYS_PER_ERA  # [0, 146096]
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // (DAYS_PER_ERA - 1)
    ) // 365  # [0, 399]
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )  # [0, 365]
    shifted_month = (5 * day_of_year + 2) // 153  # [0, 11]
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return (year, month, day)


def weekday_from_days(days: int) -> int:
    """Return the day of week (Monday=0, Sunday=6) for a day count.

    Args:
        days: Signed number of days relative to 1970-01-01.

    Returns:
        Day of week (0=Monday, 6=Sunday).
    """
    return (days + UNIX_EPOCH_WEEKDAY) % 7


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (0001-01-01 is ordinal 1)."""
    return days_from_civil(year, month, day) + _UNIX_EPOCH_ORDINAL


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (0001-01-01 is ordinal 1) to year, month, day."""
    return civil_from_days(ordinal - _UNIX_EPOCH_ORDINAL)


__all__ = [
    "DAYS_PER_ERA",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_from_civil",
    "civil_from_days",
    "weekday_from_days",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
]
