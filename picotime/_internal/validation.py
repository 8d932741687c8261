"""Validation utilities for picotime.

This module provides validation decorators and utilities for
ensuring calendar components are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from picotime._internal.calendar import days_in_month
from picotime._internal.constants import MAX_YEAR, MIN_YEAR
from picotime.errors import InvalidArgumentError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within half-open ranges.

    This decorator validates named parameters against (low, high) bounds,
    where low is inclusive and high is exclusive, raising
    InvalidArgumentError if any value is out of range. Parameters are
    checked in the order the limits are given.

    Args:
        **limits: Mapping of parameter names to (low, high) tuples.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 24), minute=(0, 60))
        ... def clock(hour: int, minute: int) -> None:
        ...     pass

        >>> clock(24, 0)
        Traceback (most recent call last):
        ...
        InvalidArgumentError: hour must be in [0, 24), got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (low, high) in limits.items():
                value = bound.arguments[param_name]
                check_range(param_name, value, low, high)

            return func(*args, **kwargs)

        return wrapper

    return decorator


def check_range(name: str, value: int, low: int, high: int) -> None:
    """Validate that low <= value < high.

    Args:
        name: Component name used in the error message.
        value: The value to validate.
        low: Inclusive lower bound.
        high: Exclusive upper bound.

    Raises:
        InvalidArgumentError: If value is outside [low, high).
    """
    if value < low or value >= high:
        raise InvalidArgumentError(f"{name} must be in [{low}, {high}), got {value}")


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        InvalidArgumentError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidArgumentError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidArgumentError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise InvalidArgumentError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidArgumentError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidArgumentError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date."""
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_range",
    "check_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
]
