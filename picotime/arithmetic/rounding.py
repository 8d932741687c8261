"""Rounding of durations to a multiple of a period.

This module provides the snapping operations for Duration:
    - trunc: toward zero
    - floor: toward negative infinity
    - ceil: toward positive infinity
    - round: to nearest, ties to the even multiple

All functions take the value and the period as Durations and return a
Duration that is an integer multiple of the period. A zero period raises
ZeroDivisionError.

Examples:
    >>> from picotime import Duration
    >>> d = -Duration.from_minutes(3) - Duration.from_seconds(30)
    >>> minute = Duration.from_minutes(1)
    >>> str(trunc(d, minute)), str(floor(d, minute)), str(ceil(d, minute))
    ('-3m0s', '-4m0s', '-3m0s')
    >>> str(round(d, minute))
    '-4m0s'
"""

from __future__ import annotations

from picotime.core.duration import Duration, _trunc_mod


def _floor_ticks(ticks: int, step: int) -> int:
    """Largest multiple of step (positive) not above ticks."""
    return ticks - ticks % step


def trunc(duration: Duration, period: Duration) -> Duration:
    """Truncate to a multiple of period.

    Returns the nearest integer multiple of period not greater in
    magnitude than duration.

    Args:
        duration: The value to truncate.
        period: The rounding period (nonzero).

    Returns:
        duration - (duration % period).
    """
    ticks = duration.count()
    return Duration._from_ticks(ticks - _trunc_mod(ticks, period.count()))


def floor(duration: Duration, period: Duration) -> Duration:
    """Round down to a multiple of period.

    Returns the largest integer multiple of period that is less than or
    equal to duration.
    """
    step = abs(period.count())
    return Duration._from_ticks(_floor_ticks(duration.count(), step))


def ceil(duration: Duration, period: Duration) -> Duration:
    """Round up to a multiple of period.

    Returns the smallest integer multiple of period that is greater than
    or equal to duration.
    """
    step = abs(period.count())
    return Duration._from_ticks(-_floor_ticks(-duration.count(), step))


def round(duration: Duration, period: Duration) -> Duration:  # noqa: A001
    """Round to the nearest multiple of period.

    Returns the integer multiple of period closest to duration. If there
    are two such values, returns the one that is an even multiple of
    period.

    Examples:
        >>> from picotime import Duration
        >>> s = Duration.from_seconds(1)
        >>> round(Duration(seconds=2, milliseconds=500), s) == 2 * s
        True
        >>> round(Duration(seconds=3, milliseconds=500), s) == 4 * s
        True
    """
    ticks = duration.count()
    step = abs(period.count())
    lower = _floor_ticks(ticks, step)
    upper = lower + step
    below = ticks - lower
    above = upper - ticks
    if below < above:
        result = lower
    elif above < below:
        result = upper
    else:
        # Halfway: pick the even multiple
        result = upper if (lower // step) % 2 else lower
    return Duration._from_ticks(result)


__all__ = ["trunc", "floor", "ceil", "round"]
