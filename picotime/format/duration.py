"""Human-readable duration formatting.

This module renders a Duration as a compact string of unit-suffixed
components, for example ``1d23h4m56.789s`` or ``12.345us``.

Functions:
    format_duration: Format a Duration using a DurationFormat.

Format:
    - A sign prefix: "-" for negative durations, "+" for non-negative
      durations only when show_sign is requested.
    - Whole days, hours and minutes ("d", "h", "m"), each emitted when the
      magnitude is at least one of that unit.
    - The remainder as a decimal in the coarsest unit the magnitude
      reaches: seconds, milliseconds, microseconds, nanoseconds, or
      picoseconds. Trailing zero digits are trimmed.

Examples:
    >>> from picotime import Duration
    >>> format_duration(Duration.from_picoseconds(1230))
    '1.23ns'

    >>> format_duration(Duration.from_seconds(10), DurationFormat(show_sign=True))
    '+10s'

    >>> format_duration(-Duration.from_seconds(10), DurationFormat(show_decimal_point=True))
    '-10.0s'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from picotime._internal.constants import (
    PICOS_PER_DAY,
    PICOS_PER_HOUR,
    PICOS_PER_MICROSECOND,
    PICOS_PER_MILLISECOND,
    PICOS_PER_MINUTE,
    PICOS_PER_NANOSECOND,
    PICOS_PER_SECOND,
)

if TYPE_CHECKING:
    from picotime.core.duration import Duration


@dataclass(frozen=True)
class DurationFormat:
    """Options controlling format_duration().

    Attributes:
        show_sign: Prefix non-negative durations with "+".
        show_decimal_point: Append ".0" when the last component has no
            fractional part.
    """

    show_sign: bool = False
    show_decimal_point: bool = False


# Whole-number components, most significant first
_WHOLE_UNITS: tuple[tuple[int, str], ...] = (
    (PICOS_PER_DAY, "d"),
    (PICOS_PER_HOUR, "h"),
    (PICOS_PER_MINUTE, "m"),
)

# Candidates for the final decimal component: (period, digits, suffix)
_DECIMAL_UNITS: tuple[tuple[int, int, str], ...] = (
    (PICOS_PER_SECOND, 12, "s"),
    (PICOS_PER_MILLISECOND, 9, "ms"),
    (PICOS_PER_MICROSECOND, 6, "us"),
    (PICOS_PER_NANOSECOND, 3, "ns"),
)
_FINEST_UNIT: tuple[int, int, str] = (1, 0, "ps")

_DEFAULT_FORMAT = DurationFormat()


def format_duration(
    duration: "Duration",
    options: DurationFormat | None = None,
) -> str:
    """Format a Duration as a human-readable string.

    Args:
        duration: The Duration to format.
        options: Formatting options. Defaults to DurationFormat().

    Returns:
        The formatted string.

    Examples:
        >>> from picotime import Duration
        >>> format_duration(Duration(days=1, hours=23, minutes=4, seconds=56, milliseconds=789))
        '1d23h4m56.789s'

        >>> format_duration(-Duration.from_hours(1) - Duration.from_picoseconds(1))
        '-1h0m0.000000000001s'
    """
    if options is None:
        options = _DEFAULT_FORMAT

    ticks = duration.count()
    parts: list[str] = []

    if ticks < 0:
        parts.append("-")
    elif options.show_sign:
        parts.append("+")

    magnitude = abs(ticks)
    remainder = magnitude

    for period, suffix in _WHOLE_UNITS:
        if magnitude >= period:
            whole, remainder = divmod(remainder, period)
            parts.append(f"{whole}{suffix}")

    period, digits, suffix = next(
        (unit for unit in _DECIMAL_UNITS if magnitude >= unit[0]),
        _FINEST_UNIT,
    )

    whole, frac = divmod(remainder, period)
    parts.append(str(whole))
    if frac:
        parts.append(f".{frac:0{digits}d}".rstrip("0"))
    elif options.show_decimal_point:
        parts.append(".0")
    parts.append(suffix)

    return "".join(parts)


__all__ = ["DurationFormat", "format_duration"]
