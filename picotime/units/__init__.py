"""Temporal units and enumerations.

This module provides:
    - TimeScale: Continuous time scales and their epochs and clocks
    - Weekday: Day of the week (MONDAY through SUNDAY)
"""

from __future__ import annotations

from picotime.units.timescale import TimeScale
from picotime.units.weekday import Weekday

__all__: list[str] = [
    "TimeScale",
    "Weekday",
]
