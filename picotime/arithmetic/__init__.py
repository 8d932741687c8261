"""Temporal arithmetic operations.

Operator-based arithmetic lives on the core classes. This module adds
the function-based operations that have no operator:

Rounding Operations (from picotime.arithmetic.rounding):
    - trunc: Snap a Duration toward zero to a multiple of a period
    - floor: Snap toward negative infinity
    - ceil: Snap toward positive infinity
    - round: Snap to the nearest multiple, ties to even
"""

from __future__ import annotations

from picotime.arithmetic.rounding import ceil, floor, round, trunc  # noqa: A004

__all__ = [
    "trunc",
    "floor",
    "ceil",
    "round",
]
