"""Internal utilities for picotime.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar day-count conversions
    - Component validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from picotime._internal.validation import (
    check_range,
    validate_date,
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "check_range",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
