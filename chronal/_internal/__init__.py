"""Internal utilities for chronal.

This module contains private implementation details:
    - Calendar math (ordinals, rollover composition)
    - Constants and magic numbers
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronal._internal.calendar import compose, decompose, is_leap_year
from chronal._internal.validation import (
    validate_day,
    validate_millis,
    validate_month,
    validate_range,
    validate_time,
)

__all__: list[str] = [
    "compose",
    "decompose",
    "is_leap_year",
    "validate_day",
    "validate_millis",
    "validate_month",
    "validate_range",
    "validate_time",
]
