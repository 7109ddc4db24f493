"""Validation utilities for chronal.

Strict range checks used where calendar components come from text and
must not roll over silently (format driven parsing). Arithmetic never
validates; it normalizes.

This module is not part of the public API.
"""

from __future__ import annotations

import math

from chronal._internal.calendar import days_in_month
from chronal._internal.constants import MAX_ABS_MILLIS
from chronal.errors import InvalidInput


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that ``value`` lies in ``[min_val, max_val]``.

    Raises:
        InvalidInput: If the value is out of range.

    Examples:
        >>> validate_range("month", 13, 1, 12)
        Traceback (most recent call last):
        ...
        chronal.errors.InvalidInput: month must be between 1 and 12, got 13
    """
    if value < min_val or value > max_val:
        raise InvalidInput(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        InvalidInput: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidInput(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int) -> None:
    """Validate a 24-hour time of day."""
    validate_range("hour", hour, 0, 23)
    validate_range("minute", minute, 0, 59)
    validate_range("second", second, 0, 59)


def validate_millis(value: int | float) -> int:
    """Validate a millisecond timestamp and return it as an int.

    Floats are truncated toward zero.

    Raises:
        InvalidInput: If the value is NaN, infinite or outside the
            representable range.
    """
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise InvalidInput(f"timestamp is not a finite number: {value}")
        value = int(value)
    if abs(value) > MAX_ABS_MILLIS:
        raise InvalidInput(
            f"timestamp must be within +/-{MAX_ABS_MILLIS} ms of the epoch, got {value}"
        )
    return value


__all__ = [
    "validate_range",
    "validate_month",
    "validate_day",
    "validate_time",
    "validate_millis",
]
