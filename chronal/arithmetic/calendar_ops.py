"""Calendar arithmetic and period snapping on millisecond instants.

This module provides the canonical implementation of Moment arithmetic.
Moment methods delegate here so that every named variant (``add_days``,
``sub_month``, ``add("weeks", 2)``...) goes through one code path.

Rollover behavior:
    Year and month arithmetic set the field and recompose the instant
    without clamping the day. When the target month is shorter than the
    original day of month, the surplus days roll into the following
    month.

Examples:
    2024-01-31 + 1 month -> 2024-03-02  (Feb 31 rolls over two days)
    2023-01-31 + 1 month -> 2023-03-03
    2024-03-31 - 1 month -> 2024-03-02
    2024-02-29 + 1 year  -> 2025-03-01
"""

from __future__ import annotations

import math

from chronal._internal.calendar import compose, day_of_week, decompose, ordinal_of
from chronal._internal.constants import MILLIS_PER_DAY
from chronal.units.timeunit import TimeUnit

_LAST_MILLI_OF_DAY = MILLIS_PER_DAY - 1


def shift(millis: int, amount: float, unit: TimeUnit) -> int:
    """Shift an instant by ``amount`` units.

    Negative amounts move backwards; subtraction is this function with
    a negated amount. Fractional amounts are truncated toward zero to
    whole units, so 1.5 days is one day.

    Args:
        millis: The instant to shift.
        amount: Number of units (may be negative or fractional).
        unit: The unit to shift by.

    Returns:
        The shifted instant.

    Examples:
        >>> start = compose(2024, 1, 31)
        >>> decompose(shift(start, 1, TimeUnit.MONTH))[:3]
        (2024, 3, 2)
    """
    amount = math.trunc(amount)
    if unit is TimeUnit.YEAR:
        f = decompose(millis)
        return compose(
            f.year + amount, f.month, f.day, f.hour, f.minute, f.second, f.millisecond
        )
    if unit is TimeUnit.MONTH:
        f = decompose(millis)
        return compose(
            f.year, f.month + amount, f.day, f.hour, f.minute, f.second, f.millisecond
        )
    if unit is TimeUnit.WEEK:
        return shift(millis, amount * 7, TimeUnit.DAY)

    size = unit.to_millis()
    if size is None:
        raise ValueError(f"{unit.value} has no fixed length")
    return millis + amount * size


def start_of_day(millis: int) -> int:
    """Return 00:00:00.000 of the same day."""
    return millis - millis % MILLIS_PER_DAY


def end_of_day(millis: int) -> int:
    """Return 23:59:59.999 of the same day."""
    return start_of_day(millis) + _LAST_MILLI_OF_DAY


def start_of_week(millis: int) -> int:
    """Return Monday 00:00:00.000 of the week containing ``millis``.

    Sunday belongs to the week that started six days earlier.
    """
    weekday = day_of_week(ordinal_of(millis))
    offset = -6 if weekday == 0 else 1 - weekday
    return start_of_day(millis) + offset * MILLIS_PER_DAY


def end_of_week(millis: int) -> int:
    """Return Sunday 23:59:59.999 of the week containing ``millis``."""
    return end_of_day(shift(start_of_week(millis), 6, TimeUnit.DAY))


def start_of_month(millis: int) -> int:
    f = decompose(millis)
    return compose(f.year, f.month, 1)


def end_of_month(millis: int) -> int:
    # Day 0 of the following month is the last day of this one
    f = decompose(millis)
    return end_of_day(compose(f.year, f.month + 1, 0))


def start_of_year(millis: int) -> int:
    return compose(decompose(millis).year, 1, 1)


def end_of_year(millis: int) -> int:
    return end_of_day(compose(decompose(millis).year, 12, 31))


_STARTS = {
    TimeUnit.DAY: start_of_day,
    TimeUnit.WEEK: start_of_week,
    TimeUnit.MONTH: start_of_month,
    TimeUnit.YEAR: start_of_year,
}

_ENDS = {
    TimeUnit.DAY: end_of_day,
    TimeUnit.WEEK: end_of_week,
    TimeUnit.MONTH: end_of_month,
    TimeUnit.YEAR: end_of_year,
}


def start_of(millis: int, unit: TimeUnit) -> int:
    """Snap to the start of the period ``unit`` (DAY, WEEK, MONTH or YEAR).

    Raises:
        ValueError: For units without a period boundary.
    """
    snap = _STARTS.get(unit)
    if snap is None:
        raise ValueError(f"cannot snap to start of {unit.value}")
    return snap(millis)


def end_of(millis: int, unit: TimeUnit) -> int:
    """Snap to the last millisecond of the period ``unit``.

    Raises:
        ValueError: For units without a period boundary.
    """
    snap = _ENDS.get(unit)
    if snap is None:
        raise ValueError(f"cannot snap to end of {unit.value}")
    return snap(millis)


__all__ = [
    "shift",
    "start_of",
    "end_of",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
]
