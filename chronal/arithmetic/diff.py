"""Differences between millisecond instants.

Every function computes ``left - right``: positive when ``left`` is the
later instant. Fixed-size units floor the quotient, so negative
fractions move further from zero (-0.5 days is -1 day).

Years use an average Gregorian year of 365.25 days. Months are counted
from calendar components only, ignoring day and time of day.
"""

from __future__ import annotations

import math

from chronal._internal.calendar import decompose
from chronal._internal.constants import MILLIS_PER_AVERAGE_YEAR
from chronal.units.timeunit import TimeUnit


def diff_in(left: int, right: int, unit: TimeUnit) -> int:
    """Return the floored number of ``unit`` between two instants.

    Examples:
        >>> diff_in(0, 43_200_000, TimeUnit.DAY)
        -1
        >>> diff_in(90_000, 0, TimeUnit.MINUTE)
        1
    """
    if unit is TimeUnit.MONTH:
        return diff_in_months(left, right)
    if unit is TimeUnit.YEAR:
        return diff_in_years(left, right)
    size = unit.to_millis()
    if size is None:
        raise ValueError(f"{unit.value} has no fixed length")
    return (left - right) // size


def diff_in_years(left: int, right: int) -> int:
    return math.floor((left - right) / MILLIS_PER_AVERAGE_YEAR)


def diff_in_months(left: int, right: int) -> int:
    """Count month boundaries between two instants.

    Examples:
        >>> from chronal._internal.calendar import compose
        >>> diff_in_months(compose(2024, 3, 1), compose(2024, 1, 31))
        2
    """
    a = decompose(left)
    b = decompose(right)
    return (a.year - b.year) * 12 + (a.month - b.month)


__all__ = [
    "diff_in",
    "diff_in_years",
    "diff_in_months",
]
