"""Comparison predicates on millisecond instants.

This module provides the canonical comparison functions Moment
predicates delegate to. All arguments are already-resolved instants
(milliseconds on the naive timeline).

Comparison Rules:
    - Ordering (before/after/between): raw millisecond comparison
    - Sameness (same): millisecond equality
    - Calendar sameness (same_day/month/year): compares only the calendar
      components, ignoring time of day
"""

from __future__ import annotations

from chronal._internal.calendar import day_of_week, decompose, is_leap_year, ordinal_of


def is_before(left: int, right: int) -> bool:
    return left < right


def is_after(left: int, right: int) -> bool:
    return left > right


def is_same(left: int, right: int) -> bool:
    return left == right


def is_same_day(left: int, right: int) -> bool:
    """Test whether two instants fall on the same calendar day.

    Examples:
        >>> from chronal._internal.calendar import compose
        >>> is_same_day(compose(2024, 1, 15, 0, 0), compose(2024, 1, 15, 23, 59))
        True
    """
    return ordinal_of(left) == ordinal_of(right)


def is_same_month(left: int, right: int) -> bool:
    """Test whether two instants fall in the same month of the same year."""
    a = decompose(left)
    b = decompose(right)
    return a.year == b.year and a.month == b.month


def is_same_year(left: int, right: int) -> bool:
    return decompose(left).year == decompose(right).year


def is_between(value: int, start: int, end: int, inclusive: bool = True) -> bool:
    """Test whether ``value`` lies between ``start`` and ``end``.

    The bounds are not reordered; with ``start > end`` the result is
    always False.

    Args:
        value: The instant to test.
        start: Lower bound.
        end: Upper bound.
        inclusive: Whether the bounds themselves count as between.

    Examples:
        >>> is_between(5, 5, 10)
        True
        >>> is_between(5, 5, 10, inclusive=False)
        False
    """
    if inclusive:
        return start <= value <= end
    return start < value < end


def is_leap(millis: int) -> bool:
    return is_leap_year(decompose(millis).year)


def is_weekday(millis: int) -> bool:
    """Monday (1) through Friday (5)."""
    return 1 <= day_of_week(ordinal_of(millis)) <= 5


def is_weekend(millis: int) -> bool:
    """Saturday (6) or Sunday (0)."""
    return not is_weekday(millis)


__all__ = [
    "is_before",
    "is_after",
    "is_same",
    "is_same_day",
    "is_same_month",
    "is_same_year",
    "is_between",
    "is_leap",
    "is_weekday",
    "is_weekend",
]
