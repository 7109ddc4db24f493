"""Calendar utilities for chronal.

This module provides internal functions for calendar calculations in the
proleptic Gregorian calendar: leap years, ordinal day numbers, weekday
numbering, and the composition of calendar fields into a millisecond
instant (and back).

Instants are milliseconds since 1970-01-01T00:00:00.000 on the naive
wall-clock timeline. Ordinal 1 is 0001-01-01.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import NamedTuple

from chronal._internal.constants import (
    DAYS_IN_MONTH,
    EPOCH_ORDINAL,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)


class Fields(NamedTuple):
    """Calendar decomposition of an instant."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    The ordinal for 0001-01-01 is 1. ``day`` is not range checked, so
    day 0 is the last day of the previous month and day 32 of January
    is February 1st.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # Floor division keeps this valid for years before 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1). divmod floors, so ordinals
    # before year 1 land in an earlier 400-year cycle.
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year closing a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (year, month, doy)
        doy -= dim

    raise ValueError(f"Invalid ordinal: {ordinal}")


def day_of_week(ordinal: int) -> int:
    """Return the day of week for an ordinal, Sunday as 0 through Saturday as 6.

    Examples:
        >>> day_of_week(ymd_to_ordinal(2024, 1, 15))  # Monday
        1
        >>> day_of_week(ymd_to_ordinal(2024, 1, 21))  # Sunday
        0
    """
    # Ordinal 1 (0001-01-01) was a Monday
    return ordinal % 7


def compose(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Compose calendar fields into milliseconds since the epoch.

    No field is range checked: values outside their natural range roll
    over into the next larger field. Month 13 is January of the following
    year, month 0 is December of the previous year, day 0 is the last day
    of the previous month and hour 24 is midnight of the next day.

    Examples:
        >>> compose(1970, 1, 1)
        0
        >>> compose(2024, 13, 1) == compose(2025, 1, 1)
        True
        >>> compose(2024, 3, 0) == compose(2024, 2, 29)
        True
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    days = ymd_to_ordinal(year, month, 1) + day - 1 - EPOCH_ORDINAL
    return (
        days * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )


def decompose(millis: int) -> Fields:
    """Split milliseconds since the epoch into calendar fields."""
    days, rem = divmod(millis, MILLIS_PER_DAY)
    year, month, day = ordinal_to_ymd(days + EPOCH_ORDINAL)
    hour, rem = divmod(rem, MILLIS_PER_HOUR)
    minute, rem = divmod(rem, MILLIS_PER_MINUTE)
    second, millisecond = divmod(rem, MILLIS_PER_SECOND)
    return Fields(year, month, day, hour, minute, second, millisecond)


def ordinal_of(millis: int) -> int:
    """Return the ordinal of the calendar day containing ``millis``."""
    return millis // MILLIS_PER_DAY + EPOCH_ORDINAL


__all__ = [
    "Fields",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "day_of_week",
    "compose",
    "decompose",
    "ordinal_of",
]
