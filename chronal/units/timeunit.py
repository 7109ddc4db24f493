"""TimeUnit enumeration for calendar arithmetic units.

This module provides the TimeUnit enum naming the units Moment
arithmetic and differencing operate on.
"""

from __future__ import annotations

from enum import Enum

from chronal._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
)


class TimeUnit(Enum):
    """Units for Moment arithmetic.

    Note:
        YEAR and MONTH do not have fixed millisecond equivalents due to
        variable lengths (leap years, different month lengths).
        The to_millis() method returns None for these units.

    Examples:
        >>> TimeUnit.HOUR.to_millis()
        3600000

        >>> TimeUnit.MONTH.to_millis() is None
        True

        >>> TimeUnit.from_name("days")
        <TimeUnit.DAY: 'day'>
    """

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    def to_millis(self) -> int | None:
        """Return the number of milliseconds in one unit.

        Returns:
            The fixed size of the unit, or None for MONTH and YEAR.
        """
        conversions: dict[TimeUnit, int | None] = {
            TimeUnit.SECOND: MILLIS_PER_SECOND,
            TimeUnit.MINUTE: MILLIS_PER_MINUTE,
            TimeUnit.HOUR: MILLIS_PER_HOUR,
            TimeUnit.DAY: MILLIS_PER_DAY,
            TimeUnit.WEEK: MILLIS_PER_WEEK,
            TimeUnit.MONTH: None,  # Variable length
            TimeUnit.YEAR: None,  # Variable length (leap years)
        }
        return conversions[self]

    @classmethod
    def from_name(cls, name: str | TimeUnit) -> TimeUnit:
        """Look up a unit by singular or plural name, case-insensitively.

        Raises:
            ValueError: If the name is not a known unit.
        """
        if isinstance(name, TimeUnit):
            return name
        key = name.strip().lower()
        if key.endswith("s"):
            key = key[:-1]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown time unit: {name!r}") from None


__all__ = ["TimeUnit"]
