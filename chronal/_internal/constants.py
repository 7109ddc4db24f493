"""Internal constants for chronal.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000
MILLIS_PER_WEEK: int = 7 * MILLIS_PER_DAY

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Average Gregorian year used by diff_in_years
MILLIS_PER_AVERAGE_YEAR: float = 365.25 * MILLIS_PER_DAY

# Largest distance from the epoch a constructed instant may have (about
# 275,000 years either side)
MAX_ABS_MILLIS: int = 8_640_000_000_000_000

# Ordinal (days since 0001-01-01, which is ordinal 1) of 1970-01-01
EPOCH_ORDINAL: int = 719_163

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Indexed by day of week, Sunday first
DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MILLIS_PER_WEEK",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MILLIS_PER_AVERAGE_YEAR",
    "MAX_ABS_MILLIS",
    "EPOCH_ORDINAL",
    "DAYS_IN_MONTH",
    "MONTH_NAMES",
    "DAY_NAMES",
]
