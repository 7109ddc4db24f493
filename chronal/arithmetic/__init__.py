"""Calendar arithmetic on millisecond instants.

The functions in this module serve as the canonical implementations
behind Moment's methods. They work on plain integers (milliseconds on
the naive wall-clock timeline) so they can be used and tested without
constructing Moments.

Arithmetic Operations (from chronal.arithmetic.calendar_ops):
    - shift: Add a signed number of TimeUnits, rolling over month ends
    - start_of, end_of: Snap to a DAY, WEEK, MONTH or YEAR boundary

Comparison Operations (from chronal.arithmetic.comparisons):
    - is_before, is_after, is_same, is_between: Instant ordering
    - is_same_day, is_same_month, is_same_year: Calendar sameness
    - is_leap, is_weekday, is_weekend: Calendar classification

Difference Operations (from chronal.arithmetic.diff):
    - diff_in: Floored difference in any TimeUnit
    - diff_in_months, diff_in_years: Calendar and average-year counts
"""

from __future__ import annotations

from chronal.arithmetic.calendar_ops import end_of, shift, start_of
from chronal.arithmetic.comparisons import (
    is_after,
    is_before,
    is_between,
    is_leap,
    is_same,
    is_same_day,
    is_same_month,
    is_same_year,
    is_weekday,
    is_weekend,
)
from chronal.arithmetic.diff import diff_in, diff_in_months, diff_in_years

__all__ = [
    # Arithmetic operations
    "shift",
    "start_of",
    "end_of",
    # Comparison operations
    "is_before",
    "is_after",
    "is_same",
    "is_between",
    "is_same_day",
    "is_same_month",
    "is_same_year",
    "is_leap",
    "is_weekday",
    "is_weekend",
    # Difference operations
    "diff_in",
    "diff_in_months",
    "diff_in_years",
]
