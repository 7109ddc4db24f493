"""Human readable relative differences.

Durations are bucketed with fixed approximations (30-day months,
365-day years), not calendar-accurate spans.

Buckets (upper bound in seconds, exclusive):
    < 60        -> seconds
    < 3600      -> minutes
    < 86400     -> hours
    < 2592000   -> days    (30 days)
    < 31536000  -> months  (365 days)
    otherwise   -> years

Examples:
    >>> diff_for_humans(-90)
    '1 minute ago'
    >>> diff_for_humans(7200)
    'in 2 hours'
"""

from __future__ import annotations

from typing import NamedTuple

from chronal._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

_SECONDS_PER_MONTH = 30 * SECONDS_PER_DAY
_SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY


class Bucket(NamedTuple):
    limit: int | None
    unit: str
    seconds: int


BUCKETS: tuple[Bucket, ...] = (
    Bucket(SECONDS_PER_MINUTE, "second", 1),
    Bucket(SECONDS_PER_HOUR, "minute", SECONDS_PER_MINUTE),
    Bucket(SECONDS_PER_DAY, "hour", SECONDS_PER_HOUR),
    Bucket(_SECONDS_PER_MONTH, "day", SECONDS_PER_DAY),
    Bucket(_SECONDS_PER_YEAR, "month", _SECONDS_PER_MONTH),
    Bucket(None, "year", _SECONDS_PER_YEAR),
)


def bucket_for(seconds: int) -> Bucket:
    """Return the first bucket whose limit exceeds ``abs(seconds)``."""
    magnitude = abs(seconds)
    for bucket in BUCKETS:
        if bucket.limit is None or magnitude < bucket.limit:
            return bucket
    return BUCKETS[-1]


def diff_for_humans(seconds: int) -> str:
    """Render a signed second difference as relative English text.

    Args:
        seconds: ``this - other`` in whole seconds; negative means the
            described moment is in the past relative to the other.

    Returns:
        ``"{n} {unit}(s) ago"`` for negative differences, otherwise
        ``"in {n} {unit}(s)"``.
    """
    bucket = bucket_for(seconds)
    count = abs(seconds) // bucket.seconds
    label = bucket.unit if count == 1 else f"{bucket.unit}s"
    if seconds < 0:
        return f"{count} {label} ago"
    return f"in {count} {label}"


__all__ = ["Bucket", "BUCKETS", "bucket_for", "diff_for_humans"]
