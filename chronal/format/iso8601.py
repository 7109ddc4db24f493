"""ISO 8601 rendering.

Moments are naive, so no UTC offset or ``Z`` designator is emitted;
milliseconds are always included.

Examples:
    >>> from chronal._internal.calendar import Fields
    >>> format_iso8601(Fields(2024, 1, 15, 14, 30, 45, 120))
    '2024-01-15T14:30:45.120'
    >>> format_iso8601(Fields(-44, 3, 15, 0, 0, 0, 0))
    '-0044-03-15T00:00:00.000'
"""

from __future__ import annotations

from chronal._internal.calendar import Fields


def format_iso8601(fields: Fields) -> str:
    year, month, day, hour, minute, second, millisecond = fields
    if year >= 0:
        date_str = f"{year:04d}-{month:02d}-{day:02d}"
    else:
        date_str = f"{year:05d}-{month:02d}-{day:02d}"
    return f"{date_str}T{hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}"


__all__ = ["format_iso8601"]
