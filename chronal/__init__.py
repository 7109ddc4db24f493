"""chronal: calendar date and time values with readable arithmetic.

chronal wraps an instant (millisecond precision, local wall-clock
timeline) in an immutable Moment that knows how to add calendar units,
snap to period boundaries, compare, format with short token templates
and describe itself relative to another Moment.

Core Types:
    Moment: A calendar date and time with an optional timezone tag

Units:
    TimeUnit: Arithmetic units (SECOND .. YEAR)

Clocks:
    Clock: Capability supplying the current time
    SystemClock: The platform's local clock
    FixedClock: A pinned clock for tests and replays

Exceptions:
    ChronalError: Base exception
    InvalidInput: A source could not become a valid instant

Example:
    >>> from chronal import Moment
    >>> m = Moment.create(2024, 12, 25, 10, 30)
    >>> m.add_days(5).format("D, j M Y")
    'Mon, 30 Dec 2024'
    >>> m.diff_for_humans(m.add_hours(3))
    '3 hours ago'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from chronal.core.moment import Moment, MomentLike

# Units
from chronal.units.timeunit import TimeUnit

# Clocks
from chronal.clock import Clock, FixedClock, SystemClock

# Exceptions
from chronal.errors import ChronalError, InvalidInput

__all__: list[str] = [
    "__version__",
    # Core types
    "Moment",
    "MomentLike",
    # Units
    "TimeUnit",
    # Clocks
    "Clock",
    "SystemClock",
    "FixedClock",
    # Exceptions
    "ChronalError",
    "InvalidInput",
]
