"""Clock capability for chronal.

Every "now" dependent operation reads the current instant through a
Clock carried by the Moment it is called on, so tests can pin time
without patching the platform.

Clocks:
    SystemClock: Reads the local wall clock.
    FixedClock: Returns a fixed, manually advanced instant.

Examples:
    >>> import datetime
    >>> from chronal import Moment
    >>> clock = FixedClock(datetime.datetime(2024, 1, 15, 12, 0, 0))
    >>> Moment.now(clock=clock).to_date_time_string()
    '2024-01-15 12:00:00'
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current local wall-clock time."""

    def now(self) -> _datetime.datetime:
        """Return the current time as a naive local datetime."""
        ...


class SystemClock:
    """Clock backed by the platform's local time."""

    def now(self) -> _datetime.datetime:
        return _datetime.datetime.now()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that always reports the same instant until advanced.

    Args:
        instant: The naive datetime to report. Aware datetimes keep their
            wall-clock fields and drop the tzinfo.
    """

    def __init__(self, instant: _datetime.datetime) -> None:
        self._instant = instant.replace(tzinfo=None)
        logger.debug("Fixed clock set to %s", self._instant.isoformat())

    def now(self) -> _datetime.datetime:
        return self._instant

    def advance(
        self,
        delta: _datetime.timedelta | None = None,
        **kwargs: float,
    ) -> None:
        """Move the clock forward by ``delta`` or by timedelta keyword arguments.

        Examples:
            >>> clock = FixedClock(datetime.datetime(2024, 1, 1))
            >>> clock.advance(minutes=90)
            >>> clock.now()
            datetime.datetime(2024, 1, 1, 1, 30)
        """
        if delta is None:
            delta = _datetime.timedelta(**kwargs)
        self._instant = self._instant + delta

    def set(self, instant: _datetime.datetime) -> None:
        """Jump to a new instant."""
        self._instant = instant.replace(tzinfo=None)

    def __repr__(self) -> str:
        return f"FixedClock({self._instant!r})"


SYSTEM_CLOCK: Clock = SystemClock()


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "SYSTEM_CLOCK",
]
