"""Units for chronal.

This module provides:
    - TimeUnit: Units used by Moment arithmetic (SECOND .. YEAR)
"""

from __future__ import annotations

from chronal.units.timeunit import TimeUnit

__all__: list[str] = [
    "TimeUnit",
]
