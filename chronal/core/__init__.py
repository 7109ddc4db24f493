"""Core value types for chronal.

This module provides:
    - Moment: A calendar date and time with millisecond precision
"""

from __future__ import annotations

from chronal.core.moment import Moment, MomentLike, to_millis

__all__: list[str] = [
    "Moment",
    "MomentLike",
    "to_millis",
]
