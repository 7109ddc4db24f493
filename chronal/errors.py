"""chronal exception hierarchy.

All chronal-specific exceptions inherit from ChronalError.
"""

from __future__ import annotations


class ChronalError(Exception):
    """Base exception for all chronal errors."""

    pass


class InvalidInput(ChronalError, ValueError):
    """A source could not be resolved to a valid instant.

    Raised at construction or parse time, never by arithmetic,
    comparison, formatting or diffing on an existing Moment.

    Examples:
        - An unparseable date string
        - A NaN or out-of-range millisecond timestamp
        - A string that does not match a create_from_format template
        - A value of an unsupported type
    """

    pass


__all__ = [
    "ChronalError",
    "InvalidInput",
]
