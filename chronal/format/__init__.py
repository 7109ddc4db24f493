"""Formatting and parsing of instants.

This module provides functions for converting calendar fields to and
from string representations:
    - Token templates (``Y-m-d H:i:s``)
    - ISO 8601 rendering
    - Relative "in 2 hours" / "3 days ago" text

Functions:
    render: Format fields with a token template.
    parse_format: Parse a string produced by a token template.
    format_iso8601: Format fields as ISO 8601.
    diff_for_humans: Describe a signed second difference in English.

Examples:
    >>> from chronal import Moment
    >>> from chronal.format import render
    >>> render(Moment.create(2024, 1, 15).fields, "l, F j")
    'Monday, January 15'
"""

from __future__ import annotations

from chronal.format.humanize import diff_for_humans
from chronal.format.iso8601 import format_iso8601
from chronal.format.tokens import (
    DATE_FORMAT,
    DATE_TIME_FORMAT,
    TIME_FORMAT,
    parse_format,
    render,
)

__all__: list[str] = [
    # Tokens
    "render",
    "parse_format",
    "DATE_FORMAT",
    "TIME_FORMAT",
    "DATE_TIME_FORMAT",
    # ISO 8601
    "format_iso8601",
    # Relative
    "diff_for_humans",
]
