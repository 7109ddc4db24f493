"""Token based formatting and parsing.

Templates are plain strings in which single letters stand for calendar
fields. Each character is examined once: recognized tokens are replaced
by their field, everything else is copied through unchanged, so a
field value that happens to contain a token letter is never rewritten.

Supported Tokens:
    Y - Full year, at least 4 digits (2024, 0005)
    y - Last two digits of the year (24)
    F - Full month name (January)
    M - Abbreviated month name (Jan)
    m - Month, zero padded (01-12)
    n - Month, unpadded (1-12)
    d - Day of month, zero padded (01-31)
    j - Day of month, unpadded (1-31)
    l - Full weekday name (Monday)
    D - Abbreviated weekday name (Mon)
    H - Hour, 24-hour, zero padded (00-23)
    G - Hour, 24-hour, unpadded (0-23)
    h - Hour, 12-hour, zero padded (01-12)
    g - Hour, 12-hour, unpadded (1-12)
    i - Minute, zero padded (00-59)
    s - Second, zero padded (00-59)
    A - AM or PM
    a - am or pm

Functions:
    render: Format calendar fields with a template.
    parse_format: Parse a string that was rendered with a template.

Examples:
    >>> from chronal._internal.calendar import Fields
    >>> render(Fields(2024, 12, 25, 10, 30, 0, 0), "D, j M Y g:i a")
    'Wed, 25 Dec 2024 10:30 am'
"""

from __future__ import annotations

import re
from typing import Callable

from chronal._internal.calendar import (
    Fields,
    compose,
    day_of_week,
    ymd_to_ordinal,
)
from chronal._internal.constants import DAY_NAMES, MONTH_NAMES
from chronal._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_time,
)
from chronal.errors import InvalidInput

DATE_FORMAT = "Y-m-d"
TIME_FORMAT = "H:i:s"
DATE_TIME_FORMAT = f"{DATE_FORMAT} {TIME_FORMAT}"


def _hour12(hour: int) -> int:
    return hour % 12 or 12


def _weekday(f: Fields) -> int:
    return day_of_week(ymd_to_ordinal(f.year, f.month, f.day))


def _full_year(year: int) -> str:
    if year >= 0:
        return f"{year:04d}"
    return f"{year:05d}"  # Include minus sign


_RENDERERS: dict[str, Callable[[Fields], str]] = {
    "Y": lambda f: _full_year(f.year),
    "y": lambda f: f"{f.year % 100:02d}",
    "F": lambda f: MONTH_NAMES[f.month - 1],
    "M": lambda f: MONTH_NAMES[f.month - 1][:3],
    "m": lambda f: f"{f.month:02d}",
    "n": lambda f: str(f.month),
    "d": lambda f: f"{f.day:02d}",
    "j": lambda f: str(f.day),
    "l": lambda f: DAY_NAMES[_weekday(f)],
    "D": lambda f: DAY_NAMES[_weekday(f)][:3],
    "H": lambda f: f"{f.hour:02d}",
    "G": lambda f: str(f.hour),
    "h": lambda f: f"{_hour12(f.hour):02d}",
    "g": lambda f: str(_hour12(f.hour)),
    "i": lambda f: f"{f.minute:02d}",
    "s": lambda f: f"{f.second:02d}",
    "A": lambda f: "PM" if f.hour >= 12 else "AM",
    "a": lambda f: "pm" if f.hour >= 12 else "am",
}


def render(fields: Fields, template: str) -> str:
    """Format calendar fields with a token template.

    Args:
        fields: The calendar decomposition to render.
        template: Template string; unrecognized characters pass through.

    Returns:
        The rendered string.

    Examples:
        >>> render(Fields(2024, 1, 5, 0, 7, 9, 0), "Y-m-d H:i:s")
        '2024-01-05 00:07:09'
        >>> render(Fields(2024, 1, 5, 0, 7, 9, 0), "n/j/y g A")
        '1/5/24 12 AM'
    """
    result = []
    for char in template:
        renderer = _RENDERERS.get(char)
        result.append(renderer(fields) if renderer is not None else char)
    return "".join(result)


_MONTH_ALTERNATION = "|".join(MONTH_NAMES)
_MONTH_ABBR_ALTERNATION = "|".join(name[:3] for name in MONTH_NAMES)
_DAY_ALTERNATION = "|".join(DAY_NAMES)
_DAY_ABBR_ALTERNATION = "|".join(name[:3] for name in DAY_NAMES)

# Mapping of tokens to their patterns for parsing
_PARSE_PATTERNS: dict[str, str] = {
    "Y": r"(?P<year>[+-]?\d{4,})",
    "y": r"(?P<year2>\d{2})",
    "F": rf"(?P<month_name>{_MONTH_ALTERNATION})",
    "M": rf"(?P<month_abbr>{_MONTH_ABBR_ALTERNATION})",
    "m": r"(?P<month>\d{2})",
    "n": r"(?P<month>\d{1,2})",
    "d": r"(?P<day>\d{2})",
    "j": r"(?P<day>\d{1,2})",
    "l": rf"(?P<weekday_name>{_DAY_ALTERNATION})",
    "D": rf"(?P<weekday_abbr>{_DAY_ABBR_ALTERNATION})",
    "H": r"(?P<hour>\d{2})",
    "G": r"(?P<hour>\d{1,2})",
    "h": r"(?P<hour12>\d{2})",
    "g": r"(?P<hour12>\d{1,2})",
    "i": r"(?P<minute>\d{2})",
    "s": r"(?P<second>\d{2})",
    "A": r"(?P<meridiem>AM|PM)",
    "a": r"(?P<meridiem>am|pm)",
}


def _format_to_regex(template: str) -> re.Pattern[str]:
    """Convert a token template to a compiled, case-insensitive regex.

    A field that appears more than once (``m`` and ``n``, or ``Y`` twice)
    must match the same text every time.
    """
    result = []
    seen: set[str] = set()
    for char in template:
        pattern = _PARSE_PATTERNS.get(char)
        if pattern is None:
            result.append(re.escape(char))
            continue
        group = re.match(r"\(\?P<(\w+)>", pattern).group(1)  # type: ignore[union-attr]
        if group in seen:
            # Later occurrences must repeat the first value
            pattern = f"(?P={group})"
        seen.add(group)
        result.append(pattern)
    return re.compile("^" + "".join(result) + "$", re.IGNORECASE)


def _month_from_name(name: str) -> int:
    lowered = name.lower()
    for index, month_name in enumerate(MONTH_NAMES, start=1):
        if month_name.lower().startswith(lowered):
            return index
    raise InvalidInput(f"unknown month name: {name!r}")


def parse_format(
    text: str,
    template: str,
    *,
    default_date: tuple[int, int, int],
    year_pivot: int = 70,
) -> int:
    """Parse ``text`` rendered with ``template`` back into an instant.

    Args:
        text: The string to parse.
        template: Token template describing ``text``.
        default_date: (year, month, day) used for date fields the
            template does not contain.
        year_pivot: Two digit years below the pivot are 20xx, others 19xx.

    Returns:
        Milliseconds since the epoch on the naive timeline.

    Raises:
        InvalidInput: If the text does not match the template or a
            component is out of range.

    Examples:
        >>> parse_format("25/12/2024 10:30", "d/m/Y H:i", default_date=(1970, 1, 1))
        1735122600000
    """
    match = _format_to_regex(template).match(text.strip())
    if not match:
        raise InvalidInput(f"string {text!r} does not match format {template!r}")

    groups = {k: v for k, v in match.groupdict().items() if v is not None}
    year, month, day = default_date

    if "year" in groups:
        year = int(groups["year"])
    elif "year2" in groups:
        short = int(groups["year2"])
        year = (2000 if short < year_pivot else 1900) + short

    if "month" in groups:
        month = int(groups["month"])
    elif "month_name" in groups:
        month = _month_from_name(groups["month_name"])
    elif "month_abbr" in groups:
        month = _month_from_name(groups["month_abbr"])

    if "day" in groups:
        day = int(groups["day"])

    hour = int(groups.get("hour", 0))
    if "hour12" in groups:
        hour12 = int(groups["hour12"])
        validate_range("hour", hour12, 1, 12)
        hour = hour12 % 12
        if groups.get("meridiem", "am").lower() == "pm":
            hour += 12
    minute = int(groups.get("minute", 0))
    second = int(groups.get("second", 0))

    validate_month(month)
    validate_day(year, month, day)
    validate_time(hour, minute, second)

    # Weekday names are only checked for consistency
    weekday_name = groups.get("weekday_name") or groups.get("weekday_abbr")
    if weekday_name is not None:
        actual = DAY_NAMES[day_of_week(ymd_to_ordinal(year, month, day))]
        if not actual.lower().startswith(weekday_name.lower()):
            raise InvalidInput(
                f"{year:04d}-{month:02d}-{day:02d} is a {actual}, not {weekday_name}"
            )

    return compose(year, month, day, hour, minute, second)


__all__ = [
    "DATE_FORMAT",
    "TIME_FORMAT",
    "DATE_TIME_FORMAT",
    "render",
    "parse_format",
]
