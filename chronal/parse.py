"""Free-form date string parsing.

Strings that are not described by a token template are handed to
``dateutil.parser``, which accepts ISO 8601 as well as most common
human formats ("Dec 25 2024 10:30", "25/12/2024"...). Parser options
come from the active :class:`~chronal.config.ChronalConfig`.

Any failure is reported as :class:`~chronal.errors.InvalidInput`.
"""

from __future__ import annotations

import datetime as _datetime
import logging

from dateutil import parser as _dateutil_parser

from chronal.config import get_config
from chronal.errors import InvalidInput

logger = logging.getLogger(__name__)


def parse_string(text: str, *, default: _datetime.datetime | None = None) -> _datetime.datetime:
    """Interpret ``text`` as a date and time.

    Args:
        text: The string to parse.
        default: Supplies fields missing from ``text`` (dateutil's
            ``default``). Missing fields otherwise come from today at
            midnight.

    Returns:
        The parsed datetime. A parsed UTC offset is kept in ``tzinfo``;
        callers use the wall-clock fields as they are.

    Raises:
        InvalidInput: If the string is empty or cannot be parsed.

    Examples:
        >>> parse_string("2024-12-25 10:30")
        datetime.datetime(2024, 12, 25, 10, 30)
    """
    if not text or not text.strip():
        raise InvalidInput("empty date string")

    cfg = get_config()
    try:
        return _dateutil_parser.parse(
            text,
            default=default,
            dayfirst=cfg.parser_dayfirst,
            yearfirst=cfg.parser_yearfirst,
            fuzzy=cfg.parser_fuzzy,
        )
    # ParserError subclasses ValueError; huge numbers raise OverflowError
    except (ValueError, OverflowError) as exc:
        logger.debug("Could not parse %r: %s", text, exc)
        raise InvalidInput(f"cannot parse date string {text!r}: {exc}") from exc


__all__ = ["parse_string"]
