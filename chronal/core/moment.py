"""Moment class: a calendar date and time value.

This module provides the Moment class for representing instants with
millisecond precision, together with calendar arithmetic, period
snapping, comparison predicates, token formatting and relative
differences.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any, Union

from chronal._internal.calendar import (
    Fields,
    compose,
    day_of_week,
    days_before_month,
    days_in_month,
    decompose,
    ordinal_of,
)
from chronal._internal.validation import validate_millis
from chronal.arithmetic import calendar_ops, comparisons, diff
from chronal.clock import SYSTEM_CLOCK, Clock
from chronal.config import get_config
from chronal.errors import InvalidInput
from chronal.format.humanize import diff_for_humans as _humanize
from chronal.format.iso8601 import format_iso8601
from chronal.format.tokens import (
    DATE_FORMAT,
    DATE_TIME_FORMAT,
    TIME_FORMAT,
    parse_format,
    render,
)
from chronal.parse import parse_string
from chronal.units.timeunit import TimeUnit

# Anything convertible to an instant
MomentLike = Union["Moment", _datetime.datetime, _datetime.date, int, float, str]

_ONE_MILLI = _datetime.timedelta(milliseconds=1)

# Seconds-resolution part of to_iso_format output ("T" is not a token)
_ISO_TEMPLATE = "Y-m-dTH:i:s"


def _from_datetime(value: _datetime.date) -> int:
    if isinstance(value, _datetime.datetime):
        return compose(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond // 1000,
        )
    return compose(value.year, value.month, value.day)


def _midnight(clock: Clock) -> _datetime.datetime:
    return clock.now().replace(hour=0, minute=0, second=0, microsecond=0)


def to_millis(source: MomentLike | None, clock: Clock = SYSTEM_CLOCK) -> int:
    """Resolve a moment-like value to milliseconds on the naive timeline.

    Args:
        source: None (the clock's now), a Moment, a datetime or date
            (wall-clock fields used as they are), a millisecond timestamp
            or a string for the free-form parser.
        clock: Supplies "now" and defaults for partial strings.

    Returns:
        Milliseconds since 1970-01-01T00:00:00.000.

    Raises:
        InvalidInput: If the source cannot be resolved to a valid instant.

    Examples:
        >>> to_millis(0)
        0
        >>> to_millis("1970-01-02")
        86400000
    """
    if source is None:
        return validate_millis(_from_datetime(clock.now()))
    if isinstance(source, Moment):
        return source._ms
    if isinstance(source, _datetime.date):
        return validate_millis(_from_datetime(source))
    if isinstance(source, bool):
        raise InvalidInput("a boolean is not a valid instant")
    if isinstance(source, (int, float)):
        return validate_millis(source)
    if isinstance(source, str):
        parsed = parse_string(source, default=_midnight(clock))
        return validate_millis(_from_datetime(parsed))
    raise InvalidInput(f"cannot create a Moment from {type(source).__name__}")


class Moment:
    """A calendar date and time with millisecond precision.

    A Moment wraps one instant on the local wall-clock timeline plus an
    optional timezone tag. The tag is inert metadata: it is carried
    through every operation but never changes how fields are computed,
    compared or formatted.

    Moments are immutable. Arithmetic and snapping return new Moments, so
    calls chain naturally and a shared Moment is never changed behind
    its holder's back.

    Every "now" dependent operation (construction without a source,
    ``is_today``, ``is_future``, ``diff_*`` without an argument) reads the
    Moment's clock. Derived Moments inherit the clock and tag.

    Attributes:
        year: The year.
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).
        tz: The timezone tag, or None.

    Examples:
        >>> m = Moment.create(2024, 12, 25, 10, 30, 0)
        >>> m.format("Y-m-d")
        '2024-12-25'
        >>> m.add_days(5).day
        30
        >>> Moment.create(2024, 1, 31).add_month().to_date_string()
        '2024-03-02'
    """

    __slots__ = ("_ms", "_tz", "_clock")

    def __init__(
        self,
        source: MomentLike | None = None,
        *,
        tz: str | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Create a Moment from a moment-like source.

        Args:
            source: See :func:`to_millis`. Defaults to now.
            tz: Timezone tag. Copied from ``source`` when it is a Moment
                and no tag is given.
            clock: Clock for "now". Copied from ``source`` when it is a
                Moment, otherwise the system clock.

        Raises:
            InvalidInput: If the source cannot be resolved.
        """
        if isinstance(source, Moment):
            if tz is None:
                tz = source._tz
            if clock is None:
                clock = source._clock
        if clock is None:
            clock = SYSTEM_CLOCK

        self._ms: int = to_millis(source, clock)
        self._tz: str | None = tz
        self._clock: Clock = clock

    @classmethod
    def _from_internal(cls, millis: int, tz: str | None, clock: Clock) -> Moment:
        """Create a Moment from a resolved instant, bypassing validation."""
        instance = object.__new__(cls)
        instance._ms = millis
        instance._tz = tz
        instance._clock = clock
        return instance

    def _derive(self, millis: int) -> Moment:
        return self._from_internal(millis, self._tz, self._clock)

    def _resolve(self, other: MomentLike | None) -> int:
        return to_millis(other, self._clock)

    def _now(self) -> int:
        return to_millis(None, self._clock)

    # Factories

    @classmethod
    def now(cls, *, tz: str | None = None, clock: Clock | None = None) -> Moment:
        """Return the current instant.

        Examples:
            >>> Moment.now().is_today()
            True
        """
        return cls(tz=tz, clock=clock)

    @classmethod
    def create(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        millisecond: int = 0,
        tz: str | None = None,
        clock: Clock | None = None,
    ) -> Moment:
        """Create a Moment from calendar components.

        Components outside their natural range roll over instead of
        failing: month 13 is January of the next year and day 0 is the
        last day of the previous month.

        Raises:
            InvalidInput: If the result lies outside the representable range.

        Examples:
            >>> Moment.create(2024, 13, 1).to_date_string()
            '2025-01-01'
            >>> Moment.create(2024, 3, 0).to_date_string()
            '2024-02-29'
        """
        millis = compose(year, month, day, hour, minute, second, millisecond)
        return cls._from_internal(
            validate_millis(millis), tz, clock if clock is not None else SYSTEM_CLOCK
        )

    @classmethod
    def today(cls, *, tz: str | None = None, clock: Clock | None = None) -> Moment:
        """Return midnight at the start of the current day."""
        return cls.now(tz=tz, clock=clock).start_of_day()

    @classmethod
    def tomorrow(cls, *, tz: str | None = None, clock: Clock | None = None) -> Moment:
        """Return midnight at the start of the next day."""
        return cls.today(tz=tz, clock=clock).add_day()

    @classmethod
    def yesterday(cls, *, tz: str | None = None, clock: Clock | None = None) -> Moment:
        """Return midnight at the start of the previous day."""
        return cls.today(tz=tz, clock=clock).sub_day()

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        tz: str | None = None,
        clock: Clock | None = None,
    ) -> Moment:
        """Parse a free-form date string.

        Raises:
            InvalidInput: If the string cannot be parsed.

        Examples:
            >>> Moment.parse("Dec 25 2024 10:30").to_date_time_string()
            '2024-12-25 10:30:00'
        """
        if not isinstance(text, str):
            raise InvalidInput(f"expected a string, got {type(text).__name__}")
        return cls(text, tz=tz, clock=clock)

    @classmethod
    def create_from_format(
        cls,
        fmt: str,
        text: str,
        *,
        tz: str | None = None,
        clock: Clock | None = None,
    ) -> Moment:
        """Parse ``text`` that was written with the token template ``fmt``.

        Date fields missing from the template default to the clock's
        current date; time fields default to zero.

        Raises:
            InvalidInput: If the text does not match or a component is
                out of range.

        Examples:
            >>> Moment.create_from_format("d/m/Y H:i", "25/12/2024 10:30").hour
            10
        """
        clock = clock if clock is not None else SYSTEM_CLOCK
        today = clock.now()
        millis = parse_format(
            text,
            fmt,
            default_date=(today.year, today.month, today.day),
            year_pivot=get_config().two_digit_year_pivot,
        )
        return cls._from_internal(validate_millis(millis), tz, clock)

    @classmethod
    def from_json(cls, data: dict[str, Any], *, clock: Clock | None = None) -> Moment:
        """Create a Moment from the dictionary produced by :meth:`to_json`.

        Raises:
            InvalidInput: If the data is malformed.
        """
        if not isinstance(data, dict):
            raise InvalidInput(f"expected dict, got {type(data).__name__}")
        if data.get("_type") != "Moment":
            raise InvalidInput(f"expected _type 'Moment', got {data.get('_type')!r}")
        value = data.get("value")
        if not value or not isinstance(value, str):
            raise InvalidInput("missing 'value' field for Moment")

        head, _, fraction = value.partition(".")
        if not fraction.isdigit() or len(fraction) != 3:
            raise InvalidInput(f"expected milliseconds in {value!r}")
        millis = parse_format(head, _ISO_TEMPLATE, default_date=(1970, 1, 1))
        return cls._from_internal(
            validate_millis(millis + int(fraction)),
            data.get("tz"),
            clock if clock is not None else SYSTEM_CLOCK,
        )

    # Properties - calendar components

    @property
    def fields(self) -> Fields:
        """Return all calendar components as a named tuple."""
        return decompose(self._ms)

    @property
    def year(self) -> int:
        return decompose(self._ms).year

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        return decompose(self._ms).month

    @property
    def day(self) -> int:
        return decompose(self._ms).day

    @property
    def hour(self) -> int:
        return decompose(self._ms).hour

    @property
    def minute(self) -> int:
        return decompose(self._ms).minute

    @property
    def second(self) -> int:
        return decompose(self._ms).second

    @property
    def millisecond(self) -> int:
        return decompose(self._ms).millisecond

    @property
    def day_of_week(self) -> int:
        """Return the day of the week, Sunday as 0 through Saturday as 6.

        Examples:
            >>> Moment.create(2024, 1, 15).day_of_week  # Monday
            1
            >>> Moment.create(2024, 1, 21).day_of_week  # Sunday
            0
        """
        return day_of_week(ordinal_of(self._ms))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        f = decompose(self._ms)
        return days_before_month(f.year, f.month) + f.day

    @property
    def days_in_month(self) -> int:
        f = decompose(self._ms)
        return days_in_month(f.year, f.month)

    @property
    def timestamp(self) -> int:
        """Return milliseconds since 1970-01-01T00:00:00.000 (naive timeline)."""
        return self._ms

    @property
    def tz(self) -> str | None:
        """Return the timezone tag, or None."""
        return self._tz

    @property
    def clock(self) -> Clock:
        return self._clock

    def with_tz(self, tz: str | None) -> Moment:
        """Return the same instant carrying a different timezone tag.

        The tag is metadata only; no fields change.
        """
        return self._from_internal(self._ms, tz, self._clock)

    def clone(self) -> Moment:
        return self._derive(self._ms)

    # Arithmetic

    def add(self, amount: float, unit: TimeUnit | str) -> Moment:
        """Return a Moment ``amount`` units later.

        Args:
            amount: Number of units; negative moves backwards and
                fractions are truncated toward zero.
            unit: A TimeUnit or its name, singular or plural.

        Raises:
            ValueError: If ``unit`` is not a known unit name.

        Examples:
            >>> Moment.create(2024, 12, 25).add(2, "weeks").to_date_string()
            '2025-01-08'
        """
        return self._derive(
            calendar_ops.shift(self._ms, amount, TimeUnit.from_name(unit))
        )

    def sub(self, amount: float, unit: TimeUnit | str) -> Moment:
        """Return a Moment ``amount`` units earlier."""
        return self.add(-amount, unit)

    def add_years(self, years: int) -> Moment:
        """Add calendar years; Feb 29 in a non-leap target year becomes Mar 1."""
        return self.add(years, TimeUnit.YEAR)

    def add_year(self) -> Moment:
        return self.add_years(1)

    def sub_years(self, years: int) -> Moment:
        return self.add_years(-years)

    def sub_year(self) -> Moment:
        return self.add_years(-1)

    def add_months(self, months: int) -> Moment:
        """Add calendar months.

        The day of month is kept; when the target month is shorter, the
        surplus days roll into the following month.

        Examples:
            >>> Moment.create(2024, 1, 15).add_months(2).month
            3
            >>> Moment.create(2023, 1, 31).add_months(1).to_date_string()
            '2023-03-03'
        """
        return self.add(months, TimeUnit.MONTH)

    def add_month(self) -> Moment:
        return self.add_months(1)

    def sub_months(self, months: int) -> Moment:
        return self.add_months(-months)

    def sub_month(self) -> Moment:
        return self.add_months(-1)

    def add_weeks(self, weeks: int) -> Moment:
        return self.add(weeks, TimeUnit.WEEK)

    def add_week(self) -> Moment:
        return self.add_weeks(1)

    def sub_weeks(self, weeks: int) -> Moment:
        return self.add_weeks(-weeks)

    def sub_week(self) -> Moment:
        return self.add_weeks(-1)

    def add_days(self, days: int) -> Moment:
        return self.add(days, TimeUnit.DAY)

    def add_day(self) -> Moment:
        return self.add_days(1)

    def sub_days(self, days: int) -> Moment:
        return self.add_days(-days)

    def sub_day(self) -> Moment:
        return self.add_days(-1)

    def add_hours(self, hours: int) -> Moment:
        return self.add(hours, TimeUnit.HOUR)

    def add_hour(self) -> Moment:
        return self.add_hours(1)

    def sub_hours(self, hours: int) -> Moment:
        return self.add_hours(-hours)

    def sub_hour(self) -> Moment:
        return self.add_hours(-1)

    def add_minutes(self, minutes: int) -> Moment:
        return self.add(minutes, TimeUnit.MINUTE)

    def add_minute(self) -> Moment:
        return self.add_minutes(1)

    def sub_minutes(self, minutes: int) -> Moment:
        return self.add_minutes(-minutes)

    def sub_minute(self) -> Moment:
        return self.add_minutes(-1)

    def add_seconds(self, seconds: int) -> Moment:
        return self.add(seconds, TimeUnit.SECOND)

    def add_second(self) -> Moment:
        return self.add_seconds(1)

    def sub_seconds(self, seconds: int) -> Moment:
        return self.add_seconds(-seconds)

    def sub_second(self) -> Moment:
        return self.add_seconds(-1)

    # Snapping

    def start_of(self, unit: TimeUnit | str) -> Moment:
        """Snap to the start of a DAY, WEEK, MONTH or YEAR.

        Raises:
            ValueError: For other units.
        """
        return self._derive(calendar_ops.start_of(self._ms, TimeUnit.from_name(unit)))

    def end_of(self, unit: TimeUnit | str) -> Moment:
        """Snap to the last millisecond of a DAY, WEEK, MONTH or YEAR."""
        return self._derive(calendar_ops.end_of(self._ms, TimeUnit.from_name(unit)))

    def start_of_day(self) -> Moment:
        return self._derive(calendar_ops.start_of_day(self._ms))

    def end_of_day(self) -> Moment:
        return self._derive(calendar_ops.end_of_day(self._ms))

    def start_of_week(self) -> Moment:
        """Snap to Monday 00:00:00.000; a Sunday goes back six days.

        Examples:
            >>> Moment.create(2024, 1, 21).start_of_week().to_date_string()
            '2024-01-15'
        """
        return self._derive(calendar_ops.start_of_week(self._ms))

    def end_of_week(self) -> Moment:
        return self._derive(calendar_ops.end_of_week(self._ms))

    def start_of_month(self) -> Moment:
        return self._derive(calendar_ops.start_of_month(self._ms))

    def end_of_month(self) -> Moment:
        return self._derive(calendar_ops.end_of_month(self._ms))

    def start_of_year(self) -> Moment:
        return self._derive(calendar_ops.start_of_year(self._ms))

    def end_of_year(self) -> Moment:
        return self._derive(calendar_ops.end_of_year(self._ms))

    # Comparison predicates

    def is_before(self, other: MomentLike) -> bool:
        return comparisons.is_before(self._ms, self._resolve(other))

    def is_after(self, other: MomentLike) -> bool:
        return comparisons.is_after(self._ms, self._resolve(other))

    def is_same(self, other: MomentLike) -> bool:
        """Test for the same instant to the millisecond."""
        return comparisons.is_same(self._ms, self._resolve(other))

    def is_same_day(self, other: MomentLike) -> bool:
        return comparisons.is_same_day(self._ms, self._resolve(other))

    def is_same_month(self, other: MomentLike) -> bool:
        """Test for the same month of the same year."""
        return comparisons.is_same_month(self._ms, self._resolve(other))

    def is_same_year(self, other: MomentLike) -> bool:
        return comparisons.is_same_year(self._ms, self._resolve(other))

    def is_between(
        self,
        start: MomentLike,
        end: MomentLike,
        inclusive: bool = True,
    ) -> bool:
        """Test whether this Moment lies between ``start`` and ``end``.

        Bounds are used in the order given; with ``start`` after ``end``
        nothing is between them.
        """
        return comparisons.is_between(
            self._ms, self._resolve(start), self._resolve(end), inclusive
        )

    def is_today(self) -> bool:
        return comparisons.is_same_day(self._ms, self._now())

    def is_tomorrow(self) -> bool:
        tomorrow = calendar_ops.shift(self._now(), 1, TimeUnit.DAY)
        return comparisons.is_same_day(self._ms, tomorrow)

    def is_yesterday(self) -> bool:
        yesterday = calendar_ops.shift(self._now(), -1, TimeUnit.DAY)
        return comparisons.is_same_day(self._ms, yesterday)

    def is_future(self) -> bool:
        return comparisons.is_after(self._ms, self._now())

    def is_past(self) -> bool:
        return comparisons.is_before(self._ms, self._now())

    def is_leap_year(self) -> bool:
        return comparisons.is_leap(self._ms)

    def is_weekday(self) -> bool:
        """Monday through Friday."""
        return comparisons.is_weekday(self._ms)

    def is_weekend(self) -> bool:
        """Saturday or Sunday."""
        return comparisons.is_weekend(self._ms)

    # Differences

    def diff_in_years(self, other: MomentLike | None = None) -> int:
        """Floored difference in average (365.25 day) years.

        Positive when this Moment is later than ``other`` (default: now).
        """
        return diff.diff_in_years(self._ms, self._resolve(other))

    def diff_in_months(self, other: MomentLike | None = None) -> int:
        """Difference in calendar months, ignoring day and time of day.

        Examples:
            >>> Moment.create(2024, 3, 1).diff_in_months(Moment.create(2024, 1, 31))
            2
        """
        return diff.diff_in_months(self._ms, self._resolve(other))

    def diff_in_weeks(self, other: MomentLike | None = None) -> int:
        return diff.diff_in(self._ms, self._resolve(other), TimeUnit.WEEK)

    def diff_in_days(self, other: MomentLike | None = None) -> int:
        """Floored difference in days; half a day in the past is -1."""
        return diff.diff_in(self._ms, self._resolve(other), TimeUnit.DAY)

    def diff_in_hours(self, other: MomentLike | None = None) -> int:
        return diff.diff_in(self._ms, self._resolve(other), TimeUnit.HOUR)

    def diff_in_minutes(self, other: MomentLike | None = None) -> int:
        return diff.diff_in(self._ms, self._resolve(other), TimeUnit.MINUTE)

    def diff_in_seconds(self, other: MomentLike | None = None) -> int:
        return diff.diff_in(self._ms, self._resolve(other), TimeUnit.SECOND)

    def diff_for_humans(self, other: MomentLike | None = None) -> str:
        """Describe this Moment relative to ``other`` (default: now).

        Examples:
            >>> m = Moment.create(2024, 1, 1, 12, 0, 0)
            >>> m.diff_for_humans(m.add_seconds(90))
            '1 minute ago'
            >>> m.diff_for_humans(m.sub_days(3))
            'in 3 days'
        """
        return _humanize(self.diff_in_seconds(other))

    # Formatting

    def format(self, template: str) -> str:
        """Render this Moment with a token template.

        See :mod:`chronal.format.tokens` for the token table.

        Examples:
            >>> Moment.create(2024, 12, 25, 15, 5, 0).format("l j F, g:i A")
            'Wednesday 25 December, 3:05 PM'
        """
        return render(decompose(self._ms), template)

    def to_date_string(self) -> str:
        return self.format(DATE_FORMAT)

    def to_time_string(self) -> str:
        return self.format(TIME_FORMAT)

    def to_date_time_string(self) -> str:
        return self.format(DATE_TIME_FORMAT)

    def to_iso_format(self) -> str:
        """Return ``YYYY-MM-DDTHH:MM:SS.sss`` (no offset; Moments are naive)."""
        return format_iso8601(decompose(self._ms))

    def to_datetime(self) -> _datetime.datetime:
        """Return a new naive datetime with the same wall-clock fields.

        Raises:
            ValueError: If the year is outside datetime's range (1-9999).
        """
        f = decompose(self._ms)
        return _datetime.datetime(
            f.year, f.month, f.day, f.hour, f.minute, f.second, f.millisecond * 1000
        )

    def to_json(self) -> dict[str, Any]:
        """Return the Moment as a JSON-serializable dictionary.

        Examples:
            >>> Moment.create(2024, 1, 15, 14, 30, 45).to_json()
            {'_type': 'Moment', 'value': '2024-01-15T14:30:45.000', 'tz': None}
        """
        return {"_type": "Moment", "value": self.to_iso_format(), "tz": self._tz}

    # Arithmetic operators

    def __add__(self, other: object) -> Moment:
        """Shift by a timedelta, truncated to whole milliseconds."""
        if not isinstance(other, _datetime.timedelta):
            return NotImplemented
        return self._derive(self._ms + other // _ONE_MILLI)

    __radd__ = __add__

    def __sub__(self, other: object) -> Any:
        """Subtract a timedelta (giving a Moment) or a Moment (giving a timedelta)."""
        if isinstance(other, _datetime.timedelta):
            return self._derive(self._ms - other // _ONE_MILLI)
        if isinstance(other, Moment):
            return _datetime.timedelta(milliseconds=self._ms - other._ms)
        return NotImplemented

    # Comparison operators; the tag does not take part

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._ms == other._ms

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._ms < other._ms

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._ms <= other._ms

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._ms > other._ms

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._ms >= other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __repr__(self) -> str:
        f = decompose(self._ms)
        tz_part = f", tz={self._tz!r}" if self._tz is not None else ""
        return (
            f"Moment({f.year}, {f.month}, {f.day}, {f.hour}, {f.minute}, "
            f"{f.second}, millisecond={f.millisecond}{tz_part})"
        )

    def __str__(self) -> str:
        """Render with the configured default format."""
        return self.format(get_config().default_format)

    def __bool__(self) -> bool:
        """Moments are always truthy."""
        return True


__all__ = ["Moment", "MomentLike", "to_millis"]
