"""Tests for calendar arithmetic and period snapping.

This test module verifies:
    - add/sub for every unit, singular and plural forms
    - Month and year rollover (no clamping)
    - Forward-then-inverse sequences restoring the original instant
    - start_of/end_of for day, week, month and year
"""

from __future__ import annotations

import pytest

from chronal import Moment, TimeUnit
from chronal.arithmetic import end_of, shift, start_of
from chronal._internal.calendar import compose, decompose


class TestAddUnits:
    """Test the named add_* methods."""

    def test_add_days(self) -> None:
        assert Moment.create(2024, 12, 25).add_days(5).day == 30

    def test_add_days_across_year(self) -> None:
        assert Moment.create(2024, 12, 25).add_days(10).to_date_string() == "2025-01-04"

    def test_add_weeks(self) -> None:
        assert Moment.create(2024, 2, 20).add_weeks(2).to_date_string() == "2024-03-05"

    def test_add_months(self) -> None:
        assert Moment.create(2024, 1, 15).add_months(2).month == 3

    def test_add_months_across_year(self) -> None:
        assert Moment.create(2024, 11, 15).add_months(3).to_date_string() == "2025-02-15"

    def test_add_years(self) -> None:
        assert Moment.create(2024, 6, 1).add_years(3).to_date_string() == "2027-06-01"

    def test_add_hours(self) -> None:
        m = Moment.create(2024, 12, 31, 22).add_hours(3)
        assert m.to_date_time_string() == "2025-01-01 01:00:00"

    def test_add_minutes(self) -> None:
        m = Moment.create(2024, 1, 1, 10, 45).add_minutes(30)
        assert m.to_time_string() == "11:15:00"

    def test_add_seconds(self) -> None:
        m = Moment.create(2024, 1, 1, 23, 59, 59).add_seconds(1)
        assert m.to_date_time_string() == "2024-01-02 00:00:00"

    def test_time_of_day_preserved(self) -> None:
        m = Moment.create(2024, 1, 15, 14, 30, 45, millisecond=9).add_months(1)
        assert m.to_iso_format() == "2024-02-15T14:30:45.009"


class TestSubUnits:
    def test_sub_months(self) -> None:
        assert Moment.create(2024, 3, 15).sub_months(2).month == 1

    def test_sub_months_across_year(self) -> None:
        assert Moment.create(2024, 1, 15).sub_months(1).to_date_string() == "2023-12-15"

    def test_sub_days(self) -> None:
        assert Moment.create(2024, 3, 1).sub_days(1).to_date_string() == "2024-02-29"

    def test_sub_years(self) -> None:
        assert Moment.create(2024, 3, 1).sub_years(24).to_date_string() == "2000-03-01"

    @pytest.mark.parametrize(
        ("add", "sub"),
        [
            ("add_years", "sub_years"),
            ("add_months", "sub_months"),
            ("add_weeks", "sub_weeks"),
            ("add_days", "sub_days"),
            ("add_hours", "sub_hours"),
            ("add_minutes", "sub_minutes"),
            ("add_seconds", "sub_seconds"),
        ],
    )
    def test_sub_is_negative_add(self, add: str, sub: str) -> None:
        m = Moment.create(2024, 1, 31, 13, 14, 15, millisecond=16)
        for n in (1, 7, 13, -5):
            assert getattr(m, sub)(n).timestamp == getattr(m, add)(-n).timestamp


class TestSingularForms:
    @pytest.mark.parametrize("unit", ["year", "month", "week", "day", "hour", "minute", "second"])
    def test_singular_is_plural_of_one(self, unit: str) -> None:
        m = Moment.create(2024, 1, 31, 12)
        assert getattr(m, f"add_{unit}")() == getattr(m, f"add_{unit}s")(1)
        assert getattr(m, f"sub_{unit}")() == getattr(m, f"sub_{unit}s")(1)


class TestGenericAdd:
    def test_add_by_unit(self) -> None:
        m = Moment.create(2024, 12, 25)
        assert m.add(2, TimeUnit.WEEK) == m.add_weeks(2)

    @pytest.mark.parametrize("name", ["day", "days", "DAY", " Days "])
    def test_add_by_name(self, name: str) -> None:
        m = Moment.create(2024, 12, 25)
        assert m.add(3, name) == m.add_days(3)

    def test_sub_by_name(self) -> None:
        m = Moment.create(2024, 12, 25)
        assert m.sub(1, "months") == m.sub_month()

    def test_unknown_unit(self) -> None:
        with pytest.raises(ValueError, match="unknown time unit"):
            Moment.create(2024, 1, 1).add(1, "fortnight")


class TestMonthRollover:
    """Year and month arithmetic roll surplus days into the next month."""

    def test_jan_31_plus_one_month_leap_year(self) -> None:
        assert Moment.create(2024, 1, 31).add_months(1).to_date_string() == "2024-03-02"

    def test_jan_31_plus_one_month_common_year(self) -> None:
        assert Moment.create(2023, 1, 31).add_months(1).to_date_string() == "2023-03-03"

    def test_mar_31_minus_one_month(self) -> None:
        assert Moment.create(2024, 3, 31).sub_months(1).to_date_string() == "2024-03-02"

    def test_may_31_plus_one_month(self) -> None:
        assert Moment.create(2024, 5, 31).add_month().to_date_string() == "2024-07-01"

    def test_leap_day_plus_one_year(self) -> None:
        assert Moment.create(2024, 2, 29).add_year().to_date_string() == "2025-03-01"

    def test_leap_day_plus_four_years(self) -> None:
        assert Moment.create(2024, 2, 29).add_years(4).to_date_string() == "2028-02-29"

    @pytest.mark.parametrize("n", [1, 2, 5, 11, 12, 13, 25, -1, -7, -24])
    def test_round_trip_without_rollover(self, n: int) -> None:
        m = Moment.create(2024, 6, 15, 8, 30)
        back = m.add_months(n).sub_months(n)
        assert (back.year, back.month, back.day) == (2024, 6, 15)
        assert back == m

    def test_round_trip_with_rollover_is_not_identity(self) -> None:
        back = Moment.create(2024, 1, 31).add_months(1).sub_months(1)
        assert back.to_date_string() == "2024-02-02"


class TestChaining:
    def test_chain(self) -> None:
        m = Moment.create(2024, 1, 1).add_days(1).add_hours(2).sub_minutes(30)
        assert m.to_date_time_string() == "2024-01-02 01:30:00"

    def test_inverse_sequence_restores_instant(self) -> None:
        start = Moment.create(2024, 6, 15, 13, 45, 10, millisecond=500)
        steps = [
            ("days", 10),
            ("hours", -30),
            ("weeks", 3),
            ("minutes", 1_000),
            ("seconds", -59),
            ("days", -400),
        ]
        m = start
        for unit, amount in steps:
            m = m.add(amount, unit)
        for unit, amount in reversed(steps):
            m = m.sub(amount, unit)
        assert m.timestamp == start.timestamp

    def test_inverse_sequence_with_months_mid_month(self) -> None:
        start = Moment.create(2024, 6, 15, 9)
        m = start.add_years(2).add_months(7).add_days(3)
        m = m.sub_days(3).sub_months(7).sub_years(2)
        assert m.timestamp == start.timestamp


class TestShift:
    """Test the underlying shift function on raw instants."""

    def test_week_is_seven_days(self) -> None:
        base = compose(2024, 2, 26, 12)
        assert shift(base, 1, TimeUnit.WEEK) == shift(base, 7, TimeUnit.DAY)
        assert shift(base, -3, TimeUnit.WEEK) == shift(base, -21, TimeUnit.DAY)

    def test_fixed_units(self) -> None:
        assert shift(0, 2, TimeUnit.HOUR) == 7_200_000
        assert shift(0, -1, TimeUnit.SECOND) == -1_000

    def test_month(self) -> None:
        assert decompose(shift(compose(2024, 1, 31), 1, TimeUnit.MONTH))[:3] == (2024, 3, 2)


class TestStartEndOfDay:
    def test_start_of_day(self) -> None:
        m = Moment.create(2024, 12, 25, 10, 30, 45, millisecond=123).start_of_day()
        assert m.to_iso_format() == "2024-12-25T00:00:00.000"

    def test_end_of_day(self) -> None:
        m = Moment.create(2024, 12, 25, 10, 30, 45).end_of_day()
        assert m.to_iso_format() == "2024-12-25T23:59:59.999"

    def test_before_epoch(self) -> None:
        m = Moment.create(1969, 7, 20, 20, 17).start_of_day()
        assert m.to_iso_format() == "1969-07-20T00:00:00.000"


class TestStartEndOfWeek:
    """Weeks start on Monday."""

    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (15, "2024-01-15"),  # Monday
            (17, "2024-01-15"),  # Wednesday
            (20, "2024-01-15"),  # Saturday
            (21, "2024-01-15"),  # Sunday goes back six days
            (22, "2024-01-22"),  # Next Monday
        ],
    )
    def test_start_of_week(self, day: int, expected: str) -> None:
        m = Moment.create(2024, 1, day, 18, 5).start_of_week()
        assert m.to_date_time_string() == f"{expected} 00:00:00"

    def test_start_of_week_across_month(self) -> None:
        assert Moment.create(2024, 3, 1).start_of_week().to_date_string() == "2024-02-26"

    def test_end_of_week(self) -> None:
        m = Moment.create(2024, 1, 17, 9).end_of_week()
        assert m.to_iso_format() == "2024-01-21T23:59:59.999"

    def test_end_of_week_on_sunday(self) -> None:
        m = Moment.create(2024, 1, 21, 9).end_of_week()
        assert m.to_iso_format() == "2024-01-21T23:59:59.999"

    def test_end_of_week_across_year(self) -> None:
        assert Moment.create(2024, 12, 31).end_of_week().to_date_string() == "2025-01-05"


class TestStartEndOfMonth:
    def test_start_of_month(self) -> None:
        m = Moment.create(2024, 2, 17, 13).start_of_month()
        assert m.to_iso_format() == "2024-02-01T00:00:00.000"

    @pytest.mark.parametrize(
        ("year", "month", "expected"),
        [
            (2024, 2, "2024-02-29"),
            (2023, 2, "2023-02-28"),
            (2024, 4, "2024-04-30"),
            (2024, 12, "2024-12-31"),
        ],
    )
    def test_end_of_month(self, year: int, month: int, expected: str) -> None:
        m = Moment.create(year, month, 10, 8).end_of_month()
        assert m.to_iso_format() == f"{expected}T23:59:59.999"


class TestStartEndOfYear:
    def test_start_of_year(self) -> None:
        m = Moment.create(2024, 7, 4, 12).start_of_year()
        assert m.to_iso_format() == "2024-01-01T00:00:00.000"

    def test_end_of_year(self) -> None:
        m = Moment.create(2024, 7, 4, 12).end_of_year()
        assert m.to_iso_format() == "2024-12-31T23:59:59.999"


class TestGenericSnap:
    @pytest.mark.parametrize("unit", ["day", "week", "month", "year"])
    def test_start_of_matches_named(self, unit: str) -> None:
        m = Moment.create(2024, 5, 19, 17, 3)
        assert m.start_of(unit) == getattr(m, f"start_of_{unit}")()
        assert m.end_of(unit) == getattr(m, f"end_of_{unit}")()

    def test_unsupported_unit(self) -> None:
        with pytest.raises(ValueError, match="cannot snap"):
            Moment.create(2024, 1, 1).start_of("hour")
        with pytest.raises(ValueError, match="cannot snap"):
            end_of(0, TimeUnit.MINUTE)

    def test_raw_start_of(self) -> None:
        assert start_of(compose(2024, 5, 19, 17), TimeUnit.MONTH) == compose(2024, 5, 1)


class TestFractionalAmounts:
    """Fractional amounts are truncated toward zero to whole units."""

    @pytest.mark.parametrize(
        "unit", ["years", "months", "weeks", "days", "hours", "minutes", "seconds"]
    )
    def test_positive_fraction(self, unit: str) -> None:
        m = Moment.create(2024, 1, 31, 12)
        assert m.add(1.5, unit) == m.add(1, unit)
        assert m.sub(2.9, unit) == m.sub(2, unit)

    def test_negative_fraction(self) -> None:
        m = Moment.create(2024, 1, 1)
        assert m.add_hours(-2.7) == m.sub_hours(2)

    def test_result_formats(self) -> None:
        m = Moment.create(2024, 1, 1).add_days(1.5)
        assert m.format("Y-m-d H:i:s") == "2024-01-02 00:00:00"
        assert isinstance(m.timestamp, int)

    def test_fractional_months(self) -> None:
        assert Moment.create(2024, 1, 15).add_months(1.5).to_date_string() == "2024-02-15"

    def test_below_one_is_no_change(self) -> None:
        m = Moment.create(2024, 1, 1, 8)
        assert m.add_days(0.99) == m
        assert m.add_minutes(-0.5) == m

    def test_raw_shift_returns_int(self) -> None:
        result = shift(compose(2024, 1, 1), 2.5, TimeUnit.HOUR)
        assert result == compose(2024, 1, 1, 2)
        assert isinstance(result, int)

    def test_non_numeric_amount(self) -> None:
        with pytest.raises(TypeError):
            Moment.create(2024, 1, 1).add("3", "days")  # type: ignore[arg-type]
