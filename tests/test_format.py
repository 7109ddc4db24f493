"""Tests for token formatting and template parsing.

This test module verifies:
    - Every supported token
    - Literal characters pass through unchanged
    - Convenience wrappers match their templates
    - create_from_format parsing, including two digit years and names
"""

from __future__ import annotations

import pytest

from chronal import InvalidInput, Moment, config
from chronal.clock import FixedClock
from chronal.format import DATE_TIME_FORMAT, format_iso8601, parse_format, render
from chronal._internal.calendar import Fields, compose


@pytest.fixture
def christmas() -> Moment:
    """Wednesday 2024-12-25 15:05:09.042."""
    return Moment.create(2024, 12, 25, 15, 5, 9, millisecond=42)


class TestTokens:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("Y", "2024"),
            ("y", "24"),
            ("F", "December"),
            ("M", "Dec"),
            ("m", "12"),
            ("n", "12"),
            ("d", "25"),
            ("j", "25"),
            ("l", "Wednesday"),
            ("D", "Wed"),
            ("H", "15"),
            ("G", "15"),
            ("h", "03"),
            ("g", "3"),
            ("i", "05"),
            ("s", "09"),
            ("A", "PM"),
            ("a", "pm"),
        ],
    )
    def test_token(self, christmas: Moment, token: str, expected: str) -> None:
        assert christmas.format(token) == expected

    def test_padding(self) -> None:
        m = Moment.create(2024, 1, 5, 7, 3, 2)
        assert m.format("m n d j H G i s") == "01 1 05 5 07 7 03 02"

    def test_small_year(self) -> None:
        m = Moment.create(5, 3, 1)
        assert m.format("Y") == "0005"
        assert m.format("y") == "05"

    def test_negative_year(self) -> None:
        assert Moment.create(-44, 3, 15).format("Y") == "-0044"

    def test_all_month_names(self) -> None:
        names = [Moment.create(2024, month, 1).format("F") for month in range(1, 13)]
        assert names[0] == "January"
        assert names[4] == "May"
        assert names[11] == "December"
        assert [Moment.create(2024, month, 1).format("M") for month in (6, 7, 9)] == [
            "Jun",
            "Jul",
            "Sep",
        ]

    def test_all_weekday_names(self) -> None:
        # 2024-01-14 is a Sunday
        names = [Moment.create(2024, 1, 14 + i).format("l") for i in range(7)]
        assert names == [
            "Sunday",
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
        ]


class TestTwelveHourClock:
    @pytest.mark.parametrize(
        ("hour", "h", "g", "a"),
        [
            (0, "12", "12", "am"),
            (1, "01", "1", "am"),
            (11, "11", "11", "am"),
            (12, "12", "12", "pm"),
            (13, "01", "1", "pm"),
            (23, "11", "11", "pm"),
        ],
    )
    def test_hour_mapping(self, hour: int, h: str, g: str, a: str) -> None:
        m = Moment.create(2024, 1, 1, hour)
        assert m.format("h") == h
        assert m.format("g") == g
        assert m.format("a") == a
        assert m.format("A") == a.upper()


class TestLiterals:
    def test_unrecognized_characters_pass_through(self, christmas: Moment) -> None:
        assert christmas.format("Y/m/d @ H:i [x] #1") == "2024/12/25 @ 15:05 [x] #1"

    def test_empty_template(self, christmas: Moment) -> None:
        assert christmas.format("") == ""

    def test_no_tokens(self, christmas: Moment) -> None:
        assert christmas.format("---") == "---"

    def test_values_are_not_rescanned(self) -> None:
        # "December" and "Monday" contain token letters (D, M, m, d, y, a)
        m = Moment.create(2024, 12, 2)
        assert m.format("F l") == "December Monday"
        assert m.format("D M") == "Mon Dec"

    def test_idempotent(self, christmas: Moment) -> None:
        first = christmas.format("l j F Y")
        assert christmas.format("l j F Y") == first == "Wednesday 25 December 2024"

    def test_render_on_fields(self) -> None:
        assert render(Fields(2024, 2, 29, 0, 0, 0, 0), "D j M") == "Thu 29 Feb"


class TestConvenienceFormats:
    def test_date_string(self, christmas: Moment) -> None:
        assert christmas.to_date_string() == christmas.format("Y-m-d") == "2024-12-25"

    def test_time_string(self, christmas: Moment) -> None:
        assert christmas.to_time_string() == christmas.format("H:i:s") == "15:05:09"

    def test_date_time_string(self, christmas: Moment) -> None:
        assert christmas.to_date_time_string() == christmas.format("Y-m-d H:i:s")
        assert christmas.to_date_time_string() == "2024-12-25 15:05:09"

    def test_iso_format(self, christmas: Moment) -> None:
        assert christmas.to_iso_format() == "2024-12-25T15:05:09.042"

    def test_iso_negative_year(self) -> None:
        assert format_iso8601(Fields(-44, 3, 15, 0, 0, 0, 0)) == "-0044-03-15T00:00:00.000"

    def test_str_uses_configured_format(self, christmas: Moment) -> None:
        assert str(christmas) == "2024-12-25 15:05:09"
        config.configure(default_format="d/m/Y")
        assert str(christmas) == "25/12/2024"


class TestCreateFromFormat:
    def test_basic(self) -> None:
        m = Moment.create_from_format("d/m/Y H:i", "25/12/2024 10:30")
        assert m.to_date_time_string() == "2024-12-25 10:30:00"

    def test_round_trip(self, christmas: Moment) -> None:
        text = christmas.format(DATE_TIME_FORMAT)
        parsed = Moment.create_from_format(DATE_TIME_FORMAT, text)
        # Milliseconds are not part of the template
        assert parsed.is_same(Moment.create(2024, 12, 25, 15, 5, 9))
        assert not parsed.is_same(christmas)
        assert parsed.format(DATE_TIME_FORMAT) == text

    def test_month_name(self) -> None:
        m = Moment.create_from_format("j F Y", "4 July 1976")
        assert m.to_date_string() == "1976-07-04"

    def test_month_abbreviation_case_insensitive(self) -> None:
        m = Moment.create_from_format("M j, Y", "jan 5, 2024")
        assert m.to_date_string() == "2024-01-05"

    def test_twelve_hour(self) -> None:
        assert Moment.create_from_format("Y-m-d g:i A", "2024-01-01 12:15 AM").hour == 0
        assert Moment.create_from_format("Y-m-d g:i A", "2024-01-01 12:15 PM").hour == 12
        assert Moment.create_from_format("Y-m-d h:i a", "2024-01-01 07:45 pm").hour == 19

    def test_two_digit_year(self) -> None:
        assert Moment.create_from_format("d/m/y", "01/02/24").year == 2024
        assert Moment.create_from_format("d/m/y", "01/02/69").year == 2069
        assert Moment.create_from_format("d/m/y", "01/02/70").year == 1970
        assert Moment.create_from_format("d/m/y", "01/02/99").year == 1999

    def test_two_digit_year_pivot_is_configurable(self) -> None:
        config.configure(two_digit_year_pivot=50)
        assert Moment.create_from_format("d/m/y", "01/02/69").year == 1969
        assert Moment.create_from_format("d/m/y", "01/02/49").year == 2049

    def test_weekday_checked(self) -> None:
        m = Moment.create_from_format("D, d M Y", "Wed, 25 Dec 2024")
        assert m.to_date_string() == "2024-12-25"
        with pytest.raises(InvalidInput, match="Wednesday"):
            Moment.create_from_format("D, d M Y", "Mon, 25 Dec 2024")

    def test_missing_date_defaults_to_today(self, clock: FixedClock) -> None:
        m = Moment.create_from_format("H:i", "08:15", clock=clock)
        assert m.to_date_time_string() == "2024-06-15 08:15:00"

    def test_missing_time_defaults_to_midnight(self) -> None:
        assert Moment.create_from_format("Y-m-d", "2024-03-10").to_time_string() == "00:00:00"

    def test_keeps_tz_and_clock(self, clock: FixedClock) -> None:
        m = Moment.create_from_format("Y-m-d", "2024-03-10", tz="Europe/Paris", clock=clock)
        assert m.tz == "Europe/Paris"
        assert m.clock is clock

    def test_repeated_field_must_agree(self) -> None:
        assert Moment.create_from_format("Y-m (Y)", "2024-03 (2024)").month == 3
        with pytest.raises(InvalidInput):
            Moment.create_from_format("Y-m (Y)", "2024-03 (2025)")

    @pytest.mark.parametrize(
        ("fmt", "text"),
        [
            ("Y-m-d", "2024/01/01"),
            ("Y-m-d", "not a date"),
            ("Y-m-d", "2024-13-01"),
            ("Y-m-d", "2023-02-29"),
            ("Y-m-d H:i", "2024-01-01 24:00"),
            ("Y-m-d H:i:s", "2024-01-01 10:60:00"),
            ("Y-m-d g A", "2024-01-01 0 AM"),
            ("F Y", "Smarch 2024"),
        ],
    )
    def test_invalid(self, fmt: str, text: str) -> None:
        with pytest.raises(InvalidInput):
            Moment.create_from_format(fmt, text)

    def test_invalid_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Moment.create_from_format("Y-m-d", "2024-02-30")


class TestParseFormat:
    def test_returns_millis(self) -> None:
        millis = parse_format("2024-12-25", "Y-m-d", default_date=(1970, 1, 1))
        assert millis == compose(2024, 12, 25)

    def test_default_date(self) -> None:
        millis = parse_format("10:30", "H:i", default_date=(2000, 2, 29))
        assert millis == compose(2000, 2, 29, 10, 30)

    def test_surrounding_whitespace(self) -> None:
        millis = parse_format("  2024-01-01  ", "Y-m-d", default_date=(1970, 1, 1))
        assert millis == compose(2024, 1, 1)
