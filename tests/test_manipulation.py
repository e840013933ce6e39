"""Tests for the manipulation façades, run against every backend"""
from datetime import date, datetime

import pytest

from date_facades.config import Config
from date_facades.exceptions import InvalidBoundsError, UnsupportedUnitError


def wall(value):
    """Local wall time of an aware façade result."""
    return value.replace(tzinfo=None)


class TestShift:
    """Test add and subtract."""

    def test_add_days(self, date_utils, test_date):
        result = date_utils.add(test_date, 5, "days")
        assert wall(result) == datetime(2025, 10, 1, 10, 45, 30)

    def test_add_returns_aware_local_datetime(self, date_utils, test_date):
        result = date_utils.add(test_date, 1, "day")
        assert isinstance(result, datetime)
        assert result.tzinfo is not None

    def test_subtract_hours(self, date_utils, test_date):
        result = date_utils.subtract(test_date, 3, "hours")
        assert result.hour == test_date.hour - 3

    def test_add_month_clamps_to_month_end(self, date_utils):
        result = date_utils.add(datetime(2025, 1, 31), 1, "month")
        assert (result.month, result.day) == (2, 28)

    def test_add_month_in_leap_year(self, date_utils):
        result = date_utils.add(datetime(2024, 1, 31), 1, "M")
        assert (result.month, result.day) == (2, 29)

    def test_add_quarter(self, date_utils, test_date):
        result = date_utils.add(test_date, 1, "quarter")
        assert wall(result) == datetime(2025, 12, 26, 10, 45, 30)

    def test_add_milliseconds(self, date_utils, test_date):
        result = date_utils.add(test_date, 1500, "ms")
        assert (result.second, result.microsecond) == (31, 500000)

    def test_subtract_years(self, date_utils):
        result = date_utils.subtract(datetime(2024, 2, 29), 1, "y")
        assert wall(result) == datetime(2023, 2, 28)

    def test_add_negative_amount(self, date_utils, test_date):
        assert date_utils.add(test_date, -2, "weeks") == date_utils.subtract(test_date, 2, "weeks")

    def test_add_to_string_input(self, date_utils):
        result = date_utils.add("2025-09-26", 1, "day")
        assert wall(result) == datetime(2025, 9, 27)

    def test_add_invalid_date(self, date_utils):
        assert date_utils.add("invalid-date", 1, "day") is None

    def test_add_unknown_unit(self, date_utils, test_date):
        with pytest.raises(UnsupportedUnitError):
            date_utils.add(test_date, 1, "fortnight")

    def test_unknown_unit_is_value_error(self, date_utils, test_date):
        with pytest.raises(ValueError, match="fortnight"):
            date_utils.subtract(test_date, 1, "fortnight")


class TestPeriods:
    """Test start_of and end_of."""

    def test_start_of_day(self, date_utils, test_date):
        result = date_utils.start_of(test_date, "day")
        assert (result.hour, result.minute, result.second) == (0, 0, 0)
        assert result.day == 26

    def test_end_of_day(self, date_utils, test_date):
        result = date_utils.end_of(test_date, "day")
        assert (result.hour, result.minute, result.second) == (23, 59, 59)
        assert result.microsecond == 999999

    def test_start_of_month(self, date_utils, test_date):
        assert wall(date_utils.start_of(test_date, "month")) == datetime(2025, 9, 1)

    def test_end_of_month(self, date_utils, test_date):
        result = date_utils.end_of(test_date, "month")
        assert (result.month, result.day, result.hour) == (9, 30, 23)

    def test_end_of_february_leap_year(self, date_utils):
        result = date_utils.end_of(datetime(2024, 2, 10), "month")
        assert result.day == 29

    def test_start_of_year(self, date_utils, test_date):
        assert wall(date_utils.start_of(test_date, "year")) == datetime(2025, 1, 1)

    def test_end_of_year(self, date_utils, test_date):
        result = date_utils.end_of(test_date, "year")
        assert (result.month, result.day, result.hour, result.minute) == (12, 31, 23, 59)

    def test_start_of_quarter(self, date_utils, test_date):
        assert wall(date_utils.start_of(test_date, "quarter")) == datetime(2025, 7, 1)

    def test_end_of_quarter(self, date_utils, test_date):
        result = date_utils.end_of(test_date, "Q")
        assert (result.month, result.day, result.hour) == (9, 30, 23)

    def test_start_of_hour(self, date_utils, test_date):
        assert wall(date_utils.start_of(test_date, "hour")) == datetime(2025, 9, 26, 10)

    def test_start_of_minute(self, date_utils, test_date):
        assert wall(date_utils.start_of(test_date, "minute")) == datetime(2025, 9, 26, 10, 45)

    def test_end_of_second(self, date_utils, test_date):
        result = date_utils.end_of(test_date, "second")
        assert wall(result) == datetime(2025, 9, 26, 10, 45, 30, 999999)

    def test_start_of_week_defaults_to_sunday(self, date_utils, test_date):
        # 2025-09-26 is a Friday
        assert wall(date_utils.start_of(test_date, "week")) == datetime(2025, 9, 21)

    def test_end_of_week_defaults_to_saturday(self, date_utils, test_date):
        result = date_utils.end_of(test_date, "week")
        assert wall(result) == datetime(2025, 9, 27, 23, 59, 59, 999999)

    def test_start_of_week_on_monday(self, date_utils, test_date):
        monday_utils = type(date_utils)(Config(week_start=1))
        assert wall(monday_utils.start_of(test_date, "week")) == datetime(2025, 9, 22)

    def test_start_of_week_on_week_start_day(self, date_utils):
        sunday = datetime(2025, 9, 21, 18, 0)
        assert wall(date_utils.start_of(sunday, "week")) == datetime(2025, 9, 21)

    def test_start_of_millisecond_unsupported(self, date_utils, test_date):
        with pytest.raises(UnsupportedUnitError):
            date_utils.start_of(test_date, "millisecond")

    def test_start_of_invalid_date(self, date_utils):
        assert date_utils.start_of("invalid-date", "day") is None
        assert date_utils.end_of("invalid-date", "day") is None


class TestComparisons:
    """Test is_before, is_after and is_between."""

    def test_is_before(self, date_utils, test_date, test_date2):
        assert date_utils.is_before(test_date2, test_date) is True
        assert date_utils.is_before(test_date, test_date2) is False

    def test_is_after(self, date_utils, test_date, test_date2):
        assert date_utils.is_after(test_date, test_date2) is True
        assert date_utils.is_after(test_date2, test_date) is False

    def test_same_instant_is_neither(self, date_utils, test_date):
        assert date_utils.is_before(test_date, test_date) is False
        assert date_utils.is_after(test_date, test_date) is False

    def test_mixed_input_types(self, date_utils, test_date):
        assert date_utils.is_before("2025-09-20T08:30:00", test_date) is True
        assert date_utils.is_after(int(test_date.timestamp() * 1000), date(2025, 9, 26)) is True

    def test_is_between(self, date_utils, test_date, test_date2, middle_date):
        assert date_utils.is_between(middle_date, test_date2, test_date) is True
        assert date_utils.is_between(test_date2, middle_date, test_date) is False

    def test_is_between_excludes_bounds_by_default(self, date_utils, test_date, test_date2):
        assert date_utils.is_between(test_date, test_date2, test_date) is False

    def test_is_between_inclusive_bounds(self, date_utils, test_date, test_date2):
        assert date_utils.is_between(test_date, test_date2, test_date, "[]") is True
        assert date_utils.is_between(test_date2, test_date2, test_date, "[)") is True
        assert date_utils.is_between(test_date, test_date2, test_date, "[)") is False
        assert date_utils.is_between(test_date, test_date2, test_date, "(]") is True

    def test_is_between_invalid_bounds(self, date_utils, test_date, test_date2, middle_date):
        with pytest.raises(InvalidBoundsError):
            date_utils.is_between(middle_date, test_date2, test_date, "<>")

    def test_comparisons_with_invalid_date(self, date_utils, test_date):
        assert date_utils.is_before("invalid-date", test_date) is False
        assert date_utils.is_after(test_date, "invalid-date") is False
        assert date_utils.is_between(test_date, "invalid-date", test_date) is False


class TestDiff:
    """Test diff."""

    def test_diff_days(self, date_utils, test_date, test_date2):
        assert date_utils.diff(test_date, test_date2, "days") == 6

    def test_diff_hours(self, date_utils, test_date, test_date2):
        hours = date_utils.diff(test_date, test_date2, "hours")
        assert hours > 140
        assert hours == 146

    def test_diff_defaults_to_milliseconds(self, date_utils, test_date, test_date2):
        assert date_utils.diff(test_date, test_date2) == 526530000

    def test_diff_minutes(self, date_utils, test_date, test_date2):
        assert date_utils.diff(test_date, test_date2, "minute") == 8775

    def test_diff_is_signed(self, date_utils, test_date, test_date2):
        assert date_utils.diff(test_date2, test_date, "days") == -6

    def test_diff_weeks(self, date_utils, test_date, test_date2):
        assert date_utils.diff(test_date, test_date2, "weeks") == 0

    def test_diff_months(self, date_utils):
        assert date_utils.diff(datetime(2025, 3, 15), datetime(2025, 1, 20), "months") == 1
        assert date_utils.diff(datetime(2025, 1, 20), datetime(2025, 3, 15), "months") == -1

    def test_diff_quarters(self, date_utils):
        assert date_utils.diff(datetime(2025, 9, 26), datetime(2025, 1, 1), "quarters") == 2

    def test_diff_years(self, date_utils):
        assert date_utils.diff(datetime(2025, 9, 26), datetime(2020, 9, 27), "years") == 4
        assert date_utils.diff(datetime(2025, 9, 26), datetime(2020, 9, 26), "years") == 5

    def test_diff_invalid_date(self, date_utils, test_date):
        assert date_utils.diff(test_date, "invalid-date", "days") is None

    def test_diff_unknown_unit(self, date_utils, test_date, test_date2):
        with pytest.raises(UnsupportedUnitError):
            date_utils.diff(test_date, test_date2, "decades")


class TestValidity:
    """Test is_valid."""

    def test_valid_inputs(self, date_utils, test_date):
        assert date_utils.is_valid(test_date) is True
        assert date_utils.is_valid(datetime(2025, 9, 26)) is True
        assert date_utils.is_valid(date(2024, 2, 29)) is True
        assert date_utils.is_valid("2025-09-26") is True
        assert date_utils.is_valid(int(test_date.timestamp() * 1000)) is True

    def test_invalid_string(self, date_utils):
        assert date_utils.is_valid("invalid-date") is False

    def test_unparseable_values(self, date_utils):
        assert date_utils.is_valid(float("nan")) is False
        assert date_utils.is_valid("2025-02-30") is False
        assert date_utils.is_valid("") is False

    def test_non_date_types(self, date_utils):
        assert date_utils.is_valid(None) is False
        assert date_utils.is_valid(True) is False
        assert date_utils.is_valid([2025, 9, 26]) is False

    def test_out_of_range_epoch_millis(self, date_utils):
        assert date_utils.is_valid(300_000_000_000_000) is False
        assert date_utils.add(300_000_000_000_000, 1, "day") is None


class TestDaylightSaving:
    """Test shifts across the 2025-03-09 spring-forward in New York."""

    def test_add_hours_is_elapsed_time(self, date_utils, new_york_tz):
        start = datetime(2025, 3, 8, 12)
        result = date_utils.add(start, 24, "hours")
        assert wall(result) == datetime(2025, 3, 9, 13)
        assert date_utils.diff(result, start, "hours") == 24

    def test_add_minutes_is_elapsed_time(self, date_utils, new_york_tz):
        result = date_utils.add(datetime(2025, 3, 9, 1, 30), 60, "minutes")
        assert wall(result) == datetime(2025, 3, 9, 3, 30)

    def test_subtract_hours_is_elapsed_time(self, date_utils, new_york_tz):
        start = datetime(2025, 3, 9, 12)
        result = date_utils.subtract(start, 24, "hours")
        assert wall(result) == datetime(2025, 3, 8, 11)
        assert date_utils.diff(start, result, "hours") == 24

    def test_add_day_keeps_wall_time(self, date_utils, new_york_tz):
        start = datetime(2025, 3, 8, 12)
        result = date_utils.add(start, 1, "day")
        assert wall(result) == datetime(2025, 3, 9, 12)
        assert date_utils.diff(result, start, "hours") == 23
