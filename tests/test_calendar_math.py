"""
Tests for the calendar functions.
"""

import pendulum
import pytest

from calendarkit.domain.calendar_math import (
    date_to_timestamp,
    format_date,
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_time,
    get_week_number_by_date,
    is_date_in_period,
    is_leap,
    is_leap_year,
)
from calendarkit.domain.exceptions import InvalidDateError
from calendarkit.domain.models import DatePeriod, WeekNumbering


class TestDateToTimestamp:
    """Tests for date_to_timestamp."""

    def test_epoch_is_zero(self):
        """Test that the epoch itself maps to zero."""
        assert date_to_timestamp("01 Jan 1970 00:00:00 UTC") == 0

    def test_rfc_style_string(self):
        """Test a non-ISO string with a UTC suffix."""
        assert date_to_timestamp("04 Dec 1995 00:12:00 UTC") == 818035920000

    def test_iso_string_with_milliseconds(self):
        """Test an ISO-8601 string keeps its milliseconds."""
        expected = pendulum.datetime(2024, 2, 1, tz="UTC").int_timestamp * 1000 + 250

        assert date_to_timestamp("2024-02-01T00:00:00.250Z") == expected

    def test_offset_is_respected(self):
        """Test that an explicit offset shifts the timestamp."""
        assert date_to_timestamp("1970-01-01T01:00:00+01:00") == 0

    @pytest.mark.parametrize(
        "date",
        [
            "04 Dec 1995 00:12:00 GMT+0200",
            "04 Dec 1995 00:12:00 UTC+2",
            "04 Dec 1995 00:12:00 GMT+02:00",
            "Mon Dec 04 1995 00:12:00 GMT+0200 (Central European Standard Time)",
        ],
    )
    def test_gmt_offset_suffix_is_east_of_utc(self, date):
        """Test that GMT+hhmm means ahead of UTC, like a plain +0200 offset."""
        assert date_to_timestamp(date) == date_to_timestamp("Mon, 04 Dec 1995 00:12:00 +0200")
        assert date_to_timestamp(date) == 818028720000

    def test_gmt_negative_offset_suffix(self):
        """Test that GMT-0500 means behind UTC."""
        assert date_to_timestamp("04 Dec 1995 00:12:00 GMT-0500") == 818053920000

    def test_unparseable_string_raises(self):
        """Test that garbage input raises InvalidDateError."""
        with pytest.raises(InvalidDateError):
            date_to_timestamp("not a date")

    def test_invalid_date_error_is_value_error(self):
        """Test that callers can catch a plain ValueError."""
        with pytest.raises(ValueError):
            date_to_timestamp("2024-13-45")


class TestGetTime:
    """Tests for get_time."""

    def test_zero_padded(self):
        """Test that hours, minutes and seconds are zero padded."""
        assert get_time(pendulum.datetime(2023, 6, 1, 8, 20, 55)) == "08:20:55"

    def test_twenty_four_hour_clock(self):
        """Test afternoon hours are not converted to a 12-hour clock."""
        assert get_time(pendulum.datetime(2015, 11, 20, 23, 15, 1)) == "23:15:01"

    def test_uses_instant_timezone(self):
        """Test that the instant's own wall clock is used."""
        instant = pendulum.datetime(2024, 6, 1, 10, 0, 0, tz="Europe/Berlin")

        assert get_time(instant) == "10:00:00"


class TestGetDayName:
    """Tests for get_day_name."""

    @pytest.mark.parametrize(
        "date, expected",
        [
            ("01 Jan 1970 00:00:00 UTC", "Thursday"),
            ("03 Dec 1995 00:12:00 UTC", "Sunday"),
            ("2024-01-30T00:00:00.000Z", "Tuesday"),
        ],
    )
    def test_day_names(self, date, expected):
        """Test English weekday names for known dates."""
        assert get_day_name(date) == expected

    def test_reads_utc_weekday(self):
        """Test that the UTC weekday is used for offset-aware values."""
        # Monday 00:30 in Berlin is still Sunday in UTC
        instant = pendulum.datetime(2024, 1, 1, 0, 30, tz="Europe/Berlin")

        assert get_day_name(instant) == "Sunday"


class TestGetNextFriday:
    """Tests for get_next_friday."""

    @pytest.mark.parametrize(
        "start, expected",
        [
            ((2024, 2, 3), (2024, 2, 9)),    # Saturday
            ((2024, 2, 13), (2024, 2, 16)),  # Tuesday
            ((2024, 2, 16), (2024, 2, 23)),  # Friday
            ((2024, 2, 15), (2024, 2, 16)),  # Thursday
        ],
    )
    def test_next_friday(self, start, expected):
        """Test the next Friday for several weekdays."""
        assert get_next_friday(pendulum.datetime(*start)) == pendulum.datetime(*expected)

    def test_friday_never_returns_same_day(self):
        """Test a Friday yields the Friday one week later."""
        friday = pendulum.datetime(2024, 3, 1, 18, 45)

        result = get_next_friday(friday)

        assert result == friday.add(days=7)
        assert result.hour == 18
        assert result.minute == 45

    def test_accepts_iso_string(self):
        """Test that string input is parsed as UTC."""
        assert get_next_friday("2024-02-03T00:00:00Z") == pendulum.datetime(2024, 2, 9)


class TestCountDaysInMonth:
    """Tests for get_count_days_in_month."""

    @pytest.mark.parametrize(
        "month, year, expected",
        [
            (1, 2024, 31),
            (2, 2024, 29),
            (2, 2023, 28),
            (4, 2023, 30),
            (2, 1900, 28),
            (2, 2000, 29),
            (12, 2023, 31),
        ],
    )
    def test_days_in_month(self, month, year, expected):
        """Test month lengths including leap years."""
        assert get_count_days_in_month(month, year) == expected

    def test_invalid_month_raises(self):
        """Test that a month outside 1-12 is rejected."""
        with pytest.raises(ValueError):
            get_count_days_in_month(13, 2024)


class TestCountDaysOnPeriod:
    """Tests for get_count_days_on_period."""

    def test_both_ends_inclusive(self):
        """Test that consecutive days count as two."""
        assert get_count_days_on_period("2024-02-01T00:00:00.000Z", "2024-02-02T00:00:00.000Z") == 2

    def test_longer_period(self):
        """Test a period of several days."""
        assert get_count_days_on_period("2024-02-01T00:00:00.000Z", "2024-02-12T00:00:00.000Z") == 12

    def test_same_day(self):
        """Test that a single day counts as one."""
        assert get_count_days_on_period("2024-02-01", "2024-02-01") == 1

    def test_partial_day_rounds_up(self):
        """Test that a partial day counts as a full one."""
        assert get_count_days_on_period("2024-02-01T00:00:00Z", "2024-02-01T12:00:00Z") == 2

    def test_order_does_not_matter(self):
        """Test that swapped bounds give the same count."""
        assert get_count_days_on_period("2024-02-12", "2024-02-01") == 12

    def test_leap_february(self):
        """Test a whole leap-year February."""
        assert get_count_days_on_period("2024-02-01", "2024-02-29") == 29


class TestIsDateInPeriod:
    """Tests for is_date_in_period."""

    PERIOD = {"start": "2024-02-02", "end": "2024-03-02"}

    def test_before_period(self):
        """Test a date before the start."""
        assert not is_date_in_period("2024-02-01", self.PERIOD)

    def test_start_boundary(self):
        """Test that the start date is included."""
        assert is_date_in_period("2024-02-02", self.PERIOD)

    def test_end_boundary(self):
        """Test that the end date is included."""
        assert is_date_in_period("2024-03-02", self.PERIOD)

    def test_inside_period(self):
        """Test a date inside the period."""
        assert is_date_in_period("2024-02-10", self.PERIOD)

    def test_after_period(self):
        """Test a date after the end."""
        assert not is_date_in_period("2024-03-03", self.PERIOD)

    def test_accepts_date_period(self):
        """Test with a DatePeriod instead of a mapping."""
        period = DatePeriod.parse("2024-02-02", "2024-03-02")

        assert is_date_in_period(pendulum.datetime(2024, 2, 15), period)

    def test_missing_key_raises(self):
        """Test that an incomplete mapping is rejected."""
        with pytest.raises(ValueError, match="'end'"):
            is_date_in_period("2024-02-10", {"start": "2024-02-02"})


class TestFormatDate:
    """Tests for format_date."""

    @pytest.mark.parametrize(
        "date, expected",
        [
            ("2024-02-01T15:00:00.000Z", "2/1/2024, 3:00:00 PM"),
            ("1999-01-05T02:20:00.000Z", "1/5/1999, 2:20:00 AM"),
            ("2010-12-15T22:59:00.000Z", "12/15/2010, 10:59:00 PM"),
            ("2024-02-01T00:05:09.000Z", "2/1/2024, 12:05:09 AM"),
            ("2024-02-01T12:00:00.000Z", "2/1/2024, 12:00:00 PM"),
        ],
    )
    def test_format(self, date, expected):
        """Test the M/D/YYYY, h:mm:ss AM/PM format."""
        assert format_date(date) == expected

    def test_fields_match_utc_fields(self):
        """Test that the numeric fields are the UTC fields of the input."""
        instant = pendulum.datetime(2021, 7, 4, 1, 2, 3, tz="America/New_York")
        utc = instant.in_timezone("UTC")

        month_day_year, clock = format_date(instant).split(", ")

        assert month_day_year == f"{utc.month}/{utc.day}/{utc.year}"
        assert clock == "5:02:03 AM"


class TestCountWeekendsInMonth:
    """Tests for get_count_weekends_in_month."""

    @pytest.mark.parametrize(
        "month, year, expected",
        [
            (5, 2022, 9),
            (12, 2023, 10),
            (1, 2024, 8),
            (2, 2021, 8),
        ],
    )
    def test_weekend_days(self, month, year, expected):
        """Test Saturday and Sunday counts for known months."""
        assert get_count_weekends_in_month(month, year) == expected


class TestWeekNumber:
    """Tests for get_week_number_by_date."""

    @pytest.mark.parametrize(
        "date, expected",
        [
            ((2024, 1, 3), 1),
            ((2024, 1, 31), 5),
            ((2024, 2, 23), 8),
            ((2023, 1, 1), 1),   # Sunday, week holding Jan 1
            ((2023, 1, 2), 2),   # first Monday starts week 2
            ((2020, 12, 31), 53),
        ],
    )
    def test_january_first_numbering(self, date, expected):
        """Test the week-containing-January-1 numbering."""
        assert get_week_number_by_date(pendulum.datetime(*date)) == expected

    @pytest.mark.parametrize(
        "date, expected",
        [
            ((2024, 1, 3), 1),
            ((2023, 1, 1), 52),
            ((2023, 1, 2), 1),
            ((2020, 12, 31), 53),
            ((2021, 1, 3), 53),
        ],
    )
    def test_iso_numbering(self, date, expected):
        """Test ISO-8601 week numbers."""
        result = get_week_number_by_date(pendulum.datetime(*date), numbering=WeekNumbering.ISO)

        assert result == expected

    def test_numbering_given_as_string(self):
        """Test that the numbering can be passed by value."""
        assert get_week_number_by_date(pendulum.datetime(2023, 1, 1), numbering="iso") == 52


class TestNextFridayThe13th:
    """Tests for get_next_friday_the_13th."""

    def test_skips_to_september(self):
        """Test a search starting on a Saturday the 13th."""
        result = get_next_friday_the_13th(pendulum.datetime(2024, 1, 13))

        assert result == pendulum.datetime(2024, 9, 13)

    def test_from_first_of_month(self):
        """Test a search starting at the beginning of a month."""
        result = get_next_friday_the_13th(pendulum.datetime(2023, 2, 1))

        assert result == pendulum.datetime(2023, 10, 13)

    def test_result_is_friday(self):
        """Test that the result is always a Friday the 13th."""
        result = get_next_friday_the_13th(pendulum.datetime(2025, 7, 20))

        assert result.day == 13
        assert result.day_of_week == pendulum.FRIDAY

    def test_keeps_time_and_does_not_mutate(self):
        """Test that the time of day is kept and the input untouched."""
        start = pendulum.datetime(2024, 1, 2, 9, 30)

        result = get_next_friday_the_13th(start)

        assert result == pendulum.datetime(2024, 9, 13, 9, 30)
        assert start == pendulum.datetime(2024, 1, 2, 9, 30)


class TestGetQuarter:
    """Tests for get_quarter."""

    @pytest.mark.parametrize(
        "month, expected",
        [(1, 1), (2, 1), (3, 1), (4, 2), (5, 2), (6, 2), (7, 3), (9, 3), (10, 4), (11, 4), (12, 4)],
    )
    def test_quarter(self, month, expected):
        """Test quarter boundaries."""
        assert get_quarter(pendulum.datetime(2024, month, 10)) == expected


class TestLeapYear:
    """Tests for is_leap and is_leap_year."""

    @pytest.mark.parametrize(
        "year, expected",
        [(2024, True), (2020, True), (2000, True), (2022, False), (1900, False), (2100, False)],
    )
    def test_is_leap(self, year, expected):
        """Test the Gregorian leap year rule."""
        assert is_leap(year) is expected

    def test_is_leap_year_from_date(self):
        """Test reading the year from a date."""
        assert is_leap_year(pendulum.datetime(2024, 3, 1))
        assert not is_leap_year(pendulum.datetime(2022, 3, 1))
