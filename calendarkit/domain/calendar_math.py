"""
Calendar arithmetic on single instants, months and periods.

Pure functions without I/O. Inputs are coerced into timezone-tagged
pendulum DateTime values first (see ``instant.to_instant``), so every
function states explicitly whether it reads UTC fields or the instant's own
wall-clock fields.
"""

import math
from typing import Mapping, Union

import pendulum
from pendulum import DateTime

from .instant import (
    MS_PER_DAY,
    UTC,
    DateLike,
    parse_date_string,
    to_instant,
    to_timestamp,
)
from .models import DatePeriod, WeekNumbering

# Indexed by pendulum.WeekDay (Monday=0, Sunday=6)
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

WEEKEND_DAYS = (pendulum.SATURDAY, pendulum.SUNDAY)

PeriodLike = Union[DatePeriod, Mapping[str, DateLike]]


def date_to_timestamp(date: str) -> int:
    """
    Return the milliseconds elapsed since 1970-01-01T00:00:00Z.

    Strings without an explicit offset are read as UTC.

    Example:
        '04 Dec 1995 00:12:00 UTC' -> 818035920000

    Raises:
        InvalidDateError: If the string cannot be parsed
    """
    return to_timestamp(parse_date_string(date))


def get_time(date: DateLike, tz: str = UTC) -> str:
    """Return the wall-clock time of the instant as ``HH:mm:ss`` (24-hour clock)."""
    return to_instant(date, tz=tz).format("HH:mm:ss")


def get_day_name(date: DateLike) -> str:
    """Return the English name of the UTC weekday of the given date."""
    instant = to_instant(date).in_timezone(UTC)
    return WEEKDAY_NAMES[instant.day_of_week]


def get_next_friday(date: DateLike, tz: str = UTC) -> DateTime:
    """
    Return the first Friday strictly after the given date.

    A Friday yields the Friday one week later. The time of day is kept.
    """
    instant = to_instant(date, tz=tz)
    days_ahead = (pendulum.FRIDAY - instant.day_of_week) % 7 or 7
    return instant.add(days=days_ahead)


def get_count_days_in_month(month: int, year: int) -> int:
    """Return the number of days in the month (1 = January), leap years included."""
    return pendulum.date(year, month, 1).days_in_month


def get_count_days_on_period(date_start: DateLike, date_end: DateLike, tz: str = UTC) -> int:
    """
    Return the number of days in a period, counting both start and end.

    Partial days round up, and the order of the arguments does not matter.

    Example:
        '2024-02-01T00:00:00.000Z', '2024-02-12T00:00:00.000Z' -> 12
    """
    start = to_timestamp(to_instant(date_start, tz=tz))
    end = to_timestamp(to_instant(date_end, tz=tz))
    return math.ceil(abs(end - start) / MS_PER_DAY) + 1


def is_date_in_period(date: DateLike, period: PeriodLike, tz: str = UTC) -> bool:
    """
    Check whether a date lies within a period, both bounds included.

    Args:
        date: The date to check
        period: A DatePeriod or a ``{"start": ..., "end": ...}`` mapping
        tz: Timezone for values that carry none

    Returns:
        True if ``start <= date <= end``
    """
    if not isinstance(period, DatePeriod):
        period = DatePeriod.from_mapping(period, tz=tz)

    return period.contains(to_instant(date, tz=tz))


def format_date(date: DateLike) -> str:
    """
    Format the UTC fields of a date as ``M/D/YYYY, h:mm:ss AM/PM``.

    Example:
        '2024-02-01T15:00:00.000Z' -> '2/1/2024, 3:00:00 PM'
    """
    instant = to_instant(date).in_timezone(UTC)
    meridiem = "PM" if instant.hour >= 12 else "AM"
    hour = instant.hour % 12 or 12

    return f"{instant.format('M/D/YYYY')}, {hour}:{instant.format('mm:ss')} {meridiem}"


def get_count_weekends_in_month(month: int, year: int) -> int:
    """Return how many Saturdays and Sundays the month (1 = January) has."""
    current = pendulum.date(year, month, 1)
    count = 0

    while current.month == month:
        if current.day_of_week in WEEKEND_DAYS:
            count += 1
        current = current.add(days=1)

    return count


def get_week_number_by_date(
    date: DateLike,
    numbering: WeekNumbering = WeekNumbering.JANUARY_FIRST,
    tz: str = UTC
) -> int:
    """
    Return the week of the year for the given date.

    Weeks start on Monday. With ``JANUARY_FIRST`` the week containing
    January 1 is week 1; with ``ISO`` the ISO-8601 week number is returned
    (week 1 holds the year's first Thursday, so early January may belong to
    the previous year's last week).

    Example:
        2024-01-31 -> 5
        2023-01-01 -> 1 (JANUARY_FIRST), 52 (ISO)
    """
    day = to_instant(date, tz=tz).date()

    if WeekNumbering(numbering) is WeekNumbering.ISO:
        return day.isocalendar()[1]

    first_weekday = pendulum.date(day.year, 1, 1).day_of_week
    return (day.day_of_year - 1 + first_weekday) // 7 + 1


def get_next_friday_the_13th(date: DateLike, tz: str = UTC) -> DateTime:
    """
    Return the first 13th falling on a Friday, starting with the date's own month.

    The search starts at the 13th of the given month even when that day is
    already in the past relative to ``date``. The time of day is kept and the
    input is not modified.

    Example:
        2024-01-13 -> 2024-09-13
        2023-02-01 -> 2023-10-13
    """
    candidate = to_instant(date, tz=tz).set(day=13)

    while candidate.day_of_week != pendulum.FRIDAY:
        candidate = candidate.add(months=1)

    return candidate


def get_quarter(date: DateLike, tz: str = UTC) -> int:
    """Return the quarter of the year (1-4) the date falls in."""
    return (to_instant(date, tz=tz).month - 1) // 3 + 1


def is_leap(year: int) -> bool:
    """Divisible by 4 and not by 100, unless also divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_leap_year(date: DateLike, tz: str = UTC) -> bool:
    """Check whether the year of the given date is a leap year."""
    return is_leap(to_instant(date, tz=tz).year)
