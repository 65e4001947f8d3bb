"""
Domain layer - Pure calendar logic without external dependencies.
"""

from .calendar_math import (
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
from .exceptions import CalendarKitError, ConfigError, InvalidDateError
from .instant import timestamp_to_instant, to_instant
from .models import DatePeriod, WeekNumbering, WorkPattern, WorkSchedule
from .schedule import ScheduleBuilder, get_work_schedule

__all__ = [
    "CalendarKitError",
    "ConfigError",
    "DatePeriod",
    "InvalidDateError",
    "ScheduleBuilder",
    "WeekNumbering",
    "WorkPattern",
    "WorkSchedule",
    "date_to_timestamp",
    "format_date",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_time",
    "get_week_number_by_date",
    "get_work_schedule",
    "is_date_in_period",
    "is_leap",
    "is_leap_year",
    "timestamp_to_instant",
    "to_instant",
]
