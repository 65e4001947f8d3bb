"""
Application service binding configuration to the calendar functions.

The domain functions take an explicit timezone on every call. The service
keeps the configured timezone, week numbering and default work pattern in
one place so callers only hand over their raw values.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Union

from pendulum import DateTime

from ..config import AppConfig
from ..domain import calendar_math
from ..domain.instant import DateLike, to_instant, to_timestamp
from ..domain.models import DatePeriod, WeekNumbering, WorkPattern
from ..domain.schedule import get_work_schedule

logger = logging.getLogger(__name__)


class CalendarService:
    """
    Facade over the calendar functions using the application configuration.

    Values without timezone information are interpreted in the configured
    timezone before any calendar math happens.
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self._config = config or AppConfig()

    @property
    def timezone(self) -> str:
        return self._config.timezone

    def to_instant(self, value: DateLike) -> DateTime:
        """Coerce a value into an instant in the configured timezone."""
        return to_instant(value, tz=self.timezone)

    def timestamp_of(self, date: DateLike) -> int:
        """Milliseconds since the epoch for the given date."""
        return to_timestamp(self.to_instant(date))

    def time_of_day(self, date: DateLike) -> str:
        """``HH:mm:ss`` wall-clock time in the configured timezone."""
        return calendar_math.get_time(self.to_instant(date).in_timezone(self.timezone))

    def weekday_name(self, date: DateLike) -> str:
        return calendar_math.get_day_name(self.to_instant(date))

    def next_friday(self, date: DateLike) -> DateTime:
        return calendar_math.get_next_friday(self.to_instant(date).in_timezone(self.timezone))

    def days_in_month(self, month: int, year: int) -> int:
        return calendar_math.get_count_days_in_month(month, year)

    def days_in_period(self, start: DateLike, end: DateLike) -> int:
        return calendar_math.get_count_days_on_period(self.to_instant(start), self.to_instant(end))

    def is_in_period(self, date: DateLike, period: Union[DatePeriod, Mapping[str, DateLike]]) -> bool:
        return calendar_math.is_date_in_period(date, period, tz=self.timezone)

    def format_date(self, date: DateLike) -> str:
        return calendar_math.format_date(self.to_instant(date))

    def count_weekend_days(self, month: int, year: int) -> int:
        return calendar_math.get_count_weekends_in_month(month, year)

    def week_number(self, date: DateLike, numbering: Optional[WeekNumbering] = None) -> int:
        """
        Week of the year, using the configured numbering unless one is given.
        """
        numbering = WeekNumbering(numbering or self._config.week_numbering)
        instant = self.to_instant(date).in_timezone(self.timezone)

        week = calendar_math.get_week_number_by_date(instant, numbering=numbering)
        logger.debug("Week number of %s (%s): %d", instant.to_date_string(), numbering.value, week)
        return week

    def next_friday_the_13th(self, date: DateLike) -> DateTime:
        return calendar_math.get_next_friday_the_13th(self.to_instant(date).in_timezone(self.timezone))

    def quarter_of(self, date: DateLike) -> int:
        return calendar_math.get_quarter(self.to_instant(date).in_timezone(self.timezone))

    def is_leap_year(self, date: DateLike) -> bool:
        return calendar_math.is_leap_year(self.to_instant(date).in_timezone(self.timezone))

    def work_schedule(
        self,
        period: Union[DatePeriod, Mapping[str, str]],
        work_days: Optional[int] = None,
        off_days: Optional[int] = None,
    ) -> List[str]:
        """
        Generate a work schedule for a period.

        Args:
            period: A DatePeriod or a mapping with ``DD-MM-YYYY`` ``start``
                and ``end`` strings
            work_days: Working days per cycle, defaults to the configuration
            off_days: Days off per cycle, defaults to the configuration

        Returns:
            Working days formatted as ``DD-MM-YYYY``
        """
        pattern = self._resolve_pattern(work_days, off_days)
        logger.debug("Generating schedule with pattern %s", pattern)

        return get_work_schedule(period, pattern.work_days, pattern.off_days, tz=self.timezone)

    def _resolve_pattern(self, work_days: Optional[int], off_days: Optional[int]) -> WorkPattern:
        """Fill missing cycle lengths from the configured defaults."""
        pattern = self._config.schedule.get_pattern()
        if work_days is None and off_days is None:
            return pattern

        return WorkPattern(
            work_days=pattern.work_days if work_days is None else work_days,
            off_days=pattern.off_days if off_days is None else off_days,
        )
