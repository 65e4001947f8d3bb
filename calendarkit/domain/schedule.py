"""
Work schedule generation.

Walks a period day by day and keeps the days that fall on the working part
of a repeating (work days, off days) cycle. The cycle always starts on the
first day of the period.
"""

import logging
from typing import Iterator, List, Mapping, Union

from pendulum import Date

from .instant import DAY_MONTH_YEAR, UTC
from .models import DatePeriod, WorkPattern, WorkSchedule

logger = logging.getLogger(__name__)


class ScheduleBuilder:
    """
    Builds work schedules for a fixed work pattern.

    Example:
        01-01-2024 .. 15-01-2024 with 1 work day and 3 days off
        -> 01-01-2024, 05-01-2024, 09-01-2024, 13-01-2024
    """

    def __init__(self, pattern: WorkPattern):
        self.pattern = pattern

    def iter_days(self, period: DatePeriod) -> Iterator[Date]:
        """Yield the working days of the period in order."""
        for index, day in enumerate(period.iter_dates()):
            if self.pattern.is_work_day(index):
                yield day

    def build(self, period: DatePeriod) -> WorkSchedule:
        """
        Build the schedule for a period.

        Args:
            period: Inclusive period to plan

        Returns:
            WorkSchedule with the working days formatted as ``DD-MM-YYYY``
        """
        days = [day.format(DAY_MONTH_YEAR) for day in self.iter_days(period)]

        logger.debug(
            "Built schedule for %s with %d/%d cycle: %d working day(s)",
            period, self.pattern.work_days, self.pattern.off_days, len(days)
        )

        return WorkSchedule(period=period, pattern=self.pattern, days=days)


def get_work_schedule(
    period: Union[DatePeriod, Mapping[str, str]],
    count_work_days: int,
    count_off_days: int,
    tz: str = UTC
) -> List[str]:
    """
    Generate the working days of a period as ``DD-MM-YYYY`` strings.

    Args:
        period: A DatePeriod, or a mapping with ``DD-MM-YYYY`` ``start``
            and ``end`` strings
        count_work_days: Consecutive working days per cycle
        count_off_days: Consecutive days off per cycle
        tz: Timezone the period strings are read in

    Returns:
        Ordered list of working days, both period bounds inclusive
    """
    if not isinstance(period, DatePeriod):
        try:
            period = DatePeriod.from_day_month_year(period["start"], period["end"], tz=tz)
        except KeyError as exc:
            raise ValueError(f"Period mapping is missing the {exc.args[0]!r} key") from exc

    builder = ScheduleBuilder(WorkPattern(work_days=count_work_days, off_days=count_off_days))
    return builder.build(period).to_list()
