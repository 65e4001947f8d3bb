"""
Domain models for periods and work schedules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Mapping

from pendulum import Date, DateTime

from .instant import UTC, DateLike, parse_day_month_year, to_instant


class WeekNumbering(str, Enum):
    """Supported week-of-year numbering schemes."""
    JANUARY_FIRST = "january_first"  # week 1 is the Monday-first week holding Jan 1
    ISO = "iso"


@dataclass(frozen=True)
class DatePeriod:
    """
    Represents an immutable period between two instants.

    Both bounds are inclusive. A period whose end lies before its start is
    allowed and simply contains nothing.
    """
    start: DateTime
    end: DateTime

    @classmethod
    def parse(cls, start: DateLike, end: DateLike, tz: str = UTC) -> "DatePeriod":
        """Build a period from ISO-8601 strings or any other date-like values."""
        return cls(start=to_instant(start, tz=tz), end=to_instant(end, tz=tz))

    @classmethod
    def from_day_month_year(cls, start: str, end: str, tz: str = UTC) -> "DatePeriod":
        """Build a period from two ``DD-MM-YYYY`` strings."""
        return cls(
            start=parse_day_month_year(start, tz=tz),
            end=parse_day_month_year(end, tz=tz)
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, DateLike], tz: str = UTC) -> "DatePeriod":
        """Build a period from a ``{"start": ..., "end": ...}`` mapping."""
        try:
            return cls.parse(data["start"], data["end"], tz=tz)
        except KeyError as exc:
            raise ValueError(f"Period mapping is missing the {exc.args[0]!r} key") from exc

    def contains(self, instant: DateTime) -> bool:
        """Check whether the instant lies within the period, bounds included."""
        return self.start <= instant <= self.end

    def iter_dates(self) -> Iterator[Date]:
        """Yield every calendar day from start to end, both included."""
        current = self.start.date()
        last = self.end.date()

        while current <= last:
            yield current
            current = current.add(days=1)

    def __str__(self) -> str:
        return f"{self.start.format('DD-MM-YYYY')} - {self.end.format('DD-MM-YYYY')}"


@dataclass(frozen=True)
class WorkPattern:
    """
    A repeating cycle of consecutive working days followed by days off.
    """
    work_days: int
    off_days: int

    def __post_init__(self):
        if self.work_days < 1:
            raise ValueError(f"work_days must be at least 1, got {self.work_days}")
        if self.off_days < 0:
            raise ValueError(f"off_days must not be negative, got {self.off_days}")

    @property
    def cycle_length(self) -> int:
        return self.work_days + self.off_days

    def is_work_day(self, day_index: int) -> bool:
        """Check whether the n-th day of a period (0-based) is a working day."""
        return day_index % self.cycle_length < self.work_days


@dataclass
class WorkSchedule:
    """
    Ordered working days of a period, formatted as ``DD-MM-YYYY``.
    """
    period: DatePeriod
    pattern: WorkPattern
    days: List[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[str]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    def __contains__(self, day: object) -> bool:
        return day in self.days

    def to_list(self) -> List[str]:
        return list(self.days)
