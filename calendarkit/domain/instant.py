"""
Explicit Instant abstraction.

Every calendar function works on timezone-tagged pendulum ``DateTime``
values. This module turns the loose inputs callers hand us (date strings,
epoch milliseconds, naive or aware ``datetime`` objects) into such values so
that UTC and local interpretations never get mixed up silently.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Union

import pendulum
from pendulum import DateTime

from .exceptions import InvalidDateError

UTC = "UTC"

MS_PER_SECOND = 1000
MS_PER_DAY = 24 * 60 * 60 * MS_PER_SECOND

DAY_MONTH_YEAR = "DD-MM-YYYY"

DateLike = Union[DateTime, datetime, date, int, float, str]

# "GMT+0200", "UTC+2", optionally followed by "(Central European Standard Time)"
NAMED_OFFSET_SUFFIX = re.compile(
    r"\s*(?:GMT|UTC)([+-])(\d{1,2}):?(\d{2})?(?:\s*\([^)]*\))?\s*$",
    re.IGNORECASE,
)


def _normalize_offset_suffix(text: str) -> str:
    """
    Rewrite a ``GMT+hhmm`` style suffix into a plain ``+hhmm`` offset.

    The lenient parser reads ``GMT+2`` the POSIX way, as two hours behind UTC.
    """
    match = NAMED_OFFSET_SUFFIX.search(text)
    if not match:
        return text

    sign, hours, minutes = match.groups()
    return f"{text[:match.start()]} {sign}{int(hours):02d}{minutes or '00'}"


def parse_date_string(text: str, tz: str = UTC) -> DateTime:
    """
    Parse a date string into a DateTime.

    ISO-8601 strings are parsed strictly first; anything else goes through
    pendulum's lenient fallback (``'04 Dec 1995 00:12:00 UTC'`` and friends).
    Strings without an offset are interpreted in ``tz``.

    Raises:
        InvalidDateError: If the string cannot be parsed into a single instant
    """
    try:
        parsed = pendulum.parse(_normalize_offset_suffix(text.strip()), tz=tz, strict=False)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(text, str(exc)) from exc

    # Durations and intervals are valid ISO-8601 too, but not instants
    if not isinstance(parsed, DateTime):
        raise InvalidDateError(text, f"parsed as {type(parsed).__name__}")

    return parsed


def parse_day_month_year(text: str, tz: str = UTC) -> DateTime:
    """Parse a ``DD-MM-YYYY`` string into midnight of that day in ``tz``."""
    try:
        return pendulum.from_format(text.strip(), DAY_MONTH_YEAR, tz=tz)
    except ValueError as exc:
        raise InvalidDateError(text, f"expected {DAY_MONTH_YEAR}") from exc


def timestamp_to_instant(milliseconds: int | float, tz: str = UTC) -> DateTime:
    """Convert milliseconds since the Unix epoch into a DateTime in ``tz``."""
    try:
        seconds, millis = divmod(milliseconds, MS_PER_SECOND)
        return pendulum.from_timestamp(int(seconds), tz=tz).add(microseconds=int(millis * 1000))
    except (ValueError, OverflowError, OSError) as exc:
        raise InvalidDateError(milliseconds, str(exc)) from exc


def to_instant(value: DateLike, tz: str = UTC) -> DateTime:
    """
    Coerce a date-like value into a timezone-tagged DateTime.

    Args:
        value: pendulum DateTime (kept as is), datetime, date, epoch
            milliseconds or a date string
        tz: Timezone used for values that carry none

    Returns:
        DateTime with an explicit timezone

    Raises:
        InvalidDateError: If the value cannot be interpreted as an instant
    """
    if isinstance(value, DateTime):
        return value

    if isinstance(value, datetime):
        return pendulum.instance(value, tz=tz)

    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz=tz)

    if isinstance(value, bool):
        raise InvalidDateError(value, "booleans are not timestamps")

    if isinstance(value, (int, float)):
        return timestamp_to_instant(value, tz=tz)

    if isinstance(value, str):
        return parse_date_string(value, tz=tz)

    raise InvalidDateError(value, f"unsupported type {type(value).__name__}")


def to_timestamp(instant: DateTime) -> int:
    """Return the instant as whole milliseconds since the Unix epoch."""
    return instant.int_timestamp * MS_PER_SECOND + instant.microsecond // 1000
