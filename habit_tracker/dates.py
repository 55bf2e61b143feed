"""Day-granularity calendar helpers.

Every date the tracker stores is a ``datetime.date`` in the reference
timezone (``settings.TIMEZONE``). Weekdays are numbered 0 = Sunday through
6 = Saturday, the numbering persisted in ``habit_week_days.week_day``.
"""

from datetime import date, datetime
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from habit_tracker.config import settings
from habit_tracker.errors import InvalidInput

Timestamp = Union[datetime, date, str]


def reference_tz() -> ZoneInfo:
    try:
        return ZoneInfo(settings.TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidInput(f"unknown timezone {settings.TIMEZONE!r}") from exc


def now_in_reference_tz() -> datetime:
    return datetime.now(reference_tz())


def _parse(raw: str) -> Union[datetime, date]:
    value = raw.strip()
    if not value:
        raise InvalidInput("date is empty")
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        if len(value) == 10:
            return date.fromisoformat(value)
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise InvalidInput(f"malformed date {raw!r}") from exc


def truncate_to_day(timestamp: Timestamp) -> date:
    """Return the calendar date of ``timestamp`` in the reference timezone."""
    if isinstance(timestamp, str):
        timestamp = _parse(timestamp)
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is not None:
            timestamp = timestamp.astimezone(reference_tz())
        return timestamp.date()
    if isinstance(timestamp, date):
        return timestamp
    raise InvalidInput(f"expected a date, datetime or ISO string, got {type(timestamp).__name__}")


def weekday_of(timestamp: Timestamp) -> int:
    return truncate_to_day(timestamp).isoweekday() % 7
