"""Habit creation and the "due on a date" rule.

A habit is due on a date when the date's day is on or after the habit's
creation day and the date's weekday is one of the habit's scheduled weekdays.
"""

import logging
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from habit_tracker import crud
from habit_tracker.dates import Timestamp, now_in_reference_tz, truncate_to_day, weekday_of
from habit_tracker.db import storage_errors, transaction
from habit_tracker.errors import InvalidInput
from habit_tracker.models import Habit

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 255


def _clean_title(title: object) -> str:
    if not isinstance(title, str):
        raise InvalidInput("title must be a string")
    cleaned = title.strip()
    if not cleaned:
        raise InvalidInput("title must not be empty")
    if len(cleaned) > TITLE_MAX_LENGTH:
        raise InvalidInput(f"title must be at most {TITLE_MAX_LENGTH} characters")
    return cleaned


def _clean_week_days(week_days: Iterable[int]) -> set[int]:
    if isinstance(week_days, (str, bytes)):
        raise InvalidInput("weekDays must be a list of integers")
    try:
        values = list(week_days)
    except TypeError as exc:
        raise InvalidInput("weekDays must be a list of integers") from exc
    if not values:
        raise InvalidInput("weekDays must not be empty")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"weekday {value!r} is not an integer")
        if not 0 <= value <= 6:
            raise InvalidInput(f"weekday {value} is outside 0..6")
    return set(values)


def create_habit(db: Session, title: str, week_days: Iterable[int], now: Optional[Timestamp] = None) -> str:
    cleaned_title = _clean_title(title)
    days = _clean_week_days(week_days)
    created_at = truncate_to_day(now if now is not None else now_in_reference_tz())

    with transaction(db, "create habit"):
        habit = crud.insert_habit(db, cleaned_title, created_at, days)
        habit_id = habit.id

    logger.info("Created habit %s (%r) on %s for weekdays %s", habit_id, cleaned_title, created_at, sorted(days))
    return habit_id


def list_due_habits(db: Session, when: Timestamp) -> list[Habit]:
    day = truncate_to_day(when)
    with storage_errors(db, "list due habits"):
        return crud.find_habits_due_on(db, day, weekday_of(day))
