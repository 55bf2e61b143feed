import logging
import uuid
from typing import Any, Optional

from sqlalchemy.orm import Session

from habit_tracker import crud
from habit_tracker.dates import Timestamp, now_in_reference_tz, truncate_to_day
from habit_tracker.db import storage_errors, transaction
from habit_tracker.errors import InvalidInput
from habit_tracker.scheduler import list_due_habits

logger = logging.getLogger(__name__)


def _clean_habit_id(habit_id: object) -> str:
    if not isinstance(habit_id, str):
        raise InvalidInput("habit id must be a UUID string")
    try:
        return str(uuid.UUID(habit_id))
    except ValueError as exc:
        raise InvalidInput(f"malformed habit id {habit_id!r}") from exc


def toggle_habit(db: Session, habit_id: str, when: Optional[Timestamp] = None) -> dict[str, bool]:
    """Flip the completion of ``habit_id`` on the day of ``when``.

    The habit is not looked up: an unknown or not-due id still gets a
    completion link. The day record is created on first use.
    """
    clean_id = _clean_habit_id(habit_id)
    day = truncate_to_day(when if when is not None else now_in_reference_tz())

    with transaction(db, "toggle habit"):
        record = crud.find_day_by_date(db, day)
        if record is None:
            record = crud.create_day(db, day)

        completion = crud.find_completion(db, record.id, clean_id)
        # A link removed by a concurrent toggle after the lookup counts as absent.
        if completion is not None and crud.delete_completion(db, completion.id):
            completed = False
        else:
            crud.create_completion(db, record.id, clean_id)
            completed = True

    logger.info("Habit %s on %s marked %s", clean_id, day, "completed" if completed else "not completed")
    return {"completed": completed}


def get_day_view(db: Session, when: Timestamp) -> dict[str, Any]:
    day = truncate_to_day(when)
    possible_habits = list_due_habits(db, day)

    with storage_errors(db, "get day view"):
        record = crud.find_day_by_date(db, day)
        completed = crud.completed_habit_ids(db, record.id) if record is not None else []

    return {"possible_habits": possible_habits, "completed_habit_ids": completed}


def get_summary(db: Session) -> list[dict[str, Any]]:
    with storage_errors(db, "get summary"):
        return crud.aggregate_summary(db)
