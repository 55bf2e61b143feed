from datetime import date
from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.orm import Session

from habit_tracker.models import Day, DayHabit


def find_day_by_date(db: Session, day: date) -> Optional[Day]:
    return db.scalar(select(Day).where(Day.date == day))


def create_day(db: Session, day: date) -> Day:
    record = Day(date=day)
    db.add(record)
    db.flush()
    return record


def find_completion(db: Session, day_id: str, habit_id: str) -> Optional[DayHabit]:
    return db.scalar(
        select(DayHabit)
        .where(and_(DayHabit.day_id == day_id, DayHabit.habit_id == habit_id))
        .with_for_update()
    )


def delete_completion(db: Session, completion_id: int) -> int:
    """Delete a completion link and return the number of rows removed."""
    result = db.execute(delete(DayHabit).where(DayHabit.id == completion_id))
    return result.rowcount


def create_completion(db: Session, day_id: str, habit_id: str) -> DayHabit:
    completion = DayHabit(day_id=day_id, habit_id=habit_id)
    db.add(completion)
    db.flush()
    return completion


def completed_habit_ids(db: Session, day_id: str) -> list[str]:
    return list(db.scalars(select(DayHabit.habit_id).where(DayHabit.day_id == day_id).order_by(DayHabit.id)))
