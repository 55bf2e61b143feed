from datetime import date
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from habit_tracker.models import Habit, HabitWeekDay


def insert_habit(db: Session, title: str, created_at: date, week_days: Iterable[int]) -> Habit:
    habit = Habit(title=title, created_at=created_at)
    habit.week_days = [HabitWeekDay(week_day=week_day) for week_day in sorted(set(week_days))]
    db.add(habit)
    db.flush()
    return habit


def find_habits_due_on(db: Session, day: date, week_day: int) -> list[Habit]:
    return list(
        db.scalars(
            select(Habit).where(
                Habit.created_at <= day,
                Habit.week_days.any(HabitWeekDay.week_day == week_day),
            )
        )
    )
