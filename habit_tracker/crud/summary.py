from typing import Any

from sqlalchemy import Float, Integer, Select, cast, extract, func, select
from sqlalchemy.orm import Session

from habit_tracker.models import Day, DayHabit, Habit, HabitWeekDay


def _day_week_day(dialect_name: str):
    # 0 = Sunday on both backends
    if dialect_name == "sqlite":
        return cast(func.strftime("%w", Day.date), Integer)
    return cast(extract("dow", Day.date), Integer)


def summary_statement(dialect_name: str) -> Select:
    """One row per Day record with completed and due habit counts."""
    completed = (
        select(cast(func.count(DayHabit.id), Float))
        .where(DayHabit.day_id == Day.id)
        .correlate(Day)
        .scalar_subquery()
    )
    amount = (
        select(cast(func.count(HabitWeekDay.id), Float))
        .join(Habit, Habit.id == HabitWeekDay.habit_id)
        .where(
            HabitWeekDay.week_day == _day_week_day(dialect_name),
            Habit.created_at <= Day.date,
        )
        .correlate(Day)
        .scalar_subquery()
    )
    return select(
        Day.id,
        Day.date,
        completed.label("completed"),
        amount.label("amount"),
    )


def aggregate_summary(db: Session) -> list[dict[str, Any]]:
    rows = db.execute(summary_statement(db.get_bind().dialect.name)).all()
    return [
        {"day_id": day_id, "date": day, "completed": float(done or 0), "amount": float(due or 0)}
        for day_id, day, done, due in rows
    ]
