from habit_tracker.crud.days import (
    completed_habit_ids,
    create_completion,
    create_day,
    delete_completion,
    find_completion,
    find_day_by_date,
)
from habit_tracker.crud.habits import find_habits_due_on, insert_habit
from habit_tracker.crud.summary import aggregate_summary

__all__ = [
    "insert_habit",
    "find_habits_due_on",
    "find_day_by_date",
    "create_day",
    "find_completion",
    "delete_completion",
    "create_completion",
    "completed_habit_ids",
    "aggregate_summary",
]
