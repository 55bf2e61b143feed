from habit_tracker.models.base import Base
from habit_tracker.models.day import Day, DayHabit
from habit_tracker.models.habit import Habit, HabitWeekDay

__all__ = [
    "Base",
    "Habit",
    "HabitWeekDay",
    "Day",
    "DayHabit",
]
