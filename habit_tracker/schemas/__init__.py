from habit_tracker.schemas.day import DayViewOut, SummaryRowOut, ToggleOut
from habit_tracker.schemas.habit import HabitCreatedOut, HabitCreateIn, HabitOut

__all__ = ["HabitCreateIn", "HabitCreatedOut", "HabitOut", "DayViewOut", "ToggleOut", "SummaryRowOut"]
