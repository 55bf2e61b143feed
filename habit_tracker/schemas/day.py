from datetime import date as dt_date

from pydantic import BaseModel, Field

from habit_tracker.schemas.habit import HabitOut


class DayViewOut(BaseModel):
    possible_habits: list[HabitOut] = Field(alias="possibleHabits")
    completed_habits: list[str] = Field(alias="completedHabits")

    class Config:
        populate_by_name = True


class ToggleOut(BaseModel):
    completed: bool


class SummaryRowOut(BaseModel):
    id: str
    date: dt_date
    completed: float
    amount: float
