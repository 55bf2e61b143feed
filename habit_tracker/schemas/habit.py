from datetime import date

from pydantic import BaseModel, Field, StrictInt, field_validator


class HabitCreateIn(BaseModel):
    title: str
    week_days: list[StrictInt] = Field(alias="weekDays")

    class Config:
        populate_by_name = True


class HabitCreatedOut(BaseModel):
    id: str


class HabitOut(BaseModel):
    id: str
    title: str
    created_at: date
    week_days: list[int]

    @field_validator("week_days", mode="before")
    @classmethod
    def _week_day_numbers(cls, value):
        return [getattr(item, "week_day", item) for item in value]

    class Config:
        from_attributes = True
