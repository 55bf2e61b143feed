from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from habit_tracker.api.deps import get_db
from habit_tracker.completions import get_day_view, get_summary, toggle_habit
from habit_tracker.scheduler import create_habit
from habit_tracker.schemas import DayViewOut, HabitCreatedOut, HabitCreateIn, HabitOut, SummaryRowOut, ToggleOut

router = APIRouter(tags=["habits"])


@router.post("/habits", status_code=201, response_model=HabitCreatedOut)
def habits_create(payload: HabitCreateIn, db: Session = Depends(get_db)) -> HabitCreatedOut:
    habit_id = create_habit(db, payload.title, payload.week_days)
    return HabitCreatedOut(id=habit_id)


@router.get("/day", response_model=DayViewOut, response_model_by_alias=True)
def day_view(date: str, db: Session = Depends(get_db)) -> DayViewOut:
    view = get_day_view(db, date)
    return DayViewOut(
        possible_habits=[HabitOut.model_validate(habit) for habit in view["possible_habits"]],
        completed_habits=view["completed_habit_ids"],
    )


@router.patch("/habits/{habit_id}/toggle", response_model=ToggleOut)
def habits_toggle(habit_id: str, date: Optional[str] = None, db: Session = Depends(get_db)) -> ToggleOut:
    return ToggleOut(**toggle_habit(db, habit_id, date))


@router.get("/summary", response_model=list[SummaryRowOut])
def summary(db: Session = Depends(get_db)) -> list[SummaryRowOut]:
    return [
        SummaryRowOut(id=row["day_id"], date=row["date"], completed=row["completed"], amount=row["amount"])
        for row in get_summary(db)
    ]
