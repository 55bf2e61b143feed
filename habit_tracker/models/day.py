import uuid
from datetime import date as dt_date

from sqlalchemy import Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from habit_tracker.models.base import Base


class Day(Base):
    __tablename__ = "days"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    date: Mapped[dt_date] = mapped_column(Date, unique=True, index=True)

    day_habits: Mapped[list["DayHabit"]] = relationship(back_populates="day", lazy="selectin")


class DayHabit(Base):
    __tablename__ = "day_habits"
    __table_args__ = (UniqueConstraint("day_id", "habit_id", name="uq_day_habit"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    day_id: Mapped[str] = mapped_column(ForeignKey("days.id"), index=True)
    # Not a foreign key: completions may reference any habit id.
    habit_id: Mapped[str] = mapped_column(String(36), index=True)

    day: Mapped[Day] = relationship(back_populates="day_habits")
