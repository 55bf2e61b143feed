"""create habit tables

Revision ID: 20261019_0001
Revises: 
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261019_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "habits",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.Date(), nullable=False),
    )
    op.create_index("ix_habits_created_at", "habits", ["created_at"], unique=False)

    op.create_table(
        "habit_week_days",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("habit_id", sa.String(length=36), sa.ForeignKey("habits.id", ondelete="CASCADE"), nullable=False),
        sa.Column("week_day", sa.Integer(), nullable=False),
        sa.UniqueConstraint("habit_id", "week_day", name="uq_habit_week_day"),
    )
    op.create_index("ix_habit_week_days_id", "habit_week_days", ["id"], unique=False)
    op.create_index("ix_habit_week_days_habit_id", "habit_week_days", ["habit_id"], unique=False)
    op.create_index("ix_habit_week_days_week_day", "habit_week_days", ["week_day"], unique=False)

    op.create_table(
        "days",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("date", sa.Date(), nullable=False),
    )
    op.create_index("ix_days_date", "days", ["date"], unique=True)

    op.create_table(
        "day_habits",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("day_id", sa.String(length=36), sa.ForeignKey("days.id"), nullable=False),
        sa.Column("habit_id", sa.String(length=36), nullable=False),
        sa.UniqueConstraint("day_id", "habit_id", name="uq_day_habit"),
    )
    op.create_index("ix_day_habits_id", "day_habits", ["id"], unique=False)
    op.create_index("ix_day_habits_day_id", "day_habits", ["day_id"], unique=False)
    op.create_index("ix_day_habits_habit_id", "day_habits", ["habit_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_day_habits_habit_id", table_name="day_habits")
    op.drop_index("ix_day_habits_day_id", table_name="day_habits")
    op.drop_index("ix_day_habits_id", table_name="day_habits")
    op.drop_table("day_habits")

    op.drop_index("ix_days_date", table_name="days")
    op.drop_table("days")

    op.drop_index("ix_habit_week_days_week_day", table_name="habit_week_days")
    op.drop_index("ix_habit_week_days_habit_id", table_name="habit_week_days")
    op.drop_index("ix_habit_week_days_id", table_name="habit_week_days")
    op.drop_table("habit_week_days")

    op.drop_index("ix_habits_created_at", table_name="habits")
    op.drop_table("habits")
