from datetime import date, timedelta

import pytest

from habit_tracker.errors import InvalidInput
from habit_tracker.models import Habit
from habit_tracker.scheduler import create_habit, list_due_habits

MONDAY = date(2026, 10, 19)


def _ids(habits):
    return {habit.id for habit in habits}


def test_run_habit_due_on_scheduled_weekdays_only(db):
    run_id = create_habit(db, "Run", {1, 3, 5}, now=MONDAY)

    assert run_id in _ids(list_due_habits(db, MONDAY))
    assert run_id not in _ids(list_due_habits(db, MONDAY + timedelta(days=1)))
    assert run_id in _ids(list_due_habits(db, MONDAY + timedelta(days=2)))
    assert run_id in _ids(list_due_habits(db, MONDAY + timedelta(days=8)))


def test_habit_not_due_before_its_creation_day(db):
    run_id = create_habit(db, "Run", [1, 3, 5], now=MONDAY)

    previous_friday = MONDAY - timedelta(days=3)
    assert run_id not in _ids(list_due_habits(db, previous_friday))


def test_due_check_ignores_time_of_day(db):
    read_id = create_habit(db, "Read", [1], now="2026-10-19T22:00:00")

    assert read_id in _ids(list_due_habits(db, "2026-10-19T00:00:01"))


def test_duplicate_weekdays_collapse(db):
    habit_id = create_habit(db, "  Stretch  ", [2, 2, 4, 2], now=MONDAY)

    habit = db.get(Habit, habit_id)
    assert habit.title == "Stretch"
    assert habit.created_at == MONDAY
    assert [row.week_day for row in habit.week_days] == [2, 4]


@pytest.mark.parametrize(
    "title,week_days",
    [
        ("", [1]),
        ("   ", [1]),
        ("x" * 256, [1]),
        (None, [1]),
        ("Run", []),
        ("Run", [7]),
        ("Run", [-1]),
        ("Run", ["1"]),
        ("Run", [True]),
        ("Run", "135"),
        ("Run", None),
    ],
)
def test_invalid_habits_are_rejected(db, title, week_days):
    with pytest.raises(InvalidInput):
        create_habit(db, title, week_days, now=MONDAY)
    assert db.query(Habit).count() == 0


def test_due_membership_matches_creation_day_and_weekday(db):
    schedules = {
        "weekends": ({0, 6}, MONDAY - timedelta(days=5)),
        "weekdays": ({1, 2, 3, 4, 5}, MONDAY + timedelta(days=2)),
        "every_day": (set(range(7)), MONDAY),
    }
    created = {
        create_habit(db, title, week_days, now=created_on): (week_days, created_on)
        for title, (week_days, created_on) in schedules.items()
    }

    for offset in range(-10, 15):
        day = MONDAY + timedelta(days=offset)
        expected = {
            habit_id
            for habit_id, (week_days, created_on) in created.items()
            if day >= created_on and day.isoweekday() % 7 in week_days
        }
        assert _ids(list_due_habits(db, day)) == expected, day
