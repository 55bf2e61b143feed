import uuid

from habit_tracker.dates import now_in_reference_tz


def _create(client, title="Read", week_days=None):
    response = client.post("/habits", json={"title": title, "weekDays": week_days or list(range(7))})
    assert response.status_code == 201
    return response.json()["id"]


def test_health_live(client):
    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


def test_created_habit_is_due_today(client):
    habit_id = _create(client)
    today = now_in_reference_tz().date().isoformat()

    response = client.get("/day", params={"date": today})

    assert response.status_code == 200
    body = response.json()
    assert body["completedHabits"] == []
    assert [habit["id"] for habit in body["possibleHabits"]] == [habit_id]
    assert body["possibleHabits"][0]["title"] == "Read"
    assert body["possibleHabits"][0]["week_days"] == list(range(7))
    assert body["possibleHabits"][0]["created_at"] == today


def test_create_habit_validation(client):
    assert client.post("/habits", json={"title": "", "weekDays": [1]}).status_code == 400
    assert client.post("/habits", json={"title": "Run", "weekDays": []}).status_code == 400
    assert client.post("/habits", json={"title": "Run", "weekDays": [7]}).status_code == 400
    assert client.post("/habits", json={"title": "Run"}).status_code == 422


def test_toggle_round_trip(client):
    habit_id = _create(client)

    first = client.patch(f"/habits/{habit_id}/toggle", params={"date": "2100-01-04T10:00:00Z"})
    assert first.status_code == 200
    assert first.json() == {"completed": True}
    assert client.get("/day", params={"date": "2100-01-04"}).json()["completedHabits"] == [habit_id]

    second = client.patch(f"/habits/{habit_id}/toggle", params={"date": "2100-01-04"})
    assert second.json() == {"completed": False}
    assert client.get("/day", params={"date": "2100-01-04"}).json()["completedHabits"] == []


def test_toggle_and_day_reject_malformed_input(client):
    assert client.patch("/habits/not-a-uuid/toggle").status_code == 400
    assert client.patch(f"/habits/{uuid.uuid4()}/toggle", params={"date": "yesterday"}).status_code == 400

    response = client.get("/day", params={"date": "31/12/2026"})
    assert response.status_code == 400
    assert "malformed date" in response.json()["detail"]


def test_summary_rows(client):
    habit_id = _create(client)
    client.patch(f"/habits/{habit_id}/toggle", params={"date": "2100-01-04"})
    client.patch(f"/habits/{uuid.uuid4()}/toggle", params={"date": "2100-01-04"})

    response = client.get("/summary")

    assert response.status_code == 200
    (row,) = response.json()
    assert set(row) == {"id", "date", "completed", "amount"}
    assert row["date"] == "2100-01-04"
    assert row["completed"] == 2.0
    assert row["amount"] == 1.0


def test_health_ready(client):
    response = client.get("/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_create_habit_rejects_non_integer_weekdays(client):
    assert client.post("/habits", json={"title": "Run", "weekDays": [True]}).status_code == 422
    assert client.post("/habits", json={"title": "Run", "weekDays": ["3"]}).status_code == 422
    assert client.get("/summary").json() == []
