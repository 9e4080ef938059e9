from datetime import date

import pytest

from nutrition_tracker.extensions import db
from nutrition_tracker.models.food_log import FoodLog
from nutrition_tracker.services import food_log_service

BREAKFAST = {
    "date": "2026-03-01",
    "food_name": "Oatmeal",
    "quantity": 1,
    "unit": "bowl",
    "calories": 300,
    "protein": 10.5,
    "carbs": 54,
    "fat": 5,
    "sodium": 120,
    "meal_type": "breakfast",
}


def test_add_entry_creates_single_log_per_day(client, app, user_id):
    r1 = client.post(f"/api/food-logs/{user_id}/entries", json=BREAKFAST)
    assert r1.status_code == 201, r1.data
    r2 = client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "food_name": "Coffee", "calories": 5})
    assert r2.status_code == 201, r2.data

    assert r1.get_json()["food_log_id"] == r2.get_json()["food_log_id"]
    with app.app_context():
        assert FoodLog.query.filter_by(user_id=user_id).count() == 1


def test_entries_on_different_days_use_different_logs(client, app, user_id):
    client.post(f"/api/food-logs/{user_id}/entries", json=BREAKFAST)
    client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "date": "2026-03-02"})
    with app.app_context():
        assert FoodLog.query.filter_by(user_id=user_id).count() == 2


def test_add_entry_accepts_full_timestamp(client, user_id):
    r = client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "date": "2026-03-01T18:30:00.000Z"})
    assert r.status_code == 201, r.data
    log = client.get(f"/api/food-logs/{user_id}/2026-03-01").get_json()
    assert log["date"] == "2026-03-01"


def test_add_entry_defaults_to_today(client, user_id):
    body = {k: v for k, v in BREAKFAST.items() if k != "date"}
    r = client.post(f"/api/food-logs/{user_id}/entries", json=body)
    assert r.status_code == 201, r.data

    today = date.today().isoformat()
    log = client.get(f"/api/food-logs/{user_id}/{today}").get_json()
    assert log is not None
    assert [e["food_name"] for e in log["entries"]] == ["Oatmeal"]


def test_get_log_by_date(client, user_id):
    client.post(f"/api/food-logs/{user_id}/entries", json=BREAKFAST)
    client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "food_name": "Banana", "calories": 105})

    r = client.get(f"/api/food-logs/{user_id}/2026-03-01")
    assert r.status_code == 200
    log = r.get_json()
    assert log["user_id"] == user_id
    assert [e["food_name"] for e in log["entries"]] == ["Oatmeal", "Banana"]
    assert log["entries"][0]["sodium"] == 120
    assert log["entries"][0]["sugar"] is None


def test_get_log_missing_day_is_null(client, user_id):
    r = client.get(f"/api/food-logs/{user_id}/2026-03-09")
    assert r.status_code == 200
    assert r.get_json() is None


def test_get_log_invalid_date(client, user_id):
    r = client.get(f"/api/food-logs/{user_id}/yesterday")
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "INVALID_DATE"


def test_add_entry_validation(client, user_id):
    r = client.post(f"/api/food-logs/{user_id}/entries", json={"calories": 100})
    assert r.status_code == 400
    assert "food_name" in r.get_json()["error"]["details"]

    r2 = client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "meal_type": "brunch"})
    assert r2.status_code == 400

    r3 = client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "calories": -5})
    assert r3.status_code == 400


def test_add_entry_unknown_user(client):
    r = client.post("/api/food-logs/999/entries", json=BREAKFAST)
    assert r.status_code == 404


def test_update_entry(client, user_id):
    entry = client.post(f"/api/food-logs/{user_id}/entries", json=BREAKFAST).get_json()
    r = client.put(f"/api/food-logs/entries/{entry['id']}", json={"calories": 350, "notes": "extra honey"})
    assert r.status_code == 200, r.data
    data = r.get_json()
    assert data["calories"] == 350
    assert data["notes"] == "extra honey"
    assert data["food_name"] == "Oatmeal"


def test_delete_entry(client, user_id):
    entry = client.post(f"/api/food-logs/{user_id}/entries", json=BREAKFAST).get_json()
    r = client.delete(f"/api/food-logs/entries/{entry['id']}")
    assert r.status_code == 200
    assert r.get_json()["message"] == "Entry deleted successfully"

    log = client.get(f"/api/food-logs/{user_id}/2026-03-01").get_json()
    assert log["entries"] == []

    r2 = client.delete(f"/api/food-logs/entries/{entry['id']}")
    assert r2.status_code == 404


def test_daily_summary_against_goals(client, user_id, goals):
    client.post(f"/api/food-logs/{user_id}/entries", json=BREAKFAST)
    client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "food_name": "Pasta", "calories": 700, "protein": 25, "sodium": 1030})

    r = client.get(f"/api/food-logs/{user_id}/2026-03-01/summary")
    assert r.status_code == 200, r.data
    summary = r.get_json()
    assert summary["entry_count"] == 2
    assert summary["totals"]["calories"] == 1000
    assert summary["totals"]["protein"] == 35.5
    assert summary["totals"]["sodium"] == 1150
    assert summary["progress"]["calories"] == 50
    assert summary["progress"]["sodium"] == 50
    # no sugar goal set
    assert "sugar" not in summary["progress"]


def test_daily_summary_empty_day(client, user_id):
    summary = client.get(f"/api/food-logs/{user_id}/2026-03-09/summary").get_json()
    assert summary["entry_count"] == 0
    assert summary["totals"]["calories"] == 0
    assert summary["goals"] is None
    assert summary["progress"] == {}


@pytest.mark.parametrize("bad_date", ["2026-03-01xyz", "20260301", "2026-W09-1", "2026-02-30", "2026-03-01T25:00:00Z"])
def test_malformed_dates_are_rejected(client, user_id, bad_date):
    r = client.get(f"/api/food-logs/{user_id}/{bad_date}")
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "INVALID_DATE"

    r = client.get(f"/api/food-logs/{user_id}/{bad_date}/summary")
    assert r.status_code == 400


def test_add_entry_rejects_trailing_garbage_in_date(client, app, user_id):
    r = client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "date": "2026-03-01 garbage"})
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "INVALID_DATE"
    with app.app_context():
        assert FoodLog.query.filter_by(user_id=user_id).count() == 0


def test_add_entry_accepts_timestamp_with_offset(client, user_id):
    r = client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "date": "2026-03-05T08:15:00+02:00"})
    assert r.status_code == 201, r.data
    assert client.get(f"/api/food-logs/{user_id}/2026-03-05").get_json() is not None


def test_get_or_create_log_reuses_row_inserted_concurrently(app, user_id, monkeypatch):
    day = date(2026, 3, 1)
    with app.app_context():
        existing = FoodLog(user_id=user_id, date=day)
        db.session.add(existing)
        db.session.commit()
        existing_id = existing.id

        real_lookup = food_log_service.get_log_for_date
        lookups = []

        def stale_lookup(uid, log_date):
            lookups.append(log_date)
            # first lookup misses, as if the other insert had not committed yet
            if len(lookups) == 1:
                return None
            return real_lookup(uid, log_date)

        monkeypatch.setattr(food_log_service, "get_log_for_date", stale_lookup)
        log = food_log_service.get_or_create_log(user_id, day)

        assert log.id == existing_id
        assert len(lookups) == 2
        assert FoodLog.query.filter_by(user_id=user_id).count() == 1


def test_daily_summary_progress_rounds_half_up(client, user_id, goals):
    client.post(f"/api/food-logs/{user_id}/entries", json={**BREAKFAST, "calories": 1250, "protein": 62.5})

    progress = client.get(f"/api/food-logs/{user_id}/2026-03-01/summary").get_json()["progress"]
    assert progress["calories"] == 63
    assert progress["protein"] == 63
