import pytest

from nutrition_tracker import create_app
from nutrition_tracker.extensions import db


@pytest.fixture()
def app():
    app = create_app("nutrition_tracker.config.TestingConfig")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def account_id(client):
    r = client.post("/api/auth/register", json={"username": "alice", "password": "secret"})
    assert r.status_code == 201, r.data
    return r.get_json()["id"]


@pytest.fixture()
def user_id(client, account_id):
    r = client.post("/api/users", json={"name": "Alice", "account_id": account_id})
    assert r.status_code == 201, r.data
    return r.get_json()["id"]


@pytest.fixture()
def goals(client, user_id):
    body = {"calorie_goal": 2000, "protein_goal": 100, "carbs_goal": 250, "fat_goal": 70, "sodium_goal": 2300}
    r = client.post(f"/api/goals/{user_id}", json=body)
    assert r.status_code == 200, r.data
    return r.get_json()
