from nutrition_tracker.models.account import Account


def test_register_returns_account_without_password(client):
    r = client.post("/api/auth/register", json={"username": "  bob ", "password": "hunter2"})
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["username"] == "bob"
    assert "password" not in data


def test_register_stores_salted_hash(client, app):
    client.post("/api/auth/register", json={"username": "bob", "password": "hunter2"})
    with app.app_context():
        account = Account.query.filter_by(username="bob").first()
        assert account is not None
        assert account.password != "hunter2"


def test_register_requires_username_and_password(client):
    r = client.post("/api/auth/register", json={"username": "bob"})
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "VALIDATION_ERROR"

    r = client.post("/api/auth/register", json={"password": "x"})
    assert r.status_code == 400


def test_register_duplicate_username(client, account_id):
    r = client.post("/api/auth/register", json={"username": "alice", "password": "other"})
    assert r.status_code == 409
    assert r.get_json()["error"]["code"] == "USERNAME_TAKEN"


def test_login_success(client, account_id):
    r = client.post("/api/auth/login", json={"username": "alice", "password": "secret"})
    assert r.status_code == 200, r.data
    assert r.get_json() == {"id": account_id, "username": "alice"}


def test_login_wrong_password(client, account_id):
    r = client.post("/api/auth/login", json={"username": "alice", "password": "nope"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "INVALID_CREDENTIALS"


def test_login_unknown_user(client):
    r = client.post("/api/auth/login", json={"username": "ghost", "password": "secret"})
    assert r.status_code == 401


def test_login_missing_fields(client):
    r = client.post("/api/auth/login", json={})
    assert r.status_code == 400
