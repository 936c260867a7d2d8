import datetime as dt

import jwt

from conftest import TEST_SECRET


def test_root_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.get_json()["message"] == "Fitness Tracker API Running"

    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["database"] == "healthy"


def test_register_login_and_me(client):
    r = client.post("/api/auth/register", json={
        "name": "Alice",
        "email": "Alice@Example.com",
        "password": "secret123",
        "gender": "female",
        "fitnessGoal": "muscle-gain",
    })
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert "token" in data
    user = data["user"]
    assert user["email"] == "alice@example.com"
    assert user["dailyCalorieGoal"] == 2000
    assert user["fitnessGoal"] == "muscle-gain"
    assert "password" not in user

    r = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    assert r.status_code == 200, r.data
    token = r.get_json()["token"]

    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    me = r.get_json()
    assert me["id"] == user["id"]
    assert "password" not in me


def test_password_is_stored_hashed(client, app):
    from fittrack.models.user import User

    client.post("/api/auth/register", json={"name": "A", "email": "a@example.com", "password": "secret123"})
    with app.app_context():
        stored = User.query.filter_by(email="a@example.com").first()
        assert stored.password != "secret123"


def test_register_duplicate_email(client, user_a):
    r = client.post("/api/auth/register", json={"name": "Again", "email": "alice@example.com", "password": "secret123"})
    assert r.status_code == 409
    assert r.get_json()["error"]["code"] == "EMAIL_IN_USE"


def test_register_validation(client):
    r = client.post("/api/auth/register", json={"name": "X", "password": "123", "gender": "robot"})
    assert r.status_code == 400
    err = r.get_json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in err["details"]}
    assert {"email", "password", "gender"} <= fields


def test_login_wrong_password(client, user_a):
    r = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "INVALID_CREDENTIALS"


def test_protected_routes_require_token(client):
    for path in ["/api/meals", "/api/exercises", "/api/goals", "/api/goals/progress", "/api/meals/summary/today"]:
        r = client.get(path)
        assert r.status_code == 401, path
        assert r.get_json()["error"]["code"] == "UNAUTHORIZED"


def test_invalid_and_expired_tokens(client, user_a):
    r = client.get("/api/meals", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401

    past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(hours=1)
    expired = jwt.encode({"sub": str(user_a[1]), "exp": int(past.timestamp())}, TEST_SECRET, algorithm="HS256")
    r = client.get("/api/meals", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401

    forged = jwt.encode({"sub": str(user_a[1])}, "some-other-secret-of-sufficient-length", algorithm="HS256")
    r = client.get("/api/meals", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401
