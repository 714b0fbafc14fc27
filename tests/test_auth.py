import jwt
import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.db import Database
from taskboard.main import create_app
from taskboard.models import User
from taskboard.utils.crypto import create_token, verify_password

from conftest import TEST_SECRET


def _count_users(database, email):
    with database.session() as db:
        return db.query(User).filter_by(email=email).count()


def test_signup_creates_user(client, database):
    resp = client.post("/api/auth/signup", json={"name": "Ann", "email": "a@x.com", "password": "pw12345"})

    assert resp.status_code == 201
    assert resp.json() == {"message": "User created"}
    assert _count_users(database, "a@x.com") == 1


def test_signup_stores_password_hash_not_password(client, database, user):
    with database.session() as db:
        stored = db.query(User).filter_by(email=user["email"]).one()

    assert stored.password_hash != user["password"]
    assert verify_password(user["password"], stored.password_hash)


def test_signup_duplicate_email_conflicts(client, database, user):
    resp = client.post("/api/auth/signup", json={"name": "Other", "email": user["email"], "password": "x"})

    assert resp.status_code == 409
    assert resp.json() == {"error": "User exists"}
    assert _count_users(database, user["email"]) == 1


@pytest.mark.parametrize("body", [
    {"email": "a@x.com", "password": "pw"},
    {"name": "Ann", "password": "pw"},
    {"name": "Ann", "email": "a@x.com"},
    {"name": "", "email": "a@x.com", "password": "pw"},
])
def test_signup_missing_fields(client, database, body):
    resp = client.post("/api/auth/signup", json=body)

    assert resp.status_code == 400
    assert "error" in resp.json()
    assert _count_users(database, "a@x.com") == 0


def test_login_returns_token_for_stored_user(client, database, user):
    resp = client.post("/api/auth/login", json={"email": user["email"], "password": user["password"]})

    assert resp.status_code == 200
    data = resp.json()
    assert data["email"] == user["email"]
    assert data["name"] == user["name"]

    with database.session() as db:
        stored = db.query(User).filter_by(email=user["email"]).one()

    claims = jwt.decode(data["token"], TEST_SECRET, algorithms=["HS256"])
    assert claims["id"] == stored.id
    assert claims["email"] == stored.email
    assert claims["name"] == stored.name
    assert claims["exp"] - claims["iat"] == 3600


def test_login_wrong_password(client, user):
    resp = client.post("/api/auth/login", json={"email": user["email"], "password": "wrong"})

    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_unknown_email(client):
    resp = client.post("/api/auth/login", json={"email": "nobody@x.com", "password": "pw12345"})

    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_missing_fields(client):
    resp = client.post("/api/auth/login", json={"email": "a@x.com"})

    assert resp.status_code == 400


class TestAuthRequired:
    @pytest.fixture
    def protected_client(self):
        settings = Settings(database_url="sqlite://", jwt_secret=TEST_SECRET, bcrypt_rounds=4, auth_required=True)
        database = Database(settings)
        database.create_all()
        with TestClient(create_app(settings, database=database)) as c:
            yield c

    def test_rejects_missing_token(self, protected_client):
        resp = protected_client.get("/api/projects")

        assert resp.status_code == 401
        assert resp.json() == {"error": "Not authenticated"}

    def test_rejects_bad_token(self, protected_client):
        resp = protected_client.get("/api/tasks", headers={"Authorization": "Bearer not-a-jwt"})

        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid token"}

    def test_rejects_expired_token(self, protected_client):
        token = create_token({"id": 1, "email": "a@x.com", "name": "Ann"}, TEST_SECRET, expires_in=-60)
        resp = protected_client.get("/api/tasks", headers={"Authorization": f"Bearer {token}"})

        assert resp.status_code == 401
        assert resp.json() == {"error": "Token has expired"}

    def test_accepts_login_token(self, protected_client):
        protected_client.post("/api/auth/signup", json={"name": "Ann", "email": "a@x.com", "password": "pw12345"})
        token = protected_client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "pw12345"}
        ).json()["token"]

        resp = protected_client.get("/api/projects", headers={"Authorization": f"Bearer {token}"})

        assert resp.status_code == 200
        assert resp.json() == []

    def test_auth_routes_stay_open(self, protected_client):
        resp = protected_client.post("/api/auth/signup", json={"name": "Bo", "email": "b@x.com", "password": "pw"})

        assert resp.status_code == 201
