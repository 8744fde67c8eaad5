"""Tests for registration, login and role checks."""

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.orm import Session

from app.models import AuthSession
from app.routers.auth import create_access_token
from app.settings import settings


def _register(client: TestClient, **overrides):
    body = {"username": "lena", "password": "s3cret-pass", "email": "lena@example.com"}
    body.update(overrides)
    return client.post("/auth/register", json=body)


def test_register_login_and_me(client: TestClient) -> None:
    assert _register(client).status_code == 201
    r = client.post("/auth/token", data={"username": "lena", "password": "s3cret-pass"})
    assert r.status_code == 200
    token = r.json()["access_token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json() == {"username": "lena", "role": "student"}


def test_duplicate_username_conflicts(client: TestClient) -> None:
    assert _register(client).status_code == 201
    assert _register(client, email="other@example.com").status_code == 409


def test_register_validation(client: TestClient) -> None:
    assert _register(client, username="ab").status_code == 400
    assert _register(client, email="  ").status_code == 400
    assert _register(client, password="").status_code == 400
    assert _register(client, password="short").status_code == 400
    assert _register(client, password="x" * 73).status_code == 400


def test_wrong_password_rejected(client: TestClient) -> None:
    _register(client)
    r = client.post("/auth/token", data={"username": "lena", "password": "nope"})
    assert r.status_code == 401


def test_revoked_session_is_rejected(client: TestClient, db: Session, student_headers) -> None:
    assert client.get("/auth/me", headers=student_headers).status_code == 200
    db.query(AuthSession).delete()
    db.commit()
    assert client.get("/auth/me", headers=student_headers).status_code == 401


def test_garbage_token_rejected(client: TestClient) -> None:
    r = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_token_expiry_follows_settings() -> None:
    before = datetime.now(timezone.utc)
    token = create_access_token({"sub": "lena", "jti": "abc"})
    payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    expires = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    expected = before + timedelta(minutes=settings.access_token_expire_minutes)
    assert abs((expires - expected).total_seconds()) < 5
