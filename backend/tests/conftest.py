"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from typing import Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db import Base, get_db
from app.main import app
from app.models import AuthUser, ROLE_ADMIN


@pytest.fixture()
def engine():
    # One in-memory database shared by every connection in the test
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def db(engine) -> Generator[Session, None, None]:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(engine) -> Generator[TestClient, None, None]:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)

    def _get_test_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    # Not entered as a context manager, so startup hooks never touch the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client: TestClient, username: str, password: str = "s3cret-pass") -> Dict[str, str]:
    r = client.post(
        "/auth/register",
        json={"username": username, "password": password, "email": f"{username}@example.com"},
    )
    assert r.status_code == 201, r.text
    r = client.post("/auth/token", data={"username": username, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture()
def login(client: TestClient):
    """Factory: register a fresh student and return auth headers."""
    return lambda username: register_and_login(client, username)


@pytest.fixture()
def student_headers(client: TestClient) -> Dict[str, str]:
    return register_and_login(client, "lena")


@pytest.fixture()
def admin_headers(client: TestClient, db: Session) -> Dict[str, str]:
    headers = register_and_login(client, "admin_user")
    row = db.get(AuthUser, "admin_user")
    row.role = ROLE_ADMIN
    db.commit()
    return headers
