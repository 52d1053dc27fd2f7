"""
Shared fixtures: a fresh in-memory SQLite database per test and a
TestClient wired to it through a get_db override.
"""
import os

# must be set before app.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SCRYPT_N"] = "1024"  # keep hashing fast in tests
os.environ.pop("INITIAL_ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models.user import User
from app.services import plan_service, user_service


@pytest.fixture(scope="function")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """Database session with the pricing plans seeded."""
    db = session_factory()
    plan_service.seed_pricing_plans(db)
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(session_factory, db_session):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db_session) -> User:
    return user_service.create_user(
        db_session, username="root", password="rootpass", role="admin"
    )


@pytest.fixture
def creator(db_session) -> User:
    return user_service.create_user(db_session, username="alice", password="secret1")


@pytest.fixture
def other_creator(db_session) -> User:
    return user_service.create_user(db_session, username="bob", password="secret2")


@pytest.fixture
def login_as(client):
    """Log in through the API and return Authorization headers for the session."""

    def _login(username: str, password: str) -> dict:
        resp = client.post("/api/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _login
