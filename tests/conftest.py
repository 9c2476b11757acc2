"""Pytest configuration and fixtures."""

import os

# Settings are read once and cached, so the environment must be in place first
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256-signing"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from flashdeck import models  # noqa: F401
from flashdeck.database import Base, create_sqlite_engine, get_db
from flashdeck.infrastructure.identity.auth.token_service import create_access_token
from flashdeck.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"

# Create test engine
test_engine = create_sqlite_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

OWNER_ID = 1
OTHER_USER_ID = 2


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def second_db_session(db_session: Session) -> Generator[Session, None, None]:
    """A second session on the same database, standing in for a concurrent request."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization header for the owner used throughout the tests."""
    return {"Authorization": f"Bearer {create_access_token(OWNER_ID)}"}


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    """Authorization header for a second user who owns nothing."""
    return {"Authorization": f"Bearer {create_access_token(OTHER_USER_ID)}"}


@pytest.fixture
def create_set(
    client: TestClient, auth_headers: dict[str, str]
) -> Callable[..., dict[str, Any]]:
    """Factory creating a set through the API and returning its JSON."""

    def _create(headers: dict[str, str] | None = None, **fields: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": "Spanish Basics", **fields}
        response = client.post("/api/v1/sets", json=payload, headers=headers or auth_headers)
        assert response.status_code == 201, response.text
        return response.json()["flashcardSet"]

    return _create
