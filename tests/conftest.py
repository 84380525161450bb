"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Sample application payloads
"""

import os

# Keep the app from probing a real database when the client starts
os.environ["DB_INIT_ON_STARTUP"] = "false"
os.environ.setdefault("JSON_LOGS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db, get_engine
from app.models.application import Application  # noqa: F401  registers the table
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependencies.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_engine] = lambda: engine

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    """Identity header for the primary test user"""
    return {"X-User-Id": "u1"}


@pytest.fixture
def other_user_headers():
    """Identity header for a second, unrelated user"""
    return {"X-User-Id": "u2"}


@pytest.fixture
def sample_application_data():
    """Sample application payload for testing"""
    return {
        "company": "Acme",
        "role": "SWE",
        "status": "applied",
        "source": "LinkedIn",
        "applied_date": "2024-05-01",
        "notes": "Referred by a former colleague",
    }
