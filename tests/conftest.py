"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.database import Base, get_db
from src.main import app
from src.repositories.user import UserRepository
from src.services.auth import get_password_hash


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id, email and username."""

    def __init__(self, *args, user_id: int, email: str, username: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email
        self.username = username


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/mi_todoes", "/mi_todoes_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, username: str, password: str = "testpass123") -> AuthHeaders:
    """Register a user through the API and return auth headers for them."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": email, "username": username, "password": password},
    )
    assert response.status_code == 201
    data = response.json()

    return AuthHeaders(
        {"Authorization": f"Bearer {data['accessToken']}"},
        user_id=data["user"]["id"],
        email=email,
        username=username,
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "test@example.com", "testuser")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return register(client, "other@example.com", "otheruser")


@pytest.fixture
def user(db):
    """A user created directly through the repository."""
    return UserRepository(db).create(
        email="repo@example.com",
        username="repouser",
        password_hash=get_password_hash("testpass123"),
    )


@pytest.fixture
def create_todo(client, auth_headers):
    """Factory creating todos for the default user through the API."""

    def _create(headers=None, **fields):
        fields.setdefault("title", "Test Todo")
        response = client.post("/api/v1/todos", headers=headers or auth_headers, json=fields)
        assert response.status_code == 201
        return response.json()

    return _create
