"""Shared test fixtures for the TechStock API tests."""

import os

# Settings are read at import time; pin the environment before importing the app
os.environ["JWT_SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SENDGRID_API_KEY"] = ""
os.environ["CONTACT_INBOX_ADDRESS"] = ""
os.environ["EXPOSE_RESET_TOKENS"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from techstock.database import Base, get_db  # noqa: E402
from techstock.main import app  # noqa: E402
from techstock.models.user import User  # noqa: E402
from techstock.rate_limiter import limiter  # noqa: E402
from techstock.services.auth_service import AuthService  # noqa: E402


def register_user(
    test_client: TestClient,
    email: str,
    password: str,
    name: str = "Test User",
    phone: str | None = "050-0000000",
    city: str | None = "Haifa",
):
    """Helper to register a user through the API."""
    return test_client.post(
        "/api/register",
        json={"email": email, "password": password, "name": name, "phone": phone, "city": city},
    )


def login_user(test_client: TestClient, email: str, password: str):
    """Helper to log in through the API."""
    return test_client.post("/api/login", json={"email": email, "password": password})


def bearer(user_id: int, role: str = "user", username: str | None = "Test User") -> dict:
    """Authorization header for a freshly signed access token."""
    token = AuthService.create_access_token(user_id, role, username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def session_maker():
    """In-memory database with all tables, shared across threads."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    testing_session_local = sessionmaker(
        autocommit=False, autoflush=False, bind=engine, expire_on_commit=False
    )
    yield testing_session_local
    engine.dispose()


@pytest.fixture
def db_session(session_maker):
    """A single session on the in-memory database."""
    session = session_maker()
    yield session
    session.close()


@pytest.fixture
def auth_client(session_maker):
    """Create test client with in-memory database.

    Yields a tuple of (TestClient, SessionMaker) for use in tests.
    """
    limiter.reset()

    def override_get_db():
        db = session_maker()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client, session_maker

    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(session_maker) -> User:
    """An admin account stored directly in the database."""
    db = session_maker()
    user = User(
        email="admin@techstock.com",
        password_hash=AuthService.hash_password("AdminPass1"),
        name="Store Admin",
        role="admin",
    )
    db.add(user)
    db.commit()
    db.close()
    return user
