"""Global test fixtures for NightNest API tests"""
import os

# Keep the module-level engine off the filesystem; tests use their own engine below
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from config.database import get_db, init_db
from app.models.auth_models import User
from app.utils.tokens import jwt_for_user


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """TestClient whose requests run against the test database"""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============================================================================
# User & Auth Fixtures
# ============================================================================

@pytest.fixture
def make_user(session_factory):
    """Factory that stores a user and returns (user_id, auth headers)"""
    def _make_user(email: str = "parent@example.com"):
        session = session_factory()
        try:
            user = User(email=email, first_name="Test", last_name="Parent")
            session.add(user)
            session.commit()
            user_id = user.id
        finally:
            session.close()
        headers = {"Authorization": f"Bearer {jwt_for_user(email=email)}"}
        return user_id, headers

    return _make_user


@pytest.fixture
def auth_headers(make_user):
    _, headers = make_user()
    return headers


@pytest.fixture
def other_auth_headers(make_user):
    _, headers = make_user("other@example.com")
    return headers
