import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker

from shelflife.main import app
from shelflife.database import get_db
from shelflife.models import Base

# In-memory SQLite for tests (shared across threads/connections)
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=test_engine, autoflush=False, autocommit=False, future=True)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(client):
    """Register + login; returns (profile, auth headers)."""

    def _make(username=None, password="pw123456", email=None, display_name=None):
        username = username or f"user_{uuid.uuid4().hex[:8]}"
        email = email or f"{username}@example.com"
        payload = {"username": username, "email": email, "password": password}
        if display_name is not None:
            payload["displayName"] = display_name
        r = client.post("/api/auth/register", json=payload)
        assert r.status_code == 201, r.text
        lg = client.post("/api/auth/login", json={"usernameOrEmail": username, "password": password})
        assert lg.status_code == 200, lg.text
        return r.json(), {"Authorization": f"Bearer {lg.json()['token']}"}

    return _make


@pytest.fixture
def auth_headers(make_user):
    _, headers = make_user()
    return headers


@pytest.fixture
def create_work(client):
    def _create(headers, **fields):
        payload = {"title": "Dune"}
        payload.update(fields)
        r = client.post("/api/works", json=payload, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()

    return _create
