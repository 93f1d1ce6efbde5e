"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
from uuid import uuid4

# Must be set before notekeeper is imported: settings and the engine are built at import time.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ACCESS_TOKEN_SECRET"] = "test-secret-key"
os.environ["NOTEKEEPER_SKIP_LIFESPAN_DB"] = "1"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notekeeper.core.models import BaseModel
from notekeeper.database import get_db_session
from notekeeper.main import app
from notekeeper.security.jwt import create_user_token
from notekeeper.security.password import hash_password

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite needs foreign keys switched on per connection
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_maker):
    """Session for tests that talk to repositories or models directly."""
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(session_maker):
    """App with the DB dependency pointed at the in-memory engine."""

    async def _override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """HTTP client running the app on the test's event loop."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def test_user_data():
    """Sample account data for testing."""
    return {
        "fullName": "Test User",
        "email": f"user_{uuid4().hex[:8]}@example.com",
        "password": "TestPassword123!",
    }


@pytest.fixture
async def test_user(test_session, test_user_data):
    """Create a test user in the database."""
    from notekeeper.core.models.user import User

    user = User(
        full_name=test_user_data["fullName"],
        email=test_user_data["email"],
        password_hash=hash_password(test_user_data["password"]),
    )

    test_session.add(user)
    await test_session.commit()
    await test_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user):
    """Authorization header with a valid token for ``test_user``."""
    return {"Authorization": f"Bearer {create_user_token(test_user.id)}"}


async def register(client: AsyncClient, email: str, password: str = "p", full_name: str = "A") -> dict:
    """Create an account through the API and return auth headers."""
    resp = await client.post(
        "/create-account", json={"fullName": full_name, "email": email, "password": password}
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["error"] is False
    return {"Authorization": f"Bearer {body['accessToken']}"}


@pytest.fixture
def register_user():
    return register
