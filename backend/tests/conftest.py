"""Shared test configuration and fixtures.

API tests run against a fresh in-memory store per test, injected through
FastAPI dependency overrides; the SQL repository tests use an in-memory
SQLite database (``sqlite+aiosqlite``) created per test.
"""

import uuid
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from spacemate.api.deps import get_booking_repository, get_email_sender, get_property_repository
from spacemate.auth.jwt import create_access_token
from spacemate.database import Base
from spacemate.main import app
from spacemate.notifications import EmailSender
from spacemate.repositories import InMemoryStore
from spacemate.seed_data import DEMO_PROPERTIES

# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> InMemoryStore:
    """An empty, isolated in-memory store."""
    return InMemoryStore()


@pytest.fixture
def seeded_store() -> InMemoryStore:
    """An isolated in-memory store holding the demo catalogue."""
    return InMemoryStore(DEMO_PROPERTIES)


@pytest_asyncio.fixture
async def sql_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session bound to a throwaway in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


# ---------------------------------------------------------------------------
# API client
# ---------------------------------------------------------------------------


@pytest.fixture
def email_sender() -> MagicMock:
    """An EmailSender double that records confirmations instead of sending."""
    sender = MagicMock(spec=EmailSender)
    sender.send_booking_confirmation = AsyncMock(return_value=True)
    return sender


@pytest_asyncio.fixture
async def client(store: InMemoryStore, email_sender: MagicMock) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to the test store and email double."""
    app.dependency_overrides[get_property_repository] = lambda: store.properties
    app.dependency_overrides[get_booking_repository] = lambda: store.bookings
    app.dependency_overrides[get_email_sender] = lambda: email_sender

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: authenticated callers
# ---------------------------------------------------------------------------


def _make_auth_headers(user_id: str, email: str | None = None, name: str | None = None) -> dict[str, str]:
    claims = {"sub": user_id}
    if email:
        claims["email"] = email
    if name:
        claims["name"] = name
    return {"Authorization": f"Bearer {create_access_token(claims)}"}


@pytest.fixture
def headers_for():
    """Factory building Authorization headers for an arbitrary user id."""
    return _make_auth_headers


@pytest.fixture
def user_id() -> str:
    return f"user_{uuid.uuid4().hex[:12]}"


@pytest.fixture
def auth_headers(user_id: str) -> dict[str, str]:
    """Authorization headers for the main test user (with an email claim)."""
    return _make_auth_headers(user_id, email=f"{user_id}@test.com", name="Test Guest")


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    """Authorization headers for a second, unrelated user."""
    other = f"user_{uuid.uuid4().hex[:12]}"
    return _make_auth_headers(other, email=f"{other}@test.com")


# ---------------------------------------------------------------------------
# Convenience fixtures: property helpers
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_property(client: AsyncClient, auth_headers: dict) -> dict:
    """Create and return a test hotel via the API."""
    response = await client.post(
        "/api/properties",
        json={
            "name": "Test Hotel",
            "type": "hotel",
            "description": "A test hotel for automated tests.",
            "location": "MG Road",
            "city": "Bengaluru",
            "price_per_night": 100,
            "rating": 4,
            "max_guests": 3,
            "amenities": ["WiFi", "Parking"],
        },
        headers=auth_headers,
    )
    assert response.status_code == 201, f"Failed to create test property: {response.text}"
    return response.json()
