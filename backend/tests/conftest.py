"""
Pytest fixtures for test database, client and seed data.

Each test gets a fresh in-memory SQLite database (aiosqlite) with the
schema created from the models, and the API's get_db dependency is
pointed at the same session.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.session import get_db
from app.models.event import Event, EventStatus
from app.models.booking import Booking, BookingStatus

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop the in-memory database."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_event(db_session: AsyncSession) -> Event:
    """An active event titled "Jazz Night"."""
    event = Event(
        title="Jazz Night",
        city="New Orleans",
        date="2026-11-20",
        price=35.0,
        venue="Preservation Hall",
        status=EventStatus.ACTIVE.value,
    )
    db_session.add(event)
    await db_session.commit()
    await db_session.refresh(event)
    return event


@pytest_asyncio.fixture
async def other_event(db_session: AsyncSession) -> Event:
    event = Event(
        title="Rock Fest",
        city="Austin",
        date="2026-12-05",
        price=0.0,
        venue="Zilker Park",
        status=EventStatus.ACTIVE.value,
    )
    db_session.add(event)
    await db_session.commit()
    await db_session.refresh(event)
    return event


@pytest.fixture
def make_booking(db_session: AsyncSession):
    """Factory inserting a booking directly, bypassing the API."""

    async def _make(
        event_title: str = "Jazz Night",
        user_email: str = "fan@example.com",
        event_id=None,
        quantity: int = 1,
        status: str = BookingStatus.CONFIRMED.value,
    ) -> Booking:
        booking = Booking(
            event_id=event_id,
            event_title=event_title,
            user_email=user_email,
            quantity=quantity,
            status=status,
        )
        db_session.add(booking)
        await db_session.commit()
        await db_session.refresh(booking)
        return booking

    return _make
