"""Shared API dependencies: single import point for all routers.

Storage is chosen by ``settings.storage_backend``: the in-memory store lives
on ``app.state`` (one per application), the SQL repositories wrap a
per-request session. Tests override :func:`get_property_repository` and
:func:`get_booking_repository` to inject a fresh store::

    from spacemate.api.deps import get_booking_service, get_current_identity
"""

from collections.abc import AsyncIterator

from fastapi import BackgroundTasks, Depends, FastAPI, Request
from sqlalchemy.ext.asyncio import AsyncSession

from spacemate.auth.dependencies import Identity, get_current_identity
from spacemate.config import settings
from spacemate.database import async_session_factory
from spacemate.notifications import BackgroundNotifier, EmailSender
from spacemate.repositories import (
    BookingRepository,
    InMemoryStore,
    PropertyRepository,
    SqlBookingRepository,
    SqlPropertyRepository,
)
from spacemate.seed_data import DEMO_PROPERTIES
from spacemate.services.booking_service import BookingService

__all__ = [
    "Identity",
    "get_booking_repository",
    "get_booking_service",
    "get_current_identity",
    "get_email_sender",
    "get_memory_store",
    "get_property_repository",
]


def get_memory_store(app: FastAPI) -> InMemoryStore:
    """Return the application's in-memory store, creating it on first use."""
    store = getattr(app.state, "store", None)
    if store is None:
        store = InMemoryStore(DEMO_PROPERTIES if settings.seed_demo_data else None)
        app.state.store = store
    return store


async def get_session() -> AsyncIterator[AsyncSession | None]:
    """Yield a database session for the SQL backend, ``None`` otherwise."""
    if settings.storage_backend != "sql":
        yield None
        return
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_property_repository(
    request: Request,
    session: AsyncSession | None = Depends(get_session),
) -> PropertyRepository:
    if session is None:
        return get_memory_store(request.app).properties
    return SqlPropertyRepository(session)


def get_booking_repository(
    request: Request,
    session: AsyncSession | None = Depends(get_session),
) -> BookingRepository:
    if session is None:
        return get_memory_store(request.app).bookings
    return SqlBookingRepository(session)


def get_email_sender() -> EmailSender:
    return EmailSender(settings)


def get_booking_service(
    background_tasks: BackgroundTasks,
    properties: PropertyRepository = Depends(get_property_repository),
    bookings: BookingRepository = Depends(get_booking_repository),
    sender: EmailSender = Depends(get_email_sender),
) -> BookingService:
    return BookingService(properties, bookings, BackgroundNotifier(background_tasks, sender))
