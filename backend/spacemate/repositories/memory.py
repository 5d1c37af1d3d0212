"""In-memory repositories: the reference store.

Records live in plain dicts owned by the repository instance, so every test
(or every process) gets its own isolated store. ORM model instances are used
as transient records and never attached to a session.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from spacemate.database import utcnow
from spacemate.errors import NotFoundError
from spacemate.models.booking import CANCELLED, CONFIRMED, Booking
from spacemate.models.property import Property
from spacemate.repositories.base import (
    BookingRepository,
    PropertyRepository,
    property_defaults,
    with_property,
)
from spacemate.schemas.booking import BookingWithProperty
from spacemate.schemas.property import PropertyFilter
from spacemate.services.search import distinct_amenities, filter_properties

logger = logging.getLogger(__name__)


class InMemoryPropertyRepository(PropertyRepository):
    def __init__(self, seed: list[dict[str, Any]] | None = None) -> None:
        # dicts keep insertion order, which is the final sort tie-breaker
        self._properties: dict[uuid.UUID, Property] = {}
        for data in seed or []:
            self._store(data)
        if seed:
            logger.info("Seeded in-memory store with %d properties", len(seed))

    def _store(self, data: dict[str, Any]) -> Property:
        prop = Property(id=uuid.uuid4(), created_at=utcnow(), **property_defaults(data))
        self._properties[prop.id] = prop
        return prop

    async def list(self, filters: PropertyFilter | None = None) -> list[Property]:
        return filter_properties(self._properties.values(), filters)

    async def get_by_id(self, property_id: uuid.UUID) -> Property:
        prop = self._properties.get(property_id)
        if prop is None:
            raise NotFoundError("Property not found")
        return prop

    async def find(self, property_id: uuid.UUID) -> Property | None:
        return self._properties.get(property_id)

    async def get_by_owner(self, owner_id: str) -> list[Property]:
        return [p for p in self._properties.values() if p.owner_id == owner_id]

    async def create(self, data: dict[str, Any]) -> Property:
        return self._store(data)

    async def delete(self, property_id: uuid.UUID) -> None:
        if self._properties.pop(property_id, None) is None:
            raise NotFoundError("Property not found")

    async def list_amenities(self) -> list[str]:
        return distinct_amenities(self._properties.values())


class InMemoryBookingRepository(BookingRepository):
    """Bookings keyed by id; reads property snapshots from ``properties``."""

    def __init__(self, properties: InMemoryPropertyRepository) -> None:
        self._properties = properties
        self._bookings: dict[uuid.UUID, Booking] = {}

    async def create(self, data: dict[str, Any]) -> Booking:
        values = {"guests": None, "payment_method": "cash", **data, "status": CONFIRMED}
        booking = Booking(id=uuid.uuid4(), created_at=utcnow(), **values)
        self._bookings[booking.id] = booking
        return booking

    async def get_by_id(self, booking_id: uuid.UUID) -> Booking:
        booking = self._bookings.get(booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        return booking

    async def list_by_user(self, user_id: str) -> list[BookingWithProperty]:
        result = []
        # newest first
        for booking in reversed(list(self._bookings.values())):
            if booking.user_id != user_id:
                continue
            prop = await self._properties.find(booking.property_id)
            if prop is None:
                logger.info("Skipping booking %s: property %s no longer exists", booking.id, booking.property_id)
                continue
            result.append(with_property(booking, prop))
        return result

    async def cancel(self, booking_id: uuid.UUID) -> Booking:
        booking = await self.get_by_id(booking_id)
        booking.status = CANCELLED
        return booking


class InMemoryStore:
    """The pair of in-memory repositories that make up one isolated store."""

    def __init__(self, seed: list[dict[str, Any]] | None = None) -> None:
        self.properties = InMemoryPropertyRepository(seed)
        self.bookings = InMemoryBookingRepository(self.properties)
