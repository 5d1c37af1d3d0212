"""SQLAlchemy-backed repositories.

Each repository wraps the request's ``AsyncSession``; committing is left to
the session owner (``spacemate.api.deps.get_session``).
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

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


class SqlPropertyRepository(PropertyRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list(self, filters: PropertyFilter | None = None) -> list[Property]:
        """Push the scalar predicates down to SQL, then finish in Python.

        Amenity matching (all-of over a JSON list) and the final ordering go
        through the shared search functions so both backends agree exactly.
        Rows created in the same instant fall back to id order, so ties are
        still returned in a stable order.
        """
        query = select(Property)
        if filters is not None:
            if filters.property_type and filters.property_type != "all":
                query = query.where(Property.property_type == filters.property_type)
            if filters.city and filters.city.strip():
                needle = filters.city.strip()
                query = query.where(
                    or_(
                        Property.city.icontains(needle, autoescape=True),
                        Property.location.icontains(needle, autoescape=True),
                    )
                )
            if filters.min_price is not None:
                query = query.where(Property.price_per_night >= filters.min_price)
            if filters.max_price is not None:
                query = query.where(Property.price_per_night <= filters.max_price)
            if filters.rating is not None:
                query = query.where(Property.rating >= filters.rating)
            if filters.search and filters.search.strip():
                query = query.where(Property.name.icontains(filters.search.strip(), autoescape=True))
            if filters.owner_id is not None:
                query = query.where(Property.owner_id == filters.owner_id)

        result = await self._session.execute(query.order_by(Property.created_at, Property.id))
        return filter_properties(result.scalars().all(), filters)

    async def get_by_id(self, property_id: uuid.UUID) -> Property:
        prop = await self._session.get(Property, property_id)
        if prop is None:
            raise NotFoundError("Property not found")
        return prop

    async def get_by_owner(self, owner_id: str) -> list[Property]:
        result = await self._session.execute(
            select(Property).where(Property.owner_id == owner_id).order_by(Property.created_at, Property.id)
        )
        return list(result.scalars().all())

    async def create(self, data: dict[str, Any]) -> Property:
        prop = Property(**property_defaults(data))
        self._session.add(prop)
        await self._session.flush()
        return prop

    async def delete(self, property_id: uuid.UUID) -> None:
        prop = await self.get_by_id(property_id)
        await self._session.delete(prop)
        await self._session.flush()

    async def list_amenities(self) -> list[str]:
        result = await self._session.execute(select(Property).order_by(Property.created_at, Property.id))
        return distinct_amenities(result.scalars().all())


class SqlBookingRepository(BookingRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, data: dict[str, Any]) -> Booking:
        booking = Booking(**{"payment_method": "cash", **data, "status": CONFIRMED})
        self._session.add(booking)
        await self._session.flush()
        return booking

    async def get_by_id(self, booking_id: uuid.UUID) -> Booking:
        booking = await self._session.get(Booking, booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        return booking

    async def list_by_user(self, user_id: str) -> list[BookingWithProperty]:
        # Inner join drops bookings whose property has been deleted
        result = await self._session.execute(
            select(Booking, Property)
            .join(Property, Booking.property_id == Property.id)
            .where(Booking.user_id == user_id)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
        )
        return [with_property(booking, prop) for booking, prop in result.all()]

    async def cancel(self, booking_id: uuid.UUID) -> Booking:
        booking = await self.get_by_id(booking_id)
        if booking.status != CANCELLED:
            booking.status = CANCELLED
            await self._session.flush()
        return booking
