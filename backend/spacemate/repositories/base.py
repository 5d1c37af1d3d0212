"""Abstract repositories for properties and bookings.

Services depend on these interfaces only; the API layer decides which
implementation to hand them (see ``spacemate.api.deps``).
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Any

from spacemate.models.booking import Booking
from spacemate.models.property import Property
from spacemate.schemas.booking import BookingResponse, BookingWithProperty
from spacemate.schemas.property import PropertyFilter, PropertySnapshot


class PropertyRepository(ABC):
    """Storage for property listings."""

    @abstractmethod
    async def list(self, filters: PropertyFilter | None = None) -> list[Property]:
        """Return every property matching ``filters``, featured and best rated first."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, property_id: uuid.UUID) -> Property:
        """Return the property or raise ``NotFoundError``."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_owner(self, owner_id: str) -> list[Property]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, data: dict[str, Any]) -> Property:
        """Persist a new property with a fresh id and defaults applied."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, property_id: uuid.UUID) -> None:
        """Remove the property entirely or raise ``NotFoundError``.

        Bookings referencing the property are left untouched.
        """
        raise NotImplementedError

    @abstractmethod
    async def list_amenities(self) -> list[str]:
        raise NotImplementedError


class BookingRepository(ABC):
    """Storage for bookings. History is never deleted, only cancelled."""

    @abstractmethod
    async def create(self, data: dict[str, Any]) -> Booking:
        """Persist a new booking with status ``confirmed``."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, booking_id: uuid.UUID) -> Booking:
        """Return the booking or raise ``NotFoundError``."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_user(self, user_id: str) -> list[BookingWithProperty]:
        """Return the user's bookings, newest first, with a property snapshot.

        Bookings whose property no longer exists are left out.
        """
        raise NotImplementedError

    @abstractmethod
    async def cancel(self, booking_id: uuid.UUID) -> Booking:
        """Mark the booking cancelled. Cancelling twice is a no-op."""
        raise NotImplementedError


def property_defaults(data: dict[str, Any]) -> dict[str, Any]:
    """Fill in the optional property fields that callers may omit."""
    values = {
        "owner_id": None,
        "location": "",
        "rating": 0,
        "review_count": 0,
        "max_guests": None,
        "max_occupancy": None,
        "featured": False,
        **data,
    }
    values["images"] = list(data.get("images") or [])
    values["amenities"] = list(data.get("amenities") or [])
    return values


def with_property(booking: Booking, prop: Property) -> BookingWithProperty:
    """Combine a booking and its property into the listing shape."""
    return BookingWithProperty(
        **BookingResponse.model_validate(booking).model_dump(),
        property=PropertySnapshot.model_validate(prop),
    )
