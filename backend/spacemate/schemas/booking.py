"""Pydantic v2 request/response schemas for booking endpoints."""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from spacemate.schemas.property import PropertySnapshot

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BookingCreate(BaseModel):
    """Schema for creating a new booking.

    The date range is validated by the booking service rather than here so
    that an inverted range is reported as a 400, like every other booking
    rule. The total price is always computed server side.
    """

    property_id: uuid.UUID
    check_in: date
    check_out: date
    guests: int | None = Field(None, ge=1)
    guest_name: str | None = Field(None, max_length=255)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class BookingResponse(BaseModel):
    """Standard booking response returned from create/cancel operations."""

    id: uuid.UUID
    property_id: uuid.UUID
    user_id: str
    check_in: date
    check_out: date
    guests: int | None = None
    total_price: int
    payment_method: str
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BookingWithProperty(BookingResponse):
    """Booking enriched with a snapshot of the property it references."""

    property: PropertySnapshot
