"""Bookings API router.

Ownership rule: a caller can only see and cancel **their own** bookings.
Cancelling never deletes a booking; it moves it to ``cancelled``.
"""

import uuid

from fastapi import APIRouter, Depends, status

from spacemate.api.deps import Identity, get_booking_service, get_current_identity
from spacemate.schemas.booking import BookingCreate, BookingResponse, BookingWithProperty
from spacemate.services.booking_service import BookingService

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
)
async def create_booking(
    body: BookingCreate,
    identity: Identity = Depends(get_current_identity),
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Book a property, paid in cash on arrival.

    The booking is confirmed immediately; a confirmation email is sent to the
    caller's address after the response.
    """
    booking = await service.create_booking(
        user_id=identity.user_id,
        property_id=body.property_id,
        check_in=body.check_in,
        check_out=body.check_out,
        guests=body.guests,
        recipient_email=identity.email,
        guest_name=body.guest_name or identity.name,
    )
    return BookingResponse.model_validate(booking)


@router.get(
    "",
    response_model=list[BookingWithProperty],
    summary="List the current user's bookings",
)
async def list_bookings(
    identity: Identity = Depends(get_current_identity),
    service: BookingService = Depends(get_booking_service),
) -> list[BookingWithProperty]:
    """Return the caller's bookings, newest first, with property details."""
    return await service.list_bookings(identity.user_id)


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Get one of the current user's bookings",
)
async def get_booking(
    booking_id: uuid.UUID,
    identity: Identity = Depends(get_current_identity),
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    return BookingResponse.model_validate(await service.get_booking(identity.user_id, booking_id))


@router.delete(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Cancel a booking",
)
async def cancel_booking(
    booking_id: uuid.UUID,
    identity: Identity = Depends(get_current_identity),
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Cancel one of the caller's bookings. Cancelling twice is not an error."""
    booking = await service.cancel_booking(identity.user_id, booking_id)
    return BookingResponse.model_validate(booking)
