"""Booking lifecycle: creation, cancellation, and listing of bookings.

States are ``confirmed`` (initial; cash bookings are confirmed immediately)
and ``cancelled`` (terminal). There is no availability or overlap check:
two bookings for the same dates on the same property both succeed.
"""

import logging
import uuid
from datetime import date

from spacemate.errors import CapacityExceededError, ForbiddenError, InvalidDateRangeError
from spacemate.models.booking import CANCELLED, Booking
from spacemate.models.property import Property
from spacemate.notifications.dispatch import Notifier
from spacemate.notifications.email import BookingConfirmation
from spacemate.repositories.base import BookingRepository, PropertyRepository
from spacemate.schemas.booking import BookingWithProperty

logger = logging.getLogger(__name__)


def nights_between(check_in: date, check_out: date) -> int:
    """Number of whole nights (or days, for offices) in the range.

    Raises:
        InvalidDateRangeError: If ``check_out`` is not after ``check_in``.
    """
    nights = (check_out - check_in).days
    if nights < 1:
        raise InvalidDateRangeError()
    return nights


def compute_total_price(prop: Property, check_in: date, check_out: date) -> int:
    return nights_between(check_in, check_out) * prop.price_per_night


class BookingService:
    """Orchestrates bookings against the property and booking repositories."""

    def __init__(
        self,
        properties: PropertyRepository,
        bookings: BookingRepository,
        notifier: Notifier | None = None,
    ) -> None:
        self._properties = properties
        self._bookings = bookings
        self._notifier = notifier

    async def create_booking(
        self,
        user_id: str,
        property_id: uuid.UUID,
        check_in: date,
        check_out: date,
        guests: int | None = None,
        recipient_email: str | None = None,
        guest_name: str | None = None,
    ) -> Booking:
        """Validate and persist a confirmed booking, then notify the guest.

        Raises:
            NotFoundError: If the property does not exist.
            InvalidDateRangeError: If ``check_out`` is not after ``check_in``.
            CapacityExceededError: If ``guests`` exceeds the property's capacity.
        """
        prop = await self._properties.get_by_id(property_id)

        total_price = compute_total_price(prop, check_in, check_out)

        capacity = prop.capacity
        if guests is not None and capacity is not None and guests > capacity:
            raise CapacityExceededError(f"This property allows at most {capacity} guests")

        booking = await self._bookings.create(
            {
                "property_id": prop.id,
                "user_id": user_id,
                "check_in": check_in,
                "check_out": check_out,
                "guests": guests,
                "total_price": total_price,
            }
        )
        logger.info(
            "Booking %s created: user=%s property=%s %s..%s total=%d",
            booking.id,
            user_id,
            prop.id,
            check_in,
            check_out,
            total_price,
        )

        if recipient_email:
            self._notify(
                BookingConfirmation(
                    recipient=recipient_email,
                    property_name=prop.name,
                    location=prop.location,
                    city=prop.city,
                    check_in=check_in,
                    check_out=check_out,
                    total_price=total_price,
                    guests=guests,
                    guest_name=guest_name,
                )
            )
        return booking

    def _notify(self, confirmation: BookingConfirmation) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.booking_confirmed(confirmation)
        except Exception:
            # The booking is already stored; a notification problem must not undo it.
            logger.exception("Failed to dispatch booking confirmation to %s", confirmation.recipient)

    async def get_booking(self, user_id: str, booking_id: uuid.UUID) -> Booking:
        """Return one of the caller's bookings.

        Raises:
            NotFoundError: If the booking does not exist.
            ForbiddenError: If the booking belongs to another user.
        """
        booking = await self._bookings.get_by_id(booking_id)
        if booking.user_id != user_id:
            raise ForbiddenError("You can only access your own bookings")
        return booking

    async def cancel_booking(self, user_id: str, booking_id: uuid.UUID) -> Booking:
        """Cancel one of the caller's bookings. Cancelling twice is a no-op.

        Raises:
            NotFoundError: If the booking does not exist.
            ForbiddenError: If the booking belongs to another user.
        """
        booking = await self.get_booking(user_id, booking_id)
        if booking.status == CANCELLED:
            return booking

        booking = await self._bookings.cancel(booking_id)
        logger.info("Booking %s cancelled by user %s", booking_id, user_id)
        return booking

    async def list_bookings(self, user_id: str) -> list[BookingWithProperty]:
        return await self._bookings.list_by_user(user_id)
