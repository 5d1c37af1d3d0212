"""Booking model: cash-on-arrival reservations of a property."""

import uuid
from datetime import date, datetime

from sqlalchemy import Date, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from spacemate.database import Base, UUIDPrimaryKeyMixin, utcnow

CONFIRMED = "confirmed"
CANCELLED = "cancelled"


class Booking(UUIDPrimaryKeyMixin, Base):
    """A reservation of a property by a user for a date range."""

    __tablename__ = "bookings"

    # Not a foreign key: a listing can be deleted while its bookings remain.
    property_id: Mapped[uuid.UUID] = mapped_column(nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    check_in: Mapped[date] = mapped_column(Date, nullable=False)
    check_out: Mapped[date] = mapped_column(Date, nullable=False)
    guests: Mapped[int | None] = mapped_column(Integer, default=None)
    total_price: Mapped[int] = mapped_column(Integer, nullable=False)
    payment_method: Mapped[str] = mapped_column(String(20), nullable=False, default="cash")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=CONFIRMED, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (Index("ix_bookings_user_created", "user_id", "created_at"),)

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, property_id={self.property_id}, user_id={self.user_id!r}, status={self.status})>"
