"""Property model: hotels and office spaces."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from spacemate.database import Base, UUIDPrimaryKeyMixin, utcnow

HOTEL = "hotel"


class Property(UUIDPrimaryKeyMixin, Base):
    """A hotel stay or an office/coworking space listed on the marketplace."""

    __tablename__ = "properties"

    # None for seed/demo listings
    owner_id: Mapped[str | None] = mapped_column(String(255), default=None, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    property_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)  # hotel, office
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price_per_night: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    amenities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    max_guests: Mapped[int | None] = mapped_column(Integer, default=None)
    max_occupancy: Mapped[int | None] = mapped_column(Integer, default=None)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    @property
    def booking_unit(self) -> str:
        """Hotels are booked per night, offices per day."""
        return "night" if self.property_type == HOTEL else "day"

    @property
    def capacity(self) -> int | None:
        """Occupancy bound that applies to this property type, if any."""
        if self.property_type == HOTEL:
            return self.max_guests
        return self.max_occupancy

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, name={self.name!r}, type={self.property_type!r})>"
