"""Pydantic v2 request/response schemas for property endpoints."""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

PropertyType = Literal["hotel", "office"]

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class PropertyCreate(BaseModel):
    """Schema for creating a new property.

    ``title``, ``price`` and ``address`` are accepted as aliases of ``name``,
    ``price_per_night`` and ``location`` for clients built against the
    office-space form.
    """

    name: str = Field(..., min_length=1, max_length=255, validation_alias=AliasChoices("name", "title"))
    description: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1, max_length=255)
    price_per_night: int = Field(..., ge=0, validation_alias=AliasChoices("price_per_night", "price"))
    property_type: PropertyType = Field("office", validation_alias=AliasChoices("property_type", "type"))
    location: str = Field("", max_length=255, validation_alias=AliasChoices("location", "address"))
    rating: int = Field(0, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    images: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    max_guests: int | None = Field(None, ge=1)
    max_occupancy: int | None = Field(None, ge=1)
    featured: bool = False

    @field_validator("name", "description", "city")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("amenities")
    @classmethod
    def _dedupe_amenities(cls, value: list[str]) -> list[str]:
        """Drop blank and repeated tags, keeping the first occurrence's position."""
        seen: set[str] = set()
        result = []
        for tag in value:
            tag = tag.strip()
            if tag and tag.lower() not in seen:
                seen.add(tag.lower())
                result.append(tag)
        return result


class PropertyFilter(BaseModel):
    """Search criteria for property listings. Every field is optional."""

    property_type: Literal["hotel", "office", "all"] | None = None
    city: str | None = None
    min_price: int | None = Field(None, ge=0)
    max_price: int | None = Field(None, ge=0)
    rating: int | None = Field(None, ge=1, le=5)
    amenities: list[str] = Field(default_factory=list)
    search: str | None = None
    owner_id: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PropertyResponse(BaseModel):
    """Public property information returned from the API."""

    id: uuid.UUID
    owner_id: str | None = None
    name: str
    property_type: str
    description: str
    location: str
    city: str
    price_per_night: int
    rating: int
    review_count: int
    images: list[str]
    amenities: list[str]
    max_guests: int | None = None
    max_occupancy: int | None = None
    featured: bool
    booking_unit: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PropertySnapshot(BaseModel):
    """Denormalised subset of a property embedded in booking listings."""

    id: uuid.UUID
    name: str
    location: str
    city: str
    property_type: str
    images: list[str]

    model_config = ConfigDict(from_attributes=True)
