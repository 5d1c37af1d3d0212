"""Property listing API routes: public browsing, owner-scoped management."""

import uuid
from typing import Literal

from fastapi import APIRouter, Depends, Query, status

from spacemate.api.deps import Identity, get_current_identity, get_property_repository
from spacemate.repositories import PropertyRepository
from spacemate.schemas.common import MessageResponse
from spacemate.schemas.property import PropertyCreate, PropertyFilter, PropertyResponse
from spacemate.services import property_service

router = APIRouter(prefix="/api/properties", tags=["properties"])


def _split_tags(values: list[str] | None) -> list[str]:
    """Accept both ``?amenities=a&amenities=b`` and ``?amenities=a,b``."""
    tags = []
    for value in values or []:
        tags.extend(tag.strip() for tag in value.split(",") if tag.strip())
    return tags


@router.get(
    "",
    response_model=list[PropertyResponse],
    summary="Search property listings",
)
async def list_properties(
    property_type: Literal["hotel", "office", "all"] | None = Query(None, alias="type"),
    city: str | None = Query(None, description="Case-insensitive match on city or location"),
    min_price: int | None = Query(None, ge=0),
    max_price: int | None = Query(None, ge=0),
    rating: int | None = Query(None, ge=1, le=5, description="Minimum rating"),
    amenities: list[str] | None = Query(None, description="Listings must offer every amenity"),
    search: str | None = Query(None, description="Case-insensitive match on the name"),
    owner_id: str | None = Query(None),
    repo: PropertyRepository = Depends(get_property_repository),
) -> list[PropertyResponse]:
    """Return all listings matching the filters, featured and best rated first."""
    filters = PropertyFilter(
        property_type=property_type,
        city=city,
        min_price=min_price,
        max_price=max_price,
        rating=rating,
        amenities=_split_tags(amenities),
        search=search,
        owner_id=owner_id,
    )
    properties = await repo.list(filters)
    return [PropertyResponse.model_validate(p) for p in properties]


@router.get(
    "/mine",
    response_model=list[PropertyResponse],
    summary="List properties owned by the current user",
)
async def list_my_properties(
    identity: Identity = Depends(get_current_identity),
    repo: PropertyRepository = Depends(get_property_repository),
) -> list[PropertyResponse]:
    properties = await repo.get_by_owner(identity.user_id)
    return [PropertyResponse.model_validate(p) for p in properties]


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Get a property by ID",
)
async def get_property(
    property_id: uuid.UUID,
    repo: PropertyRepository = Depends(get_property_repository),
) -> PropertyResponse:
    """Retrieve a single property. Returns 404 if not found."""
    return PropertyResponse.model_validate(await repo.get_by_id(property_id))


@router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new property",
)
async def create_property(
    body: PropertyCreate,
    identity: Identity = Depends(get_current_identity),
    repo: PropertyRepository = Depends(get_property_repository),
) -> PropertyResponse:
    """Create a property owned by the authenticated user."""
    prop = await property_service.create_property(repo, identity.user_id, body)
    return PropertyResponse.model_validate(prop)


@router.delete(
    "/{property_id}",
    response_model=MessageResponse,
    summary="Delete a property",
)
async def delete_property(
    property_id: uuid.UUID,
    identity: Identity = Depends(get_current_identity),
    repo: PropertyRepository = Depends(get_property_repository),
) -> MessageResponse:
    """Delete one of the caller's properties. Its bookings are kept."""
    await property_service.delete_property(repo, identity.user_id, property_id)
    return MessageResponse(message="Property deleted")
