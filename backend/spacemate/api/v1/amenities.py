"""Amenities API: the distinct tags offered across all listings."""

from fastapi import APIRouter, Depends

from spacemate.api.deps import get_property_repository
from spacemate.repositories import PropertyRepository

router = APIRouter(prefix="/api/amenities", tags=["amenities"])


@router.get("", response_model=list[str], summary="List distinct amenity tags")
async def list_amenities(
    repo: PropertyRepository = Depends(get_property_repository),
) -> list[str]:
    return await repo.list_amenities()
