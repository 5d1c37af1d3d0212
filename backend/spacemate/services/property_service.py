"""Owner-side listing management."""

import logging
import uuid

from spacemate.errors import ForbiddenError
from spacemate.models.property import Property
from spacemate.repositories.base import PropertyRepository
from spacemate.schemas.property import PropertyCreate

logger = logging.getLogger(__name__)


async def create_property(repo: PropertyRepository, owner_id: str, body: PropertyCreate) -> Property:
    """Create a listing owned by ``owner_id``."""
    prop = await repo.create({**body.model_dump(), "owner_id": owner_id})
    logger.info("Property %s (%s) created by owner %s", prop.id, prop.property_type, owner_id)
    return prop


async def delete_property(repo: PropertyRepository, owner_id: str, property_id: uuid.UUID) -> None:
    """Delete a listing owned by ``owner_id``.

    Listings without an owner (the demo catalogue) cannot be deleted through
    the API. Existing bookings for the listing are kept.

    Raises:
        NotFoundError: If the property does not exist.
        ForbiddenError: If the caller does not own the property.
    """
    prop = await repo.get_by_id(property_id)
    if prop.owner_id is None or prop.owner_id != owner_id:
        raise ForbiddenError("You can only delete your own properties")

    await repo.delete(property_id)
    logger.info("Property %s deleted by owner %s", property_id, owner_id)
