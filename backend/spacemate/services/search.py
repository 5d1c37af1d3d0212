"""Property search: pure filtering and ordering over a property collection.

Both storage backends funnel their results through :func:`filter_properties`
(or at least :func:`sort_properties`), so a query returns the same listings
in the same order whichever backend is configured.

Filter semantics:

* ``property_type``: exact match; ``"all"`` or ``None`` means any type.
* ``city``: case-insensitive substring of the city *or* the location.
* ``min_price`` / ``max_price``: inclusive bounds on ``price_per_night``.
* ``rating``: inclusive lower bound.
* ``amenities``: all-of, every requested tag must be present
  (compared case-insensitively).
* ``search``: case-insensitive substring of the name.
* ``owner_id``: exact owner match.

Ordering is featured listings first, then rating descending. Python's sort is
stable, so remaining ties keep the order of the input sequence.
"""

from collections.abc import Iterable
from typing import TypeVar

from spacemate.models.property import Property
from spacemate.schemas.property import PropertyFilter

P = TypeVar("P", bound=Property)


def _contains(haystack: str | None, needle: str) -> bool:
    return needle in (haystack or "").lower()


def matches(prop: Property, filters: PropertyFilter) -> bool:
    """Return True when ``prop`` satisfies every constraint in ``filters``."""
    if filters.property_type and filters.property_type != "all":
        if prop.property_type != filters.property_type:
            return False

    if filters.city:
        needle = filters.city.strip().lower()
        if needle and not (_contains(prop.city, needle) or _contains(prop.location, needle)):
            return False

    if filters.min_price is not None and prop.price_per_night < filters.min_price:
        return False
    if filters.max_price is not None and prop.price_per_night > filters.max_price:
        return False

    if filters.rating is not None and prop.rating < filters.rating:
        return False

    if filters.amenities:
        available = {tag.lower() for tag in prop.amenities or []}
        if not all(tag.lower() in available for tag in filters.amenities):
            return False

    if filters.search:
        needle = filters.search.strip().lower()
        if needle and not _contains(prop.name, needle):
            return False

    if filters.owner_id is not None and prop.owner_id != filters.owner_id:
        return False

    return True


def sort_properties(properties: Iterable[P]) -> list[P]:
    """Order featured listings first, then by rating, highest first."""
    return sorted(properties, key=lambda p: (not p.featured, -p.rating))


def filter_properties(properties: Iterable[P], filters: PropertyFilter | None = None) -> list[P]:
    """Apply ``filters`` to ``properties`` and return the ordered matches."""
    if filters is None:
        return sort_properties(properties)
    return sort_properties(p for p in properties if matches(p, filters))


def distinct_amenities(properties: Iterable[Property]) -> list[str]:
    """Every amenity tag in use, once, sorted case-insensitively.

    Tags differing only by case are reported once, using the spelling seen
    first.
    """
    seen: dict[str, str] = {}
    for prop in properties:
        for tag in prop.amenities or []:
            seen.setdefault(tag.lower(), tag)
    return sorted(seen.values(), key=str.lower)
