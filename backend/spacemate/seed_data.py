"""Demo catalogue: six hotels and five office spaces with no owner.

Loaded into the in-memory store at startup (``SEED_DEMO_DATA``) and into the
database by ``scripts/seed_data.py``.
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from spacemate.models.property import Property
from spacemate.repositories.sql import SqlPropertyRepository

_HOTEL_ROOM = "/assets/images/modern_hotel_room.png"
_COWORKING = "/assets/images/modern_coworking_space.png"
_HOTEL_EXTERIOR = "/assets/images/boutique_hotel_exterior.png"
_HOTEL_POOL = "/assets/images/hotel_pool_amenity.png"
_PRIVATE_OFFICE = "/assets/images/private_office_space.png"

DEMO_PROPERTIES: list[dict[str, Any]] = [
    {
        "name": "Grand Luxe Hotel & Spa",
        "property_type": "hotel",
        "description": (
            "Experience unparalleled luxury in the heart of the city. Our 5-star hotel features "
            "elegantly appointed rooms with stunning city views, a world-class spa, rooftop pool, "
            "and award-winning dining."
        ),
        "location": "Downtown District",
        "city": "New York",
        "price_per_night": 350,
        "rating": 5,
        "review_count": 1247,
        "images": [_HOTEL_EXTERIOR, _HOTEL_ROOM, _HOTEL_POOL],
        "amenities": ["WiFi", "Parking", "Pool", "Gym", "Restaurant", "Room Service", "Spa", "Breakfast"],
        "max_guests": 4,
        "featured": True,
    },
    {
        "name": "Sunset Beach Resort",
        "property_type": "hotel",
        "description": (
            "Wake up to the sound of waves at our beachfront paradise, with direct beach access, "
            "multiple pools and oceanview rooms with private balconies."
        ),
        "location": "Beachfront Avenue",
        "city": "Miami",
        "price_per_night": 280,
        "rating": 5,
        "review_count": 892,
        "images": [_HOTEL_POOL, _HOTEL_ROOM, _HOTEL_EXTERIOR],
        "amenities": ["WiFi", "Parking", "Pool", "Gym", "Restaurant", "Breakfast"],
        "max_guests": 3,
        "featured": True,
    },
    {
        "name": "Metropolitan Business Hotel",
        "property_type": "hotel",
        "description": (
            "Located in the financial district, with ergonomic workspaces, high-speed internet "
            "and express check-in/out for business travellers."
        ),
        "location": "Financial District",
        "city": "San Francisco",
        "price_per_night": 220,
        "rating": 4,
        "review_count": 634,
        "images": [_HOTEL_ROOM, _HOTEL_EXTERIOR],
        "amenities": ["WiFi", "Parking", "Gym", "Restaurant", "Breakfast"],
        "max_guests": 2,
    },
    {
        "name": "Boutique Garden Inn",
        "property_type": "hotel",
        "description": (
            "Charm and tranquility surrounded by lush gardens. Each uniquely decorated room "
            "combines vintage elegance with modern comfort."
        ),
        "location": "Garden Quarter",
        "city": "Charleston",
        "price_per_night": 180,
        "rating": 5,
        "review_count": 421,
        "images": [_HOTEL_EXTERIOR, _HOTEL_ROOM, _HOTEL_POOL],
        "amenities": ["WiFi", "Parking", "Restaurant", "Breakfast"],
        "max_guests": 2,
    },
    {
        "name": "Urban Skyline Suites",
        "property_type": "hotel",
        "description": (
            "Luxury suites with panoramic views, a full kitchen, separate living area and "
            "floor-to-ceiling windows. Ideal for extended stays and families."
        ),
        "location": "Uptown",
        "city": "Chicago",
        "price_per_night": 320,
        "rating": 4,
        "review_count": 758,
        "images": [_HOTEL_ROOM, _HOTEL_EXTERIOR, _HOTEL_POOL],
        "amenities": ["WiFi", "Parking", "Gym", "Pool"],
        "max_guests": 6,
        "featured": True,
    },
    {
        "name": "Historic Plaza Hotel",
        "property_type": "hotel",
        "description": (
            "A restored historic landmark with ornate architecture and classic furnishings, "
            "steps away from museums, theaters and historic sites."
        ),
        "location": "Historic Center",
        "city": "Boston",
        "price_per_night": 260,
        "rating": 4,
        "review_count": 981,
        "images": [_HOTEL_EXTERIOR, _HOTEL_ROOM],
        "amenities": ["WiFi", "Parking", "Restaurant", "Gym", "Breakfast"],
        "max_guests": 2,
    },
    {
        "name": "Innovation Hub Coworking",
        "property_type": "office",
        "description": (
            "A vibrant coworking community with fiber internet, ergonomic workstations, private "
            "phone booths and 24/7 access."
        ),
        "location": "Tech District",
        "city": "Austin",
        "price_per_night": 45,
        "rating": 5,
        "review_count": 342,
        "images": [_COWORKING, _PRIVATE_OFFICE],
        "amenities": ["WiFi", "Coffee", "Meeting Rooms", "24/7 Access", "Printer", "Parking"],
        "max_occupancy": 50,
        "featured": True,
    },
    {
        "name": "Executive Office Suites",
        "property_type": "office",
        "description": (
            "Fully furnished private offices and meeting rooms with reception services, mail "
            "handling and administrative support."
        ),
        "location": "Business Park",
        "city": "Seattle",
        "price_per_night": 120,
        "rating": 5,
        "review_count": 198,
        "images": [_PRIVATE_OFFICE, _COWORKING],
        "amenities": ["WiFi", "Meeting Rooms", "Coffee", "Parking", "Printer", "Kitchen"],
        "max_occupancy": 8,
        "featured": True,
    },
    {
        "name": "Creative Studios Workspace",
        "property_type": "office",
        "description": (
            "Inspiring interiors, natural light and flexible layouts for designers, artists and "
            "creative agencies, including a photography studio."
        ),
        "location": "Arts District",
        "city": "Los Angeles",
        "price_per_night": 65,
        "rating": 4,
        "review_count": 267,
        "images": [_COWORKING, _PRIVATE_OFFICE],
        "amenities": ["WiFi", "Coffee", "Meeting Rooms", "Lounge", "Parking"],
        "max_occupancy": 30,
    },
    {
        "name": "Downtown Flex Space",
        "property_type": "office",
        "description": (
            "Affordable hot desks, dedicated desks and small private offices in the heart of "
            "downtown, without long-term commitments."
        ),
        "location": "Downtown Core",
        "city": "Denver",
        "price_per_night": 35,
        "rating": 4,
        "review_count": 445,
        "images": [_COWORKING, _PRIVATE_OFFICE],
        "amenities": ["WiFi", "Coffee", "Meeting Rooms", "Printer", "Kitchen"],
        "max_occupancy": 40,
    },
    {
        "name": "Green Valley Shared Office",
        "property_type": "office",
        "description": (
            "An eco-friendly, solar-powered office with standing desks, a meditation room and an "
            "outdoor terrace workspace."
        ),
        "location": "Green Valley",
        "city": "Portland",
        "price_per_night": 55,
        "rating": 5,
        "review_count": 312,
        "images": [_PRIVATE_OFFICE, _COWORKING],
        "amenities": ["WiFi", "Coffee", "Meeting Rooms", "Lounge", "Parking", "24/7 Access"],
        "max_occupancy": 25,
        "featured": True,
    },
]


async def seed_database(session: AsyncSession) -> int:
    """Insert the demo catalogue unless ownerless demo listings already exist.

    Returns the number of properties inserted.
    """
    result = await session.execute(
        select(func.count()).select_from(Property).where(Property.owner_id.is_(None))
    )
    if result.scalar_one():
        return 0

    repo = SqlPropertyRepository(session)
    for data in DEMO_PROPERTIES:
        await repo.create(data)
    return len(DEMO_PROPERTIES)
