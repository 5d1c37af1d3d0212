"""Contract tests run against both the in-memory and the SQL repositories."""

import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone

import pytest

from spacemate.errors import NotFoundError
from spacemate.models.booking import CANCELLED, CONFIRMED
from spacemate.repositories import (
    BookingRepository,
    InMemoryStore,
    PropertyRepository,
    SqlBookingRepository,
    SqlPropertyRepository,
)
from spacemate.schemas.property import PropertyFilter


@dataclass
class Repos:
    properties: PropertyRepository
    bookings: BookingRepository


@pytest.fixture(params=["memory", "sql"])
def repos(request, sql_session) -> Repos:
    if request.param == "memory":
        store = InMemoryStore()
        return Repos(store.properties, store.bookings)
    return Repos(SqlPropertyRepository(sql_session), SqlBookingRepository(sql_session))


def _listing(**overrides) -> dict:
    return {
        "name": "Skyline Hotel",
        "property_type": "hotel",
        "description": "Central hotel",
        "location": "Connaught Place",
        "city": "New Delhi",
        "price_per_night": 150,
        "rating": 4,
        **overrides,
    }


async def _book(repos: Repos, property_id: uuid.UUID, user_id: str = "user_a", day: int = 1):
    return await repos.bookings.create(
        {
            "property_id": property_id,
            "user_id": user_id,
            "check_in": date(2024, 5, day),
            "check_out": date(2024, 5, day + 2),
            "guests": 2,
            "total_price": 300,
        }
    )


class TestPropertyRepository:
    async def test_create_applies_defaults(self, repos: Repos):
        prop = await repos.properties.create(
            {
                "name": "Bare Office",
                "property_type": "office",
                "description": "Desk space",
                "city": "Pune",
                "price_per_night": 20,
            }
        )
        assert isinstance(prop.id, uuid.UUID)
        assert prop.rating == 0
        assert prop.review_count == 0
        assert prop.images == []
        assert prop.amenities == []
        assert prop.featured is False
        assert prop.owner_id is None
        assert prop.location == ""

    async def test_get_by_id(self, repos: Repos):
        prop = await repos.properties.create(_listing())
        fetched = await repos.properties.get_by_id(prop.id)
        assert fetched.id == prop.id
        assert fetched.name == "Skyline Hotel"

    async def test_get_by_id_missing(self, repos: Repos):
        with pytest.raises(NotFoundError):
            await repos.properties.get_by_id(uuid.uuid4())

    async def test_get_by_owner(self, repos: Repos):
        await repos.properties.create(_listing(name="Mine", owner_id="owner_1"))
        await repos.properties.create(_listing(name="Theirs", owner_id="owner_2"))
        await repos.properties.create(_listing(name="Seed"))

        owned = await repos.properties.get_by_owner("owner_1")
        assert [p.name for p in owned] == ["Mine"]

    async def test_list_filters_and_orders(self, repos: Repos):
        await repos.properties.create(_listing(name="Plain 5", rating=5))
        await repos.properties.create(_listing(name="Featured 3", rating=3, featured=True))
        await repos.properties.create(_listing(name="Office", property_type="office", city="Austin"))
        await repos.properties.create(_listing(name="Plain 4", rating=4, amenities=["WiFi"]))

        hotels = await repos.properties.list(PropertyFilter(property_type="hotel"))
        assert [p.name for p in hotels] == ["Featured 3", "Plain 5", "Plain 4"]

        austin = await repos.properties.list(PropertyFilter(city="AUSTIN"))
        assert [p.name for p in austin] == ["Office"]

    async def test_list_amenities_all_of(self, repos: Repos):
        await repos.properties.create(_listing(name="Wifi only", amenities=["WiFi"]))
        await repos.properties.create(_listing(name="Both", amenities=["WiFi", "Parking"]))

        results = await repos.properties.list(PropertyFilter(amenities=["WiFi", "Parking"]))
        assert [p.name for p in results] == ["Both"]

    async def test_city_filter_escapes_wildcards(self, repos: Repos):
        await repos.properties.create(_listing(name="Hotel", city="Goa"))
        assert await repos.properties.list(PropertyFilter(city="%")) == []

    async def test_delete(self, repos: Repos):
        prop = await repos.properties.create(_listing())
        await repos.properties.delete(prop.id)
        with pytest.raises(NotFoundError):
            await repos.properties.get_by_id(prop.id)

    async def test_delete_missing(self, repos: Repos):
        with pytest.raises(NotFoundError):
            await repos.properties.delete(uuid.uuid4())

    async def test_list_amenities(self, repos: Repos):
        await repos.properties.create(_listing(amenities=["Pool", "WiFi"]))
        await repos.properties.create(_listing(amenities=["Coffee", "WiFi"]))
        assert await repos.properties.list_amenities() == ["Coffee", "Pool", "WiFi"]


class TestBookingRepository:
    async def test_create_sets_confirmed(self, repos: Repos):
        prop = await repos.properties.create(_listing())
        booking = await _book(repos, prop.id)

        assert isinstance(booking.id, uuid.UUID)
        assert booking.status == CONFIRMED
        assert booking.payment_method == "cash"
        assert booking.created_at is not None

    async def test_get_by_id_missing(self, repos: Repos):
        with pytest.raises(NotFoundError):
            await repos.bookings.get_by_id(uuid.uuid4())

    async def test_list_by_user_enriched(self, repos: Repos):
        prop = await repos.properties.create(_listing(images=["/a.png"]))
        await _book(repos, prop.id, user_id="user_a")
        await _book(repos, prop.id, user_id="user_b")

        bookings = await repos.bookings.list_by_user("user_a")

        assert len(bookings) == 1
        snapshot = bookings[0].property
        assert snapshot.id == prop.id
        assert snapshot.name == "Skyline Hotel"
        assert snapshot.city == "New Delhi"
        assert snapshot.location == "Connaught Place"
        assert snapshot.property_type == "hotel"
        assert snapshot.images == ["/a.png"]

    async def test_list_by_user_newest_first(self, repos: Repos):
        prop = await repos.properties.create(_listing())
        first = await _book(repos, prop.id, day=1)
        second = await _book(repos, prop.id, day=10)

        bookings = await repos.bookings.list_by_user("user_a")
        assert [b.id for b in bookings] == [second.id, first.id]

    async def test_list_by_user_skips_deleted_property(self, repos: Repos):
        kept = await repos.properties.create(_listing(name="Kept"))
        gone = await repos.properties.create(_listing(name="Gone"))
        await _book(repos, kept.id)
        orphan = await _book(repos, gone.id, day=5)

        await repos.properties.delete(gone.id)

        bookings = await repos.bookings.list_by_user("user_a")
        assert [b.property.name for b in bookings] == ["Kept"]
        # the booking itself is kept
        assert (await repos.bookings.get_by_id(orphan.id)).id == orphan.id

    async def test_cancel(self, repos: Repos):
        prop = await repos.properties.create(_listing())
        booking = await _book(repos, prop.id)

        cancelled = await repos.bookings.cancel(booking.id)
        again = await repos.bookings.cancel(booking.id)

        assert cancelled.status == CANCELLED
        assert again.status == CANCELLED
        assert (await repos.bookings.get_by_id(booking.id)).status == CANCELLED

    async def test_cancel_missing(self, repos: Repos):
        with pytest.raises(NotFoundError):
            await repos.bookings.cancel(uuid.uuid4())


class TestSqlOrderingTies:
    async def test_same_timestamp_falls_back_to_id(self, sql_session):
        properties = SqlPropertyRepository(sql_session)
        stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        created = [
            await properties.create(_listing(name=f"Twin {i}", owner_id="owner_1", created_at=stamp))
            for i in range(5)
        ]
        expected = [p.id for p in sorted(created, key=lambda p: p.id.hex)]

        assert [p.id for p in await properties.list()] == expected
        assert [p.id for p in await properties.get_by_owner("owner_1")] == expected
        # repeated queries agree
        assert [p.id for p in await properties.list()] == expected

    async def test_same_timestamp_bookings_newest_first_by_id(self, sql_session):
        properties = SqlPropertyRepository(sql_session)
        bookings = SqlBookingRepository(sql_session)
        prop = await properties.create(_listing())
        stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        created = []
        for day in (1, 3, 5):
            created.append(
                await bookings.create(
                    {
                        "property_id": prop.id,
                        "user_id": "user_a",
                        "check_in": date(2024, 5, day),
                        "check_out": date(2024, 5, day + 1),
                        "total_price": 150,
                        "created_at": stamp,
                    }
                )
            )

        listed = await bookings.list_by_user("user_a")
        assert [b.id for b in listed] == [b.id for b in sorted(created, key=lambda b: b.id.hex, reverse=True)]
