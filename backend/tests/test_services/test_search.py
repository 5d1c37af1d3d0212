"""Tests for the pure property search functions."""

import itertools
import uuid

import pytest

from spacemate.models.property import Property
from spacemate.repositories.base import property_defaults
from spacemate.schemas.property import PropertyFilter
from spacemate.seed_data import DEMO_PROPERTIES
from spacemate.services.search import distinct_amenities, filter_properties, matches, sort_properties


def _prop(**overrides) -> Property:
    """Helper: build a transient property with sensible defaults."""
    data = {
        "name": "Sample",
        "property_type": "hotel",
        "description": "desc",
        "city": "Pune",
        "price_per_night": 100,
        "rating": 3,
        **overrides,
    }
    return Property(id=uuid.uuid4(), **property_defaults(data))


@pytest.fixture
def catalogue() -> list[Property]:
    return [Property(id=uuid.uuid4(), **property_defaults(d)) for d in DEMO_PROPERTIES]


class TestPriceBounds:
    @pytest.mark.parametrize(
        ("min_price", "max_price"),
        [(0, 50), (40, 130), (100, 300), (180, 180), (0, 10_000), (300, 400)],
    )
    def test_every_result_within_bounds(self, catalogue, min_price, max_price):
        results = filter_properties(catalogue, PropertyFilter(min_price=min_price, max_price=max_price))
        assert all(min_price <= p.price_per_night <= max_price for p in results)
        expected = sum(1 for p in catalogue if min_price <= p.price_per_night <= max_price)
        assert len(results) == expected

    def test_bounds_are_inclusive(self):
        props = [_prop(price_per_night=100), _prop(price_per_night=200)]
        results = filter_properties(props, PropertyFilter(min_price=100, max_price=200))
        assert len(results) == 2

    def test_min_above_max_returns_nothing(self, catalogue):
        assert filter_properties(catalogue, PropertyFilter(min_price=300, max_price=100)) == []


class TestOrdering:
    def test_featured_then_rating_desc(self, catalogue):
        results = filter_properties(catalogue, PropertyFilter())
        for a, b in itertools.pairwise(results):
            assert (not a.featured, -a.rating) <= (not b.featured, -b.rating)

    def test_featured_beats_higher_rating(self):
        plain = _prop(name="plain", rating=5, featured=False)
        featured = _prop(name="featured", rating=2, featured=True)
        assert [p.name for p in sort_properties([plain, featured])] == ["featured", "plain"]

    def test_ties_keep_input_order(self):
        props = [_prop(name=f"p{i}", rating=4) for i in range(5)]
        assert [p.name for p in sort_properties(props)] == ["p0", "p1", "p2", "p3", "p4"]

    def test_no_filters_returns_everything_sorted(self, catalogue):
        assert len(filter_properties(catalogue)) == len(catalogue)


class TestCityFilter:
    def test_lowercase_city_matches(self):
        ny = _prop(name="NY", city="New York", property_type="hotel")
        austin = _prop(name="Austin", city="Austin", property_type="office")
        results = filter_properties([ny, austin], PropertyFilter(city="austin"))
        assert [p.name for p in results] == ["Austin"]

    def test_substring_match(self, catalogue):
        results = filter_properties(catalogue, PropertyFilter(city="san fran"))
        assert [p.city for p in results] == ["San Francisco"]

    def test_matches_location_field(self, catalogue):
        results = filter_properties(catalogue, PropertyFilter(city="tech district"))
        assert [p.name for p in results] == ["Innovation Hub Coworking"]

    def test_blank_city_is_ignored(self, catalogue):
        assert len(filter_properties(catalogue, PropertyFilter(city="   "))) == len(catalogue)


class TestAmenitiesFilter:
    def test_all_of_excludes_partial_match(self):
        wifi_only = _prop(name="wifi", amenities=["WiFi"])
        both = _prop(name="both", amenities=["WiFi", "Parking", "Pool"])
        results = filter_properties([wifi_only, both], PropertyFilter(amenities=["WiFi", "Parking"]))
        assert [p.name for p in results] == ["both"]

    def test_case_insensitive_tags(self):
        prop = _prop(amenities=["Meeting Rooms"])
        assert matches(prop, PropertyFilter(amenities=["meeting rooms"]))

    def test_empty_list_is_no_constraint(self):
        prop = _prop(amenities=[])
        assert matches(prop, PropertyFilter(amenities=[]))


class TestOtherFilters:
    def test_type_filter(self, catalogue):
        offices = filter_properties(catalogue, PropertyFilter(property_type="office"))
        assert offices and all(p.property_type == "office" for p in offices)

    def test_type_all_means_no_restriction(self, catalogue):
        assert len(filter_properties(catalogue, PropertyFilter(property_type="all"))) == len(catalogue)

    def test_rating_is_lower_bound(self, catalogue):
        results = filter_properties(catalogue, PropertyFilter(rating=5))
        assert results and all(p.rating == 5 for p in results)

    def test_search_matches_name_only(self):
        props = [_prop(name="Grand Plaza", city="Delhi"), _prop(name="Small Inn", city="Grandville")]
        results = filter_properties(props, PropertyFilter(search="GRAND"))
        assert [p.name for p in results] == ["Grand Plaza"]

    def test_owner_filter(self):
        mine = _prop(name="mine", owner_id="user_a")
        seed = _prop(name="seed")
        results = filter_properties([mine, seed], PropertyFilter(owner_id="user_a"))
        assert [p.name for p in results] == ["mine"]

    def test_combined_filters(self, catalogue):
        results = filter_properties(
            catalogue,
            PropertyFilter(property_type="hotel", max_price=300, amenities=["Pool"]),
        )
        assert [p.name for p in results] == ["Sunset Beach Resort"]


class TestDistinctAmenities:
    def test_deduplicates_and_sorts(self):
        props = [_prop(amenities=["WiFi", "Pool"]), _prop(amenities=["wifi", "Coffee"])]
        assert distinct_amenities(props) == ["Coffee", "Pool", "WiFi"]

    def test_empty_catalogue(self):
        assert distinct_amenities([]) == []
