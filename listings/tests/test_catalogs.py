from __future__ import annotations

import pytest

from listings.catalogs.bars import search_bars, serves_any
from listings.catalogs.base import Catalog, DuplicateEntityError, filter_flags
from listings.catalogs.cafes import cafe_type_id, get_cafe_type, get_cafes_by_type, search_cafes
from listings.catalogs.eco_lodges import EcoLodgeFeatures, search_eco_lodges
from listings.catalogs.hotels import (
    HOTEL_STRATEGY,
    HOTEL_TAXONOMY,
    HotelFeatures,
    build_hotel_catalog,
    get_hotels_by_neighborhood,
    search_hotels,
)
from listings.catalogs.registry import CatalogKind
from listings.catalogs.rentals import RentalFeatures, search_rentals
from listings.catalogs.restaurants import cuisine_id, get_restaurant_cuisine
from listings.catalogs.street_food import (
    food_type_id,
    get_local_favorites,
    get_street_food_location,
    search_street_food,
)


def _ids(items):
    return [item.id for item in items]


# ── Generic catalog service ──────────────────────────────────────────────


class TestCatalogLookups:
    @pytest.mark.parametrize("kind", list(CatalogKind))
    def test_slug_round_trip(self, registry, kind):
        catalog = registry.get(kind)
        assert len(catalog) > 0
        for item in catalog.get_all():
            assert catalog.get_by_slug(item.slug) is item
            assert catalog.get_by_id(item.id) is item

    def test_missing_lookups_return_none(self, registry):
        assert registry.hotels.get_by_id("nope") is None
        assert registry.hotels.get_by_slug("nope") is None

    def test_get_all_returns_a_fresh_list(self, registry):
        first = registry.bars.get_all()
        first.clear()
        assert len(registry.bars.get_all()) == 5

    def test_get_featured(self, registry):
        assert _ids(registry.bars.get_featured()) == ["1", "2", "5"]

    def test_get_by_category_all_returns_everything(self, registry):
        assert len(registry.hotels.get_by_category("all")) == len(registry.hotels)

    def test_get_by_price_range(self, registry):
        assert _ids(registry.bars.get_by_price_range("$")) == ["1", "4"]

    def test_localized_readers(self, registry):
        casa = registry.restaurants.get_by_slug("la-casa-del-tepozteco")
        assert registry.restaurants.name(casa, "en") == "Tepozteco House Restaurant"
        assert registry.restaurants.hours(casa, "es") == "Lun-Dom: 8:00-22:00"
        assert "Red Pozole" in registry.restaurants.specialties(casa, "en")


class TestCatalogConstruction:
    def test_duplicate_ids_rejected(self, hotel):
        with pytest.raises(DuplicateEntityError, match="id"):
            build_hotel_catalog([hotel("same"), hotel("same")])

    def test_duplicate_slugs_rejected(self, hotel):
        with pytest.raises(DuplicateEntityError, match="slug"):
            build_hotel_catalog([hotel("a", slug="dup"), hotel("b", slug="dup")])

    def test_empty_catalog(self):
        catalog = Catalog("hotels", [], HOTEL_STRATEGY, HOTEL_TAXONOMY)
        assert catalog.get_all() == []
        assert catalog.search_and_sort(query="anything") == []


def test_filter_flags_ignores_unset_flags(hotel):
    items = [hotel("a", pet_friendly=True), hotel("b", pet_friendly=False)]
    assert _ids(filter_flags(items, pet_friendly=None)) == ["a", "b"]
    assert _ids(filter_flags(items, pet_friendly=True)) == ["a"]


def test_taxonomy_labels(registry):
    taxonomy = registry.taxonomy("bars")
    assert taxonomy.label("categories", "mezcaleria", "en") == "Mezcal Bar"
    assert taxonomy.label("drinks", "champagne", "es") == "Champaña"
    assert taxonomy.label("categories", "nope", "en") is None


# ── Hotels ───────────────────────────────────────────────────────────────


class TestHotels:
    def test_category(self, registry):
        assert _ids(search_hotels(registry.hotels, category="luxury")) == ["amomoxtli", "quinta-los-amates"]

    def test_features_second_pass(self, registry):
        found = search_hotels(registry.hotels, features=HotelFeatures(sustainability=True, pet_friendly=True))
        assert _ids(found) == ["eco-hotel-ixquenda", "hostal-de-la-luz"]

    def test_amenities_and_price(self, registry):
        found = search_hotels(registry.hotels, price_range="$$$$", amenities=["spa", "gym"])
        assert _ids(found) == ["amomoxtli", "quinta-los-amates"]

    def test_by_neighborhood(self, registry):
        assert _ids(get_hotels_by_neighborhood(registry.hotels, " valle atongo ")) == ["amomoxtli"]


# ── Restaurants ──────────────────────────────────────────────────────────


class TestRestaurants:
    @pytest.mark.parametrize("cuisine", ["mexicana-contemporanea", "contemporary-mexican"])
    def test_cuisine_matches_either_locale(self, registry, cuisine):
        assert _ids(registry.restaurants.search(category=cuisine)) == ["1"]

    def test_cuisine_id(self, registry):
        ids = [cuisine_id(r) for r in registry.restaurants.get_all()]
        assert ids == [
            "mexicana-contemporanea",
            "mexicana-tradicional",
            "organica-vegana",
            "fusion-internacional",
            "comida-callejera",
        ]

    def test_atmosphere_and_dietary(self, registry):
        found = registry.restaurants.search(atmosphere="casual", dietary=["vegan"])
        assert _ids(found) == ["3"]

    def test_cuisine_label(self, registry):
        assert get_restaurant_cuisine(registry.restaurants.get_by_id("4"), "es") == "Fusión Internacional"


# ── Bars ─────────────────────────────────────────────────────────────────


class TestBars:
    def test_drinks_are_a_union(self, registry):
        found = search_bars(registry.bars, drinks=["pulque", "champagne"])
        assert _ids(found) == ["1", "5"]

    def test_drinks_applied_after_shared_facets(self, registry):
        found = search_bars(registry.bars, atmosphere="traditional", drinks=["mezcal"])
        assert _ids(found) == ["4"]

    def test_no_drinks_keeps_everything(self, registry):
        assert len(serves_any(registry.bars.get_all(), [])) == 5

    def test_sorts(self, registry):
        bars = registry.bars
        assert _ids(bars.sort(bars.get_all(), "featured", "es")) == ["2", "5", "1", "3", "4"]
        assert _ids(bars.sort(bars.get_all(), "price", "es")) == ["1", "4", "3", "2", "5"]
        assert _ids(bars.sort(bars.get_all(), "name", "es")) == ["3", "4", "1", "2", "5"]


# ── Cafés ────────────────────────────────────────────────────────────────


class TestCafes:
    def test_label_lookup(self, registry):
        by_slug = {c.slug: cafe_type_id(c) for c in registry.cafes.get_all()}
        assert by_slug == {
            "cafe-tepoznieves": "specialty-coffee",
            "luna-cafe": "artisan",
            "cafe-del-arbol": "organic",
            "cafe-amate": "roastery",
            "panaderia-el-sol": "traditional-bakery",
        }

    def test_search_by_type_and_dietary(self, registry):
        assert _ids(search_cafes(registry.cafes, dietary=["vegan", "gluten-free"])) == ["cafe-del-arbol"]
        assert _ids(get_cafes_by_type(registry.cafes, "roastery")) == ["cafe-amate"]

    def test_type_label(self, registry):
        assert get_cafe_type(registry.cafes.get_by_id("cafe-amate"), "en") == "Roastery"


# ── Street food ──────────────────────────────────────────────────────────


class TestStreetFood:
    def test_keyword_categories(self, registry):
        ids = [food_type_id(s) for s in registry.street_food.get_all()]
        assert ids == ["tacos", "corn", "quesadillas", "desserts"]

    def test_unknown_food_type_matches_nothing(self, registry):
        assert search_street_food(registry.street_food, food_type="sushi") == []

    def test_venue_type_is_second_facet(self, registry):
        assert _ids(search_street_food(registry.street_food, venue_type="street-cart")) == ["1", "2"]

    def test_local_favorites(self, registry):
        assert _ids(get_local_favorites(registry.street_food)) == ["1", "2"]
        found = search_street_food(registry.street_food, dietary=["vegetarian"], local_favorite_only=True)
        assert _ids(found) == ["2"]

    def test_location_label(self, registry):
        stall = registry.street_food.get_by_id("3")
        assert get_street_food_location(stall, "en") == "Municipal Market, central aisle"


# ── Eco-lodges ───────────────────────────────────────────────────────────


class TestEcoLodges:
    def test_missing_slugs_are_derived_from_name(self, registry):
        assert registry.eco_lodges.get_by_slug("tubohotel-tepoztlan").id == "tubohotel-tepoztlan"
        assert registry.eco_lodges.get_by_slug("huehuecoyotl-ecovillage") is not None

    @pytest.mark.parametrize(
        "concept, expected",
        [
            ("natural", ["huehuecoyotl-ecovillage", "nido-del-arbol"]),
            ("modern", ["tubohotel-tepoztlan"]),
            ("luxurious", []),
            ("haunted", []),
        ],
    )
    def test_concept_table(self, registry, concept, expected):
        assert _ids(registry.eco_lodges.search(atmosphere=concept)) == expected

    def test_features(self, registry):
        found = search_eco_lodges(registry.eco_lodges, features=EcoLodgeFeatures(organic_food=True, adults_only=True))
        assert _ids(found) == ["nido-del-arbol"]


# ── Rentals ──────────────────────────────────────────────────────────────


class TestRentals:
    def test_features(self, registry):
        found = search_rentals(registry.rentals, features=RentalFeatures(instant_book=True, work_friendly=True))
        assert _ids(found) == ["casa-colonial-centro", "estudio-artista"]

    def test_category_and_amenities(self, registry):
        found = search_rentals(registry.rentals, category="villa", amenities=["pool"])
        assert _ids(found) == ["villa-vista-montana"]

    def test_no_atmosphere_axis(self, registry):
        assert registry.rentals.search(atmosphere="cozy") == []

    def test_room_info(self, registry):
        studio = registry.rentals.get_by_slug("estudio-del-artista")
        assert studio.room_info.max_guests == 2
        assert studio.room_info.price_per_night == 950
