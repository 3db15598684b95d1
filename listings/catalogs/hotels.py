from __future__ import annotations

from typing import Iterable, Sequence

from pydantic import BaseModel

from ..entities.helpers import get_description, get_name
from ..entities.models import Hotel
from ..engine.query import ALL, CatalogStrategy
from .base import Catalog, CatalogTaxonomy, filter_flags, options

KIND = "hotels"

HOTEL_TAXONOMY = CatalogTaxonomy(
    categories=options(
        ("boutique", "Boutique", "Boutique"),
        ("resort", "Resort", "Resort"),
        ("eco", "Eco-Lodge", "Eco-Lodge"),
        ("luxury", "Lujo", "Luxury"),
        ("budget", "Económico", "Budget"),
        ("hostel", "Hostal", "Hostel"),
        ("business", "Negocios", "Business"),
        ("wellness", "Bienestar", "Wellness"),
        ("romantic", "Romántico", "Romantic"),
        ("historic", "Histórico", "Historic"),
    ),
    amenities=options(
        ("pool", "Piscina", "Pool"),
        ("spa", "Spa", "Spa"),
        ("gym", "Gimnasio", "Gym"),
        ("restaurant", "Restaurante", "Restaurant"),
        ("bar", "Bar", "Bar"),
        ("parking", "Estacionamiento", "Parking"),
        ("wifi", "WiFi", "WiFi"),
        ("breakfast", "Desayuno", "Breakfast"),
    ),
)


class HotelFeatures(BaseModel):
    sustainability: bool | None = None
    pet_friendly: bool | None = None
    adults_only: bool | None = None


def matches_category(hotel: Hotel, category: str) -> bool:
    return hotel.category == category


def matches_atmosphere(hotel: Hotel, atmosphere: str) -> bool:
    # Hotels have no second classification axis.
    return False


HOTEL_STRATEGY: CatalogStrategy[Hotel] = CatalogStrategy(
    entity_name=get_name,
    entity_description=get_description,
    matches_category=matches_category,
    matches_atmosphere=matches_atmosphere,
)


def build_hotel_catalog(items: Sequence[Hotel]) -> Catalog[Hotel]:
    return Catalog(
        KIND,
        items,
        HOTEL_STRATEGY,
        HOTEL_TAXONOMY,
        category_of=lambda h: h.category,
    )


def search_hotels(
    catalog: Catalog[Hotel],
    query: str = "",
    category: str = ALL,
    price_range: str = ALL,
    amenities: Iterable[str] = (),
    features: HotelFeatures | None = None,
) -> list[Hotel]:
    found = catalog.search(query, category, ALL, price_range, (), amenities)
    if features is None:
        return found
    return filter_flags(found, **features.model_dump())


def get_hotels_by_neighborhood(catalog: Catalog[Hotel], neighborhood: str) -> list[Hotel]:
    wanted = neighborhood.strip().lower()
    return [h for h in catalog.get_all() if h.neighborhood and h.neighborhood.lower() == wanted]
