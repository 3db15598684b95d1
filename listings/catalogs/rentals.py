from __future__ import annotations

from typing import Iterable, Sequence

from pydantic import BaseModel

from ..entities.helpers import get_description, get_name
from ..entities.models import Rental
from ..engine.query import ALL, CatalogStrategy
from .base import Catalog, CatalogTaxonomy, filter_flags, options

KIND = "rentals"

RENTAL_TAXONOMY = CatalogTaxonomy(
    categories=options(
        ("apartment", "Apartamento", "Apartment"),
        ("house", "Casa", "House"),
        ("villa", "Villa", "Villa"),
        ("studio", "Estudio", "Studio"),
        ("cabin", "Cabaña", "Cabin"),
        ("loft", "Loft", "Loft"),
    ),
    amenities=options(
        ("kitchen", "Cocina", "Kitchen"),
        ("wifi", "WiFi", "WiFi"),
        ("parking", "Estacionamiento", "Parking"),
        ("pool", "Piscina", "Pool"),
        ("garden", "Jardín", "Garden"),
        ("terrace", "Terraza", "Terrace"),
        ("ac", "Aire Acondicionado", "Air Conditioning"),
        ("heating", "Calefacción", "Heating"),
        ("washer", "Lavadora", "Washing Machine"),
        ("tv", "TV", "TV"),
        ("fireplace", "Chimenea", "Fireplace"),
    ),
)


class RentalFeatures(BaseModel):
    instant_book: bool | None = None
    pet_friendly: bool | None = None
    family_friendly: bool | None = None
    work_friendly: bool | None = None


def matches_category(rental: Rental, category: str) -> bool:
    return rental.category == category


def matches_atmosphere(rental: Rental, atmosphere: str) -> bool:
    # Rentals have no second classification axis.
    return False


RENTAL_STRATEGY: CatalogStrategy[Rental] = CatalogStrategy(
    entity_name=get_name,
    entity_description=get_description,
    matches_category=matches_category,
    matches_atmosphere=matches_atmosphere,
)


def build_rental_catalog(items: Sequence[Rental]) -> Catalog[Rental]:
    return Catalog(KIND, items, RENTAL_STRATEGY, RENTAL_TAXONOMY, category_of=lambda r: r.category)


def search_rentals(
    catalog: Catalog[Rental],
    query: str = "",
    category: str = ALL,
    price_range: str = ALL,
    amenities: Iterable[str] = (),
    features: RentalFeatures | None = None,
) -> list[Rental]:
    found = catalog.search(query, category, ALL, price_range, (), amenities)
    if features is None:
        return found
    return filter_flags(found, **features.model_dump())
