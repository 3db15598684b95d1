from __future__ import annotations

from typing import Sequence

from ..entities.helpers import generate_slug, get_description, get_name, localized
from ..entities.models import SUPPORTED_LOCALES, Restaurant
from ..engine.query import CatalogStrategy
from .base import Catalog, CatalogTaxonomy, options

KIND = "restaurants"

CUISINE_OPTIONS = options(
    ("mexicana-contemporanea", "Mexicana Contemporánea", "Contemporary Mexican"),
    ("mexicana-tradicional", "Mexicana Tradicional", "Traditional Mexican"),
    ("organica-vegana", "Orgánica Vegana", "Organic Vegan"),
    ("fusion-internacional", "Fusión Internacional", "International Fusion"),
    ("comida-callejera", "Comida Callejera", "Street Food"),
    ("cafeteria", "Cafetería", "Coffee House"),
)

RESTAURANT_TAXONOMY = CatalogTaxonomy(
    categories=CUISINE_OPTIONS,
    atmospheres=options(
        ("casual", "Casual", "Casual"),
        ("fine-dining", "Alta Cocina", "Fine Dining"),
        ("family", "Familiar", "Family"),
        ("romantic", "Romántico", "Romantic"),
        ("traditional", "Tradicional", "Traditional"),
        ("modern", "Moderno", "Modern"),
    ),
)


def cuisine_keys(restaurant: Restaurant) -> set[str]:
    """Slugged cuisine labels in both locales, e.g. ``"contemporary-mexican"``."""
    return {generate_slug(restaurant.cuisine.get(locale) or "") for locale in SUPPORTED_LOCALES}


def matches_category(restaurant: Restaurant, cuisine: str) -> bool:
    return cuisine in cuisine_keys(restaurant)


def matches_atmosphere(restaurant: Restaurant, atmosphere: str) -> bool:
    return restaurant.atmosphere == atmosphere


def cuisine_id(restaurant: Restaurant) -> str | None:
    keys = cuisine_keys(restaurant)
    for option in CUISINE_OPTIONS:
        if option.id in keys:
            return option.id
    return None


RESTAURANT_STRATEGY: CatalogStrategy[Restaurant] = CatalogStrategy(
    entity_name=get_name,
    entity_description=get_description,
    matches_category=matches_category,
    matches_atmosphere=matches_atmosphere,
)


def build_restaurant_catalog(items: Sequence[Restaurant]) -> Catalog[Restaurant]:
    return Catalog(
        KIND,
        items,
        RESTAURANT_STRATEGY,
        RESTAURANT_TAXONOMY,
        category_of=cuisine_id,
        atmosphere_of=lambda r: r.atmosphere,
    )


def get_restaurant_cuisine(restaurant: Restaurant, locale: str) -> str:
    return localized(restaurant.cuisine, locale, "")
