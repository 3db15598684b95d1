from __future__ import annotations

from typing import Iterable, Sequence

from ..entities.helpers import get_description, get_name, localized
from ..entities.models import StreetFood
from ..engine.query import ALL, CatalogStrategy
from .base import Catalog, CatalogTaxonomy, options

KIND = "street-food"

FOOD_TYPE_OPTIONS = options(
    ("tacos", "Tacos", "Tacos"),
    ("quesadillas", "Quesadillas", "Quesadillas"),
    ("antojitos", "Antojitos", "Snacks"),
    ("desserts", "Postres", "Desserts"),
    ("beverages", "Bebidas", "Beverages"),
    ("tamales", "Tamales", "Tamales"),
    ("corn", "Elotes y Esquites", "Corn & Corn Cups"),
)

# Food-type id -> keywords looked for in the English type label.
TYPE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "tacos": ("taco",),
    "quesadillas": ("quesadilla",),
    "antojitos": ("snack", "antojito"),
    "desserts": ("dessert", "churro"),
    "beverages": ("beverage", "drink", "water"),
    "tamales": ("tamal",),
    "corn": ("corn",),
}

STREET_FOOD_TAXONOMY = CatalogTaxonomy(
    categories=FOOD_TYPE_OPTIONS,
    atmospheres=options(
        ("street-cart", "Carrito Callejero", "Street Cart"),
        ("market-stall", "Puesto de Mercado", "Market Stall"),
        ("food-truck", "Food Truck", "Food Truck"),
        ("tianguis", "Tianguis", "Street Market"),
        ("plaza", "Plaza", "Plaza"),
    ),
)


def matches_category(stall: StreetFood, food_type: str) -> bool:
    keywords = TYPE_KEYWORDS.get(food_type)
    if keywords is None:
        return False
    label = stall.type.en.lower()
    return any(keyword in label for keyword in keywords)


def matches_atmosphere(stall: StreetFood, venue_type: str) -> bool:
    return stall.venue_type == venue_type


def food_type_id(stall: StreetFood) -> str | None:
    for option in FOOD_TYPE_OPTIONS:
        if matches_category(stall, option.id):
            return option.id
    return None


STREET_FOOD_STRATEGY: CatalogStrategy[StreetFood] = CatalogStrategy(
    entity_name=get_name,
    entity_description=get_description,
    matches_category=matches_category,
    matches_atmosphere=matches_atmosphere,
)


def build_street_food_catalog(items: Sequence[StreetFood]) -> Catalog[StreetFood]:
    return Catalog(
        KIND,
        items,
        STREET_FOOD_STRATEGY,
        STREET_FOOD_TAXONOMY,
        category_of=food_type_id,
        atmosphere_of=lambda s: s.venue_type,
    )


def get_local_favorites(catalog: Catalog[StreetFood]) -> list[StreetFood]:
    return [stall for stall in catalog.get_all() if stall.local_favorite]


def search_street_food(
    catalog: Catalog[StreetFood],
    query: str = "",
    food_type: str = ALL,
    venue_type: str = ALL,
    price_range: str = ALL,
    dietary: Iterable[str] = (),
    local_favorite_only: bool = False,
) -> list[StreetFood]:
    found = catalog.search(query, food_type, venue_type, price_range, dietary)
    if local_favorite_only:
        return [stall for stall in found if stall.local_favorite]
    return found


def get_street_food_type(stall: StreetFood, locale: str) -> str:
    return localized(stall.type, locale, "")


def get_street_food_location(stall: StreetFood, locale: str) -> str:
    return localized(stall.location, locale, "")
