from __future__ import annotations

from typing import Iterable, Sequence

from ..entities.helpers import get_description, get_name, localized
from ..entities.models import Cafe
from ..engine.query import ALL, CatalogStrategy
from .base import Catalog, CatalogTaxonomy, options

KIND = "cafes"

CAFE_TYPE_OPTIONS = options(
    ("specialty-coffee", "Café Especialidad", "Specialty Coffee"),
    ("traditional", "Tradicional", "Traditional"),
    ("artisan", "Artesanal", "Artisan"),
    ("bakery-cafe", "Panadería Café", "Bakery Cafe"),
    ("traditional-bakery", "Panadería Tradicional", "Traditional Bakery"),
    ("roastery", "Tostadora", "Roastery"),
    ("organic", "Orgánico", "Organic"),
)

CAFE_TAXONOMY = CatalogTaxonomy(
    categories=CAFE_TYPE_OPTIONS,
    atmospheres=options(
        ("cozy", "Acogedor", "Cozy"),
        ("modern", "Moderno", "Modern"),
        ("traditional", "Tradicional", "Traditional"),
        ("artistic", "Artístico", "Artistic"),
        ("minimalist", "Minimalista", "Minimalist"),
        ("rustic", "Rústico", "Rustic"),
        ("casual", "Casual", "Casual"),
        ("family", "Familiar", "Family"),
    ),
)


def cafe_type_id(cafe: Cafe) -> str | None:
    """Resolve the stored display label to a cafe-type id.

    First table row whose label contains the stored label (either locale,
    case-insensitive) wins; ``None`` when no row does.
    """
    stored_es = cafe.cafe_type.es.lower()
    stored_en = cafe.cafe_type.en.lower()
    for option in CAFE_TYPE_OPTIONS:
        if (stored_es and stored_es in option.label.es.lower()) or (
            stored_en and stored_en in option.label.en.lower()
        ):
            return option.id
    return None


def matches_category(cafe: Cafe, cafe_type: str) -> bool:
    return cafe_type_id(cafe) == cafe_type


def matches_atmosphere(cafe: Cafe, atmosphere: str) -> bool:
    return cafe.atmosphere == atmosphere


CAFE_STRATEGY: CatalogStrategy[Cafe] = CatalogStrategy(
    entity_name=get_name,
    entity_description=get_description,
    matches_category=matches_category,
    matches_atmosphere=matches_atmosphere,
)


def build_cafe_catalog(items: Sequence[Cafe]) -> Catalog[Cafe]:
    return Catalog(
        KIND,
        items,
        CAFE_STRATEGY,
        CAFE_TAXONOMY,
        category_of=cafe_type_id,
        atmosphere_of=lambda c: c.atmosphere,
    )


def search_cafes(
    catalog: Catalog[Cafe],
    query: str = "",
    cafe_type: str = ALL,
    atmosphere: str = ALL,
    price_range: str = ALL,
    dietary: Iterable[str] = (),
) -> list[Cafe]:
    return catalog.search(query, cafe_type, atmosphere, price_range, dietary)


def get_cafes_by_type(catalog: Catalog[Cafe], cafe_type: str) -> list[Cafe]:
    return catalog.get_by_category(cafe_type)


def get_cafe_type(cafe: Cafe, locale: str) -> str:
    return localized(cafe.cafe_type, locale, "")
