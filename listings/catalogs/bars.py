from __future__ import annotations

from typing import Iterable, Sequence

from ..entities.helpers import get_description, get_name
from ..entities.models import Bar
from ..engine.query import ALL, CatalogStrategy
from .base import Catalog, CatalogTaxonomy, options

KIND = "bars"

DRINK_OPTIONS = options(
    ("beer", "Cerveza", "Beer"),
    ("wine", "Vino", "Wine"),
    ("cocktails", "Cócteles", "Cocktails"),
    ("pulque", "Pulque", "Pulque"),
    ("mezcal", "Mezcal", "Mezcal"),
    ("tequila", "Tequila", "Tequila"),
    ("craft-beer", "Cerveza Artesanal", "Craft Beer"),
    ("champagne", "Champaña", "Champagne"),
)

BAR_TAXONOMY = CatalogTaxonomy(
    categories=options(
        ("bar", "Bar", "Bar"),
        ("pulqueria", "Pulquería", "Pulqueria"),
        ("cantina", "Cantina", "Cantina"),
        ("mezcaleria", "Mezcalería", "Mezcal Bar"),
        ("cocktail-bar", "Bar de Cócteles", "Cocktail Bar"),
        ("sports-bar", "Bar Deportivo", "Sports Bar"),
    ),
    atmospheres=options(
        ("casual", "Casual", "Casual"),
        ("upscale", "Elegante", "Upscale"),
        ("traditional", "Tradicional", "Traditional"),
        ("modern", "Moderno", "Modern"),
        ("rustic", "Rústico", "Rustic"),
        ("party", "Fiesta", "Party"),
        ("family", "Familiar", "Family"),
    ),
    extras={"drinks": DRINK_OPTIONS},
)


def matches_category(bar: Bar, bar_type: str) -> bool:
    return bar.type == bar_type


def matches_atmosphere(bar: Bar, atmosphere: str) -> bool:
    return bar.atmosphere == atmosphere


BAR_STRATEGY: CatalogStrategy[Bar] = CatalogStrategy(
    entity_name=get_name,
    entity_description=get_description,
    matches_category=matches_category,
    matches_atmosphere=matches_atmosphere,
)


def build_bar_catalog(items: Sequence[Bar]) -> Catalog[Bar]:
    return Catalog(
        KIND,
        items,
        BAR_STRATEGY,
        BAR_TAXONOMY,
        category_of=lambda b: b.type,
        atmosphere_of=lambda b: b.atmosphere,
    )


def serves_any(bars: Iterable[Bar], drinks: Iterable[str]) -> list[Bar]:
    """Keep bars serving at least one of *drinks*; an empty request keeps all."""
    wanted = set(drinks)
    if not wanted:
        return list(bars)
    return [bar for bar in bars if wanted.intersection(bar.drinks)]


def search_bars(
    catalog: Catalog[Bar],
    query: str = "",
    bar_type: str = ALL,
    atmosphere: str = ALL,
    price_range: str = ALL,
    drinks: Iterable[str] = (),
) -> list[Bar]:
    found = catalog.search(query, bar_type, atmosphere, price_range)
    return serves_any(found, drinks)
