from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from ..config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig
from ..entities.models import Bar, BusinessEntity, Cafe, EcoLodge, Hotel, Rental, Restaurant, StreetFood
from ..engine.query import ALL
from . import bars, cafes, eco_lodges, hotels, rentals, restaurants, street_food
from .base import Catalog, CatalogTaxonomy
from .data_store import CatalogDataError, load_items

logger = logging.getLogger(__name__)


class CatalogKind(str, Enum):
    hotels = "hotels"
    restaurants = "restaurants"
    bars = "bars"
    cafes = "cafes"
    street_food = "street-food"
    eco_lodges = "eco-lodges"
    rentals = "rentals"


# kind -> (variant model, catalog factory)
_BUILDERS: dict[CatalogKind, tuple[type[BusinessEntity], Callable[..., Catalog[Any]]]] = {
    CatalogKind.hotels: (Hotel, hotels.build_hotel_catalog),
    CatalogKind.restaurants: (Restaurant, restaurants.build_restaurant_catalog),
    CatalogKind.bars: (Bar, bars.build_bar_catalog),
    CatalogKind.cafes: (Cafe, cafes.build_cafe_catalog),
    CatalogKind.street_food: (StreetFood, street_food.build_street_food_catalog),
    CatalogKind.eco_lodges: (EcoLodge, eco_lodges.build_eco_lodge_catalog),
    CatalogKind.rentals: (Rental, rentals.build_rental_catalog),
}


@dataclass(frozen=True)
class SearchHit:
    kind: CatalogKind
    entity: BusinessEntity


class CatalogRegistry:
    """One catalog per kind, built once and handed to callers."""

    def __init__(self, catalogs: dict[CatalogKind, Catalog[Any]]) -> None:
        self._catalogs = dict(catalogs)

    def kinds(self) -> list[CatalogKind]:
        return list(self._catalogs)

    def get(self, kind: CatalogKind | str) -> Catalog[Any]:
        """Return the catalog for *kind*; ``KeyError`` for an unknown kind."""
        try:
            return self._catalogs[CatalogKind(kind)]
        except ValueError:
            raise KeyError(kind) from None

    def taxonomy(self, kind: CatalogKind | str) -> CatalogTaxonomy:
        return self.get(kind).taxonomy

    @property
    def hotels(self) -> Catalog[Hotel]:
        return self.get(CatalogKind.hotels)

    @property
    def restaurants(self) -> Catalog[Restaurant]:
        return self.get(CatalogKind.restaurants)

    @property
    def bars(self) -> Catalog[Bar]:
        return self.get(CatalogKind.bars)

    @property
    def cafes(self) -> Catalog[Cafe]:
        return self.get(CatalogKind.cafes)

    @property
    def street_food(self) -> Catalog[StreetFood]:
        return self.get(CatalogKind.street_food)

    @property
    def eco_lodges(self) -> Catalog[EcoLodge]:
        return self.get(CatalogKind.eco_lodges)

    @property
    def rentals(self) -> Catalog[Rental]:
        return self.get(CatalogKind.rentals)

    def search_all(
        self,
        query: str,
        locale: str,
        sort_by: str = "featured",
        kinds: Iterable[CatalogKind | str] | None = None,
    ) -> list[SearchHit]:
        """Text search across catalogs; hits grouped by kind, each group sorted."""
        selected = list(kinds) if kinds else self.kinds()
        hits: list[SearchHit] = []
        for requested in selected:
            catalog = self.get(requested)
            kind = CatalogKind(requested)
            found = catalog.search_and_sort(query, ALL, ALL, ALL, (), (), sort_by, locale)
            hits.extend(SearchHit(kind=kind, entity=item) for item in found)
        return hits


def build_registry(config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG) -> CatalogRegistry:
    catalogs: dict[CatalogKind, Catalog[Any]] = {}
    for kind, (model, factory) in _BUILDERS.items():
        try:
            items = load_items(kind.value, model, config.data_dir)
        except CatalogDataError:
            logger.error("Could not load the %s catalog from %s", kind.value, config.data_dir, exc_info=True)
            raise
        catalogs[kind] = factory(items)
    logger.info("Catalog registry ready: %s", ", ".join(f"{k.value}={len(c)}" for k, c in catalogs.items()))
    return CatalogRegistry(catalogs)
