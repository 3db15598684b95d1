from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from ..entities.helpers import sort_entities
from ..entities.models import SUPPORTED_LOCALES, BusinessEntity

T = TypeVar("T", bound=BusinessEntity)

ALL = "all"


def _active(facet: str | None) -> bool:
    return bool(facet) and facet != ALL


@dataclass(frozen=True)
class CatalogStrategy(Generic[T]):
    """The four variant-specific hooks the shared engine is parameterised with."""

    entity_name: Callable[[T, str], str]
    entity_description: Callable[[T, str], str]
    matches_category: Callable[[T, str], bool]
    matches_atmosphere: Callable[[T, str], bool]


class QueryEngine(Generic[T]):
    """Filter and sort one catalog snapshot.

    The engine knows nothing about variant field names: category, the
    second ("atmosphere-like") facet and the display text all go through
    the injected strategy.
    """

    def __init__(self, items: Sequence[T], strategy: CatalogStrategy[T]) -> None:
        self._items = tuple(items)
        self._strategy = strategy

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def strategy(self) -> CatalogStrategy[T]:
        return self._strategy

    def _matches_query(self, item: T, needle: str) -> bool:
        s = self._strategy
        for locale in SUPPORTED_LOCALES:
            if needle in s.entity_name(item, locale).lower():
                return True
            if needle in s.entity_description(item, locale).lower():
                return True
        return False

    def matches(
        self,
        item: T,
        query: str = "",
        category: str = ALL,
        atmosphere: str = ALL,
        price_range: str = ALL,
        dietary: Iterable[str] = (),
        amenities: Iterable[str] = (),
    ) -> bool:
        """True when *item* satisfies every active facet."""
        needle = (query or "").strip().lower()
        if needle and not self._matches_query(item, needle):
            return False
        if _active(category) and not self._strategy.matches_category(item, category):
            return False
        if _active(atmosphere) and not self._strategy.matches_atmosphere(item, atmosphere):
            return False
        if _active(price_range) and item.price_range != price_range:
            return False
        if not all(diet in item.dietary for diet in dietary):
            return False
        return all(amenity in item.amenities for amenity in amenities)

    def search(
        self,
        query: str = "",
        category: str = ALL,
        atmosphere: str = ALL,
        price_range: str = ALL,
        dietary: Iterable[str] = (),
        amenities: Iterable[str] = (),
    ) -> list[T]:
        dietary = list(dietary)
        amenities = list(amenities)
        return [
            item
            for item in self._items
            if self.matches(item, query, category, atmosphere, price_range, dietary, amenities)
        ]

    def sort(self, items: Sequence[T], sort_by: str, locale: str) -> list[T]:
        return sort_entities(items, sort_by, locale, self._strategy.entity_name)

    def search_and_sort(
        self,
        query: str = "",
        category: str = ALL,
        atmosphere: str = ALL,
        price_range: str = ALL,
        dietary: Iterable[str] = (),
        amenities: Iterable[str] = (),
        sort_by: str = "featured",
        locale: str = "es",
    ) -> list[T]:
        filtered = self.search(query, category, atmosphere, price_range, dietary, amenities)
        return self.sort(filtered, sort_by, locale)
