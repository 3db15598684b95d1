from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from ..entities import helpers
from ..entities.models import BusinessEntity, LocalizedText
from ..engine.query import ALL, CatalogStrategy, QueryEngine

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BusinessEntity)


class DuplicateEntityError(ValueError):
    """Two listings of one catalog share an ``id`` or a ``slug``."""


@dataclass(frozen=True)
class FacetOption:
    id: str
    label: LocalizedText


def options(*rows: tuple[str, str, str]) -> tuple[FacetOption, ...]:
    """Build facet options from ``(id, es, en)`` rows."""
    return tuple(FacetOption(id=i, label=LocalizedText(es=es, en=en)) for i, es, en in rows)


PRICE_OPTIONS = options(
    ("$", "Económico", "Budget"),
    ("$$", "Moderado", "Moderate"),
    ("$$$", "Premium", "Premium"),
    ("$$$$", "Lujo", "Luxury"),
)


@dataclass(frozen=True)
class CatalogTaxonomy:
    """Filter vocabulary of one catalog, with display labels."""

    categories: tuple[FacetOption, ...]
    atmospheres: tuple[FacetOption, ...] = ()
    price_ranges: tuple[FacetOption, ...] = PRICE_OPTIONS
    amenities: tuple[FacetOption, ...] = ()
    extras: dict[str, tuple[FacetOption, ...]] = field(default_factory=dict)

    def facets(self) -> dict[str, tuple[FacetOption, ...]]:
        return {
            "categories": self.categories,
            "atmospheres": self.atmospheres,
            "price_ranges": self.price_ranges,
            "amenities": self.amenities,
            **self.extras,
        }

    def label(self, facet: str, option_id: str, locale: str) -> str | None:
        for option in self.facets().get(facet, ()):
            if option.id == option_id:
                return helpers.localized(option.label, locale, option.id)
        return None


def _check_unique(items: Sequence[BusinessEntity], kind: str) -> None:
    for attr in ("id", "slug"):
        counts = Counter(getattr(item, attr) for item in items)
        dupes = sorted(value for value, n in counts.items() if n > 1)
        if dupes:
            raise DuplicateEntityError(f"Duplicate {attr} in {kind} catalog: {', '.join(dupes)}")


class Catalog(Generic[T]):
    """One catalog type bound to the shared query engine."""

    def __init__(
        self,
        kind: str,
        items: Sequence[T],
        strategy: CatalogStrategy[T],
        taxonomy: CatalogTaxonomy,
        category_of: Callable[[T], str | None] | None = None,
        atmosphere_of: Callable[[T], str | None] | None = None,
    ) -> None:
        _check_unique(items, kind)
        self.kind = kind
        self.taxonomy = taxonomy
        self.engine: QueryEngine[T] = QueryEngine(items, strategy)
        # Facet-id readers used for counts; None when the axis doesn't apply.
        self.category_of = category_of
        self.atmosphere_of = atmosphere_of
        self._by_id = {item.id: item for item in self.engine.items}
        self._by_slug = {item.slug: item for item in self.engine.items}
        logger.debug("Built %s catalog with %d listings", kind, len(self._by_id))

    def __len__(self) -> int:
        return len(self.engine.items)

    # ── Lookups ──────────────────────────────────────────────────────────

    def get_all(self) -> list[T]:
        return list(self.engine.items)

    def get_by_id(self, item_id: str) -> T | None:
        return self._by_id.get(item_id)

    def get_by_slug(self, slug: str) -> T | None:
        return self._by_slug.get(slug)

    def get_featured(self) -> list[T]:
        return [item for item in self.engine.items if item.featured]

    def get_by_category(self, category: str) -> list[T]:
        if category == ALL:
            return self.get_all()
        return self.engine.search(category=category)

    def get_by_price_range(self, price_range: str) -> list[T]:
        return self.engine.search(price_range=price_range)

    # ── Query ────────────────────────────────────────────────────────────

    def search(
        self,
        query: str = "",
        category: str = ALL,
        atmosphere: str = ALL,
        price_range: str = ALL,
        dietary: Iterable[str] = (),
        amenities: Iterable[str] = (),
    ) -> list[T]:
        return self.engine.search(query, category, atmosphere, price_range, dietary, amenities)

    def sort(self, items: Sequence[T], sort_by: str, locale: str) -> list[T]:
        return self.engine.sort(items, sort_by, locale)

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
        return self.engine.search_and_sort(
            query, category, atmosphere, price_range, dietary, amenities, sort_by, locale,
        )

    # ── Localized readers ────────────────────────────────────────────────

    def name(self, item: T, locale: str) -> str:
        return self.engine.strategy.entity_name(item, locale)

    def description(self, item: T, locale: str) -> str:
        return self.engine.strategy.entity_description(item, locale)

    def address(self, item: T, locale: str) -> str:
        return helpers.get_address(item, locale)

    def hours(self, item: T, locale: str) -> str:
        return helpers.get_hours(item, locale)

    def specialties(self, item: T, locale: str) -> list[str]:
        return helpers.get_specialties(item, locale)


def filter_flags(items: Iterable[T], **flags: bool | None) -> list[T]:
    """Second-pass filter keeping items whose boolean attributes equal every non-None flag."""
    active = {name: value for name, value in flags.items() if value is not None}
    return [
        item for item in items
        if all(getattr(item, name) == value for name, value in active.items())
    ]
