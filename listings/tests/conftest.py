from __future__ import annotations

from typing import Any

import pytest

from listings.catalogs.registry import CatalogRegistry, build_registry
from listings.entities.models import Hotel, LocalizedText


def make_hotel(
    id: str,
    *,
    name: str | None = None,
    name_es: str | None = None,
    category: str = "boutique",
    price_range: str = "$$",
    rating: float = 4.0,
    featured: bool = False,
    **extra: Any,
) -> Hotel:
    """Small hotel listing with both locales filled in."""
    name = name or id.upper()
    fields: dict[str, Any] = {
        "id": id,
        "slug": id.lower(),
        "name": LocalizedText(es=name_es or name, en=name),
        "description": LocalizedText(es=f"Descripción de {name}", en=f"Description of {name}"),
        "category": category,
        "price_range": price_range,
        "rating": rating,
        "featured": featured,
        "address": LocalizedText(es="Centro", en="Downtown"),
        "coordinates": (-99.09, 18.98),
        "hours": LocalizedText(es="24 horas", en="24 hours"),
    }
    fields.update(extra)
    return Hotel(**fields)


@pytest.fixture
def hotel():
    return make_hotel


@pytest.fixture(scope="session")
def registry() -> CatalogRegistry:
    return build_registry()
