from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..entities.models import Locale
from ..engine.query import ALL
from .base import Catalog


class SearchRequest(BaseModel):
    query: str = Field(default="", description="Free text matched against name and description")
    category: str = ALL
    atmosphere: str = Field(
        default=ALL,
        description="Second facet: atmosphere, bar ambience, venue type or lodge concept",
    )
    price_range: str = ALL
    dietary: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    sort_by: str = "featured"
    locale: Locale = "es"
    limit: int = Field(default=50, ge=1, le=200)


class ListingSummary(BaseModel):
    id: str
    slug: str
    kind: str
    name: str
    description: str
    address: str
    hours: str
    price_range: str
    rating: float
    review_count: int
    featured: bool
    verified: bool
    category: str | None = None
    atmosphere: str | None = None
    amenities: list[str]
    dietary: list[str]
    specialties: list[str]


class SearchResponse(BaseModel):
    kind: str
    locale: str
    sort_by: str
    total: int
    results: list[ListingSummary]


class FacetOptionOut(BaseModel):
    id: str
    label: str


class FacetsResponse(BaseModel):
    kind: str
    locale: str
    options: dict[str, list[FacetOptionOut]]
    counts: dict[str, Any]


def to_summary(catalog: Catalog[Any], item: Any, locale: str) -> ListingSummary:
    """Flatten one listing into its *locale* view."""
    return ListingSummary(
        id=item.id,
        slug=item.slug,
        kind=catalog.kind,
        name=catalog.name(item, locale),
        description=catalog.description(item, locale),
        address=catalog.address(item, locale),
        hours=catalog.hours(item, locale),
        price_range=item.price_range,
        rating=item.rating,
        review_count=item.review_count,
        featured=item.featured,
        verified=item.verified,
        category=catalog.category_of(item) if catalog.category_of else None,
        atmosphere=catalog.atmosphere_of(item) if catalog.atmosphere_of else None,
        amenities=list(item.amenities),
        dietary=list(item.dietary),
        specialties=catalog.specialties(item, locale),
    )
