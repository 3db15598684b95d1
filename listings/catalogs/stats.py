from __future__ import annotations

from typing import Any

import pandas as pd

from ..entities.models import PRICE_ORDER
from .base import Catalog

_COLUMNS = ["id", "price_range", "rating", "review_count", "featured", "category", "atmosphere"]


def to_dataframe(catalog: Catalog[Any]) -> pd.DataFrame:
    """Flatten a catalog's listings into one row per listing."""
    rows = [
        {
            "id": item.id,
            "price_range": item.price_range,
            "rating": item.rating,
            "review_count": item.review_count,
            "featured": item.featured,
            "category": catalog.category_of(item) if catalog.category_of else None,
            "atmosphere": catalog.atmosphere_of(item) if catalog.atmosphere_of else None,
        }
        for item in catalog.get_all()
    ]
    return pd.DataFrame(rows, columns=_COLUMNS)


def _counts(series: pd.Series) -> dict[str, int]:
    return {str(k): int(v) for k, v in series.dropna().value_counts().sort_index().items()}


def facet_counts(catalog: Catalog[Any]) -> dict[str, Any]:
    """Listing counts per facet option plus headline rating numbers."""
    df = to_dataframe(catalog)
    if df.empty:
        return {
            "total": 0,
            "featured": 0,
            "avg_rating": 0.0,
            "categories": {},
            "atmospheres": {},
            "price_ranges": {tier: 0 for tier in PRICE_ORDER},
        }

    price_counts = df["price_range"].value_counts().reindex(list(PRICE_ORDER), fill_value=0)
    return {
        "total": int(len(df)),
        "featured": int(df["featured"].sum()),
        "avg_rating": round(float(df["rating"].mean()), 2),
        "categories": _counts(df["category"]),
        "atmospheres": _counts(df["atmosphere"]),
        "price_ranges": {tier: int(n) for tier, n in price_counts.items()},
    }
