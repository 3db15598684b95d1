from __future__ import annotations

from listings.catalogs.hotels import HOTEL_STRATEGY, HOTEL_TAXONOMY
from listings.catalogs.base import Catalog
from listings.catalogs.stats import facet_counts, to_dataframe


def test_to_dataframe_one_row_per_listing(registry):
    df = to_dataframe(registry.bars)
    assert len(df) == 5
    assert list(df["category"]) == ["pulqueria", "mezcaleria", "bar", "cantina", "cocktail-bar"]


def test_facet_counts_for_bars(registry):
    counts = facet_counts(registry.bars)
    assert counts["total"] == 5
    assert counts["featured"] == 3
    assert counts["avg_rating"] == 4.7
    assert counts["atmospheres"] == {"rustic": 1, "traditional": 2, "upscale": 2}
    assert counts["price_ranges"] == {"$": 2, "$$": 1, "$$$": 1, "$$$$": 1}


def test_axis_without_reader_has_no_counts(registry):
    counts = facet_counts(registry.hotels)
    assert counts["atmospheres"] == {}
    assert counts["categories"]["luxury"] == 2
    assert counts["price_ranges"]["$$"] == 1


def test_empty_catalog():
    catalog = Catalog("hotels", [], HOTEL_STRATEGY, HOTEL_TAXONOMY, category_of=lambda h: h.category)
    counts = facet_counts(catalog)
    assert counts["total"] == 0
    assert counts["price_ranges"] == {"$": 0, "$$": 0, "$$$": 0, "$$$$": 0}
