from __future__ import annotations

from listings.analytics.aggregator import compute_analytics
from listings.analytics.store import MAX_EVENTS, clear_events, get_events, record_event


def _search(**data):
    return {"type": "search", **data}


def test_empty_analytics():
    body = compute_analytics([])
    assert body["total_searches"] == 0
    assert body["avg_response_time_ms"] == 0.0
    assert body["top_queries"] == []
    assert body["facet_usage"]["category"] == 0.0
    assert body["zero_result_rate"] == 0.0


def test_response_time_and_catalog_counts():
    events = [
        _search(kind="bars", response_time_ms=2.0),
        _search(kind="bars", response_time_ms=4.0),
        _search(kind="hotels"),
        {"type": "page_view", "kind": "bars"},
    ]
    body = compute_analytics(events)
    assert body["total_searches"] == 3
    assert body["avg_response_time_ms"] == 3.0
    assert body["searches_by_catalog"] == {"bars": 2, "hotels": 1}


def test_top_queries_ignore_blank_and_case():
    events = [_search(query="Tacos"), _search(query=" tacos"), _search(query=""), _search(query="mole")]
    body = compute_analytics(events, top_n=1)
    assert body["top_queries"] == [{"query": "tacos", "count": 2}]


def test_facet_usage_treats_all_as_unused():
    events = [
        _search(category="all", dietary=[], price_range="$"),
        _search(category="luxury", dietary=["vegan"], price_range="all"),
    ]
    usage = compute_analytics(events)["facet_usage"]
    assert usage["category"] == 50.0
    assert usage["dietary"] == 50.0
    assert usage["price_range"] == 50.0
    assert usage["amenities"] == 0.0


def test_zero_result_rate_and_locales():
    events = [
        _search(results_count=0, locale="es"),
        _search(results_count=3, locale="es"),
        _search(results_count=0, locale="en"),
        _search(results_count=1, locale="en"),
    ]
    body = compute_analytics(events)
    assert body["zero_result_rate"] == 50.0
    assert body["searches_by_locale"] == {"es": 2, "en": 2}


class TestStore:
    def test_record_and_filter(self):
        clear_events()
        record_event("search", {"kind": "bars"})
        record_event("page_view", {"kind": "bars"})
        assert len(get_events()) == 2
        assert [e["type"] for e in get_events("search")] == ["search"]
        assert "timestamp" in get_events()[0]

    def test_log_is_bounded(self):
        clear_events()
        for i in range(MAX_EVENTS + 5):
            record_event("search", {"n": i})
        events = get_events()
        assert len(events) == MAX_EVENTS
        assert events[0]["n"] == 5
        clear_events()
