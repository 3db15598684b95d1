from __future__ import annotations

from collections import Counter
from typing import Any

from ..engine.query import ALL

# Facets reported in facet_usage, in display order.
FACETS = ("query", "category", "atmosphere", "price_range", "dietary", "amenities")


def _facet_used(event: dict[str, Any], facet: str) -> bool:
    value = event.get(facet)
    if isinstance(value, (list, tuple)):
        return bool(value)
    return bool(value) and value != ALL


def compute_analytics(events: list[dict[str, Any]], top_n: int = 10) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    total = len(searches)

    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Queries are grouped case-insensitively; blank queries are browsing, not searching.
    query_counter: Counter[str] = Counter()
    for s in searches:
        q = (s.get("query") or "").strip().lower()
        if q:
            query_counter[q] += 1
    top_queries = [{"query": q, "count": c} for q, c in query_counter.most_common(top_n)]

    kind_counter: Counter[str] = Counter(s.get("kind", "unknown") for s in searches)

    locale_counter: Counter[str] = Counter(s["locale"] for s in searches if s.get("locale"))

    facet_usage = {
        facet: round(sum(1 for s in searches if _facet_used(s, facet)) / total * 100, 1) if total else 0.0
        for facet in FACETS
    }

    zero_results = sum(1 for s in searches if s.get("results_count") == 0)

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "top_queries": top_queries,
        "searches_by_catalog": dict(kind_counter),
        "searches_by_locale": dict(locale_counter),
        "facet_usage": facet_usage,
        "zero_result_rate": round(zero_results / total * 100, 1) if total else 0.0,
    }
