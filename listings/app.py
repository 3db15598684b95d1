from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .catalogs.base import Catalog
from .catalogs.models import (
    FacetOptionOut,
    FacetsResponse,
    ListingSummary,
    SearchRequest,
    SearchResponse,
    to_summary,
)
from .catalogs.registry import CatalogRegistry, build_registry
from .catalogs.stats import facet_counts
from .config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig
from .entities.helpers import localized
from .entities.models import Locale

logger = logging.getLogger(__name__)

router = APIRouter()


def create_app(config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG) -> FastAPI:
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    application = FastAPI(title=config.title, version="1.0.0")
    application.state.config = config
    application.state.registry = build_registry(config)
    application.include_router(router)
    return application


def get_registry(request: Request) -> CatalogRegistry:
    return request.app.state.registry


def _catalog_or_404(registry: CatalogRegistry, kind: str) -> Catalog[Any]:
    try:
        return registry.get(kind)
    except KeyError:
        logger.debug("Unknown catalog requested: %s", kind)
        raise HTTPException(status_code=404, detail=f"Unknown catalog: {kind}") from None


def _resolve_locale(request: Request, locale: Locale | None) -> str:
    return locale or request.app.state.config.default_locale


# ── Public endpoints ─────────────────────────────────────────────────


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/catalogs")
def list_catalogs(registry: CatalogRegistry = Depends(get_registry)) -> list[dict]:
    return [{"kind": kind.value, "count": len(registry.get(kind))} for kind in registry.kinds()]


@router.get("/catalogs/{kind}", response_model=SearchResponse)
def list_catalog(
    kind: str,
    request: Request,
    sort_by: str = "featured",
    locale: Locale | None = None,
    registry: CatalogRegistry = Depends(get_registry),
) -> SearchResponse:
    catalog = _catalog_or_404(registry, kind)
    loc = _resolve_locale(request, locale)
    items = catalog.sort(catalog.get_all(), sort_by, loc)
    return SearchResponse(
        kind=catalog.kind,
        locale=loc,
        sort_by=sort_by,
        total=len(items),
        results=[to_summary(catalog, item, loc) for item in items],
    )


@router.get("/catalogs/{kind}/featured", response_model=list[ListingSummary])
def featured(
    kind: str,
    request: Request,
    locale: Locale | None = None,
    registry: CatalogRegistry = Depends(get_registry),
) -> list[ListingSummary]:
    catalog = _catalog_or_404(registry, kind)
    loc = _resolve_locale(request, locale)
    return [to_summary(catalog, item, loc) for item in catalog.get_featured()]


@router.get("/catalogs/{kind}/facets", response_model=FacetsResponse)
def facets(
    kind: str,
    request: Request,
    locale: Locale | None = None,
    registry: CatalogRegistry = Depends(get_registry),
) -> FacetsResponse:
    catalog = _catalog_or_404(registry, kind)
    loc = _resolve_locale(request, locale)
    options = {
        facet: [FacetOptionOut(id=o.id, label=localized(o.label, loc, o.id)) for o in opts]
        for facet, opts in catalog.taxonomy.facets().items()
    }
    return FacetsResponse(kind=catalog.kind, locale=loc, options=options, counts=facet_counts(catalog))


@router.post("/catalogs/{kind}/search", response_model=SearchResponse)
def search(
    kind: str,
    body: SearchRequest,
    registry: CatalogRegistry = Depends(get_registry),
) -> SearchResponse:
    catalog = _catalog_or_404(registry, kind)
    start_time = time.time()
    found = catalog.search_and_sort(
        body.query,
        body.category,
        body.atmosphere,
        body.price_range,
        body.dietary,
        body.amenities,
        body.sort_by,
        body.locale,
    )
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("search", {
        "kind": catalog.kind,
        "query": body.query,
        "category": body.category,
        "atmosphere": body.atmosphere,
        "price_range": body.price_range,
        "dietary": list(body.dietary),
        "amenities": list(body.amenities),
        "sort_by": body.sort_by,
        "locale": body.locale,
        "results_count": len(found),
        "response_time_ms": elapsed_ms,
    })
    return SearchResponse(
        kind=catalog.kind,
        locale=body.locale,
        sort_by=body.sort_by,
        total=len(found),
        results=[to_summary(catalog, item, body.locale) for item in found[: body.limit]],
    )


@router.get("/catalogs/{kind}/items/{slug}", response_model=ListingSummary)
def item_by_slug(
    kind: str,
    slug: str,
    request: Request,
    locale: Locale | None = None,
    registry: CatalogRegistry = Depends(get_registry),
) -> ListingSummary:
    catalog = _catalog_or_404(registry, kind)
    item = catalog.get_by_slug(slug)
    if item is None:
        raise HTTPException(status_code=404, detail=f"No {catalog.kind} listing with slug {slug!r}")
    return to_summary(catalog, item, _resolve_locale(request, locale))


@router.get("/search")
def search_everywhere(
    request: Request,
    q: str = Query(default="", description="Text matched in every catalog"),
    locale: Locale | None = None,
    sort_by: str = "featured",
    registry: CatalogRegistry = Depends(get_registry),
) -> dict:
    loc = _resolve_locale(request, locale)
    start_time = time.time()
    hits = registry.search_all(q, loc, sort_by)
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("search", {
        "kind": "all",
        "query": q,
        "locale": loc,
        "sort_by": sort_by,
        "results_count": len(hits),
        "response_time_ms": elapsed_ms,
    })
    by_kind: dict[str, int] = {}
    for hit in hits:
        by_kind[hit.kind.value] = by_kind.get(hit.kind.value, 0) + 1
    return {
        "query": q,
        "locale": loc,
        "total": len(hits),
        "by_kind": by_kind,
        "results": [
            to_summary(registry.get(hit.kind), hit.entity, loc).model_dump() for hit in hits
        ],
    }


# ── Usage ────────────────────────────────────────────────────────────


@router.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


app = create_app()
