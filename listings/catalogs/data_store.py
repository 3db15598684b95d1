from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..entities.helpers import generate_slug
from ..entities.models import BusinessEntity

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BusinessEntity)

_DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class CatalogDataError(ValueError):
    """A catalog fixture could not be read or failed validation."""


def _fill_slugs(rows: list[Any], path: Path) -> None:
    # Older feeds ship without slugs; derive them from the English name, then the Spanish one.
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise CatalogDataError(f"{path}: listing #{index} is not a JSON object")
        if row.get("slug"):
            continue
        name = row.get("name") or {}
        if not isinstance(name, dict):
            raise CatalogDataError(f"{path}: listing #{index} has a malformed name")
        candidates = (generate_slug(text) for text in (name.get("en"), name.get("es")) if isinstance(text, str))
        row["slug"] = next((slug for slug in candidates if slug), str(row.get("id", "")))


def load_items(kind: str, model: type[T], data_dir: Path = _DEFAULT_DATA_DIR) -> tuple[T, ...]:
    """Read and validate ``<data_dir>/<kind>.json`` into an immutable snapshot."""
    path = data_dir / f"{kind}.json"
    try:
        rows = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogDataError(f"Cannot read {path}: {exc}") from exc

    if not isinstance(rows, list):
        raise CatalogDataError(f"{path} must contain a JSON array of listings")

    _fill_slugs(rows, path)
    try:
        items = TypeAdapter(list[model]).validate_python(rows)
    except ValidationError as exc:
        raise CatalogDataError(f"Invalid listing data in {path}:\n{exc}") from exc

    logger.info("Loaded %d %s listings from %s", len(items), kind, path)
    return tuple(items)
