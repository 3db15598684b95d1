from __future__ import annotations

import logging
import re
import unicodedata
from typing import Callable, Sequence, TypeVar

from .models import FALLBACK_LOCALE, PRICE_ORDER, BusinessEntity, LocalizedList, LocalizedText

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BusinessEntity)
NameExtractor = Callable[[T, str], str]

NAME_PLACEHOLDER = "Name not available"
DESCRIPTION_PLACEHOLDER = "Description not available"
ADDRESS_PLACEHOLDER = "Address not available"
HOURS_PLACEHOLDER = "Hours not available"


class UnknownPriceTierError(ValueError):
    """Raised when a listing carries a price tier outside ``PRICE_ORDER``."""


# ---------------------------------------------------------------------------
# Localized accessors
# ---------------------------------------------------------------------------


def localized(field: LocalizedText | None, locale: str, placeholder: str) -> str:
    """Read *field* in *locale*, falling back to English, then *placeholder*."""
    if field is None:
        return placeholder
    return field.get(locale) or field.get(FALLBACK_LOCALE) or placeholder


def get_name(entity: BusinessEntity, locale: str) -> str:
    return localized(getattr(entity, "name", None), locale, NAME_PLACEHOLDER)


def get_description(entity: BusinessEntity, locale: str) -> str:
    return localized(getattr(entity, "description", None), locale, DESCRIPTION_PLACEHOLDER)


def get_address(entity: BusinessEntity, locale: str) -> str:
    return localized(getattr(entity, "address", None), locale, ADDRESS_PLACEHOLDER)


def get_hours(entity: BusinessEntity, locale: str) -> str:
    return localized(getattr(entity, "hours", None), locale, HOURS_PLACEHOLDER)


def get_specialties(entity: BusinessEntity, locale: str) -> list[str]:
    """Specialties in *locale*; English or an empty list when missing."""
    specialties: LocalizedList | None = getattr(entity, "specialties", None)
    if specialties is None:
        return []
    return list(specialties.get(locale) or specialties.get(FALLBACK_LOCALE) or [])


# ---------------------------------------------------------------------------
# Text normalisation
# ---------------------------------------------------------------------------


def fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def generate_slug(text: str) -> str:
    """Build a URL-safe slug, e.g. ``"Tubohotel Tepoztlán"`` -> ``"tubohotel-tepoztlan"``."""
    slug = fold_accents(text.lower())
    slug = re.sub(r"[^\w\s-]", "", slug, flags=re.ASCII)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def collation_key(text: str, locale: str) -> tuple[str, str]:
    """Accent- and case-insensitive sort key; ties broken by the raw text."""
    lowered = text.casefold()
    if locale == "es":
        # ñ is its own letter in Spanish and follows n
        lowered = lowered.replace("ñ", "n\uffff")
    return fold_accents(lowered), text


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


def price_position(entity: BusinessEntity) -> int:
    try:
        return PRICE_ORDER.index(entity.price_range)
    except ValueError:
        raise UnknownPriceTierError(
            f"Listing {entity.id!r} has unknown price tier {entity.price_range!r}"
        ) from None


def _featured_key(entity: BusinessEntity) -> tuple[int, float]:
    # Rating only breaks ties inside the featured group.
    if entity.featured:
        return 0, -entity.rating
    return 1, 0.0


def sort_entities(
    entities: Sequence[T],
    sort_by: str,
    locale: str,
    name_extractor: NameExtractor | None = None,
) -> list[T]:
    """
    Return *entities* in ``sort_by`` order as a new list.

    The sort is stable for every mode. ``featured`` puts featured listings
    first, best rated first among them; non-featured listings keep their
    input order. An unknown ``sort_by`` leaves the order untouched.
    """
    extract = name_extractor or get_name

    if sort_by == "featured":
        return sorted(entities, key=_featured_key)
    if sort_by == "rating":
        return sorted(entities, key=lambda e: -e.rating)
    if sort_by == "price":
        return sorted(entities, key=price_position)
    if sort_by == "name":
        return sorted(entities, key=lambda e: collation_key(extract(e, locale), locale))

    logger.debug("Unknown sort option %r, keeping input order", sort_by)
    return list(entities)
