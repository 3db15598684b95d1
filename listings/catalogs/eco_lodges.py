from __future__ import annotations

from typing import Iterable, Sequence

from pydantic import BaseModel

from ..entities.helpers import get_description, get_name
from ..entities.models import EcoLodge
from ..engine.query import ALL, CatalogStrategy
from .base import Catalog, CatalogTaxonomy, filter_flags, options

KIND = "eco-lodges"

# Lodge category -> atmosphere concepts it satisfies.
CATEGORY_ATMOSPHERES: dict[str, frozenset[str]] = {
    "eco-resort": frozenset({"natural", "sustainable", "relaxing"}),
    "treehouse": frozenset({"adventurous", "unique", "natural"}),
    "glamping": frozenset({"luxurious", "outdoor", "comfortable"}),
    "sustainable-hotel": frozenset({"eco-friendly", "modern", "responsible"}),
    "nature-retreat": frozenset({"peaceful", "spiritual", "natural"}),
    "organic-farm": frozenset({"rustic", "authentic", "educational"}),
}

ECO_LODGE_TAXONOMY = CatalogTaxonomy(
    categories=options(
        ("eco-resort", "Eco Resort", "Eco Resort"),
        ("treehouse", "Casa del Árbol", "Treehouse"),
        ("glamping", "Glamping", "Glamping"),
        ("sustainable-hotel", "Hotel Sustentable", "Sustainable Hotel"),
        ("nature-retreat", "Retiro Natural", "Nature Retreat"),
        ("organic-farm", "Granja Orgánica", "Organic Farm"),
    ),
    atmospheres=options(
        ("natural", "Natural", "Natural"),
        ("sustainable", "Sustentable", "Sustainable"),
        ("relaxing", "Relajante", "Relaxing"),
        ("adventurous", "Aventurero", "Adventurous"),
        ("unique", "Único", "Unique"),
        ("luxurious", "Lujoso", "Luxurious"),
        ("outdoor", "Al Aire Libre", "Outdoor"),
        ("comfortable", "Cómodo", "Comfortable"),
        ("eco-friendly", "Ecológico", "Eco-friendly"),
        ("modern", "Moderno", "Modern"),
        ("responsible", "Responsable", "Responsible"),
        ("peaceful", "Tranquilo", "Peaceful"),
        ("spiritual", "Espiritual", "Spiritual"),
        ("rustic", "Rústico", "Rustic"),
        ("authentic", "Auténtico", "Authentic"),
        ("educational", "Educativo", "Educational"),
    ),
    amenities=options(
        ("solar-power", "Energía Solar", "Solar Power"),
        ("organic-food", "Comida Orgánica", "Organic Food"),
        ("water-conservation", "Conservación de Agua", "Water Conservation"),
        ("local-materials", "Materiales Locales", "Local Materials"),
        ("composting", "Compostaje", "Composting"),
        ("garden", "Jardín Orgánico", "Organic Garden"),
        ("wildlife", "Observación Fauna", "Wildlife Watching"),
        ("hiking", "Senderismo", "Hiking"),
    ),
)


class EcoLodgeFeatures(BaseModel):
    sustainability: bool | None = None
    organic_food: bool | None = None
    solar_power: bool | None = None
    pet_friendly: bool | None = None
    adults_only: bool | None = None


def matches_category(lodge: EcoLodge, category: str) -> bool:
    return lodge.category == category


def matches_atmosphere(lodge: EcoLodge, atmosphere: str) -> bool:
    return atmosphere in CATEGORY_ATMOSPHERES.get(lodge.category, frozenset())


ECO_LODGE_STRATEGY: CatalogStrategy[EcoLodge] = CatalogStrategy(
    entity_name=get_name,
    entity_description=get_description,
    matches_category=matches_category,
    matches_atmosphere=matches_atmosphere,
)


def build_eco_lodge_catalog(items: Sequence[EcoLodge]) -> Catalog[EcoLodge]:
    # Atmosphere is derived from the category, so counts only cover categories.
    return Catalog(
        KIND,
        items,
        ECO_LODGE_STRATEGY,
        ECO_LODGE_TAXONOMY,
        category_of=lambda l: l.category,
    )


def search_eco_lodges(
    catalog: Catalog[EcoLodge],
    query: str = "",
    category: str = ALL,
    price_range: str = ALL,
    amenities: Iterable[str] = (),
    features: EcoLodgeFeatures | None = None,
) -> list[EcoLodge]:
    found = catalog.search(query, category, ALL, price_range, (), amenities)
    if features is None:
        return found
    return filter_flags(found, **features.model_dump())
