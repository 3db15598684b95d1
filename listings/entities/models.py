from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Locale = Literal["es", "en"]
SUPPORTED_LOCALES: tuple[str, ...] = ("es", "en")
DEFAULT_LOCALE = "es"
FALLBACK_LOCALE = "en"

PriceRange = Literal["$", "$$", "$$$", "$$$$"]
PRICE_ORDER: tuple[str, ...] = ("$", "$$", "$$$", "$$$$")

DietaryOption = Literal["vegetarian", "vegan", "gluten-free", "organic", "spicy"]
SortOption = Literal["featured", "rating", "price", "name"]
SORT_OPTIONS: tuple[str, ...] = ("featured", "rating", "price", "name")


class _Model(BaseModel):
    # Fixtures keep the camelCase field names of the listing feeds.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class LocalizedText(_Model):
    es: str
    en: str

    def get(self, locale: str) -> str | None:
        if locale not in SUPPORTED_LOCALES:
            return None
        return getattr(self, locale)


class LocalizedList(_Model):
    es: list[str] = Field(default_factory=list)
    en: list[str] = Field(default_factory=list)

    def get(self, locale: str) -> list[str] | None:
        if locale not in SUPPORTED_LOCALES:
            return None
        return getattr(self, locale)


class BusinessEntity(_Model):
    id: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    name: LocalizedText
    description: LocalizedText
    price_range: PriceRange
    rating: float = 0.0
    review_count: int = Field(default=0, ge=0)
    images: list[str] = Field(default_factory=list)
    address: LocalizedText
    # (longitude, latitude); read by the map layer only
    coordinates: tuple[float, float]
    phone: str | None = None
    website: str | None = None
    email: str | None = None
    hours: LocalizedText
    amenities: list[str] = Field(default_factory=list)
    specialties: LocalizedList = Field(default_factory=LocalizedList)
    dietary: list[DietaryOption] = Field(default_factory=list)
    verified: bool = False
    featured: bool = False
    delivery: bool = False
    parking: bool = False
    wifi: bool = False
    accepts_cards: bool = False


# ── Variants ─────────────────────────────────────────────────────────────


class HotelRoomType(_Model):
    name: LocalizedText
    capacity: int = Field(..., ge=1)
    price: float = Field(..., ge=0)


class Hotel(BusinessEntity):
    category: Literal[
        "boutique", "resort", "eco", "budget", "luxury",
        "hostel", "business", "wellness", "romantic", "historic",
    ]
    room_types: list[HotelRoomType] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    sustainability: bool = False
    pet_friendly: bool = False
    adults_only: bool = False
    neighborhood: str | None = None


class Restaurant(BusinessEntity):
    cuisine: LocalizedText
    atmosphere: Literal["casual", "family", "traditional", "modern", "fine-dining", "romantic"]
    reservation: bool = False
    outdoor_seating: bool = False
    live_music: bool = False
    alcoholic: bool = False


BarDrink = Literal["beer", "wine", "cocktails", "pulque", "mezcal", "tequila", "craft-beer", "champagne"]


class Bar(BusinessEntity):
    type: Literal["bar", "pulqueria", "cantina", "mezcaleria", "cocktail-bar", "sports-bar"]
    atmosphere: Literal["casual", "family", "traditional", "modern", "upscale", "rustic", "party"]
    drinks: list[BarDrink] = Field(default_factory=list)
    live_music: bool = False
    dance_floor: bool = False
    outdoor_seating: bool = False
    age_restriction: bool = False
    smoking_area: bool = False
    happy_hour: LocalizedText | None = None


class Cafe(BusinessEntity):
    # Display label (e.g. "Café Especialidad"), not a stable id
    cafe_type: LocalizedText
    atmosphere: Literal[
        "casual", "family", "traditional", "modern", "cozy", "artistic", "minimalist", "rustic",
    ]
    takeaway: bool = False
    outdoor_seating: bool = False
    live_music: bool = False
    study_friendly: bool = False
    pet_friendly: bool = False
    roastery: bool = False


class StreetFood(BusinessEntity):
    type: LocalizedText
    venue_type: Literal["street-cart", "market-stall", "food-truck", "tianguis", "plaza"]
    location: LocalizedText
    cash_only: bool = False
    spicy_level: int = Field(default=1, ge=1, le=5)
    local_favorite: bool = False


class EcoLodgeRoomType(_Model):
    type: str
    price: float = Field(..., ge=0)
    capacity: int = Field(..., ge=1)


class EcoLodge(BusinessEntity):
    category: Literal[
        "eco-resort", "treehouse", "glamping", "sustainable-hotel", "nature-retreat", "organic-farm",
    ]
    room_types: list[EcoLodgeRoomType] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    sustainability: bool = False
    pet_friendly: bool = False
    adults_only: bool = False
    organic_food: bool = False
    solar_power: bool = False
    water_conservation: bool = False
    local_materials: bool = False


class RoomInfo(_Model):
    bedrooms: int = Field(..., ge=0)
    bathrooms: int = Field(..., ge=0)
    max_guests: int = Field(..., ge=1)
    price_per_night: float = Field(..., ge=0)


class Rental(BusinessEntity):
    category: Literal["apartment", "house", "villa", "studio", "cabin", "loft"]
    room_info: RoomInfo
    features: list[str] = Field(default_factory=list)
    instant_book: bool = False
    pet_friendly: bool = False
    family_friendly: bool = False
    work_friendly: bool = False
