"""Canonical taxonomy definitions for clothing items.

This module holds the single definition of clothing categories and seasons.
The season filter, the category partitioner and the outfit composer all read
from these enums so the set of categories cannot drift between them.
"""

from enum import Enum
from typing import Dict, List, Optional


class Category(str, Enum):
    TOP = "TOP"
    BOTTOM = "BOTTOM"
    DRESS = "DRESS"
    SHOES = "SHOES"
    HAT = "HAT"
    ACCESSORY = "ACCESSORY"
    OUTERWEAR = "OUTERWEAR"
    UNDERWEAR = "UNDERWEAR"
    SOCKS = "SOCKS"
    BAG = "BAG"


class Season(str, Enum):
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    AUTUMN = "AUTUMN"
    WINTER = "WINTER"
    ALL_SEASON = "ALL_SEASON"


CATEGORY_LABELS: Dict[Category, str] = {
    Category.TOP: "Top",
    Category.BOTTOM: "Bottom",
    Category.DRESS: "Dress",
    Category.SHOES: "Shoes",
    Category.HAT: "Hat",
    Category.ACCESSORY: "Accessory",
    Category.OUTERWEAR: "Outerwear",
    Category.UNDERWEAR: "Underwear",
    Category.SOCKS: "Socks",
    Category.BAG: "Bag",
}

SEASON_LABELS: Dict[Season, str] = {
    Season.SPRING: "Spring",
    Season.SUMMER: "Summer",
    Season.AUTUMN: "Autumn",
    Season.WINTER: "Winter",
    Season.ALL_SEASON: "All seasons",
}


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into an enum key."""

    return value.strip().upper().replace(" ", "_").replace("-", "_")


def validate_category(value: "str | Category") -> Category:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    if isinstance(value, Category):
        return value
    key = _normalize_key(str(value))
    try:
        return Category(key)
    except ValueError:
        allowed = [category.value for category in Category]
        raise ValueError(f"Unsupported category '{value}'. Allowed: {allowed}") from None


def validate_season(value: "str | Season | None") -> Optional[Season]:
    """Validate an optional season; empty values mean "any season"."""

    if value is None or isinstance(value, Season):
        return value
    if not str(value).strip():
        return None
    key = _normalize_key(str(value))
    try:
        return Season(key)
    except ValueError:
        allowed = [season.value for season in Season]
        raise ValueError(f"Unsupported season '{value}'. Allowed: {allowed}") from None


def split_tags(raw: Optional[str]) -> List[str]:
    """Split a comma-separated tag string into trimmed, lower-cased tokens.

    Every token is kept, including duplicates and the empty token left by
    ``"a,,b"`` or a trailing comma, so overlap counts follow the raw string.
    """

    if not raw:
        return []
    return [token.strip().lower() for token in raw.split(",")]


__all__ = [
    "Category",
    "Season",
    "CATEGORY_LABELS",
    "SEASON_LABELS",
    "validate_category",
    "validate_season",
    "split_tags",
]
