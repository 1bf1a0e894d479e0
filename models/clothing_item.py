"""Clothing item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from models.taxonomy import Category, Season, split_tags, validate_category, validate_season


def _optional_str(value: Any) -> Optional[str]:
    """Coerce blank values to ``None`` and everything else to ``str``."""

    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


@dataclass
class ClothingItem:
    """Represents one stored clothing item owned by a single user."""

    item_id: str
    name: str
    category: Category
    color: str
    user_id: Optional[str] = None
    season: Optional[Season] = None
    tags: Optional[str] = None
    brand: Optional[str] = None
    size: Optional[str] = None
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        self.category = validate_category(self.category)
        self.season = validate_season(self.season)
        self.tags = _optional_str(self.tags)

    @property
    def tag_tokens(self) -> List[str]:
        return split_tags(self.tags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.item_id,
            "name": self.name,
            "category": self.category.value,
            "color": self.color,
            "season": self.season.value if self.season else None,
            "tags": self.tags,
            "brand": self.brand,
            "size": self.size,
            "image_url": self.image_url,
        }


def from_raw_metadata(metadata: Dict[str, Any]) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from loose request or row data."""

    if "id" in metadata and "item_id" not in metadata:
        metadata = {**metadata, "item_id": metadata["id"]}
    required_fields = ["item_id", "name", "category", "color"]
    missing = [field for field in required_fields if not metadata.get(field)]
    if missing:
        raise ValueError(f"Missing required fields for ClothingItem: {missing}")

    return ClothingItem(
        item_id=str(metadata["item_id"]),
        name=str(metadata["name"]),
        category=metadata["category"],
        color=str(metadata["color"]),
        user_id=_optional_str(metadata.get("user_id")),
        season=metadata.get("season"),
        tags=_optional_str(metadata.get("tags")),
        brand=_optional_str(metadata.get("brand")),
        size=_optional_str(metadata.get("size")),
        image_url=_optional_str(metadata.get("image_url")),
    )


__all__ = ["ClothingItem", "from_raw_metadata"]
