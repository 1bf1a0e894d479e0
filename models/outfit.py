"""Outfit suggestion schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from models.clothing_item import ClothingItem
from models.taxonomy import Season, validate_season


@dataclass(frozen=True)
class SuggestionFilters:
    """Optional preferences narrowing a suggestion request."""

    occasion: Optional[str] = None
    season: Optional[Season] = None
    color_preference: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "season", validate_season(self.season))
        occasion = (self.occasion or "").strip()
        object.__setattr__(self, "occasion", occasion or None)
        if self.color_preference is not None and not self.color_preference.strip():
            object.__setattr__(self, "color_preference", None)


@dataclass(frozen=True)
class OutfitSuggestion:
    """One proposed outfit. Built fresh per request and never persisted here."""

    suggestion_id: str
    name: str
    items: Tuple[ClothingItem, ...]
    occasion: str
    season: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.suggestion_id,
            "name": self.name,
            "items": [item.to_dict() for item in self.items],
            "occasion": self.occasion,
            "season": self.season,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class SuggestionResult:
    suggestions: List[OutfitSuggestion]
    total_inventory_size: int
    diagnostics: Dict[str, object] = field(default_factory=dict)


@dataclass
class SavedOutfit:
    """An outfit the user chose to keep, as stored by the wardrobe store."""

    outfit_id: str
    user_id: str
    name: str
    clothing_ids: List[str] = field(default_factory=list)
    description: Optional[str] = None
    occasion: Optional[str] = None
    season: Optional[str] = None
    created_at: Optional[str] = None


__all__ = ["SuggestionFilters", "OutfitSuggestion", "SuggestionResult", "SavedOutfit"]
