"""Service wrappers tying wardrobe storage to the suggestion engine."""

from __future__ import annotations

import uuid
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from logic.suggestion_engine import EmptyInventoryError, SuggestionEngine
from logic.validation import (
    ClothingItemInput,
    ClothingItemUpdate,
    OutfitUpdate,
    SaveOutfitRequest,
    SuggestionRequest,
    validation_failure,
)
from models.clothing_item import from_raw_metadata
from models.color_theory import StylingRules
from models.outfit import SuggestionFilters
from tools.observability import instrument_tool
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore
from wardrobe_app.config import WardrobeConfig


class _AddItemInput(BaseModel):
    user_id: str = Field(min_length=1)
    item_data: ClothingItemInput


class _UserInput(BaseModel):
    user_id: str = Field(min_length=1)


class _ItemRefInput(_UserInput):
    item_id: str = Field(min_length=1)


class _UpdateItemInput(_ItemRefInput):
    item_data: ClothingItemUpdate


class _OutfitRefInput(_UserInput):
    outfit_id: str = Field(min_length=1)


class _UpdateOutfitInput(_OutfitRefInput):
    outfit_data: OutfitUpdate


def _default_store(config: WardrobeConfig) -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore(config.wardrobe_db_path)


def _default_engine(config: WardrobeConfig) -> SuggestionEngine:
    return SuggestionEngine(rules=StylingRules(max_suggestions=config.max_suggestions), seed=config.random_seed)


class WardrobeTools:
    """Thin wrapper exposing wardrobe operations to the HTTP layer."""

    def __init__(
        self,
        store: Optional[WardrobeStore] = None,
        engine: Optional[SuggestionEngine] = None,
        config: Optional[WardrobeConfig] = None,
    ) -> None:
        self.config = config or WardrobeConfig.from_env()
        self.store = store or _default_store(self.config)
        self.engine = engine or _default_engine(self.config)

    @instrument_tool("add_clothing_item", input_model=_AddItemInput)
    def add_clothing_item(self, *, user_id: str, item_data: Dict[str, Any]) -> Dict[str, Any]:
        item = from_raw_metadata({**item_data, "item_id": uuid.uuid4().hex, "user_id": user_id})
        stored = self.store.create_item(item)
        return stored.to_dict()

    @instrument_tool("list_clothing_items", input_model=_UserInput)
    def list_clothing_items(self, *, user_id: str) -> List[Dict[str, Any]]:
        return [item.to_dict() for item in self.store.list_items_for_user(user_id)]

    @instrument_tool("get_clothing_item", input_model=_ItemRefInput)
    def get_clothing_item(self, *, user_id: str, item_id: str) -> Optional[Dict[str, Any]]:
        item = self.store.get_item(user_id, item_id)
        return item.to_dict() if item else None

    @instrument_tool("update_clothing_item", input_model=_UpdateItemInput)
    def update_clothing_item(self, *, user_id: str, item_id: str, item_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Apply the supplied fields to an item. Returns None for unknown items."""

        changes = {key: value for key, value in item_data.items() if value is not None}
        updated = self.store.update_item(user_id, item_id, changes)
        return updated.to_dict() if updated else None

    @instrument_tool("delete_clothing_item", input_model=_ItemRefInput)
    def delete_clothing_item(self, *, user_id: str, item_id: str) -> bool:
        return self.store.delete_item(user_id, item_id)

    @instrument_tool(
        "suggest_outfits",
        input_model=SuggestionRequest,
        on_validation_error=lambda exc: validation_failure("Invalid suggestion request", exc),
    )
    def suggest_outfits(
        self,
        *,
        user_id: str,
        occasion: Optional[str] = None,
        season: Optional[str] = None,
        color_preference: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Suggest outfits from everything the user owns.

        An empty wardrobe is reported as an ``empty_inventory`` error payload
        rather than raised, so callers can prompt the user to add items.
        """

        inventory = self.store.list_items_for_user(user_id)
        filters = SuggestionFilters(occasion=occasion, season=season, color_preference=color_preference)
        try:
            result = self.engine.suggest(inventory, filters)
        except EmptyInventoryError as exc:
            return {
                "status": "error",
                "code": "empty_inventory",
                "message": str(exc),
                "suggestions": [],
                "total_clothings": 0,
            }
        return {
            "status": "ok",
            "suggestions": [suggestion.to_dict() for suggestion in result.suggestions],
            "total_clothings": result.total_inventory_size,
            "diagnostics": result.diagnostics,
        }

    @instrument_tool("save_outfit", input_model=SaveOutfitRequest)
    def save_outfit(
        self,
        *,
        user_id: str,
        name: str,
        clothing_ids: List[str],
        description: Optional[str] = None,
        occasion: Optional[str] = None,
        season: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Persist an outfit, typically a suggestion the user liked."""

        self._require_owned_items(user_id, clothing_ids)
        outfit = self.store.create_outfit(
            user_id=user_id,
            name=name,
            clothing_ids=clothing_ids,
            description=description,
            occasion=occasion,
            season=season,
        )
        return asdict(outfit)

    def save_suggestion(self, user_id: str, suggestion: Dict[str, Any]) -> Dict[str, Any]:
        """Save a suggestion payload as returned by :meth:`suggest_outfits`."""

        return self.save_outfit(
            user_id=user_id,
            name=suggestion["name"],
            description=suggestion.get("reason"),
            occasion=suggestion.get("occasion"),
            season=suggestion.get("season"),
            clothing_ids=[item["id"] for item in suggestion.get("items", [])],
        )

    @instrument_tool("list_outfits", input_model=_UserInput)
    def list_outfits(self, *, user_id: str) -> List[Dict[str, Any]]:
        return [asdict(outfit) for outfit in self.store.list_outfits_for_user(user_id)]

    @instrument_tool("get_outfit", input_model=_OutfitRefInput)
    def get_outfit(self, *, user_id: str, outfit_id: str) -> Optional[Dict[str, Any]]:
        outfit = self.store.get_outfit(user_id, outfit_id)
        return asdict(outfit) if outfit else None

    @instrument_tool("update_outfit", input_model=_UpdateOutfitInput)
    def update_outfit(self, *, user_id: str, outfit_id: str, outfit_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Edit a saved outfit. Returns None when the outfit does not exist.

        A new ``clothing_ids`` list must only name items the user owns;
        otherwise ``LookupError`` is raised and nothing is changed.
        """

        changes = {key: value for key, value in outfit_data.items() if value is not None}
        self._require_owned_items(user_id, changes.get("clothing_ids", []))
        updated = self.store.update_outfit(user_id, outfit_id, changes)
        return asdict(updated) if updated else None

    @instrument_tool("delete_outfit", input_model=_OutfitRefInput)
    def delete_outfit(self, *, user_id: str, outfit_id: str) -> bool:
        return self.store.delete_outfit(user_id, outfit_id)

    def _require_owned_items(self, user_id: str, clothing_ids: List[str]) -> None:
        missing = [item_id for item_id in clothing_ids if self.store.get_item(user_id, item_id) is None]
        if missing:
            raise LookupError(f"Unknown clothing items for this user: {missing}")


__all__ = ["WardrobeTools"]
