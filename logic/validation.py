"""Pydantic schemas for validating service and HTTP payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.taxonomy import Category, Season


class ClothingItemInput(BaseModel):
    """Payload accepted when cataloguing a new clothing item."""

    name: str = Field(min_length=1, max_length=255)
    category: Category
    color: str = Field(min_length=1, max_length=50)
    season: Optional[Season] = None
    tags: Optional[str] = None
    brand: Optional[str] = Field(None, max_length=100)
    size: Optional[str] = Field(None, max_length=50)
    image_url: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def _upper_category(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("season", mode="before")
    @classmethod
    def _blank_season(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value


class ClothingItemUpdate(BaseModel):
    """Partial edit of a catalogued item. Omitted or null fields keep their value."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[Category] = None
    color: Optional[str] = Field(None, min_length=1, max_length=50)
    season: Optional[Season] = None
    tags: Optional[str] = None
    brand: Optional[str] = Field(None, max_length=100)
    size: Optional[str] = Field(None, max_length=50)
    image_url: Optional[str] = None

    @field_validator("category", "season", mode="before")
    @classmethod
    def _upper_enum(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value


class SuggestionRequest(BaseModel):
    """Filters for an outfit suggestion request. Every field is optional."""

    user_id: str = Field(min_length=1)
    occasion: Optional[str] = None
    season: Optional[Season] = None
    color_preference: Optional[str] = None

    @field_validator("occasion", "color_preference", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("season", mode="before")
    @classmethod
    def _upper_season(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value


class SaveOutfitRequest(BaseModel):
    """Shape used to persist a suggestion the user chose to keep."""

    user_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    occasion: Optional[str] = Field(None, max_length=50)
    season: Optional[Season] = None
    clothing_ids: List[str] = Field(min_length=1)


class OutfitUpdate(BaseModel):
    """Partial edit of a saved outfit. ``clothing_ids`` replaces the item list."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    occasion: Optional[str] = Field(None, max_length=50)
    season: Optional[Season] = None
    clothing_ids: Optional[List[str]] = Field(None, min_length=1)

    @field_validator("season", mode="before")
    @classmethod
    def _upper_season(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value


class SuggestionResponse(BaseModel):
    status: Literal["ok", "error"]
    suggestions: List[Dict[str, Any]] = []
    total_clothings: int = 0
    message: Optional[str] = None


class ValidationResult(BaseModel):
    """Wrapper returned when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    return ValidationResult(message=message, details=exc.errors(include_url=False)).model_dump()


__all__ = [
    "ClothingItemInput",
    "ClothingItemUpdate",
    "SuggestionRequest",
    "SaveOutfitRequest",
    "OutfitUpdate",
    "SuggestionResponse",
    "ValidationResult",
    "validation_failure",
]
