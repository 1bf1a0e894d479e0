"""Outfit suggestion engine: filter, bucket, compose, layer and cap."""
from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Sequence

from logic.contextual_filtering import bucket_sizes, filter_by_season, partition_by_category
from logic.outfit_builder import Selector, compose_candidates, enhance_with_outerwear
from models.clothing_item import ClothingItem
from models.color_theory import StylingRules
from models.outfit import OutfitSuggestion, SuggestionFilters, SuggestionResult
from models.taxonomy import Category
from wardrobe_app.logging_config import log_event

logger = logging.getLogger(__name__)

COMPOSED_CATEGORIES = (
    Category.TOP,
    Category.BOTTOM,
    Category.DRESS,
    Category.SHOES,
    Category.OUTERWEAR,
)


class EmptyInventoryError(ValueError):
    """Raised when a suggestion is requested for a user with no clothing."""

    def __init__(self, message: str = "Add some clothing items first to get outfit suggestions.") -> None:
        super().__init__(message)


class SuggestionEngine:
    """Turns one user's inventory into a short, ordered list of outfits.

    The engine holds no per-request state. ``rules`` carries the color table,
    occasion labels and the output cap. ``selector`` picks the outerwear piece
    for layered suggestions; when omitted a ``random.Random(seed)`` is used.
    """

    def __init__(
        self,
        rules: Optional[StylingRules] = None,
        selector: Optional[Selector] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.rules = rules or StylingRules()
        self.selector: Selector = selector or random.Random(seed).choice

    def suggest(
        self,
        inventory: Sequence[ClothingItem],
        filters: Optional[SuggestionFilters] = None,
    ) -> SuggestionResult:
        if not inventory:
            raise EmptyInventoryError()
        filters = filters or SuggestionFilters()

        season_result = filter_by_season(inventory, filters.season)
        buckets = partition_by_category(season_result.items)
        composition = compose_candidates(buckets, filters, self.rules)
        enhanced = enhance_with_outerwear(composition.suggestions, buckets[Category.OUTERWEAR], self.selector)
        produced: List[OutfitSuggestion] = composition.suggestions + enhanced
        capped = produced[: self.rules.max_suggestions]

        diagnostics: Dict[str, object] = {
            "season_filter": season_result.debug,
            "buckets": bucket_sizes(buckets, COMPOSED_CATEGORIES),
            **composition.diagnostics,
            "enhanced_count": len(enhanced),
            "produced_count": len(produced),
            "truncated": len(produced) > len(capped),
        }
        log_event(
            logger,
            logging.INFO,
            "suggestions_ready",
            season=season_result.debug["season"],
            inventory_size=len(inventory),
            buckets=diagnostics["buckets"],
            produced_count=len(produced),
            returned_count=len(capped),
            truncated=diagnostics["truncated"],
        )
        return SuggestionResult(suggestions=capped, total_inventory_size=len(inventory), diagnostics=diagnostics)


__all__ = ["SuggestionEngine", "EmptyInventoryError", "COMPOSED_CATEGORIES"]
