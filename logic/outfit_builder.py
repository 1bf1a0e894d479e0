"""Deterministic outfit assembly helpers with transparent diagnostics."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from logic.justification import build_reason, layering_clause
from logic.outfit_scoring import rank_candidates
from models.clothing_item import ClothingItem
from models.color_theory import StylingRules
from models.outfit import OutfitSuggestion, SuggestionFilters
from models.taxonomy import Category

logger = logging.getLogger(__name__)

Selector = Callable[[Sequence[ClothingItem]], ClothingItem]

TOPS_PER_REQUEST = 3
BOTTOMS_PER_TOP = 2
DRESSES_PER_REQUEST = 2
ENHANCED_PER_REQUEST = 2

SEPARATES_LABEL = "Casual Outfit"
DRESS_LABEL = "Dress Outfit"


@dataclass(frozen=True)
class CompositionResult:
    suggestions: List[OutfitSuggestion]
    diagnostics: Dict[str, object]


def _new_suggestion(
    suggestions: List[OutfitSuggestion],
    label: str,
    items: List[ClothingItem],
    reason: str,
    filters: SuggestionFilters,
    rules: StylingRules,
) -> OutfitSuggestion:
    number = len(suggestions) + 1
    suggestion = OutfitSuggestion(
        suggestion_id=f"suggestion-{number}",
        name=f"{label} {number}",
        items=tuple(items),
        occasion=filters.occasion or rules.default_occasion,
        season=filters.season.value if filters.season else rules.default_season,
        reason=reason,
    )
    suggestions.append(suggestion)
    return suggestion


def compose_separates(
    buckets: Dict[Category, List[ClothingItem]],
    filters: SuggestionFilters,
    rules: StylingRules,
    suggestions: List[OutfitSuggestion],
) -> int:
    """Pair tops with their best bottoms and finish each pair with shoes.

    Shoes are ranked against the top. A pair is still emitted when there are
    no shoes at all.
    """

    tops, bottoms, shoes = buckets[Category.TOP], buckets[Category.BOTTOM], buckets[Category.SHOES]
    if not tops or not bottoms:
        logger.info("Skipping separates: %s tops, %s bottoms", len(tops), len(bottoms))
        return 0

    emitted = 0
    for top in tops[:TOPS_PER_REQUEST]:
        ranked_bottoms = rank_candidates(top, bottoms, filters.color_preference, rules)
        ranked_shoes = rank_candidates(top, shoes, filters.color_preference, rules)
        for bottom in ranked_bottoms[:BOTTOMS_PER_TOP]:
            items = [top, bottom]
            if ranked_shoes:
                items.append(ranked_shoes[0])
            reason = build_reason(top, bottom, filters.occasion, rules)
            suggestion = _new_suggestion(suggestions, SEPARATES_LABEL, items, reason, filters, rules)
            logger.info("Composed %s from %s", suggestion.suggestion_id, [item.item_id for item in items])
            emitted += 1
    return emitted


def compose_dresses(
    buckets: Dict[Category, List[ClothingItem]],
    filters: SuggestionFilters,
    rules: StylingRules,
    suggestions: List[OutfitSuggestion],
) -> int:
    """Finish each of the first dresses with its best matching shoes."""

    dresses, shoes = buckets[Category.DRESS], buckets[Category.SHOES]
    if not dresses:
        return 0

    emitted = 0
    for dress in dresses[:DRESSES_PER_REQUEST]:
        ranked_shoes = rank_candidates(dress, shoes, filters.color_preference, rules)
        if not ranked_shoes:
            logger.info("No shoes available for dress %s", dress.item_id)
            continue
        items = [dress, ranked_shoes[0]]
        reason = build_reason(dress, ranked_shoes[0], filters.occasion, rules)
        suggestion = _new_suggestion(suggestions, DRESS_LABEL, items, reason, filters, rules)
        logger.info("Composed %s from %s", suggestion.suggestion_id, [item.item_id for item in items])
        emitted += 1
    return emitted


def compose_candidates(
    buckets: Dict[Category, List[ClothingItem]],
    filters: SuggestionFilters,
    rules: StylingRules,
) -> CompositionResult:
    """Run the separates strategy, then the dress strategy, sharing one counter."""

    suggestions: List[OutfitSuggestion] = []
    separates = compose_separates(buckets, filters, rules, suggestions)
    dresses = compose_dresses(buckets, filters, rules, suggestions)
    diagnostics: Dict[str, object] = {
        "separates_count": separates,
        "dress_count": dresses,
    }
    return CompositionResult(suggestions=suggestions, diagnostics=diagnostics)


def enhance_with_outerwear(
    suggestions: Sequence[OutfitSuggestion],
    outerwear: Sequence[ClothingItem],
    selector: Selector,
) -> List[OutfitSuggestion]:
    """Derive layered copies of the first suggestions. Originals are untouched."""

    if not suggestions or not outerwear:
        return []

    enhanced: List[OutfitSuggestion] = []
    for base in suggestions[:ENHANCED_PER_REQUEST]:
        layer = selector(outerwear)
        enhanced.append(
            OutfitSuggestion(
                suggestion_id=f"{base.suggestion_id}-layered",
                name=base.name.replace("Outfit", "Complete Outfit"),
                items=base.items + (layer,),
                occasion=base.occasion,
                season=base.season,
                reason=base.reason + layering_clause(layer),
            )
        )
        logger.info("Added outerwear %s to %s", layer.item_id, base.suggestion_id)
    return enhanced


__all__ = [
    "compose_candidates",
    "compose_separates",
    "compose_dresses",
    "enhance_with_outerwear",
    "CompositionResult",
    "Selector",
]
