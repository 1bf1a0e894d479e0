"""Deterministic season filtering and category bucketing for clothing items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from models.clothing_item import ClothingItem
from models.taxonomy import Category, Season, validate_season


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a single filtering step."""

    items: List[ClothingItem]
    removed: Dict[str, str]
    debug: Dict[str, object]


def filter_by_season(items: Sequence[ClothingItem], season: Season | str | None) -> FilteringResult:
    """Keep items wearable in ``season``.

    Items without a season, items tagged for the requested season and
    ``ALL_SEASON`` items are kept. A missing or ``ALL_SEASON`` request keeps
    everything.
    """

    requested = validate_season(season)
    if requested is None or requested is Season.ALL_SEASON:
        return FilteringResult(
            items=list(items),
            removed={},
            debug={"input_count": len(items), "kept_count": len(items), "removed_count": 0, "season": None},
        )

    removed: Dict[str, str] = {}
    kept: List[ClothingItem] = []
    for item in items:
        if item.season is None or item.season is requested or item.season is Season.ALL_SEASON:
            kept.append(item)
        else:
            removed[item.item_id] = f"worn in {item.season.value}, not {requested.value}"

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "season": requested.value,
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


def partition_by_category(items: Sequence[ClothingItem]) -> Dict[Category, List[ClothingItem]]:
    """Group items into one bucket per category, keeping input order."""

    buckets: Dict[Category, List[ClothingItem]] = {category: [] for category in Category}
    for item in items:
        buckets[item.category].append(item)
    return buckets


def bucket_sizes(buckets: Dict[Category, List[ClothingItem]], only: Optional[Sequence[Category]] = None) -> Dict[str, int]:
    categories = only if only is not None else list(buckets)
    return {category.value: len(buckets[category]) for category in categories}


__all__ = ["filter_by_season", "partition_by_category", "bucket_sizes", "FilteringResult"]
