"""Color pairing table and styling rules consumed by the suggestion engine."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

# Keys and values are matched case-sensitively. The table is directional:
# ``"blue"`` lists ``"brown"`` but ``"brown"`` does not list ``"blue"``.
COLOR_COMPATIBILITY: Dict[str, List[str]] = {
    "black": ["white", "gray", "red", "beige", "pink", "yellow"],
    "white": ["black", "navy", "blue", "gray", "red", "khaki"],
    "gray": ["black", "white", "navy", "pink"],
    "navy": ["white", "beige", "gray", "khaki"],
    "blue": ["white", "beige", "gray", "brown"],
    "beige": ["navy", "brown", "white", "black"],
    "brown": ["beige", "white", "green", "navy"],
    "khaki": ["white", "navy", "black"],
    "red": ["black", "white", "navy"],
    "green": ["beige", "brown", "white"],
    "pink": ["gray", "white", "navy"],
    "yellow": ["navy", "gray", "white"],
}

OCCASION_LABELS: Dict[str, str] = {
    "casual": "Casual",
    "formal": "Formal",
    "business": "Business",
    "sport": "Sport",
}

DEFAULT_OCCASION = "casual"
DEFAULT_SEASON = "ALL_SEASON"
MAX_SUGGESTIONS = 6


@dataclass(frozen=True)
class StylingRules:
    """Immutable lookup data handed to the engine at construction time."""

    color_compatibility: Dict[str, List[str]] = field(default_factory=lambda: dict(COLOR_COMPATIBILITY))
    occasion_labels: Dict[str, str] = field(default_factory=lambda: dict(OCCASION_LABELS))
    default_occasion: str = DEFAULT_OCCASION
    default_season: str = DEFAULT_SEASON
    max_suggestions: int = MAX_SUGGESTIONS

    def __post_init__(self) -> None:
        if not 0 <= self.max_suggestions <= MAX_SUGGESTIONS:
            raise ValueError(
                f"max_suggestions must be between 0 and {MAX_SUGGESTIONS}, got {self.max_suggestions}"
            )

    def is_compatible(self, base_color: str, candidate_color: str) -> bool:
        """Return True when ``candidate_color`` is listed for ``base_color``."""

        result = candidate_color in self.color_compatibility.get(base_color, ())
        logger.debug("compatibility check (%s -> %s) -> %s", base_color, candidate_color, result)
        return result

    def occasion_label(self, occasion: Optional[str]) -> Optional[str]:
        if not occasion:
            return None
        return self.occasion_labels.get(occasion, occasion)


__all__ = [
    "COLOR_COMPATIBILITY",
    "OCCASION_LABELS",
    "DEFAULT_OCCASION",
    "DEFAULT_SEASON",
    "MAX_SUGGESTIONS",
    "StylingRules",
]
