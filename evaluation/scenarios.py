"""Evaluation scenarios exercising occasions, seasons and wardrobe shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class EvaluationScenario:
    name: str
    description: str
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    filters: Dict[str, object] = field(default_factory=dict)


def _item(item_id: str, name: str, category: str, color: str, **extra: object) -> Dict[str, object]:
    return {"item_id": item_id, "name": name, "category": category, "color": color, **extra}


def _basic_wardrobe() -> List[Dict[str, object]]:
    return [
        _item("tee_white", "White T-shirt", "TOP", "white", tags="casual,cotton"),
        _item("jeans_black", "Black jeans", "BOTTOM", "black", tags="casual,denim"),
        _item("sneakers_white", "White sneakers", "SHOES", "white", tags="casual"),
    ]


def _full_wardrobe() -> List[Dict[str, object]]:
    return [
        _item("shirt_blue", "Blue oxford shirt", "TOP", "blue", season="SPRING", tags="business"),
        _item("tee_white", "White T-shirt", "TOP", "white", season="SUMMER", tags="casual"),
        _item("sweater_gray", "Gray sweater", "TOP", "gray", season="WINTER", tags="casual,knit"),
        _item("polo_navy", "Navy polo", "TOP", "navy", season="ALL_SEASON"),
        _item("chinos_beige", "Beige chinos", "BOTTOM", "beige", tags="business"),
        _item("jeans_black", "Black jeans", "BOTTOM", "black", tags="casual"),
        _item("shorts_khaki", "Khaki shorts", "BOTTOM", "khaki", season="SUMMER"),
        _item("loafers_brown", "Brown loafers", "SHOES", "brown", tags="business"),
        _item("sneakers_white", "White sneakers", "SHOES", "white", tags="casual"),
        _item("dress_red", "Red wrap dress", "DRESS", "red", season="SUMMER"),
        _item("dress_black", "Black slip dress", "DRESS", "black"),
        _item("coat_camel", "Camel coat", "OUTERWEAR", "beige", season="WINTER"),
        _item("cap_green", "Green cap", "HAT", "green"),
    ]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="basic_casual",
        description="Three basics make exactly one casual outfit.",
        wardrobe_items=_basic_wardrobe(),
        expectations={"exact_count": 1, "first_item_ids": ["tee_white", "jeans_black", "sneakers_white"]},
    ),
    EvaluationScenario(
        name="accessories_only",
        description="Hats and bags alone never form an outfit.",
        wardrobe_items=[
            _item("cap_green", "Green cap", "HAT", "green"),
            _item("tote_beige", "Beige tote", "BAG", "beige"),
        ],
        expectations={"exact_count": 0},
    ),
    EvaluationScenario(
        name="layered_with_outerwear",
        description="Outerwear adds layered copies of the first suggestions.",
        wardrobe_items=_basic_wardrobe() + [_item("jacket_navy", "Navy jacket", "OUTERWEAR", "navy")],
        expectations={"exact_count": 2, "requires_outerwear": True},
    ),
    EvaluationScenario(
        name="full_wardrobe_capped",
        description="A large wardrobe is capped at six suggestions.",
        wardrobe_items=_full_wardrobe(),
        expectations={"exact_count": 6},
    ),
    EvaluationScenario(
        name="winter_business",
        description="Winter filtering drops summer pieces and keeps the coat.",
        wardrobe_items=_full_wardrobe(),
        filters={"season": "WINTER", "occasion": "business"},
        expectations={
            "min_count": 1,
            "requires_outerwear": True,
            "excluded_item_ids": ["tee_white", "shorts_khaki", "dress_red", "shirt_blue"],
        },
    ),
    EvaluationScenario(
        name="summer_dresses",
        description="Dresses pair with shoes when no separates are available.",
        wardrobe_items=[
            _item("dress_red", "Red wrap dress", "DRESS", "red", season="SUMMER"),
            _item("sandals_black", "Black sandals", "SHOES", "black", season="SUMMER"),
            _item("boots_brown", "Brown boots", "SHOES", "brown", season="WINTER"),
        ],
        filters={"season": "SUMMER"},
        expectations={"exact_count": 1, "first_item_ids": ["dress_red", "sandals_black"]},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
