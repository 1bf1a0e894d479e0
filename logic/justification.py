"""Human-readable reasons attached to outfit suggestions."""

from __future__ import annotations

from typing import Optional

from models.clothing_item import ClothingItem
from models.color_theory import StylingRules

_DEFAULT_RULES = StylingRules()


def color_clause(item1: ClothingItem, item2: ClothingItem, rules: StylingRules = _DEFAULT_RULES) -> str:
    """Describe the color pairing, consulting the table from item1 to item2."""

    if rules.is_compatible(item1.color, item2.color):
        return f"{item1.color} and {item2.color} is a classic pairing!"
    return f"{item1.color} and {item2.color} make a clean, simple pairing."


def build_reason(
    item1: ClothingItem,
    item2: Optional[ClothingItem] = None,
    occasion: Optional[str] = None,
    rules: StylingRules = _DEFAULT_RULES,
) -> str:
    """Explain why ``item1`` (and optionally ``item2``) make a good outfit."""

    reason = item1.name
    if item2 is not None:
        reason += f" paired with {item2.name}. " + color_clause(item1, item2, rules)
    else:
        reason += "."
    label = rules.occasion_label(occasion)
    if label:
        reason += f" Well suited to {label} occasions."
    return reason


def layering_clause(outerwear: ClothingItem) -> str:
    return f" Topped with {outerwear.name}, which adds more layering."


__all__ = ["build_reason", "color_clause", "layering_clause"]
