"""Deterministic pairwise compatibility scoring for clothing items."""

from __future__ import annotations

from typing import List, Optional, Sequence

from models.clothing_item import ClothingItem
from models.color_theory import StylingRules

WEIGHTS = {
    "palette": 3,
    "monochrome": 1,
    "preference": 2,
    "shared_tag": 1,
}

_DEFAULT_RULES = StylingRules()


def _shared_tag_count(base: ClothingItem, candidate: ClothingItem) -> int:
    # Counts base tokens found on the candidate, so repeated base tags count twice.
    candidate_tags = set(candidate.tag_tokens)
    return len([tag for tag in base.tag_tokens if tag in candidate_tags])


def score_compatibility(
    base: ClothingItem,
    candidate: ClothingItem,
    color_preference: Optional[str] = None,
    rules: StylingRules = _DEFAULT_RULES,
) -> int:
    """Score how well ``candidate`` goes with ``base``. Higher is better."""

    score = 0
    if rules.is_compatible(base.color, candidate.color):
        score += WEIGHTS["palette"]
    elif base.color == candidate.color:
        score += WEIGHTS["monochrome"]

    if color_preference and color_preference in candidate.color:
        score += WEIGHTS["preference"]

    score += WEIGHTS["shared_tag"] * _shared_tag_count(base, candidate)
    return score


def rank_candidates(
    base: ClothingItem,
    pool: Optional[Sequence[ClothingItem]],
    color_preference: Optional[str] = None,
    rules: StylingRules = _DEFAULT_RULES,
) -> List[ClothingItem]:
    """Return ``pool`` ordered best first. Ties keep their pool order."""

    if not pool:
        return []
    return sorted(pool, key=lambda item: -score_compatibility(base, item, color_preference, rules))


__all__ = ["score_compatibility", "rank_candidates", "WEIGHTS"]
