"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.suggestion_engine import SuggestionEngine
from models.clothing_item import from_raw_metadata
from models.outfit import OutfitSuggestion, SuggestionFilters
from models.taxonomy import Category


def _first_choice(candidates):
    return candidates[0]


def _evaluate_expectations(
    expectations: Dict[str, object], inventory_ids: List[str], outfits: List[OutfitSuggestion]
) -> Dict[str, bool]:
    checks: Dict[str, bool] = {}
    checks["within_cap"] = len(outfits) <= 6
    checks["item_counts"] = all(2 <= len(outfit.items) <= 4 for outfit in outfits)
    checks["items_from_inventory"] = all(item.item_id in inventory_ids for outfit in outfits for item in outfit.items)
    if "exact_count" in expectations:
        checks["exact_count"] = len(outfits) == int(expectations["exact_count"])
    if "min_count" in expectations:
        checks["min_count"] = len(outfits) >= int(expectations["min_count"])
    if expectations.get("requires_outerwear"):
        checks["requires_outerwear"] = any(
            any(item.category is Category.OUTERWEAR for item in outfit.items) for outfit in outfits
        )
    if expectations.get("first_item_ids"):
        checks["first_item_ids"] = bool(outfits) and [item.item_id for item in outfits[0].items] == list(
            expectations["first_item_ids"]
        )
    if expectations.get("excluded_item_ids"):
        excluded = set(expectations["excluded_item_ids"])
        checks["excluded_item_ids"] = not any(item.item_id in excluded for outfit in outfits for item in outfit.items)
    return checks


def run_scenario(scenario: EvaluationScenario, user_id: str = "eval_user") -> Dict[str, object]:
    inventory = [from_raw_metadata({**item, "user_id": user_id}) for item in scenario.wardrobe_items]
    engine = SuggestionEngine(selector=_first_choice)
    result = engine.suggest(inventory, SuggestionFilters(**scenario.filters))
    checks = _evaluate_expectations(scenario.expectations, [item.item_id for item in inventory], result.suggestions)
    return {
        "scenario": scenario.name,
        "passed": all(checks.values()),
        "checks": checks,
        "outfit_count": len(result.suggestions),
        "total_inventory_size": result.total_inventory_size,
        "diagnostics": result.diagnostics,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
