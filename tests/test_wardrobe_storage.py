"""Wardrobe storage, taxonomy and service tool tests."""

from __future__ import annotations

import sqlite3
import sys
from pathlib import Path
from typing import Dict, List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models import taxonomy
from models.clothing_item import ClothingItem, from_raw_metadata
from models.taxonomy import Category, Season
from tools.wardrobe_store import SQLiteWardrobeStore
from tools.wardrobe_tools import WardrobeTools
from wardrobe_app.config import WardrobeConfig


@pytest.fixture()
def sample_metadata() -> Dict[str, object]:
    return {
        "item_id": "item-1",
        "user_id": "user-123",
        "name": "Navy blazer",
        "category": "top",
        "color": "navy",
        "season": "autumn",
        "tags": "business, wool",
        "brand": "Example",
        "size": "M",
        "image_url": "https://example.com/image.jpg",
    }


def test_validate_category_and_season() -> None:
    """Validation helpers accept loose spellings and reject unknown values."""

    assert taxonomy.validate_category("Top") is Category.TOP
    assert taxonomy.validate_category(" outerwear ") is Category.OUTERWEAR
    assert taxonomy.validate_season("all season") is Season.ALL_SEASON
    assert taxonomy.validate_season("") is None
    assert taxonomy.validate_season(None) is None

    with pytest.raises(ValueError):
        taxonomy.validate_category("cape")
    with pytest.raises(ValueError):
        taxonomy.validate_season("monsoon")


def test_split_tags_keeps_every_raw_token() -> None:
    assert taxonomy.split_tags(" Casual, work ,,casual") == ["casual", "work", "", "casual"]
    assert taxonomy.split_tags("denim,") == ["denim", ""]
    assert taxonomy.split_tags(None) == []
    assert taxonomy.split_tags("") == []


def test_clothing_item_construction(sample_metadata: Dict[str, object]) -> None:
    item = from_raw_metadata(sample_metadata)
    assert item.category is Category.TOP
    assert item.season is Season.AUTUMN
    assert item.tag_tokens == ["business", "wool"]
    assert item.to_dict()["category"] == "TOP"
    assert item.to_dict()["id"] == "item-1"


def test_from_raw_metadata_requires_fields(sample_metadata: Dict[str, object]) -> None:
    raw = sample_metadata.copy()
    raw.pop("color")
    with pytest.raises(ValueError):
        from_raw_metadata(raw)


def test_from_raw_metadata_accepts_id_alias_and_blank_optionals() -> None:
    item = from_raw_metadata({"id": "x", "name": "Tee", "category": "TOP", "color": "white", "season": "", "tags": " "})
    assert item.item_id == "x"
    assert item.season is None
    assert item.tags is None


@pytest.fixture()
def store(tmp_path: Path) -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore(tmp_path / "wardrobe.db")


def test_store_round_trip(store: SQLiteWardrobeStore, sample_metadata: Dict[str, object]) -> None:
    item = from_raw_metadata(sample_metadata)
    store.create_item(item)

    assert store.get_item(item.user_id, item.item_id) == item
    assert store.list_items_for_user(item.user_id) == [item]


def test_store_rejects_items_without_owner(store: SQLiteWardrobeStore) -> None:
    with pytest.raises(ValueError):
        store.create_item(ClothingItem(item_id="x", name="Tee", category="TOP", color="white"))


def test_store_scopes_items_by_user(store: SQLiteWardrobeStore, sample_metadata: Dict[str, object]) -> None:
    item_user1 = from_raw_metadata(sample_metadata)
    item_user2 = from_raw_metadata({**sample_metadata, "user_id": "other", "item_id": "item-2"})

    store.create_item(item_user1)
    store.create_item(item_user2)

    assert store.list_items_for_user("user-123") == [item_user1]
    assert store.list_items_for_user("other") == [item_user2]
    assert store.get_item("other", "item-1") is None


def test_store_lists_newest_first(store: SQLiteWardrobeStore, sample_metadata: Dict[str, object]) -> None:
    for index in range(3):
        store.create_item(from_raw_metadata({**sample_metadata, "item_id": f"item-{index}"}))
    assert [item.item_id for item in store.list_items_for_user("user-123")] == ["item-2", "item-1", "item-0"]


def test_update_and_delete_item(store: SQLiteWardrobeStore, sample_metadata: Dict[str, object]) -> None:
    item = from_raw_metadata(sample_metadata)
    store.create_item(item)

    updated = store.update_item(item.user_id, item.item_id, {"color": "black", "season": "WINTER"})
    assert updated is not None
    assert updated.color == "black"
    assert updated.season is Season.WINTER
    assert store.update_item(item.user_id, "missing", {"color": "red"}) is None

    with pytest.raises(ValueError):
        store.update_item(item.user_id, item.item_id, {"category": "cape"})

    assert store.delete_item(item.user_id, item.item_id) is True
    assert store.get_item(item.user_id, item.item_id) is None
    assert store.delete_item(item.user_id, item.item_id) is False


def test_outfits_are_stored_with_item_order(store: SQLiteWardrobeStore) -> None:
    outfit = store.create_outfit(
        user_id="user-123",
        name="Casual Outfit 1",
        clothing_ids=["b", "a", "b"],
        description="A reason",
        occasion="casual",
        season="ALL_SEASON",
    )
    assert outfit.clothing_ids == ["b", "a"]
    listed = store.list_outfits_for_user("user-123")
    assert listed == [outfit]
    assert store.list_outfits_for_user("other") == []


@pytest.fixture()
def tools(tmp_path: Path) -> WardrobeTools:
    config = WardrobeConfig(wardrobe_db_path=str(tmp_path / "tools.db"), random_seed=1)
    return WardrobeTools(config=config)


def _add(tools: WardrobeTools, name: str, category: str, color: str, **extra: object) -> Dict[str, object]:
    return tools.add_clothing_item(
        user_id="user-123", item_data={"name": name, "category": category, "color": color, **extra}
    )


def test_tools_round_trip(tools: WardrobeTools) -> None:
    added = _add(tools, "White T-shirt", "top", "white", season="summer")
    assert added["category"] == "TOP"
    assert added["season"] == "SUMMER"

    listed = tools.list_clothing_items(user_id="user-123")
    assert [item["id"] for item in listed] == [added["id"]]
    assert tools.delete_clothing_item(user_id="user-123", item_id=added["id"]) is True
    assert tools.list_clothing_items(user_id="user-123") == []


def test_tools_reject_invalid_items(tools: WardrobeTools) -> None:
    with pytest.raises(ValueError):
        _add(tools, "Cape", "cape", "red")


def test_suggest_reports_empty_wardrobe(tools: WardrobeTools) -> None:
    response = tools.suggest_outfits(user_id="nobody")
    assert response["status"] == "error"
    assert response["code"] == "empty_inventory"
    assert "clothing items first" in response["message"]


def test_suggest_returns_validation_payload(tools: WardrobeTools) -> None:
    response = tools.suggest_outfits(user_id="user-123", season="monsoon")
    assert response["status"] == "needs_review"
    assert response["details"]


def test_suggest_and_save_suggestion(tools: WardrobeTools) -> None:
    _add(tools, "White T-shirt", "TOP", "white")
    _add(tools, "Black jeans", "BOTTOM", "black")
    _add(tools, "White sneakers", "SHOES", "white")

    response = tools.suggest_outfits(user_id="user-123", occasion="casual", season="", color_preference="")
    assert response["status"] == "ok"
    assert response["total_clothings"] == 3
    suggestion = response["suggestions"][0]
    assert [item["name"] for item in suggestion["items"]] == ["White T-shirt", "Black jeans", "White sneakers"]

    saved = tools.save_suggestion("user-123", suggestion)
    assert saved["name"] == "Casual Outfit 1"
    assert saved["description"] == suggestion["reason"]
    assert saved["season"] == "ALL_SEASON"
    assert saved["clothing_ids"] == [item["id"] for item in suggestion["items"]]
    assert tools.list_outfits(user_id="user-123")[0]["outfit_id"] == saved["outfit_id"]


def test_save_outfit_rejects_foreign_items(tools: WardrobeTools) -> None:
    mine = _add(tools, "White T-shirt", "TOP", "white")
    with pytest.raises(LookupError):
        tools.save_outfit(user_id="someone-else", name="Borrowed", clothing_ids=[mine["id"]])


def test_outfit_get_update_and_delete(store: SQLiteWardrobeStore) -> None:
    outfit = store.create_outfit(user_id="user-123", name="Casual Outfit 1", clothing_ids=["a", "b"], occasion="casual")
    assert store.get_outfit("user-123", outfit.outfit_id) == outfit
    assert store.get_outfit("other", outfit.outfit_id) is None

    updated = store.update_outfit(
        "user-123", outfit.outfit_id, {"name": "Friday", "season": "summer", "clothing_ids": ["c", "a", "c"]}
    )
    assert updated is not None
    assert (updated.name, updated.season, updated.occasion) == ("Friday", "SUMMER", "casual")
    assert updated.clothing_ids == ["c", "a"]
    assert store.get_outfit("user-123", outfit.outfit_id) == updated
    assert store.update_outfit("other", outfit.outfit_id, {"name": "Stolen"}) is None

    with pytest.raises(ValueError):
        store.update_outfit("user-123", outfit.outfit_id, {"season": "monsoon"})

    assert store.delete_outfit("other", outfit.outfit_id) is False
    assert store.delete_outfit("user-123", outfit.outfit_id) is True
    assert store.get_outfit("user-123", outfit.outfit_id) is None
    assert store.list_outfits_for_user("user-123") == []


def test_store_closes_every_connection(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, sample_metadata: Dict[str, object]
) -> None:
    opened: List[sqlite3.Connection] = []
    connect = sqlite3.connect

    def recording_connect(*args: object, **kwargs: object) -> sqlite3.Connection:
        conn = connect(*args, **kwargs)
        opened.append(conn)
        return conn

    monkeypatch.setattr(sqlite3, "connect", recording_connect)
    store = SQLiteWardrobeStore(tmp_path / "closing.db")
    item = from_raw_metadata(sample_metadata)
    store.create_item(item)
    store.list_items_for_user(item.user_id)
    store.update_item(item.user_id, item.item_id, {"color": "black"})
    outfit = store.create_outfit(user_id=item.user_id, name="One", clothing_ids=[item.item_id])
    store.update_outfit(item.user_id, outfit.outfit_id, {"clothing_ids": [item.item_id]})
    store.list_outfits_for_user(item.user_id)
    store.delete_outfit(item.user_id, outfit.outfit_id)
    store.delete_item(item.user_id, item.item_id)

    assert len(opened) >= 9
    for conn in opened:
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")


def test_tools_get_and_update_items(tools: WardrobeTools) -> None:
    added = _add(tools, "White T-shirt", "top", "white", brand="Basics")
    assert tools.get_clothing_item(user_id="user-123", item_id=added["id"]) == added
    assert tools.get_clothing_item(user_id="someone-else", item_id=added["id"]) is None

    updated = tools.update_clothing_item(
        user_id="user-123", item_id=added["id"], item_data={"color": "cream", "season": "summer"}
    )
    assert updated is not None
    assert (updated["color"], updated["season"], updated["brand"]) == ("cream", "SUMMER", "Basics")
    assert tools.update_clothing_item(user_id="user-123", item_id="missing", item_data={"color": "red"}) is None


def test_tools_update_and_delete_outfits(tools: WardrobeTools) -> None:
    tee = _add(tools, "White T-shirt", "TOP", "white")
    jeans = _add(tools, "Black jeans", "BOTTOM", "black")
    saved = tools.save_outfit(user_id="user-123", name="Weekend", clothing_ids=[tee["id"]])

    updated = tools.update_outfit(
        user_id="user-123", outfit_id=saved["outfit_id"], outfit_data={"clothing_ids": [tee["id"], jeans["id"]]}
    )
    assert updated["name"] == "Weekend"
    assert updated["clothing_ids"] == [tee["id"], jeans["id"]]
    assert tools.get_outfit(user_id="user-123", outfit_id=saved["outfit_id"]) == updated

    with pytest.raises(LookupError):
        tools.update_outfit(user_id="user-123", outfit_id=saved["outfit_id"], outfit_data={"clothing_ids": ["ghost"]})
    assert tools.update_outfit(user_id="user-123", outfit_id="missing", outfit_data={"name": "x"}) is None

    assert tools.delete_outfit(user_id="user-123", outfit_id=saved["outfit_id"]) is True
    assert tools.get_outfit(user_id="user-123", outfit_id=saved["outfit_id"]) is None


def test_tools_never_return_more_than_six_suggestions(tools: WardrobeTools) -> None:
    for name, category, color in [
        ("White tee", "TOP", "white"),
        ("Blue shirt", "TOP", "blue"),
        ("Gray sweater", "TOP", "gray"),
        ("Black jeans", "BOTTOM", "black"),
        ("Beige chinos", "BOTTOM", "beige"),
        ("White sneakers", "SHOES", "white"),
        ("Red dress", "DRESS", "red"),
        ("Camel coat", "OUTERWEAR", "beige"),
    ]:
        _add(tools, name, category, color)

    response = tools.suggest_outfits(user_id="user-123")
    assert len(response["suggestions"]) == 6
    assert response["diagnostics"]["produced_count"] == 9


def test_tools_refuse_a_cap_above_six(tmp_path: Path) -> None:
    config = WardrobeConfig(wardrobe_db_path=str(tmp_path / "capped.db"), max_suggestions=10)
    with pytest.raises(ValueError):
        WardrobeTools(config=config)
