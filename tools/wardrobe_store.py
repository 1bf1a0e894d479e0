"""Wardrobe storage abstractions and SQLite implementation."""
from __future__ import annotations

import sqlite3
import uuid
from contextlib import contextmanager
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

from models.clothing_item import ClothingItem
from models.outfit import SavedOutfit
from models.taxonomy import validate_season


class WardrobeStore:
    """Persistence interface for clothing items and saved outfits."""

    def create_item(self, item: ClothingItem) -> ClothingItem:
        raise NotImplementedError

    def get_item(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        raise NotImplementedError

    def list_items_for_user(self, user_id: str) -> List[ClothingItem]:
        raise NotImplementedError

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[ClothingItem]:
        raise NotImplementedError

    def delete_item(self, user_id: str, item_id: str) -> bool:
        raise NotImplementedError

    def create_outfit(
        self,
        user_id: str,
        name: str,
        clothing_ids: Sequence[str],
        description: Optional[str] = None,
        occasion: Optional[str] = None,
        season: Optional[str] = None,
    ) -> SavedOutfit:
        raise NotImplementedError

    def get_outfit(self, user_id: str, outfit_id: str) -> Optional[SavedOutfit]:
        raise NotImplementedError

    def list_outfits_for_user(self, user_id: str) -> List[SavedOutfit]:
        raise NotImplementedError

    def update_outfit(self, user_id: str, outfit_id: str, updated_fields: Dict[str, object]) -> Optional[SavedOutfit]:
        raise NotImplementedError

    def delete_outfit(self, user_id: str, outfit_id: str) -> bool:
        raise NotImplementedError


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store for clothing items and outfits."""

    def __init__(self, database_path: str | Path = "data/wardrobe.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def _session(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection that commits on success and is always closed."""

        conn = self._connect()
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _ensure_tables(self) -> None:
        with self._session() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS clothing_items (
                    user_id TEXT NOT NULL,
                    item_id TEXT NOT NULL,
                    name TEXT NOT NULL,
                    category TEXT NOT NULL,
                    color TEXT NOT NULL,
                    season TEXT,
                    tags TEXT,
                    brand TEXT,
                    size TEXT,
                    image_url TEXT,
                    created_at TEXT NOT NULL,
                    PRIMARY KEY (user_id, item_id)
                );
                CREATE TABLE IF NOT EXISTS outfits (
                    outfit_id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    name TEXT NOT NULL,
                    description TEXT,
                    occasion TEXT,
                    season TEXT,
                    created_at TEXT NOT NULL
                );
                CREATE TABLE IF NOT EXISTS outfit_items (
                    outfit_id TEXT NOT NULL REFERENCES outfits(outfit_id) ON DELETE CASCADE,
                    user_id TEXT NOT NULL,
                    item_id TEXT NOT NULL,
                    position INTEGER NOT NULL,
                    UNIQUE (outfit_id, item_id)
                );
                """
            )

    def create_item(self, item: ClothingItem) -> ClothingItem:
        if not item.user_id:
            raise ValueError("ClothingItem must belong to a user before it can be stored")
        with self._session() as conn:
            existing = conn.execute(
                "SELECT created_at FROM clothing_items WHERE user_id = ? AND item_id = ?",
                (item.user_id, item.item_id),
            ).fetchone()
            conn.execute(
                """
                INSERT OR REPLACE INTO clothing_items (
                    user_id, item_id, name, category, color, season, tags, brand, size, image_url, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.user_id,
                    item.item_id,
                    item.name,
                    item.category.value,
                    item.color,
                    item.season.value if item.season else None,
                    item.tags,
                    item.brand,
                    item.size,
                    item.image_url,
                    existing["created_at"] if existing else _now(),
                ),
            )
        return item

    def _row_to_item(self, row: sqlite3.Row) -> ClothingItem:
        return ClothingItem(
            item_id=row["item_id"],
            user_id=row["user_id"],
            name=row["name"],
            category=row["category"],
            color=row["color"],
            season=row["season"],
            tags=row["tags"],
            brand=row["brand"],
            size=row["size"],
            image_url=row["image_url"],
        )

    def get_item(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        with self._session() as conn:
            cursor = conn.execute(
                "SELECT * FROM clothing_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            row = cursor.fetchone()
            return self._row_to_item(row) if row else None

    def list_items_for_user(self, user_id: str) -> List[ClothingItem]:
        """Return the user's items, newest first."""

        with self._session() as conn:
            cursor = conn.execute(
                "SELECT * FROM clothing_items WHERE user_id = ? ORDER BY created_at DESC, rowid DESC",
                (user_id,),
            )
            return [self._row_to_item(row) for row in cursor.fetchall()]

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[ClothingItem]:
        current = self.get_item(user_id, item_id)
        if not current:
            return None

        values = asdict(current)
        for key, value in updated_fields.items():
            if key in {"user_id", "item_id"}:
                continue
            if key in values:
                values[key] = value

        validated = ClothingItem(**values)
        return self.create_item(validated)

    def delete_item(self, user_id: str, item_id: str) -> bool:
        with self._session() as conn:
            conn.execute(
                "DELETE FROM outfit_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            cursor = conn.execute(
                "DELETE FROM clothing_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            return cursor.rowcount > 0

    def create_outfit(
        self,
        user_id: str,
        name: str,
        clothing_ids: Sequence[str],
        description: Optional[str] = None,
        occasion: Optional[str] = None,
        season: Optional[str] = None,
    ) -> SavedOutfit:
        season_value = validate_season(season)
        outfit = SavedOutfit(
            outfit_id=uuid.uuid4().hex,
            user_id=user_id,
            name=name,
            clothing_ids=list(dict.fromkeys(clothing_ids)),
            description=description,
            occasion=occasion,
            season=season_value.value if season_value else None,
            created_at=_now(),
        )
        with self._session() as conn:
            conn.execute(
                """
                INSERT INTO outfits (outfit_id, user_id, name, description, occasion, season, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    outfit.outfit_id,
                    outfit.user_id,
                    outfit.name,
                    outfit.description,
                    outfit.occasion,
                    outfit.season,
                    outfit.created_at,
                ),
            )
            conn.executemany(
                "INSERT INTO outfit_items (outfit_id, user_id, item_id, position) VALUES (?, ?, ?, ?)",
                [(outfit.outfit_id, user_id, item_id, index) for index, item_id in enumerate(outfit.clothing_ids)],
            )
        return outfit

    def _row_to_outfit(self, conn: sqlite3.Connection, row: sqlite3.Row) -> SavedOutfit:
        item_rows = conn.execute(
            "SELECT item_id FROM outfit_items WHERE outfit_id = ? ORDER BY position",
            (row["outfit_id"],),
        ).fetchall()
        return SavedOutfit(
            outfit_id=row["outfit_id"],
            user_id=row["user_id"],
            name=row["name"],
            clothing_ids=[item_row["item_id"] for item_row in item_rows],
            description=row["description"],
            occasion=row["occasion"],
            season=row["season"],
            created_at=row["created_at"],
        )

    def get_outfit(self, user_id: str, outfit_id: str) -> Optional[SavedOutfit]:
        with self._session() as conn:
            row = conn.execute(
                "SELECT * FROM outfits WHERE user_id = ? AND outfit_id = ?",
                (user_id, outfit_id),
            ).fetchone()
            return self._row_to_outfit(conn, row) if row else None

    def list_outfits_for_user(self, user_id: str) -> List[SavedOutfit]:
        with self._session() as conn:
            outfit_rows = conn.execute(
                "SELECT * FROM outfits WHERE user_id = ? ORDER BY created_at DESC, rowid DESC",
                (user_id,),
            ).fetchall()
            return [self._row_to_outfit(conn, row) for row in outfit_rows]

    def update_outfit(self, user_id: str, outfit_id: str, updated_fields: Dict[str, object]) -> Optional[SavedOutfit]:
        """Apply ``updated_fields`` to a saved outfit.

        ``clothing_ids``, when present, replaces the outfit's item list in the
        given order. Other keys outside the outfit's editable fields are ignored.
        """

        current = self.get_outfit(user_id, outfit_id)
        if not current:
            return None

        values = asdict(current)
        for key in ("name", "description", "occasion", "season"):
            if key in updated_fields:
                values[key] = updated_fields[key]
        season_value = validate_season(values["season"])
        values["season"] = season_value.value if season_value else None
        if "clothing_ids" in updated_fields:
            values["clothing_ids"] = list(dict.fromkeys(updated_fields["clothing_ids"]))
        outfit = SavedOutfit(**values)

        with self._session() as conn:
            conn.execute(
                "UPDATE outfits SET name = ?, description = ?, occasion = ?, season = ? WHERE user_id = ? AND outfit_id = ?",
                (outfit.name, outfit.description, outfit.occasion, outfit.season, user_id, outfit_id),
            )
            if "clothing_ids" in updated_fields:
                conn.execute("DELETE FROM outfit_items WHERE outfit_id = ?", (outfit_id,))
                conn.executemany(
                    "INSERT INTO outfit_items (outfit_id, user_id, item_id, position) VALUES (?, ?, ?, ?)",
                    [(outfit_id, user_id, item_id, index) for index, item_id in enumerate(outfit.clothing_ids)],
                )
        return outfit

    def delete_outfit(self, user_id: str, outfit_id: str) -> bool:
        with self._session() as conn:
            conn.execute("DELETE FROM outfit_items WHERE user_id = ? AND outfit_id = ?", (user_id, outfit_id))
            cursor = conn.execute(
                "DELETE FROM outfits WHERE user_id = ? AND outfit_id = ?",
                (user_id, outfit_id),
            )
            return cursor.rowcount > 0


__all__ = ["WardrobeStore", "SQLiteWardrobeStore"]
