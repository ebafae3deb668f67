from __future__ import annotations

import json
import sqlite3
from pathlib import Path

from study_games.models import Deck

SCHEMA = """
CREATE TABLE IF NOT EXISTS decks (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    subject TEXT,
    data_json TEXT NOT NULL,
    date_modified TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value INTEGER NOT NULL
);
"""


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.conn = sqlite3.connect(str(db_path), check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL")
        self._init_schema()

    def _init_schema(self) -> None:
        self.conn.executescript(SCHEMA)
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()

    # ── Decks ─────────────────────────────────────────────────────────────

    def save_deck(self, deck: Deck) -> None:
        self.conn.execute(
            "INSERT OR REPLACE INTO decks (id, title, subject, data_json, date_modified) "
            "VALUES (?, ?, ?, ?, ?)",
            (
                deck.id,
                deck.title,
                deck.subject,
                json.dumps(deck.to_dict()),
                deck.date_modified.isoformat(),
            ),
        )
        self.conn.commit()

    def get_deck(self, deck_id: str) -> Deck | None:
        row = self.conn.execute(
            "SELECT data_json FROM decks WHERE id = ?", (deck_id,)
        ).fetchone()
        return Deck.from_dict(json.loads(row["data_json"])) if row else None

    def get_all_decks(self) -> list[Deck]:
        rows = self.conn.execute(
            "SELECT data_json FROM decks ORDER BY date_modified DESC"
        ).fetchall()
        return [Deck.from_dict(json.loads(r["data_json"])) for r in rows]

    def delete_deck(self, deck_id: str) -> bool:
        cur = self.conn.execute("DELETE FROM decks WHERE id = ?", (deck_id,))
        self.conn.commit()
        return cur.rowcount > 0

    def get_deck_count(self) -> int:
        return self.conn.execute("SELECT COUNT(*) FROM decks").fetchone()[0]

    # ── Scalar settings ───────────────────────────────────────────────────

    def get_int(self, key: str, default: int = 0) -> int:
        row = self.conn.execute(
            "SELECT value FROM kv_store WHERE key = ?", (key,)
        ).fetchone()
        return row[0] if row else default

    def set_int(self, key: str, value: int) -> None:
        self.conn.execute(
            "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
            (key, int(value)),
        )
        self.conn.commit()

    def delete_keys(self, *keys: str) -> None:
        self.conn.executemany("DELETE FROM kv_store WHERE key = ?", [(k,) for k in keys])
        self.conn.commit()
