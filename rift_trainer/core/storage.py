"""Client-local key-value storage.

A single SQLite table of string slots, used the way a browser uses
``localStorage``: named slots holding JSON text.
"""

import sqlite3
from pathlib import Path
from typing import Optional, Union


class LocalStorage:
    """String key-value store backed by SQLite."""

    def __init__(self, db_path: Union[Path, str] = ":memory:") -> None:
        """Open (and create if needed) the storage database."""
        if isinstance(db_path, Path):
            db_path.parent.mkdir(parents=True, exist_ok=True)
            target = str(db_path)
        else:
            target = db_path
        self._conn = sqlite3.connect(target, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        with self._conn:
            self._conn.execute("""
                CREATE TABLE IF NOT EXISTS storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """)

    def get_item(self, key: str) -> Optional[str]:
        row = self._conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
        if row is None:
            return None
        return str(row["value"])

    def set_item(self, key: str, value: str) -> None:
        with self._conn:
            self._conn.execute(
                "INSERT OR REPLACE INTO storage (key, value) VALUES (?, ?)",
                (key, value),
            )

    def remove_item(self, key: str) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM storage WHERE key = ?", (key,))

    def keys(self) -> list[str]:
        rows = self._conn.execute("SELECT key FROM storage ORDER BY key").fetchall()
        return [str(row["key"]) for row in rows]

    def close(self) -> None:
        self._conn.close()
