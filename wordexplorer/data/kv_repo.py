from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional

from wordexplorer.db.database import ensure_schema, get_conn
from wordexplorer.service.errors import StorageError

logger = logging.getLogger(__name__)

HISTORY_KEY = "searchHistory"
FAVORITES_KEY = "favorites"


class KeyValueRepo:
    """Named JSON lists in the ``kv_store`` table.

    Every write replaces the whole list for a key.
    """

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = db_path

    def load_list(self, key: str) -> List[Any]:
        try:
            with get_conn(self.db_path) as conn:
                ensure_schema(conn)
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Could not load {key!r}: {e}") from e

        if not row:
            return []
        try:
            data = json.loads(row["value"])
        except ValueError:
            logger.warning("Stored value for %r is not valid JSON; starting empty", key)
            return []
        if not isinstance(data, list):
            logger.warning("Stored value for %r is not a list; starting empty", key)
            return []
        return data

    def save_list(self, key: str, items: List[Any]) -> None:
        now = datetime.now(timezone.utc).isoformat()
        try:
            payload = json.dumps(items, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Could not serialize {key!r}: {e}") from e
        try:
            with get_conn(self.db_path) as conn:
                ensure_schema(conn)
                conn.execute(
                    """INSERT INTO kv_store (key, value, updated_at)
                         VALUES (?, ?, ?)
                         ON CONFLICT(key)
                         DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at""",
                    (key, payload, now),
                )
        except sqlite3.Error as e:
            raise StorageError(f"Could not save {key!r}: {e}") from e
