from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from wordexplorer.config import settings
from wordexplorer.data.kv_repo import HISTORY_KEY, KeyValueRepo
from wordexplorer.service.errors import StorageError
from wordexplorer.service.word_lists import (
    History,
    add_history_entry,
    clear_history_entries,
    history_from_records,
    normalize_word,
)

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


class HistoryService:
    """Recent searches, newest first, unique by word.

    Loaded once on construction; every change rewrites the whole list.
    Storage failures are logged and the in-memory list stays authoritative.
    """

    def __init__(self, repo: KeyValueRepo, limit: Optional[int] = None, clock: Callable[[], int] = now_ms):
        self.repo = repo
        self.limit = settings.HISTORY_LIMIT if limit is None else limit
        self._clock = clock
        self._entries: History = self._load()

    def _load(self) -> History:
        try:
            records = self.repo.load_list(HISTORY_KEY)
        except StorageError as e:
            logger.warning("Could not load search history: %s", e)
            return ()
        return history_from_records(records, self.limit)

    def _persist(self) -> None:
        try:
            self.repo.save_list(HISTORY_KEY, [e.to_dict() for e in self._entries])
        except StorageError as e:
            logger.warning("Could not save search history: %s", e)

    def add(self, word: str) -> None:
        word = normalize_word(word)
        self._entries = add_history_entry(self._entries, word, self._clock(), self.limit)
        self._persist()

    def clear(self) -> None:
        self._entries = clear_history_entries(self._entries)
        self._persist()

    def list(self) -> History:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)
