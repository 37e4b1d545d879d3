from __future__ import annotations

import logging
from typing import Any, Callable

from wordexplorer.data.kv_repo import FAVORITES_KEY, KeyValueRepo
from wordexplorer.models.vocab import FavoriteEntry
from wordexplorer.service.errors import StorageError
from wordexplorer.service.history_service import now_ms
from wordexplorer.service.word_lists import (
    Favorites,
    favorites_from_records,
    has_favorite,
    normalize_word,
    remove_favorite_entry,
    toggle_favorite_entry,
)

logger = logging.getLogger(__name__)


class FavoritesService:
    """Starred words, keyed by word, in the order they were starred."""

    def __init__(self, repo: KeyValueRepo, clock: Callable[[], int] = now_ms):
        self.repo = repo
        self._clock = clock
        self._entries: Favorites = self._load()

    def _load(self) -> Favorites:
        try:
            records = self.repo.load_list(FAVORITES_KEY)
        except StorageError as e:
            logger.warning("Could not load favorites: %s", e)
            return ()
        return favorites_from_records(records)

    def _persist(self) -> None:
        try:
            self.repo.save_list(FAVORITES_KEY, self.export())
        except StorageError as e:
            logger.warning("Could not save favorites: %s", e)

    def toggle(self, word: str, phonetic: str | None = "") -> bool:
        """Star or un-star ``word``. Returns True when it is now a favorite."""
        word = normalize_word(word)
        self._entries, favorited = toggle_favorite_entry(
            self._entries, word, (phonetic or "").strip(), self._clock()
        )
        self._persist()
        return favorited

    def remove(self, word: str) -> None:
        word = (word or "").strip().lower()
        if not has_favorite(self._entries, word):
            return
        self._entries = remove_favorite_entry(self._entries, word)
        self._persist()

    def contains(self, word: str) -> bool:
        return has_favorite(self._entries, (word or "").strip().lower())

    def list(self) -> Favorites:
        return self._entries

    def export(self) -> list[dict]:
        return [f.to_dict() for f in self._entries]

    def import_entries(self, items: list[Any]) -> int:
        """Merge favorites from an exported JSON list.

        Expected items: [{"word": "...", "phonetic": "...", "timestamp": 0}]
        Words already starred are left as they are.
        """
        incoming = favorites_from_records(items)
        added = []
        for fav in incoming:
            if has_favorite(self._entries, fav.word):
                continue
            added.append(FavoriteEntry(word=fav.word, phonetic=fav.phonetic, timestamp=fav.timestamp or self._clock()))
        if added:
            self._entries = self._entries + tuple(added)
            self._persist()
        return len(added)
