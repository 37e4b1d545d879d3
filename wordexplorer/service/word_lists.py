"""Pure state transitions for the history and favorites lists.

Each function takes the current tuple and returns a new one; nothing here
does I/O. The services own the current tuple and persist whatever these
functions return.
"""
from __future__ import annotations

import math
from typing import Any, Iterable, Tuple

from wordexplorer.models.vocab import FavoriteEntry, HistoryEntry
from wordexplorer.service.errors import EmptyStateError, ValidationError

History = Tuple[HistoryEntry, ...]
Favorites = Tuple[FavoriteEntry, ...]


def normalize_word(raw: str | None) -> str:
    word = (raw or "").strip().lower()
    if not word:
        raise ValidationError("Please enter a word to search for.")
    return word


# -------------
# History
# -------------
def add_history_entry(history: History, word: str, timestamp: int, limit: int) -> History:
    rest = tuple(e for e in history if e.word != word)
    return ((HistoryEntry(word=word, timestamp=timestamp),) + rest)[:limit]


def clear_history_entries(history: History) -> History:
    if not history:
        raise EmptyStateError("No history to clear.")
    return ()


# -------------------------
# Favorites
# -------------------------
def has_favorite(favorites: Favorites, word: str) -> bool:
    return any(f.word == word for f in favorites)


def toggle_favorite_entry(favorites: Favorites, word: str, phonetic: str, timestamp: int) -> tuple[Favorites, bool]:
    if has_favorite(favorites, word):
        return remove_favorite_entry(favorites, word), False
    return favorites + (FavoriteEntry(word=word, phonetic=phonetic, timestamp=timestamp),), True


def remove_favorite_entry(favorites: Favorites, word: str) -> Favorites:
    return tuple(f for f in favorites if f.word != word)


# -------------------------
# Loading persisted records
# -------------------------
def _clean_word(value: Any) -> str:
    return value.strip().lower() if isinstance(value, str) else ""


def _clean_timestamp(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def history_from_records(records: Iterable[Any], limit: int) -> History:
    """Rebuild history from stored dicts, dropping junk and duplicates."""
    out, seen = [], set()
    for item in records:
        if not isinstance(item, dict):
            continue
        word = _clean_word(item.get("word"))
        if not word or word in seen:
            continue
        seen.add(word)
        out.append(HistoryEntry(word=word, timestamp=_clean_timestamp(item.get("timestamp"))))
    return tuple(out[:limit])


def favorites_from_records(records: Iterable[Any]) -> Favorites:
    out, seen = [], set()
    for item in records:
        if not isinstance(item, dict):
            continue
        word = _clean_word(item.get("word"))
        if not word or word in seen:
            continue
        seen.add(word)
        phonetic = item.get("phonetic")
        out.append(FavoriteEntry(
            word=word,
            phonetic=phonetic.strip() if isinstance(phonetic, str) else "",
            timestamp=_clean_timestamp(item.get("timestamp")),
        ))
    return tuple(out)
