from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryEntry:
    """A past search.

    ``timestamp`` is milliseconds since the epoch, matching what the
    browser version stored, so old exports stay readable.
    """
    word: str
    timestamp: int

    def to_dict(self) -> dict:
        return {"word": self.word, "timestamp": self.timestamp}


@dataclass(frozen=True)
class FavoriteEntry:
    """A starred word, kept until the user removes it."""
    word: str
    phonetic: str
    timestamp: int

    def to_dict(self) -> dict:
        return {"word": self.word, "phonetic": self.phonetic, "timestamp": self.timestamp}
