from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


def first_match(items: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """Return the first item satisfying ``predicate``, or None."""
    for item in items:
        if predicate(item):
            return item
    return None


@dataclass(frozen=True)
class Phonetic:
    text: Optional[str] = None
    audio: Optional[str] = None


@dataclass(frozen=True)
class Definition:
    definition: str
    example: Optional[str] = None


@dataclass(frozen=True)
class Meaning:
    part_of_speech: str
    definitions: tuple[Definition, ...] = ()
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()


@dataclass(frozen=True)
class LookupResult:
    """One dictionary entry, as rendered by the search page.

    Text and audio are picked independently: the first variant with a
    transcription need not be the one that carries a recording.
    """
    word: str
    phonetics: tuple[Phonetic, ...] = ()
    meanings: tuple[Meaning, ...] = ()

    @property
    def phonetic_text(self) -> Optional[str]:
        match = first_match(self.phonetics, lambda p: bool(p.text))
        return match.text if match else None

    @property
    def audio_url(self) -> Optional[str]:
        match = first_match(self.phonetics, lambda p: bool(p.audio))
        return match.audio if match else None
