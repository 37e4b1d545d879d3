from __future__ import annotations

import random
from typing import Optional, Sequence

CURATED_WORDS: tuple[str, ...] = (
    "serendipity", "ephemeral", "mellifluous", "petrichor", "halcyon",
    "sonder", "quixotic", "luminous", "labyrinth", "ineffable",
    "sanguine", "ebullient", "candor", "zenith", "reverie",
    "eloquent", "resilient", "tranquil", "wanderlust", "solace",
    "gossamer", "verdant", "nostalgia", "epiphany", "panacea",
    "vivid", "whimsical", "aurora", "cascade", "ember",
    "harbor", "journey", "kindle", "meadow", "nimble",
    "oasis", "pristine", "radiant", "tenacious", "wisdom",
)


class RandomWordSelector:
    """Uniform pick from a fixed curated word list."""

    def __init__(self, words: Sequence[str] = CURATED_WORDS, rng: Optional[random.Random] = None):
        if not words:
            raise ValueError("Word list cannot be empty.")
        self.words = tuple(words)
        self._rng = rng or random.Random()

    def pick(self) -> str:
        return self._rng.choice(self.words)
