"""Tests for the pure history/favorites transitions."""

from __future__ import annotations

import pytest

from wordexplorer.models.vocab import FavoriteEntry, HistoryEntry
from wordexplorer.service.errors import EmptyStateError, ValidationError
from wordexplorer.service.word_lists import (
    add_history_entry,
    clear_history_entries,
    favorites_from_records,
    has_favorite,
    history_from_records,
    normalize_word,
    remove_favorite_entry,
    toggle_favorite_entry,
)


def test_normalize_trims_and_lowercases():
    assert normalize_word("  Serendipity \n") == "serendipity"


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_normalize_rejects_blank(raw):
    with pytest.raises(ValidationError):
        normalize_word(raw)


def test_add_history_moves_existing_word_to_front():
    history = (HistoryEntry("b", 2), HistoryEntry("a", 1))
    out = add_history_entry(history, "a", 3, limit=20)
    assert [e.word for e in out] == ["a", "b"]
    assert out[0].timestamp == 3
    # input untouched
    assert [e.word for e in history] == ["b", "a"]


def test_add_history_truncates_to_limit():
    history = ()
    for i in range(30):
        history = add_history_entry(history, f"w{i}", i, limit=20)
    assert len(history) == 20
    assert history[0].word == "w29"
    assert history[-1].word == "w10"


def test_clear_empty_history_raises():
    with pytest.raises(EmptyStateError):
        clear_history_entries(())


def test_clear_returns_empty():
    assert clear_history_entries((HistoryEntry("a", 1),)) == ()


def test_toggle_twice_restores_original():
    favorites = (FavoriteEntry("x", "/x/", 1),)
    added, state = toggle_favorite_entry(favorites, "y", "", 2)
    assert state is True
    assert has_favorite(added, "y")
    removed, state = toggle_favorite_entry(added, "y", "", 3)
    assert state is False
    assert removed == favorites


def test_remove_absent_is_noop():
    favorites = (FavoriteEntry("x", "", 1),)
    assert remove_favorite_entry(favorites, "ghost") == favorites


def test_history_from_records_drops_junk_and_duplicates():
    records = [
        {"word": "Alpha", "timestamp": 5},
        "not a dict",
        {"word": "   "},
        {"word": "alpha", "timestamp": 4},
        {"word": "beta", "timestamp": "soon"},
    ]
    out = history_from_records(records, limit=20)
    assert out == (HistoryEntry("alpha", 5), HistoryEntry("beta", 0))


def test_history_from_records_applies_limit():
    records = [{"word": f"w{i}", "timestamp": i} for i in range(25)]
    assert len(history_from_records(records, limit=20)) == 20


def test_favorites_from_records_defaults_phonetic():
    out = favorites_from_records([{"word": "y"}, {"word": "z", "phonetic": 3}])
    assert out == (FavoriteEntry("y", "", 0), FavoriteEntry("z", "", 0))
