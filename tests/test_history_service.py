"""Tests for HistoryService."""

from __future__ import annotations

import pytest

from wordexplorer.data.kv_repo import FAVORITES_KEY, HISTORY_KEY, KeyValueRepo
from wordexplorer.db.database import get_conn
from wordexplorer.service.errors import EmptyStateError, ValidationError
from wordexplorer.service.favorites_service import FavoritesService
from wordexplorer.service.history_service import HistoryService


def test_readding_word_keeps_length_and_moves_to_front(repo, clock):
    history = HistoryService(repo, clock=clock)
    history.add("run")
    history.add("walk")
    history.add("run")
    assert len(history) == 2
    assert [e.word for e in history.list()] == ["run", "walk"]


def test_add_normalizes_word(repo, clock):
    history = HistoryService(repo, clock=clock)
    history.add("  RUN ")
    assert history.list()[0].word == "run"


def test_add_blank_word_raises(repo, clock):
    history = HistoryService(repo, clock=clock)
    with pytest.raises(ValidationError):
        history.add("  ")
    assert len(history) == 0


def test_never_more_than_twenty(repo, clock):
    history = HistoryService(repo, clock=clock)
    for i in range(50):
        history.add(f"word{i}")
        assert len(history) <= 20
    assert history.list()[0].word == "word49"


def test_clear_empty_raises(repo, clock):
    history = HistoryService(repo, clock=clock)
    with pytest.raises(EmptyStateError) as exc:
        history.clear()
    assert exc.value.message == "No history to clear."


def test_clear_persists(repo, clock):
    history = HistoryService(repo, clock=clock)
    history.add("run")
    history.clear()
    assert history.list() == ()
    assert repo.load_list(HISTORY_KEY) == []


def test_reload_after_restart(db_path, clock):
    first = HistoryService(KeyValueRepo(db_path), clock=clock)
    first.add("x")
    second = HistoryService(KeyValueRepo(db_path), clock=clock)
    assert second.list() == first.list()
    assert second.list()[0].word == "x"


def test_corrupt_store_starts_empty(repo, db_path, clock):
    repo.save_list(HISTORY_KEY, [])
    with get_conn(db_path) as conn:
        conn.execute("UPDATE kv_store SET value = '[{' WHERE key = ?", (HISTORY_KEY,))
    assert HistoryService(repo, clock=clock).list() == ()


def test_storage_failure_keeps_in_memory_state(tmp_path, clock, caplog):
    history = HistoryService(KeyValueRepo(tmp_path), clock=clock)
    history.add("run")
    assert [e.word for e in history.list()] == ["run"]
    assert "Could not save search history" in caplog.text


def test_non_finite_stored_timestamp_loads_as_zero(repo, db_path, clock):
    repo.save_list(HISTORY_KEY, [])
    with get_conn(db_path) as conn:
        conn.execute("UPDATE kv_store SET value = ? WHERE key = ?",
                     ('[{"word": "x", "timestamp": 1e400}, {"word": "y", "timestamp": NaN}]', HISTORY_KEY))
    history = HistoryService(repo, clock=clock)
    assert [(e.word, e.timestamp) for e in history.list()] == [("x", 0), ("y", 0)]


def test_zero_limit_is_respected(repo, clock):
    history = HistoryService(repo, limit=0, clock=clock)
    history.add("run")
    assert history.list() == ()


def test_raw_slots_reload_both_lists(db_path, clock):
    store = KeyValueRepo(db_path)
    store.save_list(HISTORY_KEY, [{"word": "x"}])
    store.save_list(FAVORITES_KEY, [{"word": "y"}])

    history = HistoryService(KeyValueRepo(db_path), clock=clock)
    favorites = FavoritesService(KeyValueRepo(db_path), clock=clock)

    assert [e.word for e in history.list()] == ["x"]
    assert [f.word for f in favorites.list()] == ["y"]
