"""Shared fixtures: a throwaway sqlite file per test and a stubbed dictionary API."""

from __future__ import annotations

import itertools
from typing import Callable

import httpx
import pytest

from tests.support import API_BASE, RUN_ENTRY, StubDictionary
from wordexplorer.data.kv_repo import KeyValueRepo
from wordexplorer.service.lookup_service import LookupService


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "wordexplorer.db"


@pytest.fixture
def repo(db_path):
    return KeyValueRepo(db_path)


@pytest.fixture
def clock() -> Callable[[], int]:
    """Strictly increasing fake millisecond clock."""
    counter = itertools.count(1_700_000_000_000, 1000)
    return lambda: next(counter)


@pytest.fixture
def stub_api():
    return StubDictionary({"run": (200, RUN_ENTRY)})


@pytest.fixture
def lookup_service(stub_api):
    return LookupService(base_url=API_BASE, timeout=5, transport=httpx.MockTransport(stub_api))
