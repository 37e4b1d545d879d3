from __future__ import annotations
from functools import lru_cache
from pathlib import Path

from fastapi.templating import Jinja2Templates

from wordexplorer.data.kv_repo import KeyValueRepo
from wordexplorer.service.favorites_service import FavoritesService
from wordexplorer.service.history_service import HistoryService
from wordexplorer.service.lookup_service import LookupService
from wordexplorer.service.random_word import RandomWordSelector

WEB_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))

# One instance of each per process: the lists are loaded once and then
# mutated in place, so every request must see the same service.

@lru_cache(maxsize=1)
def get_kv_repo() -> KeyValueRepo:
    return KeyValueRepo()

@lru_cache(maxsize=1)
def get_history_service() -> HistoryService:
    return HistoryService(get_kv_repo())

@lru_cache(maxsize=1)
def get_favorites_service() -> FavoritesService:
    return FavoritesService(get_kv_repo())

@lru_cache(maxsize=1)
def get_lookup_service() -> LookupService:
    return LookupService()

@lru_cache(maxsize=1)
def get_random_word_selector() -> RandomWordSelector:
    return RandomWordSelector()
