from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path


def _env(name: str, default: str) -> str:
    return os.environ.get(f"WORDEXPLORER_{name}", default)


@dataclass(frozen=True)
class Settings:
    DB_PATH: Path = field(default_factory=lambda: Path(_env("DB_PATH", str(Path(__file__).resolve().parent.parent / "wordexplorer.db"))))
    DICTIONARY_API_URL: str = field(default_factory=lambda: _env("API_URL", "https://api.dictionaryapi.dev/api/v2/entries/en"))
    HTTP_TIMEOUT: float = field(default_factory=lambda: float(_env("HTTP_TIMEOUT", "10")))
    HISTORY_LIMIT: int = 20
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

settings = Settings()
