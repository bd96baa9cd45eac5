from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name, "").strip()
    return Path(raw).expanduser() if raw else None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


# env is read when a config is built, not at import
@dataclass(frozen=True)
class SearchBoxConfig:
    cache_capacity: int = field(default_factory=lambda: _env_int("SEARCH_BOX_CACHE_CAPACITY", 10))
    debounce_ms: int = field(default_factory=lambda: _env_int("SEARCH_BOX_DEBOUNCE_MS", 300))

    # None -> built-in sample dataset
    data_path: Path | None = field(default_factory=lambda: _env_path("SEARCH_BOX_DATA_PATH"))
    table_name: str = field(default_factory=lambda: os.getenv("SEARCH_BOX_TABLE", "records"))

    sqlite_exts: tuple[str, ...] = (".db", ".sqlite", ".sqlite3")
    json_exts: tuple[str, ...] = (".json",)
