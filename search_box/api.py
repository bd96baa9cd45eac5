from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from .config import SearchBoxConfig
from .dataset import import_records, load_records
from .models import Record
from .session import SearchSession


def load_dataset(cfg: SearchBoxConfig | None = None) -> list[Record]:
    cfg = cfg or SearchBoxConfig()
    return load_records(cfg.data_path, cfg)


def new_session(cfg: SearchBoxConfig | None = None, records: Sequence[Record] | None = None) -> SearchSession:
    cfg = cfg or SearchBoxConfig()
    return SearchSession(records if records is not None else load_dataset(cfg), cfg)


def search(query: str, *, cfg: SearchBoxConfig | None = None, records: Sequence[Record] | None = None) -> dict[str, Any]:
    session = new_session(cfg, records)
    response = session.apply_query(query)
    return response.to_dict()


def import_dataset(source: str, db_path: str, cfg: SearchBoxConfig | None = None) -> dict[str, Any]:
    cfg = cfg or SearchBoxConfig()
    records = load_records(Path(source), cfg)
    count = import_records(records, db_path, cfg.table_name)
    return {"status": "imported", "count": count, "db_path": db_path, "table": cfg.table_name}
