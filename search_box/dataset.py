from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Iterable

from sqlite_utils import Database

from .config import SearchBoxConfig
from .errors import DatasetError
from .models import Record

logger = logging.getLogger(__name__)

SAMPLE_NAMES: tuple[str, ...] = (
    "Apple",
    "Apricot",
    "Avocado",
    "Banana",
    "Blackberry",
    "Blueberry",
    "Cantaloupe",
    "Cherry",
    "Coconut",
    "Cranberry",
    "Date",
    "Dragonfruit",
    "Fig",
    "Grape",
    "Grapefruit",
    "Guava",
    "Kiwi",
    "Lemon",
    "Lime",
    "Lychee",
    "Mango",
    "Nectarine",
    "Orange",
    "Papaya",
    "Passion Fruit",
    "Peach",
    "Pear",
    "Pineapple",
    "Plum",
    "Pomegranate",
    "Raspberry",
    "Strawberry",
    "Tangerine",
    "Watermelon",
)


def sample_records() -> list[Record]:
    return [Record(id=str(i), name=name) for i, name in enumerate(SAMPLE_NAMES, start=1)]


def _to_records(rows: Iterable[Any], source: str) -> list[Record]:
    out: list[Record] = []
    seen: set[str] = set()
    for idx, row in enumerate(rows):
        if not isinstance(row, dict) or row.get("id") is None or row.get("name") is None:
            raise DatasetError(f"{source}: row {idx} needs 'id' and 'name'")
        rec = Record(id=str(row["id"]), name=str(row["name"]))
        if rec.id in seen:
            raise DatasetError(f"{source}: duplicate id {rec.id!r}")
        seen.add(rec.id)
        out.append(rec)
    return out


def _load_json(path: Path) -> list[Record]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(payload, list):
        raise DatasetError(f"{path}: expected a JSON array of records")
    return _to_records(payload, str(path))


def _load_sqlite(path: Path, table: str) -> list[Record]:
    try:
        db = Database(path)
    except sqlite3.DatabaseError as e:
        raise DatasetError(f"{path}: not a SQLite database ({e})") from e
    try:
        if table not in db.table_names():
            raise DatasetError(f"{path}: table {table!r} not found")
        rows = list(db[table].rows_where(select="id, name", order_by="rowid"))
    except sqlite3.DatabaseError as e:
        raise DatasetError(f"{path}: cannot read table {table!r} ({e})") from e
    finally:
        db.conn.close()
    return _to_records(rows, f"{path}:{table}")


def load_records(path: Path | str | None = None, cfg: SearchBoxConfig | None = None) -> list[Record]:
    """
    Loads the searchable dataset.
    No path -> built-in sample list. JSON arrays and SQLite tables are supported.
    """
    cfg = cfg or SearchBoxConfig()
    if path is None:
        return sample_records()

    p = Path(path)
    if not p.is_file():
        raise DatasetError(f"Dataset not found: {p}")

    suffix = p.suffix.lower()
    if suffix in cfg.json_exts:
        records = _load_json(p)
    elif suffix in cfg.sqlite_exts:
        records = _load_sqlite(p, cfg.table_name)
    else:
        raise DatasetError(f"Unsupported dataset type: {p.suffix or '(none)'}")

    logger.info(f"Loaded {len(records)} records from {p}")
    return records


def import_records(records: Iterable[Record], db_path: Path | str, table: str = "records") -> int:
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    db = Database(db_path)
    try:
        if table not in db.table_names():
            db[table].create({"id": str, "name": str}, pk="id")
        rows = [r.to_dict() for r in records]
        db[table].upsert_all(rows, pk="id")
        return len(rows)
    finally:
        db.conn.close()


def filter_records(records: Iterable[Record], needle: str) -> list[Record]:
    return [r for r in records if needle in r.name.lower()]
