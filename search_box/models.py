from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Record:
    id: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
