from __future__ import annotations

import itertools
import json
import logging
from pathlib import Path
from typing import Any

from app.infrastructure.store.memory_store import TABLES, MemoryMemoraidStore


logger = logging.getLogger(__name__)


class JsonMemoraidStore(MemoryMemoraidStore):
    """File-backed store for local development: all tables live in one JSON document."""

    def __init__(self, data_dir: str = "./data/store", file_name: str = "memoraid.json") -> None:
        super().__init__()
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / file_name
        self._load()

    def _load(self) -> None:
        """Load tables from disk, falling back to empty tables if the file is missing or corrupted."""
        if not self._file_path.exists():
            return

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Ignoring unreadable store file", extra={"reason": str(e)})
            return

        tables = data.get("tables") or {}
        for name in TABLES:
            rows = tables.get(name) or {}
            if isinstance(rows, dict):
                self._tables[name] = rows

        last_seq = max(
            (int(row.get("seq", 0)) for rows in self._tables.values() for row in rows.values()),
            default=0,
        )
        self._seq = itertools.count(last_seq + 1)

    def _commit(self) -> None:
        """Save all tables atomically."""
        temp_path = self._file_path.with_suffix(".json.tmp")
        payload: dict[str, Any] = {"version": 1, "tables": self._tables}

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise
