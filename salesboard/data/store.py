"""
DataStore — JSON-file record collection, read wholesale on every request.

The collection is never cached in process: each load() re-reads the file so
that a re-seed is visible to the next request. Swapping the backing file for
something else only changes load() and save().
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from salesboard.config import DB_FILE

Record = dict[str, Any]


class DataStore:
    """Full record collection persisted as one JSON array file."""

    def __init__(self, path: Path | str = DB_FILE) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> list[Record]:
        """Read the whole collection.

        A missing, unreadable or corrupt file reads as an empty collection.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            print(f"  Could not read {self.path}: {exc}")
            return []

        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            print(f"  Corrupt record file {self.path}: {exc}")
            return []

        if not isinstance(data, list):
            print(f"  Record file {self.path} does not hold a JSON array, ignoring")
            return []
        return data

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------

    def save(self, records: list[Record]) -> bool:
        """Overwrite the collection. Write failures are printed, not raised."""
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(records, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as exc:
            print(f"  Error writing data to {self.path}: {exc}")
            return False
        return True

    def describe(self) -> str:
        return str(self.path)


class MemoryStore(DataStore):
    """In-process collection, for tests and one-off scripts."""

    def __init__(self, records: list[Record] | None = None) -> None:
        self.path = Path(":memory:")
        self._records: list[Record] = list(records or [])

    def load(self) -> list[Record]:
        return list(self._records)

    def save(self, records: list[Record]) -> bool:
        self._records = list(records)
        return True

    def describe(self) -> str:
        return ":memory:"
