"""
FastAPI dependencies — record store injection, month parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query

from salesboard.data.store import DataStore
from salesboard.data.schemas import MonthFilter

# ---------------------------------------------------------------------------
# Store (set during startup, swapped for a MemoryStore in tests)
# ---------------------------------------------------------------------------
_store: DataStore | None = None


def set_store(store: DataStore | None) -> None:
    global _store
    _store = store


def get_store() -> DataStore:
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Month parsing from query params
# ---------------------------------------------------------------------------

def parse_month(
    month: Optional[str] = Query(None, description="Month name, abbreviation or 1-12 (case-insensitive)"),
) -> MonthFilter:
    """Unknown or missing months parse to a filter that matches no records."""
    return MonthFilter.from_param(month)
