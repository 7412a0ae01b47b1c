"""
Meta endpoints: health, initialize (re-seed).
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from salesboard.data.store import DataStore
from salesboard.data.seed import initialize_store
from salesboard.api.dependencies import get_store
from salesboard.api.response_models import HealthResponse
from salesboard.api.responses import ERROR_RESPONSES, error_json
from salesboard.analytics.query import month_counts

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store)):
    records = store.load()
    return HealthResponse(
        status="ok",
        records=len(records),
        months=month_counts(records),
        data_file=store.describe(),
    )


@router.get("/initialize", response_class=PlainTextResponse, responses=ERROR_RESPONSES)
def initialize(store: DataStore = Depends(get_store)):
    """Fetch the seed feed and overwrite the stored collection with it."""
    try:
        initialize_store(store)
    except Exception as exc:
        return error_json("Error initializing database", exc)
    return PlainTextResponse("Database initialized with seed data")
