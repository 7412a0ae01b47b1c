"""
Dashboard endpoints — transaction listing, statistics, bar chart, pie chart, combined.

Each request loads the full collection once and computes its view fresh.
"""
from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Query

from salesboard.config import DEFAULT_PAGE, DEFAULT_PER_PAGE
from salesboard.data.store import DataStore
from salesboard.data.schemas import MonthFilter
from salesboard.api.dependencies import get_store, parse_month
from salesboard.api.response_models import CombinedResponse, RangeCount, StatisticsResponse
from salesboard.api.responses import ERROR_RESPONSES, error_json, safe_json
from salesboard.analytics.query import (
    category_distribution,
    combined,
    list_transactions,
    price_histogram,
    statistics,
)

router = APIRouter(prefix="/api", tags=["dashboard"], responses=ERROR_RESPONSES)


@router.get("/transactions")
def transactions(
    search: str = Query("", description="Matches title, description or price"),
    page: int = Query(DEFAULT_PAGE, description="1-based page number"),
    per_page: int = Query(DEFAULT_PER_PAGE, alias="perPage", description="Page size"),
    store: DataStore = Depends(get_store),
):
    """Searchable, paginated transaction list. Not scoped to a month."""
    try:
        records = store.load()
        return safe_json(list_transactions(records, search=search, page=page, per_page=per_page))
    except Exception as exc:
        return error_json("Error fetching transactions", exc)


@router.get("/statistics", response_model=StatisticsResponse)
def month_statistics(
    month: MonthFilter = Depends(parse_month),
    store: DataStore = Depends(get_store),
):
    """Total sale amount, sold and not-sold counts for the selected month."""
    try:
        return safe_json(statistics(store.load(), month))
    except Exception as exc:
        return error_json("Error fetching statistics", exc)


@router.get("/bar-chart", response_model=list[RangeCount])
def bar_chart(
    month: MonthFilter = Depends(parse_month),
    store: DataStore = Depends(get_store),
):
    """Item counts per price range for the selected month."""
    try:
        return safe_json(price_histogram(store.load(), month))
    except Exception as exc:
        return error_json("Error generating bar chart data", exc)


@router.get("/pie-chart", response_model=dict[str, int])
def pie_chart(
    month: MonthFilter = Depends(parse_month),
    store: DataStore = Depends(get_store),
):
    """Item counts per category for the selected month."""
    try:
        return safe_json(category_distribution(store.load(), month))
    except Exception as exc:
        return error_json("Error generating pie chart data", exc)


@router.get("/combined", response_model=CombinedResponse)
async def combined_view(
    month: MonthFilter = Depends(parse_month),
    store: DataStore = Depends(get_store),
):
    """Transactions, statistics, bar chart and pie chart for one month in one response."""
    try:
        records = await asyncio.to_thread(store.load)
        return safe_json(await combined(records, month))
    except Exception as exc:
        return error_json("Error fetching combined data", exc)
