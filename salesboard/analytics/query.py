"""
Transaction queries — listing, monthly statistics, price histogram, categories.

Every function takes the full record collection (load order) and returns a
JSON-ready structure. Nothing here touches the store; the routers load the
collection once per request and hand it in.
"""
from __future__ import annotations

import asyncio

import numpy as np
import pandas as pd

from salesboard.config import (
    COMBINED_TIMEOUT, DEFAULT_PAGE, DEFAULT_PER_PAGE, PRICE_RANGES, UNCATEGORIZED,
)
from salesboard.data.schemas import (
    CATEGORY, DATE_OF_SALE, DESCRIPTION, MONTH_NAMES, PRICE, SOLD, TITLE, MonthFilter, month_of,
)
from salesboard.data.store import Record
from salesboard.analytics.common import number_text, sanitize_for_json

MonthLike = MonthFilter | str | int | None

_FRAME_COLUMNS = ["pos", "title", "description", "price_text", "price", "category", "month", "sold"]


class CombinedFetchError(RuntimeError):
    """One of the combined sub-queries failed or the join timed out."""


# ---------------------------------------------------------------------------
# Frame building & filtering
# ---------------------------------------------------------------------------

def to_frame(records: list[Record]) -> pd.DataFrame:
    """Flatten records into the columns the queries filter and aggregate on.

    ``pos`` is the load-order index back into ``records``. ``month`` is 0 when
    dateOfSale is missing or unparseable, so it never matches a selector.
    """
    if not records:
        return pd.DataFrame({c: pd.Series(dtype=object) for c in _FRAME_COLUMNS}).astype(
            {"pos": "int64", "price": "float64", "month": "int64", "sold": "bool"}
        )

    raw_price = [r.get(PRICE) for r in records]
    return pd.DataFrame({
        "pos": np.arange(len(records), dtype="int64"),
        "title": [str(r.get(TITLE) or "").lower() for r in records],
        "description": [str(r.get(DESCRIPTION) or "").lower() for r in records],
        "price_text": [number_text(p) for p in raw_price],
        "price": pd.to_numeric(pd.Series(raw_price, dtype=object), errors="coerce")
                   .fillna(0.0).astype("float64").to_numpy(),
        "category": [str(c) if c not in (None, "") else UNCATEGORIZED
                     for c in (r.get(CATEGORY) for r in records)],
        "month": [month_of(r.get(DATE_OF_SALE)) or 0 for r in records],
        "sold": [bool(r.get(SOLD)) for r in records],
    })


def _as_filter(month: MonthLike) -> MonthFilter:
    if isinstance(month, MonthFilter):
        return month
    return MonthFilter.from_param(month)


def _in_month(df: pd.DataFrame, month: MonthLike) -> pd.DataFrame:
    """Rows whose sale month matches, any year. Unknown selectors match nothing."""
    mf = _as_filter(month)
    if not mf.is_valid:
        return df.iloc[0:0]
    return df[df["month"] == mf.month]


def _search_mask(df: pd.DataFrame, search: str) -> pd.Series:
    term = search.lower()
    return (
        df["title"].str.contains(term, regex=False)
        | df["description"].str.contains(term, regex=False)
        | df["price_text"].str.contains(search, regex=False)
    )


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------

def list_transactions(
    records: list[Record],
    search: str = "",
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
    month: MonthLike = None,
) -> list[Record]:
    """Search then paginate, preserving load order.

    Search matches title or description (case-insensitive) or the price text.
    ``month`` scopes the listing only when given; the transactions endpoint
    never passes it.
    """
    if per_page < 1:
        return []
    page = max(page, 1)

    df = to_frame(records)
    if month is not None:
        df = _in_month(df, month)
    if search:
        df = df[_search_mask(df, search)]

    start = (page - 1) * per_page
    positions = df["pos"].iloc[start:start + per_page].tolist()
    return [records[i] for i in positions]


# ---------------------------------------------------------------------------
# Month-scoped aggregates
# ---------------------------------------------------------------------------

def statistics(records: list[Record], month: MonthLike) -> dict:
    """Total sale amount, sold and unsold counts for one month."""
    scoped = _in_month(to_frame(records), month)
    sold = scoped[scoped["sold"]]
    return {
        "totalSaleAmount": float(sold["price"].sum()),
        "soldCount": int(len(sold)),
        "notSoldCount": int(len(scoped) - len(sold)),
    }


def price_histogram(records: list[Record], month: MonthLike) -> list[dict]:
    """Count of the month's records per fixed price range, zero counts included."""
    scoped = _in_month(to_frame(records), month)
    labels = [label for label, _ in PRICE_RANGES]
    edges = [-np.inf] + [upper for _, upper in PRICE_RANGES]

    binned = pd.cut(scoped["price"], bins=edges, labels=labels, right=True)
    counts = binned.value_counts().reindex(labels, fill_value=0)
    return [{"range": label, "count": int(counts[label])} for label in labels]


def category_distribution(records: list[Record], month: MonthLike) -> dict[str, int]:
    """Records per category for one month, in first-appearance order."""
    scoped = _in_month(to_frame(records), month)
    if scoped.empty:
        return {}
    sizes = scoped.groupby("category", sort=False).size()
    return {str(cat): int(n) for cat, n in sizes.items()}


# ---------------------------------------------------------------------------
# Combined fetch
# ---------------------------------------------------------------------------

async def combined(
    records: list[Record],
    month: MonthLike,
    timeout: float = COMBINED_TIMEOUT,
) -> dict:
    """Run all four views for one month concurrently and join them.

    All-or-nothing: any sub-query failure or a timeout raises
    CombinedFetchError and no partial result is returned.
    """
    mf = _as_filter(month)
    try:
        transactions, stats, bar, pie = await asyncio.wait_for(
            asyncio.gather(
                asyncio.to_thread(list_transactions, records, month=mf),
                asyncio.to_thread(statistics, records, mf),
                asyncio.to_thread(price_histogram, records, mf),
                asyncio.to_thread(category_distribution, records, mf),
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError as exc:
        raise CombinedFetchError(f"Combined fetch for {mf.label} timed out after {timeout}s") from exc
    except Exception as exc:
        raise CombinedFetchError(f"Combined fetch for {mf.label} failed: {exc}") from exc

    return sanitize_for_json({
        "transactions": transactions,
        "statistics": stats,
        "barChart": bar,
        "pieChart": pie,
    })


def month_counts(records: list[Record]) -> dict[str, int]:
    """Number of records per sale month (all years pooled), for health checks."""
    df = to_frame(records)
    if df.empty:
        return {}
    counts = df[df["month"] > 0].groupby("month").size().sort_index()
    return {MONTH_NAMES[int(m)]: int(n) for m, n in counts.items()}
