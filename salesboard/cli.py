#!/usr/bin/env python3
"""
Salesboard CLI — seed the record file, query it, or start the API server.

USAGE:
  python -m salesboard.cli initialize                        # Fetch seed data into the record file
  python -m salesboard.cli initialize --url http://host/x.json

  python -m salesboard.cli transactions --search phone       # First page of matches
  python -m salesboard.cli transactions --page 2 --per-page 5

  python -m salesboard.cli stats --month March               # Statistics, bar chart, pie chart
  python -m salesboard.cli stats --month mar --json          # Combined view as JSON

  python -m salesboard.cli serve                             # Start API server (PORT, default 3000)
  python -m salesboard.cli serve --port 8000 --reload
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys

from salesboard.config import DB_FILE, DEFAULT_PER_PAGE, PORT, SEED_TIMEOUT, SEED_URL
from salesboard.data.store import DataStore
from salesboard.data.schemas import MonthFilter
from salesboard.data.seed import SeedError, initialize_store
from salesboard.analytics.query import (
    category_distribution,
    combined,
    list_transactions,
    price_histogram,
    statistics,
)


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  SALESBOARD — {title}")
    print("=" * 70)


def cmd_initialize(args) -> int:
    """Fetch seed data and overwrite the record file."""
    _banner("INITIALIZE")
    store = DataStore(args.db)
    try:
        count = initialize_store(store, url=args.url, timeout=args.timeout)
    except (SeedError, OSError) as exc:
        print(f"\nInitialization failed: {exc}")
        return 1
    print(f"\nDatabase initialized with {count:,} records")
    return 0


def cmd_transactions(args) -> int:
    """Print one page of the (optionally searched) transaction list."""
    records = DataStore(args.db).load()
    rows = list_transactions(records, search=args.search, page=args.page, per_page=args.per_page)
    if args.json:
        print(json.dumps(rows, indent=2))
        return 0

    _banner(f"TRANSACTIONS (page {args.page})")
    if not rows:
        print("\n  No transactions on this page.")
        return 0
    print()
    for r in rows:
        sold = "sold" if r.get("sold") else "-"
        print(f"{str(r.get('id', '')):<6}{str(r.get('title', ''))[:44]:<46}{str(r.get('price', '')):>10}  {sold}")
    return 0


def cmd_stats(args) -> int:
    """Print statistics and chart data for one month."""
    month = MonthFilter.from_param(args.month)
    records = DataStore(args.db).load()

    if args.json:
        print(json.dumps(asyncio.run(combined(records, month)), indent=2))
        return 0

    _banner(f"{month.label.upper()}")
    s = statistics(records, month)
    print(f"\n  Total sale amount : {s['totalSaleAmount']:,.2f}")
    print(f"  Sold items        : {s['soldCount']}")
    print(f"  Not sold items    : {s['notSoldCount']}")

    print("\n  PRICE RANGE")
    for b in price_histogram(records, month):
        print(f"    {b['range']:<12}{b['count']:>5}  {'#' * b['count']}")

    print("\n  CATEGORY")
    pie = category_distribution(records, month)
    if not pie:
        print("    (none)")
    for cat, n in pie.items():
        print(f"    {cat[:30]:<32}{n:>5}")
    return 0


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Salesboard API on port {args.port}...")
    uvicorn.run("salesboard.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Salesboard — product transaction dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--db", default=str(DB_FILE), help=f"Record file (default {DB_FILE})")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    init_parser = subparsers.add_parser("initialize", help="Seed the record file")
    init_parser.add_argument("--url", default=SEED_URL, help="Seed feed URL")
    init_parser.add_argument("--timeout", type=float, default=SEED_TIMEOUT, help="Fetch timeout (seconds)")
    init_parser.set_defaults(func=cmd_initialize)

    tx_parser = subparsers.add_parser("transactions", help="List transactions")
    tx_parser.add_argument("--search", default="", help="Search title, description or price")
    tx_parser.add_argument("--page", type=int, default=1, help="Page (1-based)")
    tx_parser.add_argument("--per-page", type=int, default=DEFAULT_PER_PAGE, help="Page size")
    tx_parser.add_argument("--json", action="store_true", help="Print raw JSON")
    tx_parser.set_defaults(func=cmd_transactions)

    stats_parser = subparsers.add_parser("stats", help="Monthly statistics and charts")
    stats_parser.add_argument("--month", required=True, help="Month name, abbreviation or 1-12")
    stats_parser.add_argument("--json", action="store_true", help="Print the combined view as JSON")
    stats_parser.set_defaults(func=cmd_stats)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=PORT, help=f"Port (default {PORT})")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
