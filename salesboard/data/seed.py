"""
Seed-data fetch from the third-party product transaction feed.
"""
from __future__ import annotations

import requests

from salesboard.config import SEED_TIMEOUT, SEED_URL
from salesboard.data.store import DataStore, Record


class SeedError(RuntimeError):
    """Seed feed unreachable, failing, or returning something other than a list."""


def fetch_seed(url: str = SEED_URL, timeout: float = SEED_TIMEOUT) -> list[Record]:
    """GET the seed feed and return its records. No retries."""
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as exc:
        raise SeedError(f"Seed fetch from {url} failed: {exc}") from exc
    except ValueError as exc:
        raise SeedError(f"Seed feed at {url} did not return JSON: {exc}") from exc

    if not isinstance(data, list):
        raise SeedError(f"Seed feed at {url} returned {type(data).__name__}, expected a list")
    return data


def initialize_store(store: DataStore, url: str = SEED_URL, timeout: float = SEED_TIMEOUT) -> int:
    """Replace the store's collection with fresh seed data.

    Returns the number of records written. Raises SeedError if the fetch fails
    and OSError if the collection could not be persisted.
    """
    print(f"Fetching seed data from {url}...")
    records = fetch_seed(url, timeout=timeout)
    if not store.save(records):
        raise OSError(f"Could not persist seed data to {store.describe()}")
    print(f"  Stored {len(records):,} records in {store.describe()}")
    return len(records)
