"""Record store, seed fetch, and month selector."""
from .store import DataStore, MemoryStore, Record
from .schemas import MonthFilter, parse_month, month_of
from .seed import SeedError, fetch_seed, initialize_store
