"""
Salesboard — Configuration: paths, seed source, server and query constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with SALESBOARD_DATA_DIR / SALESBOARD_DB_FILE env vars
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("SALESBOARD_DATA_DIR", str(Path.home() / ".salesboard")))
DB_FILE = Path(os.environ.get("SALESBOARD_DB_FILE", str(_data_dir / "database.json")))

# ---------------------------------------------------------------------------
# Seed source (third-party product transaction feed)
# ---------------------------------------------------------------------------
SEED_URL = os.environ.get(
    "SALESBOARD_SEED_URL",
    "https://s3.amazonaws.com/roxiler.com/product_transaction.json",
)
SEED_TIMEOUT = float(os.environ.get("SALESBOARD_SEED_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
PORT = int(os.environ.get("PORT", "3000"))

# Combined endpoint waits this long for all four sub-queries
COMBINED_TIMEOUT = float(os.environ.get("SALESBOARD_COMBINED_TIMEOUT", "10"))

# ---------------------------------------------------------------------------
# Query defaults
# ---------------------------------------------------------------------------
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10

# Records without a category are counted under this label
UNCATEGORIZED = "Uncategorized"

# ---------------------------------------------------------------------------
# Price-range histogram bins: (label, upper bound inclusive)
# Each bin covers (previous upper, upper], the last one is open-ended.
# ---------------------------------------------------------------------------
PRICE_RANGES = [
    ("0-100", 100),
    ("101-200", 200),
    ("201-300", 300),
    ("301-400", 400),
    ("401-500", 500),
    ("501-600", 600),
    ("601-700", 700),
    ("701-800", 800),
    ("801-900", 900),
    ("901-above", float("inf")),
]
