"""
Month selector and record field names for month-scoped queries.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Optional

MONTH_NAMES = [
    "", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# name, 3-letter abbreviation and numeral -> month-of-year
_MONTH_LOOKUP: dict[str, int] = {}
for _i, _name in enumerate(MONTH_NAMES[1:], start=1):
    _MONTH_LOOKUP[_name.lower()] = _i
    _MONTH_LOOKUP[_name[:3].lower()] = _i
    _MONTH_LOOKUP[str(_i)] = _i
    _MONTH_LOOKUP[f"{_i:02d}"] = _i
_MONTH_LOOKUP["sept"] = 9

# Record attributes used by the query engine
TITLE = "title"
DESCRIPTION = "description"
PRICE = "price"
CATEGORY = "category"
DATE_OF_SALE = "dateOfSale"
SOLD = "sold"


def parse_month(value: str | int | None) -> Optional[int]:
    """Map a month name, abbreviation or 1-12 index to month-of-year.

    Case-insensitive. Returns None for anything unrecognised; callers treat
    that as a month no record belongs to.
    """
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value if 1 <= value <= 12 else None
    return _MONTH_LOOKUP.get(str(value).strip().lower())


def month_of(value: Any) -> Optional[int]:
    """Calendar month of a dateOfSale value, as written in the timestamp.

    The month is read from the timestamp's own wall clock (its UTC offset is
    kept, never converted to the server's zone). Numbers are epoch
    milliseconds, read in UTC. Unparseable values give None.
    """
    if isinstance(value, (dt.datetime, dt.date)):
        return value.month
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return dt.datetime.fromtimestamp(value / 1000, tz=dt.timezone.utc).month
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return dt.datetime.fromisoformat(text).month
    except ValueError:
        pass
    try:
        return dt.date.fromisoformat(text[:10]).month
    except ValueError:
        return None


@dataclass
class MonthFilter:
    """A calendar month (1-12) selected by name, ignoring year."""
    month: Optional[int] = None
    raw: Optional[str] = None

    @classmethod
    def from_param(cls, value: str | int | None) -> "MonthFilter":
        return cls(month=parse_month(value), raw=None if value is None else str(value))

    @property
    def is_valid(self) -> bool:
        return self.month is not None

    @property
    def label(self) -> str:
        """Human-readable label for the month."""
        if self.month is None:
            return f"Unknown month ({self.raw})" if self.raw else "No month"
        return MONTH_NAMES[self.month]
