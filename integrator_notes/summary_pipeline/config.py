from __future__ import annotations
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Optional, Union
import math
import re

# --- Global defaults ---
INDEX_FILENAME = "index.json"

# preferred key first; raw_summary is the generator's fallback
MARKDOWN_KEYS = ("summary_markdown", "raw_summary")

# untitled bullets at or under this many characters are noise
MIN_FALLBACK_LEN = 10

# Directories (override from CLI)
SUMMARIES_DIR = Path("summaries")

# --- Text coercion ---

def coerce_text(x: Any) -> str:
    """Best-effort text from a payload value; None → ""."""
    if x is None:
        return ""
    if isinstance(x, str):
        return x
    if isinstance(x, (int, float, bool)):
        return str(x)
    if isinstance(x, list):
        return "\n".join(coerce_text(e) for e in x if e is not None)
    return str(x)


def coerce_count(x: Any) -> int:
    """note_count as a non-negative int; missing or garbage → 0."""
    if isinstance(x, bool):
        return 0
    if isinstance(x, float) and not math.isfinite(x):
        return 0
    if isinstance(x, (int, float)):
        return max(int(x), 0)
    if isinstance(x, str) and x.strip().isdigit():
        return int(x.strip())
    return 0

# --- Time & date helpers ---
Dateish = Union[date, datetime, str]


def to_utc_dt(x: Any) -> datetime:
    """
    Convert various timestamp forms to an aware UTC datetime.
    Accepts ISO strings with or without 'Z', dates, or datetimes.
    """
    if x is None:
        raise ValueError("timestamp is None")
    if isinstance(x, datetime):
        dt = x if x.tzinfo else x.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    if isinstance(x, date):
        return datetime(x.year, x.month, x.day, tzinfo=timezone.utc)
    if isinstance(x, str):
        s = x.strip()
        s = re.sub(r"\+00:00Z$", "+00:00", s)
        if s.endswith("Z"):
            s = s[:-1]
        dt = datetime.fromisoformat(s)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    raise TypeError(f"unsupported timestamp type: {type(x)!r}")


def parse_date_any(x: Optional[Dateish]) -> Optional[date]:
    """Calendar date from an ISO string/date/datetime; None on failure or blank."""
    if x is None or x == "":
        return None
    if isinstance(x, datetime):
        return to_utc_dt(x).date()
    if isinstance(x, date):
        return x
    try:
        return to_utc_dt(x).date()
    except Exception:
        return None


def today_utc() -> datetime:
    return datetime.now(timezone.utc)


__all__ = [
    "INDEX_FILENAME", "MARKDOWN_KEYS", "MIN_FALLBACK_LEN", "SUMMARIES_DIR",
    "coerce_text", "coerce_count",
    "to_utc_dt", "parse_date_any", "today_utc",
]
