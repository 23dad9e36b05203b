# integrator_notes/summary_pipeline/window.py
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Union

from .config import parse_date_any, today_utc
from .core import WeekDocument

Nowish = Union[date, datetime, str]


def cutoff_for(lookback_days: int, now: Optional[Nowish] = None) -> date:
    """Calendar date `lookback_days` before `now` (default: current UTC time)."""
    if isinstance(lookback_days, bool) or not isinstance(lookback_days, int) or lookback_days <= 0:
        raise ValueError(f"lookback_days must be a positive int, got {lookback_days!r}")
    ref = parse_date_any(now if now is not None else today_utc())
    if ref is None:
        raise ValueError(f"unparseable reference time: {now!r}")
    return ref - timedelta(days=int(lookback_days))


def in_window(week: WeekDocument, cutoff: date) -> bool:
    """A week counts if any part of it reaches the window: week_end >= cutoff."""
    return week.week_end >= cutoff


def select_weeks(weeks: Iterable[WeekDocument], lookback_days: int,
                 now: Optional[Nowish] = None) -> List[WeekDocument]:
    """Weeks overlapping the trailing window, newest week_start first."""
    cutoff = cutoff_for(lookback_days, now)
    chosen = [w for w in weeks if in_window(w, cutoff)]
    return sorted(chosen, key=lambda w: w.week_start, reverse=True)


__all__ = ["cutoff_for", "in_window", "select_weeks"]
