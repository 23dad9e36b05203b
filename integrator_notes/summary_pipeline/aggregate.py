# integrator_notes/summary_pipeline/aggregate.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .core import ITEM_KINDS, AggregateView, WeekDocument
from .parse import ParseCache, parse_weeks
from .window import Nowish, select_weeks


def merge_weeks(weeks: Iterable[WeekDocument], cache: ParseCache, *,
                lookback_days: int = 0) -> AggregateView:
    """
    Fold already-selected weeks (newest first) into one AggregateView.

    Items are concatenated in week order, each week keeping its own order.
    Weeks missing from `cache` are skipped entirely: no items, no notes.
    """
    included: List[WeekDocument] = []
    total = 0
    lists: Dict[str, List[Any]] = {k.value: [] for k in ITEM_KINDS}

    for w in weeks:
        parsed = cache.get(w.week_start)
        if parsed is None:
            continue
        included.append(w)
        total += w.note_count or 0
        for k in ITEM_KINDS:
            lists[k.value].extend(parsed.items(k))

    date_range = None
    if included:
        date_range = (min(w.week_start for w in included),
                      max(w.week_end for w in included))

    return AggregateView(
        weeks_included=tuple(included),
        total_note_count=total,
        date_range=date_range,
        lookback_days=int(lookback_days),
        **{k: tuple(v) for k, v in lists.items()},
    )


def build_view(weeks: Iterable[WeekDocument], lookback_days: int, *,
               now: Optional[Nowish] = None,
               cache: Optional[ParseCache] = None,
               max_workers: int = 1) -> AggregateView:
    """
    Window → parse → merge in one call.
    Pass `cache` to reuse ParsedSections across windows (e.g. 7 and 28 days).
    """
    chosen = select_weeks(weeks, lookback_days, now)
    if cache is None:
        cache = parse_weeks(chosen, max_workers=max_workers)
    return merge_weeks(chosen, cache, lookback_days=lookback_days)


__all__ = ["merge_weeks", "build_view"]
