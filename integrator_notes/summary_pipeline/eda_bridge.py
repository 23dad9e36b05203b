# summary_pipeline/eda_bridge.py
from __future__ import annotations
from typing import Any, Dict, Iterable

import pandas as pd

from .core import AggregateView, SectionKind, WeekDocument

CARD_COLUMNS  = ["kind", "title", "body", "mentions"]
QUOTE_COLUMNS = ["text", "attribution", "org"]
WEEK_COLUMNS  = ["week_start", "week_end", "note_count"]

_CARD_KINDS = (SectionKind.themes, SectionKind.frictions, SectionKind.ideas)


def stats_from_view(view: AggregateView) -> Dict[str, int]:
    """Headline counts for a window (meetings first, then item counts)."""
    return {
        "meetings":        view.total_note_count,
        "themes":          len(view.themes),
        "friction_points": len(view.frictions),
        "content_ideas":   len(view.ideas),
        "insights":        len(view.insights),
        "quotes":          len(view.quotes),
    }


def cards_frame(view: AggregateView) -> pd.DataFrame:
    """
    Long card table over themes, frictions and ideas, in view order.
    Stable empty schema so downstream CSV writers never break.
    """
    rows: list[dict] = []
    for kind in _CARD_KINDS:
        for c in view.items(kind):
            rows.append({"kind": kind.value, "title": c.title, "body": c.body, "mentions": c.mentions})
    if not rows:
        return pd.DataFrame(columns=CARD_COLUMNS)
    return pd.DataFrame(rows, columns=CARD_COLUMNS)


def quotes_frame(view: AggregateView) -> pd.DataFrame:
    rows = [{"text": q.text, "attribution": q.attribution, "org": q.org} for q in view.quotes]
    if not rows:
        return pd.DataFrame(columns=QUOTE_COLUMNS)
    return pd.DataFrame(rows, columns=QUOTE_COLUMNS)


def weeks_frame(weeks: Iterable[WeekDocument]) -> pd.DataFrame:
    rows: list[Dict[str, Any]] = [
        {"week_start": w.week_start.isoformat(),
         "week_end":   w.week_end.isoformat(),
         "note_count": w.note_count}
        for w in weeks
    ]
    if not rows:
        return pd.DataFrame(columns=WEEK_COLUMNS)
    return pd.DataFrame(rows, columns=WEEK_COLUMNS)


__all__ = ["stats_from_view", "cards_frame", "quotes_frame", "weeks_frame"]
