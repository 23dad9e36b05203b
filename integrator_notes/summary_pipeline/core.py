# summary_pipeline/core.py
"""
Core datatypes for weekly summaries.
No pandas, no I/O. Keep this dependency-free.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

# ——— Enums ———————————————————————————————————————————————————————

class SectionKind(str, Enum):
    insights  = "insights"
    quotes    = "quotes"
    themes    = "themes"
    frictions = "frictions"
    ideas     = "ideas"
    unknown   = "unknown"


# the five kinds that carry items, in display order
ITEM_KINDS: Tuple[SectionKind, ...] = (
    SectionKind.insights,
    SectionKind.quotes,
    SectionKind.themes,
    SectionKind.frictions,
    SectionKind.ideas,
)


class Lookback(int, Enum):
    """Rolling views offered to readers (days)."""
    SEVEN_DAY        = 7
    TWENTY_EIGHT_DAY = 28


DEFAULT_LOOKBACK = Lookback.SEVEN_DAY


# ——— Core dataclasses ————————————————————————————————————————

@dataclass(frozen=True)
class WeekDocument:
    """One reporting week: its date range, meeting count and raw markdown."""
    week_start:   date
    week_end:     date
    note_count:   int = 0
    raw_markdown: str = ""
    file:         str = ""      # index reference the markdown came from


@dataclass(frozen=True)
class RawSection:
    heading_text: str
    body:         str

    @property
    def kind(self) -> SectionKind:
        from .sections import classify_heading
        return classify_heading(self.heading_text)


@dataclass(frozen=True)
class Quote:
    text:        str
    attribution: str
    org:         str = ""


@dataclass(frozen=True)
class Card:
    """Shared shape for themes, friction points and content ideas."""
    title:    str = ""
    body:     str = ""
    mentions: str = ""      # never populated for friction points


Insight = str


@dataclass(frozen=True)
class ParsedSections:
    """Typed items of one document, in first-occurrence order."""
    insights:  Tuple[Insight, ...] = ()
    quotes:    Tuple[Quote, ...]   = ()
    themes:    Tuple[Card, ...]    = ()
    frictions: Tuple[Card, ...]    = ()
    ideas:     Tuple[Card, ...]    = ()

    def items(self, kind: SectionKind) -> Tuple[Any, ...]:
        if kind not in ITEM_KINDS:
            return ()
        return getattr(self, kind.value)

    def to_dict(self) -> Dict[str, Any]:
        return {k.value: [_plain(x) for x in self.items(k)] for k in ITEM_KINDS}


@dataclass(frozen=True)
class AggregateView:
    """Merged view over every week inside a lookback window.

    Attributes:
        weeks_included: Weeks that contributed, newest first.
        total_note_count: Sum of note_count over weeks_included.
        date_range: (oldest week_start, newest week_end), None when empty.
        lookback_days: Window the view was computed for (0 when unknown).
    """
    weeks_included:   Tuple[WeekDocument, ...] = ()
    total_note_count: int                      = 0
    insights:         Tuple[Insight, ...]      = ()
    quotes:           Tuple[Quote, ...]        = ()
    themes:           Tuple[Card, ...]         = ()
    frictions:        Tuple[Card, ...]         = ()
    ideas:            Tuple[Card, ...]         = ()
    date_range:       Optional[Tuple[date, date]] = None
    lookback_days:    int                      = 0

    @property
    def is_empty(self) -> bool:
        return not self.weeks_included

    def items(self, kind: SectionKind) -> Tuple[Any, ...]:
        if kind not in ITEM_KINDS:
            return ()
        return getattr(self, kind.value)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "lookback_days":    self.lookback_days,
            "total_note_count": self.total_note_count,
            "date_range": (
                [self.date_range[0].isoformat(), self.date_range[1].isoformat()]
                if self.date_range else None
            ),
            "weeks": [
                {
                    "week_start": w.week_start.isoformat(),
                    "week_end":   w.week_end.isoformat(),
                    "note_count": w.note_count,
                }
                for w in self.weeks_included
            ],
        }
        for k in ITEM_KINDS:
            out[k.value] = [_plain(x) for x in self.items(k)]
        return out


# ——— Small helper for duck-typing access —————————————————————————

def _plain(x: Any) -> Any:
    """Quote/Card → dict with a stable key order; strings pass through."""
    if isinstance(x, Quote):
        return {"text": x.text, "attribution": x.attribution, "org": x.org}
    if isinstance(x, Card):
        return {"title": x.title, "body": x.body, "mentions": x.mentions}
    return x


def _get(obj: Any, key: str, default: Any = None) -> Any:
    """
    Try to retrieve `key` as a dict-like key, then as an attribute.
    Index descriptors arrive as plain dicts; tests sometimes pass objects.
    """
    if isinstance(obj, Mapping):
        v = obj.get(key)
        return default if v is None else v
    v = getattr(obj, key, None)
    return default if v is None else v


__all__ = [
    "SectionKind", "ITEM_KINDS", "Lookback", "DEFAULT_LOOKBACK",
    "WeekDocument", "RawSection", "Quote", "Card", "Insight",
    "ParsedSections", "AggregateView", "_get",
]
