"""
Stable facade for the summary_pipeline package.

Import only from here in apps/CLI:
    from integrator_notes.summary_pipeline import (...)
"""

from __future__ import annotations

# ── Config & types ─────────────────────────────────────────────────────────────
from .config import INDEX_FILENAME, SUMMARIES_DIR
from .core import (
    SectionKind, Lookback, DEFAULT_LOOKBACK,
    WeekDocument, RawSection, Quote, Card, ParsedSections, AggregateView,
)

# ── Parsing core ──────────────────────────────────────────────────────────────
from .sections import CLASSIFICATION_RULES, classify_heading, split_sections
from .quotes import extract_quotes, split_attribution
from .cards import extract_cards, extract_friction_cards
from .parse import ParseCache, parse_summary, parse_week, parse_weeks

# ── Windowing / aggregation ───────────────────────────────────────────────────
from .window import cutoff_for, select_weeks
from .aggregate import merge_weeks, build_view

# ── Loading (local folder) ────────────────────────────────────────────────────
from .index import load_index, load_weeks

# ── Tabular views (pandas) ────────────────────────────────────────────────────
from .eda_bridge import stats_from_view, cards_frame, quotes_frame, weeks_frame


# ── Public surface ─────────────────────────────────────────────────────────────
__all__ = [
    # config & types
    "INDEX_FILENAME", "SUMMARIES_DIR",
    "SectionKind", "Lookback", "DEFAULT_LOOKBACK",
    "WeekDocument", "RawSection", "Quote", "Card", "ParsedSections", "AggregateView",

    # parsing
    "CLASSIFICATION_RULES", "classify_heading", "split_sections",
    "extract_quotes", "split_attribution",
    "extract_cards", "extract_friction_cards",
    "ParseCache", "parse_summary", "parse_week", "parse_weeks",

    # windowing / aggregation
    "cutoff_for", "select_weeks", "merge_weeks", "build_view",

    # loading
    "load_index", "load_weeks",

    # tabular
    "stats_from_view", "cards_frame", "quotes_frame", "weeks_frame",
]
