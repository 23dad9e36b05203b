# integrator_notes/summary_pipeline/parse.py
"""
Document → ParsedSections, and the per-week parse cache.

The cache is built once per aggregation request and handed on as a
read-only mapping keyed by week_start; nothing here keeps module state.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from .cards import extract_cards, extract_friction_cards
from .core import ParsedSections, SectionKind, WeekDocument
from .quotes import extract_quotes
from .sections import classified_sections
from .textnorm import split_paragraphs

logger = logging.getLogger(__name__)

ParseCache = Mapping[date, ParsedSections]

_EXTRACTORS: Dict[SectionKind, Callable[[str], List[Any]]] = {
    SectionKind.insights:  split_paragraphs,
    SectionKind.quotes:    extract_quotes,
    SectionKind.themes:    extract_cards,
    SectionKind.frictions: extract_friction_cards,
    SectionKind.ideas:     extract_cards,
}


def parse_summary(md: str) -> ParsedSections:
    """
    Parse one summary document.

    Never raises on malformed markdown; only non-str input is rejected
    (TypeError). Sections of the same kind append in document order.
    """
    buckets: Dict[SectionKind, List[Any]] = {k: [] for k in _EXTRACTORS}
    for kind, sec in classified_sections(md):
        buckets[kind].extend(_EXTRACTORS[kind](sec.body))
    return ParsedSections(
        insights=tuple(buckets[SectionKind.insights]),
        quotes=tuple(buckets[SectionKind.quotes]),
        themes=tuple(buckets[SectionKind.themes]),
        frictions=tuple(buckets[SectionKind.frictions]),
        ideas=tuple(buckets[SectionKind.ideas]),
    )


def parse_week(week: WeekDocument) -> Optional[ParsedSections]:
    """ParsedSections for one week, or None if its markdown could not be parsed."""
    try:
        return parse_summary(week.raw_markdown)
    except Exception as e:
        logger.warning("week %s: parse failed (%s); leaving it out", week.week_start, e)
        return None


def parse_weeks(weeks: Iterable[WeekDocument], *, max_workers: int = 1) -> ParseCache:
    """
    Parse every week (optionally in parallel) into a read-only
    week_start → ParsedSections mapping. Failed weeks are absent.
    """
    weeks = list(weeks)
    if max_workers > 1 and len(weeks) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(parse_week, weeks))
    else:
        results = [parse_week(w) for w in weeks]

    cache: Dict[date, ParsedSections] = {}
    for w, parsed in zip(weeks, results):
        if parsed is not None:
            cache[w.week_start] = parsed
    return MappingProxyType(cache)


__all__ = ["ParseCache", "parse_summary", "parse_week", "parse_weeks"]
