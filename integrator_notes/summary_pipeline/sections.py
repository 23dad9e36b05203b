# integrator_notes/summary_pipeline/sections.py
"""
Heading-delimited splitting and topic classification.

Summaries arrive as numbered second-level sections:

    ## 1. Executive Summary
    ## 2. Notable Quotes
    ...

Numbers are not validated (duplicates and gaps are fine); only the title
text after them decides what a section is about.
"""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from .core import RawSection, SectionKind
from .textnorm import ensure_text, normalize_newlines

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^## \d+\.[ \t]*(.*)$", re.MULTILINE)

# Ordered: first rule whose keywords occur in the lower-cased heading wins.
CLASSIFICATION_RULES: Tuple[Tuple[Tuple[str, ...], SectionKind], ...] = (
    (("executive summary", "insight"), SectionKind.insights),
    (("notable quotes", "source"),     SectionKind.quotes),
    (("main themes", "theme"),         SectionKind.themes),
    (("misunderstanding", "friction"), SectionKind.frictions),
    (("content idea",),                SectionKind.ideas),
)


def classify_heading(heading_text: str) -> SectionKind:
    h = heading_text.lower()
    for keywords, kind in CLASSIFICATION_RULES:
        if any(k in h for k in keywords):
            return kind
    return SectionKind.unknown


def split_sections(md: str) -> List[RawSection]:
    """
    Split raw markdown into RawSections in document order.
    Preamble before the first heading and untitled headings are dropped.
    """
    text = normalize_newlines(ensure_text(md))
    matches = list(HEADING_RE.finditer(text))
    out: List[RawSection] = []
    for i, m in enumerate(matches):
        heading = m.group(1).strip()
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        if not heading:
            logger.debug("dropping untitled section at offset %d", m.start())
            continue
        body = text[m.end():end].strip()
        out.append(RawSection(heading_text=heading, body=body))
    return out


def classified_sections(md: str) -> List[Tuple[SectionKind, RawSection]]:
    """(kind, section) pairs, Unknown sections already filtered out."""
    pairs: List[Tuple[SectionKind, RawSection]] = []
    for sec in split_sections(md):
        kind = classify_heading(sec.heading_text)
        if kind is SectionKind.unknown:
            logger.debug("unclassified section %r skipped", sec.heading_text)
            continue
        pairs.append((kind, sec))
    return pairs


__all__ = [
    "HEADING_RE", "CLASSIFICATION_RULES",
    "classify_heading", "split_sections", "classified_sections",
]
