# integrator_notes/summary_pipeline/cards.py
"""
Bullet-list cards: `- **Title** — body[. Mentioned by: names][.]`

Two list-splitting strategies feed one per-fragment parser:
  • split_bullets       every line-leading "- " starts a fragment
                        (themes, content ideas)
  • split_bold_bullets  only a line-leading "- **" starts a fragment, so
                        wrapped paragraphs stay with their card
                        (friction points)
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Optional

from .config import MIN_FALLBACK_LEN
from .core import Card
from .textnorm import (
    ensure_text,
    normalize_newlines,
    strip_bullet_residue,
    strip_trailing_period,
)

logger = logging.getLogger(__name__)

Splitter = Callable[[str], List[str]]

TITLE_RE    = re.compile(r"^\*\*(.+?)\*\*\s*(?:—|--|-|:)\s*")
MENTIONS_RE = re.compile(r"Mentioned by:\s*(.+?)\.?\s*$", re.IGNORECASE)

_BULLET_SPLIT_RE      = re.compile(r"\n- ")
_BOLD_BULLET_SPLIT_RE = re.compile(r"\n(?=- \*\*)")


def split_bullets(text: str) -> List[str]:
    return _BULLET_SPLIT_RE.split(text)


def split_bold_bullets(text: str) -> List[str]:
    return _BOLD_BULLET_SPLIT_RE.split(text)


def parse_card(fragment: str, *, with_mentions: bool = True) -> Optional[Card]:
    """One fragment → Card, or None when it is too short to mean anything."""
    m = TITLE_RE.match(fragment)
    if m:
        rest = fragment[m.end():].strip()
        mentions = ""
        if with_mentions:
            mm = MENTIONS_RE.search(rest)
            if mm:
                mentions = mm.group(1).strip()
                rest = rest[:mm.start()].strip()
        return Card(title=m.group(1), body=strip_trailing_period(rest), mentions=mentions)
    if len(fragment) > MIN_FALLBACK_LEN:
        return Card(title="", body=fragment)
    logger.debug("dropping short fragment %r", fragment)
    return None


def _cards(fragments: Iterable[str], *, with_mentions: bool) -> List[Card]:
    out: List[Card] = []
    for raw in fragments:
        frag = strip_bullet_residue(raw.strip())
        if not frag:
            continue
        card = parse_card(frag, with_mentions=with_mentions)
        if card is not None:
            out.append(card)
    return out


def extract_cards(body: str, *, splitter: Splitter = split_bullets,
                  with_mentions: bool = True) -> List[Card]:
    """Themes / content ideas."""
    text = normalize_newlines(ensure_text(body))
    return _cards(splitter(text), with_mentions=with_mentions)


def extract_friction_cards(body: str) -> List[Card]:
    """Friction points: bold-bullet split, mentions never populated."""
    return extract_cards(body, splitter=split_bold_bullets, with_mentions=False)


__all__ = [
    "TITLE_RE", "MENTIONS_RE",
    "split_bullets", "split_bold_bullets",
    "parse_card", "extract_cards", "extract_friction_cards",
]
