# integrator_notes/summary_pipeline/quotes.py
from __future__ import annotations

import re
from typing import List, Tuple

from .core import Quote
from .textnorm import ensure_text, normalize_newlines

# > "Ship weekly." — Dana, Acme Corp   (nested ">>" markers count too)
QUOTE_RE = re.compile(
    r'^[ \t]*(?:>[ \t]*)+"([^"\n]+)"[ \t]*(?:—|--|-)[ \t]*(.+)$',
    re.MULTILINE,
)
_TEAM_SUFFIX_RE = re.compile(r"^(.+?)\s+(?:team\s+member|team)\s*$", re.IGNORECASE)
_COMMA_RE = re.compile(r"^(.+?),\s*(.+)$")


def split_attribution(clause: str) -> Tuple[str, str]:
    """
    Attribution clause → (person, org).

    "Platform team"      → ("Platform team", "Platform")
    "Dana, Acme Corp"    → ("Dana", "Acme Corp")
    "Dana"               → ("Dana", "")

    Both checks always run; when a clause matches both, the comma split
    (applied second) wins.
    """
    attr = clause.strip()
    person, org = attr, ""
    m = _TEAM_SUFFIX_RE.match(attr)
    if m:
        person, org = attr, m.group(1).strip()
    m = _COMMA_RE.match(attr)
    if m:
        person, org = m.group(1).strip(), m.group(2).strip()
    return person, org


def extract_quotes(body: str) -> List[Quote]:
    """All well-formed quote lines in document order; everything else is ignored."""
    text = normalize_newlines(ensure_text(body))
    out: List[Quote] = []
    for m in QUOTE_RE.finditer(text):
        person, org = split_attribution(m.group(2))
        out.append(Quote(text=m.group(1).strip(), attribution=person, org=org))
    return out


__all__ = ["QUOTE_RE", "split_attribution", "extract_quotes"]
