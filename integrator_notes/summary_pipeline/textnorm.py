# integrator_notes/summary_pipeline/textnorm.py
from __future__ import annotations

import re
from typing import List

__all__ = [
    "normalize_newlines", "split_paragraphs", "strip_trailing_period",
    "strip_bullet_residue", "ensure_text",
]

_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")
_BULLET_RESIDUE_RE = re.compile(r"^-\s*")


def ensure_text(md: object) -> str:
    """Reject non-text input early; everything downstream assumes str."""
    if not isinstance(md, str):
        raise TypeError(f"markdown must be str, got {type(md).__name__}")
    return md


def normalize_newlines(s: str) -> str:
    """CRLF / CR → LF so line-anchored patterns behave the same everywhere."""
    return s.replace("\r\n", "\n").replace("\r", "\n")


def split_paragraphs(body: str) -> List[str]:
    """Blank-line separated paragraphs, trimmed, empties dropped."""
    return [p.strip() for p in _BLANK_LINE_RE.split(body) if p.strip()]


def strip_trailing_period(s: str) -> str:
    """Drop exactly one trailing '.'."""
    return s[:-1] if s.endswith(".") else s


def strip_bullet_residue(fragment: str) -> str:
    """'- foo' / '-foo' → 'foo' (one marker only), then trim."""
    return _BULLET_RESIDUE_RE.sub("", fragment, count=1).strip()
