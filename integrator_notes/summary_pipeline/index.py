# summary_pipeline/index.py
"""
Local loader for the summaries folder:

    summaries/
      index.json            {"weeks": [{"week_start", "week_end", "note_count", "file"}]}
      2025-06-02.json       {"summary_markdown": "...", "raw_summary": "..."}
      2025-06-09.md         optional YAML front matter + markdown body

Anything that fails to load is logged and skipped; callers get the weeks
that did load, newest first.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .config import INDEX_FILENAME, MARKDOWN_KEYS, coerce_count, coerce_text, parse_date_any
from .core import WeekDocument, _get
from .io import PathLike, read_json, split_front_matter

logger = logging.getLogger(__name__)


def load_index(root: PathLike, *, filename: str = INDEX_FILENAME) -> List[Dict[str, Any]]:
    """Week descriptors from <root>/index.json; [] when missing or unreadable."""
    path = Path(root) / filename
    try:
        data = read_json(path)
    except FileNotFoundError:
        logger.warning("no index at %s", path)
        return []
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("unreadable index %s: %s", path, e)
        return []
    weeks = data.get("weeks") if isinstance(data, Mapping) else None
    if not isinstance(weeks, list):
        logger.warning("index %s has no 'weeks' list", path)
        return []
    return [w for w in weeks if isinstance(w, Mapping)]


def markdown_from_payload(payload: Mapping[str, Any]) -> str:
    """summary_markdown if non-empty, else raw_summary, else ""."""
    for key in MARKDOWN_KEYS:
        text = coerce_text(payload.get(key))
        if text:
            return text
    return ""


def load_week_markdown(path: Path) -> Optional[str]:
    """
    Raw markdown of one week file, or None on error.
    .md/.markdown files are read as-is (front matter stripped);
    anything else is treated as a JSON payload.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("cannot read %s: %s", path, e)
        return None

    if path.suffix.lower() in (".md", ".markdown"):
        _, body = split_front_matter(text)
        return body

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("cannot decode %s: %s", path, e)
        return None
    if not isinstance(payload, Mapping):
        logger.warning("%s is not a JSON object", path)
        return None
    return markdown_from_payload(payload)


def week_from_descriptor(root: PathLike, desc: Any) -> Optional[WeekDocument]:
    """
    Turn one index descriptor into a WeekDocument, or return None on error.
    """
    start = parse_date_any(_get(desc, "week_start"))
    end   = parse_date_any(_get(desc, "week_end"))
    if start is None or end is None:
        logger.warning("skipping descriptor with bad dates: %r", desc)
        return None

    ref = coerce_text(_get(desc, "file", "")).strip()
    if not ref:
        logger.warning("week %s: descriptor has no file reference", start)
        return None

    md = load_week_markdown(Path(root) / ref)
    if md is None:
        return None

    return WeekDocument(
        week_start=start,
        week_end=end,
        note_count=coerce_count(_get(desc, "note_count", 0)),
        raw_markdown=md,
        file=ref,
    )


def load_weeks(root: PathLike, *, filename: str = INDEX_FILENAME) -> List[WeekDocument]:
    """All loadable weeks under `root`, newest week_start first."""
    weeks: List[WeekDocument] = []
    for desc in load_index(root, filename=filename):
        w = week_from_descriptor(root, desc)
        if w is not None:
            weeks.append(w)
    return sorted(weeks, key=lambda w: w.week_start, reverse=True)


__all__ = [
    "load_index", "markdown_from_payload", "load_week_markdown",
    "week_from_descriptor", "load_weeks",
]
