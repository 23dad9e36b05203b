from __future__ import annotations

# summary_pipeline/io.py
import json, re
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

PathLike = Union[str, Path]

# —————————————————————————————————————————————————————————
# JSON
# —————————————————————————————————————————————————————————

def read_json(path: Path) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def write_json(path: Path, obj: Any, *,
               ensure_ascii: bool = False,
               indent: int = 2) -> None:
    """
    Atomically write `obj` as JSON (tmp file + replace).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(obj, ensure_ascii=ensure_ascii, indent=indent),
                   encoding="utf-8")
    tmp.replace(path)

# —————————————————————————————————————————————————————————
# CSV
# —————————————————————————————————————————————————————————

def write_csv(path: Path, df, **kwargs) -> None:
    """
    Write a DataFrame to CSV with parent-dir creation.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, **kwargs)

# —————————————————————————————————————————————————————————
# Markdown front matter
# —————————————————————————————————————————————————————————

_front_matter_re = re.compile(r"^---[ \t]*\n(.*?)\n---[ \t]*(?:\n|$)", re.DOTALL)


def split_front_matter(text: str) -> Tuple[Optional[Dict[str, Any]], str]:
    """
    ---\n
    yaml...
    ---\n
    body

    Returns (front_matter or None, body). Unreadable YAML counts as absent
    and leaves the text untouched.
    """
    m = _front_matter_re.match(text)
    if not m:
        return None, text
    try:
        fm = yaml.safe_load(m.group(1))
    except yaml.YAMLError:
        return None, text
    if not isinstance(fm, dict):
        return None, text
    return fm, text[m.end():]


def read_front_matter(path: Path) -> Optional[Dict[str, Any]]:
    txt = Path(path).read_text(encoding="utf-8", errors="ignore")
    fm, _ = split_front_matter(txt)
    return fm


__all__ = [
    "PathLike", "read_json", "write_json", "write_csv",
    "split_front_matter", "read_front_matter",
]
