# build_index.py
# Regenerate summaries/index.json from the week files in a folder.
# JSON week files need week_start/week_end (note_count optional);
# .md week files carry the same keys in YAML front matter.
import sys
from pathlib import Path

from integrator_notes.summary_pipeline.config import coerce_count, parse_date_any
from integrator_notes.summary_pipeline.io import read_front_matter, read_json, write_json


def describe(path: Path, root: Path):
    try:
        meta = read_front_matter(path) if path.suffix == ".md" else read_json(path)
    except Exception:
        return None
    if not isinstance(meta, dict):
        return None
    start = parse_date_any(meta.get("week_start"))
    end = parse_date_any(meta.get("week_end"))
    if start is None or end is None:
        return None
    return {
        "week_start": start.isoformat(),
        "week_end": end.isoformat(),
        "note_count": coerce_count(meta.get("note_count")),
        "file": path.relative_to(root).as_posix(),
    }


def build_index(root="summaries", index_name="index.json"):
    root = Path(root)
    weeks = []
    for p in sorted(root.glob("*")):
        if p.name == index_name or p.suffix not in (".json", ".md"):
            continue
        d = describe(p, root)
        if d:
            weeks.append(d)
    weeks.sort(key=lambda d: d["week_start"], reverse=True)
    write_json(root / index_name, {"weeks": weeks})
    print(f"[OK] Indexed {len(weeks)} weeks → {root / index_name}")
    return weeks


if __name__ == "__main__":
    build_index(*sys.argv[1:2])
