# summary_pipeline/validate.py
from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, List, Tuple
from pathlib import Path

from jsonschema import Draft202012Validator

from .io import read_json

INDEX_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["weeks"],
    "properties": {
        "weeks": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["week_start", "week_end", "file"],
                "properties": {
                    "week_start": {"type": "string", "format": "date"},
                    "week_end":   {"type": "string", "format": "date"},
                    "note_count": {"type": "integer", "minimum": 0},
                    "file":       {"type": "string", "minLength": 1},
                },
            },
        },
    },
}

WEEK_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "anyOf": [
        {"required": ["summary_markdown"]},
        {"required": ["raw_summary"]},
    ],
    "properties": {
        "summary_markdown": {"type": "string"},
        "raw_summary":      {"type": "string"},
    },
}


def iter_validate(docs: Iterable[dict], schema: dict) -> Iterator[Tuple[dict, List[str]]]:
    """
    Yields (doc, errors). errors is [] when valid; otherwise list of "path: message".
    """
    validator = Draft202012Validator(schema, format_checker=Draft202012Validator.FORMAT_CHECKER)
    for d in docs:
        errs = [f"{e.json_path}: {e.message}" for e in validator.iter_errors(d)]
        yield d, errs


def validate_summaries_dir(root: Path, index_name: str = "index.json") -> Dict[str, List[str]]:
    """
    Check index.json and every JSON week file it references.
    Returns {relative_path: errors} for the files that have problems.
    """
    root = Path(root)
    problems: Dict[str, List[str]] = {}
    try:
        index = read_json(root / index_name)
    except Exception as e:
        return {index_name: [f"$: {e}"]}

    _, errs = next(iter_validate([index], INDEX_SCHEMA))
    if errs:
        problems[index_name] = errs

    weeks = index.get("weeks") if isinstance(index, dict) else None
    for desc in weeks if isinstance(weeks, list) else []:
        ref = desc.get("file") if isinstance(desc, dict) else None
        if not isinstance(ref, str) or not ref.endswith(".json"):
            continue
        try:
            doc = read_json(root / ref)
        except Exception as e:
            problems[ref] = [f"$: {e}"]
            continue
        _, errs = next(iter_validate([doc], WEEK_SCHEMA))
        if errs:
            problems[ref] = errs
    return problems


__all__ = ["INDEX_SCHEMA", "WEEK_SCHEMA", "iter_validate", "validate_summaries_dir"]
