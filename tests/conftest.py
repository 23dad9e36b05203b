import json
from datetime import date

import pytest

from integrator_notes.summary_pipeline.core import WeekDocument

SAMPLE_MD = """# Weekly summary

Generated preamble that is not a section.

## 1. Executive Summary
First insight paragraph
continues here.

Second insight.

## 2. Notable Quotes
> "Ship weekly." — Dana, Acme Corp
> "We need docs" -- Platform team
> "Broken quote — Lee
> "Works fine." - Sam

## 3. Main Themes
- **Onboarding friction** — New users drop off early. Mentioned by: Dana, Lee.
- **Pricing**: Confusing tiers.
- short
- A titleless bullet that is long enough

## 4. Misunderstandings & Friction Points
- **Auth scopes** — People confuse read and write
  scopes when wiring the API.
- **Billing** — Invoices arrive late.

## 5. Content Ideas
- **Post: onboarding checklist** — Walk through the first week. Mentioned by: Dana.

## 6. Random Notes
- **Ignored** — nothing to see here.
"""


def week_md(tag: str) -> str:
    """Small document whose items all carry `tag`, to check ordering."""
    return (
        f"## 1. Key Insights\n{tag} insight one.\n\n{tag} insight two.\n\n"
        f"## 2. Sources\n> \"{tag} quote\" — {tag} person, {tag} org\n\n"
        f"## 3. Themes\n- **{tag} theme** — {tag} body.\n\n"
        f"## 4. Friction\n- **{tag} friction** — {tag} pain.\n\n"
        f"## 5. Content Ideas\n- **{tag} idea** — {tag} pitch.\n"
    )


def make_week(start, end, notes=0, md="", file=""):
    return WeekDocument(week_start=start, week_end=end, note_count=notes,
                        raw_markdown=md, file=file)


@pytest.fixture
def sample_md():
    return SAMPLE_MD


@pytest.fixture
def now():
    return date(2025, 6, 15)


@pytest.fixture
def weeks():
    """Newest first: A inside 7d, B ends exactly on the 7d cutoff, C only in 28d."""
    return [
        make_week(date(2025, 6, 9), date(2025, 6, 15), 4, week_md("A")),
        make_week(date(2025, 6, 2), date(2025, 6, 8), 6, week_md("B")),
        make_week(date(2025, 5, 26), date(2025, 6, 1), 3, week_md("C")),
    ]


@pytest.fixture
def summaries_dir(tmp_path):
    """A summaries folder with two good weeks (json + md) and three broken refs."""
    root = tmp_path / "summaries"
    root.mkdir()
    (root / "2025-06-09.json").write_text(
        json.dumps({"summary_markdown": week_md("A")}), encoding="utf-8")
    (root / "2025-06-02.md").write_text(
        "---\nweek_start: 2025-06-02\nweek_end: 2025-06-08\nnote_count: 6\n---\n" + week_md("B"),
        encoding="utf-8")
    (root / "broken.json").write_text("{not json", encoding="utf-8")
    index = {"weeks": [
        {"week_start": "2025-06-02", "week_end": "2025-06-08", "note_count": 6, "file": "2025-06-02.md"},
        {"week_start": "2025-06-09", "week_end": "2025-06-15", "note_count": 4, "file": "2025-06-09.json"},
        {"week_start": "2025-05-26", "week_end": "2025-06-01", "note_count": 3, "file": "missing.json"},
        {"week_start": "2025-05-19", "week_end": "2025-05-25", "note_count": 2, "file": "broken.json"},
        {"week_start": "not-a-date", "week_end": "2025-05-18", "note_count": 1, "file": "2025-06-09.json"},
    ]}
    (root / "index.json").write_text(json.dumps(index), encoding="utf-8")
    return root
