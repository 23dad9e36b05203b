# integrator_notes/cli/notesctl.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from integrator_notes.summary_pipeline.aggregate import build_view
from integrator_notes.summary_pipeline.config import SUMMARIES_DIR, parse_date_any
from integrator_notes.summary_pipeline.core import AggregateView, DEFAULT_LOOKBACK, Lookback
from integrator_notes.summary_pipeline.eda_bridge import (
    cards_frame,
    quotes_frame,
    stats_from_view,
    weeks_frame,
)
from integrator_notes.summary_pipeline.index import load_week_markdown, load_weeks
from integrator_notes.summary_pipeline.io import write_csv, write_json
from integrator_notes.summary_pipeline.parse import parse_summary
from integrator_notes.summary_pipeline.validate import validate_summaries_dir


app = typer.Typer(add_completion=False, no_args_is_help=True)

NO_SUMMARIES = "No summaries yet."
NO_DATA = "No data for this period yet."


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Parse weekly meeting summaries and build 7/28-day rolling views."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _lookback(window: int) -> Lookback:
    try:
        return Lookback(window)
    except ValueError:
        choices = "|".join(str(lb.value) for lb in Lookback)
        raise typer.BadParameter(f"window must be one of {choices}", param_hint="--window")


def _now(now: str):
    if not now:
        return None
    d = parse_date_any(now)
    if d is None:
        raise typer.BadParameter(f"not an ISO date: {now!r}", param_hint="--now")
    return d


def _view(summaries_dir: Path, window: int, now: str, workers: int) -> Optional[AggregateView]:
    """None when there is nothing to aggregate at all."""
    lookback = _lookback(window)
    ref = _now(now)
    weeks = load_weeks(summaries_dir)
    if not weeks:
        return None
    return build_view(weeks, lookback.value, now=ref, max_workers=workers)


# ------------------------------------------------------------------------------
# parse → one document as JSON
# ------------------------------------------------------------------------------
@app.command("parse")
def parse_cmd(
    path: Path          = typer.Argument(..., help="Week file (.json payload or .md)"),
    out: Optional[Path] = typer.Option(None, help="Write JSON here instead of stdout"),
):
    """Parse one summary document into insights, quotes, themes, frictions, ideas."""
    md = load_week_markdown(path)
    if md is None:
        typer.echo(f"[parse] cannot load {path}", err=True)
        raise typer.Exit(code=1)
    parsed = parse_summary(md).to_dict()
    if out:
        write_json(out, parsed)
        typer.echo(f"[parse] wrote → {out}")
    else:
        typer.echo(json.dumps(parsed, ensure_ascii=False, indent=2))


# ------------------------------------------------------------------------------
# aggregate → rolling view as JSON
# ------------------------------------------------------------------------------
@app.command("aggregate")
def aggregate_cmd(
    summaries_dir: Path = typer.Option(SUMMARIES_DIR, help="Folder with index.json + week files"),
    window: int         = typer.Option(DEFAULT_LOOKBACK.value, help="Lookback in days: 7|28"),
    now: str            = typer.Option("", help="Reference date (ISO), default today UTC"),
    workers: int        = typer.Option(1, help="Parse weeks with N threads"),
    out: Optional[Path] = typer.Option(None, help="Write JSON here instead of stdout"),
):
    """
    Merge every week overlapping the lookback window into one view.
    Notes:
      - A week counts when its week_end falls on or after today - window.
      - Weeks that fail to load are left out, not counted as empty.
    """
    view = _view(summaries_dir, window, now, workers)
    if view is None:
        typer.echo(NO_SUMMARIES)
        return
    if view.is_empty:
        typer.echo(NO_DATA)
        return

    payload = view.to_dict()
    payload["stats"] = stats_from_view(view)
    if out:
        write_json(out, payload)
        typer.echo(f"[aggregate] {len(view.weeks_included)} weeks · "
                   f"{view.total_note_count} meetings → {out}")
    else:
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


# ------------------------------------------------------------------------------
# stats
# ------------------------------------------------------------------------------
@app.command("stats")
def stats_cmd(
    summaries_dir: Path = typer.Option(SUMMARIES_DIR),
    window: int         = typer.Option(DEFAULT_LOOKBACK.value, help="7|28"),
    now: str            = typer.Option("", help="Reference date (ISO)"),
):
    """Headline counts for a window."""
    view = _view(summaries_dir, window, now, 1)
    if view is None:
        typer.echo(NO_SUMMARIES)
        return
    if view.is_empty:
        typer.echo(NO_DATA)
        return
    start, end = view.date_range
    typer.echo(f"Covering {start.isoformat()} → {end.isoformat()}")
    for k, v in stats_from_view(view).items():
        typer.echo(f"{k}: {v}")


# ------------------------------------------------------------------------------
# export-csv
# ------------------------------------------------------------------------------
@app.command("export-csv")
def export_csv_cmd(
    summaries_dir: Path = typer.Option(SUMMARIES_DIR),
    window: int         = typer.Option(DEFAULT_LOOKBACK.value, help="7|28"),
    now: str            = typer.Option("", help="Reference date (ISO)"),
    out_dir: Path       = typer.Option(Path("outputs/notes"), help="Destination folder"),
):
    """Write cards.csv, quotes.csv and weeks.csv for the window."""
    view = _view(summaries_dir, window, now, 1)
    if view is None:
        typer.echo(NO_SUMMARIES)
        return

    write_csv(out_dir / "cards.csv",  cards_frame(view),                 index=False)
    write_csv(out_dir / "quotes.csv", quotes_frame(view),                index=False)
    write_csv(out_dir / "weeks.csv",  weeks_frame(view.weeks_included),  index=False)
    if view.is_empty:
        typer.echo(f"⚠️  {NO_DATA}")
    typer.echo(f"[export-csv] {len(view.weeks_included)} weeks → {out_dir}")


# ------------------------------------------------------------------------------
# validate
# ------------------------------------------------------------------------------
@app.command("validate")
def validate_cmd(
    summaries_dir: Path = typer.Option(SUMMARIES_DIR),
):
    """Check index.json and the JSON week files it references."""
    problems = validate_summaries_dir(summaries_dir)
    for name, errs in sorted(problems.items()):
        for e in errs:
            typer.echo(f"{name}: {e}")
    typer.echo(f"validated {summaries_dir} · invalid={len(problems)}")
    if problems:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
