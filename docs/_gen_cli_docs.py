# docs/_gen_cli_docs.py
from __future__ import annotations
import sys
from pathlib import Path
import click
from typer.main import get_command

# Ensure repo root on sys.path so imports work when building docs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from integrator_notes.cli.notesctl import app  # noqa: E402

OUT = ROOT / "docs" / "cli.md"


def render_help(cmd: click.Command, prog_name: str) -> str:
    """Return the --help text of a Click/Typer command as a string."""
    ctx = click.Context(cmd, info_name=prog_name)
    return cmd.get_help(ctx)


def render_all(prog: str = "notesctl") -> str:
    root = get_command(app)         # Click Group
    md = [f"# `{prog}`", "", "```", render_help(root, prog).rstrip(), "```", ""]

    for name, sub in sorted(root.commands.items()):
        md.append(f"## `{prog} {name}`")
        md.append("")
        md.append("```")
        md.append(render_help(sub, f"{prog} {name}").rstrip())
        md.append("```")
        md.append("")
    return "\n".join(md)


def main() -> None:
    OUT.write_text(render_all(), encoding="utf-8")
    print(f"wrote {OUT}")


if __name__ == "__main__":
    main()
