"""CLI command: inline-diagnostics render -- lay out the panel for one line."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from inline_diagnostics.config import resolve_config
from inline_diagnostics.engine.engine import InlineDiagnostics, current_line_text
from inline_diagnostics.engine.memory import InMemoryBuffer
from inline_diagnostics.errors import ConfigError, DiagnosticsFormatError
from inline_diagnostics.loaders import load_config_file, load_diagnostics
from inline_diagnostics.preview import render_preview


def _parse_overrides(pairs: tuple[str, ...]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--set")
        overrides[key.strip()] = value
    return overrides


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--diagnostics",
    "diagnostics_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON list of diagnostics",
)
@click.option("--line", required=True, type=click.IntRange(min=0), help="Cursor line (0-based)")
@click.option("--column", default=0, type=click.IntRange(min=0), help="Cursor column")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="JSON config file")
@click.option("--set", "settings", multiple=True, metavar="KEY=VALUE", help="Override a config key")
@click.option("--tab-width", default=4, type=click.IntRange(min=1), help="Columns per tab")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Preview text or fragment JSON",
)
@click.option("--color/--no-color", default=False, help="Color the text preview")
def render(
    source: str,
    diagnostics_file: str,
    line: int,
    column: int,
    config_file: str | None,
    settings: tuple[str, ...],
    tab_width: int,
    output_format: str,
    color: bool,
) -> None:
    """Lay out the diagnostic panel for one line of SOURCE.

    Places the cursor at LINE/COLUMN, runs the panel engine against the
    diagnostics file and prints the result.
    """
    overrides = _parse_overrides(settings)

    try:
        config = load_config_file(config_file)
        if overrides:
            config = resolve_config({**config.to_dict(), **overrides})
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except (TypeError, ValueError, OverflowError) as exc:
        click.echo(f"Error: invalid config override: {exc}", err=True)
        sys.exit(1)

    try:
        diagnostics = load_diagnostics(diagnostics_file)
        text = Path(source).read_text(encoding="utf-8")
    except (DiagnosticsFormatError, UnicodeDecodeError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    buffer = InMemoryBuffer(text, diagnostics=diagnostics, document_id=Path(source).name)
    buffer.move_to(line, column)
    engine = InlineDiagnostics(config=config, tab_width=tab_width, skip_unchanged=False)
    fragments = engine.update(buffer) or []

    if output_format == "json":
        click.echo(json.dumps([f.to_dict() for f in fragments], indent=2, ensure_ascii=False))
        return

    line_text = current_line_text(buffer, buffer.char_to_line(buffer.get_cursor()))
    for row in render_preview(line_text, fragments, tab_width=tab_width, color=color):
        click.echo(row, color=color)
