"""Inline diagnostics CLI entry point: Click group with subcommands."""

import json
import logging

import click

from inline_diagnostics import __version__
from inline_diagnostics.config import DEFAULT_CONFIG


@click.group()
@click.version_option(version=__version__, prog_name="inline-diagnostics")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Inline diagnostics - preview cursor-line diagnostic panels."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
def defaults() -> None:
    """Print the default panel configuration as JSON."""
    click.echo(json.dumps(DEFAULT_CONFIG.to_dict(), indent=2, ensure_ascii=False))


# Import and register subcommands
from inline_diagnostics.cli.render import render  # noqa: E402

cli.add_command(render)
