"""srtcheck sample — print the built-in sample document."""

from __future__ import annotations

import click

from srtcheck.analysis.sample import SAMPLE_SRT


@click.command()
def sample_cmd() -> None:
    """Print a sample subtitle document to stdout."""
    click.echo(SAMPLE_SRT)
