"""Root CLI group for srtcheck."""

from __future__ import annotations

import click

from srtcheck import __version__


@click.group()
@click.version_option(version=__version__, prog_name="srtcheck")
def cli() -> None:
    """srtcheck — find timing overlaps in subtitle files."""


# Import and register subcommands
from srtcheck.cli.check_cmd import check_cmd  # noqa: E402
from srtcheck.cli.init_cmd import init_cmd  # noqa: E402
from srtcheck.cli.sample_cmd import sample_cmd  # noqa: E402

cli.add_command(check_cmd, "check")
cli.add_command(init_cmd, "init")
cli.add_command(sample_cmd, "sample")
