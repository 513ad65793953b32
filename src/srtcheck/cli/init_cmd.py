"""srtcheck init — write a default configuration file."""

from __future__ import annotations

from pathlib import Path

import click

from srtcheck.models.config import AnalysisConfig
from srtcheck.utils.io import write_yaml
from srtcheck.utils.progress import log_error, log_success

CONFIG_FILENAME = "srtcheck.yaml"


@click.command()
@click.option(
    "--output", "-o",
    default=".",
    type=click.Path(file_okay=False),
    help="Directory to write srtcheck.yaml into",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init_cmd(output: str, force: bool) -> None:
    """Write srtcheck.yaml with the default settings."""
    config_path = Path(output).resolve() / CONFIG_FILENAME
    if config_path.exists() and not force:
        log_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise SystemExit(1)

    write_yaml(config_path, AnalysisConfig().model_dump(mode="json"))
    log_success(f"Config written: {config_path}")
