"""srtcheck check — analyze a subtitle file for timing overlaps."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console

from srtcheck.analysis.module import run_analysis
from srtcheck.cli.init_cmd import CONFIG_FILENAME
from srtcheck.cli.render import render_report
from srtcheck.models.config import AnalysisConfig
from srtcheck.utils.io import decode_text, read_text, read_yaml, write_json
from srtcheck.utils.progress import log_error, log_success, show_report_summary

console = Console()

EXIT_OVERLAPS = 2


def _load_config(config_path: str | None) -> AnalysisConfig:
    """Load config from --config, else ./srtcheck.yaml if present, else defaults."""
    if config_path is None:
        default = Path.cwd() / CONFIG_FILENAME
        if not default.exists():
            return AnalysisConfig()
        config_path = str(default)
    return AnalysisConfig(**read_yaml(config_path))


@click.command()
@click.argument("file", type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--config", "-c", "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help=f"Path to config YAML (default: ./{CONFIG_FILENAME} if present)",
)
@click.option(
    "--json", "json_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Also write the report as JSON to this path",
)
@click.option("--no-segments", is_flag=True, help="Only list overlaps, not every segment")
def check_cmd(
    file: str,
    config_path: str | None,
    json_path: str | None,
    no_segments: bool,
) -> None:
    """Check FILE (or - for stdin) for overlapping subtitle timings."""
    try:
        config = _load_config(config_path)
    except Exception as e:
        log_error(f"Invalid config: {e}")
        raise SystemExit(1)

    try:
        if file == "-":
            text = decode_text(sys.stdin.buffer.read(), encoding=config.encoding)
        else:
            text = read_text(file, encoding=config.encoding)
        report = run_analysis(text, config)
    except Exception as e:
        log_error(f"Analysis failed: {e}")
        raise SystemExit(1)

    render_report(
        console,
        report,
        show_segments=config.show_segments and not no_segments,
        preview_chars=config.text_preview_chars,
    )

    show_report_summary(
        "Analysis",
        {
            "Total segments": report.segment_count,
            "Collisions": report.overlap_count,
            "Unparsed entries": len(report.errors),
            "Skipped blocks": report.skipped_blocks,
            "Inverted segments": len(report.inverted),
        },
        ok=not report.has_overlaps,
    )

    if json_path:
        write_json(json_path, {
            "status": report.status,
            "segment_count": report.segment_count,
            "overlap_count": report.overlap_count,
            **report.model_dump(mode="json"),
        })
        log_success(f"Report written: {json_path}")

    if report.has_overlaps and config.fail_on_overlap:
        raise SystemExit(EXIT_OVERLAPS)
