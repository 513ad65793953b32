"""Rich rendering of analysis reports."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from srtcheck.detection.overlaps import is_overlapping, overlaps_for
from srtcheck.models.report import AnalysisReport


def format_duration(ms: int) -> str:
    return f"{ms}ms"


def _preview(text: str, limit: int) -> str:
    flat = " / ".join(line.strip() for line in text.splitlines() if line.strip())
    return flat if len(flat) <= limit else flat[: limit - 1] + "…"


def overlap_notes(report: AnalysisReport, index: int) -> list[str]:
    """Per-segment notes such as ``Overlap: 320ms with #3``."""
    return [
        f"Overlap: {format_duration(o.overlap_duration)} with #{o.other(index)}"
        for o in overlaps_for(report.overlaps, index)
    ]


def render_report(
    console: Console,
    report: AnalysisReport,
    *,
    show_segments: bool = True,
    preview_chars: int = 60,
) -> None:
    """Print segment and overlap tables for a finished report."""
    if not report.analyzed:
        console.print("[dim]Nothing to analyze.[/dim]")
        return

    if show_segments and report.segments:
        table = Table(title="Segments", show_lines=False)
        table.add_column("#", style="bold", justify="right")
        table.add_column("Start")
        table.add_column("End")
        table.add_column("Text")
        table.add_column("Notes")

        for seg in report.segments:
            notes = overlap_notes(report, seg.index)
            style = "red" if is_overlapping(report.overlaps, seg.index) else None
            table.add_row(
                str(seg.index),
                seg.start_time_label,
                seg.end_time_label,
                _preview(seg.text, preview_chars),
                "\n".join(notes),
                style=style,
            )
        console.print(table)

    if report.overlaps:
        table = Table(title="Overlaps", show_lines=True)
        table.add_column("First", style="bold", justify="right")
        table.add_column("Second", style="bold", justify="right")
        table.add_column("Duration", justify="right")
        for o in report.overlaps:
            table.add_row(
                f"#{o.first_index}",
                f"#{o.second_index}",
                format_duration(o.overlap_duration),
            )
        console.print(table)

    if report.errors:
        table = Table(title="Unparsed entries", show_lines=True)
        table.add_column("Block", justify="right")
        table.add_column("Kind")
        table.add_column("Message")
        for err in report.errors:
            table.add_row(str(err.block_number), err.kind, err.message)
        console.print(table)

    if report.status == "empty":
        console.print("[yellow]0 segments parsed.[/yellow]")
    elif report.has_overlaps:
        n = report.overlap_count
        console.print(
            f"[bold red]Found {n} timing overlap{'s' if n != 1 else ''}.[/bold red]"
        )
    else:
        console.print("[bold green]No overlaps found.[/bold green]")
