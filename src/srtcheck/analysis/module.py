"""Analysis module — parses a document and checks it for overlaps."""

from __future__ import annotations

from srtcheck.detection.overlaps import detect_overlaps, find_inverted_segments
from srtcheck.models.config import AnalysisConfig
from srtcheck.models.report import AnalysisReport
from srtcheck.parsing.parser import parse_document
from srtcheck.utils.progress import log, log_step, log_success, log_warning


class InputTooLargeError(ValueError):
    """The document exceeds the configured size cap."""


def run_analysis(text: str, config: AnalysisConfig | None = None) -> AnalysisReport:
    """Run one full analysis over ``text``.

    Steps:
    1. Enforce the optional size cap
    2. Parse into sorted segments, collecting entry errors
    3. Detect overlaps between adjacent segments
    4. Collect segments whose end precedes their start

    Blank input is not an error: the returned report has ``analyzed=False``.
    """
    config = config or AnalysisConfig()

    if config.max_input_chars is not None and len(text) > config.max_input_chars:
        raise InputTooLargeError(
            f"Input is {len(text)} characters; limit is {config.max_input_chars}"
        )

    if not text.strip():
        log("Nothing to analyze (input is empty)")
        return AnalysisReport()

    parsed = parse_document(text)
    log_step("Parse", f"{len(parsed.segments)} segments parsed")
    if parsed.skipped_blocks:
        log_step("Parse", f"Skipped {parsed.skipped_blocks} incomplete block(s)")
    for err in parsed.errors:
        log_warning(f"Block {err.block_number}: {err.message}")

    overlaps = detect_overlaps(parsed.segments)
    if overlaps:
        total_ms = sum(o.overlap_duration for o in overlaps)
        log_warning(f"Found {len(overlaps)} timing overlap(s) ({total_ms}ms total)")
    elif parsed.segments:
        log_success("No timing overlaps")

    inverted = find_inverted_segments(parsed.segments) if config.report_inverted else []
    for seg in inverted:
        log_warning(
            f"Segment #{seg.index} ends before it starts "
            f"({seg.start_time_label} → {seg.end_time_label})"
        )

    return AnalysisReport(
        analyzed=True,
        segments=parsed.segments,
        overlaps=overlaps,
        errors=parsed.errors,
        skipped_blocks=parsed.skipped_blocks,
        inverted=inverted,
    )
