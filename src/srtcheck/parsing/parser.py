"""Parse subtitle text into start-time ordered segments."""

from __future__ import annotations

import re

from srtcheck.models.report import EntryError, ParseResult
from srtcheck.models.segment import Segment
from srtcheck.parsing.timestamp import (
    IndexParseError,
    TimestampError,
    parse_index,
    parse_timestamp,
)

TIMING_SEPARATOR = " --> "
MIN_BLOCK_LINES = 3  # index, timing, at least one text line

_BLOCK_BOUNDARY = re.compile(r"\n\s*\n")


def split_blocks(text: str) -> list[str]:
    """Split a document into blank-line separated blocks.

    Runs of blank or whitespace-only lines count as a single boundary.
    A leading byte order mark is dropped. Returns an empty list for blank
    input.
    """
    normalized = text.removeprefix("\ufeff")
    normalized = normalized.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not normalized:
        return []
    return _BLOCK_BOUNDARY.split(normalized)


def _parse_block(block: str, block_number: int) -> Segment | EntryError | None:
    lines = block.strip().split("\n")
    if len(lines) < MIN_BLOCK_LINES:
        return None

    index_line, timing_line = lines[0], lines[1]

    try:
        index = parse_index(index_line)
    except IndexParseError as e:
        return EntryError(
            kind="invalid_index",
            block_number=block_number,
            line=index_line,
            message=str(e),
        )

    parts = timing_line.split(TIMING_SEPARATOR)
    if len(parts) < 2:
        return EntryError(
            kind="malformed_timing_line",
            block_number=block_number,
            line=timing_line,
            message=f"Timing line has no {TIMING_SEPARATOR.strip()!r} separator: {timing_line!r}",
        )

    start_label, end_label = parts[0].strip(), parts[1].strip()
    try:
        start_time = parse_timestamp(start_label)
        end_time = parse_timestamp(end_label)
    except TimestampError as e:
        return EntryError(
            kind="invalid_timestamp",
            block_number=block_number,
            line=timing_line,
            message=str(e),
        )

    return Segment(
        index=index,
        start_time=start_time,
        end_time=end_time,
        text="\n".join(lines[2:]),
        start_time_label=start_label,
        end_time_label=end_label,
    )


def parse_document(text: str) -> ParseResult:
    """Parse subtitle text, collecting per-entry failures.

    Blocks shorter than three lines are dropped and only counted. Blocks
    whose index or timing line cannot be parsed are left out of the
    segments and reported in ``errors``. Segments are stably sorted by
    start time, so equal start times keep their input order. End times
    earlier than start times are passed through unchanged.
    """
    segments: list[Segment] = []
    errors: list[EntryError] = []
    skipped = 0

    for block_number, block in enumerate(split_blocks(text), start=1):
        result = _parse_block(block, block_number)
        if result is None:
            skipped += 1
        elif isinstance(result, EntryError):
            errors.append(result)
        else:
            segments.append(result)

    segments.sort(key=lambda s: s.start_time)
    return ParseResult(segments=segments, errors=errors, skipped_blocks=skipped)


def parse(text: str) -> list[Segment]:
    """Parse subtitle text into segments sorted by start time."""
    return parse_document(text).segments
