"""Timing overlap detection between start-time adjacent segments."""

from __future__ import annotations

from srtcheck.models.segment import Overlap, Segment


def detect_overlaps(segments: list[Segment]) -> list[Overlap]:
    """Find overlaps between each segment and the one right after it.

    ``segments`` must already be sorted by start time (as ``parse`` returns
    them). Only neighbours are compared: a long segment that runs past a
    later, non-adjacent segment is not reported unless it also overlaps its
    immediate successor. A shared boundary instant (end == next start) is
    not an overlap.
    """
    overlaps: list[Overlap] = []

    for i in range(len(segments) - 1):
        current = segments[i]
        nxt = segments[i + 1]

        if current.end_time > nxt.start_time:
            overlaps.append(Overlap(
                first_index=current.index,
                second_index=nxt.index,
                overlap_duration=current.end_time - nxt.start_time,
            ))

    return overlaps


def overlaps_for(overlaps: list[Overlap], index: int) -> list[Overlap]:
    """Overlaps that involve the segment with declared ``index``, in scan order."""
    return [o for o in overlaps if o.involves(index)]


def is_overlapping(overlaps: list[Overlap], index: int) -> bool:
    """Whether the segment with declared ``index`` takes part in any overlap."""
    return any(o.involves(index) for o in overlaps)


def find_inverted_segments(segments: list[Segment]) -> list[Segment]:
    """Segments whose end time is earlier than their start time."""
    return [s for s in segments if s.is_inverted]
