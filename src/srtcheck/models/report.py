"""Parse and analysis result models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from srtcheck.models.segment import Overlap, Segment

EntryErrorKind = Literal["invalid_index", "malformed_timing_line", "invalid_timestamp"]


class EntryError(BaseModel):
    """A block that had enough lines but could not be parsed."""

    model_config = ConfigDict(frozen=True)

    kind: EntryErrorKind
    block_number: int  # 1-based position of the block in the input
    line: str  # the offending line, verbatim
    message: str


class ParseResult(BaseModel):
    """Segments sorted by start time, plus per-entry failures."""

    model_config = ConfigDict(frozen=True)

    segments: list[Segment] = Field(default_factory=list)
    errors: list[EntryError] = Field(default_factory=list)
    skipped_blocks: int = 0  # blocks with fewer than 3 lines


class AnalysisReport(BaseModel):
    """Outcome of one analysis run."""

    model_config = ConfigDict(frozen=True)

    analyzed: bool = False
    segments: list[Segment] = Field(default_factory=list)
    overlaps: list[Overlap] = Field(default_factory=list)
    errors: list[EntryError] = Field(default_factory=list)
    skipped_blocks: int = 0
    inverted: list[Segment] = Field(default_factory=list)

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def overlap_count(self) -> int:
        return len(self.overlaps)

    @property
    def has_overlaps(self) -> bool:
        return bool(self.overlaps)

    @property
    def status(self) -> str:
        """One of ``empty`` | ``clean`` | ``overlaps``."""
        if not self.segments:
            return "empty"
        return "overlaps" if self.overlaps else "clean"
