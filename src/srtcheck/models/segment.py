"""Subtitle segment and overlap models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Segment(BaseModel):
    """A single parsed subtitle entry.

    Times are integer milliseconds since 00:00:00,000. The label fields keep
    the timestamps exactly as written (trimmed), for display.
    """

    model_config = ConfigDict(frozen=True)

    index: int  # declared sequence number, as written
    start_time: int
    end_time: int
    text: str
    start_time_label: str
    end_time_label: str

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time

    @property
    def is_inverted(self) -> bool:
        return self.end_time < self.start_time


class Overlap(BaseModel):
    """A timing collision between two segments adjacent in start-time order."""

    model_config = ConfigDict(frozen=True)

    first_index: int
    second_index: int
    overlap_duration: int = Field(gt=0)  # ms

    def involves(self, index: int) -> bool:
        return index in (self.first_index, self.second_index)

    def other(self, index: int) -> int:
        """Return the declared index of the segment paired with ``index``."""
        return self.second_index if index == self.first_index else self.first_index
