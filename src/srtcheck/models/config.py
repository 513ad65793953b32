"""Analysis configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalysisConfig(BaseModel):
    """Settings for an analysis run and its CLI rendering."""

    encoding: str = "utf-8"
    max_input_chars: int | None = Field(default=None, ge=1)
    fail_on_overlap: bool = True
    show_segments: bool = True
    report_inverted: bool = True
    text_preview_chars: int = Field(default=60, ge=10, le=500)
