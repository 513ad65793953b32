"""Pydantic data models for srtcheck."""

from srtcheck.models.config import AnalysisConfig
from srtcheck.models.report import AnalysisReport, EntryError, ParseResult
from srtcheck.models.segment import Overlap, Segment

__all__ = [
    "AnalysisConfig",
    "AnalysisReport",
    "EntryError",
    "Overlap",
    "ParseResult",
    "Segment",
]
