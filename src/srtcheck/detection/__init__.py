"""Overlap detection over parsed segments."""

from srtcheck.detection.overlaps import detect_overlaps

__all__ = ["detect_overlaps"]
