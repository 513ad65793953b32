"""Subtitle text parsing."""

from srtcheck.parsing.parser import parse, parse_document

__all__ = ["parse", "parse_document"]
