"""Analysis runs: parse, detect, report."""

from srtcheck.analysis.module import InputTooLargeError, run_analysis

__all__ = ["InputTooLargeError", "run_analysis"]
