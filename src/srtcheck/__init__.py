"""srtcheck — subtitle timing overlap checker."""

__version__ = "0.1.0"
