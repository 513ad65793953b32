"""Timestamp and index line parsing.

Timestamps are ``hours:minutes:seconds,milliseconds`` with each component a
non-negative decimal integer of any width. Components are not range checked,
so ``0:75:00,000`` is simply 75 minutes.
"""

from __future__ import annotations

import re

_DIGITS = re.compile(r"[0-9]+")
_INDEX_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class TimestampError(ValueError):
    """A timestamp label that does not follow H:M:S,ms."""


class IndexParseError(ValueError):
    """An index line that does not begin with an integer."""


def _component(value: str, name: str, label: str) -> int:
    if not _DIGITS.fullmatch(value):
        raise TimestampError(f"Invalid {name} component {value!r} in timestamp {label!r}")
    try:
        return int(value)
    except ValueError as e:
        raise TimestampError(
            f"Too many digits in {name} component of timestamp {label[:40]!r}"
        ) from e


def parse_timestamp(label: str) -> int:
    """Convert a timestamp label to milliseconds.

    Raises TimestampError if the label is not three colon-separated
    components followed by a comma and a millisecond component.
    """
    text = label.strip()
    time_part, sep, ms_part = text.partition(",")
    if not sep:
        raise TimestampError(f"Missing ',' before milliseconds in timestamp {label!r}")

    parts = time_part.split(":")
    if len(parts) != 3:
        raise TimestampError(f"Expected H:M:S before ',' in timestamp {label!r}")

    hours = _component(parts[0], "hours", label)
    minutes = _component(parts[1], "minutes", label)
    seconds = _component(parts[2], "seconds", label)
    millis = _component(ms_part, "milliseconds", label)

    return (hours * 3600 + minutes * 60 + seconds) * 1000 + millis


def parse_index(line: str) -> int:
    """Parse the leading integer of an index line; trailing text is ignored."""
    m = _INDEX_PREFIX.match(line)
    if not m:
        raise IndexParseError(f"Index line does not start with an integer: {line!r}")
    try:
        return int(m.group(1))
    except ValueError as e:
        raise IndexParseError(f"Index is too long to parse: {line[:40]!r}") from e
