"""Shared fixtures for srtcheck tests."""

import pytest

from srtcheck.analysis.sample import SAMPLE_SRT
from srtcheck.models.segment import Segment


@pytest.fixture
def sample_text():
    return SAMPLE_SRT


@pytest.fixture
def overlapping_text():
    return (
        "1\n"
        "00:00:01,000 --> 00:00:09,839\n"
        "First line\n"
        "\n"
        "2\n"
        "00:00:09,519 --> 00:00:11,000\n"
        "Second line\n"
    )


@pytest.fixture
def make_segment():
    def _make(index, start, end, text="text"):
        return Segment(
            index=index,
            start_time=start,
            end_time=end,
            text=text,
            start_time_label=str(start),
            end_time_label=str(end),
        )
    return _make
