"""
Unit tests for data models.
"""

import pytest
from pydantic import ValidationError

from srtcheck.models.config import AnalysisConfig
from srtcheck.models.report import AnalysisReport
from srtcheck.models.segment import Overlap


class TestSegment:
    """Test Segment model"""

    def test_duration(self, make_segment):
        assert make_segment(1, 1000, 2500).duration == 1500

    def test_immutable(self, make_segment):
        seg = make_segment(1, 0, 1000)
        with pytest.raises(ValidationError):
            seg.start_time = 5


class TestOverlap:
    """Test Overlap model"""

    def test_duration_must_be_positive(self):
        with pytest.raises(ValidationError):
            Overlap(first_index=1, second_index=2, overlap_duration=0)

    def test_other(self):
        o = Overlap(first_index=3, second_index=4, overlap_duration=10)
        assert o.other(3) == 4
        assert o.other(4) == 3

    def test_involves(self):
        o = Overlap(first_index=3, second_index=4, overlap_duration=10)
        assert o.involves(3)
        assert not o.involves(5)


class TestAnalysisReport:
    """Test report status and counts"""

    def test_default_is_empty(self):
        report = AnalysisReport()
        assert report.status == "empty"
        assert report.segment_count == 0
        assert not report.has_overlaps

    def test_clean(self, make_segment):
        report = AnalysisReport(analyzed=True, segments=[make_segment(1, 0, 1000)])
        assert report.status == "clean"

    def test_overlaps(self, make_segment):
        report = AnalysisReport(
            analyzed=True,
            segments=[make_segment(1, 0, 2000), make_segment(2, 1000, 3000)],
            overlaps=[Overlap(first_index=1, second_index=2, overlap_duration=1000)],
        )
        assert report.status == "overlaps"
        assert report.overlap_count == 1


class TestAnalysisConfig:
    """Test configuration model"""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.encoding == "utf-8"
        assert config.max_input_chars is None
        assert config.fail_on_overlap is True

    def test_invalid_size_cap(self):
        with pytest.raises(ValidationError):
            AnalysisConfig(max_input_chars=0)

    def test_preview_bounds(self):
        with pytest.raises(ValidationError):
            AnalysisConfig(text_preview_chars=5)
