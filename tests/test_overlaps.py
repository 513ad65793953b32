"""
Unit tests for overlap detection.
"""

from srtcheck.detection.overlaps import (
    detect_overlaps,
    find_inverted_segments,
    is_overlapping,
    overlaps_for,
)
from srtcheck.parsing.parser import parse


class TestDetectOverlaps:
    """Test the adjacent-pair overlap scan"""

    def test_empty(self):
        assert detect_overlaps([]) == []

    def test_single_segment(self, make_segment):
        assert detect_overlaps([make_segment(1, 0, 1000)]) == []

    def test_no_overlap_baseline(self, make_segment):
        segments = [
            make_segment(1, 0, 1000),
            make_segment(2, 1500, 2000),
            make_segment(3, 2500, 4000),
        ]
        assert detect_overlaps(segments) == []

    def test_overlap_duration(self, make_segment):
        overlaps = detect_overlaps([
            make_segment(1, 1000, 9839),
            make_segment(2, 9519, 11000),
        ])
        assert len(overlaps) == 1
        assert overlaps[0].first_index == 1
        assert overlaps[0].second_index == 2
        assert overlaps[0].overlap_duration == 320

    def test_shared_boundary_is_not_overlap(self, make_segment):
        segments = [make_segment(4, 9839, 11759), make_segment(5, 11759, 14255)]
        assert detect_overlaps(segments) == []

    def test_only_adjacent_pairs_compared(self, make_segment):
        """Segment 1 also runs past segment 3, but only neighbours are compared"""
        segments = [
            make_segment(1, 0, 10_000),
            make_segment(2, 1000, 2000),
            make_segment(3, 3000, 4000),
        ]
        overlaps = detect_overlaps(segments)
        assert [(o.first_index, o.second_index) for o in overlaps] == [(1, 2)]
        assert overlaps[0].overlap_duration == 9000

    def test_uses_declared_index(self, make_segment):
        overlaps = detect_overlaps([
            make_segment(40, 0, 2000),
            make_segment(7, 1000, 3000),
        ])
        assert (overlaps[0].first_index, overlaps[0].second_index) == (40, 7)

    def test_scan_order(self, make_segment):
        overlaps = detect_overlaps([
            make_segment(1, 0, 1500),
            make_segment(2, 1000, 2500),
            make_segment(3, 2000, 3000),
        ])
        assert [o.first_index for o in overlaps] == [1, 2]
        assert [o.overlap_duration for o in overlaps] == [500, 500]

    def test_input_not_mutated(self, make_segment):
        segments = [make_segment(1, 0, 2000), make_segment(2, 1000, 3000)]
        before = list(segments)
        detect_overlaps(segments)
        assert segments == before

    def test_sample_document_is_clean(self, sample_text):
        segments = parse(sample_text)
        assert len(segments) == 7
        assert detect_overlaps(segments) == []

    def test_parsed_overlap(self, overlapping_text):
        overlaps = detect_overlaps(parse(overlapping_text))
        assert len(overlaps) == 1
        assert overlaps[0].overlap_duration == 320


class TestOverlapLookup:
    """Test per-segment overlap lookups"""

    def test_overlaps_for(self, make_segment):
        overlaps = detect_overlaps([
            make_segment(1, 0, 1500),
            make_segment(2, 1000, 2500),
            make_segment(3, 2000, 3000),
        ])
        assert len(overlaps_for(overlaps, 2)) == 2
        assert len(overlaps_for(overlaps, 3)) == 1
        assert overlaps_for(overlaps, 9) == []

    def test_is_overlapping(self, make_segment):
        overlaps = detect_overlaps([
            make_segment(1, 0, 1500),
            make_segment(2, 1000, 2500),
            make_segment(3, 3000, 4000),
        ])
        assert is_overlapping(overlaps, 1)
        assert is_overlapping(overlaps, 2)
        assert not is_overlapping(overlaps, 3)


class TestInvertedSegments:
    """Test reporting of end-before-start segments"""

    def test_find_inverted(self, make_segment):
        segments = [make_segment(1, 0, 1000), make_segment(2, 3000, 2000)]
        assert [s.index for s in find_inverted_segments(segments)] == [2]

    def test_zero_length_not_inverted(self, make_segment):
        assert find_inverted_segments([make_segment(1, 1000, 1000)]) == []
