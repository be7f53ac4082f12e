"""Tests for trend and recent-improvement detection."""

import pytest

from kidquiz.modules.analytics.trends import ImprovementDetector, TrendDetector
from kidquiz.shared.models import PerformanceTrend


def _records(make_record, scores, question_count=20):
    return [make_record(score=s, question_count=question_count) for s in scores]


class TestTrendDetector:
    """Tests for TrendDetector."""

    @pytest.fixture
    def detector(self) -> TrendDetector:
        return TrendDetector()

    def test_insufficient_data(self, detector, make_record):
        """Test that fewer than three records give insufficient data."""
        assert detector.detect([]) == PerformanceTrend.INSUFFICIENT_DATA
        assert detector.detect(_records(make_record, [10, 20])) == PerformanceTrend.INSUFFICIENT_DATA

    def test_improving(self, detector, make_record):
        """Test 50, 50, 65 is improving."""
        records = _records(make_record, [10, 10, 13])  # 50%, 50%, 65%
        assert detector.detect(records) == PerformanceTrend.IMPROVING

    def test_declining(self, detector, make_record):
        """Test 80, 80, 65 is declining."""
        records = _records(make_record, [16, 16, 13])  # 80%, 80%, 65%
        assert detector.detect(records) == PerformanceTrend.DECLINING

    def test_stable(self, detector, make_record):
        """Test 60, 65, 68 is stable."""
        records = _records(make_record, [60, 65, 68], question_count=100)
        assert detector.detect(records) == PerformanceTrend.STABLE

    def test_boundary_is_stable(self, detector, make_record):
        """Test that a difference of exactly 10 points is stable."""
        records = _records(make_record, [50, 0, 60], question_count=100)
        assert detector.detect(records) == PerformanceTrend.STABLE

    def test_only_last_three_records_count(self, detector, make_record):
        """Test that older records are ignored."""
        records = _records(make_record, [100, 0, 50, 50, 70], question_count=100)
        assert detector.detect(records) == PerformanceTrend.IMPROVING

    def test_middle_record_ignored(self, detector, make_record):
        """Test that only the first and last of the window are compared."""
        records = _records(make_record, [50, 100, 52], question_count=100)
        assert detector.detect(records) == PerformanceTrend.STABLE


class TestImprovementDetector:
    """Tests for ImprovementDetector."""

    @pytest.fixture
    def detector(self) -> ImprovementDetector:
        return ImprovementDetector()

    def test_needs_two_records(self, detector, make_record):
        """Test that a single record never counts as improvement."""
        assert detector.detect([]) is False
        assert detector.detect(_records(make_record, [100], question_count=100)) is False

    def test_improvement(self, detector, make_record):
        """Test a jump of more than five points."""
        records = _records(make_record, [60, 66], question_count=100)
        assert detector.detect(records) is True

    def test_exactly_five_points_is_not_improvement(self, detector, make_record):
        """Test the strict threshold."""
        records = _records(make_record, [60, 65], question_count=100)
        assert detector.detect(records) is False

    def test_decline(self, detector, make_record):
        """Test a drop is not improvement."""
        records = _records(make_record, [90, 40], question_count=100)
        assert detector.detect(records) is False
