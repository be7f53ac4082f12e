"""Trend and improvement detection over recent attempted quizzes."""

from typing import Sequence

from kidquiz.modules.analytics.interface import QuizRecord
from kidquiz.shared.models import PerformanceTrend


class TrendDetector:
    """Classifies score movement across the last few attempted quizzes.

    Compares the oldest and newest of the last ``window`` records; a swing
    larger than ``threshold`` percentage points in either direction counts
    as a trend.
    """

    def __init__(self, window: int = 3, threshold: float = 10.0) -> None:
        self._window = window
        self._threshold = threshold

    def detect(self, attempted: Sequence[QuizRecord]) -> PerformanceTrend:
        """Detect the performance trend.

        Args:
            attempted: Attempted quiz records, oldest first

        Returns:
            PerformanceTrend
        """
        if len(attempted) < self._window:
            return PerformanceTrend.INSUFFICIENT_DATA

        recent = attempted[-self._window:]
        difference = recent[-1].percentage - recent[0].percentage

        if difference > self._threshold:
            return PerformanceTrend.IMPROVING
        if difference < -self._threshold:
            return PerformanceTrend.DECLINING
        return PerformanceTrend.STABLE


class ImprovementDetector:
    """Flags an uptick between the two most recent attempted quizzes."""

    def __init__(self, margin: float = 5.0) -> None:
        self._margin = margin

    def detect(self, attempted: Sequence[QuizRecord]) -> bool:
        if len(attempted) < 2:
            return False
        previous, latest = attempted[-2], attempted[-1]
        return latest.percentage > previous.percentage + self._margin
