"""Analytics Module - Quiz history aggregation and performance analytics.

Usage:
    from kidquiz.modules.analytics import PerformanceAnalyzer
    analytics = PerformanceAnalyzer().analyze(records)
"""

from kidquiz.modules.analytics.interface import (
    ChildPerformanceAnalytics,
    IPerformanceAnalyzer,
    QuizRecord,
    SubjectPerformance,
    TopicPerformance,
)
from kidquiz.modules.analytics.normalizer import TitleMetadata, normalize_title
from kidquiz.modules.analytics.trends import ImprovementDetector, TrendDetector
from kidquiz.modules.analytics.service import PerformanceAnalyzer

__all__ = [
    # Interface types
    "ChildPerformanceAnalytics",
    "IPerformanceAnalyzer",
    "QuizRecord",
    "SubjectPerformance",
    "TopicPerformance",
    # Title normalization
    "TitleMetadata",
    "normalize_title",
    # Implementations
    "ImprovementDetector",
    "TrendDetector",
    "PerformanceAnalyzer",
]
