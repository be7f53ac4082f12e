"""Performance Analyzer - Aggregates quiz history into analytics.

This service provides:
- Overall and per-subject/per-topic average scores
- Strongest and weakest subjects
- Trend and recent-improvement detection
- The next recommended subject, topic and difficulty
"""

import logging
from collections import defaultdict
from typing import Sequence

from kidquiz.modules.analytics.interface import (
    ChildPerformanceAnalytics,
    IPerformanceAnalyzer,
    QuizRecord,
    SubjectPerformance,
    TopicPerformance,
)
from kidquiz.modules.analytics.trends import ImprovementDetector, TrendDetector
from kidquiz.modules.recommendation.difficulty import DifficultyCalibrator
from kidquiz.modules.recommendation.strategy import RecommendationStrategy
from kidquiz.shared.models import Difficulty, PerformanceTrend, Subject

logger = logging.getLogger(__name__)

# Recommendation for a child with no history at all
STARTER_SUBJECT = Subject.MATH.value
STARTER_TOPIC = "counting"

# Number of entries kept in the strong/weak subject lists
HIGHLIGHT_COUNT = 2


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class PerformanceAnalyzer(IPerformanceAnalyzer):
    """Service for turning a child's quiz history into analytics.

    Stateless: every call recomputes everything from the given records.
    The random source lives in the injected strategy.
    """

    def __init__(
        self,
        strategy: RecommendationStrategy | None = None,
        calibrator: DifficultyCalibrator | None = None,
        trend_detector: TrendDetector | None = None,
        improvement_detector: ImprovementDetector | None = None,
    ) -> None:
        self._strategy = strategy or RecommendationStrategy()
        self._calibrator = calibrator or DifficultyCalibrator()
        self._trend_detector = trend_detector or TrendDetector()
        self._improvement_detector = improvement_detector or ImprovementDetector()

    def analyze(self, records: Sequence[QuizRecord]) -> ChildPerformanceAnalytics:
        """Analyze a child's quiz history.

        Only attempted quizzes (answered > 0) feed the averages, trend and
        recommendation; unattempted ones still count towards the total.

        Args:
            records: Quiz records, oldest first

        Returns:
            ChildPerformanceAnalytics with a blank child_id
        """
        if not records:
            return self.default_analytics()

        attempted = [record for record in records if record.attempted]
        average_score = _mean([record.percentage for record in attempted])

        # Ascending by average; weakest first
        subjects = self.analyze_subjects(attempted)
        by_performance = list(reversed(subjects))
        strong_subjects = by_performance[:HIGHLIGHT_COUNT]
        weak_subjects = list(reversed(by_performance[-HIGHLIGHT_COUNT:]))

        trend = self._trend_detector.detect(attempted)
        recent_improvement = self._improvement_detector.detect(attempted)

        subject, topic = self._strategy.recommend(
            weak_subjects=weak_subjects,
            strong_subjects=strong_subjects,
            all_subjects=subjects,
        )
        difficulty = self._calibrator.calibrate(
            average_score=average_score,
            trend=trend,
            total_quizzes_attempted=len(attempted),
        )

        logger.info(
            f"Analyzed {len(records)} quizzes: average {average_score:.1f}%, "
            f"recommended {subject} - {topic} ({difficulty}), trend {trend.value}"
        )

        return ChildPerformanceAnalytics(
            child_id="",
            average_score=average_score,
            strong_subjects=strong_subjects,
            weak_subjects=weak_subjects,
            recommended_difficulty=difficulty,
            recommended_subject=subject,
            recommended_topic=topic,
            performance_trend=trend,
            total_quizzes_taken=len(records),
            recent_improvement=recent_improvement,
        )

    def analyze_subjects(self, attempted: Sequence[QuizRecord]) -> list[SubjectPerformance]:
        """Aggregate attempted quizzes per subject.

        Args:
            attempted: Attempted quiz records, oldest first

        Returns:
            SubjectPerformance list sorted ascending by average score,
            ties broken by subject name
        """
        grouped: dict[str, list[QuizRecord]] = defaultdict(list)
        for record in attempted:
            grouped[record.subject].append(record)

        performances = []
        for subject, subject_records in grouped.items():
            last_record = subject_records[-1]
            performances.append(
                SubjectPerformance(
                    subject=subject,
                    average_score=_mean([r.percentage for r in subject_records]),
                    quizzes_taken=len(subject_records),
                    last_score=int(last_record.percentage),
                    topics=self.analyze_topics(subject_records),
                )
            )

        performances.sort(key=lambda p: (p.average_score, p.subject))
        return performances

    def analyze_topics(self, subject_records: Sequence[QuizRecord]) -> list[TopicPerformance]:
        """Aggregate one subject's quizzes per topic, weakest first."""
        scores: dict[str, list[float]] = defaultdict(list)
        for record in subject_records:
            scores[record.topic].append(record.percentage)

        topics = [
            TopicPerformance(
                topic=topic,
                average_score=_mean(topic_scores),
                attempts_count=len(topic_scores),
            )
            for topic, topic_scores in scores.items()
        ]
        topics.sort(key=lambda t: (t.average_score, t.topic))
        return topics

    @staticmethod
    def default_analytics() -> ChildPerformanceAnalytics:
        """Analytics for a child who has not taken any quiz yet."""
        return ChildPerformanceAnalytics(
            child_id="",
            average_score=0.0,
            strong_subjects=[],
            weak_subjects=[],
            recommended_difficulty=Difficulty.BEGINNER.value,
            recommended_subject=STARTER_SUBJECT,
            recommended_topic=STARTER_TOPIC,
            performance_trend=PerformanceTrend.INSUFFICIENT_DATA,
            total_quizzes_taken=0,
            recent_improvement=False,
        )
