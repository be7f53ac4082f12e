"""Analytics Module - Quiz history aggregation and performance analytics."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol, Sequence

from kidquiz.shared.models import PerformanceTrend


@dataclass(frozen=True)
class QuizRecord:
    """A completed or pending quiz as seen by the engine.

    Records are owned by the external quiz store and consumed read-only.
    Sequences of records are assumed to be in chronological order.
    """

    id: str
    subject: str
    difficulty: str
    topic: str
    question_count: int
    score: int  # Number of correct answers
    answered: int  # Number of answered questions
    created_at: datetime | None = None
    title: str | None = None

    @property
    def attempted(self) -> bool:
        """Whether the child answered at least one question."""
        return self.answered > 0

    @property
    def percentage(self) -> float:
        """Score as a percentage of the question count (0 for empty quizzes)."""
        if self.question_count <= 0:
            return 0.0
        return self.score / self.question_count * 100.0


@dataclass
class TopicPerformance:
    """Aggregated results for one topic within a subject."""

    topic: str
    average_score: float
    attempts_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "topic": self.topic,
            "average_score": round(self.average_score, 2),
            "attempts_count": self.attempts_count,
        }


@dataclass
class SubjectPerformance:
    """Aggregated results for one subject."""

    subject: str
    average_score: float
    quizzes_taken: int
    last_score: int | None  # Percentage of the most recent quiz, truncated
    topics: list[TopicPerformance] = field(default_factory=list)  # Weakest first

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject": self.subject,
            "average_score": round(self.average_score, 2),
            "quizzes_taken": self.quizzes_taken,
            "last_score": self.last_score,
            "topics": [topic.to_dict() for topic in self.topics],
        }


@dataclass
class ChildPerformanceAnalytics:
    """Snapshot of a child's performance and the next recommendation."""

    child_id: str
    average_score: float
    strong_subjects: list[SubjectPerformance]
    weak_subjects: list[SubjectPerformance]
    recommended_difficulty: str
    recommended_subject: str
    recommended_topic: str
    performance_trend: PerformanceTrend
    total_quizzes_taken: int
    recent_improvement: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for display or JSON output."""
        return {
            "child_id": self.child_id,
            "average_score": round(self.average_score, 2),
            "strong_subjects": [s.to_dict() for s in self.strong_subjects],
            "weak_subjects": [s.to_dict() for s in self.weak_subjects],
            "recommended_difficulty": self.recommended_difficulty,
            "recommended_subject": self.recommended_subject,
            "recommended_topic": self.recommended_topic,
            "performance_trend": self.performance_trend.value,
            "total_quizzes_taken": self.total_quizzes_taken,
            "recent_improvement": self.recent_improvement,
        }


class IPerformanceAnalyzer(Protocol):
    """Interface for the performance analyzer.

    Turns an ordered quiz history into analytics and a recommendation.
    """

    def analyze(self, records: Sequence[QuizRecord]) -> ChildPerformanceAnalytics:
        """Analyze a child's quiz history.

        Args:
            records: Quiz records, oldest first

        Returns:
            ChildPerformanceAnalytics with a blank child_id
        """
        ...
