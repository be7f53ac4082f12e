"""Quiz Module - Adaptive quiz requests and the content-generation collaborator."""

from dataclasses import dataclass, field
from typing import Any, Protocol

from kidquiz.modules.analytics.interface import QuizRecord


@dataclass(frozen=True)
class RecommendedQuizRequest:
    """What the next quiz should look like."""

    subject: str
    topic: str
    difficulty: str
    question_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject": self.subject,
            "topic": self.topic,
            "difficulty": self.difficulty,
            "question_count": self.question_count,
        }


@dataclass
class QuizQuestion:
    """A multiple-choice question produced by the content service."""

    id: str
    question_text: str
    options: list[str]
    correct_answer_index: int
    explanation: str | None = None
    image_url: str | None = None
    type: str | None = None
    level: str | None = None
    user_answer_index: int | None = None


@dataclass
class GeneratedQuiz:
    """A quiz returned by the content service, with its questions."""

    record: QuizRecord
    questions: list[QuizQuestion] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.record.id


class QuizContentProvider(Protocol):
    """Interface for the external quiz content service.

    Turns a recommendation into actual question content.
    """

    async def generate(
        self,
        subject: str,
        difficulty: str,
        topic: str,
        question_count: int,
        child_id: str,
    ) -> GeneratedQuiz:
        """Generate a quiz for a child.

        Args:
            subject: Subject of the quiz
            difficulty: Difficulty tier
            topic: Topic within the subject
            question_count: Number of questions to generate
            child_id: Child the quiz is for

        Returns:
            GeneratedQuiz

        Raises:
            ContentGenerationError: On any failure
        """
        ...
