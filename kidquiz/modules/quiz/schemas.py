"""Wire schemas for quiz payloads returned by the content service."""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from kidquiz.modules.analytics.interface import QuizRecord
from kidquiz.modules.analytics.normalizer import normalize_title
from kidquiz.modules.quiz.interface import GeneratedQuiz, QuizQuestion
from kidquiz.shared.exceptions import InvalidQuizPayloadError
from kidquiz.shared.models import BaseSchema


class QuizQuestionPayload(BaseSchema):
    """Question as serialized by the content service."""

    id: str = Field(..., alias="_id")
    question_text: str = Field(..., alias="questionText")
    options: list[str] = Field(default_factory=list)
    correct_answer_index: int = Field(..., alias="correctAnswerIndex")
    explanation: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    type: str | None = None
    level: str | None = None
    user_answer_index: int | None = Field(default=None, alias="userAnswerIndex")

    def to_question(self) -> QuizQuestion:
        return QuizQuestion(
            id=self.id,
            question_text=self.question_text,
            options=list(self.options),
            correct_answer_index=self.correct_answer_index,
            explanation=self.explanation,
            image_url=self.image_url,
            type=self.type,
            level=self.level,
            user_answer_index=self.user_answer_index,
        )


class QuizPayload(BaseSchema):
    """Quiz as serialized by the content service.

    Older quizzes have no subject/difficulty/topic fields; those are then
    recovered from the title.
    """

    id: str = Field(..., alias="_id")
    title: str = "Quiz"
    subject: str | None = None
    difficulty: str | None = None
    topic: str | None = None
    questions: list[QuizQuestionPayload]
    type: str = "quiz"
    score: int = Field(default=0, ge=0)
    answered: int = Field(default=0, ge=0)
    is_answered: bool = Field(default=False, alias="isAnswered")
    created_at: datetime | None = Field(default=None, alias="createdAt")

    @model_validator(mode="after")
    def check_counts(self) -> "QuizPayload":
        """Score and answered count cannot exceed the number of questions."""
        question_count = len(self.questions)
        if self.score > question_count:
            raise ValueError(f"score {self.score} exceeds question count {question_count}")
        if self.answered > question_count:
            raise ValueError(f"answered {self.answered} exceeds question count {question_count}")
        return self

    def to_record(self) -> QuizRecord:
        """Convert to a QuizRecord, filling missing metadata from the title."""
        inferred = normalize_title(self.title)
        return QuizRecord(
            id=self.id,
            subject=self.subject or inferred.subject,
            difficulty=self.difficulty or inferred.difficulty,
            topic=self.topic or inferred.topic,
            question_count=len(self.questions),
            score=self.score,
            answered=self.answered,
            created_at=self.created_at,
            title=self.title,
        )

    def to_generated_quiz(self) -> GeneratedQuiz:
        return GeneratedQuiz(
            record=self.to_record(),
            questions=[question.to_question() for question in self.questions],
        )


def parse_quiz(data: Any) -> QuizPayload:
    """Validate a single quiz payload.

    Raises:
        InvalidQuizPayloadError: If the payload does not match the schema
    """
    try:
        return QuizPayload.model_validate(data)
    except PydanticValidationError as e:
        quiz_id = data.get("_id") if isinstance(data, dict) else None
        raise InvalidQuizPayloadError(_summarize(e), quiz_id=quiz_id) from e


def parse_history(data: Any) -> list[QuizRecord]:
    """Decode a list of quiz payloads into records, keeping their order.

    Raises:
        InvalidQuizPayloadError: If the data is not a list or any entry is invalid
    """
    if not isinstance(data, list):
        raise InvalidQuizPayloadError(f"expected a list of quizzes, got {type(data).__name__}")
    return [parse_quiz(item).to_record() for item in data]


def _summarize(error: PydanticValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "quiz"
    return f"{location}: {first['msg']}"
