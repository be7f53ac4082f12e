"""Test configuration and fixtures."""

import sys
from pathlib import Path
from typing import Callable, Sequence

# Ensure the package is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from kidquiz.modules.analytics.interface import QuizRecord
from kidquiz.shared.config import get_settings


class ScriptedRandom:
    """Random source that replays fixed draws.

    ``random()`` returns the scripted values in order; ``choice()`` returns
    the element at ``choice_index``.
    """

    def __init__(self, values: Sequence[float], choice_index: int = 0) -> None:
        self._values = list(values)
        self.choice_index = choice_index
        self.random_calls = 0
        self.choices: list[list] = []

    def random(self) -> float:
        value = self._values[self.random_calls]
        self.random_calls += 1
        return value

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[self.choice_index]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset them around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def make_record() -> Callable[..., QuizRecord]:
    """Factory for quiz records.

    ``score`` is the number of correct answers out of ``question_count``
    (10 by default, so score 7 is 70%).
    """
    counter = {"value": 0}

    def factory(
        subject: str = "math",
        topic: str = "addition",
        score: int = 5,
        question_count: int = 10,
        answered: int | None = None,
        difficulty: str = "beginner",
    ) -> QuizRecord:
        counter["value"] += 1
        return QuizRecord(
            id=f"quiz-{counter['value']}",
            subject=subject,
            difficulty=difficulty,
            topic=topic,
            question_count=question_count,
            score=score,
            answered=question_count if answered is None else answered,
        )

    return factory


@pytest.fixture
def sample_child_id() -> str:
    """Sample child id."""
    return "kid-123"


@pytest.fixture
def quiz_payload() -> dict:
    """A quiz as returned by the content service."""
    return {
        "_id": "quiz-abc",
        "title": "Beginner Math: Plus and Minus",
        "questions": [
            {
                "_id": "q1",
                "questionText": "What is 2 + 2?",
                "options": ["3", "4", "5", "6"],
                "correctAnswerIndex": 1,
                "explanation": "Two plus two is four.",
            },
            {
                "_id": "q2",
                "questionText": "What is 5 - 3?",
                "options": ["1", "2", "3", "4"],
                "correctAnswerIndex": 1,
                "userAnswerIndex": 1,
            },
        ],
        "type": "quiz",
        "score": 1,
        "answered": 2,
        "isAnswered": True,
        "createdAt": "2025-11-21T10:00:00Z",
    }
