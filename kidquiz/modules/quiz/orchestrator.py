"""Adaptive Quiz Orchestrator - Turns quiz history into the next quiz.

Runs the performance analysis, sizes the quiz for the child's age and the
recommended difficulty, and asks the content provider to generate it.
"""

import logging
from typing import Sequence

from kidquiz.modules.analytics.interface import QuizRecord
from kidquiz.modules.analytics.service import PerformanceAnalyzer
from kidquiz.modules.quiz.interface import (
    GeneratedQuiz,
    QuizContentProvider,
    RecommendedQuizRequest,
)
from kidquiz.shared.models import Difficulty

logger = logging.getLogger(__name__)

# Extra questions on top of the age-based count
DIFFICULTY_BONUS = {
    Difficulty.BEGINNER.value: 0,
    Difficulty.INTERMEDIATE.value: 2,
    Difficulty.ADVANCED.value: 4,
}


def determine_question_count(age: int, difficulty: str) -> int:
    """Number of questions for a child of the given age at a difficulty."""
    if age <= 5:
        base_count = 5
    elif age <= 8:
        base_count = 8
    elif age <= 12:
        base_count = 10
    else:
        base_count = 12
    return base_count + DIFFICULTY_BONUS.get(difficulty, 0)


class AdaptiveQuizOrchestrator:
    """Composes analysis and content generation into one adaptive quiz."""

    def __init__(
        self,
        provider: QuizContentProvider,
        analyzer: PerformanceAnalyzer | None = None,
    ) -> None:
        self._provider = provider
        self._analyzer = analyzer or PerformanceAnalyzer()

    def build_request(
        self,
        child_age: int,
        history: Sequence[QuizRecord],
    ) -> RecommendedQuizRequest:
        """Work out the next quiz without generating it.

        Args:
            child_age: Child's age in years
            history: Quiz records, oldest first

        Returns:
            RecommendedQuizRequest
        """
        analytics = self._analyzer.analyze(history)
        return RecommendedQuizRequest(
            subject=analytics.recommended_subject,
            topic=analytics.recommended_topic,
            difficulty=analytics.recommended_difficulty,
            question_count=determine_question_count(child_age, analytics.recommended_difficulty),
        )

    async def orchestrate(
        self,
        child_age: int,
        history: Sequence[QuizRecord],
        child_id: str = "",
    ) -> GeneratedQuiz:
        """Generate the next adaptive quiz for a child.

        Args:
            child_age: Child's age in years
            history: Quiz records, oldest first
            child_id: Child the quiz is for

        Returns:
            The provider's GeneratedQuiz, unchanged

        Raises:
            ContentGenerationError: Propagated from the provider
        """
        logger.info(f"Generating adaptive quiz for child {child_id or '-'} (age {child_age}, {len(history)} quizzes)")

        request = self.build_request(child_age, history)
        quiz = await self._provider.generate(
            subject=request.subject,
            difficulty=request.difficulty,
            topic=request.topic,
            question_count=request.question_count,
            child_id=child_id,
        )

        logger.info(
            f"Adaptive quiz generated: {request.subject} - {request.topic} "
            f"({request.difficulty}, {request.question_count} questions)"
        )
        return quiz
