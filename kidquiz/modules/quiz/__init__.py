"""Quiz Module - Adaptive quiz requests and content generation.

Usage:
    from kidquiz.modules.quiz import AdaptiveQuizOrchestrator, HttpQuizContentProvider
    provider = HttpQuizContentProvider.from_settings(get_settings())
    quiz = await AdaptiveQuizOrchestrator(provider).orchestrate(8, history, child_id)
"""

from kidquiz.modules.quiz.interface import (
    GeneratedQuiz,
    QuizContentProvider,
    QuizQuestion,
    RecommendedQuizRequest,
)
from kidquiz.modules.quiz.schemas import QuizPayload, QuizQuestionPayload, parse_history, parse_quiz
from kidquiz.modules.quiz.client import HttpQuizContentProvider
from kidquiz.modules.quiz.orchestrator import AdaptiveQuizOrchestrator, determine_question_count

__all__ = [
    # Interface types
    "GeneratedQuiz",
    "QuizContentProvider",
    "QuizQuestion",
    "RecommendedQuizRequest",
    # Wire schemas
    "QuizPayload",
    "QuizQuestionPayload",
    "parse_history",
    "parse_quiz",
    # Implementations
    "HttpQuizContentProvider",
    "AdaptiveQuizOrchestrator",
    "determine_question_count",
]
