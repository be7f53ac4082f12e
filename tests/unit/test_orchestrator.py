"""Tests for the adaptive quiz orchestrator."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from kidquiz.modules.analytics.interface import ChildPerformanceAnalytics
from kidquiz.modules.analytics.service import PerformanceAnalyzer
from kidquiz.modules.quiz.interface import GeneratedQuiz, RecommendedQuizRequest
from kidquiz.modules.quiz.orchestrator import AdaptiveQuizOrchestrator, determine_question_count
from kidquiz.modules.recommendation.strategy import RecommendationStrategy
from kidquiz.shared.exceptions import ContentGenerationError
from kidquiz.shared.models import PerformanceTrend


class TestDetermineQuestionCount:
    """Tests for question count sizing."""

    @pytest.mark.parametrize(
        "age,expected",
        [(3, 5), (5, 5), (6, 8), (8, 8), (9, 10), (12, 10), (13, 12), (17, 12)],
    )
    def test_age_bands(self, age, expected):
        """Test the base count for each age band."""
        assert determine_question_count(age, "beginner") == expected

    def test_difficulty_bonus(self):
        """Test extra questions for harder quizzes."""
        assert determine_question_count(4, "beginner") == 5
        assert determine_question_count(7, "intermediate") == 10
        assert determine_question_count(10, "advanced") == 14

    def test_unknown_difficulty_has_no_bonus(self):
        """Test that an unrecognised difficulty adds nothing."""
        assert determine_question_count(10, "expert") == 10


def _analytics(subject: str, topic: str, difficulty: str) -> ChildPerformanceAnalytics:
    return ChildPerformanceAnalytics(
        child_id="",
        average_score=85.0,
        strong_subjects=[],
        weak_subjects=[],
        recommended_difficulty=difficulty,
        recommended_subject=subject,
        recommended_topic=topic,
        performance_trend=PerformanceTrend.IMPROVING,
        total_quizzes_taken=6,
        recent_improvement=True,
    )


class TestAdaptiveQuizOrchestrator:
    """Tests for AdaptiveQuizOrchestrator."""

    @pytest.fixture
    def provider(self) -> AsyncMock:
        provider = AsyncMock()
        provider.generate.return_value = GeneratedQuiz(record=MagicMock(id="quiz-abc"), questions=[])
        return provider

    def test_build_request_for_new_child(self, provider):
        """Test the starter quiz for an empty history."""
        orchestrator = AdaptiveQuizOrchestrator(provider=provider)

        request = orchestrator.build_request(7, [])

        assert request == RecommendedQuizRequest(
            subject="math", topic="counting", difficulty="beginner", question_count=8
        )

    def test_build_request_uses_analysis(self, provider):
        """Test that the request mirrors the analyzer's recommendation."""
        analyzer = MagicMock()
        analyzer.analyze.return_value = _analytics("science", "plants", "advanced")
        orchestrator = AdaptiveQuizOrchestrator(provider=provider, analyzer=analyzer)

        request = orchestrator.build_request(10, [])

        assert request.to_dict() == {
            "subject": "science",
            "topic": "plants",
            "difficulty": "advanced",
            "question_count": 14,
        }

    @pytest.mark.asyncio
    async def test_orchestrate_calls_provider(self, provider, sample_child_id):
        """Test that the provider receives the recommendation."""
        analyzer = MagicMock()
        analyzer.analyze.return_value = _analytics("english", "rhymes", "intermediate")
        orchestrator = AdaptiveQuizOrchestrator(provider=provider, analyzer=analyzer)

        quiz = await orchestrator.orchestrate(6, [], child_id=sample_child_id)

        provider.generate.assert_awaited_once_with(
            subject="english",
            difficulty="intermediate",
            topic="rhymes",
            question_count=10,
            child_id=sample_child_id,
        )
        assert quiz is provider.generate.return_value

    @pytest.mark.asyncio
    async def test_orchestrate_with_history(self, provider, scripted_rng, make_record):
        """Test the full path from history to provider call."""
        analyzer = PerformanceAnalyzer(strategy=RecommendationStrategy(rng=scripted_rng([0.0])))
        orchestrator = AdaptiveQuizOrchestrator(provider=provider, analyzer=analyzer)
        history = [
            make_record(subject="math", topic="addition", score=9),
            make_record(subject="science", topic="plants", score=3),
        ]

        await orchestrator.orchestrate(4, history, child_id="kid-1")

        kwargs = provider.generate.await_args.kwargs
        assert (kwargs["subject"], kwargs["topic"]) == ("science", "plants")
        assert kwargs["difficulty"] == "beginner"
        assert kwargs["question_count"] == 5

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self, provider):
        """Test that generation errors reach the caller unchanged."""
        error = ContentGenerationError("Quiz service error: 500", status_code=500)
        provider.generate.side_effect = error
        orchestrator = AdaptiveQuizOrchestrator(provider=provider)

        with pytest.raises(ContentGenerationError) as exc_info:
            await orchestrator.orchestrate(8, [])

        assert exc_info.value is error
