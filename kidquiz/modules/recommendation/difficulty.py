"""Difficulty Calibrator - Maps aggregate performance to a difficulty tier."""

from kidquiz.shared.models import Difficulty, PerformanceTrend


class DifficultyCalibrator:
    """Chooses beginner, intermediate or advanced for the next quiz.

    Children with only a handful of attempted quizzes always start at
    beginner. After that the overall average decides the band and an
    improving trend bumps the child one tier up within it.
    """

    def __init__(
        self,
        warmup_quizzes: int = 3,
        high_score: float = 80.0,
        medium_score: float = 60.0,
    ) -> None:
        self._warmup_quizzes = warmup_quizzes
        self._high_score = high_score
        self._medium_score = medium_score

    def calibrate(
        self,
        average_score: float,
        trend: PerformanceTrend,
        total_quizzes_attempted: int,
    ) -> str:
        """Calibrate the difficulty.

        Args:
            average_score: Overall average percentage
            trend: Recent performance trend
            total_quizzes_attempted: Number of attempted quizzes

        Returns:
            Difficulty value ("beginner", "intermediate" or "advanced")
        """
        if total_quizzes_attempted <= self._warmup_quizzes:
            return Difficulty.BEGINNER.value

        improving = trend == PerformanceTrend.IMPROVING

        if average_score >= self._high_score:
            return (Difficulty.ADVANCED if improving else Difficulty.INTERMEDIATE).value

        if average_score >= self._medium_score:
            return (Difficulty.INTERMEDIATE if improving else Difficulty.BEGINNER).value

        # Low scorers stay at beginner whether or not they are declining
        if trend == PerformanceTrend.DECLINING:
            return Difficulty.BEGINNER.value
        return Difficulty.BEGINNER.value
