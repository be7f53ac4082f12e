"""Recommendation Module - Next subject/topic selection and difficulty calibration."""

from kidquiz.modules.recommendation.difficulty import DifficultyCalibrator
from kidquiz.modules.recommendation.interface import RandomSource, StrategyDecision
from kidquiz.modules.recommendation.strategy import RecommendationStrategy

__all__ = [
    # Interface types
    "RandomSource",
    "StrategyDecision",
    # Implementations
    "RecommendationStrategy",
    "DifficultyCalibrator",
]
