"""Shared utilities and common code."""

from kidquiz.shared.config import Settings, get_settings
from kidquiz.shared.exceptions import (
    ConfigurationError,
    ContentGenerationError,
    ExternalServiceError,
    InvalidQuizPayloadError,
    KidQuizException,
    ValidationError,
)
from kidquiz.shared.logging import setup_logging
from kidquiz.shared.models import (
    BaseSchema,
    Difficulty,
    PerformanceTrend,
    StrategyType,
    Subject,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "setup_logging",
    # Exceptions
    "KidQuizException",
    "ValidationError",
    "InvalidQuizPayloadError",
    "ExternalServiceError",
    "ContentGenerationError",
    "ConfigurationError",
    # Models
    "BaseSchema",
    # Enums
    "Subject",
    "Difficulty",
    "PerformanceTrend",
    "StrategyType",
]
