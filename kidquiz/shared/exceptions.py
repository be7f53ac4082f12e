"""Shared exceptions for the quiz recommendation engine.

This module defines a consistent exception hierarchy used across all modules
to standardize error handling and provide clear error semantics.
"""

from typing import Any


class KidQuizException(Exception):
    """Base exception for all application errors.

    All domain-specific exceptions should inherit from this class
    so callers can handle engine failures in one place.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for display or logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# ===================
# Validation Errors
# ===================

class ValidationError(KidQuizException):
    """Raised when input validation fails."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(
            f"Validation error for '{field}': {message}",
            {"field": field}
        )


class InvalidQuizPayloadError(ValidationError):
    """Raised when a quiz payload cannot be decoded into a record."""

    def __init__(self, message: str, quiz_id: str | None = None) -> None:
        super().__init__("quiz", message)
        if quiz_id:
            self.details["quiz_id"] = quiz_id


# ===================
# Integration Errors
# ===================

class ExternalServiceError(KidQuizException):
    """Raised when an external service call fails."""

    def __init__(self, service: str, message: str) -> None:
        super().__init__(
            f"External service error ({service}): {message}",
            {"service": service}
        )


class ContentGenerationError(ExternalServiceError):
    """Raised when the quiz content service fails.

    Covers invalid requests, network or server failures and malformed
    responses. Callers are not expected to distinguish between them.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("QuizContent", message)
        self.status_code = status_code
        if status_code is not None:
            self.details["status_code"] = status_code


# ===================
# Configuration Errors
# ===================

class ConfigurationError(KidQuizException):
    """Raised when there's a configuration problem."""

    def __init__(self, setting: str, message: str) -> None:
        super().__init__(
            f"Invalid configuration for '{setting}': {message}",
            {"setting": setting}
        )
