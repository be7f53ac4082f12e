"""CLI UI Components - Rich displays for analytics and quizzes."""

from kidquiz.cli.ui.display import (
    display_analytics,
    display_generated_quiz,
    display_request,
)

__all__ = [
    "display_analytics",
    "display_generated_quiz",
    "display_request",
]
