"""Base models and common types used across modules."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# Common enums and types


class Subject(str, Enum):
    """Subjects known to the recommendation policy.

    Declaration order is the matching priority used when a subject has to be
    inferred from a quiz title.
    """

    MATH = "math"
    SCIENCE = "science"
    ENGLISH = "english"
    HISTORY = "history"
    GEOGRAPHY = "geography"


class Difficulty(str, Enum):
    """Quiz difficulty tiers, in matching priority order."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class PerformanceTrend(str, Enum):
    """Direction of recent score movement."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
    INSUFFICIENT_DATA = "insufficient_data"


class StrategyType(str, Enum):
    """Recommendation policy that produced a subject/topic pick."""

    WEAK_FOCUS = "weak_focus"
    STRONG_REINFORCE = "strong_reinforce"
    VARIETY = "variety"
    FALLBACK = "fallback"
